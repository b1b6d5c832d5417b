from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union


MessageLike = Union["ChatMessage", Mapping[str, Any]]


def _pick(data: Mapping[str, Any], *keys: str) -> Any:
    """Return the first value present under any of ``keys``."""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return None


@dataclass
class ChatMessage:
    role: str
    content: Any

    @classmethod
    def coerce(cls, message: MessageLike) -> "ChatMessage":
        if isinstance(message, ChatMessage):
            return message
        return cls(role=message.get("role"), content=message.get("content"))

    def to_dict(self) -> Dict[str, Any]:
        return {"role": self.role, "content": self.content}


@dataclass
class AiProfile:
    """
    A saved provider profile as the UI stores it.

    ``api_key`` is usually left empty so the process-wide default credential
    is used instead.
    """
    id: int
    name: str
    provider: str = "openai"
    model: str = ""
    endpoint: Optional[str] = None
    api_key: Optional[str] = None
    base_url: Optional[str] = None
    temperature: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AiProfile":
        return cls(
            id=int(data.get("id", 0)),
            name=str(data.get("name", "")),
            provider=str(data.get("provider") or "openai"),
            model=str(data.get("model") or ""),
            endpoint=_pick(data, "endpoint"),
            api_key=_pick(data, "api_key", "apiKey"),
            base_url=_pick(data, "base_url", "baseURL", "baseUrl"),
            temperature=_pick(data, "temperature"),
        )


@dataclass
class ChatRequest:
    messages: List[ChatMessage] = field(default_factory=list)
    model: Optional[str] = None
    temperature: Optional[float] = None
    stream: Optional[bool] = None
    provider: Optional[str] = None
    endpoint: Optional[str] = None
    api_key: Optional[str] = None
    base_url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ChatRequest":
        """
        Build a request from the loosely-typed mapping the UI sends.

        Accepts snake_case keys as well as the profile's camelCase aliases
        (``apiKey``, ``baseURL``/``baseUrl``).
        """
        messages = data.get("messages") or []
        return cls(
            messages=[ChatMessage.coerce(m) for m in messages],
            model=_pick(data, "model"),
            temperature=_pick(data, "temperature"),
            stream=_pick(data, "stream"),
            provider=_pick(data, "provider"),
            endpoint=_pick(data, "endpoint"),
            api_key=_pick(data, "api_key", "apiKey"),
            base_url=_pick(data, "base_url", "baseURL", "baseUrl"),
        )

    @classmethod
    def from_profile(
        cls,
        profile: AiProfile,
        messages: Iterable[MessageLike],
        stream: Optional[bool] = None,
    ) -> "ChatRequest":
        return cls(
            messages=[ChatMessage.coerce(m) for m in messages],
            model=profile.model or None,
            temperature=profile.temperature,
            stream=stream,
            provider=profile.provider,
            endpoint=profile.endpoint,
            api_key=profile.api_key,
            base_url=profile.base_url,
        )


@dataclass
class ResolvedCall:
    endpoint: str
    credential: str
    body: Dict[str, Any]


@dataclass
class ChatResult:
    content: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {"content": self.content}
