"""
Provider lookup and endpoint/credential resolution.

The set of built-in providers is closed; anything unrecognized is routed to
the OpenAI base URL.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from .types import ChatRequest


DEFAULT_PROVIDER = "openai"
CHAT_COMPLETIONS_PATH = "/chat/completions"

PROVIDER_BASE_URLS: Dict[str, str] = {
    "openai": "https://api.openai.com/v1",
    "moonshot": "https://api.moonshot.cn/v1",
    "kimi": "https://api.moonshot.cn/v1",
}


def _present(value: Optional[str]) -> bool:
    return value is not None and value != ""


def base_url_for(provider: Optional[str]) -> str:
    key = (provider or "").strip().lower()
    return PROVIDER_BASE_URLS.get(key, PROVIDER_BASE_URLS[DEFAULT_PROVIDER])


def resolve_endpoint(request: ChatRequest) -> str:
    # explicit endpoint > base_url > provider table
    if _present(request.endpoint):
        return request.endpoint
    base = request.base_url if _present(request.base_url) else base_url_for(request.provider)
    return base.rstrip("/") + CHAT_COMPLETIONS_PATH


def resolve_credential(request: ChatRequest, default_credential: str) -> str:
    if _present(request.api_key):
        return request.api_key
    return default_credential


def resolve(request: ChatRequest, default_credential: str) -> Tuple[str, str]:
    """Return the ``(endpoint, credential)`` pair a request is sent with."""
    return resolve_endpoint(request), resolve_credential(request, default_credential)
