from __future__ import annotations

from typing import Any, Dict

from .types import ChatRequest


DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_TEMPERATURE = 0.7


def build_body(request: ChatRequest) -> Dict[str, Any]:
    """Map a request onto the OpenAI-compatible chat-completion body."""
    return {
        "model": request.model if request.model is not None else DEFAULT_MODEL,
        "messages": [m.to_dict() for m in request.messages],
        "temperature": request.temperature if request.temperature is not None else DEFAULT_TEMPERATURE,
        "stream": request.stream if request.stream is not None else False,
    }
