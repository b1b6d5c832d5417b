from .client import ChatGateway
from .config import GatewayConfig
from .errors import ApiError, DecodeError, GatewayError, NetworkError
from .types import AiProfile, ChatMessage, ChatRequest, ChatResult, ResolvedCall

__all__ = [
    "ChatGateway",
    "GatewayConfig",
    "GatewayError",
    "NetworkError",
    "ApiError",
    "DecodeError",
    "AiProfile",
    "ChatMessage",
    "ChatRequest",
    "ChatResult",
    "ResolvedCall",
]
