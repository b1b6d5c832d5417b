from .base import BaseTransport
from .http import HttpTransport, extract_content

__all__ = [
    "BaseTransport",
    "HttpTransport",
    "extract_content",
]
