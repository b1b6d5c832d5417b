from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict


class BaseTransport(ABC):
    @abstractmethod
    def send(self, endpoint: str, credential: str, body: Dict[str, Any]) -> str:  # pragma: no cover - interface only
        raise NotImplementedError

    @abstractmethod
    async def asend(self, endpoint: str, credential: str, body: Dict[str, Any]) -> str:  # pragma: no cover - interface only
        raise NotImplementedError
