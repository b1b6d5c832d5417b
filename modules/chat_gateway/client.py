from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from .config import GatewayConfig
from .errors import GatewayError
from .providers import resolve
from .transports.base import BaseTransport
from .transports.http import HttpTransport
from .translator import build_body
from .types import ChatRequest, ChatResult, ResolvedCall

logger = logging.getLogger(__name__)

RequestLike = Union[ChatRequest, Mapping[str, Any]]


class ChatGateway:
    """
    Resolves, translates and forwards one chat request per call.

    The gateway keeps no per-call state, so a single instance can serve
    concurrent calls.
    """

    def __init__(self, config: Optional[GatewayConfig] = None, transport: Optional[BaseTransport] = None):
        self._config = config if config is not None else GatewayConfig.from_env()
        self._transport = transport if transport is not None else HttpTransport(self._config.timeout_seconds)

    @property
    def config(self) -> GatewayConfig:
        return self._config

    def prepare(self, request: RequestLike) -> ResolvedCall:
        if not isinstance(request, ChatRequest):
            request = ChatRequest.from_dict(request)
        endpoint, credential = resolve(request, self._config.default_api_key)
        return ResolvedCall(endpoint=endpoint, credential=credential, body=build_body(request))

    def chat_completion(self, request: RequestLike) -> ChatResult:
        call = self.prepare(request)
        logger.info(f"Chat completion via {call.endpoint} (model={call.body['model']})")
        try:
            content = self._transport.send(call.endpoint, call.credential, call.body)
        except GatewayError as e:
            logger.error(f"Chat completion via {call.endpoint} failed: {e}")
            raise
        return ChatResult(content=content)

    async def achat_completion(self, request: RequestLike) -> ChatResult:
        call = self.prepare(request)
        logger.info(f"Chat completion via {call.endpoint} (model={call.body['model']})")
        try:
            content = await self._transport.asend(call.endpoint, call.credential, call.body)
        except GatewayError as e:
            logger.error(f"Chat completion via {call.endpoint} failed: {e}")
            raise
        return ChatResult(content=content)
