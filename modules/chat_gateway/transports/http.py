from __future__ import annotations

import json
import logging
from typing import Any, Dict

import httpx

from ..config import DEFAULT_TIMEOUT_SECONDS
from ..errors import ApiError, DecodeError, NetworkError
from .base import BaseTransport

logger = logging.getLogger(__name__)

# header values that cannot be encoded fail before anything is sent
_REQUEST_FAILURES = (httpx.RequestError, httpx.InvalidURL, UnicodeEncodeError)


def extract_content(payload: Any) -> str:
    """
    Return ``choices[0].message.content`` or an empty string.

    Providers do not all follow the OpenAI envelope exactly, so any missing
    or mistyped step yields ``""`` instead of an error.
    """
    choices = payload.get("choices") if isinstance(payload, dict) else None
    if not isinstance(choices, list) or not choices:
        return ""
    first = choices[0]
    message = first.get("message") if isinstance(first, dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    return content if isinstance(content, str) else ""


def _describe(exc: Exception) -> str:
    return str(exc) or exc.__class__.__name__


def _parse(raw: bytes) -> str:
    try:
        payload = json.loads(raw)
    except ValueError as exc:
        raise DecodeError(str(exc)) from exc
    return extract_content(payload)


class HttpTransport(BaseTransport):
    """
    Sends one OpenAI-compatible chat-completion POST per call.

    A fresh httpx client is opened for every call; nothing is retried.
    """

    def __init__(self, timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS) -> None:
        self._timeout_seconds = timeout_seconds

    @staticmethod
    def _headers(credential: str) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {credential}" if credential else "Bearer",
        }

    @staticmethod
    def _read_error_body(response: httpx.Response) -> str:
        try:
            response.read()
            return response.text
        except (httpx.HTTPError, httpx.StreamError, UnicodeDecodeError):
            return ""

    @staticmethod
    async def _aread_error_body(response: httpx.Response) -> str:
        try:
            await response.aread()
            return response.text
        except (httpx.HTTPError, httpx.StreamError, UnicodeDecodeError):
            return ""

    def send(self, endpoint: str, credential: str, body: Dict[str, Any]) -> str:
        logger.debug(f"POST {endpoint}")
        try:
            headers = self._headers(credential)
            with httpx.Client(timeout=self._timeout_seconds) as client:
                with client.stream("POST", endpoint, json=body, headers=headers) as response:
                    if not response.is_success:
                        raise ApiError(response.status_code, self._read_error_body(response))
                    raw = response.read()
        except _REQUEST_FAILURES as exc:
            raise NetworkError(_describe(exc)) from exc
        logger.debug(f"{endpoint} answered {response.status_code} ({len(raw)} bytes)")
        return _parse(raw)

    async def asend(self, endpoint: str, credential: str, body: Dict[str, Any]) -> str:
        logger.debug(f"POST {endpoint}")
        try:
            headers = self._headers(credential)
            async with httpx.AsyncClient(timeout=self._timeout_seconds) as client:
                async with client.stream("POST", endpoint, json=body, headers=headers) as response:
                    if not response.is_success:
                        raise ApiError(response.status_code, await self._aread_error_body(response))
                    raw = await response.aread()
        except _REQUEST_FAILURES as exc:
            raise NetworkError(_describe(exc)) from exc
        logger.debug(f"{endpoint} answered {response.status_code} ({len(raw)} bytes)")
        return _parse(raw)
