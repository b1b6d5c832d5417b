from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional


API_KEY_ENV = "MOONSHOT_API_KEY"
TIMEOUT_ENV = "CHAT_GATEWAY_TIMEOUT"
DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class GatewayConfig:
    """
    Process-wide gateway settings.

    Built once at startup and handed to ``ChatGateway``; a request may still
    override the credential per call.
    """
    default_api_key: str = ""
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GatewayConfig":
        """
        Read the configuration from environment variables.

        A missing API key is not fatal: it resolves to an empty string and
        only surfaces as an authentication failure when a call is made.
        """
        env = os.environ if environ is None else environ
        raw_timeout = env.get(TIMEOUT_ENV)
        timeout = DEFAULT_TIMEOUT_SECONDS
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ValueError(f"{TIMEOUT_ENV} must be a number of seconds, got {raw_timeout!r}")
        return cls(default_api_key=env.get(API_KEY_ENV, ""), timeout_seconds=timeout)
