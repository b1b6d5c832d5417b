"""
Gateway error types.

``str()`` of every error is the human-readable message handed back to the UI.
"""


class GatewayError(Exception):
    """Base exception for gateway errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NetworkError(GatewayError):
    """Raised when the outbound call could not be completed."""

    def __init__(self, cause: str):
        self.cause = cause
        super().__init__(f"Network error: {cause}")


class ApiError(GatewayError):
    """Raised when the provider answers with a non-success HTTP status."""

    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(f"API error: {status_code} - {body}")


class DecodeError(GatewayError):
    """Raised when a success response body is not valid JSON."""

    def __init__(self, cause: str):
        self.cause = cause
        super().__init__(f"Decode error: {cause}")
