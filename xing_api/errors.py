"""
Errors raised by the XING API client.

Everything derives from XingApiError so callers can catch the whole family at once.
"""
from typing import Any, Optional


class XingApiError(Exception):
    """Base class for all client errors."""


class InvalidTokenPair(XingApiError):
    """Access-token exchange attempted without a usable request token/secret pair."""


class TransportError(XingApiError):
    """Network failure, rejected handshake, or non-2xx response.

    Attributes:
        status_code: HTTP status, or None when no response was received
        body: raw response body, if any
        error: decoded JSON error payload, if the body carried one
    """

    def __init__(self, message: str, status_code: Optional[int] = None,
                 body: Optional[str] = None, error: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.error = error


class MalformedResponse(XingApiError, ValueError):
    """Response body could not be decoded as JSON."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
