"""
Errors — The three failure kinds a call can end in.

RequestError: the HTTP round trip itself failed.
DecodeError:  bytes came back but are not the JSON shape we expect.
APIError:     the exchange answered and said no (success=false / error text).
"""

from __future__ import annotations
from typing import Any, Optional


class CoincheckError(Exception):
    """Base class for every error raised by the client."""
    pass


class RequestError(CoincheckError):
    """Transport-level failure: bad URL, network, TLS, timeout or body read."""

    def __init__(self, detail: Any):
        self.detail = str(detail)
        super().__init__(f"Could not execute request! ({self.detail})")


class DecodeError(CoincheckError):
    """Response body is not valid JSON or does not match the endpoint record."""

    def __init__(self, message: str, payload: bytes = b""):
        self.payload = payload
        snippet = payload[:200].decode("utf-8", errors="replace") if payload else ""
        if snippet:
            message = f"{message} (payload: {snippet!r})"
        super().__init__(message)


class APIError(CoincheckError):
    """The exchange reported a failure inside an otherwise valid response."""

    def __init__(self, message: str, record: Optional[Any] = None):
        self.message = message
        self.record = record
        super().__init__(message or "exchange reported failure without a message")
