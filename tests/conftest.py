"""Pytest configuration and fake transports for the client test suite."""

from __future__ import annotations

from typing import Any

import orjson
import pytest

from coincheck_client import CoincheckClient, Dispatcher, NonceSource


KEY = "test-key"
SECRET = "test-secret"
BASE = "https://coincheck.jp"


class FakeResponse:
    """Stands in for requests.Response inside `with session.request(...)`."""

    def __init__(self, payload: Any = b"", status_code: int = 200, read_error: Exception | None = None) -> None:
        if not isinstance(payload, (bytes, str)):
            payload = orjson.dumps(payload)
        elif isinstance(payload, str):
            payload = payload.encode("utf-8")
        self._payload = payload
        self.status_code = status_code
        self.read_error = read_error
        self.closed = False

    @property
    def content(self) -> bytes:
        if self.read_error is not None:
            raise self.read_error
        return self._payload

    def __enter__(self) -> "FakeResponse":
        return self

    def __exit__(self, *exc) -> None:
        self.closed = True


class FakeSession:
    """Records every request and replays queued responses or exceptions."""

    def __init__(self, *replies: Any) -> None:
        self.replies = list(replies)
        self.calls: list[dict[str, Any]] = []
        self.responses: list[FakeResponse] = []
        self.closed = False

    def request(self, method, url, data=None, headers=None, timeout=None, stream=False):
        self.calls.append({
            "method": method,
            "url": url,
            "data": data,
            "headers": dict(headers or {}),
            "timeout": timeout,
            "stream": stream,
        })
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        if not isinstance(reply, FakeResponse):
            reply = FakeResponse(reply)
        self.responses.append(reply)
        return reply

    def close(self) -> None:
        self.closed = True


class FrozenClock:
    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture
def make_client(clock):
    """Build a client whose transport replays the given replies."""

    def factory(*replies: Any, encoding: str = "hex"):
        session = FakeSession(*replies)
        client = CoincheckClient(
            KEY,
            SECRET,
            BASE,
            nonce_source=NonceSource(clock=clock),
            signature_encoding=encoding,
            dispatcher=Dispatcher(session=session, timeout=5),
        )
        return client, session

    return factory
