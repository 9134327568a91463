"""Tests for the HTTP dispatcher."""

import pytest
import requests
from requests.adapters import HTTPAdapter

from coincheck_client import Dispatcher, RequestError

from conftest import FakeResponse, FakeSession


HEADERS = {"Content-Type": "application/json", "ACCESS-KEY": "key"}


def test_request_returns_raw_body_and_forwards_headers() -> None:
    session = FakeSession(FakeResponse(b'{"last": 1}'))
    dispatcher = Dispatcher(session=session, timeout=3)

    body = dispatcher.request("GET", "https://coincheck.jp/api/ticker", b"", HEADERS)

    assert body == b'{"last": 1}'
    call = session.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == "https://coincheck.jp/api/ticker"
    assert call["headers"] == HEADERS
    assert call["data"] is None
    assert call["timeout"] == 3
    assert session.responses[0].closed


def test_post_body_is_sent_verbatim() -> None:
    session = FakeSession(FakeResponse(b"{}"))
    Dispatcher(session=session).request("POST", "https://coincheck.jp/api/exchange/orders", b'{"a":1}', HEADERS)
    assert session.calls[0]["data"] == b'{"a":1}'


def test_error_status_still_returns_body() -> None:
    session = FakeSession(FakeResponse(b'{"success":false,"error":"invalid authentication"}', status_code=401))
    body = Dispatcher(session=session).request("GET", "https://coincheck.jp/api/accounts", b"", HEADERS)
    assert b"invalid authentication" in body


def test_connection_failure_becomes_request_error() -> None:
    cause = requests.ConnectionError("connection reset by peer")
    session = FakeSession(cause)

    with pytest.raises(RequestError) as info:
        Dispatcher(session=session).request("GET", "https://coincheck.jp/api/ticker", b"", HEADERS)

    assert info.value.__cause__ is cause
    assert str(info.value) == "Could not execute request! (connection reset by peer)"


def test_timeout_becomes_request_error() -> None:
    session = FakeSession(requests.Timeout("read timed out"))
    with pytest.raises(RequestError):
        Dispatcher(session=session).request("GET", "https://coincheck.jp/api/ticker", b"", HEADERS)


def test_body_read_failure_becomes_request_error_and_closes_response() -> None:
    response = FakeResponse(read_error=requests.exceptions.ChunkedEncodingError("truncated"))
    session = FakeSession(response)

    with pytest.raises(RequestError):
        Dispatcher(session=session).request("GET", "https://coincheck.jp/api/trades", b"", HEADERS)

    assert response.closed


def test_malformed_url_becomes_request_error() -> None:
    with Dispatcher() as dispatcher:
        with pytest.raises(RequestError):
            dispatcher.request("GET", "not a url", b"", HEADERS)


def test_default_session_uses_pooled_adapter() -> None:
    dispatcher = Dispatcher(pool_size=4)
    try:
        adapter = dispatcher.session.get_adapter("https://coincheck.jp")
        assert isinstance(adapter, HTTPAdapter)
        assert adapter._pool_maxsize == 4
    finally:
        dispatcher.close()


def test_context_manager_closes_session() -> None:
    session = FakeSession()
    with Dispatcher(session=session):
        pass
    assert session.closed
