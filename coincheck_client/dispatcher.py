"""
Dispatcher — Owns the HTTP session and performs exactly one call per request.

Returns the raw body bytes. Every transport failure (malformed URL, refused
connection, TLS, timeout, truncated body) comes back as RequestError.
Status codes are not interpreted here: Coincheck reports most failures with
HTTP 200 and an error body, so classification happens in the client.
"""

from __future__ import annotations
import socket
import requests
from typing import Optional

from .config import TIMEOUT, logger
from .errors import RequestError


def _log(msg: str):
    logger.log("HTTP", msg)


def _warn(msg: str):
    logger.log("HTTP", f"⚠ {msg}")


class Dispatcher:
    """Thin wrapper around a pooled requests.Session."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = TIMEOUT,
        pool_size: int = 10,
    ):
        self.timeout = timeout
        if session is not None:
            self.session = session
            return

        self.session = requests.Session()

        # Pooled adapter with Nagle's algorithm disabled (TCP_NODELAY)
        adapter = requests.adapters.HTTPAdapter(pool_connections=pool_size, pool_maxsize=pool_size)
        adapter.poolmanager.connection_pool_kw['socket_options'] = [
            (socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)
        ]
        self.session.mount('https://', adapter)
        self.session.mount('http://', adapter)

    def request(self, method: str, url: str, body: bytes, headers: dict[str, str]) -> bytes:
        """Execute one call and return the full response body."""
        try:
            with self.session.request(
                method,
                url,
                data=body or None,
                headers=headers,
                timeout=self.timeout,
                stream=True,
            ) as resp:
                payload = resp.content
                status = resp.status_code
        except requests.RequestException as e:
            _warn(f"{method} {url} failed: {e}")
            raise RequestError(e) from e

        if status >= 400:
            _warn(f"{method} {url} → HTTP {status} ({len(payload)} bytes)")
        else:
            _log(f"{method} {url} → {status} ({len(payload)} bytes)")
        return payload

    def close(self):
        self.session.close()

    def __enter__(self) -> "Dispatcher":
        return self

    def __exit__(self, *exc):
        self.close()
