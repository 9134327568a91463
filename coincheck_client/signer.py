"""
Signer — Nonce generation and HMAC-SHA256 request signing.

Coincheck authenticates private calls with three headers:
    ACCESS-KEY        the API key
    ACCESS-NONCE      an integer that must grow with every request
    ACCESS-SIGNATURE  HMAC-SHA256(secret, nonce + uri + body)

`uri` is the full URL including the query string. `body` is the raw JSON
payload for POST and the empty string for GET.
"""

from __future__ import annotations
import base64
import hashlib
import hmac
import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from .config import SIGNATURE_ENCODINGS


# ── HMAC Signing ─────────────────────────────────────────────────────────────


def sign_hmac(secret: str, message: str, encoding: str = "hex") -> str:
    """HMAC-SHA256 of `message` keyed by `secret`, hex (default) or base64."""
    digest = hmac.new(
        secret.encode("utf-8"),
        message.encode("utf-8"),
        hashlib.sha256,
    )
    if encoding == "hex":
        return digest.hexdigest()
    if encoding == "base64":
        return base64.b64encode(digest.digest()).decode("ascii")
    raise ValueError(f"Unknown signature encoding: {encoding!r}")


def sign(secret: str, nonce: str, uri: str, body: str = "", encoding: str = "hex") -> str:
    """Signature over nonce + uri + body. Pure: no clock, no state."""
    return sign_hmac(secret, f"{nonce}{uri}{body}", encoding)


# ── Nonce Source ─────────────────────────────────────────────────────────────


class NonceSource:
    """
    Strictly increasing nonces built on wall-clock seconds.

    Normally the nonce is just the current unix second. When two requests
    land in the same second (or the clock steps backwards) the previous
    value + 1 is issued instead, so the exchange never sees a repeat.
    """

    def __init__(self, clock: Callable[[], float] = time.time, start: int = 0):
        self._clock = clock
        self._last = start
        self._lock = threading.Lock()

    @property
    def last(self) -> int:
        return self._last

    def next(self) -> int:
        with self._lock:
            candidate = int(self._clock())
            if candidate <= self._last:
                candidate = self._last + 1
            self._last = candidate
            return candidate

    def __call__(self) -> str:
        return str(self.next())


# ── Signer ───────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Credentials:
    key: str
    secret: str = field(repr=False)


class Signer:
    """Builds the signed header set for one request."""

    def __init__(
        self,
        key: str,
        secret: str,
        nonce_source: Optional[Callable[[], str]] = None,
        encoding: str = "hex",
    ):
        if encoding not in SIGNATURE_ENCODINGS:
            raise ValueError(
                f"Unknown signature encoding: {encoding!r} (expected one of {SIGNATURE_ENCODINGS})"
            )
        self.credentials = Credentials(key=key, secret=secret)
        self.nonce_source = nonce_source or NonceSource()
        self.encoding = encoding

    def headers(self, uri: str, body: str = "") -> dict[str, str]:
        nonce = str(self.nonce_source())
        signature = sign(self.credentials.secret, nonce, uri, body, self.encoding)
        return {
            "Content-Type": "application/json",
            "ACCESS-KEY": self.credentials.key,
            "ACCESS-NONCE": nonce,
            "ACCESS-SIGNATURE": signature,
        }
