"""
Config — Loads .env credentials and exposes API endpoints.
Also owns the shared async logger used across the client.
"""

import atexit
import os
import queue
import threading
from pathlib import Path
from dotenv import load_dotenv

# ── Load .env from same directory ────────────────────────────────────────────

_env_path = Path(__file__).parent / ".env"
load_dotenv(_env_path)

# ── Credential Resolution ────────────────────────────────────────────────────

API_KEY = os.getenv("COINCHECK_API_KEY", "").strip()
API_SECRET = os.getenv("COINCHECK_API_SECRET", "").strip()

# ── Endpoints ────────────────────────────────────────────────────────────────

DEFAULT_BASE = "https://coincheck.jp"
REST_BASE = os.getenv("COINCHECK_BASE_URL", DEFAULT_BASE).strip().rstrip("/") or DEFAULT_BASE

# ── Transport / Signing ──────────────────────────────────────────────────────

SIGNATURE_ENCODINGS = ("hex", "base64")


def _parse_encoding(raw: str) -> str:
    value = (raw or "hex").strip().lower()
    if value not in SIGNATURE_ENCODINGS:
        raise ValueError(
            f"COINCHECK_SIGNATURE_ENCODING must be one of {SIGNATURE_ENCODINGS}, got {raw!r}"
        )
    return value


def _parse_timeout(raw: str) -> float:
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise ValueError(f"COINCHECK_TIMEOUT must be a number, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"COINCHECK_TIMEOUT must be positive, got {raw!r}")
    return value


SIGNATURE_ENCODING = _parse_encoding(os.getenv("COINCHECK_SIGNATURE_ENCODING", "hex"))
TIMEOUT = _parse_timeout(os.getenv("COINCHECK_TIMEOUT", "10"))


# ── Async Logger ─────────────────────────────────────────────────────────────

class AsyncLogger:
    """Prints `[PREFIX] message` lines from a background thread so request
    paths never block on stdout. Set COINCHECK_LOG=0 to silence it."""

    def __init__(self, enabled: bool = True):
        self._q = queue.Queue()
        self._t = threading.Thread(target=self._worker, name="coincheck-log", daemon=True)
        self._t.start()
        self.enabled = enabled
        atexit.register(self.shutdown)

    def _worker(self):
        while True:
            msg = self._q.get()
            try:
                if msg is None:
                    break
                print(msg, flush=True)
            finally:
                self._q.task_done()

    def log(self, prefix, msg):
        if self.enabled:
            self._q.put(f"[{prefix}] {msg}")

    def flush(self):
        """Block until every queued line has been printed."""
        if self._t.is_alive():
            self._q.join()

    def shutdown(self):
        if self._t.is_alive():
            self._q.put(None)
            self._t.join(timeout=1.0)

logger = AsyncLogger(enabled=os.getenv("COINCHECK_LOG", "1").strip() not in ("0", "false", "no"))


# ── Validation ───────────────────────────────────────────────────────────────


def validate_credentials(quiet: bool = False) -> bool:
    if not API_KEY or not API_SECRET:
        if not quiet:
            print("[Config] ⚠ No API Credentials. Account suites will be skipped.")
        return False
    return True


def mask(s: str) -> str:
    return s[:6] + "..." + s[-4:] if len(s) > 10 else ("*" * len(s))


def print_config():
    print()
    print(f"  ┌─ Coincheck Client Config ────────────────────┐")
    print(f"  │  REST:      {REST_BASE:<34}│")
    print(f"  │  Signature: {SIGNATURE_ENCODING:<34}│")
    print(f"  │  Timeout:   {TIMEOUT:<34}│")
    print(f"  │  API Key:   {mask(API_KEY):<34}│")
    print(f"  └───────────────────────────────────────────────┘")
    print()
