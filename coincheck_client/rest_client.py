"""
REST Client — Signed HTTP client for the Coincheck API.

Handles:
- Market data: ticker, recent trades, order book
- Account data: balance, leverage balance, account profile
- Order entry: new order

Every call is signed (Coincheck accepts signed public calls), dispatched once,
decoded into a typed record and classified:
    transport failure          → RequestError
    bad JSON / unexpected shape → DecodeError
    success=false / error text  → APIError
"""

from __future__ import annotations
import orjson as json
from typing import Any, Callable, Optional
from urllib.parse import urlencode

from .config import API_KEY, API_SECRET, REST_BASE, SIGNATURE_ENCODING, TIMEOUT, logger
from .dispatcher import Dispatcher
from .errors import APIError, DecodeError
from .models import Accounts, Balance, LeverageBalance, Order, OrderBook, Ticker, Trade
from .signer import Signer


# ── Logging ──────────────────────────────────────────────────────────────────

def _log(msg: str):
    logger.log("REST", msg)


def _warn(msg: str):
    logger.log("REST", f"⚠ {msg}")


def _err(msg: str):
    logger.log("REST", f"❌ {msg}")


# ── Endpoints ────────────────────────────────────────────────────────────────

TICKER = "/api/ticker"
TRADES = "/api/trades"
ORDER_BOOKS = "/api/order_books"
BALANCE = "/api/accounts/balance"
LEVERAGE_BALANCE = "/api/accounts/leverage_balance"
ACCOUNTS = "/api/accounts"
ORDERS = "/api/exchange/orders"


# ── The Client ───────────────────────────────────────────────────────────────

class CoincheckClient:
    """Signed REST client for Coincheck."""

    def __init__(
        self,
        key: str,
        secret: str,
        base_url: Optional[str] = None,
        *,
        nonce_source: Optional[Callable[[], str]] = None,
        signature_encoding: str = SIGNATURE_ENCODING,
        dispatcher: Optional[Dispatcher] = None,
        timeout: float = TIMEOUT,
    ):
        self.base = (base_url or REST_BASE).rstrip("/")
        self.signer = Signer(key, secret, nonce_source=nonce_source, encoding=signature_encoding)
        self.dispatcher = dispatcher or Dispatcher(timeout=timeout)

    @classmethod
    def from_env(cls, **kwargs) -> "CoincheckClient":
        """Client built from COINCHECK_* settings (.env or environment)."""
        kwargs.setdefault("base_url", REST_BASE)
        return cls(API_KEY, API_SECRET, **kwargs)

    def close(self):
        self.dispatcher.close()

    def __enter__(self) -> "CoincheckClient":
        return self

    def __exit__(self, *exc):
        self.close()

    # ── Market Data ──────────────────────────────────────────────────────────

    def get_ticker(self, pair: Optional[str] = None) -> Ticker:
        """Latest ticker (last, bid, ask, high, low, volume)."""
        data = self._get(TICKER, _pair_query(pair))
        return self._decode(Ticker.from_dict, data, TICKER)

    def get_trades(self, pair: Optional[str] = None) -> list[Trade]:
        """Recent public trades, newest first."""
        data = self._get(TRADES, _pair_query(pair))

        # Older API: bare list. Current API: {"success": true, "data": [...]}
        if isinstance(data, dict):
            if data.get("success") is False:
                raise self._api_error(TRADES, str(data.get("error") or ""), data)
            data = data.get("data")

        if not isinstance(data, list):
            raise DecodeError(f"{TRADES}: expected a list of trades, got {type(data).__name__}")
        return [self._decode(Trade.from_dict, t, TRADES) for t in data]

    def get_order_book(self, pair: Optional[str] = None) -> OrderBook:
        """Order book snapshot: asks and bids as [rate, amount] text pairs."""
        data = self._get(ORDER_BOOKS, _pair_query(pair))
        return self._decode(OrderBook.from_dict, data, ORDER_BOOKS)

    # ── Account Data ─────────────────────────────────────────────────────────

    def get_balance(self) -> Balance:
        data = self._get(BALANCE)
        return self._checked(self._decode(Balance.from_dict, data, BALANCE), BALANCE)

    def get_leverage_balance(self) -> LeverageBalance:
        data = self._get(LEVERAGE_BALANCE)
        return self._checked(self._decode(LeverageBalance.from_dict, data, LEVERAGE_BALANCE), LEVERAGE_BALANCE)

    def get_accounts(self) -> Accounts:
        data = self._get(ACCOUNTS)
        return self._checked(self._decode(Accounts.from_dict, data, ACCOUNTS), ACCOUNTS)

    # ── Orders ───────────────────────────────────────────────────────────────

    def new_order(self, order: Order) -> Order:
        """
        Place a new order.

        The body echoes the caller's pair / order_type / rate / amount exactly;
        the returned Order is the request overlaid with the exchange's reply
        (assigned id, created_at, ...).
        """
        payload = order.to_payload()
        data = self._post(ORDERS, payload)
        placed = self._decode(order.merge_response, data, ORDERS)

        # Failure is signalled by error text; success=false is honoured when present
        if placed.error or (isinstance(data, dict) and data.get("success") is False):
            raise self._api_error(ORDERS, placed.error, placed)

        _log(f"Order {placed.id} placed: {placed.order_type} {placed.amount or placed.market_buy_amount} "
             f"{placed.pair} @ {placed.rate}")
        return placed

    # ── Internals ────────────────────────────────────────────────────────────

    def _get(self, path: str, query: Optional[dict] = None) -> Any:
        return self._call("GET", path, query=query)

    def _post(self, path: str, payload: dict) -> Any:
        return self._call("POST", path, body=json.dumps(payload))

    def _call(self, method: str, path: str, *, query: Optional[dict] = None, body: bytes = b"") -> Any:
        """Sign, dispatch once and parse JSON. RequestError propagates untouched."""
        url = f"{self.base}{path}"
        if query:
            url = f"{url}?{urlencode(query)}"

        headers = self.signer.headers(url, body.decode("utf-8"))
        raw = self.dispatcher.request(method, url, body, headers)

        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            _err(f"{method} {path}: invalid JSON ({e})")
            raise DecodeError(f"{path}: response is not valid JSON", raw) from e

    @staticmethod
    def _decode(parse: Callable[[Any], Any], data: Any, path: str) -> Any:
        try:
            return parse(data)
        except (TypeError, ValueError) as e:
            _err(f"{path}: unexpected response shape ({e})")
            raise DecodeError(f"{path}: unexpected response shape: {e}") from e

    def _checked(self, record: Any, path: str) -> Any:
        # error text counts as failure even next to success=true
        if not record.success or record.error:
            raise self._api_error(path, record.error, record)
        return record

    @staticmethod
    def _api_error(path: str, message: str, record: Any) -> APIError:
        _warn(f"{path}: exchange reported failure: {message or '<no message>'}")
        return APIError(message, record)


def _pair_query(pair: Optional[str]) -> Optional[dict]:
    return {"pair": pair} if pair else None
