"""
Models — Typed records for every Coincheck endpoint.

Money amounts that Coincheck sends as strings stay strings: converting
"0.12345678" BTC to a float would invent rounding the exchange never made.
Ticker quotes arrive as JSON numbers and are kept as floats.

Account and order records carry Coincheck's own success/error envelope.
`from_dict` maps one decoded JSON object onto a record and raises
ValueError / TypeError when the shape is wrong; the client turns that into
a DecodeError.
"""

from __future__ import annotations
from dataclasses import dataclass, field, fields, replace
from typing import Any, Literal, Optional


# ── Standard Enums ───────────────────────────────────────────────────────────

OrderType = Literal["buy", "sell", "market_buy", "market_sell"]
TimeInForce = Literal["good_til_cancelled", "post_only"]


# ── Field Coercion ───────────────────────────────────────────────────────────

def _obj(raw: Any, what: str) -> dict:
    if not isinstance(raw, dict):
        raise TypeError(f"{what}: expected JSON object, got {type(raw).__name__}")
    return raw


def _text(v: Any) -> str:
    """JSON string or number → text, without passing through float."""
    if v is None:
        return ""
    if isinstance(v, bool):
        raise TypeError(f"expected text, got bool {v!r}")
    if isinstance(v, (str, int, float)):
        return str(v)
    raise TypeError(f"expected text, got {type(v).__name__}")


def _opt_text(v: Any) -> Optional[str]:
    return None if v is None else _text(v)


def _num(v: Any) -> float:
    if v is None:
        return 0.0
    if isinstance(v, bool):
        raise TypeError(f"expected number, got bool {v!r}")
    return float(v)


def _int(v: Any) -> int:
    if v is None:
        return 0
    if isinstance(v, bool):
        raise TypeError(f"expected integer, got bool {v!r}")
    return int(v)


def _flag(v: Any) -> bool:
    if v is None:
        return False
    if not isinstance(v, bool):
        raise TypeError(f"expected boolean, got {type(v).__name__}")
    return v


def _levels(rows: Any, side: str) -> list[list[str]]:
    if rows is None:
        return []
    if not isinstance(rows, list):
        raise TypeError(f"order book {side}: expected list, got {type(rows).__name__}")
    out = []
    for row in rows:
        if not isinstance(row, list) or len(row) != 2:
            raise ValueError(f"order book {side}: expected [rate, amount], got {row!r}")
        out.append([_text(row[0]), _text(row[1])])
    return out


# ── Market Data ──────────────────────────────────────────────────────────────

@dataclass(slots=True)
class Ticker:
    last: float = 0.0
    bid: float = 0.0
    ask: float = 0.0
    high: float = 0.0
    low: float = 0.0
    volume: str = ""
    timestamp: float = 0.0

    @classmethod
    def from_dict(cls, raw: Any) -> "Ticker":
        d = _obj(raw, "ticker")
        return cls(
            last=_num(d.get("last")),
            bid=_num(d.get("bid")),
            ask=_num(d.get("ask")),
            high=_num(d.get("high")),
            low=_num(d.get("low")),
            volume=_text(d.get("volume")),
            timestamp=_num(d.get("timestamp")),
        )


@dataclass(slots=True)
class Trade:
    id: int = 0
    amount: str = ""
    rate: float = 0.0
    order_type: str = ""
    created_at: str = ""
    pair: str = ""

    @classmethod
    def from_dict(cls, raw: Any) -> "Trade":
        d = _obj(raw, "trade")
        return cls(
            id=_int(d.get("id")),
            amount=_text(d.get("amount")),
            rate=_num(d.get("rate")),
            order_type=_text(d.get("order_type")),
            created_at=_text(d.get("created_at")),
            pair=_text(d.get("pair")),
        )


@dataclass(slots=True)
class OrderBook:
    asks: list[list[str]] = field(default_factory=list)  # [rate, amount], best first
    bids: list[list[str]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: Any) -> "OrderBook":
        d = _obj(raw, "order book")
        return cls(asks=_levels(d.get("asks"), "asks"), bids=_levels(d.get("bids"), "bids"))


# ── Account Data ─────────────────────────────────────────────────────────────

@dataclass(slots=True)
class Balance:
    jpy: str = ""
    btc: str = ""
    jpy_reserved: str = ""
    btc_reserved: str = ""
    jpy_lend_in_use: str = ""
    btc_lend_in_use: str = ""
    jpy_lent: str = ""
    btc_lent: str = ""
    jpy_debt: str = ""
    btc_debt: str = ""
    success: bool = False
    error: str = ""

    @classmethod
    def from_dict(cls, raw: Any) -> "Balance":
        d = _obj(raw, "balance")
        values = {f.name: _text(d.get(f.name)) for f in fields(cls) if f.name not in ("success", "error")}
        return cls(**values, success=_flag(d.get("success")), error=_text(d.get("error")))


@dataclass(slots=True)
class LeverageBalance:
    margin_jpy: float = 0.0            # margin.jpy
    margin_available_jpy: str = ""     # margin_available.jpy
    margin_level: str = ""
    success: bool = False
    error: str = ""

    @classmethod
    def from_dict(cls, raw: Any) -> "LeverageBalance":
        d = _obj(raw, "leverage balance")
        margin = _obj(d.get("margin") or {}, "margin")
        available = _obj(d.get("margin_available") or {}, "margin_available")
        return cls(
            margin_jpy=_num(margin.get("jpy")),
            margin_available_jpy=_text(available.get("jpy")),
            margin_level=_text(d.get("margin_level")),
            success=_flag(d.get("success")),
            error=_text(d.get("error")),
        )


@dataclass(slots=True)
class Accounts:
    id: int = 0
    email: str = ""
    identity_status: str = ""
    bitcoin_address: str = ""
    lending_leverage: str = ""
    taker_fee: str = ""
    maker_fee: str = ""
    success: bool = False
    error: str = ""

    @classmethod
    def from_dict(cls, raw: Any) -> "Accounts":
        d = _obj(raw, "accounts")
        return cls(
            id=_int(d.get("id")),
            email=_text(d.get("email")),
            identity_status=_text(d.get("identity_status")),
            bitcoin_address=_text(d.get("bitcoin_address")),
            lending_leverage=_text(d.get("lending_leverage")),
            taker_fee=_text(d.get("taker_fee")),
            maker_fee=_text(d.get("maker_fee")),
            success=_flag(d.get("success")),
            error=_text(d.get("error")),
        )


# ── Orders ───────────────────────────────────────────────────────────────────

# Fields a caller may set on a new order, in wire order.
ORDER_REQUEST_FIELDS = (
    "pair",
    "order_type",
    "rate",
    "amount",
    "market_buy_amount",
    "stop_loss_rate",
    "time_in_force",
)


@dataclass(slots=True)
class Order:
    """
    Both the request for a new order and the exchange's reply.

    rate / amount are text so the signed body carries exactly what the
    caller wrote (e.g. "30010.0", "0.0005"). Coincheck answers with the same
    shape plus an assigned id.
    """
    pair: str = ""
    order_type: Optional[OrderType] = None
    rate: Optional[str] = None
    amount: Optional[str] = None
    market_buy_amount: Optional[str] = None   # market_buy only, in JPY
    stop_loss_rate: Optional[str] = None
    time_in_force: Optional[TimeInForce] = None

    # Assigned by the exchange
    id: int = 0
    created_at: str = ""
    success: bool = False
    error: str = ""

    def to_payload(self) -> dict[str, str]:
        """Request body: only the caller's order attributes that are set."""
        if not self.pair or not self.order_type:
            raise ValueError("order needs both pair and order_type")
        payload = {}
        for name in ORDER_REQUEST_FIELDS:
            value = getattr(self, name)
            if value is not None:
                payload[name] = value
        return payload

    def merge_response(self, raw: Any) -> "Order":
        """Copy of this order overlaid with whatever the exchange sent back."""
        d = _obj(raw, "order")
        updates: dict[str, Any] = {}
        for name in ORDER_REQUEST_FIELDS:
            if name in d:
                updates[name] = _opt_text(d[name])
        if "id" in d:
            updates["id"] = _int(d["id"])
        if "created_at" in d:
            updates["created_at"] = _text(d["created_at"])
        updates["success"] = _flag(d.get("success"))
        updates["error"] = _text(d.get("error"))
        return replace(self, **updates)
