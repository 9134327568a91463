"""
Expected Schemas — Defines the expected shape of Coincheck API responses.
Used by test suites to validate that responses match known structure.
"""

# ── Ticker Response ──────────────────────────────────────────────────────────

TICKER_RESPONSE_SCHEMA = {
    "required_keys": ["last", "bid", "ask", "high", "low", "volume", "timestamp"],
    "numeric_keys": ["last", "bid", "ask", "high", "low"],
}

# ── Trades Response ──────────────────────────────────────────────────────────

TRADE_FIELDS = ["id", "amount", "rate", "order_type", "created_at"]

# ── Orderbook Response ───────────────────────────────────────────────────────

ORDERBOOK_RESPONSE_SCHEMA = {
    "required_keys": ["asks", "bids"],
    "level_length": 2,  # [rate, amount]
}

# ── Account Responses ────────────────────────────────────────────────────────

BALANCE_FIELDS = ["jpy", "btc", "jpy_reserved", "btc_reserved"]

# record field → type; margin.jpy arrives as a number, the rest as text
LEVERAGE_BALANCE_FIELDS = {
    "margin_jpy": float,
    "margin_available_jpy": str,
    "margin_level": str,
}

ACCOUNTS_FIELDS = ["id", "email", "identity_status", "taker_fee", "maker_fee"]
