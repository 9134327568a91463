"""
Coincheck Client — Signed REST client for the Coincheck exchange

Usage:
    from coincheck_client import CoincheckClient, Order

    with CoincheckClient(key, secret) as client:
        print(client.get_ticker().last)
        print(client.get_balance().jpy)
        placed = client.new_order(Order(pair="btc_jpy", order_type="buy", rate="3000000", amount="0.001"))
        print(placed.id)
"""

from .rest_client import CoincheckClient
from .dispatcher import Dispatcher
from .signer import Signer, NonceSource, Credentials, sign, sign_hmac
from .errors import CoincheckError, RequestError, DecodeError, APIError
from .models import (
    Ticker, Trade, OrderBook, Balance, LeverageBalance, Accounts, Order,
)

__all__ = [
    "CoincheckClient",
    "Dispatcher",
    "Signer", "NonceSource", "Credentials", "sign", "sign_hmac",
    "CoincheckError", "RequestError", "DecodeError", "APIError",
    "Ticker", "Trade", "OrderBook", "Balance", "LeverageBalance", "Accounts", "Order",
]
