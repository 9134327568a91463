"""
Mock Responses — Sample Coincheck API responses for offline/unit testing.
Can be used to validate parsing logic without hitting the live API.
"""

MOCK_TICKER_RESPONSE = {
    "last": 500500.0,
    "bid": 499000.0,
    "ask": 500000.0,
    "high": 510000.0,
    "low": 490000.0,
    "volume": "1234.56789012",
    "timestamp": 1700000000,
}

MOCK_TRADES_RESPONSE = {
    "success": True,
    "pagination": {"limit": 2, "order": "desc", "starting_after": None, "ending_before": None},
    "data": [
        {
            "id": 82,
            "amount": "0.28391",
            "rate": 35400.0,
            "pair": "btc_jpy",
            "order_type": "sell",
            "created_at": "2015-01-10T05:55:38.000Z",
        },
        {
            "id": 81,
            "amount": "0.1",
            "rate": 36120.0,
            "pair": "btc_jpy",
            "order_type": "buy",
            "created_at": "2015-01-09T15:25:13.000Z",
        },
    ],
}

MOCK_TRADES_LIST_RESPONSE = MOCK_TRADES_RESPONSE["data"]

MOCK_ORDERBOOK_RESPONSE = {
    "asks": [
        ["27330.0", "2.25"],
        ["27340.0", "0.45"],
    ],
    "bids": [
        ["27240.0", "1.1543"],
        ["26800.0", "1.2226"],
    ],
}

MOCK_BALANCE_RESPONSE = {
    "success": True,
    "jpy": "0.8401",
    "btc": "7.75052654",
    "jpy_reserved": "3000.0",
    "btc_reserved": "3.5002",
    "jpy_lend_in_use": "0",
    "btc_lend_in_use": "0.3",
    "jpy_lent": "0",
    "btc_lent": "1.2",
    "jpy_debt": "0",
    "btc_debt": "0",
}

MOCK_BALANCE_ERROR_RESPONSE = {"success": False, "error": "no balance"}

MOCK_LEVERAGE_BALANCE_RESPONSE = {
    "success": True,
    "margin": {"jpy": 131767.22675655},
    "margin_available": {"jpy": "116995.98446494"},
    "margin_level": "0.0",
}

MOCK_ACCOUNTS_RESPONSE = {
    "success": True,
    "id": 10000,
    "email": "test@gmail.com",
    "identity_status": "identity_pending",
    "bitcoin_address": "1v6zFvyNPgdRvhUufkRoTtgyiw1xigncc",
    "lending_leverage": "4.0",
    "taker_fee": "0.0",
    "maker_fee": "0.0",
}

MOCK_ORDER_RESPONSE = {
    "success": True,
    "id": 12345,
    "rate": "30010.0",
    "amount": "1.3",
    "order_type": "sell",
    "time_in_force": "good_til_cancelled",
    "stop_loss_rate": None,
    "pair": "btc_jpy",
    "created_at": "2015-01-10T05:55:38.000Z",
}

MOCK_ORDER_ERROR_RESPONSE = {"success": False, "error": "Amount minimum is 0.005 btc"}

MOCK_AUTH_ERROR_RESPONSE = {"success": False, "error": "invalid authentication"}
