"""
Test Suite: Account — Balance, leverage balance and account profile.
Requires valid API credentials (tests authenticated endpoints).
"""

from coincheck_client import CoincheckClient
from ..fixtures.expected_schemas import (
    BALANCE_FIELDS,
    LEVERAGE_BALANCE_FIELDS,
    ACCOUNTS_FIELDS,
)


def run(config: dict) -> list[dict]:
    """Run all account diagnostic tests."""
    results = []

    if not config["api_key"] or not config["api_secret"]:
        return [_fail("Account: Pre-check", "No API credentials")]

    with CoincheckClient(config["api_key"], config["api_secret"], config["rest_base"],
                         signature_encoding=config["signature_encoding"]) as client:

        # ── Test: Balance ────────────────────────────────────────────────────
        results.append(_test_balance(client))

        # ── Test: Leverage Balance ───────────────────────────────────────────
        results.append(_test_leverage_balance(client))

        # ── Test: Account Profile ────────────────────────────────────────────
        results.append(_test_accounts(client))

    return results


def _test_balance(client: CoincheckClient) -> dict:
    name = "Account: Balance"
    try:
        balance = client.get_balance()
        for field in BALANCE_FIELDS:
            assert isinstance(getattr(balance, field), str), f"{field} is not text"
        return _pass(name, f"jpy={balance.jpy}, btc={balance.btc}, reserved_jpy={balance.jpy_reserved}")

    except Exception as e:
        return _fail(name, str(e))


def _test_leverage_balance(client: CoincheckClient) -> dict:
    name = "Account: Leverage Balance"
    try:
        lev = client.get_leverage_balance()
        for field, kind in LEVERAGE_BALANCE_FIELDS.items():
            assert isinstance(getattr(lev, field), kind), f"{field} is not {kind.__name__}"
        return _pass(name, f"margin=¥{lev.margin_jpy:.0f}, available=¥{lev.margin_available_jpy}, "
                           f"level={lev.margin_level or 'n/a'}")

    except Exception as e:
        return _fail(name, str(e))


def _test_accounts(client: CoincheckClient) -> dict:
    name = "Account: Profile"
    try:
        accounts = client.get_accounts()
        assert accounts.id > 0, "Account id missing"
        missing = [f for f in ACCOUNTS_FIELDS if getattr(accounts, f) in ("", None)]
        detail = f"id={accounts.id}, status={accounts.identity_status}, taker={accounts.taker_fee}"
        if missing:
            detail += f" (empty: {', '.join(missing)})"
        return _pass(name, detail)

    except Exception as e:
        return _fail(name, str(e))


# ── Result Helpers ───────────────────────────────────────────────────────────


def _pass(name: str, detail: str = "") -> dict:
    return {"name": name, "passed": True, "detail": detail}


def _fail(name: str, reason: str) -> dict:
    return {"name": name, "passed": False, "detail": reason}
