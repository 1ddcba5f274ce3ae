"""Shared test fixtures."""

import time

import pytest

from src.parsers.pumpfun.models import PumpfunCoin

MINT = "7xKXtg2CW87d97TXJSDpbD5jBkheTqA83TZRuJosgAsU"


@pytest.fixture
def now_ms() -> int:
    return int(time.time() * 1000)


@pytest.fixture
def coin_payload(now_ms: int) -> dict:
    """Raw /coins/{mint} body for a healthy, 90-minute-old token."""
    return {
        "mint": MINT,
        "name": "Test Coin",
        "symbol": "TEST",
        "description": "A test coin",
        "image_uri": "https://ipfs.io/ipfs/test",
        "twitter": "https://x.com/testcoin",
        "telegram": None,
        "website": None,
        "bonding_curve": "BondingCurve111111111111111111111111111111",
        "raydium_pool": None,
        "created_timestamp": now_ms - 90 * 60_000,
        "complete": False,
        "virtual_sol_reserves": 40_000_000_000,  # 40 SOL
        "virtual_token_reserves": 800_000_000_000_000,
        "total_supply": 1_000_000_000_000_000,
        "king_of_the_hill_timestamp": None,
        "market_cap": 45.5,
        "usd_market_cap": 30_000.0,
        "reply_count": 20,
        "nsfw": False,
        "show_name": True,
    }


@pytest.fixture
def coin(coin_payload: dict) -> PumpfunCoin:
    return PumpfunCoin.model_validate(coin_payload)
