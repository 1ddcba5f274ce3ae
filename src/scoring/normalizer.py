"""Pump.fun coin record -> TokenMetrics.

This is the only place where unknown (None) upstream values become zeros.
"""

import time

from src.parsers.pumpfun.models import PumpfunCoin
from src.scoring.exceptions import NotFoundError, UnsupportedAssetError
from src.scoring.models import TokenMetrics

LAMPORTS_PER_SOL = 1_000_000_000
MS_PER_MINUTE = 60_000


def normalize(
    coin: PumpfunCoin | None,
    sol_price_usd: float,
    now_ms: int | None = None,
) -> TokenMetrics:
    """Convert a raw coin record into canonical metrics.

    Args:
        coin: Record from the Pump.fun API, None if the provider had none.
        sol_price_usd: Reference price; accepted as-is, no freshness check.
        now_ms: Current time in ms since epoch (defaults to wall clock).

    Raises:
        NotFoundError: No record.
        UnsupportedAssetError: No bonding curve and no Raydium pool.
    """
    if coin is None:
        raise NotFoundError()
    if not coin.has_liquidity_marker:
        raise UnsupportedAssetError()

    if now_ms is None:
        now_ms = int(time.time() * 1000)

    # Unknown creation time and negative age (clock skew) both score as brand new
    if coin.created_timestamp is None:
        age_minutes = 0.0
    else:
        age_minutes = (now_ms - coin.created_timestamp) / MS_PER_MINUTE

    market_cap = coin.usd_market_cap or 0.0
    if not market_cap and (coin.market_cap or 0) > 0:
        market_cap = coin.market_cap

    sol_reserves = (coin.virtual_sol_reserves or 0) / LAMPORTS_PER_SOL
    liquidity = max(0.0, sol_reserves * sol_price_usd)

    return TokenMetrics(
        symbol=coin.symbol or "",
        name=coin.name or "",
        age_minutes=age_minutes,
        market_cap_usd=max(0.0, float(market_cap)),
        liquidity_usd=liquidity,
        reply_count=max(0, coin.reply_count or 0),
        has_social_link=bool(coin.twitter or coin.telegram or coin.website),
        bonding_curve_complete=bool(coin.complete),
        is_flagged_unsafe=bool(coin.nsfw),
        reached_peak_status=bool(coin.king_of_the_hill_timestamp),
    )
