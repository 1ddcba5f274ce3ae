"""End-to-end token analysis: validate, fetch, normalize, score.

Price and coin record are fetched concurrently; neither depends on the other.
"""

import asyncio
from dataclasses import dataclass
from typing import Any

from loguru import logger

from src.parsers.pumpfun.client import PumpfunClient
from src.parsers.sol_price import SolPriceSource
from src.scoring.engine import score
from src.scoring.models import ScoreReport, TokenMetrics
from src.scoring.normalizer import normalize
from src.scoring.validation import validate_mint


@dataclass(frozen=True)
class TokenAnalysis:
    """Flat result record handed to the API/CLI."""

    mint_address: str
    symbol: str
    name: str
    image_url: str
    metrics: TokenMetrics
    report: ScoreReport
    sol_price_usd: float = 0.0

    @property
    def dev_sold_percent(self) -> int:
        # Not exposed by Pump.fun; a completed curve implies the dev exited
        return 100 if self.metrics.bonding_curve_complete else 0

    @property
    def bundle_percent(self) -> int:
        return 0  # not derivable from the Pump.fun API

    def to_dict(self) -> dict[str, Any]:
        return {
            "symbol": self.symbol,
            "name": self.name,
            "imageUrl": self.image_url,
            "mintAddress": self.mint_address,
            "score": self.report.score,
            "grade": self.report.grade.value,
            "metrics": {
                "marketCap": round(self.metrics.market_cap_usd),
                "liquidity": round(self.metrics.liquidity_usd),
                "holders": self.metrics.holders,
                "ageMinutes": self.metrics.age_minutes,
                "devSoldPercent": self.dev_sold_percent,
                "bundlePercent": self.bundle_percent,
            },
            "risks": list(self.report.risks),
            "positives": list(self.report.positives),
        }


async def analyze_token(
    mint: str | None,
    pumpfun: PumpfunClient,
    price_source: SolPriceSource,
    now_ms: int | None = None,
) -> TokenAnalysis:
    """Score a Pump.fun token by mint address.

    Raises the ScoreError subclasses from validation, fetch and normalization.
    At most one fetch per collaborator, no retries.
    """
    mint = validate_mint(mint)

    sol_price, coin = await asyncio.gather(
        price_source.get_price(),
        pumpfun.get_coin(mint),
    )

    metrics = normalize(coin, sol_price, now_ms=now_ms)
    report = score(metrics)

    logger.info(
        f"[SCORE] {metrics.symbol or mint[:12]}: {report.score} ({report.grade.value}) "
        f"mcap=${metrics.market_cap_usd:,.0f} liq=${metrics.liquidity_usd:,.0f} "
        f"age={metrics.age_minutes:.1f}m"
    )

    return TokenAnalysis(
        mint_address=mint,
        symbol=metrics.symbol,
        name=metrics.name,
        image_url=coin.image_uri or "",
        metrics=metrics,
        report=report,
        sol_price_usd=sol_price,
    )
