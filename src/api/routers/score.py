"""Token score endpoint."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query

from src.api.dependencies import get_price_source, get_pumpfun
from src.parsers.pumpfun.client import PumpfunClient
from src.parsers.sol_price import SolPriceSource
from src.scoring.service import analyze_token

router = APIRouter(prefix="/api", tags=["score"])


@router.get("/score")
async def get_score(
    mint: str | None = Query(None, description="Pump.fun token mint address"),
    pumpfun: PumpfunClient = Depends(get_pumpfun),
    price_source: SolPriceSource = Depends(get_price_source),
) -> dict[str, Any]:
    """Score a Pump.fun token. Errors are rendered by the ScoreError handler."""
    analysis = await analyze_token(mint, pumpfun, price_source)
    return analysis.to_dict()
