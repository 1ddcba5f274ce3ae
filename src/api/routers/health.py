"""Health check — no auth required."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.api.dependencies import get_price_source
from src.parsers.sol_price import SolPriceSource

router = APIRouter(prefix="/api/v1", tags=["health"])


class HealthResponse(BaseModel):
    status: str
    version: str
    sol_price_usd: float | None = None


@router.get("/health", response_model=HealthResponse)
async def health_check(
    price_source: SolPriceSource = Depends(get_price_source),
) -> HealthResponse:
    """Liveness plus the last SOL price seen (None until first score request)."""
    from src.api.app import VERSION

    return HealthResponse(
        status="ok",
        version=VERSION,
        sol_price_usd=price_source.cached_price,
    )
