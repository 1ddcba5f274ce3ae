"""FastAPI dependency injection — outbound clients owned by the app lifespan."""

from __future__ import annotations

from fastapi import Request

from src.parsers.pumpfun.client import PumpfunClient
from src.parsers.sol_price import SolPriceSource


def get_pumpfun(request: Request) -> PumpfunClient:
    return request.app.state.pumpfun


def get_price_source(request: Request) -> SolPriceSource:
    return request.app.state.sol_price
