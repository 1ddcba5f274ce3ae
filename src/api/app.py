"""FastAPI application factory for the token score API."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from starlette.middleware.cors import CORSMiddleware

from config.settings import settings
from src.api.middleware import SecurityHeadersMiddleware
from src.parsers.pumpfun.client import PumpfunClient
from src.parsers.sol_price import SolPriceSource
from src.scoring.exceptions import ScoreError

VERSION = "0.1.0"

# Rate limiter (shared instance, applied to every route)
limiter = Limiter(key_func=get_remote_address, default_limits=[settings.api_rate_limit])


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Own the outbound HTTP clients for the lifetime of the app."""
    app.state.pumpfun = PumpfunClient()
    app.state.sol_price = SolPriceSource()
    logger.info("Score API ready")
    try:
        yield
    finally:
        await app.state.pumpfun.close()
        await app.state.sol_price.close()


async def score_error_handler(request: Request, exc: ScoreError) -> JSONResponse:
    """Render any ScoreError as {"error": message} with its status code."""
    if exc.status_code >= 500:
        logger.error(f"[API] {request.url.path} failed: {exc.message}")
    else:
        logger.warning(f"[API] {request.url.path} rejected ({exc.status_code}): {exc.message}")
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""
    app = FastAPI(
        title="Pump.fun Token Score API",
        version=VERSION,
        docs_url="/api/docs" if settings.api_debug else None,
        redoc_url=None,
        openapi_url="/api/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
    )

    # Rate limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    app.add_exception_handler(ScoreError, score_error_handler)

    # Security headers
    app.add_middleware(SecurityHeadersMiddleware)

    origins = [o.strip() for o in settings.api_cors_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    from src.api.routers.health import router as health_router
    from src.api.routers.score import router as score_router

    app.include_router(health_router)
    app.include_router(score_router)

    return app
