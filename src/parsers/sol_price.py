"""SOL/USD reference price via CoinGecko with a short TTL cache.

Used to convert bonding-curve reserves (lamports) into USD liquidity.
Never raises: on any failure the last cached price is kept, or the
configured fallback is returned when nothing was ever fetched.
"""

import time
from collections.abc import Callable

import httpx
from loguru import logger

from config.settings import settings


class SolPriceSource:
    """Cached SOL/USD price lookup."""

    def __init__(
        self,
        url: str | None = None,
        ttl_sec: float | None = None,
        fallback_usd: float | None = None,
        timeout: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._url = url or settings.coingecko_price_url
        self._ttl = settings.sol_price_ttl_sec if ttl_sec is None else ttl_sec
        self._fallback = fallback_usd or settings.sol_price_fallback_usd
        self._clock = clock
        self._client = httpx.AsyncClient(
            timeout=timeout or settings.http_timeout_sec,
            headers={"Accept": "application/json"},
        )
        self._price: float | None = None
        self._fetched_at = 0.0

    async def close(self) -> None:
        await self._client.aclose()

    @property
    def cached_price(self) -> float | None:
        return self._price

    async def get_price(self) -> float:
        """Return SOL/USD, hitting CoinGecko at most once per TTL window."""
        now = self._clock()
        if self._price is not None and now - self._fetched_at < self._ttl:
            return self._price

        price = await self._fetch()
        if price is not None:
            self._price = price
            self._fetched_at = now
            logger.debug(f"[SOL_PRICE] Updated via CoinGecko: ${price:.2f}")
            return price

        if self._price is not None:
            logger.debug(f"[SOL_PRICE] No update, using cached: ${self._price:.2f}")
            return self._price

        logger.debug(f"[SOL_PRICE] No price available, using fallback: ${self._fallback:.2f}")
        return self._fallback

    async def _fetch(self) -> float | None:
        params = {"ids": "solana", "vs_currencies": "usd"}
        try:
            resp = await self._client.get(self._url, params=params)
        except httpx.HTTPError as e:
            logger.debug(f"[SOL_PRICE] CoinGecko failed: {type(e).__name__}: {e}")
            return None

        if resp.status_code != 200:
            logger.debug(f"[SOL_PRICE] CoinGecko HTTP {resp.status_code}")
            return None

        try:
            data = resp.json()
        except ValueError:
            logger.debug("[SOL_PRICE] CoinGecko returned invalid JSON")
            return None

        return _parse_price(data)


def _parse_price(data: object) -> float | None:
    """Extract data["solana"]["usd"], None if missing or non-positive."""
    if not isinstance(data, dict):
        return None
    solana = data.get("solana")
    if not isinstance(solana, dict):
        return None
    try:
        price = float(solana.get("usd") or 0)
    except (TypeError, ValueError):
        return None
    return price if price > 0 else None
