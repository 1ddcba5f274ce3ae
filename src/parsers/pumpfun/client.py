"""Pump.fun frontend API client — single coin lookup by mint."""

import httpx
from loguru import logger
from pydantic import ValidationError as PydanticValidationError

from config.settings import settings
from src.parsers.pumpfun.models import PumpfunCoin
from src.scoring.exceptions import NotFoundError, UpstreamError


class PumpfunClient:
    """Async HTTP client for Pump.fun frontend API (free, no key).

    One attempt per call; retry policy belongs to the caller.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.pumpfun_base_url,
            timeout=timeout or settings.http_timeout_sec,
            headers={
                "Accept": "application/json",
                "User-Agent": settings.pumpfun_user_agent,
            },
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def get_coin(self, mint: str) -> PumpfunCoin:
        """Fetch the raw coin record.

        Raises NotFoundError on 404, UpstreamError on any other failure.
        """
        try:
            resp = await self._client.get(f"/coins/{mint}")
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"[PUMPFUN] {type(e).__name__} for {mint[:12]}: {e}")
            raise UpstreamError(str(e) or None) from e

        if resp.status_code == 404:
            raise NotFoundError()

        if not resp.is_success:
            logger.debug(f"[PUMPFUN] HTTP {resp.status_code} for {mint[:12]}")
            raise UpstreamError(f"Pump.fun API error: {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as e:
            raise UpstreamError("Pump.fun API returned invalid JSON") from e

        # Empty body means no record for this mint
        if not isinstance(data, dict) or not data:
            raise NotFoundError()

        try:
            return PumpfunCoin.model_validate(data)
        except PydanticValidationError as e:
            logger.debug(f"[PUMPFUN] Malformed record for {mint[:12]}: {e}")
            raise UpstreamError("Pump.fun API returned a malformed record") from e
