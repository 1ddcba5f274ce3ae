"""Data models for Pump.fun frontend API responses."""

from pydantic import BaseModel


class PumpfunCoin(BaseModel):
    """Raw coin record from /coins/{mint}.

    The API is untrusted: any field may be null or missing.
    """

    mint: str | None = None
    name: str | None = None
    symbol: str | None = None
    description: str | None = None
    image_uri: str | None = None
    twitter: str | None = None
    telegram: str | None = None
    website: str | None = None
    creator: str | None = None
    bonding_curve: str | None = None
    raydium_pool: str | None = None
    created_timestamp: int | None = None  # ms since epoch
    complete: bool | None = None
    virtual_sol_reserves: float | None = None  # lamports
    virtual_token_reserves: float | None = None
    total_supply: float | None = None
    king_of_the_hill_timestamp: int | None = None
    market_cap: float | None = None
    usd_market_cap: float | None = None
    reply_count: int | None = None
    nsfw: bool | None = None

    model_config = {"extra": "ignore"}

    @property
    def has_liquidity_marker(self) -> bool:
        """Pump.fun coins have a bonding curve, or a Raydium pool once migrated."""
        return bool(self.bonding_curve or self.raydium_pool)
