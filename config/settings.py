from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Pump.fun frontend API (free, no key)
    pumpfun_base_url: str = "https://frontend-api.pump.fun"
    pumpfun_user_agent: str = "OBUS-Trader/1.0"

    # CoinGecko simple price (SOL/USD reference price)
    coingecko_price_url: str = "https://api.coingecko.com/api/v3/simple/price"
    sol_price_fallback_usd: float = 180.0  # used when CoinGecko is unreachable
    sol_price_ttl_sec: float = 60.0

    # Outbound HTTP
    http_timeout_sec: float = 10.0

    # Mint address validation (base58, inclusive bounds)
    mint_min_length: int = 32
    mint_max_length: int = 50

    # HTTP API
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    api_rate_limit: str = "30/minute"
    api_debug: bool = False
    api_cors_origins: str = "http://localhost:3000"  # comma-separated


settings = Settings()
