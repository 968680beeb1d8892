"""Application configuration."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from core.models.config import ASX_SYMBOLS


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Ticker universe
    symbols: list[str] = list(ASX_SYMBOLS)
    history_length: int = 60  # daily points generated per symbol

    # Refresh cadence for the simulated "live" snapshot
    refresh_interval: float = 60.0  # seconds
    random_seed: int | None = None  # fixed seed makes snapshots reproducible

    # Backtest shown on the dashboard
    backtest_days: int = 7
    backtest_symbol_count: int = 15

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
