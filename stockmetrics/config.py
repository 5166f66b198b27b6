from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ==============================
    # Application
    # ==============================
    APP_NAME: str = "Stock Metrics Service"
    ENVIRONMENT: str = "local"

    # ==============================
    # Database
    # ==============================
    DATABASE_URL: str = "sqlite:///./inventory.db"

    # ==============================
    # Logging
    # ==============================
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # ==============================
    # Reporting
    # ==============================
    # "local", "utc" or an IANA zone name such as "Asia/Karachi"
    REPORTING_TZ: str = "local"
    DEFAULT_REORDER_POINT: int = 10
    RECENT_TRANSACTIONS_LIMIT: int = 5

    # ==============================
    # Enrichment
    # ==============================
    ENRICHMENT_CONCURRENCY: int = 8


@lru_cache
def get_settings() -> Settings:
    """Cached settings loader (once per process)."""
    return Settings()


__all__ = ["Settings", "get_settings"]
