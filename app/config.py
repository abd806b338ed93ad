"""Application configuration via pydantic-settings."""

from __future__ import annotations

from functools import lru_cache
from typing import List, Literal, Optional

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Dar Booking"
    app_version: str = "1.0.0"
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    api_prefix: str = "/api/v1"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    workers: int = 4

    # Database (external store, read-only from this service)
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: str = Field(default="postgres")
    postgres_db: str = "postgres"
    db_pool_size: int = 10
    db_max_overflow: int = 5
    db_pool_timeout: int = 10

    @computed_field
    @property
    def database_url(self) -> str:
        """Async PostgreSQL connection URL."""
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    # Redis (currency preference store)
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_password: Optional[str] = None
    redis_db: int = 0

    @computed_field
    @property
    def redis_url(self) -> str:
        """Redis connection URL."""
        auth = f":{self.redis_password}@" if self.redis_password else ""
        return f"redis://{auth}{self.redis_host}:{self.redis_port}/{self.redis_db}"

    # Currency display
    base_currency: str = "TND"
    display_locale: str = "fr_TN"
    currency_preference_key: str = "selectedCurrency"

    # Payment gateway (Konnect)
    konnect_api_url: str = "https://api.sandbox.konnect.network/api/v2"
    konnect_api_key: Optional[str] = None
    konnect_receiver_wallet_id: Optional[str] = None
    konnect_payment_methods: List[str] = ["bank_card", "wallet", "e-DINAR"]
    konnect_success_url: str = "http://localhost:5173/payment/success"
    konnect_fail_url: str = "http://localhost:5173/payment/fail"
    konnect_timeout_seconds: float = 30.0

    # CORS
    cors_origins: List[str] = ["http://localhost:5173", "http://localhost:3000"]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
