"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables or .env (never hardcoded in code paths)
    - get_settings() is cached (lru_cache): single instance per process
    - database_url is always an async SQLAlchemy URL once validated

Design Decisions:
    - DATABASE_URL wins when set; otherwise the URL is composed from the
      DATABASE_HOST/PORT/USER/PASSWORD/NAME parts
"""

from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from coinshop.core.domain_types import DEFAULT_STARTING_COINS


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = ""
    database_host: str = "db"
    database_port: int = 5432
    database_user: str = "shop"
    database_password: str = "shop"
    database_name: str = "shop"
    database_pool_size: int = 20
    database_max_overflow: int = 10

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting platforms hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    @model_validator(mode="after")
    def compose_database_url(self) -> "Settings":
        if not self.database_url:
            self.database_url = (
                f"postgresql+asyncpg://{self.database_user}:"
                f"{self.database_password}@{self.database_host}:"
                f"{self.database_port}/{self.database_name}"
            )
        return self

    # Tokens
    jwt_secret_key: str = "secret"
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 24 * 60

    # Accounts
    starting_coins: int = DEFAULT_STARTING_COINS

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
