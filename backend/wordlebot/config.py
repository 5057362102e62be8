"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - Only the FastAPI lifespan and the Alembic env read settings; components
      get plain values

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - award_service_token defaults to a placeholder: the award reporter treats
      it as "not configured" and skips the call
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://wordle:wordle@db:5432/wordle"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres hands out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 10
    database_max_overflow: int = 5

    # Answer service (read-only, third party)
    answer_service_url: str = "https://www.nytimes.com/svc/wordle/v2"

    # Award service (operator-owned)
    award_service_url: str = ""
    award_service_token: str = "bot-token-placeholder"
    award_token_header: str = "X-Bot-Token"

    # Both outbound calls share one bounded timeout
    http_timeout_seconds: float = 10.0

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
