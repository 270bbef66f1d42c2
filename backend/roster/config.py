"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - The user store URL never ends with a slash (paths are appended as "/users")

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults target a local json-server on :3000 and a local SQLite session file
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # External user store
    user_store_url: str = "http://localhost:3000"
    user_store_timeout_seconds: float = 10.0

    @field_validator("user_store_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        if isinstance(v, str):
            return v.rstrip("/")
        return v

    # Persisted session
    database_url: str = "sqlite+aiosqlite:///./roster.db"

    # API
    cors_origins: list[str] = ["http://localhost:5173"]
    csv_filename: str = "users.csv"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
