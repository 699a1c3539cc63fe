"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Every setting has a default usable for local development.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env."""

    # App
    app_name: str = "todo-api"
    app_version: str = "1.0.0"
    debug: bool = False
    port: int = 5000

    # Database (PostgreSQL via asyncpg)
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "root"
    db_password: SecretStr = SecretStr("rootpassword")
    db_name: str = "tododb"
    database_echo: bool = False
    db_pool_size: int = 10
    # Startup gate: total connection attempts and delay (seconds) between them
    db_connect_attempts: int = 10
    db_connect_retry_delay: float = 5.0

    # CORS
    allowed_origins: str = "*"

    # Request / middleware
    request_id_header: str = "X-Request-ID"

    # Client-facing API base URL (used by todo_api.client)
    api_base_url: str = "http://localhost:5000/api"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_pool_and_retry(self) -> "Settings":
        """Reject settings that would make the startup gate or pool unusable."""
        if self.db_pool_size < 1:
            raise ValueError(f"db_pool_size must be at least 1, got: {self.db_pool_size}")
        if self.db_connect_attempts < 1:
            raise ValueError(
                f"db_connect_attempts must be at least 1, got: {self.db_connect_attempts}"
            )
        if self.db_connect_retry_delay < 0:
            raise ValueError(
                f"db_connect_retry_delay must not be negative, got: {self.db_connect_retry_delay}"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    In tests, call get_settings.cache_clear() before overriding env vars so
    the next get_settings() uses the new values.
    """
    return Settings()
