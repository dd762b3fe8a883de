"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Settings are validated at load time.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings have defaults; validate_api_key rejects an enabled
    API key check without a configured key.
    """

    # App
    app_name: str = "orgchart"
    app_version: str = "1.0.0"
    debug: bool = False
    api_prefix: str = "/api/v1"

    # Database (SQLAlchemy async + Alembic)
    database_url: str = ""
    database_echo: bool = False
    # Optional pool/driver overrides (None = use defaults in database.py)
    db_pool_size: int | None = None
    db_max_overflow: int | None = None
    db_command_timeout: int | None = None

    # CORS
    allowed_origins: str = "http://localhost:5173"

    # API key (X-API-Key); disabled by default for local development
    api_key_enabled: bool = False
    api_key: SecretStr | None = None
    api_key_header: str = "X-API-Key"

    # Request / middleware
    request_timeout_seconds: int = 30
    request_id_header: str = "X-Request-ID"

    # Hierarchy traversal caps
    hierarchy_max_depth: int = 64
    hierarchy_max_nodes: int = 10_000

    # Pagination
    default_page_size: int = 10
    max_page_size: int = 100

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_api_key(self) -> "Settings":
        """Require API_KEY when API_KEY_ENABLED is true."""
        if self.api_key_enabled and (
            self.api_key is None or not self.api_key.get_secret_value()
        ):
            raise ValueError(
                "API_KEY is required when API_KEY_ENABLED is true. "
                "Set in environment or .env file."
            )
        if self.hierarchy_max_depth < 1 or self.hierarchy_max_nodes < 1:
            raise ValueError("HIERARCHY_MAX_DEPTH and HIERARCHY_MAX_NODES must be positive")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.
    """
    return Settings()
