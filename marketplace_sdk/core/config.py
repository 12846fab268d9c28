"""SDK configuration (settings and environment).

Single source of truth for gateway connection settings. Uses pydantic-settings
with .env support and the PLATFORM_ prefix, e.g. PLATFORM_API_URL.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """SDK settings loaded from environment and .env.

    Marketplace apps only need api_url in most deployments. Everything else
    tunes the HTTP transport or logging.
    """

    # Gateway (platform API).
    # In-cluster: http://platform-api.platform-api.svc.cluster.local:8080
    api_url: str = "http://localhost:8080"

    # Transport
    http_timeout_seconds: float = 30.0
    # Connection-level retries only (httpx.HTTPTransport); 0 = no retry
    connect_retries: int = 0

    # Upload defaults
    default_source_service: str = "unknown"

    debug: bool = False

    model_config = SettingsConfigDict(
        env_prefix="PLATFORM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_transport(self) -> "Settings":
        """Validate gateway URL scheme and transport limits."""
        if not self.api_url.startswith(("http://", "https://")):
            raise ValueError(
                f"PLATFORM_API_URL must start with http:// or https://, got: {self.api_url!r}"
            )
        if self.http_timeout_seconds < 0:
            raise ValueError("PLATFORM_HTTP_TIMEOUT_SECONDS must not be negative")
        if self.connect_retries < 0:
            raise ValueError("PLATFORM_CONNECT_RETRIES must not be negative")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached SDK settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
