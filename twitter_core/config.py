"""Client Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - App credentials come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - Settings are read-only input: clients copy what they need at construction

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box against api.twitter.com
"""

from functools import lru_cache

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings from TWITTER_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TWITTER_",
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    # App credentials
    consumer_key: str = ""
    consumer_secret: SecretStr = SecretStr("")

    # Hosts
    api_base_url: str = "https://api.twitter.com"
    upload_base_url: str = "https://upload.twitter.com"

    @field_validator("api_base_url", "upload_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    # Transport
    http_timeout_seconds: float = Field(default=30.0, gt=0)
    http_connect_timeout_seconds: float = Field(default=10.0, gt=0)
    # Connect-level retries only (httpx.HTTPTransport); no HTTP-level retry
    http_connect_retries: int = Field(default=0, ge=0, le=10)
    user_agent: str = Field(default="twitter-core-python/4.0.0", min_length=1)
    verify_tls: bool = True

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
