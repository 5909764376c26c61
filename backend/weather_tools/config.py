"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - The OpenWeather API key comes from the environment (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box locally
    - Empty API key is allowed at startup: requests still reach OpenWeather and
      come back as in-band {"error": ...}; the readiness probe reports it
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # OpenWeather
    openweather_api_key: str = ""
    openweather_base_url: str = "https://api.openweathermap.org"
    openweather_units: str = "metric"

    @field_validator("openweather_base_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        if isinstance(v, str):
            return v.rstrip("/")
        return v

    # Outbound calls have no retry; the timeout is the only bound
    upstream_timeout_seconds: float = 30.0

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
