"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from ibtida.domain.hijri import HijriMethod

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    api_token: str
    default_timezone: str = "UTC"
    hijri_method: HijriMethod = HijriMethod.CIVIL
    streak_lookback_days: int = 60
    request_timeout_seconds: float = 10.0
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
