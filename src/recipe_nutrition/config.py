"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    fdc_api_key: str | None = None
    fdc_base_url: str = "https://api.nal.usda.gov/fdc/v1"
    fdc_timeout_seconds: float = 8.0
    fdc_retry_attempts: int = 1
    use_external_lookup: bool = True
    lookup_concurrency: int = 4
    recipe_deadline_seconds: float | None = 30.0
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    seed_cache: bool = True
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def supabase_configured(self) -> bool:
        """Return True when both Supabase credentials are present."""
        return bool(self.supabase_url and self.supabase_service_key)
