"""Centralised application settings loaded from environment / .env file."""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Geolocation provider
    google_maps_api_key: Optional[str] = None
    provider_timeout_seconds: int = 10
    snap_interpolate: bool = False  # Roads API returns the nearest point only

    # API
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False
    rate_limit: str = "100/minute"
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
