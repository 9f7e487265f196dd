from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, AnyHttpUrl, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.clients.azure_maps import AZURE_MAPS_CURRENT_CONDITIONS_URL


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="APP_",
        case_sensitive=False,
        extra="ignore",
    )

    env: str = Field(default="development")
    debug: bool = Field(default=False)
    docs_enabled: bool = Field(default=True)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")

    cors_origins: list[str] = Field(default_factory=list)
    trusted_hosts: list[str] = Field(default_factory=lambda: ["localhost", "127.0.0.1"])

    azure_maps_subscription_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "azure_maps_subscription_key",
            "APP_AZURE_MAPS_SUBSCRIPTION_KEY",
            "AZURE_MAPS_SUBSCRIPTION_KEY",
        ),
    )
    azure_maps_base_url: AnyHttpUrl = Field(default=AZURE_MAPS_CURRENT_CONDITIONS_URL)
    weather_timeout_seconds: float = Field(default=10.0, gt=0.0, le=30.0)

    api_rate_limit_max: int = Field(default=100, ge=1, le=100_000)
    page_rate_limit_max: int = Field(default=200, ge=1, le=100_000)
    rate_limit_window_seconds: int = Field(default=15 * 60, ge=1, le=24 * 60 * 60)

    @property
    def is_production(self) -> bool:
        return self.env.lower() == "production"

    @property
    def weather_provider_configured(self) -> bool:
        return bool(self.azure_maps_subscription_key and self.azure_maps_subscription_key.strip())


def load_settings() -> Settings:
    settings = Settings()
    if not settings.cors_origins:
        settings.cors_origins = ["http://localhost:3000", "http://localhost:8000"]
    return settings
