"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for the provider
credentials, the HTTP transport defaults and the logging setup.

Configuration can be overridden via environment variables:
- ARCGIS_TOKEN=<authentication token>
- ARCGIS_SOURCE_COUNTRY=USA
- ARCGIS_HTTP_TIMEOUT_SECONDS=5
- ARCGIS_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ArcGISConfig(BaseSettings):
    """ArcGIS World Geocoding Service credentials and biasing.

    Environment variables prefixed with ARCGIS_.
    Instances are frozen once built.
    """

    model_config = SettingsConfigDict(env_prefix="ARCGIS_", frozen=True)

    token: Optional[SecretStr] = None
    source_country: Optional[str] = None

    @field_validator("source_country")
    @classmethod
    def _blank_country_is_unset(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        return value.strip()


class HttpConfig(BaseSettings):
    """HTTP transport configuration.

    Environment variables prefixed with ARCGIS_HTTP_.
    """

    model_config = SettingsConfigDict(env_prefix="ARCGIS_HTTP_")

    timeout_seconds: float = 10.0
    user_agent: str = "arcgis-list-geocoder"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with ARCGIS_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="ARCGIS_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

        config = get_config()
        print(config.arcgis.source_country)
        print(config.http.timeout_seconds)

    Environment variables prefixed with ARCGIS_APP_.
    """

    model_config = SettingsConfigDict(env_prefix="ARCGIS_APP_")

    arcgis: ArcGISConfig = Field(default_factory=ArcGISConfig)
    http: HttpConfig = Field(default_factory=HttpConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
