"""Typed settings loader for the weather screen."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import AnyUrl, Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError
from .location.base import GeolocationAccuracy

# The endpoint only ever receives this unit system.
WEATHER_UNITS = "metric"


class Settings(BaseSettings):
    """Application settings loaded from environment variables and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    openweather_api_key: str = Field(alias="OPENWEATHER_API_KEY", repr=False)
    openweather_base_url: AnyUrl = Field(
        default=AnyUrl("https://api.openweathermap.org/data/2.5/weather"),
        alias="OPENWEATHER_BASE_URL",
    )
    weather_user_agent: str = Field(default="OpenWeatherApp/1.0", alias="WEATHER_USER_AGENT")
    weather_timeout_seconds: float = Field(default=30.0, alias="WEATHER_TIMEOUT_SECONDS")

    location_provider: Literal["ip", "static", "none"] = Field(
        default="ip",
        alias="LOCATION_PROVIDER",
    )
    location_timeout_seconds: float = Field(default=10.0, alias="LOCATION_TIMEOUT_SECONDS")
    location_accuracy: GeolocationAccuracy = Field(
        default=GeolocationAccuracy.MEDIUM,
        alias="LOCATION_ACCURACY",
    )
    location_permission_granted: bool = Field(
        default=True,
        alias="LOCATION_PERMISSION_GRANTED",
    )
    location_static_lat: float | None = Field(default=None, alias="LOCATION_STATIC_LAT")
    location_static_lon: float | None = Field(default=None, alias="LOCATION_STATIC_LON")
    ip_geolocation_url: AnyUrl = Field(
        default=AnyUrl("https://ipapi.co/json/"),
        alias="IP_GEOLOCATION_URL",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        alias="LOG_LEVEL",
    )

    @field_validator("location_static_lat", "location_static_lon", mode="before")
    @classmethod
    def empty_string_to_none(cls, value: Any) -> Any:
        """Treat empty env-string values as unset optional coordinates."""
        if isinstance(value, str) and value.strip() == "":
            return None
        return value

    @field_validator("location_accuracy", mode="before")
    @classmethod
    def normalize_accuracy(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @model_validator(mode="after")
    def validate_values(self) -> Settings:
        """Cross-field validation for timeouts and coordinates."""
        if not self.openweather_api_key.strip():
            raise ValueError("OPENWEATHER_API_KEY must not be empty.")
        if not self.weather_user_agent.strip():
            raise ValueError("WEATHER_USER_AGENT must not be empty.")
        if self.weather_timeout_seconds <= 0:
            raise ValueError("WEATHER_TIMEOUT_SECONDS must be > 0.")
        if self.location_timeout_seconds <= 0:
            raise ValueError("LOCATION_TIMEOUT_SECONDS must be > 0.")

        has_lat = self.location_static_lat is not None
        has_lon = self.location_static_lon is not None
        if has_lat != has_lon:
            raise ValueError("LOCATION_STATIC_LAT and LOCATION_STATIC_LON must be set together.")
        if has_lat and not (-90 <= self.location_static_lat <= 90):
            raise ValueError("LOCATION_STATIC_LAT must be between -90 and 90.")
        if has_lon and not (-180 <= self.location_static_lon <= 180):
            raise ValueError("LOCATION_STATIC_LON must be between -180 and 180.")
        return self

    def safe_summary(self) -> dict[str, Any]:
        """Return config summary safe for logging (no credentials)."""
        return {
            "base_url": str(self.openweather_base_url),
            "units": WEATHER_UNITS,
            "user_agent": self.weather_user_agent,
            "weather_timeout_seconds": self.weather_timeout_seconds,
            "location_provider": self.location_provider,
            "location_timeout_seconds": self.location_timeout_seconds,
            "location_accuracy": self.location_accuracy.value,
            "location_permission_granted": self.location_permission_granted,
            "has_static_location": self.location_static_lat is not None,
            "log_level": self.log_level,
        }


def load_settings() -> Settings:
    """Load and validate settings, raising ConfigError on failure."""
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Failed reading environment/.env: {exc}") from exc
