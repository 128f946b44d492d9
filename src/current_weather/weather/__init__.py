"""Weather stage: OpenWeather client and parsed snapshot models."""

from .client import OpenWeatherClient
from .models import (
    NO_DESCRIPTION,
    ApiOtherError,
    EmptyResponse,
    NetworkError,
    OpenWeatherResponse,
    RequestTimeout,
    ResponseParseError,
    WeatherFailure,
    WeatherSnapshot,
)

__all__ = [
    "NO_DESCRIPTION",
    "ApiOtherError",
    "EmptyResponse",
    "NetworkError",
    "OpenWeatherClient",
    "OpenWeatherResponse",
    "RequestTimeout",
    "ResponseParseError",
    "WeatherFailure",
    "WeatherSnapshot",
]
