"""Typed models for the OpenWeather current-conditions payload."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

NO_DESCRIPTION = "No description"


def fold_keys(value: Any) -> Any:
    """Lower-case every mapping key so field matching ignores case."""
    if isinstance(value, dict):
        return {str(key).lower(): fold_keys(child) for key, child in value.items()}
    if isinstance(value, list):
        return [fold_keys(item) for item in value]
    return value


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore")


class MainData(_Payload):
    temp: float
    feels_like: float
    humidity: int


class ConditionData(_Payload):
    description: str | None = None


class WindData(_Payload):
    speed: float | None = None


class SysData(_Payload):
    country: str | None = None


class OpenWeatherResponse(_Payload):
    """Raw `/data/2.5/weather` response, keys already case-folded."""

    name: str | None = None
    main: MainData
    weather: list[ConditionData] | None = None
    wind: WindData | None = None
    sys: SysData | None = None

    def to_snapshot(self) -> WeatherSnapshot:
        description: str | None = None
        if self.weather:
            description = self.weather[0].description
        wind_speed = self.wind.speed if self.wind and self.wind.speed is not None else 0.0
        return WeatherSnapshot(
            location_name=self.name or "",
            country=self.sys.country if self.sys else None,
            temperature_c=self.main.temp,
            feels_like_c=self.main.feels_like,
            humidity_pct=self.main.humidity,
            description=NO_DESCRIPTION if description is None else description,
            wind_speed_ms=wind_speed,
        )


class WeatherSnapshot(BaseModel):
    """Immutable conditions for one query, discarded after rendering."""

    model_config = ConfigDict(frozen=True)

    location_name: str = ""
    country: str | None = None
    temperature_c: float
    feels_like_c: float
    humidity_pct: int
    description: str = NO_DESCRIPTION
    wind_speed_ms: float = Field(default=0.0)


@dataclass(frozen=True, slots=True)
class NetworkError:
    """DNS, connection, TLS or other transport failure."""

    detail: str


@dataclass(frozen=True, slots=True)
class RequestTimeout:
    """The whole request did not finish inside the timeout."""

    timeout_seconds: float


@dataclass(frozen=True, slots=True)
class EmptyResponse:
    """The server answered with an empty or whitespace-only body."""


@dataclass(frozen=True, slots=True)
class ResponseParseError:
    """Body was not JSON or did not match the expected shape."""

    detail: str


@dataclass(frozen=True, slots=True)
class ApiOtherError:
    """Anything else, including non-2xx statuses."""

    detail: str


WeatherFailure = (
    NetworkError | RequestTimeout | EmptyResponse | ResponseParseError | ApiOtherError
)
