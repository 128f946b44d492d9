"""Pure mapping from snapshots and failures to view states."""

from __future__ import annotations

from dataclasses import replace

from ..location.models import (
    Coordinates,
    EmptyLocationResult,
    LocationDisabled,
    LocationOther,
    LocationPermissionDenied,
    LocationUnsupported,
)
from ..weather.models import (
    NO_DESCRIPTION,
    ApiOtherError,
    EmptyResponse,
    NetworkError,
    RequestTimeout,
    ResponseParseError,
    WeatherSnapshot,
)
from .models import (
    IDLE_TRIGGER_TEXT,
    LOADING_TRIGGER_TEXT,
    DisplayError,
    Failure,
    UnexpectedError,
    WeatherViewState,
)


def failure_message(failure: Failure) -> str:
    """Return the user-facing text for one failure variant."""
    if isinstance(failure, LocationUnsupported):
        return "Geolocation is not supported on this device."
    if isinstance(failure, LocationDisabled):
        return "Geolocation is not enabled. Please enable location services."
    if isinstance(failure, LocationPermissionDenied):
        return "Location permission denied. Please grant location permissions."
    if isinstance(failure, LocationOther):
        return f"Location error: {failure.detail}"
    if isinstance(failure, EmptyLocationResult):
        return "Could not get your location. Please enable location permissions."
    if isinstance(failure, NetworkError):
        return "Network error. Check internet connection."
    if isinstance(failure, RequestTimeout):
        return "Request timed out. Try again."
    if isinstance(failure, EmptyResponse):
        return "Could not get weather data. Please check your internet connection and API key."
    if isinstance(failure, ResponseParseError):
        return "Error parsing weather data from server."
    if isinstance(failure, ApiOtherError):
        return f"API error: {failure.detail}"
    if isinstance(failure, DisplayError):
        return "Error displaying weather information."
    if isinstance(failure, UnexpectedError):
        return f"Error: {failure.detail}"
    raise TypeError(f"Unhandled failure variant: {type(failure).__name__}")


def capitalize_first(text: str) -> str:
    """Upper-case the first character only; empty text becomes the placeholder."""
    if not text:
        return NO_DESCRIPTION
    return text[0].upper() + text[1:]


def format_wind(speed: float | None) -> str:
    return f"Wind: {speed or 0:g} m/s"


def begin_loading(state: WeatherViewState) -> WeatherViewState:
    """Enter Loading: spinner on, trigger disabled, previous error hidden."""
    return replace(
        state,
        loading=True,
        trigger_enabled=False,
        trigger_text=LOADING_TRIGGER_TEXT,
        error_visible=False,
    )


def end_loading(state: WeatherViewState) -> WeatherViewState:
    return replace(
        state,
        loading=False,
        trigger_enabled=True,
        trigger_text=IDLE_TRIGGER_TEXT,
    )


def render_location(state: WeatherViewState, coordinates: Coordinates) -> WeatherViewState:
    return replace(
        state,
        location_text=f"Location: {coordinates.latitude:.2f}, {coordinates.longitude:.2f}",
    )


def render_snapshot(state: WeatherViewState, snapshot: WeatherSnapshot) -> WeatherViewState:
    """Success state: all detail strings written, error hidden."""
    city = snapshot.location_name
    if snapshot.country:
        city = f"{city}, {snapshot.country}"
    return replace(
        state,
        city_text=city,
        temperature_text=f"{round(snapshot.temperature_c)}°C",
        description_text=capitalize_first(snapshot.description),
        feels_like_text=f"Feels like {round(snapshot.feels_like_c)}°C",
        humidity_text=f"Humidity: {snapshot.humidity_pct}%",
        wind_text=format_wind(snapshot.wind_speed_ms),
        details_visible=True,
        error_text="",
        error_visible=False,
    )


def render_failure(state: WeatherViewState, failure: Failure) -> WeatherViewState:
    """Error state: one message shown, details hidden."""
    return replace(
        state,
        error_text=failure_message(failure),
        error_visible=True,
        details_visible=False,
    )
