"""Tests for snapshot/failure to view-state mapping."""

from __future__ import annotations

from typing import Any

import pytest

from current_weather.location.models import (
    Coordinates,
    EmptyLocationResult,
    LocationDisabled,
    LocationOther,
    LocationPermissionDenied,
    LocationUnsupported,
)
from current_weather.ui.models import (
    IDLE_TRIGGER_TEXT,
    LOADING_TRIGGER_TEXT,
    DisplayError,
    UnexpectedError,
    WeatherViewState,
)
from current_weather.ui.presenter import (
    begin_loading,
    capitalize_first,
    end_loading,
    failure_message,
    format_wind,
    render_failure,
    render_location,
    render_snapshot,
)
from current_weather.weather.models import (
    ApiOtherError,
    EmptyResponse,
    NetworkError,
    RequestTimeout,
    ResponseParseError,
    WeatherSnapshot,
)


def _snapshot(**overrides: Any) -> WeatherSnapshot:
    values: dict[str, Any] = {
        "location_name": "San Francisco",
        "country": "US",
        "temperature_c": 18.3,
        "feels_like_c": 17.9,
        "humidity_pct": 72,
        "description": "overcast clouds",
        "wind_speed_ms": 3.1,
    }
    values.update(overrides)
    return WeatherSnapshot(**values)


def test_render_snapshot_writes_all_detail_strings() -> None:
    state = render_snapshot(WeatherViewState(), _snapshot())

    assert state.city_text == "San Francisco, US"
    assert state.temperature_text == "18°C"
    assert state.description_text == "Overcast clouds"
    assert state.feels_like_text == "Feels like 18°C"
    assert state.humidity_text == "Humidity: 72%"
    assert state.wind_text == "Wind: 3.1 m/s"
    assert state.details_visible is True
    assert state.error_visible is False


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (18.3, "18°C"),
        (17.9, "18°C"),
        (-0.4, "0°C"),
        (-2.6, "-3°C"),
        (2.5, "2°C"),
        (3.5, "4°C"),
        (30.0, "30°C"),
    ],
)
def test_temperatures_round_to_nearest_integer(value: float, expected: str) -> None:
    state = render_snapshot(WeatherViewState(), _snapshot(temperature_c=value, feels_like_c=value))
    assert state.temperature_text == expected
    assert state.feels_like_text == f"Feels like {expected}"


@pytest.mark.parametrize("humidity", [0, 7, 72, 100])
def test_humidity_is_shown_verbatim(humidity: int) -> None:
    state = render_snapshot(WeatherViewState(), _snapshot(humidity_pct=humidity))
    assert state.humidity_text == f"Humidity: {humidity}%"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("clear sky", "Clear sky"),
        ("Light rain", "Light rain"),
        ("x", "X"),
        ("éclaircies", "Éclaircies"),
        ("", "No description"),
    ],
)
def test_capitalize_first(text: str, expected: str) -> None:
    assert capitalize_first(text) == expected


def test_empty_description_renders_placeholder() -> None:
    state = render_snapshot(WeatherViewState(), _snapshot(description=""))
    assert state.description_text == "No description"


def test_city_line_without_country() -> None:
    state = render_snapshot(WeatherViewState(), _snapshot(location_name="Oslo", country=None))
    assert state.city_text == "Oslo"


@pytest.mark.parametrize(
    ("speed", "expected"),
    [(3.1, "Wind: 3.1 m/s"), (5.0, "Wind: 5 m/s"), (0.0, "Wind: 0 m/s"), (None, "Wind: 0 m/s")],
)
def test_format_wind(speed: float | None, expected: str) -> None:
    assert format_wind(speed) == expected


def test_render_location_uses_two_decimals() -> None:
    state = render_location(WeatherViewState(), Coordinates(latitude=37.7749, longitude=-122.4194))
    assert state.location_text == "Location: 37.77, -122.42"


@pytest.mark.parametrize(
    ("failure", "message"),
    [
        (LocationUnsupported(), "Geolocation is not supported on this device."),
        (
            LocationDisabled(),
            "Geolocation is not enabled. Please enable location services.",
        ),
        (
            LocationPermissionDenied(),
            "Location permission denied. Please grant location permissions.",
        ),
        (LocationOther(detail="gps exploded"), "Location error: gps exploded"),
        (
            EmptyLocationResult(),
            "Could not get your location. Please enable location permissions.",
        ),
        (NetworkError(detail="refused"), "Network error. Check internet connection."),
        (RequestTimeout(timeout_seconds=30.0), "Request timed out. Try again."),
        (
            EmptyResponse(),
            "Could not get weather data. Please check your internet connection and API key.",
        ),
        (ResponseParseError(detail="bad"), "Error parsing weather data from server."),
        (ApiOtherError(detail="HTTP 401"), "API error: HTTP 401"),
        (DisplayError(detail="nan"), "Error displaying weather information."),
        (UnexpectedError(detail="boom"), "Error: boom"),
    ],
)
def test_failure_messages(failure: Any, message: str) -> None:
    assert failure_message(failure) == message


def test_unknown_failure_variant_raises() -> None:
    with pytest.raises(TypeError, match="Unhandled failure variant"):
        failure_message(object())  # type: ignore[arg-type]


def test_success_and_error_states_are_mutually_exclusive() -> None:
    success = render_snapshot(WeatherViewState(), _snapshot())
    failed = render_failure(success, NetworkError(detail="refused"))
    assert failed.error_visible is True
    assert failed.details_visible is False
    assert failed.error_text == "Network error. Check internet connection."

    recovered = render_snapshot(failed, _snapshot())
    assert recovered.error_visible is False
    assert recovered.details_visible is True


def test_loading_toggles_trigger_and_hides_previous_error() -> None:
    failed = render_failure(WeatherViewState(), EmptyResponse())
    loading = begin_loading(failed)
    assert loading.loading is True
    assert loading.trigger_enabled is False
    assert loading.trigger_text == LOADING_TRIGGER_TEXT
    assert loading.error_visible is False

    idle = end_loading(loading)
    assert idle.loading is False
    assert idle.trigger_enabled is True
    assert idle.trigger_text == IDLE_TRIGGER_TEXT


def test_non_finite_temperature_cannot_be_displayed() -> None:
    with pytest.raises(ValueError):
        render_snapshot(WeatherViewState(), _snapshot(temperature_c=float("nan")))
