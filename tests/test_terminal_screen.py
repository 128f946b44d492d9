"""Tests for rich rendering of settled view states."""

from __future__ import annotations

from rich.console import Console

from current_weather.ui.models import WeatherViewState
from current_weather.ui.presenter import begin_loading, end_loading, render_failure
from current_weather.ui.terminal_screen import TerminalWeatherScreen
from current_weather.weather.models import RequestTimeout

SUCCESS_STATE = WeatherViewState(
    location_text="Location: 37.77, -122.42",
    city_text="San Francisco, US",
    temperature_text="18°C",
    description_text="Overcast clouds",
    feels_like_text="Feels like 18°C",
    humidity_text="Humidity: 72%",
    wind_text="Wind: 3.1 m/s",
    details_visible=True,
)


def test_success_state_prints_details_panel() -> None:
    console = Console(record=True, width=80)
    screen = TerminalWeatherScreen(console=console)

    screen.render(SUCCESS_STATE)

    output = console.export_text()
    assert "Current Weather" in output
    assert "San Francisco, US" in output
    assert "18°C" in output
    assert "Overcast clouds" in output
    assert "Humidity: 72%" in output
    assert "Wind: 3.1 m/s" in output


def test_error_state_prints_error_banner_only() -> None:
    console = Console(record=True, width=80)
    screen = TerminalWeatherScreen(console=console)

    screen.render(render_failure(SUCCESS_STATE, RequestTimeout(timeout_seconds=30.0)))

    output = console.export_text()
    assert "Request timed out. Try again." in output
    assert "Current Weather" not in output
    assert "San Francisco, US" not in output


def test_idle_state_prints_nothing() -> None:
    console = Console(record=True, width=80)
    screen = TerminalWeatherScreen(console=console)

    assert screen.build_panel(WeatherViewState()) is None
    screen.render(WeatherViewState())
    assert console.export_text() == ""


def test_loading_state_defers_output_until_settled() -> None:
    console = Console(record=True, width=80)
    screen = TerminalWeatherScreen(console=console)

    loading = begin_loading(SUCCESS_STATE)
    screen.render(loading)
    assert screen.last_state == loading

    settled = end_loading(loading)
    screen.render(settled)
    output = console.export_text()
    assert output.count("Current Weather") == 1
    assert screen.last_state == settled
