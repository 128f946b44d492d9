"""Presentation layer: view-state models, presenter and terminal screen."""

from .models import (
    DisplayError,
    Failure,
    UnexpectedError,
    WeatherScreen,
    WeatherViewState,
)
from .presenter import failure_message, render_failure, render_snapshot
from .terminal_screen import TerminalWeatherScreen

__all__ = [
    "DisplayError",
    "Failure",
    "TerminalWeatherScreen",
    "UnexpectedError",
    "WeatherScreen",
    "WeatherViewState",
    "failure_message",
    "render_failure",
    "render_snapshot",
]
