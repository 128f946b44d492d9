"""Typed view-state and display failure models for the weather screen."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from ..location.models import LocationFailure
from ..weather.models import WeatherFailure

IDLE_TRIGGER_TEXT = "Get Current Weather"
LOADING_TRIGGER_TEXT = "Getting Weather..."


@dataclass(frozen=True, slots=True)
class WeatherViewState:
    """Everything one screen shows; replaced wholesale on every transition."""

    loading: bool = False
    trigger_enabled: bool = True
    trigger_text: str = IDLE_TRIGGER_TEXT
    location_text: str = ""
    city_text: str = ""
    temperature_text: str = ""
    description_text: str = ""
    feels_like_text: str = ""
    humidity_text: str = ""
    wind_text: str = ""
    error_text: str = ""
    error_visible: bool = False
    details_visible: bool = False


@dataclass(frozen=True, slots=True)
class DisplayError:
    """A fetched snapshot could not be turned into display strings."""

    detail: str


@dataclass(frozen=True, slots=True)
class UnexpectedError:
    """Anything that escaped the stage-level classification."""

    detail: str


Failure = LocationFailure | WeatherFailure | DisplayError | UnexpectedError


class WeatherScreen(Protocol):
    """Sink that draws view states; the pipeline never touches widgets."""

    def render(self, state: WeatherViewState) -> None: ...
