"""Trigger-driven location -> weather -> display pipeline."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Protocol

from .location.models import Coordinates, LocationFailure
from .redaction import sanitize_text
from .ui.models import DisplayError, Failure, UnexpectedError, WeatherScreen, WeatherViewState
from .ui.presenter import (
    begin_loading,
    end_loading,
    render_failure,
    render_location,
    render_snapshot,
)
from .weather.models import WeatherFailure, WeatherSnapshot


class CoordinateSource(Protocol):
    async def resolve(self) -> Coordinates | LocationFailure: ...


class WeatherSource(Protocol):
    async def fetch(self, lat: float, lon: float) -> WeatherSnapshot | WeatherFailure: ...


class WeatherFetchPipeline:
    """Runs the three stages in order, once per trigger.

    The first failing stage ends the invocation and its failure is shown;
    nothing raised by a stage escapes `run()`. A trigger that arrives while
    an invocation is outstanding is dropped.
    """

    def __init__(
        self,
        *,
        location_provider: CoordinateSource,
        weather_client: WeatherSource,
        screen: WeatherScreen,
        logger: logging.Logger,
    ) -> None:
        self.location_provider = location_provider
        self.weather_client = weather_client
        self.screen = screen
        self.logger = logger
        self.state = WeatherViewState()
        self._in_flight = False

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    async def run(self) -> WeatherViewState | None:
        """Handle one trigger; returns the settled state, or None if suppressed."""
        if self._in_flight:
            self.logger.warning("Weather request already in flight; trigger ignored.")
            return None

        self._in_flight = True
        try:
            with self._loading():
                await self._run_stages()
        finally:
            self._in_flight = False
        return self.state

    @contextmanager
    def _loading(self) -> Iterator[None]:
        self._push(begin_loading(self.state))
        try:
            yield
        finally:
            self._push(end_loading(self.state))

    async def _run_stages(self) -> None:
        try:
            location = await self.location_provider.resolve()
            if not isinstance(location, Coordinates):
                self._show_failure(location)
                return
            self._push(render_location(self.state, location))

            weather = await self.weather_client.fetch(location.latitude, location.longitude)
            if not isinstance(weather, WeatherSnapshot):
                self._show_failure(weather)
                return
            self._display(weather)
        except Exception as exc:
            self.logger.exception("Weather pipeline error: %s", exc)
            detail = sanitize_text(str(exc)) or type(exc).__name__
            self._show_failure(UnexpectedError(detail=detail))

    def _display(self, snapshot: WeatherSnapshot) -> None:
        try:
            state = render_snapshot(self.state, snapshot)
        except (ArithmeticError, ValueError, TypeError) as exc:
            self.logger.error("Error displaying weather data: %s", exc)
            self._show_failure(DisplayError(detail=str(exc)))
            return
        self._push(state)
        self.logger.info("Weather data displayed successfully.")

    def _show_failure(self, failure: Failure) -> None:
        self._push(render_failure(self.state, failure))
        self.logger.warning("Error shown to user: %s", self.state.error_text)

    def _push(self, state: WeatherViewState) -> None:
        self.state = state
        try:
            self.screen.render(state)
        except Exception:
            self.logger.exception("Screen failed to render view state.")
