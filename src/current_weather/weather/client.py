"""OpenWeather current-conditions client."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import ValidationError

from ..config import WEATHER_UNITS
from ..redaction import sanitize_text
from .models import (
    ApiOtherError,
    EmptyResponse,
    NetworkError,
    OpenWeatherResponse,
    RequestTimeout,
    ResponseParseError,
    WeatherFailure,
    WeatherSnapshot,
    fold_keys,
)

if TYPE_CHECKING:
    from ..config import Settings


class OpenWeatherClient:
    """Issues exactly one GET per fetch and classifies the outcome.

    Failures come back as values from `WeatherFailure`; nothing is retried
    and nothing is cached.
    """

    def __init__(
        self,
        settings: Settings,
        logger: logging.Logger,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings
        self.logger = logger
        self._base_url = str(settings.openweather_base_url)
        self._api_key = settings.openweather_api_key
        self._timeout = settings.weather_timeout_seconds
        self._client = httpx.AsyncClient(
            timeout=self._timeout,
            headers={"User-Agent": settings.weather_user_agent},
            transport=transport,
        )

    async def __aenter__(self) -> OpenWeatherClient:
        return self

    async def __aexit__(self, exc_type: Any, exc: Any, exc_tb: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def fetch(self, lat: float, lon: float) -> WeatherSnapshot | WeatherFailure:
        """Fetch current conditions for one coordinate pair."""
        params = {"lat": lat, "lon": lon, "appid": self._api_key, "units": WEATHER_UNITS}
        self.logger.info("Requesting current weather for %s, %s", lat, lon)

        try:
            # Bounds connect and response together; httpx timeouts are per phase.
            response = await asyncio.wait_for(
                self._client.get(self._base_url, params=params),
                timeout=self._timeout,
            )
            response.raise_for_status()
        except (TimeoutError, httpx.TimeoutException) as exc:
            self.logger.warning(
                "Request timeout after %.1fs: %s", self._timeout, type(exc).__name__
            )
            return RequestTimeout(timeout_seconds=self._timeout)
        except httpx.HTTPStatusError as exc:
            detail = self._status_detail(exc.response)
            self.logger.warning("Weather API returned error status: %s", detail)
            return ApiOtherError(detail=detail)
        except httpx.TransportError as exc:
            detail = sanitize_text(str(exc)) or type(exc).__name__
            self.logger.warning("Network error: %s", detail)
            return NetworkError(detail=detail)
        except Exception as exc:
            detail = sanitize_text(str(exc)) or type(exc).__name__
            self.logger.error("General API error: %s", detail)
            return ApiOtherError(detail=detail)

        return self._parse(response)

    def _parse(self, response: httpx.Response) -> WeatherSnapshot | WeatherFailure:
        body = response.text
        if not body.strip():
            self.logger.warning("Empty response from weather API.")
            return EmptyResponse()

        try:
            payload = response.json()
        except ValueError as exc:
            self.logger.warning("JSON parsing error: %s", exc)
            return ResponseParseError(detail=f"invalid JSON: {exc}")
        if not isinstance(payload, dict):
            detail = f"unexpected payload type {type(payload).__name__}"
            self.logger.warning("JSON parsing error: %s", detail)
            return ResponseParseError(detail=detail)

        try:
            parsed = OpenWeatherResponse.model_validate(fold_keys(payload))
        except ValidationError as exc:
            detail = f"{exc.error_count()} field error(s): " + "; ".join(
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in exc.errors()
            )
            self.logger.warning("JSON parsing error: %s", detail)
            return ResponseParseError(detail=detail)

        snapshot = parsed.to_snapshot()
        self.logger.info("Successfully parsed weather data for: %s", snapshot.location_name)
        return snapshot

    @staticmethod
    def _status_detail(response: httpx.Response) -> str:
        message: str | None = None
        try:
            payload = response.json()
        except ValueError:
            payload = None
        if isinstance(payload, dict) and isinstance(payload.get("message"), str):
            message = payload["message"]
        detail = f"HTTP {response.status_code}"
        if message:
            detail = f"{detail} {sanitize_text(message)}"
        return detail
