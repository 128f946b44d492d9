"""Location service implementations available to a terminal host."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import ValidationError

from ..exceptions import (
    FeatureNotEnabledError,
    FeatureNotSupportedError,
    LocationPermissionError,
    LocationServiceError,
)
from ..redaction import sanitize_text
from .base import GeolocationAccuracy, LocationRequest, LocationService
from .models import Coordinates

if TYPE_CHECKING:
    from ..config import Settings


class IPGeolocationService(LocationService):
    """Resolves an approximate position from the host's public IP address."""

    # IP lookups resolve to a city at best.
    max_accuracy = GeolocationAccuracy.MEDIUM

    def __init__(
        self,
        settings: Settings,
        logger: logging.Logger,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings
        self.logger = logger
        self._url = str(settings.ip_geolocation_url)
        self._permission_granted = settings.location_permission_granted
        self._client = httpx.AsyncClient(
            headers={
                "Accept": "application/json",
                "User-Agent": settings.weather_user_agent,
            },
            transport=transport,
        )

    async def get_location(self, request: LocationRequest) -> Coordinates | None:
        if not self._permission_granted:
            raise LocationPermissionError("Network location lookup has not been permitted.")
        if request.accuracy.rank > self.max_accuracy.rank:
            raise FeatureNotSupportedError(
                f"IP geolocation cannot satisfy '{request.accuracy.value}' accuracy."
            )

        try:
            response = await self._client.get(self._url, timeout=request.timeout_seconds)
            response.raise_for_status()
        except httpx.TimeoutException:
            self.logger.warning(
                "IP geolocation did not answer within %.1fs.", request.timeout_seconds
            )
            return None
        except httpx.HTTPStatusError as exc:
            raise LocationServiceError(
                f"IP geolocation failed with status {exc.response.status_code}."
            ) from exc
        except httpx.HTTPError as exc:
            raise LocationServiceError(
                f"IP geolocation request failed: {sanitize_text(str(exc)) or type(exc).__name__}"
            ) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise LocationServiceError("IP geolocation returned non-JSON response.") from exc
        if not isinstance(payload, dict):
            raise LocationServiceError(
                f"IP geolocation returned unexpected payload type {type(payload).__name__}."
            )
        if payload.get("error"):
            reason = payload.get("reason") or payload.get("message") or "unknown reason"
            raise LocationServiceError(f"IP geolocation rejected lookup: {reason}")

        return self._extract_coordinates(payload)

    def _extract_coordinates(self, payload: dict[str, Any]) -> Coordinates | None:
        # ipapi.co uses latitude/longitude, ip-api.com uses lat/lon.
        lat = payload.get("latitude", payload.get("lat"))
        lon = payload.get("longitude", payload.get("lon"))
        if not isinstance(lat, (int, float)) or not isinstance(lon, (int, float)):
            self.logger.info("IP geolocation payload carried no coordinates.")
            return None
        try:
            return Coordinates(latitude=float(lat), longitude=float(lon))
        except ValidationError as exc:
            raise LocationServiceError(
                f"IP geolocation returned out-of-range coordinates ({lat}, {lon})."
            ) from exc

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> IPGeolocationService:
        return self

    async def __aexit__(self, exc_type: Any, exc: Any, exc_tb: Any) -> None:
        await self.aclose()


class StaticLocationService(LocationService):
    """Reports a fixed, operator-configured position."""

    def __init__(self, latitude: float | None, longitude: float | None) -> None:
        self._coordinates = (
            Coordinates(latitude=latitude, longitude=longitude)
            if latitude is not None and longitude is not None
            else None
        )

    async def get_location(self, request: LocationRequest) -> Coordinates | None:
        if self._coordinates is None:
            raise FeatureNotEnabledError(
                "Static location selected but LOCATION_STATIC_LAT/LON are not set."
            )
        return self._coordinates


class UnavailableLocationService(LocationService):
    """Stands in for hosts without any location capability."""

    async def get_location(self, request: LocationRequest) -> Coordinates | None:
        raise FeatureNotSupportedError("No location provider is configured on this host.")


def build_location_service(settings: Settings, logger: logging.Logger) -> LocationService:
    """Select the location service named by LOCATION_PROVIDER."""
    if settings.location_provider == "ip":
        return IPGeolocationService(settings=settings, logger=logger)
    if settings.location_provider == "static":
        return StaticLocationService(
            latitude=settings.location_static_lat,
            longitude=settings.location_static_lon,
        )
    return UnavailableLocationService()
