"""First pipeline stage: turn the host location capability into coordinates."""

from __future__ import annotations

import asyncio
import logging

from ..exceptions import FeatureNotEnabledError, FeatureNotSupportedError, LocationPermissionError
from ..redaction import sanitize_text
from .base import GeolocationAccuracy, LocationRequest, LocationService
from .models import (
    Coordinates,
    EmptyLocationResult,
    LocationDisabled,
    LocationFailure,
    LocationOther,
    LocationPermissionDenied,
    LocationUnsupported,
)


class LocationProvider:
    """Single-attempt position lookup that never raises service errors."""

    def __init__(
        self,
        service: LocationService,
        logger: logging.Logger,
        *,
        accuracy: GeolocationAccuracy = GeolocationAccuracy.MEDIUM,
        timeout_seconds: float = 10.0,
    ) -> None:
        self.service = service
        self.logger = logger
        self.request = LocationRequest(accuracy=accuracy, timeout_seconds=timeout_seconds)

    async def resolve(self) -> Coordinates | LocationFailure:
        """Query the service once and classify whatever went wrong."""
        try:
            coordinates = await asyncio.wait_for(
                self.service.get_location(self.request),
                timeout=self.request.timeout_seconds,
            )
        except FeatureNotSupportedError as exc:
            self.logger.warning("Geolocation not supported: %s", exc)
            return LocationUnsupported()
        except FeatureNotEnabledError as exc:
            self.logger.warning("Geolocation not enabled: %s", exc)
            return LocationDisabled()
        except LocationPermissionError as exc:
            self.logger.warning("Location permission denied: %s", exc)
            return LocationPermissionDenied()
        except TimeoutError:
            self.logger.warning(
                "Location lookup timed out after %.1fs.", self.request.timeout_seconds
            )
            return EmptyLocationResult()
        except Exception as exc:
            detail = sanitize_text(str(exc)) or type(exc).__name__
            self.logger.warning("Location error: %s", detail)
            return LocationOther(detail=detail)

        if coordinates is None:
            self.logger.warning("Location service returned no position.")
            return EmptyLocationResult()

        self.logger.info(
            "Location obtained: %s, %s", coordinates.latitude, coordinates.longitude
        )
        return coordinates
