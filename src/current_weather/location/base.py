"""Host location subsystem interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from .models import Coordinates


class GeolocationAccuracy(str, Enum):
    """Requested accuracy tiers, coarsest first."""

    LOWEST = "lowest"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    BEST = "best"

    @property
    def rank(self) -> int:
        return list(GeolocationAccuracy).index(self)


@dataclass(frozen=True, slots=True)
class LocationRequest:
    """One position query handed to a location service."""

    accuracy: GeolocationAccuracy = GeolocationAccuracy.MEDIUM
    timeout_seconds: float = 10.0


class LocationService(ABC):
    """Base contract for the device's location capability.

    Implementations return `None` when the subsystem answered without a
    position and raise `FeatureNotSupportedError`, `FeatureNotEnabledError`
    or `LocationPermissionError` for the matching host conditions. Any other
    exception is treated as an opaque location error by the caller.
    """

    @abstractmethod
    async def get_location(self, request: LocationRequest) -> Coordinates | None:
        """Return the current position."""

    async def aclose(self) -> None:
        """Release service resources."""
