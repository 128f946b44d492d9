"""Location stage: host location services and the coordinate provider."""

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
from .provider import LocationProvider
from .services import (
    IPGeolocationService,
    StaticLocationService,
    UnavailableLocationService,
    build_location_service,
)

__all__ = [
    "Coordinates",
    "EmptyLocationResult",
    "GeolocationAccuracy",
    "IPGeolocationService",
    "LocationDisabled",
    "LocationFailure",
    "LocationOther",
    "LocationPermissionDenied",
    "LocationProvider",
    "LocationRequest",
    "LocationService",
    "LocationUnsupported",
    "StaticLocationService",
    "UnavailableLocationService",
    "build_location_service",
]
