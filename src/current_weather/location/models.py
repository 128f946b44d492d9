"""Typed coordinates and location-stage failure variants."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


class Coordinates(BaseModel):
    """A (latitude, longitude) pair in signed degrees."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


@dataclass(frozen=True, slots=True)
class LocationUnsupported:
    """The host has no location capability."""


@dataclass(frozen=True, slots=True)
class LocationDisabled:
    """The location capability exists but is switched off."""


@dataclass(frozen=True, slots=True)
class LocationPermissionDenied:
    """The user has not granted location access."""


@dataclass(frozen=True, slots=True)
class LocationOther:
    """Any other location service error."""

    detail: str


@dataclass(frozen=True, slots=True)
class EmptyLocationResult:
    """The service answered (or timed out) without a position."""


LocationFailure = (
    LocationUnsupported
    | LocationDisabled
    | LocationPermissionDenied
    | LocationOther
    | EmptyLocationResult
)
