"""
Domain value objects and lookup errors.

Everything here is transient: built for one lookup and thrown away once
the response is serialized.  Provider payloads are converted into these
objects at the infrastructure boundary, so the lookup logic never touches
raw provider JSON.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from .enums import DistanceUnit


# ── Errors ────────────────────────────────────────────────────────────


class RoadLookupError(Exception):
    """Base class for failures that end a lookup with an HTTP status."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(RoadLookupError):
    """Malformed or out-of-range coordinates."""

    status_code = 400

    def __init__(self, message: str = "Invalid coordinates provided"):
        super().__init__(message)


class NotFound(RoadLookupError):
    """The provider could not snap the point to any road."""

    status_code = 404

    def __init__(self, message: str = "No nearby roads found"):
        super().__init__(message)


class ProviderFailure(RoadLookupError):
    """Network, parsing or unexpected-state failure while looking up a road."""

    status_code = 500

    def __init__(self, reason: str):
        super().__init__(f"Internal server error: {reason}")
        self.reason = reason


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float

    def is_valid(self) -> bool:
        """Latitude in [-90, 90] and longitude in [-180, 180]."""
        if math.isnan(self.latitude) or math.isnan(self.longitude):
            return False
        return -90 <= self.latitude <= 90 and -180 <= self.longitude <= 180


@dataclass(frozen=True)
class SnappedPoint:
    location: Location
    original_index: Optional[int] = None
    place_id: Optional[str] = None


@dataclass(frozen=True)
class AddressComponent:
    long_name: str
    short_name: Optional[str] = None
    types: tuple[str, ...] = ()

    def has_type(self, type_tag: str) -> bool:
        return type_tag in self.types


@dataclass(frozen=True)
class AddressResult:
    address_components: tuple[AddressComponent, ...] = ()
    formatted_address: Optional[str] = None
    place_id: Optional[str] = None


@dataclass(frozen=True)
class RoadDetails:
    road_name: Optional[str] = None
    road_type: Optional[str] = None


@dataclass(frozen=True)
class RoadMatch:
    """Outcome of a successful lookup."""

    distance: float
    snapped: Location
    road: RoadDetails = field(default_factory=RoadDetails)
    unit: DistanceUnit = DistanceUnit.METERS
