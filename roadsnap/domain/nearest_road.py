"""
Nearest-road lookup
===================

Flow per request
----------------
1. Validate the requested point.
2. Snap it to the nearest road (provider).  No snapped points => 404.
3. Haversine distance from the requested point to the first snapped point.
4. Reverse-geocode the snapped point (provider).
5. Read the road name / type from the first address result.

The provider is an abstract interface so the flow can run against an
in-memory fake in tests and against Google Maps in production.

Road type
---------
``road_type`` is the first type tag of a component tagged
``street_address``.  That is not a real road classification, but it is
what clients of this endpoint have always received, so it is kept.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from .distance import haversine_m
from .entities import (
    AddressResult,
    InvalidInput,
    Location,
    NotFound,
    ProviderFailure,
    RoadDetails,
    RoadLookupError,
    RoadMatch,
    SnappedPoint,
)
from .enums import AddressComponentType

logger = logging.getLogger(__name__)


# ── Provider interface ────────────────────────────────────────────────


class GeolocationProvider(ABC):
    @property
    def is_configured(self) -> bool:
        return True

    @abstractmethod
    async def snap_to_road(self, point: Location) -> list[SnappedPoint]: ...

    @abstractmethod
    async def reverse_geocode(self, point: Location) -> list[AddressResult]: ...


# ── Road details ──────────────────────────────────────────────────────


def extract_road_details(results: Optional[Sequence[AddressResult]]) -> RoadDetails:
    """Road name and type from the first reverse-geocoding result.

    Later matching components overwrite earlier ones.
    """
    if not results:
        return RoadDetails()

    road_name: Optional[str] = None
    road_type: Optional[str] = None
    for component in results[0].address_components:
        if component.has_type(AddressComponentType.ROUTE.value):
            road_name = component.long_name
        if component.has_type(AddressComponentType.STREET_ADDRESS.value):
            road_type = component.types[0]
    return RoadDetails(road_name=road_name, road_type=road_type)


# ── Lookup facade ─────────────────────────────────────────────────────


class NearestRoadFinder:
    """High-level API used by the HTTP route."""

    def __init__(self, provider: GeolocationProvider):
        self.provider = provider

    async def find(self, location: Location) -> RoadMatch:
        if not location.is_valid():
            raise InvalidInput()

        try:
            return await self._lookup(location)
        except RoadLookupError:
            raise
        except Exception as exc:
            logger.exception(
                "Road lookup failed for (%s, %s)",
                location.latitude,
                location.longitude,
            )
            raise ProviderFailure(str(exc)) from exc

    async def _lookup(self, location: Location) -> RoadMatch:
        snapped_points = await self.provider.snap_to_road(location)
        if not snapped_points:
            logger.warning(
                "No road near (%s, %s)", location.latitude, location.longitude
            )
            raise NotFound()

        nearest = snapped_points[0].location
        distance = haversine_m(
            location.latitude,
            location.longitude,
            nearest.latitude,
            nearest.longitude,
        )

        results = await self.provider.reverse_geocode(nearest)
        road = extract_road_details(results)

        logger.info(
            "Snapped (%s, %s) -> (%s, %s), %.1f m, road=%s",
            location.latitude,
            location.longitude,
            nearest.latitude,
            nearest.longitude,
            distance,
            road.road_name,
        )
        return RoadMatch(distance=distance, snapped=nearest, road=road)
