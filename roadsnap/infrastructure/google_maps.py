"""
Google Maps geolocation provider.

Wraps the blocking ``googlemaps`` client (Roads API ``snapToRoads`` and
Geocoding API reverse geocoding).  Calls are pushed to the Starlette
thread pool so they do not block the event loop.

The client is built with ``retry_over_query_limit=False`` and a
``retry_timeout`` equal to the request timeout, so a failing call is
reported instead of being retried for the library's default 60 s.

Without a usable API key the provider is still constructed, but every
lookup fails with ``ProviderFailure``.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import googlemaps
from fastapi.concurrency import run_in_threadpool

from roadsnap.config import Settings, settings as default_settings
from roadsnap.domain.entities import (
    AddressComponent,
    AddressResult,
    Location,
    ProviderFailure,
    SnappedPoint,
)
from roadsnap.domain.nearest_road import GeolocationProvider

logger = logging.getLogger(__name__)

NOT_CONFIGURED = "Geolocation provider is not configured"


class GoogleMapsProvider(GeolocationProvider):
    def __init__(
        self,
        client: Optional[googlemaps.Client],
        interpolate: bool = False,
        unavailable_reason: str = NOT_CONFIGURED,
    ):
        self.client = client
        self.interpolate = interpolate
        self.unavailable_reason = unavailable_reason

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "GoogleMapsProvider":
        settings = settings or default_settings
        if not settings.google_maps_api_key:
            logger.warning("GOOGLE_MAPS_API_KEY not set - road lookups will fail")
            return cls(None)

        try:
            client = googlemaps.Client(
                key=settings.google_maps_api_key,
                timeout=settings.provider_timeout_seconds,
                retry_timeout=settings.provider_timeout_seconds,
                retry_over_query_limit=False,
            )
        except ValueError as exc:
            logger.error("Google Maps client rejected configuration: %s", exc)
            return cls(None, unavailable_reason=str(exc))

        logger.info(
            "Google Maps client initialised (timeout=%ds)",
            settings.provider_timeout_seconds,
        )
        return cls(client, interpolate=settings.snap_interpolate)

    @property
    def is_configured(self) -> bool:
        return self.client is not None

    async def snap_to_road(self, point: Location) -> list[SnappedPoint]:
        client = self._require_client()
        raw = await run_in_threadpool(
            client.snap_to_roads,
            [(point.latitude, point.longitude)],
            interpolate=self.interpolate,
        )
        return [_to_snapped_point(item) for item in raw or []]

    async def reverse_geocode(self, point: Location) -> list[AddressResult]:
        client = self._require_client()
        raw = await run_in_threadpool(
            client.reverse_geocode, (point.latitude, point.longitude)
        )
        return [_to_address_result(item) for item in raw or []]

    def _require_client(self) -> googlemaps.Client:
        if self.client is None:
            raise ProviderFailure(self.unavailable_reason)
        return self.client


# ── Payload conversion ────────────────────────────────────────────────


def _to_snapped_point(item: dict[str, Any]) -> SnappedPoint:
    loc = item["location"]
    return SnappedPoint(
        location=Location(float(loc["latitude"]), float(loc["longitude"])),
        original_index=item.get("originalIndex"),
        place_id=item.get("placeId"),
    )


def _to_address_result(item: dict[str, Any]) -> AddressResult:
    components = tuple(
        AddressComponent(
            long_name=c.get("long_name", ""),
            short_name=c.get("short_name"),
            types=tuple(c.get("types", ())),
        )
        for c in item.get("address_components", ())
    )
    return AddressResult(
        address_components=components,
        formatted_address=item.get("formatted_address"),
        place_id=item.get("place_id"),
    )
