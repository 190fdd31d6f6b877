"""
Shared test fixtures.

The geolocation provider is replaced by an in-memory fake so tests run
without a Google Maps API key or network access.  By default the fake
snaps every point to one spot on Broadway, Manhattan.
"""

from typing import AsyncGenerator, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from roadsnap.domain.entities import (
    AddressComponent,
    AddressResult,
    Location,
    SnappedPoint,
)
from roadsnap.domain.nearest_road import GeolocationProvider


# ── Fake provider ─────────────────────────────────────────────────────

TIMES_SQUARE = Location(40.7580, -73.9855)
BROADWAY_SNAP = Location(40.75805, -73.98544)


class FakeProvider(GeolocationProvider):
    def __init__(
        self,
        snapped: Optional[list[SnappedPoint]] = None,
        results: Optional[list[AddressResult]] = None,
        error: Optional[Exception] = None,
    ):
        self.snapped = snapped if snapped is not None else []
        self.results = results if results is not None else []
        self.error = error
        self.snap_calls: list[Location] = []
        self.geocode_calls: list[Location] = []

    async def snap_to_road(self, point: Location) -> list[SnappedPoint]:
        self.snap_calls.append(point)
        if self.error:
            raise self.error
        return list(self.snapped)

    async def reverse_geocode(self, point: Location) -> list[AddressResult]:
        self.geocode_calls.append(point)
        return list(self.results)


def broadway_result() -> AddressResult:
    return AddressResult(
        address_components=(
            AddressComponent("1560", "1560", ("street_number",)),
            AddressComponent("Broadway", "Broadway", ("route",)),
            AddressComponent(
                "Manhattan",
                "Manhattan",
                ("political", "sublocality", "sublocality_level_1"),
            ),
        ),
        formatted_address="1560 Broadway, New York, NY 10036, USA",
        place_id="ChIJmQJIxlVYwokRLgeuocVOGVU",
    )


# ── Fixtures ──────────────────────────────────────────────────────────


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider(
        snapped=[SnappedPoint(BROADWAY_SNAP, original_index=0, place_id="ChIJ-road")],
        results=[broadway_result()],
    )


@pytest_asyncio.fixture
async def client(provider: FakeProvider) -> AsyncGenerator[AsyncClient, None]:
    """AsyncClient backed by the app with the fake provider injected."""
    from roadsnap.api.app import create_app
    from roadsnap.api.dependencies import get_provider
    from roadsnap.api.middleware import limiter

    limiter.reset()
    app = create_app()
    app.dependency_overrides[get_provider] = lambda: provider

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
