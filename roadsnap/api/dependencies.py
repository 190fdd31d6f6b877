"""FastAPI dependency injection helpers."""

from fastapi import Depends, Request

from roadsnap.domain.nearest_road import GeolocationProvider, NearestRoadFinder
from roadsnap.infrastructure.google_maps import GoogleMapsProvider


async def get_provider(request: Request) -> GeolocationProvider:
    """Return the app-wide provider, building it on first use."""
    provider = getattr(request.app.state, "provider", None)
    if provider is None:
        provider = GoogleMapsProvider.from_settings()
        request.app.state.provider = provider
    return provider


async def get_finder(
    provider: GeolocationProvider = Depends(get_provider),
) -> NearestRoadFinder:
    return NearestRoadFinder(provider)
