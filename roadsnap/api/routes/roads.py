"""
Road endpoints
==============

POST /api/v1/nearest-road -- distance from a point to the nearest road
"""

from fastapi import APIRouter, Depends, Request

from roadsnap.api.dependencies import get_finder
from roadsnap.api.middleware import limiter
from roadsnap.api.schemas import (
    ErrorResponse,
    LocationRequest,
    RoadDetailsResponse,
    RoadResponse,
)
from roadsnap.config import settings
from roadsnap.domain.entities import Location
from roadsnap.domain.nearest_road import NearestRoadFinder

router = APIRouter(tags=["roads"])


@router.post(
    "/nearest-road",
    response_model=RoadResponse,
    summary="Find the nearest road to a point",
    description=(
        "Snaps the point to the nearest road, returns the great-circle "
        "distance to it in metres and the road's name and type."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Invalid coordinates"},
        404: {"model": ErrorResponse, "description": "No nearby roads found"},
        500: {"model": ErrorResponse, "description": "Provider failure"},
    },
)
@limiter.limit(settings.rate_limit)
async def nearest_road(
    request: Request,
    body: LocationRequest,
    finder: NearestRoadFinder = Depends(get_finder),
):
    match = await finder.find(Location(body.latitude, body.longitude))
    return RoadResponse(
        distance_meters=match.distance,
        unit=match.unit.value,
        road=RoadDetailsResponse(
            road_name=match.road.road_name,
            road_type=match.road.road_type,
        ),
        snapped_latitude=match.snapped.latitude,
        snapped_longitude=match.snapped.longitude,
    )
