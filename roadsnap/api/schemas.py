"""Pydantic request / response schemas for the REST API.

Field names are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

_CAMEL = {"alias_generator": to_camel, "populate_by_name": True}


# ── Requests ──────────────────────────────────────────────────────────


class LocationRequest(BaseModel):
    latitude: float = Field(..., ge=-90, le=90, strict=True)
    longitude: float = Field(..., ge=-180, le=180, strict=True)


# ── Responses ─────────────────────────────────────────────────────────


class RoadDetailsResponse(BaseModel):
    road_name: Optional[str] = None
    road_type: Optional[str] = None

    model_config = _CAMEL


class RoadResponse(BaseModel):
    distance_meters: float
    unit: Literal["meters"] = "meters"
    road: RoadDetailsResponse = Field(default_factory=RoadDetailsResponse)
    snapped_latitude: float
    snapped_longitude: float

    model_config = _CAMEL


class HealthResponse(BaseModel):
    status: str = "ok"
    provider_configured: bool = True

    model_config = _CAMEL


class ErrorResponse(BaseModel):
    error: str
