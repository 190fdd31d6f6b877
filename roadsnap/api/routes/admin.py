"""
Admin / observability endpoints
===============================

GET /api/v1/admin/health -- simple health check
"""

from fastapi import APIRouter, Depends

from roadsnap.api.dependencies import get_provider
from roadsnap.api.schemas import HealthResponse
from roadsnap.domain.nearest_road import GeolocationProvider

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health(provider: GeolocationProvider = Depends(get_provider)):
    return HealthResponse(provider_configured=provider.is_configured)
