"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from shared.config import get_settings
from shared.database import is_connected
from modules.catalog.interfaces import ICatalogService

from ..dependencies import get_catalog_service

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str
    catalog: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    catalog: ICatalogService = Depends(get_catalog_service),
) -> ReadinessResponse:
    """
    Readiness check endpoint.

    The catalog is always served; the user store may be down, in which
    case only the auth endpoints fail.
    """
    products = catalog.product_count()
    return ReadinessResponse(
        status="ready" if is_connected() else "degraded",
        database="connected" if is_connected() else "unavailable",
        catalog=f"{products} products",
    )
