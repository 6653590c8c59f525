"""Health check endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from storefront.core.config import Settings
from storefront.core.state import get_app_settings
from storefront.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> HealthResponse:
    """Return service status. Used by load balancers and monitoring."""
    return HealthResponse(status="ok", environment=settings.APP_ENV)
