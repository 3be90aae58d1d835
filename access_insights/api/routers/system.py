"""Health and suggestion endpoints."""

from fastapi import APIRouter, Depends

from access_insights.api.dependencies import get_settings_dependency
from access_insights.api.models import HealthResponse, Suggestion
from access_insights.config.constants import SUGGESTED_QUERIES
from access_insights.config.settings import Settings

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(
    settings: Settings = Depends(get_settings_dependency),  # noqa: B008
) -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=settings.app_version)


@router.get("/suggestions", response_model=list[Suggestion])
async def suggestions() -> list[Suggestion]:
    """Canned questions to try."""
    return [Suggestion(**suggestion) for suggestion in SUGGESTED_QUERIES]
