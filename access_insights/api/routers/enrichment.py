"""Enrichment endpoints: chart configuration and summary."""

from fastapi import APIRouter, Depends

from access_insights.api.dependencies import get_chart_service, get_summary_service
from access_insights.api.models import (
    ChartConfigRequest,
    ChartConfigResponse,
    SummaryRequest,
    SummaryResponse,
    chart_response,
)
from access_insights.services.summary.service import SummaryService
from access_insights.services.viz.service import ChartConfigService

router = APIRouter()


@router.post("/chart-config", response_model=ChartConfigResponse)
async def chart_config(
    request: ChartConfigRequest,
    service: ChartConfigService = Depends(get_chart_service),  # noqa: B008
) -> ChartConfigResponse:
    """Choose a chart for result rows. Always answers; failures yield a fallback."""
    result = await service.generate(request.rows, request.question)
    return chart_response(result.value, result.fallback)


@router.post("/summary", response_model=SummaryResponse)
async def summary(
    request: SummaryRequest,
    service: SummaryService = Depends(get_summary_service),  # noqa: B008
) -> SummaryResponse:
    """Summarize result rows. Always answers; failures yield a placeholder."""
    result = await service.generate(request.rows, request.question, request.sql)
    return SummaryResponse(summary=result.value, fallback=result.fallback)
