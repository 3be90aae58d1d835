"""FastAPI dependencies."""

from functools import lru_cache

from fastapi import Depends

from access_insights.config.settings import Settings, get_settings
from access_insights.orchestrator.pipeline import QueryPipeline
from access_insights.services.explanation.service import ExplanationService
from access_insights.services.sql.executor import SQLExecutor
from access_insights.services.sql.generator import SQLGenerator
from access_insights.services.summary.service import SummaryService
from access_insights.services.viz.service import ChartConfigService


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings as a FastAPI dependency."""
    return get_settings()


def get_sql_generator(settings: Settings = Depends(get_settings_dependency)) -> SQLGenerator:  # noqa: B008
    return SQLGenerator(settings)


def get_sql_executor(settings: Settings = Depends(get_settings_dependency)) -> SQLExecutor:  # noqa: B008
    return SQLExecutor(settings)


def get_explanation_service(
    settings: Settings = Depends(get_settings_dependency),  # noqa: B008
) -> ExplanationService:
    return ExplanationService(settings)


def get_chart_service(
    settings: Settings = Depends(get_settings_dependency),  # noqa: B008
) -> ChartConfigService:
    return ChartConfigService(settings)


def get_summary_service(
    settings: Settings = Depends(get_settings_dependency),  # noqa: B008
) -> SummaryService:
    return SummaryService(settings)


def get_pipeline(settings: Settings = Depends(get_settings_dependency)) -> QueryPipeline:  # noqa: B008
    return QueryPipeline(settings)
