"""Request/Response models for API endpoints."""

from typing import Any, Optional

from pydantic import BaseModel, Field

from access_insights.services.explanation.models import QueryExplanation
from access_insights.services.viz.models import ChartConfig


class QuestionRequest(BaseModel):
    """Request carrying only the user's question."""

    question: str = Field(..., min_length=1, description="User's natural language question")


class GenerateQueryResponse(BaseModel):
    """Generated SQL statement."""

    sql: str


class RunQueryRequest(BaseModel):
    """Request model for running a SQL statement."""

    sql: str = Field(..., description="Candidate SQL statement")


class RunQueryResponse(BaseModel):
    """Rows returned by the store."""

    rows: list[dict[str, Any]]
    columns: list[str]
    total_rows: int


class ExplainQueryRequest(BaseModel):
    """Request model for explaining a SQL statement."""

    question: str
    sql: str


class ExplainQueryResponse(BaseModel):
    """Sections of the statement with their explanations."""

    explanations: list[QueryExplanation]


class ChartConfigRequest(BaseModel):
    """Request model for chart configuration."""

    question: str
    rows: list[dict[str, Any]] = Field(default_factory=list)


class ChartConfigResponse(BaseModel):
    """Chart configuration, flagged when it is a fallback."""

    config: dict[str, Any]
    fallback: bool = False


class SummaryRequest(BaseModel):
    """Request model for result summaries."""

    question: str
    sql: str
    rows: list[dict[str, Any]] = Field(default_factory=list)


class SummaryResponse(BaseModel):
    """Summary text, flagged when it is the error placeholder."""

    summary: str
    fallback: bool = False


class AskResponse(BaseModel):
    """Full pipeline answer for one question."""

    question: str
    sql: str
    rows: list[dict[str, Any]]
    columns: list[str]
    total_rows: int
    chart: Optional[ChartConfigResponse] = None
    summary: Optional[SummaryResponse] = None


class Suggestion(BaseModel):
    """Canned question shown before the first search."""

    desktop: str
    mobile: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str


def chart_response(config: ChartConfig, fallback: bool) -> ChartConfigResponse:
    """Serialize a chart config with the frontend's camelCase keys."""
    return ChartConfigResponse(
        config=config.model_dump(by_alias=True, exclude_none=True), fallback=fallback
    )
