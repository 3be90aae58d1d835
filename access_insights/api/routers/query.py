"""Query endpoints: generate, run, explain and the full ask flow."""

import logging
from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException

from access_insights.api.dependencies import (
    get_explanation_service,
    get_pipeline,
    get_sql_executor,
    get_sql_generator,
)
from access_insights.api.models import (
    AskResponse,
    ExplainQueryRequest,
    ExplainQueryResponse,
    GenerateQueryResponse,
    QuestionRequest,
    RunQueryRequest,
    RunQueryResponse,
    SummaryResponse,
    chart_response,
)
from access_insights.config.constants import GENERIC_ERROR_MESSAGE
from access_insights.orchestrator.pipeline import QueryPipeline
from access_insights.services.errors import (
    ExecutionError,
    ExplanationError,
    PipelineError,
    SynthesisError,
    TableMissingError,
    ValidationError,
)
from access_insights.services.explanation.service import ExplanationService
from access_insights.services.sql.executor import SQLExecutor
from access_insights.services.sql.generator import SQLGenerator

logger = logging.getLogger(__name__)

router = APIRouter()

_STATUS_BY_ERROR: tuple[tuple[type[PipelineError], int], ...] = (
    (SynthesisError, 422),
    (ValidationError, 400),
    (TableMissingError, 503),
    (ExecutionError, 500),
)


def _raise_http(error: PipelineError) -> NoReturn:
    """Map a pipeline error to an HTTPException with a user-facing message."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            detail = str(error) if isinstance(error, TableMissingError) else GENERIC_ERROR_MESSAGE
            raise HTTPException(status_code=status_code, detail=detail) from error
    raise HTTPException(status_code=500, detail=GENERIC_ERROR_MESSAGE) from error


@router.post("/query/generate", response_model=GenerateQueryResponse)
async def generate_query(
    request: QuestionRequest,
    generator: SQLGenerator = Depends(get_sql_generator),  # noqa: B008
) -> GenerateQueryResponse:
    """Generate a read-only SQL statement for a question."""
    try:
        sql = await generator.synthesize(request.question)
    except SynthesisError as e:
        _raise_http(e)
    return GenerateQueryResponse(sql=sql)


@router.post("/query/run", response_model=RunQueryResponse)
async def run_query(
    request: RunQueryRequest,
    executor: SQLExecutor = Depends(get_sql_executor),  # noqa: B008
) -> RunQueryResponse:
    """Validate and execute a SQL statement."""
    try:
        rows = await executor.execute(request.sql)
    except (ValidationError, ExecutionError) as e:
        _raise_http(e)
    columns = list(rows[0].keys()) if rows else []
    return RunQueryResponse(rows=rows, columns=columns, total_rows=len(rows))


@router.post("/query/explain", response_model=ExplainQueryResponse)
async def explain_query(
    request: ExplainQueryRequest,
    service: ExplanationService = Depends(get_explanation_service),  # noqa: B008
) -> ExplainQueryResponse:
    """Explain a SQL statement section by section."""
    try:
        explanations = await service.explain(request.question, request.sql)
    except ExplanationError as e:
        raise HTTPException(status_code=502, detail=str(e)) from e
    return ExplainQueryResponse(explanations=explanations)


@router.post("/ask", response_model=AskResponse)
async def ask(
    request: QuestionRequest,
    pipeline: QueryPipeline = Depends(get_pipeline),  # noqa: B008
) -> AskResponse:
    """
    Answer a question end to end.

    Generates the SQL, runs it, then builds the chart config and the summary
    concurrently. Chart and summary failures come back as fallbacks.
    """
    try:
        state = await pipeline.run(request.question)
    except PipelineError as e:
        logger.error(f"Error processing question: {e}", exc_info=True)
        _raise_http(e)

    return AskResponse(
        question=state.question,
        sql=state.sql or "",
        rows=state.rows,
        columns=state.columns,
        total_rows=len(state.rows),
        chart=chart_response(state.chart.value, state.chart.fallback) if state.chart else None,
        summary=(
            SummaryResponse(summary=state.summary.value, fallback=state.summary.fallback)
            if state.summary
            else None
        ),
    )
