"""Main pipeline orchestrator."""

import asyncio
import logging

from access_insights.config.constants import PipelineStep
from access_insights.config.settings import Settings
from access_insights.infrastructure.logging.logger import StructuredLogger
from access_insights.orchestrator.state import PipelineState
from access_insights.orchestrator.step_timer import timed_step
from access_insights.services.models import EnrichmentResult
from access_insights.services.sql.executor import QueryRunner, SQLExecutor
from access_insights.services.sql.generator import SQLGenerator
from access_insights.services.summary.service import SummaryService
from access_insights.services.viz.models import ChartConfig
from access_insights.services.viz.service import ChartConfigService

logger = logging.getLogger(__name__)


class QueryPipeline:
    """Runs a question through synthesis, execution, chart and summary."""

    def __init__(self, settings: Settings, query_runner: QueryRunner | None = None):
        """Initialize pipeline with settings and an optional store runner."""
        self.settings = settings
        self.sql_gen = SQLGenerator(settings)
        self.sql_exec = SQLExecutor(settings, query_runner=query_runner)
        self.chart = ChartConfigService(settings)
        self.summary = SummaryService(settings)
        self.structured_logger = StructuredLogger(__name__)

    async def _step_chart(self, state: PipelineState) -> EnrichmentResult[ChartConfig]:
        async with timed_step(PipelineStep.CHART, self.structured_logger) as step:
            result = await self.chart.generate(state.rows, state.question)
            step.record(chart_type=result.value.type, fallback=result.fallback)
        return result

    async def _step_summary(self, state: PipelineState) -> EnrichmentResult[str]:
        async with timed_step(PipelineStep.SUMMARY, self.structured_logger) as step:
            result = await self.summary.generate(state.rows, state.question, state.sql or "")
            step.record(fallback=result.fallback)
        return result

    async def run(self, question: str) -> PipelineState:
        """
        Answer ``question``.

        Raises:
            SynthesisError: If no SELECT statement could be generated
            ValidationError: If the guard rejected the generated statement
            ExecutionError: If the store failed the statement
        """
        state = PipelineState(question=question)

        async with timed_step(PipelineStep.SQL_GENERATION, self.structured_logger) as step:
            state.sql = await self.sql_gen.synthesize(question)
            step.record(sql=state.sql)

        async with timed_step(PipelineStep.SQL_VALIDATION, self.structured_logger) as step:
            validation = self.sql_exec.validator.validate(state.sql)
            step.record(is_valid=validation.is_valid, errors=validation.errors)

        # The executor enforces the guard itself; a rejection surfaces from there
        async with timed_step(PipelineStep.SQL_EXECUTION, self.structured_logger) as step:
            state.rows = await self.sql_exec.execute(state.sql)
            step.record(total_rows=len(state.rows))

        if state.rows:
            state.chart, state.summary = await asyncio.gather(
                self._step_chart(state),
                self._step_summary(state),
            )
        else:
            # Nothing to summarize; the chart step returns its empty fallback
            state.chart = await self._step_chart(state)

        logger.info(
            f"Pipeline completed: {len(state.rows)} rows, "
            f"chart_fallback={state.chart.fallback}, "
            f"summary={'skipped' if state.summary is None else 'ok'}"
        )
        return state
