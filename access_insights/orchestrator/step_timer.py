"""Async context manager for timing and logging pipeline steps."""

import logging
import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from access_insights.config.constants import PipelineStep, PipelineStepDescription
from access_insights.infrastructure.logging.logger import StructuredLogger

logger = logging.getLogger(__name__)


class StepContext:
    """Mutable context for a timed pipeline step."""

    def __init__(self) -> None:
        self.state: dict[str, Any] = {}

    def record(self, **state: Any) -> None:
        self.state.update(state)


@asynccontextmanager
async def timed_step(
    step: PipelineStep,
    structured_logger: StructuredLogger,
) -> AsyncGenerator[StepContext, None]:
    """Time a pipeline step and log its outcome; failures are logged and re-raised."""
    logger.info(f"{step.value}: {PipelineStepDescription[step.name].value}")
    ctx = StepContext()
    start = time.perf_counter()
    try:
        yield ctx
    except Exception as e:
        structured_logger.log_error(step.value, e, context=ctx.state or None)
        raise
    elapsed_ms = (time.perf_counter() - start) * 1000
    structured_logger.log_step(step.value, ctx.state, duration_ms=elapsed_ms)
