"""Errors raised by the query pipeline."""


class PipelineError(Exception):
    """Base class for pipeline failures."""


class SynthesisError(PipelineError):
    """Generation failed, or its output never reduced to a SELECT statement."""


class ValidationError(PipelineError):
    """Statement rejected by the guard; it was never sent to the store."""

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.errors = errors or []


class ExecutionError(PipelineError):
    """The store rejected or failed a validated statement."""


class TableMissingError(ExecutionError):
    """The access_events relation does not exist (store not seeded)."""


class ExplanationError(PipelineError):
    """Explanation generation failed."""


class ChartConfigError(PipelineError):
    """Chart configuration generation failed. Always downgraded to a fallback."""


class SummaryError(PipelineError):
    """Summary generation failed. Always downgraded to a placeholder."""
