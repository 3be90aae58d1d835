"""Result summary service."""

import logging

from access_insights.config.constants import SUMMARY_EMPTY_MESSAGE, SUMMARY_ERROR_MESSAGE
from access_insights.config.prompts import build_summary_prompt
from access_insights.config.settings import Settings
from access_insights.infrastructure.llm.executor import generate_text
from access_insights.services.errors import SummaryError
from access_insights.services.models import EnrichmentResult
from access_insights.services.sql.models import ResultSet

logger = logging.getLogger(__name__)


class SummaryService:
    """Writes a short analyst-style summary of a result set."""

    def __init__(self, settings: Settings):
        """Initialize summary service."""
        self.settings = settings

    async def _request_summary(self, sample: ResultSet, question: str, sql: str) -> str:
        try:
            return await generate_text(
                self.settings,
                build_summary_prompt(sample, question, sql),
                temperature=self.settings.summary_temperature,
                max_tokens=self.settings.summary_max_tokens,
            )
        except Exception as e:
            raise SummaryError(str(e)) from e

    async def generate(
        self, results: ResultSet, question: str, sql: str
    ) -> EnrichmentResult[str]:
        """
        Summarize the first rows of ``results``. Never raises.

        Returns:
            EnrichmentResult with the summary text, or the error placeholder
        """
        sample = results[: self.settings.summary_sample_rows]
        try:
            text = await self._request_summary(sample, question, sql)
        except SummaryError as e:
            logger.error(f"Error generating summary: {e}", exc_info=True)
            return EnrichmentResult.degraded(SUMMARY_ERROR_MESSAGE, error=str(e))

        return EnrichmentResult.ok(text.strip() or SUMMARY_EMPTY_MESSAGE)

    async def summarize(self, results: ResultSet, question: str, sql: str) -> str:
        """Return the summary text (or placeholder) for ``results``."""
        return (await self.generate(results, question, sql)).value
