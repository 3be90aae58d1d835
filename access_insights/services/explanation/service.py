"""SQL explanation service."""

import logging

from access_insights.config.prompts import build_explanation_prompt
from access_insights.config.settings import Settings
from access_insights.infrastructure.llm.executor import generate_object
from access_insights.services.errors import ExplanationError
from access_insights.services.explanation.models import QueryExplanation, QueryExplanations

logger = logging.getLogger(__name__)


class ExplanationService:
    """Splits a SQL statement into sections and explains each one."""

    def __init__(self, settings: Settings):
        """Initialize explanation service."""
        self.settings = settings

    async def explain(self, question: str, sql: str) -> list[QueryExplanation]:
        """
        Explain ``sql`` in the context of the question it answers.

        Coverage of every part of the statement is requested from the model
        but not checked here.

        Raises:
            ExplanationError: On any generation or parsing failure
        """
        try:
            result = await generate_object(
                self.settings,
                build_explanation_prompt(question, sql),
                QueryExplanations,
                temperature=self.settings.explanation_temperature,
                max_tokens=self.settings.explanation_max_tokens,
            )
        except Exception as e:
            logger.error(f"Explanation generation error: {e}", exc_info=True)
            raise ExplanationError("Failed to generate query explanation") from e

        logger.info(f"Explanation generated with {len(result.sections)} section(s)")
        return result.sections
