"""SQL generator service."""

import logging

from access_insights.config.prompts import build_sql_generation_prompt
from access_insights.config.settings import Settings
from access_insights.infrastructure.llm.executor import generate_text
from access_insights.services.errors import SynthesisError
from access_insights.services.sql.repairs import clean_generated_sql

logger = logging.getLogger(__name__)


class SQLGenerator:
    """Generates a read-only SQL statement from a natural-language request."""

    def __init__(self, settings: Settings):
        """Initialize SQL generator.

        Args:
            settings: Application settings
        """
        self.settings = settings
        logger.info(f"SQLGenerator initialized with model: {settings.llm_model}")

    async def synthesize(self, request: str) -> str:
        """
        Generate a SELECT statement for ``request``.

        The model output is cleaned (fences, comments, whitespace), repaired
        with the ordered repair rules and gated on a leading SELECT.

        Args:
            request: User's natural language question

        Returns:
            The statement, starting with an upper-case ``SELECT``

        Raises:
            SynthesisError: If generation fails or the result is not a SELECT
        """
        try:
            logger.info(f"Generating query for input: {request}")
            raw = await generate_text(
                self.settings,
                build_sql_generation_prompt(request),
                temperature=self.settings.sql_temperature,
                max_tokens=self.settings.sql_max_tokens,
            )
            logger.debug(f"Raw response from model: {raw}")

            sql = clean_generated_sql(raw)
            logger.debug(f"Response after all fixes: {sql}")

            if not sql.upper().startswith("SELECT"):
                logger.error(
                    f"Invalid response, query must start with SELECT. "
                    f"Length={len(sql)}, first characters: {sql[:10]!r}"
                )
                raise SynthesisError("Query must start with SELECT")

            formatted = f"SELECT {sql[6:].strip()}"
            logger.info(f"Final formatted query: {formatted}")
            return formatted

        except Exception as e:
            logger.error(f"SQL generation error: {e}", exc_info=True)
            raise SynthesisError("Failed to generate query") from e
