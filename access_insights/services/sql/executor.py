"""SQL executor service."""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from access_insights.config.schema import ACCESS_EVENTS
from access_insights.config.settings import Settings
from access_insights.infrastructure.database.connection import execute_query
from access_insights.services.errors import ExecutionError, TableMissingError
from access_insights.services.sql.models import ResultSet
from access_insights.services.sql.validation import SQLValidationService

logger = logging.getLogger(__name__)

QueryRunner = Callable[[Settings, str], Awaitable[list[dict[str, Any]]]]


def is_missing_table_error(error: Exception) -> bool:
    """True if the store reported that the access_events relation does not exist."""
    message = str(error).lower()
    return f'relation "{ACCESS_EVENTS.table_name}" does not exist' in message


class SQLExecutor:
    """
    Guards and executes SQL statements against the access events store.

    Validation always happens first; a rejected statement never reaches the
    store. Each accepted statement is executed exactly once.
    """

    def __init__(self, settings: Settings, query_runner: QueryRunner | None = None):
        """Initialize SQL executor.

        Args:
            settings: Application settings
            query_runner: Coroutine used to run the statement; defaults to the
                pyodbc-backed ``execute_query``
        """
        self.settings = settings
        self.query_runner = query_runner or execute_query
        self.validator = SQLValidationService()

    async def execute(self, sql: str) -> ResultSet:
        """
        Validate and execute a statement.

        Args:
            sql: Candidate SQL statement

        Returns:
            Result rows in store order, columns in projection order

        Raises:
            ValidationError: If the guard rejects the statement
            TableMissingError: If access_events does not exist yet
            ExecutionError: For any other store failure
        """
        statement = self.validator.ensure_valid(sql)

        try:
            logger.info(f"Executing query: {statement}")
            rows = await self.query_runner(self.settings, statement)
        except Exception as e:
            if is_missing_table_error(e):
                logger.error(
                    f"Table {ACCESS_EVENTS.table_name} does not exist; seed the store first"
                )
                raise TableMissingError("Table does not exist") from e
            logger.error(f"Query execution error: {e}", exc_info=True)
            raise ExecutionError(str(e)) from e

        logger.info(f"SQL executed successfully: {len(rows)} rows returned")
        return rows
