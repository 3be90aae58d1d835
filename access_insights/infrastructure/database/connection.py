"""Direct database connection utilities using pyodbc."""

import asyncio
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any

from access_insights.config.settings import Settings

logger = logging.getLogger(__name__)


def normalize_value(value: Any) -> str | int | float | bool | None:
    """Convert a driver value into a JSON scalar."""
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def rows_to_dicts(columns: list[str], rows: list[Any]) -> list[dict[str, Any]]:
    """Map fetched rows onto column names, preserving projection order."""
    results = []
    for row in rows:
        row_dict = {}
        for i, col_name in enumerate(columns):
            row_dict[col_name] = normalize_value(row[i])
        results.append(row_dict)
    return results


@contextmanager
def connect(settings: Settings) -> Iterator[Any]:
    """
    Open a pyodbc connection for the configured data store and close it afterwards.

    Raises:
        ValueError: If db_connection_string is not configured
    """
    if not settings.db_connection_string:
        raise ValueError("db_connection_string is not configured in settings")

    # pyodbc loads the unixODBC driver manager on import
    import pyodbc

    conn = pyodbc.connect(settings.db_connection_string)
    try:
        conn.timeout = settings.db_query_timeout
        yield conn
    finally:
        conn.close()


async def execute_query(settings: Settings, sql: str) -> list[dict[str, Any]]:
    """
    Execute a SELECT query and return results as a list of dictionaries.

    The statement is sent verbatim; callers validate it first.

    Args:
        settings: Application settings containing db_connection_string
        sql: SQL query string

    Returns:
        List of dictionaries, where each dictionary represents a row with column names as keys

    Raises:
        Exception: If database connection or query execution fails
    """

    def _execute() -> list[dict[str, Any]]:
        """Execute query synchronously in a worker thread."""
        with connect(settings) as conn:
            cursor = conn.cursor()
            try:
                cursor.execute(sql)
                if cursor.description is None:
                    return []
                columns = [column[0] for column in cursor.description]
                return rows_to_dicts(columns, cursor.fetchall())
            except Exception as e:
                logger.error(f"Database query error: {e}")
                raise
            finally:
                cursor.close()

    return await asyncio.to_thread(_execute)
