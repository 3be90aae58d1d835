"""Database infrastructure."""

from access_insights.infrastructure.database.connection import (
    connect,
    execute_query,
    normalize_value,
    rows_to_dicts,
)

__all__ = ["connect", "execute_query", "normalize_value", "rows_to_dicts"]
