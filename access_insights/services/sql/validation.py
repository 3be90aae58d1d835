"""SQL validation service."""

import logging

from access_insights.config.validation import validate_sql_query
from access_insights.services.errors import ValidationError
from access_insights.services.sql.models import ValidationResult

logger = logging.getLogger(__name__)


class SQLValidationService:
    """Validates SQL statements using the rules in config/validation.py."""

    @staticmethod
    def validate(sql: str | None) -> ValidationResult:
        """
        Check a statement against the shape rule and the forbidden-keyword list.

        Args:
            sql: SQL query string

        Returns:
            ValidationResult with is_valid and the list of errors
        """
        is_valid, errors = validate_sql_query(sql)

        if not is_valid:
            logger.warning(
                f"SQL validation failed with {len(errors)} error(s): {errors}; query: {(sql or '').strip()}"
            )
        else:
            logger.info("SQL validation passed")

        return ValidationResult(is_valid=is_valid, errors=errors)

    @classmethod
    def ensure_valid(cls, sql: str | None) -> str:
        """
        Return the trimmed statement, or raise if it fails validation.

        Raises:
            ValidationError: If the statement is empty, not a SELECT, or
                contains a forbidden keyword
        """
        result = cls.validate(sql)
        if not result.is_valid:
            raise ValidationError("Only SELECT queries are allowed", errors=result.errors)
        return (sql or "").strip()
