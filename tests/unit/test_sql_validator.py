"""Tests for SQL validation service."""

import pytest

from access_insights.config.validation import find_forbidden_keywords, is_select_statement
from access_insights.services.errors import ValidationError
from access_insights.services.sql.validation import SQLValidationService


def test_sql_validator_safe_query():
    """Test SQL validation service with safe query."""
    validator = SQLValidationService()
    result = validator.validate("SELECT * FROM access_events")
    assert result.is_valid
    assert result.errors == []


def test_sql_validator_select_followed_by_newline():
    validator = SQLValidationService()
    assert validator.validate("select\n  door_name\nfrom access_events").is_valid


def test_sql_validator_leading_whitespace_and_lowercase():
    validator = SQLValidationService()
    assert validator.validate("   select door_name from access_events  ").is_valid


@pytest.mark.parametrize("sql", ["", "   ", "\n\t", None])
def test_sql_validator_empty(sql):
    result = SQLValidationService().validate(sql)
    assert not result.is_valid
    assert result.errors == ["SQL query is empty"]


@pytest.mark.parametrize(
    "sql",
    [
        "WITH recent AS (SELECT 1) SELECT * FROM recent",
        "SELECTdoor_name FROM access_events",
        "SELECT",
        "EXPLAIN SELECT * FROM access_events",
    ],
)
def test_sql_validator_not_select_shaped(sql):
    result = SQLValidationService().validate(sql)
    assert not result.is_valid
    assert "Query must start with SELECT" in result.errors


def test_sql_validator_dangerous_query():
    """Test SQL validation service with dangerous query."""
    result = SQLValidationService().validate("DROP TABLE access_events")
    assert not result.is_valid
    assert "Forbidden keyword: DROP" in result.errors


def test_sql_validator_piggybacked_statement():
    result = SQLValidationService().validate("SELECT 1; DROP TABLE x")
    assert not result.is_valid
    assert result.errors == ["Forbidden keyword: DROP"]


@pytest.mark.parametrize(
    "keyword", ["drop", "delete", "insert", "update", "alter", "truncate", "create", "grant", "revoke"]
)
def test_sql_validator_every_forbidden_keyword(keyword):
    sql = f"SELECT * FROM access_events WHERE 1 = 1 OR {keyword.upper()} something"
    result = SQLValidationService().validate(sql)
    assert not result.is_valid
    assert f"Forbidden keyword: {keyword.upper()}" in result.errors


@pytest.mark.parametrize(
    "sql",
    [
        "SELECT dropdown_count FROM access_events",
        "SELECT updated_at, created_by FROM access_events",
        "SELECT * FROM access_events WHERE door_name = 'deleted_records'",
        "SELECT insertion_order FROM access_events",
    ],
)
def test_sql_validator_keyword_inside_identifier_is_allowed(sql):
    assert SQLValidationService().validate(sql).is_valid


def test_find_forbidden_keywords_is_case_insensitive():
    assert find_forbidden_keywords("select 1; Delete from x; TRUNCATE y") == ["delete", "truncate"]


def test_is_select_statement():
    assert is_select_statement("SELECT 1")
    assert not is_select_statement("UPDATE access_events SET code = 'x'")


def test_ensure_valid_returns_trimmed_statement():
    assert SQLValidationService.ensure_valid("  SELECT 1  ") == "SELECT 1"


def test_ensure_valid_raises_with_errors():
    with pytest.raises(ValidationError) as exc_info:
        SQLValidationService.ensure_valid("UPDATE access_events SET code = 'x'")
    assert "Forbidden keyword: UPDATE" in exc_info.value.errors
    assert "Query must start with SELECT" in exc_info.value.errors
