"""Tests for the SQL executor (guard + store call)."""

import pytest

from access_insights.services.errors import ExecutionError, TableMissingError, ValidationError
from access_insights.services.sql.executor import SQLExecutor, is_missing_table_error


@pytest.mark.asyncio
async def test_execute_returns_rows_in_store_order(settings, spy_store, access_rows):
    spy_store.return_value = access_rows
    executor = SQLExecutor(settings, query_runner=spy_store)

    rows = await executor.execute("  SELECT * FROM access_events ORDER BY local_timestamp DESC ")

    assert rows == access_rows
    spy_store.assert_awaited_once_with(
        settings, "SELECT * FROM access_events ORDER BY local_timestamp DESC"
    )


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "sql",
    [
        "",
        "   ",
        "DELETE FROM access_events",
        "SELECT 1; DROP TABLE access_events",
        "with x as (select 1) select * from x",
    ],
)
async def test_rejected_statement_never_reaches_store(settings, spy_store, sql):
    executor = SQLExecutor(settings, query_runner=spy_store)
    with pytest.raises(ValidationError):
        await executor.execute(sql)
    spy_store.assert_not_awaited()


@pytest.mark.asyncio
async def test_keyword_inside_identifier_is_executed(settings, spy_store):
    spy_store.return_value = [{"dropdown_count": 3}]
    executor = SQLExecutor(settings, query_runner=spy_store)
    assert await executor.execute("SELECT dropdown_count FROM widgets") == [{"dropdown_count": 3}]
    spy_store.assert_awaited_once()


@pytest.mark.asyncio
async def test_missing_table_is_distinguished(settings, spy_store):
    spy_store.side_effect = Exception(
        '(\'42P01\', \'[42P01] ERROR: relation "access_events" does not exist;\')'
    )
    executor = SQLExecutor(settings, query_runner=spy_store)

    with pytest.raises(TableMissingError, match="Table does not exist"):
        await executor.execute("SELECT * FROM access_events")


@pytest.mark.asyncio
async def test_other_store_failures_raise_execution_error(settings, spy_store):
    original = RuntimeError('column "badge_id" does not exist')
    spy_store.side_effect = original
    executor = SQLExecutor(settings, query_runner=spy_store)

    with pytest.raises(ExecutionError) as exc_info:
        await executor.execute("SELECT badge_id FROM access_events")

    assert not isinstance(exc_info.value, TableMissingError)
    assert exc_info.value.__cause__ is original
    assert 'column "badge_id" does not exist' in str(exc_info.value)


def test_is_missing_table_error():
    assert is_missing_table_error(Exception('relation "access_events" does not exist'))
    assert is_missing_table_error(Exception('ERROR: Relation "ACCESS_EVENTS" does not exist'))
    assert not is_missing_table_error(Exception('relation "badges" does not exist'))
    assert not is_missing_table_error(Exception("syntax error at or near FROM"))
