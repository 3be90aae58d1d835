"""Integration tests for the question-to-answer pipeline with fake model and store."""

from unittest.mock import AsyncMock, patch

import pytest

from access_insights.config.constants import CredentialType
from access_insights.infrastructure.llm.executor import StructuredOutputError
from access_insights.orchestrator.pipeline import QueryPipeline
from access_insights.services.errors import SynthesisError, ValidationError
from access_insights.services.viz.service import EMPTY_FALLBACK

SQL_LLM = "access_insights.services.sql.generator.generate_text"
CHART_LLM = "access_insights.services.viz.service.generate_object"
SUMMARY_LLM = "access_insights.services.summary.service.generate_text"

AFTER_HOURS_RESPONSE = """```sql
SELECT full_name, door_name, local_timestamp, credential_type
FROM access_events
WHERE full_name = 'john' -- exact match
  AND (EXTRACT(HOUR FROM timestamp) >= 17 OR EXTRACT(HOUR FROM timestamp) < 9)
ORDER BY timestamp DESC
```"""


@pytest.mark.asyncio
@patch(SUMMARY_LLM, new_callable=AsyncMock)
@patch(CHART_LLM, new_callable=AsyncMock)
@patch(SQL_LLM, new_callable=AsyncMock)
async def test_after_hours_question_end_to_end(
    mock_sql, mock_chart, mock_summary, settings, spy_store, access_rows
):
    mock_sql.return_value = AFTER_HOURS_RESPONSE
    mock_chart.side_effect = StructuredOutputError("truncated: max_tokens=1024 reached")
    mock_summary.return_value = "John accessed three doors after hours."
    spy_store.return_value = access_rows

    pipeline = QueryPipeline(settings, query_runner=spy_store)
    state = await pipeline.run("Show me John's after-hours access")

    assert state.sql.startswith("SELECT ")
    assert "LOWER(full_name) ILIKE LOWER('%john%')" in state.sql
    assert "full_name = 'john'" not in state.sql
    assert "EXTRACT(HOUR FROM local_timestamp) >= 17" in state.sql
    assert "--" not in state.sql
    assert "```" not in state.sql

    spy_store.assert_awaited_once_with(settings, state.sql)
    credential_types = {c.value for c in CredentialType}
    assert all(row["credential_type"] in credential_types for row in state.rows)
    assert state.columns == list(access_rows[0].keys())

    assert state.chart.fallback
    assert state.chart.value.x_key == "local_timestamp"
    assert state.summary.value == "John accessed three doors after hours."
    assert not state.summary.fallback


@pytest.mark.asyncio
@patch(SQL_LLM, new_callable=AsyncMock)
async def test_stacked_statement_never_reaches_store(mock_sql, settings, spy_store):
    mock_sql.return_value = "select * from access_events; DROP TABLE access_events;"
    pipeline = QueryPipeline(settings, query_runner=spy_store)

    with pytest.raises(ValidationError) as exc_info:
        await pipeline.run("Show everything")

    assert "Forbidden keyword: DROP" in exc_info.value.errors
    spy_store.assert_not_awaited()


@pytest.mark.asyncio
async def test_executor_rejects_stacked_statement_directly(settings, spy_store):
    pipeline = QueryPipeline(settings, query_runner=spy_store)
    with pytest.raises(ValidationError):
        await pipeline.sql_exec.execute("select * from access_events; DROP TABLE access_events;")
    spy_store.assert_not_awaited()


@pytest.mark.asyncio
@patch(SQL_LLM, new_callable=AsyncMock)
async def test_non_select_generation_stops_before_store(mock_sql, settings, spy_store):
    mock_sql.return_value = "I can't help with deleting data."
    pipeline = QueryPipeline(settings, query_runner=spy_store)

    with pytest.raises(SynthesisError):
        await pipeline.run("Delete all of John's events")
    spy_store.assert_not_awaited()


@pytest.mark.asyncio
@patch(SUMMARY_LLM, new_callable=AsyncMock)
@patch(CHART_LLM, new_callable=AsyncMock)
@patch(SQL_LLM, new_callable=AsyncMock)
async def test_empty_result_uses_chart_fallback_and_skips_summary(
    mock_sql, mock_chart, mock_summary, settings, spy_store
):
    mock_sql.return_value = "SELECT * FROM access_events WHERE full_name = 'nobody'"
    pipeline = QueryPipeline(settings, query_runner=spy_store)

    state = await pipeline.run("Show nobody's access")

    assert state.rows == []
    assert state.chart.value == EMPTY_FALLBACK
    assert state.summary is None
    mock_chart.assert_not_awaited()
    mock_summary.assert_not_awaited()


@pytest.mark.asyncio
@patch(SUMMARY_LLM, new_callable=AsyncMock)
@patch(CHART_LLM, new_callable=AsyncMock)
@patch(SQL_LLM, new_callable=AsyncMock)
async def test_enrichment_failures_do_not_fail_the_answer(
    mock_sql, mock_chart, mock_summary, settings, spy_store, access_rows
):
    mock_sql.return_value = "SELECT * FROM access_events"
    mock_chart.side_effect = ConnectionError("network down")
    mock_summary.side_effect = ConnectionError("network down")
    spy_store.return_value = access_rows

    state = await QueryPipeline(settings, query_runner=spy_store).run("Everything")

    assert state.rows == access_rows
    assert state.chart.fallback
    assert state.summary.fallback
    assert state.summary.value == "Error generating summary."
