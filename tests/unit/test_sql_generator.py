"""Tests for the SQL generator (synthesizer)."""

from unittest.mock import AsyncMock, patch

import pytest

from access_insights.services.errors import SynthesisError
from access_insights.services.sql.generator import SQLGenerator


@pytest.mark.asyncio
@patch("access_insights.services.sql.generator.generate_text", new_callable=AsyncMock)
async def test_synthesize_cleans_and_repairs(mock_generate, settings):
    mock_generate.return_value = (
        "```sql\nselect\n    timestamp, full_name\nFROM access_events\n"
        "WHERE full_name = 'smith'\n```"
    )
    sql = await SQLGenerator(settings).synthesize("Show all access by Smith")

    assert sql == (
        "SELECT local_timestamp, full_name FROM access_events "
        "WHERE LOWER(full_name) ILIKE LOWER('%smith%')"
    )


@pytest.mark.asyncio
@patch("access_insights.services.sql.generator.generate_text", new_callable=AsyncMock)
async def test_synthesize_sends_request_in_template(mock_generate, settings):
    mock_generate.return_value = "SELECT 1"
    await SQLGenerator(settings).synthesize("Which doors are busiest?")

    prompt = mock_generate.await_args.args[1]
    assert "Generate a SQL query for this request: Which doors are busiest?" in prompt
    assert "access_events" in prompt
    assert mock_generate.await_args.kwargs["temperature"] == settings.sql_temperature


@pytest.mark.asyncio
@patch("access_insights.services.sql.generator.generate_text", new_callable=AsyncMock)
async def test_synthesize_rejects_non_select(mock_generate, settings):
    mock_generate.return_value = "I'm sorry, I can't help with that."
    with pytest.raises(SynthesisError, match="Failed to generate query"):
        await SQLGenerator(settings).synthesize("Delete everything")


@pytest.mark.asyncio
@patch("access_insights.services.sql.generator.generate_text", new_callable=AsyncMock)
async def test_synthesize_wraps_generation_failure(mock_generate, settings):
    mock_generate.side_effect = RuntimeError("overloaded")
    with pytest.raises(SynthesisError) as exc_info:
        await SQLGenerator(settings).synthesize("Show John's after-hours access")
    assert str(exc_info.value) == "Failed to generate query"
    assert isinstance(exc_info.value.__cause__, RuntimeError)


@pytest.mark.asyncio
@patch("access_insights.services.sql.generator.generate_text", new_callable=AsyncMock)
async def test_synthesize_only_comments_is_rejected(mock_generate, settings):
    mock_generate.return_value = "-- no query possible"
    with pytest.raises(SynthesisError):
        await SQLGenerator(settings).synthesize("???")
