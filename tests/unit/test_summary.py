"""Tests for the summary service."""

from unittest.mock import AsyncMock, patch

import pytest

from access_insights.services.summary.service import SummaryService

GENERATE_TEXT = "access_insights.services.summary.service.generate_text"


@pytest.mark.asyncio
@patch(GENERATE_TEXT, new_callable=AsyncMock)
async def test_summarize_returns_model_text(mock_generate, settings, access_rows):
    mock_generate.return_value = "  John Smith entered the Main Entrance after hours twice.  "
    summary = await SummaryService(settings).summarize(access_rows, "John after hours", "SELECT 1")
    assert summary == "John Smith entered the Main Entrance after hours twice."


@pytest.mark.asyncio
@patch(GENERATE_TEXT, new_callable=AsyncMock)
async def test_summarize_never_raises(mock_generate, settings, access_rows):
    mock_generate.side_effect = RuntimeError("service unavailable")
    service = SummaryService(settings)

    assert await service.summarize(access_rows, "q", "SELECT 1") == "Error generating summary."

    result = await service.generate(access_rows, "q", "SELECT 1")
    assert result.fallback
    assert result.error == "service unavailable"


@pytest.mark.asyncio
@patch(GENERATE_TEXT, new_callable=AsyncMock)
async def test_summarize_empty_text_placeholder(mock_generate, settings, access_rows):
    mock_generate.return_value = "   "
    summary = await SummaryService(settings).summarize(access_rows, "q", "SELECT 1")
    assert summary == "No summary available."


@pytest.mark.asyncio
@patch(GENERATE_TEXT, new_callable=AsyncMock)
async def test_summary_prompt_samples_fifty_rows(mock_generate, settings):
    rows = [{"full_name": f"Person {i:03d}"} for i in range(80)]
    mock_generate.return_value = "ok"

    await SummaryService(settings).summarize(rows, "Top users", "SELECT full_name FROM access_events")

    prompt = mock_generate.await_args.args[1]
    assert "Person 049" in prompt
    assert "Person 050" not in prompt
    assert 'User\'s Search Query: "Top users"' in prompt
    assert "denied_anti_passback" in prompt
