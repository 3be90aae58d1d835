"""Tests for the explanation service."""

from unittest.mock import AsyncMock, patch

import pytest

from access_insights.infrastructure.llm.executor import StructuredOutputError
from access_insights.services.errors import ExplanationError
from access_insights.services.explanation.models import QueryExplanation, QueryExplanations
from access_insights.services.explanation.service import ExplanationService

GENERATE_OBJECT = "access_insights.services.explanation.service.generate_object"
SQL = "SELECT COUNT(*), credential_type FROM access_events GROUP BY credential_type"


@pytest.mark.asyncio
@patch(GENERATE_OBJECT, new_callable=AsyncMock)
async def test_explain_returns_sections_in_order(mock_generate, settings):
    mock_generate.return_value = QueryExplanations.model_validate(
        {
            "sections": [
                {"text": "SELECT COUNT(*), credential_type", "explanation": "Count per type"},
                {"text": "FROM access_events", "explanation": ""},
                {"text": "GROUP BY credential_type", "explanation": "One row per type"},
            ]
        }
    )

    sections = await ExplanationService(settings).explain("Credential mix", SQL)

    assert [s.text for s in sections] == [
        "SELECT COUNT(*), credential_type",
        "FROM access_events",
        "GROUP BY credential_type",
    ]
    assert " ".join(s.text for s in sections) == SQL
    assert sections[1].explanation == ""

    prompt = mock_generate.await_args.args[1]
    assert "Credential mix" in prompt
    assert SQL in prompt
    assert "CREATE TABLE access_events" in prompt


@pytest.mark.asyncio
@patch(GENERATE_OBJECT, new_callable=AsyncMock)
async def test_explain_raises_on_failure(mock_generate, settings):
    mock_generate.side_effect = StructuredOutputError("Could not extract JSON")
    with pytest.raises(ExplanationError, match="Failed to generate query explanation"):
        await ExplanationService(settings).explain("q", SQL)


def test_query_explanation_accepts_section_alias():
    explanation = QueryExplanation.model_validate({"section": "FROM access_events"})
    assert explanation.text == "FROM access_events"
    assert explanation.explanation == ""
