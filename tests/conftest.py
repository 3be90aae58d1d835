"""Pytest configuration and fixtures."""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from access_insights.config.settings import Settings


@pytest.fixture
def settings():
    """Provide settings fixture that ignores any local .env file."""
    return Settings(
        _env_file=None,
        anthropic_api_key="test-key",
        db_connection_string="",
        allowed_origins=["http://localhost:3000"],
    )


@pytest.fixture
def access_rows():
    """A few rows shaped like the canonical history query."""
    return [
        {
            "local_timestamp": "2024-03-04T19:12:00",
            "full_name": "John Smith",
            "door_name": "Main Entrance",
            "credential_type": "card",
            "code": "granted_full_test_used",
        },
        {
            "local_timestamp": "2024-03-02T07:45:00",
            "full_name": "John Smith",
            "door_name": "Server Room",
            "credential_type": "mobile",
            "code": "denied_schedule",
        },
        {
            "local_timestamp": "2024-02-28T22:03:00",
            "full_name": "Johnny Walker",
            "door_name": "Loading Dock",
            "credential_type": "biometric",
            "code": "granted_full",
        },
    ]


@pytest.fixture
def spy_store():
    """Store runner spy; set ``spy_store.return_value`` or ``side_effect`` per test."""
    return AsyncMock(return_value=[])


@pytest.fixture
def make_message():
    """Factory for objects shaped like an Anthropic Messages API response."""

    def _make(text: str, stop_reason: str = "end_turn"):
        return SimpleNamespace(
            content=[SimpleNamespace(type="text", text=text)],
            stop_reason=stop_reason,
        )

    return _make
