"""LLM infrastructure module."""

from access_insights.infrastructure.llm.executor import (
    StructuredOutputError,
    generate_object,
    generate_text,
)
from access_insights.infrastructure.llm.factory import (
    close_shared_client,
    create_anthropic_client,
    get_shared_client,
)

__all__ = [
    "StructuredOutputError",
    "generate_object",
    "generate_text",
    "close_shared_client",
    "create_anthropic_client",
    "get_shared_client",
]
