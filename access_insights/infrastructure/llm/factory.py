"""Anthropic client factory."""

import logging

import anthropic

from access_insights.config.settings import Settings

logger = logging.getLogger(__name__)

_shared_client: anthropic.AsyncAnthropic | None = None


def create_anthropic_client(settings: Settings) -> anthropic.AsyncAnthropic:
    """
    Create an async Anthropic client from settings.

    Retries are disabled: a failed generation call is reported once and the
    user resubmits.
    """
    logger.debug(f"Creating Anthropic client for model: {settings.llm_model}")
    return anthropic.AsyncAnthropic(
        api_key=settings.anthropic_api_key,
        timeout=settings.llm_timeout,
        max_retries=0,
    )


def get_shared_client(settings: Settings) -> anthropic.AsyncAnthropic:
    """
    Get or create the process-wide Anthropic client.

    The client holds an HTTP connection pool, so services share one instance
    instead of opening a pool per request.
    """
    global _shared_client
    if _shared_client is None:
        _shared_client = create_anthropic_client(settings)
    return _shared_client


async def close_shared_client() -> None:
    """
    Close the shared client instance.

    Should be called during application shutdown to release the connection pool.
    """
    global _shared_client
    if _shared_client is not None:
        await _shared_client.close()
        _shared_client = None
