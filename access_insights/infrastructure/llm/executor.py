"""
Text and structured-object generation over the Anthropic Messages API.
"""
import logging
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from access_insights.config.settings import Settings
from access_insights.infrastructure.llm.factory import get_shared_client
from access_insights.utils.json_parser import JSONParser

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class StructuredOutputError(Exception):
    """The model answered, but not with an object matching the requested schema."""


async def _complete(
    settings: Settings,
    prompt: str,
    temperature: float,
    max_tokens: int,
    system: str | None = None,
) -> tuple[str, str | None]:
    """Send one user message and return (text, stop_reason)."""
    client = get_shared_client(settings)
    request: dict = {
        "model": settings.llm_model,
        "max_tokens": max_tokens,
        "temperature": temperature,
        "messages": [{"role": "user", "content": prompt}],
    }
    if system:
        request["system"] = system

    message = await client.messages.create(**request)

    # Accumulate every text block; tool or thinking blocks are not requested
    text = "".join(
        block.text for block in message.content if getattr(block, "type", None) == "text"
    )
    return text, message.stop_reason


async def generate_text(
    settings: Settings,
    prompt: str,
    *,
    temperature: float = 0.0,
    max_tokens: int = 1024,
    system: str | None = None,
) -> str:
    """
    Generate free text for a single prompt.

    Args:
        settings: Application settings
        prompt: Full prompt text
        temperature: Sampling temperature
        max_tokens: Maximum tokens for the response
        system: Optional system prompt

    Returns:
        Generated text (may be empty)
    """
    text, stop_reason = await _complete(settings, prompt, temperature, max_tokens, system)
    if stop_reason == "max_tokens":
        logger.warning(f"generate_text: response truncated at max_tokens={max_tokens}")
    logger.debug(f"generate_text: received {len(text)} chars")
    return text


async def generate_object(
    settings: Settings,
    prompt: str,
    response_format: type[ModelT],
    *,
    temperature: float = 0.0,
    max_tokens: int = 1024,
    system: str | None = None,
) -> ModelT:
    """
    Generate an object conforming to ``response_format``.

    The model is asked for JSON; the JSON is extracted from the response text
    and validated with the pydantic model.

    Raises:
        StructuredOutputError: If the response was truncated, held no JSON
            object, or did not validate against ``response_format``
    """
    text, stop_reason = await _complete(settings, prompt, temperature, max_tokens, system)

    if stop_reason == "max_tokens":
        raise StructuredOutputError(
            f"Response for {response_format.__name__} truncated: max_tokens={max_tokens} reached"
        )

    json_data = JSONParser.extract_json(text)
    if not json_data:
        raise StructuredOutputError(
            f"Could not extract JSON for {response_format.__name__}. "
            f"Full text (first 500 chars): {text[:500]}"
        )

    try:
        parsed = response_format.model_validate(json_data)
    except ValidationError as e:
        raise StructuredOutputError(
            f"Failed to parse response as {response_format.__name__}: {e}"
        ) from e

    logger.debug(f"Successfully parsed {response_format.__name__} from response")
    return parsed
