"""
JSON Parser utility for extracting JSON from LLM responses.
"""
import json
import logging
import re
from typing import Any, Dict

logger = logging.getLogger(__name__)

_ANSWER_TAG = re.compile(r"<answer>\s*(.*?)\s*</answer>", re.DOTALL | re.IGNORECASE)
_FENCED_OBJECT = re.compile(r"```(?:json)?\s*(\{.*?\})\s*```", re.DOTALL)
_BARE_OBJECT = re.compile(r"(\{.*\})", re.DOTALL)


class JSONParser:
    """Helper class to extract clean JSON objects from LLM responses."""

    @staticmethod
    def _loads_object(candidate: str) -> Dict[str, Any] | None:
        try:
            value = json.loads(candidate)
        except json.JSONDecodeError:
            return None
        return value if isinstance(value, dict) else None

    @staticmethod
    def _search(text: str) -> Dict[str, Any] | None:
        """Try a fenced block first, then the widest ``{...}`` span."""
        for pattern in (_FENCED_OBJECT, _BARE_OBJECT):
            match = pattern.search(text)
            if match:
                parsed = JSONParser._loads_object(match.group(1))
                if parsed is not None:
                    return parsed
        return None

    @staticmethod
    def extract_json(text: str) -> Dict[str, Any]:
        """Attempts to extract a JSON object from text. Returns {} when none is found."""
        if not text:
            return {}

        parsed = JSONParser._loads_object(text.strip())
        if parsed is not None:
            return parsed

        # Some models wrap the payload in <answer> tags
        answer_match = _ANSWER_TAG.search(text)
        if answer_match:
            parsed = JSONParser._search(answer_match.group(1))
            if parsed is not None:
                return parsed

        parsed = JSONParser._search(text)
        if parsed is not None:
            return parsed

        logger.warning("JSONParser: Could not extract JSON from text, returning empty dict")
        return {}
