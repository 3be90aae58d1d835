"""
Deterministic clean-up of generated SQL text.

Generated SQL drifts in known ways: markdown fences, comments, exact-match
name filters and synonyms for the schema's column and table names. Each drift
has one rule here. Rules run in ``REPAIR_RULES`` order; the name filter rules
come first because the later rules assume exact-match name filters have
already been rewritten into fuzzy filters. No rule matches its own output, so
``apply_repairs(apply_repairs(sql)) == apply_repairs(sql)``.
"""

import logging
import re

from access_insights.services.sql.models import RepairRule

logger = logging.getLogger(__name__)

_FENCE_OPEN = re.compile(r"```sql\n?")
_FENCE_CLOSE = re.compile(r"```\n?")
_LINE_COMMENT = re.compile(r"--.*$", re.MULTILINE)
_LEADING_INDENT = re.compile(r"\n\s+")
_WHITESPACE_RUN = re.compile(r"\s+")

_FUZZY_NAME = r"LOWER(full_name) ILIKE LOWER('%\1%')"

REPAIR_RULES: tuple[RepairRule, ...] = (
    # Name matching (must come first)
    RepairRule("full_name_single_quoted", re.compile(r"full_name\s*=\s*'([^']+)'"), _FUZZY_NAME),
    RepairRule("full_name_double_quoted", re.compile(r'full_name\s*=\s*"([^"]+)"'), _FUZZY_NAME),
    # Column synonyms
    RepairRule("event_time", re.compile(r"\bevent_time\b"), "local_timestamp"),
    RepairRule("timestamp", re.compile(r"\btimestamp\b"), "local_timestamp"),
    RepairRule("creation_timestamp", re.compile(r"\bcreation_timestamp\b"), "local_timestamp"),
    # Table synonyms
    RepairRule("user_credentials", re.compile(r"\buser_credentials\b"), "access_events"),
    RepairRule("credentials", re.compile(r"\bcredentials\b"), "access_events"),
    # Boolean flag idiom
    RepairRule(
        "is_mobile_flag",
        re.compile(r"\bis_mobile\s*=\s*TRUE\b", re.IGNORECASE),
        "credential_type = 'mobile'",
    ),
)


def strip_markdown(text: str) -> str:
    """Remove markdown code fences."""
    if "```" not in text:
        return text
    logger.debug("Markdown code blocks detected, cleaning up")
    return _FENCE_CLOSE.sub("", _FENCE_OPEN.sub("", text)).strip()


def strip_comments(text: str) -> str:
    """Remove ``--`` line comments."""
    return _LINE_COMMENT.sub("", text).strip()


def collapse_whitespace(text: str) -> str:
    """Drop per-line indentation and collapse whitespace runs to one space."""
    text = _LEADING_INDENT.sub("\n", text)
    return _WHITESPACE_RUN.sub(" ", text).strip()


def apply_repairs(sql: str, rules: tuple[RepairRule, ...] = REPAIR_RULES) -> str:
    """Apply ``rules`` in order, logging each rule that changed the text."""
    for rule in rules:
        repaired = rule.apply(sql)
        if repaired != sql:
            logger.info(f"Repair applied: {rule.name}")
            logger.debug(f"Before: {sql}\nAfter: {repaired}")
            sql = repaired
    return sql


def clean_generated_sql(raw: str) -> str:
    """Run the full clean-up chain on raw model output."""
    text = strip_markdown(raw.strip())
    text = strip_comments(text)
    text = collapse_whitespace(text)
    return apply_repairs(text)
