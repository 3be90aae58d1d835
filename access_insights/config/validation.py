"""
SQL guard rules for generated access-event queries.

This is a deny-list, not a parser. It does not see through comments that split
a keyword, encoded literals, ``SELECT ... INTO`` or data-modifying CTEs. It is
a surface check on statements produced by the synthesizer and must not be
treated as an injection defense.
"""

import re

# =============================================================================
# Forbidden Keywords (matched as whole words, case-insensitive)
# =============================================================================

FORBIDDEN_KEYWORDS: tuple[str, ...] = (
    "drop",
    "delete",
    "insert",
    "update",
    "alter",
    "truncate",
    "create",
    "grant",
    "revoke",
)

_FORBIDDEN_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = tuple(
    (keyword, re.compile(rf"\b{re.escape(keyword)}\b")) for keyword in FORBIDDEN_KEYWORDS
)

ALLOWED_STATEMENT_PREFIXES: tuple[str, ...] = ("select ", "select\n")


# =============================================================================
# Individual Checks
# =============================================================================


def is_select_statement(sql: str) -> bool:
    """True if the trimmed, lower-cased statement starts with ``select`` plus a space or newline."""
    lowered = sql.strip().lower()
    return lowered.startswith(ALLOWED_STATEMENT_PREFIXES)


def find_forbidden_keywords(sql: str) -> list[str]:
    """Return the forbidden keywords present in ``sql`` as whole words, in deny-list order."""
    lowered = sql.lower()
    return [keyword for keyword, pattern in _FORBIDDEN_PATTERNS if pattern.search(lowered)]


# =============================================================================
# Main Validation Function
# =============================================================================


def validate_sql_query(sql: str | None) -> tuple[bool, list[str]]:
    """
    Validate a candidate statement against the shape rule and the deny-list.

    Args:
        sql: SQL query string

    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    if not sql or not sql.strip():
        return False, ["SQL query is empty"]

    errors = []

    if not is_select_statement(sql):
        errors.append("Query must start with SELECT")

    for keyword in find_forbidden_keywords(sql):
        errors.append(f"Forbidden keyword: {keyword.upper()}")

    return len(errors) == 0, errors
