"""
Constants, enums, and static values.
"""

from enum import Enum


class CredentialType(str, Enum):
    """Credential used to present at a door."""

    CARD = "card"
    MOBILE = "mobile"
    PIN = "pin"
    BIOMETRIC = "biometric"


class AccessCode(str, Enum):
    """Outcome code recorded by a door controller."""

    GRANTED_FULL_TEST_USED = "granted_full_test_used"
    GRANTED_FULL = "granted_full"
    DENIED_FULL = "denied_full"
    DENIED_SCHEDULE = "denied_schedule"
    DENIED_ANTI_PASSBACK = "denied_anti_passback"
    DENIED_CREDENTIAL_EXPIRED = "denied_credential_expired"
    DENIED_INVALID_SCHEDULE = "denied_invalid_schedule"
    DENIED_INVALID_CREDENTIAL = "denied_invalid_credential"


# Shown to the summary model so it reads the codes the way an analyst would
ACCESS_CODE_DEFINITIONS: dict[AccessCode, str] = {
    AccessCode.GRANTED_FULL_TEST_USED: "Standard successful access (normal operation)",
    AccessCode.GRANTED_FULL: "Standard successful access without verification",
    AccessCode.DENIED_FULL: "Access denied (unauthorized attempt)",
    AccessCode.DENIED_SCHEDULE: "Access denied due to schedule restrictions",
    AccessCode.DENIED_ANTI_PASSBACK: "Access denied due to tailgating prevention",
}


class ChartType(str, Enum):
    """Chart types for visualization."""

    BAR = "bar"
    LINE = "line"
    AREA = "area"
    PIE = "pie"


class ColumnKind(str, Enum):
    """Coarse column classification used when asking for a chart."""

    TIME = "time"
    NUMERIC = "numeric"
    CATEGORICAL = "categorical"


class PipelineStep(str, Enum):
    """Pipeline execution steps."""

    SQL_GENERATION = "sql_generation"
    SQL_VALIDATION = "sql_validation"
    SQL_EXECUTION = "sql_execution"
    CHART = "chart"
    SUMMARY = "summary"
    EXPLANATION = "explanation"


class PipelineStepDescription(str, Enum):
    """Pipeline execution step descriptions."""

    SQL_GENERATION = "Generate the SQL query to answer the user's question"
    SQL_VALIDATION = "Validate the SQL query against the read-only rules"
    SQL_EXECUTION = "Execute the SQL query against the access events store"
    CHART = "Choose a chart configuration for the result rows"
    SUMMARY = "Summarize the result rows for the user"
    EXPLANATION = "Explain the SQL query clause by clause"


# User-facing messages
GENERIC_ERROR_MESSAGE = "An error occurred. Please try again."
SUMMARY_ERROR_MESSAGE = "Error generating summary."
SUMMARY_EMPTY_MESSAGE = "No summary available."

# Chart colors are CSS variables resolved by the frontend theme
CHART_PALETTE_SIZE = 5


def chart_color(index: int) -> str:
    """Return the theme color for the y key at ``index`` (cycles through the palette)."""
    return f"hsl(var(--chart-{index % CHART_PALETTE_SIZE + 1}))"


SUGGESTED_QUERIES: list[dict[str, str]] = [
    {
        "desktop": "Compare card vs mobile credential usage over the past week",
        "mobile": "Card vs mobile",
    },
    {
        "desktop": "Which doors have the highest traffic during peak hours?",
        "mobile": "Busy doors",
    },
    {
        "desktop": "Which users have the most frequent access events?",
        "mobile": "Top users",
    },
    {
        "desktop": "Show distribution of credential types by door",
        "mobile": "Credentials",
    },
    {
        "desktop": "Compare first floor vs second floor access frequency",
        "mobile": "Floor compare",
    },
    {
        "desktop": "Show trend of mobile credential adoption over time",
        "mobile": "Mobile trend",
    },
]
