"""
Result summary prompt.
"""

import json
from typing import Any

from access_insights.config.constants import ACCESS_CODE_DEFINITIONS


def build_summary_prompt(rows: list[dict[str, Any]], question: str, sql: str) -> str:
    """Build the security-analyst summary prompt for a sample of result rows."""
    code_definitions = "\n".join(
        f"- {code.value}: {definition}" for code, definition in ACCESS_CODE_DEFINITIONS.items()
    )

    return f"""As a security access control analyst, provide a concise, informative summary of the access event data based on the user's search intent and the data retrieved.

CONTEXT:
User's Search Query: "{question}"
SQL Query Executed: "{sql}"

IMPORTANT ACCESS CODE DEFINITIONS:
{code_definitions}

DATA ANALYSIS POINTS:
1. Access Patterns: When and where access occurred
2. Credential Usage: Types and frequency of credentials used
3. Success Rate: Patterns in granted vs denied access
4. Time Patterns: Business hours (9AM-5PM) vs after-hours access
5. Location Patterns: Most frequently accessed areas
6. Relevance: How the findings relate to the user's search intent

GUIDELINES:
- "granted_full_test_used" is normal successful access, not a test credential
- Directly address the user's search intent
- Focus on security-relevant patterns and insights
- Use specific numbers and statistics when relevant
- Highlight any unusual or notable patterns
- Keep the summary professional and clear
- Limit to 2-3 concise sentences

DATA TO ANALYZE:
{json.dumps(rows, default=str)}

Provide a clear, security-focused summary that addresses the user's search intent:"""
