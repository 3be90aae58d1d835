"""
SQL explanation prompt.
"""

from access_insights.config.schema import build_table_ddl


def build_explanation_prompt(question: str, sql: str) -> str:
    """Build the prompt asking for a clause-by-clause explanation of ``sql``."""
    ddl = build_table_ddl(if_not_exists=False)

    return f"""You are a SQL (postgres) expert. Your job is to explain to the user the SQL query you wrote to retrieve the data they asked for. The table schema is as follows:
{ddl}

When you explain you must take a section of the query, and then explain it. Each "section" should be unique. So in a query like: "SELECT COUNT(*), credential_type FROM access_events GROUP BY credential_type", the sections could be "SELECT COUNT(*), credential_type", "FROM access_events", "GROUP BY credential_type".
If a section doesn't have any explanation, include it, but leave the explanation empty.

Return a JSON object with a "sections" array where each section has a "text" and "explanation" field:
{{"sections": [{{"text": "SELECT ...", "explanation": "..."}}]}}

User Query:
{question}

Generated SQL Query:
{sql}"""
