"""
Chart configuration prompt.
"""

import json
from typing import Any

_CHART_GUIDELINES = """You are a data visualization expert specializing in access control systems.
Return a JSON object with this exact structure:
{
  "type": "bar" | "line" | "area" | "pie",
  "title": string,
  "description": string,
  "takeaway": string,
  "xKey": string,
  "yKeys": string[],
  "legend": boolean
}

For line charts you may also return:
  "multipleLines": boolean (whether the chart compares groups of data),
  "measurementColumn": string (quantitative column to measure),
  "lineCategories": string[] (one category per line)

Common visualization patterns:
- Bar charts for access counts by door or credential type
- Line charts for access patterns over time
- Pie charts for credential type distribution
- Stacked bar charts for comparing access codes

Guidelines:
- Time-series data should use line charts
- Categorical comparisons should use bar charts
- Distribution analysis should use pie charts
- Multiple metrics over time should use multi-line charts
- xKey and every yKeys entry MUST be column names from the data structure below"""


def build_chart_config_prompt(
    question: str,
    data_structure: list[dict[str, str]],
    data_analysis: dict[str, Any],
    sample_rows: list[dict[str, Any]],
) -> str:
    """Build the prompt asking for a chart configuration."""
    return f"""{_CHART_GUIDELINES}

User Query: {question}

Data Structure:
{json.dumps(data_structure, indent=2, default=str)}

Data Analysis:
{json.dumps(data_analysis, indent=2, default=str)}

Sample Data:
{json.dumps(sample_rows, indent=2, default=str)}

Generate a chart configuration JSON object following the structure specified above."""
