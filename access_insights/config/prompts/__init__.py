"""Prompts for the access insights generation calls."""

from access_insights.config.prompts.chart import build_chart_config_prompt
from access_insights.config.prompts.explanation import build_explanation_prompt
from access_insights.config.prompts.sql import (
    build_sql_generation_prompt,
    build_sql_generation_system_prompt,
)
from access_insights.config.prompts.summary import build_summary_prompt

__all__ = [
    "build_chart_config_prompt",
    "build_explanation_prompt",
    "build_sql_generation_prompt",
    "build_sql_generation_system_prompt",
    "build_summary_prompt",
]
