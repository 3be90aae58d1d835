"""Chart configuration service."""

import logging
import math
from decimal import Decimal
from typing import Any

from access_insights.config.constants import ChartType, ColumnKind, chart_color
from access_insights.config.prompts import build_chart_config_prompt
from access_insights.config.settings import Settings
from access_insights.infrastructure.llm.executor import generate_object
from access_insights.services.errors import ChartConfigError
from access_insights.services.models import EnrichmentResult
from access_insights.services.sql.models import ResultSet
from access_insights.services.viz.models import ChartConfig, ColumnProfile

logger = logging.getLogger(__name__)

_TIME_MARKERS = ("timestamp", "date", "time")

EMPTY_FALLBACK = ChartConfig(
    type=ChartType.BAR,
    title="No Data Available",
    description="No data available to visualize",
    takeaway="No data available for analysis",
    x_key="category",
    y_keys=["value"],
    colors={"value": chart_color(0)},
    legend=False,
)


def _is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float, Decimal)):
        return True
    if isinstance(value, str):
        try:
            return math.isfinite(float(value))
        except ValueError:
            return False
    return False


def classify_column(name: str, value: Any) -> ColumnKind | None:
    """
    Classify one column from its name and a sample value.

    Time-like names win over numeric values, numeric values over strings.
    Returns None for values that fit no class (e.g. null).
    """
    if any(marker in name.lower() for marker in _TIME_MARKERS):
        return ColumnKind.TIME
    if _is_numeric(value):
        return ColumnKind.NUMERIC
    if isinstance(value, str):
        return ColumnKind.CATEGORICAL
    return None


def profile_columns(row: dict[str, Any]) -> ColumnProfile:
    """Classify every column of ``row``."""
    profile = ColumnProfile()
    buckets = {
        ColumnKind.TIME: profile.time_columns,
        ColumnKind.NUMERIC: profile.numerical_columns,
        ColumnKind.CATEGORICAL: profile.categorical_columns,
    }
    for name, value in row.items():
        kind = classify_column(name, value)
        if kind is not None:
            buckets[kind].append(name)
    return profile


def assign_colors(y_keys: list[str]) -> dict[str, str]:
    """Color each y key by its position, cycling through the palette."""
    return {key: chart_color(index) for index, key in enumerate(y_keys)}


def build_column_fallback(results: ResultSet) -> ChartConfig:
    """Bar chart of the first two columns of the first row."""
    keys = list(results[0].keys()) if results else []
    x_key = keys[0] if keys else "category"
    y_key = keys[1] if len(keys) > 1 else "value"
    return ChartConfig(
        type=ChartType.BAR,
        title="Access Events",
        description="Basic visualization of access event data",
        takeaway="Data visualization currently unavailable",
        x_key=x_key,
        y_keys=[y_key],
        colors={y_key: chart_color(0)},
        legend=False,
    )


class ChartConfigService:
    """Chooses a chart configuration for a result set."""

    def __init__(self, settings: Settings):
        """Initialize chart config service."""
        self.settings = settings

    def _build_prompt(self, sample: ResultSet, question: str) -> str:
        first_row = sample[0]
        data_structure = [
            {"key": key, "type": type(value).__name__} for key, value in first_row.items()
        ]
        profile = profile_columns(first_row)
        data_analysis = {
            **profile.model_dump(by_alias=True),
            "hasTimeData": profile.has_time_data,
            "hasCategoricalData": profile.has_categorical_data,
            "hasNumericalData": profile.has_numerical_data,
        }
        return build_chart_config_prompt(
            question,
            data_structure,
            data_analysis,
            sample[: self.settings.chart_prompt_rows],
        )

    async def _request_config(self, sample: ResultSet, question: str) -> ChartConfig:
        try:
            prompt = self._build_prompt(sample, question)
            config = await generate_object(
                self.settings,
                prompt,
                ChartConfig,
                temperature=self.settings.chart_temperature,
                max_tokens=self.settings.chart_max_tokens,
            )
        except Exception as e:
            raise ChartConfigError(str(e)) from e

        return config.model_copy(update={"colors": assign_colors(config.y_keys)})

    async def generate(self, results: ResultSet, question: str) -> EnrichmentResult[ChartConfig]:
        """
        Generate a chart configuration. Never raises.

        Args:
            results: Result rows from the executor
            question: The user's original question

        Returns:
            EnrichmentResult holding the generated config, or a fallback
        """
        if not results:
            logger.warning("No results provided to chart configuration")
            return EnrichmentResult.degraded(EMPTY_FALLBACK)

        sample = results[: self.settings.chart_sample_rows]

        try:
            config = await self._request_config(sample, question)
        except ChartConfigError as e:
            if "tokens" in str(e):
                logger.warning("Token limit exceeded, using fallback chart config")
            else:
                logger.error(f"Chart config generation error: {e}", exc_info=True)
            return EnrichmentResult.degraded(build_column_fallback(results), error=str(e))

        logger.info(f"Chart config generated: type={config.type}, x={config.x_key}, y={config.y_keys}")
        return EnrichmentResult.ok(config)

    async def build_chart_config(self, results: ResultSet, question: str) -> ChartConfig:
        """Return the chart configuration for ``results`` (generated or fallback)."""
        return (await self.generate(results, question)).value
