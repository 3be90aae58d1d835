"""Visualization service models."""

from pydantic import BaseModel, ConfigDict, Field

from access_insights.config.constants import ChartType


class ChartConfig(BaseModel):
    """Chart configuration consumed by the frontend chart renderer."""

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    type: ChartType = Field(description="Type of chart")
    title: str
    description: str = Field(
        description="Describe the chart. What is it showing? What is interesting about the way the data is displayed?"
    )
    takeaway: str = Field(description="What is the main takeaway from the chart?")
    x_key: str = Field(alias="xKey", description="Key for x-axis or category")
    y_keys: list[str] = Field(
        alias="yKeys",
        min_length=1,
        description="Key(s) for y-axis values, typically the quantitative column",
    )
    multiple_lines: bool | None = Field(
        default=None,
        alias="multipleLines",
        description="For line charts only: whether the chart is comparing groups of data.",
    )
    measurement_column: str | None = Field(
        default=None,
        alias="measurementColumn",
        description="For line charts only: key for the quantitative y-axis column.",
    )
    line_categories: list[str] | None = Field(
        default=None,
        alias="lineCategories",
        description="For line charts only: one category per line in the chart.",
    )
    colors: dict[str, str] = Field(
        default_factory=dict,
        description="Mapping of y keys to CSS color values",
    )
    legend: bool = Field(default=False, description="Whether to show legend")


class ColumnProfile(BaseModel):
    """Column classification of a result sample, as shown to the chart model."""

    time_columns: list[str] = Field(default_factory=list, serialization_alias="timeColumns")
    numerical_columns: list[str] = Field(
        default_factory=list, serialization_alias="numericalColumns"
    )
    categorical_columns: list[str] = Field(
        default_factory=list, serialization_alias="categoricalColumns"
    )

    @property
    def has_time_data(self) -> bool:
        return bool(self.time_columns)

    @property
    def has_numerical_data(self) -> bool:
        return bool(self.numerical_columns)

    @property
    def has_categorical_data(self) -> bool:
        return bool(self.categorical_columns)
