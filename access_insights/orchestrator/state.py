"""Pipeline state model."""

from dataclasses import dataclass, field
from typing import Any, Optional

from access_insights.services.models import EnrichmentResult
from access_insights.services.viz.models import ChartConfig


@dataclass
class PipelineState:
    """State object passed through the pipeline for one question."""

    # Input
    question: str

    # Step 1: SQL generation
    sql: Optional[str] = None

    # Step 2: SQL execution
    rows: list[dict[str, Any]] = field(default_factory=list)

    # Step 3: Enrichment (chart and summary run concurrently)
    chart: Optional[EnrichmentResult[ChartConfig]] = None
    summary: Optional[EnrichmentResult[str]] = None

    @property
    def columns(self) -> list[str]:
        return list(self.rows[0].keys()) if self.rows else []
