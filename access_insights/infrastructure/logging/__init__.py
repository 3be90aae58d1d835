"""Logging infrastructure."""

from access_insights.infrastructure.logging.logger import (
    JsonFormatter,
    StructuredLogger,
    setup_logging,
)

__all__ = ["JsonFormatter", "StructuredLogger", "setup_logging"]
