"""Query pipeline orchestration."""
