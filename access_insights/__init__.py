"""Access Insights: natural-language questions over building access events."""

__version__ = "0.1.0"
