"""Company Insights: deep enrichment and batch analytics for startup companies."""

__version__ = "0.1.0"
