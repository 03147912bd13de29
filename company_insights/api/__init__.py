"""HTTP API for Company Insights."""
