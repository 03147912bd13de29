"""Deep enrichment of companies through an extraction provider."""

from .tasks import ExtractionTask
from .orchestrator import EnrichmentOrchestrator, MissingWebsiteError, RESEARCH_ANGLES

__all__ = ["ExtractionTask", "EnrichmentOrchestrator", "MissingWebsiteError", "RESEARCH_ANGLES"]
