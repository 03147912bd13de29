"""Data models for Company Insights."""

from .company import (
    CompanyRecord,
    EnrichedCompany,
    EnrichmentResult,
    AnalysisSection,
    WebsiteAnalysis,
    SocialPresence,
    CompetitiveIntel,
    FounderIntel,
)
from .analysis import (
    BatchAnalysis,
    CompetitiveMatrix,
    FundingStats,
    StoredCompanyData,
)

__all__ = [
    "CompanyRecord",
    "EnrichedCompany",
    "EnrichmentResult",
    "AnalysisSection",
    "WebsiteAnalysis",
    "SocialPresence",
    "CompetitiveIntel",
    "FounderIntel",
    "BatchAnalysis",
    "CompetitiveMatrix",
    "FundingStats",
    "StoredCompanyData",
]
