"""Industry and location classification of company records."""

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Optional

from company_insights.models import CompanyRecord

logger = logging.getLogger(__name__)

OTHER_INDUSTRY = "Other"
NOT_SPECIFIED = "Not Specified"


@dataclass(frozen=True)
class Classification:
    """Buckets assigned to one company."""

    industry: str
    location: str


class CompanyClassifier:
    """Assign exactly one industry bucket and one location bucket per company.

    Industries are tested in table order and the first category with any
    trigger in the lowercased description wins, so a description matching
    several categories always lands in the earliest one. Triggers are plain
    substrings: "ai" also matches inside longer words.
    """

    # Industry keyword mappings, in priority order
    INDUSTRY_KEYWORDS = {
        "AI/ML": [
            "ai", "artificial intelligence", "machine learning", "deep learning",
            "neural network", "computer vision", "nlp", "natural language",
        ],
        "Fintech": [
            "fintech", "finance", "financial", "payment", "banking", "lending",
            "crypto", "blockchain", "trading", "investment",
        ],
        "Healthcare": [
            "health", "medical", "healthcare", "biotech", "pharma", "telemedicine",
            "wellness", "therapy", "diagnosis",
        ],
        "Developer Tools": [
            "developer", "api", "infrastructure", "devops", "cloud", "database",
            "sdk", "framework", "platform",
        ],
        "E-commerce": [
            "ecommerce", "e-commerce", "marketplace", "retail", "shopping",
            "commerce", "store",
        ],
        "Education": [
            "education", "edtech", "learning", "teaching", "course", "training",
            "school", "university",
        ],
        "Enterprise/B2B": [
            "enterprise", "b2b", "business", "corporate", "workflow", "productivity",
            "collaboration", "crm", "erp",
        ],
        "Consumer/B2C": [
            "consumer", "b2c", "social", "mobile app", "lifestyle", "entertainment",
            "gaming", "media",
        ],
        "Climate/Sustainability": [
            "climate", "sustainability", "renewable", "green", "carbon",
            "environment", "clean energy",
        ],
        "Real Estate": [
            "real estate", "property", "housing", "rental", "proptech",
        ],
        "Transportation": [
            "transportation", "mobility", "logistics", "delivery", "shipping",
            "autonomous", "rideshare",
        ],
        "Food & Agriculture": [
            "food", "agriculture", "farming", "restaurant", "delivery", "nutrition",
            "agtech",
        ],
    }

    # (canonical bucket, case-sensitive aliases), first match wins
    LOCATION_ALIASES = [
        ("San Francisco Bay Area", ["San Francisco", "SF", "Bay Area"]),
        ("New York", ["New York", "NYC"]),
        ("Los Angeles", ["Los Angeles", "LA"]),
        ("London", ["London"]),
        ("Remote", ["Remote"]),
    ]

    @classmethod
    def industries(cls) -> list[str]:
        """Every industry bucket, including the catch-all."""
        return [*cls.INDUSTRY_KEYWORDS, OTHER_INDUSTRY]

    def classify(self, company: CompanyRecord) -> Classification:
        return Classification(
            industry=self.classify_industry(company.description),
            location=self.normalize_location(company.location),
        )

    def classify_industry(self, description: Optional[str]) -> str:
        """Return the first industry whose triggers appear in the description."""
        text = (description or "").lower()
        for industry, keywords in self.INDUSTRY_KEYWORDS.items():
            if any(keyword in text for keyword in keywords):
                return industry
        return OTHER_INDUSTRY

    def normalize_location(self, location: Optional[str]) -> str:
        """Fold location aliases into a canonical bucket name."""
        location = (location or "").strip()
        if not location:
            return NOT_SPECIFIED

        for canonical, aliases in self.LOCATION_ALIASES:
            if any(alias in location for alias in aliases):
                return canonical
        return location

    def industry_breakdown(self, companies: Iterable[CompanyRecord]) -> dict[str, int]:
        """Count companies per industry, in first-seen order."""
        return dict(Counter(self.classify_industry(c.description) for c in companies))

    def location_breakdown(self, companies: Iterable[CompanyRecord]) -> dict[str, int]:
        """Count companies per location bucket, in first-seen order."""
        return dict(Counter(self.normalize_location(c.location) for c in companies))

    def group_by_industry(self, companies: Iterable[CompanyRecord]) -> dict[str, list[CompanyRecord]]:
        """Members of each industry, preserving input order."""
        groups: dict[str, list[CompanyRecord]] = {}
        for company in companies:
            groups.setdefault(self.classify_industry(company.description), []).append(company)
        return groups
