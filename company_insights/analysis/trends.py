"""Trend statements over a collection of companies."""

import logging
import math
from typing import Optional

from company_insights.config import settings
from company_insights.models import CompanyRecord
from .classifier import CompanyClassifier

logger = logging.getLogger(__name__)


def percent(count: int, total: int) -> int:
    """Share as a whole percentage, rounding halves up."""
    return math.floor(count * 100 / total + 0.5)


def top_entries(breakdown: dict[str, int], limit: Optional[int] = None) -> list[tuple[str, int]]:
    """Breakdown entries by descending count; ties keep first-seen order."""
    ranked = sorted(breakdown.items(), key=lambda item: item[1], reverse=True)
    return ranked if limit is None else ranked[:limit]


class TrendDetector:
    """Produce short human-readable trend lines from frequency thresholds."""

    BUZZWORDS = [
        "automation", "platform", "analytics", "optimization", "integration",
        "scalable", "real-time", "data-driven", "personalized", "efficient",
    ]

    def __init__(self, classifier: Optional[CompanyClassifier] = None):
        self.classifier = classifier or CompanyClassifier()

    def detect(self, companies: list[CompanyRecord], limit: Optional[int] = None) -> list[str]:
        """Industry dominance, then buzzword focus, then geography; truncated to ``limit``."""
        limit = settings.max_trends if limit is None else limit
        if not companies:
            return []

        trends = []
        trends.extend(self.industry_dominance(companies))
        trends.extend(self.keyword_focus(companies))

        geographic = self.geographic_concentration(companies)
        if geographic:
            trends.append(geographic)

        return trends[:limit]

    def industry_dominance(self, companies: list[CompanyRecord]) -> list[str]:
        total = len(companies)
        lines = []
        for industry, count in top_entries(self.classifier.industry_breakdown(companies), 3):
            share = percent(count, total)
            if share >= settings.dominance_threshold_pct:
                lines.append(f"{industry} dominance: {share}% of companies")
        return lines

    def keyword_focus(self, companies: list[CompanyRecord]) -> list[str]:
        text = " ".join((c.description or "").lower() for c in companies)
        total = len(companies)

        lines = []
        for term in self.BUZZWORDS:
            count = text.count(term)
            # at least max(min_mentions, share% of the collection)
            if count >= settings.keyword_min_mentions and count * 100 >= total * settings.keyword_share_pct:
                lines.append(f"Focus on {term}: mentioned by {count} companies")
        return lines

    def geographic_concentration(self, companies: list[CompanyRecord]) -> Optional[str]:
        total = len(companies)
        ranked = top_entries(self.classifier.location_breakdown(companies), 1)
        if not ranked:
            return None

        location, count = ranked[0]
        if count * 100 >= total * settings.geographic_threshold_pct:
            return f"Geographic concentration: {percent(count, total)}% in {location}"
        return None
