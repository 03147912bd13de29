"""Heuristic desirability scoring for ranking companies."""

import logging
from typing import Optional

from company_insights.config import settings
from company_insights.models import CompanyRecord

logger = logging.getLogger(__name__)


class CompanyScorer:
    """Score companies with fixed additive signals and rank the best ones.

    Scores exist only for ranking; they are never written onto a record.
    """

    QUANTITATIVE_TERMS = ["million", "thousand", "%"]
    ENTERPRISE_TERMS = ["enterprise", "b2b", "business"]
    HOT_SECTOR_TERMS = ["ai", "fintech", "health"]

    # Signal -> points
    WEIGHTS = {
        "clear_value_prop": 2,
        "quantitative": 3,
        "enterprise_focus": 2,
        "hot_sector": 1,
        "has_website": 1,
        "has_team_size": 1,
        "has_location": 1,
    }

    def signals(self, company: CompanyRecord) -> dict[str, bool]:
        """Evaluate each scoring signal for a company."""
        description = (company.description or "").lower()
        return {
            "clear_value_prop": 100 < len(description) < 300,
            "quantitative": any(term in description for term in self.QUANTITATIVE_TERMS),
            "enterprise_focus": any(term in description for term in self.ENTERPRISE_TERMS),
            "hot_sector": any(term in description for term in self.HOT_SECTOR_TERMS),
            "has_website": bool(company.website),
            "has_team_size": bool(company.team_size),
            "has_location": bool(company.location),
        }

    def score(self, company: CompanyRecord) -> int:
        """Sum the points of every signal the company shows."""
        return sum(
            self.WEIGHTS[signal]
            for signal, present in self.signals(company).items()
            if present
        )

    def rank(
        self,
        companies: list[CompanyRecord],
        limit: Optional[int] = None,
    ) -> list[CompanyRecord]:
        """Return the top companies by score, highest first.

        Ties keep input order. The records are returned unchanged.
        """
        limit = settings.top_performers_limit if limit is None else limit
        scored = [(self.score(company), company) for company in companies]
        scored.sort(key=lambda pair: pair[0], reverse=True)
        return [company for _, company in scored[:limit]]
