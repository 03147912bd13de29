"""Competitive matrices for the most crowded industries."""

import logging
from typing import Optional

from company_insights.config import settings
from company_insights.models import CompanyRecord, CompetitiveMatrix
from .classifier import CompanyClassifier
from .trends import top_entries

logger = logging.getLogger(__name__)


class CompetitiveMatrixBuilder:
    """Group companies by industry into head-to-head summaries.

    Only the largest industries are considered, and only those in
    ``industries`` with enough members get a matrix. Leadership is purely
    positional: the first member in input order is the market leader.
    """

    MAX_EMERGING_PLAYERS = 3

    def __init__(
        self,
        classifier: Optional[CompanyClassifier] = None,
        industries: Optional[list[str]] = None,
        min_members: Optional[int] = None,
        top_industries: Optional[int] = None,
    ):
        self.classifier = classifier or CompanyClassifier()
        self.industries = industries if industries is not None else list(settings.matrix_industries)
        self.min_members = settings.matrix_min_members if min_members is None else min_members
        self.top_industries = settings.matrix_top_industries if top_industries is None else top_industries

    def build(self, companies: list[CompanyRecord]) -> list[CompetitiveMatrix]:
        groups = self.classifier.group_by_industry(companies)
        counts = {industry: len(members) for industry, members in groups.items()}

        matrices = []
        for industry, count in top_entries(counts, self.top_industries):
            if count < self.min_members:
                continue
            if industry not in self.industries:
                logger.debug(f"No competitive matrix for {industry}: not a tracked industry")
                continue
            matrices.append(self._matrix(industry, groups[industry]))
        return matrices

    def _matrix(self, industry: str, members: list[CompanyRecord]) -> CompetitiveMatrix:
        names = [company.name for company in members]
        return CompetitiveMatrix(
            industry=industry,
            companies=names,
            market_leader=names[0],
            emerging_players=names[1:1 + self.MAX_EMERGING_PLAYERS],
            opportunities=[
                f"{len(names)} companies competing in {industry}",
                "Potential for partnerships or acquisitions",
                "Market validation for the sector",
            ],
        )
