"""Batch analysis: one aggregate report over a collection of companies."""

import logging
import math
import re
from typing import Optional

from company_insights.config import settings
from company_insights.models import BatchAnalysis, CompanyRecord, FundingStats
from .classifier import CompanyClassifier
from .matrix import CompetitiveMatrixBuilder
from .scorer import CompanyScorer
from .trends import TrendDetector

logger = logging.getLogger(__name__)

DEFAULT_BATCH_NAME = "Mixed Batches"

# "5-10" -> (5, 10), "15" -> (15, None)
TEAM_SIZE_PATTERN = re.compile(r"(\d+)(?:-(\d+))?")

FUNDING_TERMS = ["funded", "raised", "series", "investment"]
DEFAULT_ROUND_LABEL = "Seed/Series A"


def parse_team_size(team_size: Optional[str]) -> Optional[float]:
    """Midpoint of the first number or numeric range in the text."""
    if not team_size:
        return None
    match = TEAM_SIZE_PATTERN.search(team_size)
    if not match:
        return None
    low = int(match.group(1))
    high = int(match.group(2)) if match.group(2) else low
    return (low + high) / 2


class BatchAnalyzer:
    """Classify, score, rank and summarize a collection of companies."""

    def __init__(
        self,
        classifier: Optional[CompanyClassifier] = None,
        scorer: Optional[CompanyScorer] = None,
        trend_detector: Optional[TrendDetector] = None,
        matrix_builder: Optional[CompetitiveMatrixBuilder] = None,
    ):
        self.classifier = classifier or CompanyClassifier()
        self.scorer = scorer or CompanyScorer()
        self.trend_detector = trend_detector or TrendDetector(self.classifier)
        self.matrix_builder = matrix_builder or CompetitiveMatrixBuilder(self.classifier)

    def analyze(
        self,
        companies: list[CompanyRecord],
        batch_name: Optional[str] = None,
    ) -> BatchAnalysis:
        """Build the report. An empty collection yields a zeroed report."""
        batch_name = batch_name or DEFAULT_BATCH_NAME
        logger.info(f"Analyzing batch: {batch_name} with {len(companies)} companies")

        return BatchAnalysis(
            batch_name=batch_name,
            total_companies=len(companies),
            industry_breakdown=self.classifier.industry_breakdown(companies),
            location_breakdown=self.classifier.location_breakdown(companies),
            average_team_size=self.average_team_size(companies),
            funding_stats=self.funding_stats(companies),
            top_performers=self.scorer.rank(companies),
            trends=self.trend_detector.detect(companies),
            competitive_matrix=self.matrix_builder.build(companies),
        )

    def average_team_size(self, companies: list[CompanyRecord]) -> Optional[int]:
        """Mean of parseable team sizes, rounded half up; None if none parse."""
        sizes = [
            size
            for size in (parse_team_size(c.team_size) for c in companies)
            if size is not None
        ]
        if not sizes:
            return None
        return math.floor(sum(sizes) / len(sizes) + 0.5)

    def funding_stats(self, companies: list[CompanyRecord]) -> FundingStats:
        """Rough funding heuristic from description keywords."""
        funded = [
            c for c in companies
            if any(term in (c.description or "").lower() for term in FUNDING_TERMS)
        ]
        estimate = len(funded) * settings.funding_multiplier_millions
        return FundingStats(
            companies_with_funding=len(funded),
            average_round=DEFAULT_ROUND_LABEL,
            total_estimated_funding=f"${estimate:.1f}M+",
        )


def analyze_batch(companies: list[CompanyRecord], batch_name: Optional[str] = None) -> BatchAnalysis:
    """Analyze a batch with the default engines."""
    return BatchAnalyzer().analyze(companies, batch_name)
