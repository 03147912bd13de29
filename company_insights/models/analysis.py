"""Batch analysis report models."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny

from .company import CompanyRecord


class FundingStats(BaseModel):
    """Order-of-magnitude funding heuristic, not real financial data."""

    model_config = ConfigDict(populate_by_name=True)

    companies_with_funding: int = Field(default=0, alias="companiesWithFunding")
    average_round: Optional[str] = Field(default=None, alias="averageRound")
    total_estimated_funding: Optional[str] = Field(default=None, alias="totalEstimatedFunding")


class CompetitiveMatrix(BaseModel):
    """Head-to-head summary of one industry's members."""

    model_config = ConfigDict(populate_by_name=True)

    industry: str
    companies: list[str] = Field(default_factory=list)
    market_leader: Optional[str] = Field(default=None, alias="marketLeader")
    emerging_players: list[str] = Field(default_factory=list, alias="emergingPlayers")
    opportunities: list[str] = Field(default_factory=list)


class BatchAnalysis(BaseModel):
    """Aggregate report over a collection of companies."""

    model_config = ConfigDict(populate_by_name=True)

    batch_name: str = Field(alias="batchName")
    total_companies: int = Field(default=0, alias="totalCompanies")
    industry_breakdown: dict[str, int] = Field(default_factory=dict, alias="industryBreakdown")
    location_breakdown: dict[str, int] = Field(default_factory=dict, alias="locationBreakdown")
    average_team_size: Optional[int] = Field(default=None, alias="averageTeamSize")
    funding_stats: FundingStats = Field(default_factory=FundingStats, alias="fundingStats")
    top_performers: list[SerializeAsAny[CompanyRecord]] = Field(default_factory=list, alias="topPerformers")
    trends: list[str] = Field(default_factory=list)
    competitive_matrix: list[CompetitiveMatrix] = Field(
        default_factory=list,
        alias="competitiveMatrix",
    )
    generated_at: datetime = Field(default_factory=datetime.utcnow, alias="generatedAt")


class StoredCompanyData(BaseModel):
    """A batch of companies remembered for later queries."""

    model_config = ConfigDict(populate_by_name=True)

    companies: list[SerializeAsAny[CompanyRecord]] = Field(default_factory=list)
    last_updated: datetime = Field(default_factory=datetime.utcnow, alias="lastUpdated")
    batch_filters: list[str] = Field(default_factory=list, alias="batchFilters")
    total_count: int = Field(default=0, alias="totalCount")
