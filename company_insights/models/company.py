"""Company record and deep enrichment models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_serializer


class CompanyRecord(BaseModel):
    """A company as scraped from a startup directory."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    id: str = Field(default="", description="Source identifier")
    name: str = Field(description="Company name")
    description: str = Field(default="", description="Free-text description from source")
    website: Optional[str] = Field(default=None, description="Full website URL")
    location: Optional[str] = Field(default=None, description="Free-text location")
    team_size: Optional[str] = Field(
        default=None,
        alias="teamSize",
        description="Free-text team size such as '5-10' or '15'",
    )
    batch: Optional[str] = Field(default=None, description="Cohort label, e.g. 'W24'")

    # Optional directory data
    logo: Optional[str] = None
    founded: Optional[str] = None
    tags: list[str] = Field(default_factory=list)

    @field_validator("description", mode="before")
    @classmethod
    def _null_description(cls, value):
        return "" if value is None else value

    @field_validator("tags", mode="before")
    @classmethod
    def _null_tags(cls, value):
        return [] if value is None else value

    @field_validator("website", mode="before")
    @classmethod
    def _strip_website(cls, value):
        """Trim surrounding whitespace; a blank website counts as missing."""
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value


# ---------------------------------------------------------------------------
# Enrichment sections
# ---------------------------------------------------------------------------


class AnalysisSection(BaseModel):
    """One research angle of a deep enrichment.

    A section is either fully populated from a single provider response or
    empty. Empty sections serialize as ``{}``.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @property
    def is_empty(self) -> bool:
        return all(
            getattr(self, name) == field.get_default(call_default_factory=True)
            for name, field in type(self).model_fields.items()
        )

    @model_serializer(mode="wrap")
    def _serialize(self, handler):
        if self.is_empty:
            return {}
        return handler(self)


class PricingInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    plan: Optional[str] = None
    price: Optional[str] = None
    features: list[str] = Field(default_factory=list)
    target: Optional[str] = None


class TeamMember(BaseModel):
    name: Optional[str] = None
    role: Optional[str] = None
    background: Optional[str] = None


class JobOpening(BaseModel):
    title: Optional[str] = None
    department: Optional[str] = None
    location: Optional[str] = None
    requirements: list[str] = Field(default_factory=list)


class BlogPost(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    url: Optional[str] = None
    published_date: Optional[str] = Field(default=None, alias="publishedDate")
    summary: Optional[str] = None


class FounderInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    role: Optional[str] = None
    linkedin: Optional[str] = None
    twitter: Optional[str] = None
    previous_companies: list[str] = Field(default_factory=list, alias="previousCompanies")
    education: Optional[str] = None
    expertise: list[str] = Field(default_factory=list)


class WebsiteAnalysis(AnalysisSection):
    """What the company's own site says about product, team and hiring."""

    tech_stack: list[str] = Field(
        default_factory=list,
        alias="techStack",
        description="Technologies, frameworks, or tools mentioned",
    )
    features: list[str] = Field(
        default_factory=list,
        description="Main product features or capabilities",
    )
    pricing: list[PricingInfo] = Field(default_factory=list)
    team_members: list[TeamMember] = Field(default_factory=list, alias="teamMembers")
    job_openings: list[JobOpening] = Field(default_factory=list, alias="jobOpenings")
    blog_posts: list[BlogPost] = Field(default_factory=list, alias="blogPosts")
    customer_testimonials: list[str] = Field(default_factory=list, alias="customerTestimonials")
    last_updated: Optional[str] = Field(default=None, alias="lastUpdated")


class SocialPresence(AnalysisSection):
    """Social media handles and activity."""

    twitter_handle: Optional[str] = Field(default=None, alias="twitterHandle")
    twitter_followers: Optional[int] = Field(default=None, alias="twitterFollowers")
    linkedin_url: Optional[str] = Field(default=None, alias="linkedinUrl")
    github_url: Optional[str] = Field(default=None, alias="githubUrl")
    last_social_activity: Optional[str] = Field(default=None, alias="lastSocialActivity")
    social_engagement: Optional[float] = Field(default=None, alias="socialEngagement")


class CompetitiveIntel(AnalysisSection):
    """Competitive landscape gathered from search results."""

    direct_competitors: list[str] = Field(default_factory=list, alias="directCompetitors")
    market_position: Optional[str] = Field(default=None, alias="marketPosition")
    unique_advantages: list[str] = Field(default_factory=list, alias="uniqueAdvantages")
    potential_weaknesses: list[str] = Field(default_factory=list, alias="potentialWeaknesses")
    funding_stage: Optional[str] = Field(default=None, alias="fundingStage")
    estimated_revenue: Optional[str] = Field(default=None, alias="estimatedRevenue")


class FounderIntel(AnalysisSection):
    """Founders and key team members."""

    founders: list[FounderInfo] = Field(default_factory=list)
    previous_experience: list[str] = Field(default_factory=list, alias="previousExperience")
    education: list[str] = Field(default_factory=list)


class EnrichmentResult(BaseModel):
    """Deep enrichment of one company across four research angles.

    A missing section means the sub-task failed or timed out, not that the
    company lacks that attribute.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    website_analysis: WebsiteAnalysis = Field(default_factory=WebsiteAnalysis, alias="websiteAnalysis")
    social_presence: SocialPresence = Field(default_factory=SocialPresence, alias="socialPresence")
    competitive_intel: CompetitiveIntel = Field(default_factory=CompetitiveIntel, alias="competitiveIntel")
    founder_intel: FounderIntel = Field(default_factory=FounderIntel, alias="founderIntel")

    @property
    def populated_sections(self) -> list[str]:
        """Names of the sections that came back with data."""
        return [
            name
            for name in ("website_analysis", "social_presence", "competitive_intel", "founder_intel")
            if not getattr(self, name).is_empty
        ]


class EnrichedCompany(CompanyRecord):
    """A company record with deep enrichment layered on top."""

    deep_analysis: EnrichmentResult = Field(
        default_factory=EnrichmentResult,
        alias="deepAnalysis",
    )
