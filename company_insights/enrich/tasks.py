"""Deadline-bounded extraction tasks, one per research angle."""

import asyncio
import logging
from typing import Optional
from urllib.parse import quote_plus

from pydantic import ValidationError

from company_insights.config import settings
from company_insights.models import (
    AnalysisSection,
    CompanyRecord,
    CompetitiveIntel,
    FounderIntel,
    SocialPresence,
    WebsiteAnalysis,
)
from company_insights.providers import ExtractionProvider, ExtractionRequest

logger = logging.getLogger(__name__)

# Strong references to provider calls abandoned at their deadline, held until they finish.
_abandoned_calls: set[asyncio.Future] = set()


class ExtractionTask:
    """One provider call raced against a deadline.

    ``run`` never raises: provider errors, empty responses, responses that do
    not fit the section schema, and deadline expiry all yield an empty section.
    """

    def __init__(
        self,
        name: str,
        section: type[AnalysisSection],
        target_reference: str,
        instruction: str,
        deadline: float,
        wait_budget: Optional[int] = None,
        max_links: Optional[int] = None,
    ):
        self.name = name
        self.section = section
        self.target_reference = target_reference
        self.instruction = instruction
        self.deadline = deadline
        self.wait_budget = wait_budget
        self.max_links = max_links

    def build_request(self) -> ExtractionRequest:
        return ExtractionRequest(
            target_reference=self.target_reference,
            instruction=self.instruction,
            schema=self.section.model_json_schema(by_alias=True),
            wait_budget=self.wait_budget,
            max_links=self.max_links,
        )

    async def run(self, provider: ExtractionProvider) -> AnalysisSection:
        """Call the provider and return a validated section, or an empty one."""
        call = asyncio.ensure_future(provider.extract(self.build_request()))
        done, _ = await asyncio.wait({call}, timeout=self.deadline)

        if call not in done:
            logger.warning(f"{self.name} timed out after {self.deadline}s for {self.target_reference}")
            _abandoned_calls.add(call)
            call.add_done_callback(self._discard_late_result)
            return self.section()

        try:
            response = call.result()
        except Exception as e:
            logger.warning(f"{self.name} failed for {self.target_reference}: {e}")
            return self.section()

        if not response.success:
            logger.warning(
                f"{self.name} returned no data for {self.target_reference}: "
                f"{response.error or 'empty response'}"
            )
            return self.section()

        try:
            return self.section.model_validate(response.data)
        except ValidationError as e:
            logger.warning(f"{self.name} response did not match schema for {self.target_reference}: {e}")
            return self.section()

    def _discard_late_result(self, call: asyncio.Future) -> None:
        """Consume the outcome of an abandoned call so it is never reported."""
        _abandoned_calls.discard(call)
        if call.cancelled():
            return
        if call.exception() is not None:
            logger.debug(f"Abandoned {self.name} call later failed: {call.exception()}")
        else:
            logger.debug(f"Discarding late {self.name} result for {self.target_reference}")


# ---------------------------------------------------------------------------
# Research angles
# ---------------------------------------------------------------------------

WEBSITE_PROMPT = """Analyze this company website and extract detailed information about {name}. Focus on:

1. TECHNOLOGY STACK: What technologies, frameworks, or tools do they use or mention?
2. PRODUCT FEATURES: What are their main features, capabilities, or services?
3. PRICING: Extract pricing plans, costs, or pricing models if available
4. TEAM INFORMATION: Any team member names, roles, or backgrounds mentioned
5. JOB OPENINGS: Current job postings or hiring information
6. BLOG/NEWS: Recent blog posts, news, or updates
7. CUSTOMER TESTIMONIALS: Any customer quotes, reviews, or case studies
8. LAST UPDATED: When was the site last updated or when was recent content published?

Be specific and extract actual data, not generic descriptions."""

SOCIAL_PROMPT = """Find social media links and handles for {name}. Look for:
- Twitter/X profile URL and handle
- LinkedIn company page URL
- GitHub organization URL
- Any other social media presence
- Recent social media activity or engagement metrics if visible"""

COMPETITIVE_PROMPT = """Research the competitive landscape for {name}. Extract:
- Direct competitors mentioned in search results
- Market position or category they compete in
- Unique advantages or differentiators mentioned
- Potential weaknesses or challenges
- Funding stage or investment information if available
- Estimated revenue or business model insights"""

FOUNDER_PROMPT = """Research the founders and key team members of {name}. Extract:
- Founder names and roles
- LinkedIn profiles if available
- Twitter handles if available
- Previous companies or experience
- Educational background
- Areas of expertise or specialization"""

SEARCH_URL = "https://www.google.com/search?q={query}"


def search_url(company_name: str, terms: str) -> str:
    """Build a web search URL for the quoted company name plus terms."""
    return SEARCH_URL.format(query=quote_plus(f'"{company_name}" {terms}'))


def website_task(company: CompanyRecord) -> ExtractionTask:
    return ExtractionTask(
        name="Website analysis",
        section=WebsiteAnalysis,
        target_reference=company.website,
        instruction=WEBSITE_PROMPT.format(name=company.name),
        deadline=settings.website_deadline,
        wait_budget=settings.website_wait_ms,
        max_links=settings.website_max_links,
    )


def social_task(company: CompanyRecord) -> ExtractionTask:
    return ExtractionTask(
        name="Social analysis",
        section=SocialPresence,
        target_reference=company.website,
        instruction=SOCIAL_PROMPT.format(name=company.name),
        deadline=settings.social_deadline,
        wait_budget=settings.social_wait_ms,
        max_links=settings.social_max_links,
    )


def competitive_task(company: CompanyRecord) -> ExtractionTask:
    return ExtractionTask(
        name="Competitive analysis",
        section=CompetitiveIntel,
        target_reference=search_url(company.name, "competitors alternative vs"),
        instruction=COMPETITIVE_PROMPT.format(name=company.name),
        deadline=settings.competitive_deadline,
        wait_budget=settings.competitive_wait_ms,
        max_links=settings.competitive_max_links,
    )


def founder_task(company: CompanyRecord) -> ExtractionTask:
    return ExtractionTask(
        name="Founder analysis",
        section=FounderIntel,
        target_reference=search_url(company.name, "founder CEO team LinkedIn"),
        instruction=FOUNDER_PROMPT.format(name=company.name),
        deadline=settings.founder_deadline,
        wait_budget=settings.founder_wait_ms,
        max_links=settings.founder_max_links,
    )
