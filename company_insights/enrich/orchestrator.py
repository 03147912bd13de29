"""Deep enrichment: fan out research angles for a company and merge what settles."""

import asyncio
import logging
from typing import Callable, Optional

from company_insights.config import settings
from company_insights.models import CompanyRecord, EnrichedCompany, EnrichmentResult
from company_insights.providers import ExtractionProvider
from .tasks import ExtractionTask, competitive_task, founder_task, social_task, website_task

logger = logging.getLogger(__name__)

# EnrichmentResult field -> task factory
RESEARCH_ANGLES: dict[str, Callable[[CompanyRecord], ExtractionTask]] = {
    "website_analysis": website_task,
    "social_presence": social_task,
    "competitive_intel": competitive_task,
    "founder_intel": founder_task,
}


class MissingWebsiteError(ValueError):
    """Raised when enrichment is requested for a company without a website."""

    def __init__(self, company_name: str):
        super().__init__(
            f"Company and website URL are required for deep research analysis ({company_name!r} has no website)"
        )
        self.company_name = company_name


class EnrichmentOrchestrator:
    """Run the research angles for one company concurrently and merge the results."""

    def __init__(
        self,
        provider: ExtractionProvider,
        angles: Optional[dict[str, Callable[[CompanyRecord], ExtractionTask]]] = None,
    ):
        self.provider = provider
        self.angles = angles or RESEARCH_ANGLES

    async def enrich(self, company: CompanyRecord) -> EnrichedCompany:
        """Enrich one company.

        Raises MissingWebsiteError before any provider call if the company
        has no website. Sub-task failures never propagate; a failed angle
        leaves its section empty.
        """
        if not company.website or not company.website.strip():
            raise MissingWebsiteError(company.name)

        logger.info(f"Starting deep research analysis for {company.name}...")

        tasks = {field: build(company) for field, build in self.angles.items()}
        outcomes = await asyncio.gather(
            *(task.run(self.provider) for task in tasks.values()),
            return_exceptions=True,
        )

        sections = {}
        for (field, task), outcome in zip(tasks.items(), outcomes):
            if isinstance(outcome, BaseException):
                logger.warning(f"{task.name} failed for {company.name}: {outcome!r}")
                sections[field] = task.section()
            else:
                sections[field] = outcome

        result = EnrichmentResult(**sections)
        logger.info(
            f"Deep research for {company.name} finished with "
            f"{len(result.populated_sections)}/{len(tasks)} sections populated"
        )
        return layer_enrichment(company, result)

    async def enrich_many(
        self,
        companies: list[CompanyRecord],
        max_concurrency: Optional[int] = None,
    ) -> list[EnrichedCompany]:
        """Enrich several companies, at most ``max_concurrency`` at a time.

        Companies without a website are skipped. Results keep input order.
        """
        limit = max_concurrency or settings.enrich_concurrency
        semaphore = asyncio.Semaphore(max(1, limit))

        async def enrich_one(company: CompanyRecord) -> EnrichedCompany:
            async with semaphore:
                return await self.enrich(company)

        eligible = []
        for company in companies:
            if company.website and company.website.strip():
                eligible.append(company)
            else:
                logger.warning(f"Skipping {company.name}: no website to research")

        logger.info(f"Enriching {len(eligible)} companies with concurrency {limit}")
        return list(await asyncio.gather(*(enrich_one(c) for c in eligible)))


def layer_enrichment(company: CompanyRecord, result: EnrichmentResult) -> EnrichedCompany:
    """Copy a record and attach an enrichment result, replacing any earlier one."""
    data = {
        key: value
        for key, value in company.model_dump().items()
        if key not in ("deep_analysis", "deepAnalysis")
    }
    return EnrichedCompany(**data, deep_analysis=result)
