"""API routes for Company Insights."""

import logging
from datetime import datetime
from typing import Callable, Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Request
from pydantic import BaseModel, ConfigDict, Field

from company_insights.analysis import BatchAnalyzer
from company_insights.analysis.batch import DEFAULT_BATCH_NAME
from company_insights.enrich import EnrichmentOrchestrator, MissingWebsiteError
from company_insights.models import CompanyRecord
from company_insights.providers import (
    ExtractionProvider,
    HyperbrowserProvider,
    ProviderConfigurationError,
)
from company_insights.store import CompanyStore

logger = logging.getLogger(__name__)

router = APIRouter()

ProviderFactory = Callable[[Optional[str]], ExtractionProvider]


class DeepResearchRequest(BaseModel):
    """Request body for deep research on one company."""
    company: CompanyRecord


class AnalyzeBatchRequest(BaseModel):
    """Request body for batch analysis. Omitting companies analyzes the latest stored batch."""
    model_config = ConfigDict(populate_by_name=True)

    companies: Optional[list[CompanyRecord]] = None
    batch_name: Optional[str] = Field(default=None, alias="batchName")


class StoreCompaniesRequest(BaseModel):
    """Request body for remembering a batch of companies."""
    model_config = ConfigDict(populate_by_name=True)

    key: str = DEFAULT_BATCH_NAME
    companies: list[CompanyRecord]
    batch_filters: list[str] = Field(default_factory=list, alias="batchFilters")


def get_store(request: Request) -> CompanyStore:
    return request.app.state.store


def get_provider_factory() -> ProviderFactory:
    """Build providers per request so a caller-supplied key can override the configured one."""
    return lambda api_key: HyperbrowserProvider(api_key=api_key or None)


@router.post("/deep-research")
async def deep_research(
    body: DeepResearchRequest,
    x_api_key: Optional[str] = Header(default=None),
    provider_factory: ProviderFactory = Depends(get_provider_factory),
):
    """Run the four research angles for one company."""
    company = body.company
    if not company.website:
        raise HTTPException(
            status_code=400,
            detail="Company and website URL are required for deep research analysis",
        )

    try:
        provider = provider_factory(x_api_key)
    except ProviderConfigurationError as e:
        logger.error(f"Deep research unavailable: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    try:
        enriched = await EnrichmentOrchestrator(provider).enrich(company)
    except MissingWebsiteError as e:
        raise HTTPException(status_code=400, detail=str(e))
    finally:
        await provider.aclose()

    return {
        "success": True,
        "company": enriched.model_dump(mode="json", by_alias=True),
        "timestamp": datetime.utcnow().isoformat(),
    }


@router.post("/analyze-batch")
async def analyze_batch(
    body: AnalyzeBatchRequest,
    store: CompanyStore = Depends(get_store),
):
    """Analyze the posted companies, or the latest stored batch."""
    companies = body.companies
    if companies is None:
        stored = store.latest()
        if stored is None:
            raise HTTPException(status_code=404, detail="No companies provided or stored")
        companies = stored.companies
    else:
        store.put(body.batch_name or DEFAULT_BATCH_NAME, companies)

    analysis = BatchAnalyzer().analyze(companies, body.batch_name)

    return {
        "success": True,
        "analysis": analysis.model_dump(mode="json", by_alias=True),
        "timestamp": datetime.utcnow().isoformat(),
    }


@router.post("/companies")
async def store_companies(
    body: StoreCompaniesRequest,
    store: CompanyStore = Depends(get_store),
):
    """Remember a batch of companies for later analysis."""
    entry = store.put(body.key, body.companies, body.batch_filters)
    return {
        "success": True,
        "key": body.key,
        "totalCount": entry.total_count,
    }


@router.get("/companies")
async def latest_companies(store: CompanyStore = Depends(get_store)):
    """Return the most recently stored batch."""
    stored = store.latest()
    if stored is None:
        raise HTTPException(status_code=404, detail="No companies stored")
    return stored.model_dump(mode="json", by_alias=True)


@router.get("/companies/{key}")
async def stored_companies(key: str, store: CompanyStore = Depends(get_store)):
    """Return one stored batch by key."""
    stored = store.get(key)
    if stored is None:
        raise HTTPException(status_code=404, detail="Batch not found")
    return stored.model_dump(mode="json", by_alias=True)
