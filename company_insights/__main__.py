"""CLI entry point for Company Insights."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from company_insights.analysis import BatchAnalyzer
from company_insights.config import settings
from company_insights.enrich import EnrichmentOrchestrator
from company_insights.models import BatchAnalysis, CompanyRecord, EnrichedCompany
from company_insights.providers import (
    ExtractionProvider,
    HyperbrowserProvider,
    MockProvider,
    ProviderConfigurationError,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


def load_companies(path: Path) -> list[CompanyRecord]:
    """Load companies from a JSON array or a {"companies": [...]} object."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("companies", [])
    return [CompanyRecord.model_validate(item) for item in data]


def write_json(payload, output_path: Optional[Path]):
    """Write JSON to a file, or to stdout when no path is given."""
    text = json.dumps(payload, indent=2)
    if output_path is None:
        print(text)
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text, encoding="utf-8")
    logger.info(f"Results written to {output_path}")


def run_analysis(companies: list[CompanyRecord], batch_name: Optional[str]) -> BatchAnalysis:
    """Run the batch analysis and print a console summary."""
    analysis = BatchAnalyzer().analyze(companies, batch_name)
    print_summary(analysis)
    return analysis


async def run_enrichment(
    companies: list[CompanyRecord],
    provider: ExtractionProvider,
    concurrency: int,
) -> list[EnrichedCompany]:
    """Enrich every company that has a website."""
    orchestrator = EnrichmentOrchestrator(provider)
    try:
        return await orchestrator.enrich_many(companies, max_concurrency=concurrency)
    finally:
        await provider.aclose()


def print_summary(analysis: BatchAnalysis):
    """Print a summary of the analysis to the console."""
    print("\n" + "=" * 60, file=sys.stderr)
    print(f"BATCH ANALYSIS - {analysis.batch_name.upper()}", file=sys.stderr)
    print("=" * 60, file=sys.stderr)

    print(f"\nTotal companies: {analysis.total_companies}", file=sys.stderr)
    if analysis.average_team_size is not None:
        print(f"Average team size: {analysis.average_team_size}", file=sys.stderr)
    print(
        f"Funding signals: {analysis.funding_stats.companies_with_funding} companies "
        f"(~{analysis.funding_stats.total_estimated_funding})",
        file=sys.stderr,
    )

    if analysis.industry_breakdown:
        print("\nIndustries:", file=sys.stderr)
        for industry, count in sorted(analysis.industry_breakdown.items(), key=lambda i: -i[1]):
            print(f"   {industry}: {count}", file=sys.stderr)

    if analysis.trends:
        print("\nTrends:", file=sys.stderr)
        for trend in analysis.trends:
            print(f"   - {trend}", file=sys.stderr)

    if analysis.top_performers:
        print("\n" + "-" * 60, file=sys.stderr)
        print(f"TOP {len(analysis.top_performers)} COMPANIES", file=sys.stderr)
        print("-" * 60, file=sys.stderr)
        for i, company in enumerate(analysis.top_performers, 1):
            print(f"#{i} {company.name}", file=sys.stderr)

    for matrix in analysis.competitive_matrix:
        print(
            f"\n{matrix.industry}: leader {matrix.market_leader}, "
            f"emerging {', '.join(matrix.emerging_players) or 'none'}",
            file=sys.stderr,
        )

    print("\n" + "=" * 60, file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Company Insights - deep-research startups and analyze company batches"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze = subparsers.add_parser("analyze", help="Run batch analysis over a companies file")
    analyze.add_argument("companies", type=Path, help="Path to companies JSON file")
    analyze.add_argument("--batch-name", "-b", default=None, help="Label for the report")
    analyze.add_argument("--output", "-o", type=Path, default=None, help="Output JSON path (default: stdout)")

    enrich = subparsers.add_parser("enrich", help="Deep-research every company with a website")
    enrich.add_argument("companies", type=Path, help="Path to companies JSON file")
    enrich.add_argument("--output", "-o", type=Path, default=None, help="Output JSON path (default: stdout)")
    enrich.add_argument(
        "--concurrency", "-c",
        type=int,
        default=settings.enrich_concurrency,
        help=f"Companies researched at once (default: {settings.enrich_concurrency})",
    )
    enrich.add_argument(
        "--mock",
        action="store_true",
        help="Use the mock provider instead of the extraction API",
    )
    return parser


def main(argv: Optional[list[str]] = None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if not args.companies.exists():
        logger.error(f"Companies file not found: {args.companies}")
        sys.exit(1)

    try:
        companies = load_companies(args.companies)
        logger.info(f"Loaded {len(companies)} companies from {args.companies}")
    except (json.JSONDecodeError, ValidationError) as e:
        logger.error(f"Failed to load companies: {e}")
        sys.exit(1)

    if args.command == "analyze":
        analysis = run_analysis(companies, args.batch_name)
        write_json(analysis.model_dump(mode="json", by_alias=True), args.output)
        return

    try:
        provider = MockProvider() if args.mock else HyperbrowserProvider()
    except ProviderConfigurationError as e:
        logger.error(f"{e}. Set it in a .env file or use --mock.")
        sys.exit(1)

    try:
        enriched = asyncio.run(run_enrichment(companies, provider, args.concurrency))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(1)

    write_json([c.model_dump(mode="json", by_alias=True) for c in enriched], args.output)


if __name__ == "__main__":
    main()
