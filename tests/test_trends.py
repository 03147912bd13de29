"""Tests for trend detection."""

from company_insights.analysis.trends import TrendDetector, percent, top_entries
from company_insights.models import CompanyRecord


def make_company(**kwargs) -> CompanyRecord:
    """Create a test company with defaults."""
    defaults = {
        "id": "1",
        "name": "Test Company",
        "description": "",
    }
    defaults.update(kwargs)
    return CompanyRecord(**defaults)


def make_batch(counts: dict[str, int], filler: int = 0) -> list[CompanyRecord]:
    """Build a batch with ``counts`` companies per description plus neutral filler."""
    companies = []
    for description, count in counts.items():
        companies.extend(make_company(description=description) for _ in range(count))
    companies.extend(make_company(description="Handmade candles") for _ in range(filler))
    return companies


class TestHelpers:
    """Tests for percentage and ranking helpers."""

    def test_percent_rounds_half_up(self):
        assert percent(1, 8) == 13  # 12.5
        assert percent(1, 3) == 33
        assert percent(4, 20) == 20

    def test_top_entries_stable_on_ties(self):
        breakdown = {"B": 2, "A": 3, "C": 2}
        assert top_entries(breakdown) == [("A", 3), ("B", 2), ("C", 2)]
        assert top_entries(breakdown, 1) == [("A", 3)]


class TestIndustryDominance:
    """Tests for industry dominance lines."""

    def test_fintech_at_twenty_percent(self):
        detector = TrendDetector()
        companies = make_batch({"Fintech lending for SMBs": 4}, filler=16)
        trends = detector.detect(companies)
        assert "Fintech dominance: 20% of companies" in trends

    def test_no_dominance_below_threshold(self):
        detector = TrendDetector()
        # Ten industries at 10% each
        descriptions = [
            "Deep learning research", "Banking core", "Medical records",
            "DevOps tooling", "Marketplace for vinyl", "Edtech for kids",
            "Enterprise CRM", "Gaming studio", "Carbon removal", "Proptech listings",
        ]
        companies = [make_company(description=d) for d in descriptions for _ in range(2)]
        trends = detector.industry_dominance(companies)
        assert trends == []

    def test_only_top_three_industries(self):
        detector = TrendDetector()
        companies = make_batch({
            "Deep learning research": 5,
            "Banking core": 5,
            "Medical records": 5,
            "Proptech listings": 5,
        })
        lines = detector.industry_dominance(companies)
        assert len(lines) == 3
        assert lines[0] == "AI/ML dominance: 25% of companies"


class TestKeywordFocus:
    """Tests for buzzword frequency lines."""

    def test_needs_at_least_three_mentions(self):
        detector = TrendDetector()
        companies = make_batch({"Workflow automation": 2}, filler=2)
        assert detector.keyword_focus(companies) == []

        companies = make_batch({"Workflow automation": 3}, filler=2)
        assert detector.keyword_focus(companies) == ["Focus on automation: mentioned by 3 companies"]

    def test_needs_ten_percent_of_large_batches(self):
        detector = TrendDetector()
        companies = make_batch({"Usage analytics": 4}, filler=46)
        assert detector.keyword_focus(companies) == []

        companies = make_batch({"Usage analytics": 5}, filler=45)
        assert detector.keyword_focus(companies) == ["Focus on analytics: mentioned by 5 companies"]

    def test_counts_every_occurrence(self):
        detector = TrendDetector()
        companies = [make_company(description="Platform for platform teams on a platform")]
        assert detector.keyword_focus(companies) == ["Focus on platform: mentioned by 3 companies"]

    def test_lines_follow_table_order(self):
        detector = TrendDetector()
        companies = make_batch({"Scalable automation": 3})
        assert detector.keyword_focus(companies) == [
            "Focus on automation: mentioned by 3 companies",
            "Focus on scalable: mentioned by 3 companies",
        ]


class TestGeographicConcentration:
    """Tests for the geographic concentration line."""

    def test_concentration_at_thirty_percent(self):
        detector = TrendDetector()
        companies = [make_company(location="SF") for _ in range(3)]
        companies += [make_company(location=f"City {i}") for i in range(7)]
        assert detector.geographic_concentration(companies) == (
            "Geographic concentration: 30% in San Francisco Bay Area"
        )

    def test_no_concentration_below_threshold(self):
        detector = TrendDetector()
        companies = [make_company(location=f"City {i}") for i in range(10)]
        assert detector.geographic_concentration(companies) is None

    def test_missing_locations_count_as_a_bucket(self):
        detector = TrendDetector()
        companies = [make_company() for _ in range(4)]
        assert detector.geographic_concentration(companies) == (
            "Geographic concentration: 100% in Not Specified"
        )


class TestDetect:
    """Tests for the combined trend list."""

    def test_empty_collection(self):
        assert TrendDetector().detect([]) == []

    def test_ordering_and_truncation(self):
        detector = TrendDetector()
        companies = make_batch({
            "Deep learning with scalable automation analytics integration optimization": 4,
        })
        companies = [c.model_copy(update={"location": "NYC"}) for c in companies]

        trends = detector.detect(companies)
        assert len(trends) == 5
        assert trends[0] == "AI/ML dominance: 100% of companies"
        assert trends[1].startswith("Focus on automation")
        # Geographic line is cut by the five-line limit
        assert not any(t.startswith("Geographic") for t in trends)

    def test_custom_limit(self):
        detector = TrendDetector()
        companies = make_batch({"Fintech lending": 4})
        assert len(detector.detect(companies, limit=1)) == 1
