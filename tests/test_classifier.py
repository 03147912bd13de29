"""Tests for industry and location classification."""

import pytest

from company_insights.analysis.classifier import (
    CompanyClassifier,
    NOT_SPECIFIED,
    OTHER_INDUSTRY,
)
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


class TestIndustryClassification:
    """Tests for first-match-wins industry buckets."""

    def test_machine_learning_is_ai(self):
        classifier = CompanyClassifier()
        assert classifier.classify_industry("We build machine learning models") == "AI/ML"

    def test_payments_is_fintech(self):
        classifier = CompanyClassifier()
        assert classifier.classify_industry("Cross-border payment processing for SMBs") == "Fintech"

    def test_case_insensitive(self):
        classifier = CompanyClassifier()
        assert classifier.classify_industry("TELEMEDICINE FOR RURAL CLINICS") == "Healthcare"

    def test_earlier_category_wins(self):
        classifier = CompanyClassifier()
        # Matches both AI/ML and Fintech triggers
        assert classifier.classify_industry("AI-powered fintech for lenders") == "AI/ML"

    def test_substring_triggers_are_preserved(self):
        classifier = CompanyClassifier()
        # "ai" inside "retail" lands in AI/ML before E-commerce is considered
        assert classifier.classify_industry("Software for retail stores") == "AI/ML"

    def test_no_match_is_other(self):
        classifier = CompanyClassifier()
        assert classifier.classify_industry("We sell bespoke furniture") == OTHER_INDUSTRY

    def test_missing_description_is_other(self):
        classifier = CompanyClassifier()
        assert classifier.classify_industry(None) == OTHER_INDUSTRY
        assert classifier.classify_industry("") == OTHER_INDUSTRY

    def test_deterministic(self):
        classifier = CompanyClassifier()
        text = "Carbon accounting for logistics fleets"
        assert classifier.classify_industry(text) == classifier.classify_industry(text)

    def test_industries_lists_table_order_and_other(self):
        industries = CompanyClassifier.industries()
        assert industries[0] == "AI/ML"
        assert industries[-1] == OTHER_INDUSTRY
        assert len(industries) == 13


class TestLocationNormalization:
    """Tests for location alias folding."""

    @pytest.mark.parametrize("location", [
        "San Francisco, CA",
        "SF",
        "Bay Area, California",
    ])
    def test_bay_area_aliases(self, location):
        classifier = CompanyClassifier()
        assert classifier.normalize_location(location) == "San Francisco Bay Area"

    def test_new_york_aliases(self):
        classifier = CompanyClassifier()
        assert classifier.normalize_location("NYC") == "New York"
        assert classifier.normalize_location("New York, NY") == "New York"

    def test_los_angeles(self):
        classifier = CompanyClassifier()
        assert classifier.normalize_location("Los Angeles, CA") == "Los Angeles"

    def test_aliases_are_case_sensitive(self):
        classifier = CompanyClassifier()
        assert classifier.normalize_location("london") == "london"
        assert classifier.normalize_location("London, UK") == "London"

    def test_remote(self):
        classifier = CompanyClassifier()
        assert classifier.normalize_location("Remote") == "Remote"

    def test_unmatched_location_is_trimmed(self):
        classifier = CompanyClassifier()
        assert classifier.normalize_location("  Berlin, Germany ") == "Berlin, Germany"

    def test_missing_location(self):
        classifier = CompanyClassifier()
        assert classifier.normalize_location(None) == NOT_SPECIFIED
        assert classifier.normalize_location("   ") == NOT_SPECIFIED


class TestBreakdowns:
    """Tests for per-bucket counting."""

    def test_breakdowns_sum_to_collection_size(self):
        classifier = CompanyClassifier()
        companies = [
            make_company(description="AI copilots", location="SF"),
            make_company(description="Payment APIs", location="NYC"),
            make_company(description="Handmade candles"),
            make_company(description="Medical imaging", location="Berlin"),
        ]

        industries = classifier.industry_breakdown(companies)
        locations = classifier.location_breakdown(companies)

        assert sum(industries.values()) == len(companies)
        assert sum(locations.values()) == len(companies)
        assert locations[NOT_SPECIFIED] == 1

    def test_classify_assigns_both_buckets(self):
        classifier = CompanyClassifier()
        result = classifier.classify(make_company(
            description="Acme AI provides machine learning automation for enterprise teams.",
            location="San Francisco, CA",
        ))
        assert result.industry == "AI/ML"
        assert result.location == "San Francisco Bay Area"

    def test_group_by_industry_keeps_input_order(self):
        classifier = CompanyClassifier()
        companies = [
            make_company(name="First", description="AI agents"),
            make_company(name="Other", description="Candles"),
            make_company(name="Second", description="Computer vision for farms"),
        ]
        groups = classifier.group_by_industry(companies)
        assert [c.name for c in groups["AI/ML"]] == ["First", "Second"]
        assert [c.name for c in groups[OTHER_INDUSTRY]] == ["Other"]
