"""Tests for the in-memory company store."""

import pytest

from company_insights.models import CompanyRecord
from company_insights.store import CompanyStore


def make_companies(count: int, prefix: str = "C") -> list[CompanyRecord]:
    return [CompanyRecord(id=str(i), name=f"{prefix}{i}") for i in range(count)]


class TestCompanyStore:
    """Tests for CompanyStore."""

    def test_put_and_get(self):
        store = CompanyStore(capacity=3)
        entry = store.put("W24", make_companies(2), ["W24"])

        assert store.get("W24") is entry
        assert entry.total_count == 2
        assert entry.batch_filters == ["W24"]
        assert "W24" in store
        assert len(store) == 1

    def test_missing_key(self):
        store = CompanyStore(capacity=3)
        assert store.get("nope") is None
        assert store.latest() is None

    def test_last_write_wins(self):
        store = CompanyStore(capacity=3)
        store.put("W24", make_companies(2))
        store.put("W24", make_companies(5, prefix="New"))

        entry = store.get("W24")
        assert entry.total_count == 5
        assert entry.companies[0].name == "New0"
        assert len(store) == 1

    def test_latest_follows_writes(self):
        store = CompanyStore(capacity=3)
        store.put("a", make_companies(1))
        store.put("b", make_companies(2))
        assert store.latest().total_count == 2

        store.put("a", make_companies(3))
        assert store.latest().total_count == 3
        assert store.keys() == ["b", "a"]

    def test_evicts_least_recently_written(self):
        store = CompanyStore(capacity=2)
        store.put("a", make_companies(1))
        store.put("b", make_companies(1))
        store.put("a", make_companies(1))
        store.put("c", make_companies(1))

        assert store.keys() == ["a", "c"]
        assert "b" not in store

    def test_clear(self):
        store = CompanyStore(capacity=2)
        store.put("a", make_companies(1))
        store.clear()
        assert len(store) == 0

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            CompanyStore(capacity=0)

    def test_stored_list_is_a_copy(self):
        store = CompanyStore(capacity=2)
        companies = make_companies(2)
        store.put("a", companies)
        companies.append(CompanyRecord(name="Late"))
        assert store.get("a").total_count == 2
        assert len(store.get("a").companies) == 2
