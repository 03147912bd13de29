"""In-memory store remembering recently uploaded company batches."""

import logging
from collections import OrderedDict
from datetime import datetime
from typing import Optional

from company_insights.config import settings
from company_insights.models import CompanyRecord, StoredCompanyData

logger = logging.getLogger(__name__)


class CompanyStore:
    """Capacity-bounded, last-write-wins store of company batches.

    Writing a key replaces its entry and makes it the most recent. When full,
    the least recently written entry is evicted. Nothing is persisted.
    """

    def __init__(self, capacity: Optional[int] = None):
        self.capacity = settings.store_capacity if capacity is None else capacity
        if self.capacity < 1:
            raise ValueError("Store capacity must be at least 1")
        self._entries: OrderedDict[str, StoredCompanyData] = OrderedDict()

    def put(
        self,
        key: str,
        companies: list[CompanyRecord],
        batch_filters: Optional[list[str]] = None,
    ) -> StoredCompanyData:
        entry = StoredCompanyData(
            companies=list(companies),
            last_updated=datetime.utcnow(),
            batch_filters=batch_filters or [],
            total_count=len(companies),
        )
        self._entries.pop(key, None)
        self._entries[key] = entry

        while len(self._entries) > self.capacity:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug(f"Evicted stored batch {evicted!r}")

        return entry

    def get(self, key: str) -> Optional[StoredCompanyData]:
        return self._entries.get(key)

    def latest(self) -> Optional[StoredCompanyData]:
        """The most recently written entry, if any."""
        if not self._entries:
            return None
        return next(reversed(self._entries.values()))

    def keys(self) -> list[str]:
        """Stored keys, oldest first."""
        return list(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries
