"""Repository interface between the schedule engine and the data store."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

from ..engine import aggregate
from ..models import CableEntry, ScheduleTotals


class CableEntryRepository(ABC):
    """
    Data access for cable entries.

    Implementations are responsible for ordering by display_order. The
    schedule engine only ever receives already fetched entries.
    """

    @abstractmethod
    def fetch_entries(
        self,
        schedule_ids: Sequence[str],
        offset: int,
        limit: int,
    ) -> List[CableEntry]:
        """Fetch one window of entries for the given schedules."""

    @abstractmethod
    def fetch_entry_count(self, schedule_ids: Sequence[str]) -> int:
        """Count entries of the given schedules."""

    @abstractmethod
    def fetch_all_entries_for_aggregate(self, schedule_ids: Sequence[str]) -> List[CableEntry]:
        """Fetch every entry of the given schedules, ignoring any page window."""

    @abstractmethod
    def fetch_entry(self, entry_id: str) -> Optional[CableEntry]:
        """Fetch a single entry, or None if it does not exist."""

    @abstractmethod
    def persist_split(self, source_entry_id: str, siblings: List[CableEntry]):
        """Replace an entry (and any parallel set it belongs to) with siblings."""

    @abstractmethod
    def persist_reassignment(self, entry_ids: Sequence[str], updates: Dict[str, Any]):
        """Apply the same field updates to several entries."""

    def fetch_aggregate(self, schedule_ids: Sequence[str]) -> ScheduleTotals:
        """
        Whole-project totals.

        Stores that can total server-side should override this and return
        ScheduleTotals.from_precomputed(...).
        """
        return aggregate(self.fetch_all_entries_for_aggregate(schedule_ids))
