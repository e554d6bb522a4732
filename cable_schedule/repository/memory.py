"""In-memory cable entry repository."""

import logging
from dataclasses import replace
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ..exceptions import RepositoryError
from ..models import CableEntry
from .base import CableEntryRepository


logger = logging.getLogger(__name__)

# Fields a bulk edit may not change
PROTECTED_FIELDS = {"id"}


class InMemoryCableEntryRepository(CableEntryRepository):
    """Repository backed by a list, used for imported files and tests."""

    def __init__(self, entries: Optional[Iterable[CableEntry]] = None):
        """
        Initialize the repository.

        Args:
            entries: Optional initial entries
        """
        self._entries: Dict[str, CableEntry] = {}
        for entry in entries or []:
            self.add(entry)

    def add(self, entry: CableEntry):
        if entry.id in self._entries:
            raise RepositoryError(f"Duplicate cable entry id: {entry.id}")
        self._entries[entry.id] = entry

    def _ordered(self, schedule_ids: Sequence[str]) -> List[CableEntry]:
        wanted = set(schedule_ids)
        selected = [e for e in self._entries.values() if e.schedule_id in wanted]
        return sorted(selected, key=lambda e: (e.display_order, e.cable_number or 0))

    def fetch_entries(
        self,
        schedule_ids: Sequence[str],
        offset: int,
        limit: int,
    ) -> List[CableEntry]:
        if offset < 0 or limit < 0:
            raise RepositoryError(f"Invalid window: offset={offset}, limit={limit}")
        return self._ordered(schedule_ids)[offset:offset + limit]

    def fetch_entry_count(self, schedule_ids: Sequence[str]) -> int:
        return len(self._ordered(schedule_ids))

    def fetch_all_entries_for_aggregate(self, schedule_ids: Sequence[str]) -> List[CableEntry]:
        return self._ordered(schedule_ids)

    def fetch_entry(self, entry_id: str) -> Optional[CableEntry]:
        return self._entries.get(entry_id)

    def persist_split(self, source_entry_id: str, siblings: List[CableEntry]):
        source = self._entries.get(source_entry_id)
        if source is None:
            raise RepositoryError(f"Cable entry not found: {source_entry_id}")

        replaced = {source_entry_id}
        if source.parallel_group_id:
            replaced.update(
                e.id for e in self._entries.values()
                if e.parallel_group_id == source.parallel_group_id
            )

        clashes = [s.id for s in siblings if s.id in self._entries and s.id not in replaced]
        if clashes:
            raise RepositoryError(f"Sibling ids already exist: {', '.join(clashes)}")

        for entry_id in replaced:
            del self._entries[entry_id]
        for sibling in siblings:
            self._entries[sibling.id] = sibling

        logger.info(
            "Replaced %d cable entr%s with %d parallel cables",
            len(replaced), "y" if len(replaced) == 1 else "ies", len(siblings)
        )

    def persist_reassignment(self, entry_ids: Sequence[str], updates: Dict[str, Any]):
        unknown = set(updates) - CableEntry.field_names()
        if unknown:
            raise RepositoryError(f"Unknown cable entry fields: {', '.join(sorted(unknown))}")
        protected = set(updates) & PROTECTED_FIELDS
        if protected:
            raise RepositoryError(f"Fields cannot be reassigned: {', '.join(sorted(protected))}")

        missing = [entry_id for entry_id in entry_ids if entry_id not in self._entries]
        if missing:
            raise RepositoryError(f"Cable entries not found: {', '.join(missing)}")

        for entry_id in entry_ids:
            self._entries[entry_id] = replace(self._entries[entry_id], **updates)

        logger.info("Updated %d cable entries: %s", len(entry_ids), ", ".join(sorted(updates)))
