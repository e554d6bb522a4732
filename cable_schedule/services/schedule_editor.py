"""Split, merge and bulk edit operations on stored cable entries."""

import logging
from typing import Any, Dict, List, Sequence

from ..engine import merge_parallel_set, split_entry
from ..exceptions import RepositoryError, ValidationError
from ..models import CableEntry
from ..repository import CableEntryRepository


logger = logging.getLogger(__name__)


class ScheduleEditor:
    """Builds changed entries with the engine and hands them to the repository."""

    def __init__(self, repository: CableEntryRepository):
        self.repository = repository

    def _load(self, entry_id: str) -> CableEntry:
        entry = self.repository.fetch_entry(entry_id)
        if entry is None:
            raise RepositoryError(f"Cable entry not found: {entry_id}")
        return entry

    def split(self, entry_id: str, count: int) -> List[CableEntry]:
        """
        Split a stored cable into count parallel cables.

        Args:
            entry_id: Id of the cable to split
            count: Number of parallel cables, at least 2

        Returns:
            The persisted siblings
        """
        entry = self._load(entry_id)
        siblings = split_entry(entry, count)
        self.repository.persist_split(entry_id, siblings)
        logger.info("Split %s into %d parallel cables", siblings[0].base_cable_tag, count)
        return siblings

    def merge(self, entry_id: str) -> CableEntry:
        """
        Collapse the parallel set containing an entry into one cable.

        Args:
            entry_id: Id of any member of the set

        Returns:
            The surviving entry
        """
        entry = self._load(entry_id)
        if not entry.parallel_group_id:
            return entry

        members = [
            e for e in self.repository.fetch_all_entries_for_aggregate([entry.schedule_id])
            if e.parallel_group_id == entry.parallel_group_id
        ]
        survivor = merge_parallel_set(members or [entry])
        self.repository.persist_split(entry_id, [survivor])
        return survivor

    def reassign(self, entry_ids: Sequence[str], updates: Dict[str, Any]):
        """
        Apply the same changes to several entries.

        Args:
            entry_ids: Entries to change; an empty list does nothing
            updates: Field values to set

        Raises:
            ValidationError: If updates is empty
        """
        if not updates:
            raise ValidationError("No fields to update")
        if not entry_ids:
            return
        self.repository.persist_reassignment(list(entry_ids), dict(updates))
