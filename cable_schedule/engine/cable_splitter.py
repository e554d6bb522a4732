"""Splitting cables into parallel sets."""

import logging
from dataclasses import replace
from typing import Callable, List, Optional

from ..exceptions import ValidationError
from ..models import CableEntry
from .tags import generate_entry_id, generate_group_id


logger = logging.getLogger(__name__)


def split_entry(
    entry: CableEntry,
    count: int,
    id_factory: Optional[Callable[[], str]] = None,
    group_id_factory: Optional[Callable[[], str]] = None,
) -> List[CableEntry]:
    """
    Split a cable into a set of parallel cables.

    Each sibling is a copy of the source with a fresh id, a new shared group
    id and cable numbers 1..count. Length and cost are not divided: every
    parallel cable is a separate physical run with its own supply and
    installation.

    When the source is already part of a parallel set the result is the
    complete new set; persisting it replaces all members of the old set.

    Args:
        entry: Cable entry to split
        count: Number of parallel cables, at least 2
        id_factory: Optional callable returning new entry ids
        group_id_factory: Optional callable returning a new group id

    Returns:
        List of count new entries ordered by cable number

    Raises:
        ValidationError: If count is not an integer of at least 2
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValidationError(f"Split count must be an integer, got {count!r}")
    if count < 2:
        raise ValidationError(f"Split count must be at least 2, got {count}")

    new_id = id_factory or generate_entry_id
    group_id = (group_id_factory or generate_group_id)()

    if entry.is_parallel and entry.base_cable_tag:
        base_tag = entry.base_cable_tag
    elif entry.is_parallel:
        base_tag = entry.resolved_base_tag
    else:
        base_tag = entry.cable_tag

    if entry.is_parallel and entry.parallel_total_count != count:
        logger.debug(
            "Re-splitting %s from %s to %d parallel cables",
            base_tag, entry.parallel_total_count, count
        )

    return [
        replace(
            entry,
            id=new_id(),
            cable_tag=base_tag,
            base_cable_tag=base_tag,
            cable_number=number,
            parallel_group_id=group_id,
            parallel_total_count=count,
        )
        for number in range(1, count + 1)
    ]


def merge_parallel_set(members: List[CableEntry]) -> CableEntry:
    """
    Collapse a parallel set back into a single cable.

    The member numbered 1 (or the first member if numbering is broken) is
    kept and made non-parallel.

    Args:
        members: All members of one parallel set

    Returns:
        The surviving entry

    Raises:
        ValidationError: If members is empty
    """
    if not members:
        raise ValidationError("Cannot merge an empty parallel set")

    survivor = next((m for m in members if m.cable_number == 1), members[0])
    base_tag = survivor.resolved_base_tag

    return replace(
        survivor,
        cable_tag=base_tag,
        base_cable_tag=base_tag,
        cable_number=1,
        parallel_group_id=None,
        parallel_total_count=None,
    )
