"""Parallel cable set resolution for cable schedules."""

import logging
from collections import OrderedDict
from dataclasses import replace
from typing import Dict, List, Tuple

from ..models import CableEntry
from .tags import implicit_group_id


logger = logging.getLogger(__name__)


ImplicitKey = Tuple[str, str, str, str]


def _implicit_key(entry: CableEntry) -> ImplicitKey:
    return (
        entry.schedule_id or "",
        entry.resolved_base_tag,
        entry.from_location or "",
        entry.to_location or "",
    )


def _cluster_entries(entries: List[CableEntry]) -> List[Tuple[str, List[int]]]:
    """
    Cluster entry positions into parallel sets.

    Entries with a parallel_group_id are clustered by that id. A group id
    held by a single entry carries no information, so such entries join the
    entries without an id, which are clustered by schedule, base tag and
    route. Such a cluster gets the id derived from its key; when an explicit
    set already carries that id the cluster joins it.

    Returns:
        (group id, input positions) pairs, in order of first appearance
    """
    explicit: "OrderedDict[str, List[int]]" = OrderedDict()
    for position, entry in enumerate(entries):
        if entry.parallel_group_id:
            explicit.setdefault(entry.parallel_group_id, []).append(position)

    pool = [position for position, entry in enumerate(entries) if not entry.parallel_group_id]
    for group_id, positions in list(explicit.items()):
        if len(positions) == 1:
            logger.debug("Parallel group %s has a single member, treating as ungrouped", group_id)
            pool.extend(positions)
            del explicit[group_id]
    pool.sort()

    implicit: "OrderedDict[ImplicitKey, List[int]]" = OrderedDict()
    for position in pool:
        implicit.setdefault(_implicit_key(entries[position]), []).append(position)

    clusters = []
    for key, positions in implicit.items():
        schedule_id, base_tag, from_location, to_location = key
        group_id = implicit_group_id(base_tag, from_location, to_location, schedule_id)
        if group_id in explicit:
            logger.debug("Joining %d ungrouped cables to parallel group %s", len(positions), group_id)
            explicit[group_id] = sorted(explicit[group_id] + positions)
        else:
            clusters.append((group_id, positions))

    clusters.extend(explicit.items())
    clusters.sort(key=lambda cluster: cluster[1][0])
    return clusters


def _sequence_order(entries: List[CableEntry], positions: List[int]) -> List[int]:
    """Order cluster members by display_order, then input position."""
    return sorted(positions, key=lambda p: (entries[p].display_order, p))


def _has_valid_numbering(members: List[CableEntry]) -> bool:
    numbers = sorted(member.cable_number for member in members)
    return numbers == list(range(1, len(members) + 1))


def _shared_base_tag(members: List[CableEntry]) -> str:
    for member in members:
        if member.base_cable_tag:
            return member.base_cable_tag
    return members[0].resolved_base_tag


def resolve_parallel_groups(entries: List[CableEntry]) -> List[CableEntry]:
    """
    Annotate entries with consistent parallel set information.

    Parallel sets are taken from parallel_group_id. Entries written before
    explicit grouping existed are grouped when they share schedule, base tag,
    origin and destination; such sets get a group id derived from that key.

    Every set of k members ends up with parallel_total_count = k, a shared
    base_cable_tag and cable numbers 1..k. Existing numbering is kept when it
    is already a permutation of 1..k, otherwise members are renumbered in
    display order. A set of one is made non-parallel.

    Inconsistent data is repaired, never rejected, and the input entries are
    not modified.

    Args:
        entries: Entries of one or more schedules, in display order

    Returns:
        New list of entries, in the same order as the input
    """
    resolved: List[CableEntry] = list(entries)

    for group_id, positions in _cluster_entries(resolved):
        ordered = _sequence_order(resolved, positions)
        members = [resolved[p] for p in ordered]

        if len(members) == 1:
            entry = members[0]
            resolved[ordered[0]] = replace(
                entry,
                base_cable_tag=entry.resolved_base_tag,
                cable_number=1,
                parallel_group_id=None,
                parallel_total_count=None,
            )
            continue

        base_tag = _shared_base_tag(members)

        renumber = not _has_valid_numbering(members)
        if renumber:
            logger.debug(
                "Renumbering parallel set %s (%d members) in display order",
                base_tag, len(members)
            )

        for number, (position, member) in enumerate(zip(ordered, members), start=1):
            resolved[position] = replace(
                member,
                base_cable_tag=base_tag,
                cable_number=number if renumber else member.cable_number,
                parallel_group_id=group_id,
                parallel_total_count=len(members),
            )

    return resolved


def find_parallel_sets(entries: List[CableEntry]) -> Dict[str, List[CableEntry]]:
    """
    Get the parallel sets of a schedule.

    Args:
        entries: Entries in display order

    Returns:
        Dictionary of group id to members ordered by cable number
    """
    sets: Dict[str, List[CableEntry]] = {}

    for entry in resolve_parallel_groups(entries):
        if entry.parallel_group_id:
            sets.setdefault(entry.parallel_group_id, []).append(entry)

    for members in sets.values():
        members.sort(key=lambda member: member.cable_number)

    return sets
