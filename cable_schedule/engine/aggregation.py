"""Length and cost totals for cable schedules."""

from typing import Dict, Iterable, List

from ..models import (
    CableEntry,
    CableGroup,
    ScheduleTotals,
    effective_cost,
    effective_length,
    round_money,
)


def aggregate(entries: Iterable[CableEntry]) -> ScheduleTotals:
    """
    Sum effective length and cost over entries.

    Works on any subset: a page, a group or a whole project. Missing or
    invalid numbers count as zero, so the result is never NaN.

    Args:
        entries: Entries to total

    Returns:
        ScheduleTotals rounded to 2 decimals
    """
    total_length = 0.0
    total_cost = 0.0
    count = 0

    for entry in entries:
        total_length += effective_length(entry)
        total_cost += effective_cost(entry)
        count += 1

    return ScheduleTotals(
        total_length=round_money(total_length),
        total_cost=round_money(total_cost),
        entry_count=count,
    )


def aggregate_groups(groups: List[CableGroup]) -> Dict[str, ScheduleTotals]:
    """Get subtotals keyed by shop number."""
    return {group.shop_number: aggregate(group.entries) for group in groups}


def aggregate_by_schedule(entries: Iterable[CableEntry]) -> Dict[str, ScheduleTotals]:
    """
    Get subtotals per schedule.

    Args:
        entries: Entries from one or more schedules

    Returns:
        Dictionary of schedule id to totals, in order of first appearance
    """
    by_schedule: Dict[str, List[CableEntry]] = {}
    for entry in entries:
        by_schedule.setdefault(entry.schedule_id or "", []).append(entry)

    return {schedule_id: aggregate(items) for schedule_id, items in by_schedule.items()}
