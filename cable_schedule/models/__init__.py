"""Data models for cable schedules."""

from .cable_entry import (
    CableEntry,
    PARALLEL_SUFFIX_PATTERN,
    coerce_number,
    round_money,
    strip_parallel_suffix,
    effective_length,
    effective_cost,
    display_tag,
)

from .cable_group import (
    CableGroup,
    ScheduleTotals,
)

from .page_window import (
    PageWindow,
    VisibleRows,
)

__all__ = [
    # Cable entry
    "CableEntry",
    "PARALLEL_SUFFIX_PATTERN",
    "coerce_number",
    "round_money",
    "strip_parallel_suffix",
    "effective_length",
    "effective_cost",
    "display_tag",
    # Groups and totals
    "CableGroup",
    "ScheduleTotals",
    # Pagination
    "PageWindow",
    "VisibleRows",
]
