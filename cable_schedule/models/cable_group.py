"""Grouping and totals models for cable schedules."""

from dataclasses import dataclass, field
from typing import Any, List, Mapping

from .cable_entry import CableEntry, coerce_number, round_money


@dataclass
class CableGroup:
    """Entries sharing a destination shop."""

    shop_number: str             # lowercased shop key, "" when ungrouped
    shop_name: str               # display label, e.g. "Shop 45A - Pick n Pay"
    entries: List[CableEntry] = field(default_factory=list)

    @property
    def is_ungrouped(self) -> bool:
        return self.shop_number == ""

    @property
    def entry_count(self) -> int:
        return len(self.entries)


@dataclass
class ScheduleTotals:
    """Total length and cost over a set of entries."""

    total_length: float = 0.0
    total_cost: float = 0.0
    entry_count: int = 0

    @classmethod
    def empty(cls) -> "ScheduleTotals":
        return cls()

    @classmethod
    def from_precomputed(cls, values: Mapping[str, Any]) -> "ScheduleTotals":
        """
        Build totals from an aggregate computed by the data store.

        Args:
            values: Mapping with total_length/totalLength, total_cost/totalCost
                    and optionally entry_count/entryCount

        Returns:
            ScheduleTotals with missing or invalid values set to zero
        """
        def pick(*keys):
            for key in keys:
                if key in values:
                    return coerce_number(values[key])
            return None

        length = pick("total_length", "totalLength") or 0.0
        cost = pick("total_cost", "totalCost") or 0.0
        count = pick("entry_count", "entryCount") or 0
        return cls(
            total_length=round_money(length),
            total_cost=round_money(cost),
            entry_count=int(count),
        )

    def __add__(self, other: "ScheduleTotals") -> "ScheduleTotals":
        return ScheduleTotals(
            total_length=round_money(self.total_length + other.total_length),
            total_cost=round_money(self.total_cost + other.total_cost),
            entry_count=self.entry_count + other.entry_count,
        )
