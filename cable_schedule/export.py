"""Excel export of grouped cable schedules."""

from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

from .engine import aggregate, is_flat_schedule
from .models import CableEntry, CableGroup, display_tag, effective_cost, effective_length


EXPORT_COLUMNS = [
    "Group",
    "Cable Tag",
    "Cable #",
    "From",
    "To",
    "Qty",
    "Voltage",
    "Load (A)",
    "Cable Type",
    "Install Method",
    "Cable Size",
    "Length (m)",
    "Supply Cost",
    "Install Cost",
    "Total Cost",
]


def _entry_row(group: CableGroup, entry: CableEntry) -> Dict[str, Any]:
    return {
        "Group": group.shop_name,
        "Cable Tag": display_tag(entry),
        "Cable #": entry.cable_number,
        "From": entry.from_location,
        "To": entry.to_location,
        "Qty": entry.quantity,
        "Voltage": entry.voltage,
        "Load (A)": entry.load_amps,
        "Cable Type": entry.cable_type,
        "Install Method": entry.installation_method,
        "Cable Size": entry.cable_size,
        "Length (m)": effective_length(entry),
        "Supply Cost": entry.supply_cost,
        "Install Cost": entry.install_cost,
        "Total Cost": effective_cost(entry),
    }


def _total_row(label: str, entries: List[CableEntry]) -> Dict[str, Any]:
    totals = aggregate(entries)
    return {
        "Group": label,
        "Cable Tag": f"{totals.entry_count} cables",
        "Length (m)": totals.total_length,
        "Total Cost": totals.total_cost,
    }


def schedule_to_dataframe(groups: List[CableGroup]) -> pd.DataFrame:
    """
    Build the export table for a grouped schedule.

    Grouped schedules get a subtotal row after each group. A grand total
    row is always added.

    Args:
        groups: Groups from group_by_shop

    Returns:
        DataFrame with EXPORT_COLUMNS
    """
    rows = []
    everything = []
    flat = is_flat_schedule(groups)

    for group in groups:
        for entry in group.entries:
            rows.append(_entry_row(group, entry))
        everything.extend(group.entries)
        if not flat:
            rows.append(_total_row(f"{group.shop_name} subtotal", group.entries))

    rows.append(_total_row("Total", everything))
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def export_schedule(groups: List[CableGroup], output_path: str) -> Path:
    """
    Write a grouped schedule to Excel or CSV.

    Args:
        groups: Groups from group_by_shop
        output_path: Destination ending in .xlsx or .csv

    Returns:
        Path of the written file
    """
    path = Path(output_path)
    df = schedule_to_dataframe(groups)

    if path.suffix.lower() == ".csv":
        df.to_csv(path, index=False)
    else:
        df.to_excel(path, index=False, sheet_name="Cable Schedule")

    return path
