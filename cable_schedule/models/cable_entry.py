"""Cable entry data model for cable schedules."""

import math
import re
from dataclasses import dataclass, fields, asdict
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Any, Dict, Mapping, Optional


# Trailing parallel index added for display, e.g. "DB-1 (2/3)"
PARALLEL_SUFFIX_PATTERN = re.compile(r'\s*\(\s*\d+\s*/\s*\d+\s*\)\s*$')

# Persisted column names that differ from the attribute name
RECORD_ALIASES = {
    "scheduleId": "schedule_id",
    "displayOrder": "display_order",
    "fromLocation": "from_location",
    "toLocation": "to_location",
    "loadAmps": "load_amps",
    "cableType": "cable_type",
    "cableSize": "cable_size",
    "installationMethod": "installation_method",
    "cableTag": "cable_tag",
    "baseCableTag": "base_cable_tag",
    "cableNumber": "cable_number",
    "parallelGroupId": "parallel_group_id",
    "parallelTotalCount": "parallel_total_count",
    "measuredLength": "measured_length",
    "extraLength": "extra_length",
    "totalLength": "total_length",
    "supplyCost": "supply_cost",
    "installCost": "install_cost",
    "totalCost": "total_cost",
}


def coerce_number(value: Any) -> Optional[float]:
    """
    Convert a loosely typed value into a float.

    Args:
        value: int, float, numeric string or anything else

    Returns:
        The float value, or None if the value is missing or not numeric
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float, Decimal)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip().replace(",", "")
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        try:
            number = float(value)
        except (TypeError, ValueError):
            return None

    if math.isnan(number) or math.isinf(number):
        return None
    return number


def round_money(value: float) -> float:
    """Round to 2 decimal places, halves away from zero."""
    try:
        quantized = Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return 0.0
    return float(quantized)


def strip_parallel_suffix(tag: Optional[str]) -> str:
    """Remove a trailing "(n/m)" parallel index from a cable tag."""
    if not tag:
        return ""
    return PARALLEL_SUFFIX_PATTERN.sub("", str(tag)).strip()


def _non_negative(value: Any) -> float:
    number = coerce_number(value)
    if number is None or number < 0:
        return 0.0
    return number


@dataclass
class CableEntry:
    """Represents one cable run, or one member of a parallel set."""

    id: str
    schedule_id: Optional[str] = None
    display_order: int = 0
    cable_tag: str = ""
    from_location: str = ""
    to_location: str = ""
    voltage: Optional[float] = None
    load_amps: Optional[float] = None
    cable_type: Optional[str] = None            # e.g. "Aluminium", "Cu/PVC"
    cable_size: Optional[str] = None            # e.g. "95mm²"
    installation_method: Optional[str] = None   # air, ducts, ground
    quantity: int = 1
    base_cable_tag: Optional[str] = None        # shared by a parallel set
    cable_number: int = 1                       # 1-based index in the set
    parallel_group_id: Optional[str] = None
    parallel_total_count: Optional[int] = None
    measured_length: Optional[float] = None
    extra_length: Optional[float] = None
    total_length: Optional[float] = None        # authoritative when present
    supply_cost: Optional[float] = None
    install_cost: Optional[float] = None
    total_cost: Optional[float] = None          # authoritative when present
    notes: Optional[str] = None

    @property
    def is_parallel(self) -> bool:
        """Check if the entry is a member of a parallel set."""
        return bool(self.parallel_group_id)

    @property
    def resolved_base_tag(self) -> str:
        """Base tag, falling back to the cable tag without its parallel index."""
        if self.base_cable_tag:
            return self.base_cable_tag
        return strip_parallel_suffix(self.cable_tag)

    @classmethod
    def field_names(cls) -> set:
        return {f.name for f in fields(cls)}

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "CableEntry":
        """
        Build an entry from a persisted row.

        Args:
            record: Mapping with snake_case or camelCase column names.
                    Unknown columns are ignored.

        Returns:
            CableEntry instance
        """
        known = cls.field_names()
        values: Dict[str, Any] = {}
        for key, value in record.items():
            name = RECORD_ALIASES.get(key, key)
            if name in known:
                values[name] = value

        if values.get("id") is None:
            raise ValueError("Cable entry record has no id")
        values["id"] = str(values["id"])

        for name in ("voltage", "load_amps", "measured_length", "extra_length",
                     "total_length", "supply_cost", "install_cost", "total_cost"):
            if name in values:
                values[name] = coerce_number(values[name])

        for name, default in (("display_order", 0), ("quantity", 1), ("cable_number", 1)):
            if name in values:
                number = coerce_number(values[name])
                values[name] = int(number) if number is not None else default

        if "parallel_total_count" in values:
            number = coerce_number(values["parallel_total_count"])
            values["parallel_total_count"] = int(number) if number is not None else None

        for name in ("cable_tag", "from_location", "to_location"):
            if name in values:
                values[name] = "" if values[name] is None else str(values[name])

        if values.get("parallel_group_id") == "":
            values["parallel_group_id"] = None

        return cls(**values)

    def to_record(self) -> Dict[str, Any]:
        """Convert to a persisted row dictionary."""
        return asdict(self)


def effective_length(entry: CableEntry) -> float:
    """
    Get the length used for display and totals.

    Args:
        entry: Cable entry

    Returns:
        total_length when present, otherwise measured + extra length rounded
        to 2 decimals with missing or negative parts counted as zero
    """
    authoritative = coerce_number(entry.total_length)
    if authoritative is not None:
        return authoritative
    return round_money(_non_negative(entry.measured_length) + _non_negative(entry.extra_length))


def effective_cost(entry: CableEntry) -> float:
    """
    Get the cost used for display and totals.

    Args:
        entry: Cable entry

    Returns:
        total_cost when present, otherwise supply + install cost with missing
        or negative parts counted as zero
    """
    authoritative = coerce_number(entry.total_cost)
    if authoritative is not None:
        return authoritative
    return round_money(_non_negative(entry.supply_cost) + _non_negative(entry.install_cost))


def display_tag(entry: CableEntry) -> str:
    """
    Get the tag shown to users.

    Parallel members are shown as "BASE (n/N)", e.g. "DB-1 (2/3)".
    """
    if entry.parallel_group_id:
        base = entry.base_cable_tag or strip_parallel_suffix(entry.cable_tag)
        total = entry.parallel_total_count or 1
        return f"{base} ({entry.cable_number}/{total})"
    return entry.cable_tag
