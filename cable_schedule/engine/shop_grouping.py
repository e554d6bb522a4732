"""Grouping cable entries by destination shop."""

import re
from collections import OrderedDict
from dataclasses import replace
from typing import Callable, Dict, List, Optional, Pattern, Union

from ..models import CableEntry, CableGroup


# "Shop 45A - Pick n Pay" -> "45A"
SHOP_PATTERN = re.compile(r'\bShop\s+([A-Za-z0-9]+)', re.IGNORECASE)

UNGROUPED_LABEL = "Ungrouped"

KeyExtractor = Callable[[Optional[str]], str]


def extract_shop_key(to_location: Optional[str], pattern: Pattern = SHOP_PATTERN) -> str:
    """
    Extract the shop key from a destination.

    Args:
        to_location: Free text destination (e.g., "Shop 12A - Other")
        pattern: Regex whose first group is the shop code

    Returns:
        Lowercased shop code (e.g., "12a"), or "" if there is none
    """
    if not to_location:
        return ""
    match = pattern.search(str(to_location))
    if not match:
        return ""
    return match.group(1).lower()


def make_shop_key_extractor(pattern: Union[str, Pattern]) -> KeyExtractor:
    """
    Build a key extractor for a different naming convention.

    Args:
        pattern: Regex (string or compiled) whose first group is the code.
                 String patterns are compiled case-insensitive.

    Returns:
        Callable taking a destination and returning a lowercased key
    """
    if isinstance(pattern, str):
        pattern = re.compile(pattern, re.IGNORECASE)
    if pattern.groups < 1:
        raise ValueError(f"Shop pattern needs a capture group: {pattern.pattern}")

    def extractor(to_location: Optional[str]) -> str:
        return extract_shop_key(to_location, pattern)

    return extractor


def _shop_label(code: str, tenant_name: Optional[str]) -> str:
    label = f"Shop {code.upper()}"
    if tenant_name:
        label += f" - {tenant_name}"
    return label


def _with_tenant_name(entry: CableEntry, code: str, tenant_name: Optional[str]) -> CableEntry:
    """Presentation copy of an entry with the tenant name in its destination."""
    if not tenant_name:
        return entry
    if tenant_name.lower() in (entry.to_location or "").lower():
        return entry
    return replace(entry, to_location=_shop_label(code, tenant_name))


def group_by_shop(
    entries: List[CableEntry],
    tenant_names: Optional[Dict[str, str]] = None,
    key_extractor: KeyExtractor = extract_shop_key,
    ungrouped_label: str = UNGROUPED_LABEL,
) -> List[CableGroup]:
    """
    Partition entries into groups by destination shop.

    Groups are returned in order of first appearance of their shop. Entries
    without a shop code go to a single ungrouped bucket (shop_number "").

    When tenant_names gives a name for a shop that is not already part of an
    entry's destination, the grouped entry is a copy whose to_location reads
    "Shop {CODE} - {Tenant}". The input entries are not modified.

    Args:
        entries: Entries in display order
        tenant_names: Optional mapping of shop key to tenant name
        key_extractor: Callable extracting the shop key from to_location
        ungrouped_label: Display name for the ungrouped bucket

    Returns:
        List of CableGroup
    """
    lookup = {str(key).lower(): name for key, name in (tenant_names or {}).items() if name}
    groups: "OrderedDict[str, CableGroup]" = OrderedDict()

    for entry in entries:
        key = key_extractor(entry.to_location)

        if key not in groups:
            if key:
                label = _shop_label(key, lookup.get(key))
            else:
                label = ungrouped_label
            groups[key] = CableGroup(shop_number=key, shop_name=label)

        if key:
            entry = _with_tenant_name(entry, key, lookup.get(key))
        groups[key].entries.append(entry)

    return list(groups.values())


def is_flat_schedule(groups: List[CableGroup]) -> bool:
    """Check if the schedule should be shown as one table instead of groups."""
    if not groups:
        return True
    return len(groups) == 1 and groups[0].is_ungrouped
