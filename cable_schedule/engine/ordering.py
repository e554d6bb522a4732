"""Sort orders used by cable schedule views."""

import re
from typing import List, Tuple

from ..models import CableEntry


NUMBERED_SHOP_PATTERN = re.compile(r'Shop\s+(\d+)', re.IGNORECASE)

# Entries without a shop number sort after every numbered shop
UNNUMBERED_SHOP = 9999


def natural_key(text: str) -> Tuple:
    """Sort key that orders "Shop 2" before "Shop 10"."""
    parts = re.split(r'(\d+)', (text or "").lower())
    return tuple((0, int(part), "") if part.isdigit() else (1, 0, part) for part in parts if part)


def _shop_sort_key(entry: CableEntry) -> Tuple:
    label = entry.to_location or entry.cable_tag
    match = NUMBERED_SHOP_PATTERN.search(label or "")
    number = int(match.group(1)) if match else UNNUMBERED_SHOP
    return (number, natural_key(label), natural_key(entry.resolved_base_tag), entry.cable_number or 0)


def sort_by_shop(entries: List[CableEntry]) -> List[CableEntry]:
    """
    Order entries by shop number, then destination, then tag.

    "Shop 13/14 - MR DIY" sorts as shop 13; shops 17, 17A and 17B sort by
    their full destination text. Members of a parallel set stay together in
    cable number order.
    """
    return sorted(entries, key=_shop_sort_key)


def sort_by_tag(entries: List[CableEntry]) -> List[CableEntry]:
    """Order entries by base tag, keeping parallel members in cable number order."""
    return sorted(
        entries,
        key=lambda entry: (natural_key(entry.resolved_base_tag), entry.cable_number or 0)
    )
