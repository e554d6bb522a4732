"""Identifier and tag helpers for cable schedules."""

import re
import uuid
from typing import Optional

from ..models import strip_parallel_suffix


# Namespace for group ids derived from legacy (ungrouped) parallel cables
IMPLICIT_GROUP_NAMESPACE = uuid.UUID("6f1c1d9e-8a55-4c0e-9a83-3f0c7b2d5e41")

PARALLEL_TAG_PATTERN = re.compile(r'^(?P<base>.*?)\s*\(\s*(?P<number>\d+)\s*/\s*(?P<total>\d+)\s*\)\s*$')


def generate_entry_id() -> str:
    """Generate a fresh cable entry id."""
    return str(uuid.uuid4())


def generate_group_id() -> str:
    """Generate a fresh parallel group id."""
    return str(uuid.uuid4())


def implicit_group_id(
    base_tag: str,
    from_location: str,
    to_location: str,
    schedule_id: Optional[str] = None,
) -> str:
    """
    Derive a stable group id for cables grouped by tag and route.

    The same inputs always give the same id, so re-resolving a schedule
    does not change the grouping.

    Args:
        base_tag: Shared base cable tag
        from_location: Origin of the run
        to_location: Destination of the run
        schedule_id: Schedule the cables belong to

    Returns:
        Group id string
    """
    key = "\x1f".join([schedule_id or "", base_tag, from_location or "", to_location or ""])
    return f"implicit-{uuid.uuid5(IMPLICIT_GROUP_NAMESPACE, key)}"


def is_implicit_group_id(group_id: Optional[str]) -> bool:
    return bool(group_id) and group_id.startswith("implicit-")


def parse_parallel_tag(tag: str) -> dict:
    """
    Parse a displayed cable tag into components.

    Args:
        tag: Cable tag (e.g., "MSB-DB1 (2/3)" or "MSB-DB1")

    Returns:
        Dictionary with raw, base and, for parallel tags, number and total
    """
    result = {"raw": tag, "base": strip_parallel_suffix(tag)}

    match = PARALLEL_TAG_PATTERN.match(tag or "")
    if match:
        result["number"] = int(match.group("number"))
        result["total"] = int(match.group("total"))

    return result
