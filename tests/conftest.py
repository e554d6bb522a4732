"""Shared fixtures for cable schedule tests."""

import itertools

import pytest

from cable_schedule.models import CableEntry


@pytest.fixture
def make_entry():
    """Factory for cable entries with unique ids and increasing display order."""
    counter = itertools.count(1)

    def factory(cable_tag="C1", **overrides):
        number = next(counter)
        values = {
            "id": f"E{number}",
            "schedule_id": "S1",
            "display_order": number,
            "cable_tag": cable_tag,
            "from_location": "MSB",
            "to_location": "DB-1",
        }
        values.update(overrides)
        return CableEntry(**values)

    return factory
