"""Tests for data models."""

import math

import pytest
from cable_schedule.models import (
    CableEntry,
    CableGroup,
    ScheduleTotals,
    PageWindow,
    VisibleRows,
    coerce_number,
    round_money,
    strip_parallel_suffix,
    effective_length,
    effective_cost,
    display_tag,
)


class TestNumbers:
    """Tests for number coercion and rounding."""

    def test_coerce_number(self):
        """Test coercion of loosely typed values."""
        assert coerce_number(5) == 5.0
        assert coerce_number("1,234.5") == 1234.5
        assert coerce_number(" 12 ") == 12.0
        assert coerce_number("") is None
        assert coerce_number("abc") is None
        assert coerce_number(None) is None
        assert coerce_number(True) is None
        assert coerce_number(float("nan")) is None

    def test_round_money_half_away_from_zero(self):
        """Test rounding halves away from zero."""
        assert round_money(2.675) == 2.68
        assert round_money(10.005) == 10.01
        assert round_money(-1.005) == -1.01
        assert round_money(3.14159) == 3.14

    def test_strip_parallel_suffix(self):
        """Test removal of the display index."""
        assert strip_parallel_suffix("C1 (2/3)") == "C1"
        assert strip_parallel_suffix("MSB-DB1(1/2)") == "MSB-DB1"
        assert strip_parallel_suffix("C1") == "C1"
        assert strip_parallel_suffix(None) == ""


class TestCableEntry:
    """Tests for CableEntry derived values."""

    def test_authoritative_length(self):
        """Test stored total length wins over measured length."""
        entry = CableEntry(id="1", total_length=12.5, measured_length=100)
        assert effective_length(entry) == 12.5

    def test_derived_length(self):
        """Test length derived from measured and extra length."""
        entry = CableEntry(id="1", measured_length=10.005, extra_length=None)
        assert effective_length(entry) == 10.01

    def test_derived_length_ignores_negative_and_missing(self):
        """Test negative and missing parts count as zero."""
        assert effective_length(CableEntry(id="1", measured_length=-5, extra_length=3)) == 3.0
        assert effective_length(CableEntry(id="1")) == 0.0

    def test_invalid_authoritative_length_falls_back(self):
        """Test NaN total length is treated as missing."""
        entry = CableEntry(id="1", total_length=float("nan"), measured_length=20)
        assert effective_length(entry) == 20.0

    def test_cost(self):
        """Test authoritative and derived cost."""
        assert effective_cost(CableEntry(id="1", total_cost=99.0, supply_cost=1)) == 99.0
        assert effective_cost(CableEntry(id="1", supply_cost=100, install_cost=50.5)) == 150.5
        assert effective_cost(CableEntry(id="1", supply_cost=-10, install_cost=5)) == 5.0
        assert not math.isnan(effective_cost(CableEntry(id="1")))

    def test_display_tag_parallel(self):
        """Test parallel members show their position in the set."""
        entry = CableEntry(
            id="1",
            cable_tag="C1",
            base_cable_tag="C1",
            cable_number=2,
            parallel_group_id="g1",
            parallel_total_count=3,
        )
        assert entry.is_parallel
        assert display_tag(entry) == "C1 (2/3)"

    def test_display_tag_single(self):
        """Test non-parallel entries show their own tag."""
        entry = CableEntry(id="1", cable_tag="MSB-DB1")
        assert not entry.is_parallel
        assert display_tag(entry) == "MSB-DB1"

    def test_resolved_base_tag(self):
        """Test base tag falls back to the stripped cable tag."""
        assert CableEntry(id="1", cable_tag="C4 (1/2)").resolved_base_tag == "C4"
        assert CableEntry(id="1", cable_tag="X", base_cable_tag="C4").resolved_base_tag == "C4"

    def test_from_record(self):
        """Test building an entry from a persisted row."""
        entry = CableEntry.from_record({
            "id": 5,
            "cableTag": "C1",
            "to_location": "Shop 4",
            "totalLength": "12.5",
            "parallelGroupId": "",
            "cable_number": None,
            "created_at": "2024-01-01",
        })
        assert entry.id == "5"
        assert entry.cable_tag == "C1"
        assert entry.total_length == 12.5
        assert entry.parallel_group_id is None
        assert entry.cable_number == 1

    def test_from_record_requires_id(self):
        """Test rows without an id are rejected."""
        with pytest.raises(ValueError):
            CableEntry.from_record({"cable_tag": "C1"})

    def test_to_record(self):
        """Test conversion to a row dictionary."""
        record = CableEntry(id="1", cable_tag="C1").to_record()
        assert record["id"] == "1"
        assert record["cable_tag"] == "C1"
        assert record["quantity"] == 1


class TestGroupsAndTotals:
    """Tests for CableGroup and ScheduleTotals."""

    def test_ungrouped_bucket(self):
        """Test the ungrouped bucket has an empty shop number."""
        assert CableGroup(shop_number="", shop_name="Ungrouped").is_ungrouped
        assert not CableGroup(shop_number="12", shop_name="Shop 12").is_ungrouped

    def test_totals_from_precomputed(self):
        """Test totals computed by the data store."""
        totals = ScheduleTotals.from_precomputed({"totalCost": "175", "totalLength": None})
        assert totals.total_cost == 175.0
        assert totals.total_length == 0.0
        assert totals.entry_count == 0

    def test_totals_add(self):
        """Test totals can be combined."""
        combined = ScheduleTotals(10.1, 5.0, 1) + ScheduleTotals(0.2, 2.5, 2)
        assert combined == ScheduleTotals(10.3, 7.5, 3)


class TestPageWindow:
    """Tests for PageWindow and VisibleRows."""

    def test_last_partial_page(self):
        """Test the last page of 250 rows at 100 per page."""
        window = PageWindow(page=3, page_size=100, total_count=250, total_pages=3)
        assert window.from_index == 200
        assert window.to_index == 299
        assert window.offset == 200
        assert window.limit == 50
        assert window.contains(249)
        assert not window.contains(250)
        assert window.has_previous
        assert not window.has_next

    def test_empty_window(self):
        """Test a window over no rows."""
        window = PageWindow(page=1, page_size=50, total_count=0, total_pages=0)
        assert window.is_empty
        assert window.limit == 0

    def test_visible_rows_end(self):
        """Test end index of visible rows."""
        rows = VisibleRows(start=10, count=5, offset_top=480.0, total_extent=4800.0)
        assert rows.end == 15
