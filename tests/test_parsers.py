"""Tests for cable schedule and tenant list importers."""

import pandas as pd
import pytest
from cable_schedule.exceptions import ScheduleParseError
from cable_schedule.parsers import (
    CableScheduleParser,
    load_cable_schedule,
    load_tenant_names,
    validate_schedule_row,
)


def write_csv(path, text):
    path.write_text(text, encoding="utf-8")
    return str(path)


class TestCableScheduleParser:
    """Tests for the spreadsheet importer."""

    def test_parse_csv_with_aliases(self, tmp_path):
        """Test common column names are recognised."""
        path = write_csv(
            tmp_path / "schedule.csv",
            "Tag,From,Destination,Size,Length (m),Cost\n"
            "MSB-DB1,MSB,Shop 12 - Unknown,95,50,1200\n"
            "MSB-DB2,MSB,Shop 14,35,20.5,\n",
        )

        result = load_cable_schedule(path, schedule_id="S1")

        assert result.is_valid
        assert result.entry_count == 2
        first, second = result.entries
        assert first.cable_tag == "MSB-DB1"
        assert first.to_location == "Shop 12 - Unknown"
        assert first.cable_size == "95"
        assert first.total_length == 50
        assert first.total_cost == 1200
        assert second.total_cost is None
        assert result.column_mapping["Tag"] == "Cable Tag"

    def test_generated_ids_and_order(self, tmp_path):
        """Test rows without ids get one from the file name and row."""
        path = write_csv(tmp_path / "board.csv", "Cable Tag\nA\nB\n")

        result = load_cable_schedule(path, schedule_id="S1")

        assert [e.id for e in result.entries] == ["board-1", "board-2"]
        assert [e.display_order for e in result.entries] == [0, 1]
        assert {e.schedule_id for e in result.entries} == {"S1"}

    def test_parallel_columns(self, tmp_path):
        """Test stored parallel set columns are imported."""
        path = write_csv(
            tmp_path / "schedule.csv",
            "Id,Cable Tag,Base Cable Tag,Cable Number,Parallel Group,Parallel Count\n"
            "a,C1,C1,1,g1,2\n"
            "b,C1,C1,2,g1,2\n",
        )

        entries = load_cable_schedule(path).entries

        assert [e.id for e in entries] == ["a", "b"]
        assert [e.cable_number for e in entries] == [1, 2]
        assert all(e.parallel_group_id == "g1" for e in entries)
        assert all(e.parallel_total_count == 2 for e in entries)

    def test_missing_tag_column(self, tmp_path):
        """Test a schedule without a cable tag column is invalid."""
        path = write_csv(tmp_path / "schedule.csv", "From,To\nMSB,DB-1\n")

        result = load_cable_schedule(path)

        assert not result.is_valid
        assert result.entries == []
        assert result.validation_result.errors[0].field == "Cable Tag"

    def test_blank_tag_row_is_skipped(self, tmp_path):
        """Test rows without a tag are reported and left out."""
        path = write_csv(
            tmp_path / "schedule.csv",
            "Cable Tag,From,To\n"
            "C1,MSB,DB-1\n"
            ",MSB,DB-2\n",
        )

        result = load_cable_schedule(path)

        assert not result.is_valid
        assert result.entry_count == 1
        assert result.validation_result.errors[0].row == 3

    def test_empty_rows_are_ignored(self, tmp_path):
        """Test completely empty rows are not errors."""
        path = write_csv(tmp_path / "schedule.csv", "Cable Tag,To\nC1,DB-1\n,\nC2,DB-2\n")

        result = load_cable_schedule(path)

        assert result.is_valid
        assert [e.cable_tag for e in result.entries] == ["C1", "C2"]

    def test_non_numeric_value_is_a_warning(self, tmp_path):
        """Test unreadable numbers are imported as empty with a warning."""
        path = write_csv(tmp_path / "schedule.csv", "Cable Tag,Total Length\nC1,abc\nC2,12\n")

        result = load_cable_schedule(path)

        assert result.is_valid
        assert result.entries[0].total_length is None
        assert result.entries[1].total_length == 12
        assert result.validation_result.warnings[0].field == "Total Length"

    def test_missing_file(self, tmp_path):
        """Test a missing file raises."""
        with pytest.raises(ScheduleParseError):
            CableScheduleParser(str(tmp_path / "missing.xlsx"))

    def test_unsupported_suffix(self, tmp_path):
        """Test unsupported file types raise."""
        path = tmp_path / "schedule.txt"
        path.write_text("Cable Tag\nC1\n")

        with pytest.raises(ScheduleParseError):
            CableScheduleParser(str(path))

    def test_parse_xlsx(self, tmp_path):
        """Test Excel schedules."""
        path = tmp_path / "schedule.xlsx"
        pd.DataFrame({
            "Cable Tag": ["C1", "C2"],
            "To": ["Shop 1", "Shop 2"],
            "Supply Cost": [100.0, 50.5],
        }).to_excel(path, index=False, sheet_name="Cables")

        parser = CableScheduleParser(str(path))
        result = parser.parse()

        assert parser.get_sheet_names() == ["Cables"]
        assert result.entry_count == 2
        assert result.entries[1].supply_cost == 50.5


class TestValidateRow:
    """Tests for single-row validation."""

    def test_negative_value_is_a_warning(self):
        """Test negative numbers are allowed with a warning."""
        result = validate_schedule_row({"Cable Tag": "C1", "Extra Length": -2}, 2)

        assert result.is_valid
        assert len(result.warnings) == 1

    def test_blank_tag_is_an_error(self):
        """Test a whitespace-only tag is an error."""
        result = validate_schedule_row({"Cable Tag": "   "}, 5)

        assert not result.is_valid
        assert result.errors[0].row == 5


class TestTenantNames:
    """Tests for the tenant list importer."""

    def test_load_csv(self, tmp_path):
        """Test shop numbers are keyed like destinations."""
        path = write_csv(
            tmp_path / "tenants.csv",
            "Shop Number,Shop Name\n45A,Pick n Pay\nShop 12,Woolworths\n",
        )

        assert load_tenant_names(path) == {"45a": "Pick n Pay", "12": "Woolworths"}

    def test_numeric_shop_numbers(self, tmp_path):
        """Test numeric shop numbers read by pandas as floats."""
        path = write_csv(tmp_path / "tenants.csv", "shop_number,tenant\n12,Clicks\n,Nobody\n14,Mr Price\n")

        assert load_tenant_names(path) == {"12": "Clicks", "14": "Mr Price"}

    def test_missing_columns(self, tmp_path):
        """Test tenant lists need both columns."""
        path = write_csv(tmp_path / "tenants.csv", "Shop Number\n12\n")

        with pytest.raises(ScheduleParseError):
            load_tenant_names(path)

    def test_missing_file(self, tmp_path):
        """Test a missing tenant list raises."""
        with pytest.raises(ScheduleParseError):
            load_tenant_names(str(tmp_path / "missing.csv"))
