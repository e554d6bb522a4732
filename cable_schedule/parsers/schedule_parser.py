"""Excel and CSV cable schedule importer."""

import pandas as pd
from pathlib import Path
from typing import Any, Dict, List, Optional
from dataclasses import dataclass

from ..engine import extract_shop_key
from ..exceptions import ScheduleParseError
from ..models import CableEntry
from .validators import (
    validate_schedule_columns,
    validate_schedule_row,
    ValidationResult,
)


SUPPORTED_SUFFIXES = [".xlsx", ".xls", ".csv"]

# Standard column name -> CableEntry field
COLUMN_FIELDS = {
    "Id": "id",
    "Schedule": "schedule_id",
    "Cable Tag": "cable_tag",
    "Base Cable Tag": "base_cable_tag",
    "Cable Number": "cable_number",
    "Parallel Group": "parallel_group_id",
    "Parallel Count": "parallel_total_count",
    "From": "from_location",
    "To": "to_location",
    "Voltage": "voltage",
    "Load (A)": "load_amps",
    "Cable Type": "cable_type",
    "Cable Size": "cable_size",
    "Installation Method": "installation_method",
    "Quantity": "quantity",
    "Measured Length": "measured_length",
    "Extra Length": "extra_length",
    "Total Length": "total_length",
    "Supply Cost": "supply_cost",
    "Install Cost": "install_cost",
    "Total Cost": "total_cost",
    "Notes": "notes",
}

TEXT_FIELDS = {
    "id",
    "schedule_id",
    "cable_tag",
    "base_cable_tag",
    "parallel_group_id",
    "from_location",
    "to_location",
    "cable_type",
    "cable_size",
    "installation_method",
    "notes",
}


def _text(value: Any) -> str:
    """Cell value as text; whole floats lose their ".0" (95.0 -> "95")."""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


@dataclass
class ParseResult:
    """Result of parsing a cable schedule file."""
    entries: List[CableEntry]
    validation_result: ValidationResult
    raw_data: pd.DataFrame
    column_mapping: Dict[str, str]

    @property
    def is_valid(self) -> bool:
        return self.validation_result.is_valid

    @property
    def entry_count(self) -> int:
        return len(self.entries)


class CableScheduleParser:
    """Parser for spreadsheet cable schedules."""

    # Common column name variations
    COLUMN_ALIASES = {
        "Id": ["id", "entry id", "entry_id"],
        "Schedule": ["schedule", "schedule id", "schedule_id"],
        "Cable Tag": ["cable tag", "cable_tag", "tag", "cable no", "cable ref"],
        "Base Cable Tag": ["base cable tag", "base_cable_tag", "base tag"],
        "Cable Number": ["cable number", "cable_number", "cable #", "cable no."],
        "Parallel Group": ["parallel group", "parallel_group_id", "parallel group id"],
        "Parallel Count": ["parallel count", "parallel_total_count", "parallel total"],
        "From": ["from", "from location", "from_location", "source", "origin"],
        "To": ["to", "to location", "to_location", "destination"],
        "Voltage": ["voltage", "volts", "voltage (v)"],
        "Load (A)": ["load (a)", "load", "load amps", "load_amps", "current"],
        "Cable Type": ["cable type", "cable_type", "material"],
        "Cable Size": ["cable size", "cable_size", "size"],
        "Installation Method": ["installation method", "install method", "installation_method"],
        "Quantity": ["quantity", "qty"],
        "Measured Length": ["measured length", "measured_length", "measured length (m)"],
        "Extra Length": ["extra length", "extra_length", "extra length (m)"],
        "Total Length": ["total length", "total_length", "length", "length (m)"],
        "Supply Cost": ["supply cost", "supply_cost", "supply"],
        "Install Cost": ["install cost", "install_cost", "installation cost"],
        "Total Cost": ["total cost", "total_cost", "cost"],
        "Notes": ["notes", "remarks", "comment", "comments"],
    }

    def __init__(self, file_path: str):
        """
        Initialize the parser with a file path.

        Args:
            file_path: Path to an .xlsx, .xls or .csv cable schedule
        """
        self.file_path = Path(file_path)
        if not self.file_path.exists():
            raise ScheduleParseError(f"File not found: {file_path}")
        if self.file_path.suffix.lower() not in SUPPORTED_SUFFIXES:
            raise ScheduleParseError(
                f"Invalid file type: {self.file_path.suffix}. Expected one of {SUPPORTED_SUFFIXES}"
            )

    def _normalize_column_name(self, column: str) -> str:
        """Normalize a column name to standard format."""
        col_lower = str(column).strip().lower()

        for standard_name, aliases in self.COLUMN_ALIASES.items():
            if col_lower == standard_name.lower() or col_lower in aliases:
                return standard_name

        return column

    def _create_column_mapping(self, columns: List[str]) -> Dict[str, str]:
        """Create a mapping from original column names to standard names."""
        mapping = {}
        for col in columns:
            normalized = self._normalize_column_name(col)
            if normalized != col:
                mapping[col] = normalized
        return mapping

    def _read(self, sheet_name: Optional[str]) -> pd.DataFrame:
        if self.file_path.suffix.lower() == ".csv":
            return pd.read_csv(self.file_path)
        if sheet_name:
            return pd.read_excel(self.file_path, sheet_name=sheet_name)
        return pd.read_excel(self.file_path)

    def parse(self, sheet_name: Optional[str] = None, schedule_id: str = "default") -> ParseResult:
        """
        Parse the cable schedule file.

        Args:
            sheet_name: Optional sheet name for Excel files. If None, uses the first sheet.
            schedule_id: Schedule id for rows without a Schedule column value

        Returns:
            ParseResult with entries and validation results
        """
        try:
            df = self._read(sheet_name)
        except Exception as e:
            raise ScheduleParseError(f"Failed to read cable schedule: {e}")

        column_mapping = self._create_column_mapping(df.columns.tolist())
        if column_mapping:
            df = df.rename(columns=column_mapping)

        validation_result = validate_schedule_columns(df.columns.tolist())
        if not validation_result.is_valid:
            return ParseResult(
                entries=[],
                validation_result=validation_result,
                raw_data=df,
                column_mapping=column_mapping
            )

        entries = []
        for position, (idx, row) in enumerate(df.iterrows()):
            row_dict = row.to_dict()

            # Skip completely empty rows
            if all(pd.isna(value) or not str(value).strip() for value in row_dict.values()):
                continue

            row_validation = validate_schedule_row(row_dict, position + 2)  # +2 for header and 0-index
            validation_result.merge(row_validation)

            if row_validation.is_valid:
                entries.append(self._create_entry(row_dict, position, schedule_id))

        return ParseResult(
            entries=entries,
            validation_result=validation_result,
            raw_data=df,
            column_mapping=column_mapping
        )

    def _create_entry(self, row: Dict[str, Any], position: int, schedule_id: str) -> CableEntry:
        """Create a CableEntry from a row dictionary."""
        record: Dict[str, Any] = {}
        for column, field_name in COLUMN_FIELDS.items():
            value = row.get(column)
            if value is None or pd.isna(value):
                continue
            if field_name in TEXT_FIELDS:
                value = _text(value)
            record[field_name] = value

        record.setdefault("id", f"{self.file_path.stem}-{position + 1}")
        record.setdefault("schedule_id", schedule_id)
        record["display_order"] = position

        return CableEntry.from_record(record)

    def get_sheet_names(self) -> List[str]:
        """Get list of sheet names in an Excel file."""
        if self.file_path.suffix.lower() == ".csv":
            return []
        xl = pd.ExcelFile(self.file_path)
        return xl.sheet_names


def load_cable_schedule(
    file_path: str,
    sheet_name: Optional[str] = None,
    schedule_id: str = "default",
) -> ParseResult:
    """
    Convenience function to load and parse a cable schedule.

    Args:
        file_path: Path to the spreadsheet
        sheet_name: Optional sheet name
        schedule_id: Schedule id for rows that do not name one

    Returns:
        ParseResult with entries and validation results
    """
    parser = CableScheduleParser(file_path)
    return parser.parse(sheet_name, schedule_id=schedule_id)


TENANT_NUMBER_ALIASES = ["shop number", "shop_number", "shop", "shop no", "unit"]
TENANT_NAME_ALIASES = ["shop name", "shop_name", "tenant", "tenant name", "name"]


def load_tenant_names(file_path: str) -> Dict[str, str]:
    """
    Load a shop number to tenant name lookup.

    Shop numbers may be written as "45A" or "Shop 45A"; both give key "45a".

    Args:
        file_path: Path to a .csv or Excel tenant list

    Returns:
        Dictionary of shop key to tenant name

    Raises:
        ScheduleParseError: If the file is missing or lacks the columns
    """
    path = Path(file_path)
    if not path.exists():
        raise ScheduleParseError(f"File not found: {file_path}")

    try:
        df = pd.read_csv(path) if path.suffix.lower() == ".csv" else pd.read_excel(path)
    except Exception as e:
        raise ScheduleParseError(f"Failed to read tenant list: {e}")

    columns = {str(c).strip().lower(): c for c in df.columns}
    number_col = next((columns[a] for a in TENANT_NUMBER_ALIASES if a in columns), None)
    name_col = next((columns[a] for a in TENANT_NAME_ALIASES if a in columns), None)
    if number_col is None or name_col is None:
        raise ScheduleParseError("Tenant list needs shop number and shop name columns")

    lookup = {}
    for _, row in df.iterrows():
        number, name = row[number_col], row[name_col]
        if pd.isna(number) or pd.isna(name):
            continue
        number = str(number).strip()
        if number.endswith(".0"):  # numeric shop numbers read as floats
            number = number[:-2]
        key = extract_shop_key(number) or extract_shop_key(f"Shop {number}")
        if key:
            lookup[key] = str(name).strip()

    return lookup
