"""Row validation for imported cable schedules."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..models import coerce_number


@dataclass
class RowIssue:
    """A problem found in an imported row."""
    field: str
    message: str
    row: Optional[int] = None
    value: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of a validation operation."""
    is_valid: bool
    errors: List[RowIssue]
    warnings: List[RowIssue]

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls(is_valid=True, errors=[], warnings=[])

    def add_error(self, error: RowIssue):
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: RowIssue):
        self.warnings.append(warning)

    def merge(self, other: "ValidationResult"):
        for error in other.errors:
            self.add_error(error)
        self.warnings.extend(other.warnings)


REQUIRED_COLUMNS = [
    "Cable Tag",
]

NUMERIC_COLUMNS = [
    "Voltage",
    "Load (A)",
    "Quantity",
    "Measured Length",
    "Extra Length",
    "Total Length",
    "Supply Cost",
    "Install Cost",
    "Total Cost",
    "Cable Number",
    "Parallel Count",
]


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and value != value:  # NaN from pandas
        return True
    return not str(value).strip()


def validate_schedule_columns(columns: List[str]) -> ValidationResult:
    """
    Validate that a cable schedule has the required columns.

    Args:
        columns: Column names after alias normalisation

    Returns:
        ValidationResult with errors for missing columns
    """
    result = ValidationResult.success()
    present = {str(c).strip().lower() for c in columns}

    for required in REQUIRED_COLUMNS:
        if required.lower() not in present:
            result.add_error(RowIssue(
                field=required,
                message=f"Required column missing: {required}"
            ))

    return result


def validate_schedule_row(row: Dict[str, Any], row_number: int) -> ValidationResult:
    """
    Validate a single cable schedule row.

    A missing cable tag is an error. Numbers that cannot be read are only
    warnings; the importer stores them as empty.

    Args:
        row: Dictionary of row data keyed by standard column name
        row_number: Spreadsheet row number for error reporting

    Returns:
        ValidationResult with any errors found
    """
    result = ValidationResult.success()

    if _is_blank(row.get("Cable Tag")):
        result.add_error(RowIssue(
            field="Cable Tag",
            message="Cable tag is empty",
            row=row_number,
        ))

    for column in NUMERIC_COLUMNS:
        value = row.get(column)
        if _is_blank(value):
            continue
        number = coerce_number(value)
        if number is None:
            result.add_warning(RowIssue(
                field=column,
                message=f"Not a number: {value}",
                row=row_number,
                value=str(value),
            ))
        elif number < 0:
            result.add_warning(RowIssue(
                field=column,
                message=f"Negative value will be treated as zero in totals: {value}",
                row=row_number,
                value=str(value),
            ))

    return result
