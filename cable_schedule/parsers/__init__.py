"""Parsers for cable schedule spreadsheets."""

from .schedule_parser import (
    CableScheduleParser,
    ParseResult,
    COLUMN_FIELDS,
    SUPPORTED_SUFFIXES,
    load_cable_schedule,
    load_tenant_names,
)

from .validators import (
    RowIssue,
    ValidationResult,
    validate_schedule_columns,
    validate_schedule_row,
    REQUIRED_COLUMNS,
    NUMERIC_COLUMNS,
)

__all__ = [
    # Parser
    "CableScheduleParser",
    "ParseResult",
    "COLUMN_FIELDS",
    "SUPPORTED_SUFFIXES",
    "load_cable_schedule",
    "load_tenant_names",
    # Validators
    "RowIssue",
    "ValidationResult",
    "validate_schedule_columns",
    "validate_schedule_row",
    "REQUIRED_COLUMNS",
    "NUMERIC_COLUMNS",
]
