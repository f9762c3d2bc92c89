"""
Input Validation

Validation functions for MCP tool parameters.

FastMCP already enforces parameter types from the tool signatures; these
checks cover formats Tripletex would otherwise reject with a less helpful
message. All validators raise ValidationError on invalid input.
"""

import re
from datetime import date
from typing import Any

_ID_LIST_RE = re.compile(r"^\d+(,\s*\d+)*$")
_WEEK_YEAR_RE = re.compile(r"^\d{4}-(0[1-9]|[1-4]\d|5[0-3])$")
_MONTH_YEAR_RE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


class ValidationError(ValueError):
    """Custom exception for validation errors with structured data."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        provided_value: Any | None = None,
        expected: str | None = None,
    ):
        self.message = message
        self.field = field
        self.provided_value = provided_value
        self.expected = expected
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Convert error to dict for MCP error responses."""
        result = {"success": False, "error": "validation_error", "message": self.message}

        if self.field:
            result["field"] = self.field

        if self.provided_value is not None:
            result["provided"] = str(self.provided_value)

        if self.expected:
            result["expected"] = self.expected

        return result


def validate_date_string(date_str: str | None, field_name: str = "date"):
    """
    Validate ISO date string (yyyy-MM-dd). None is accepted.

    Raises:
        ValidationError: If date_str is not a calendar date
    """
    if date_str is None:
        return

    try:
        date.fromisoformat(date_str)
    except (TypeError, ValueError):
        raise ValidationError(
            message=f"{field_name} must be a valid date (yyyy-MM-dd)",
            field=field_name,
            provided_value=date_str,
            expected="yyyy-MM-dd",
        )


def validate_id(value: int | None, field_name: str = "id"):
    """
    Validate a Tripletex object ID. None is accepted.

    Raises:
        ValidationError: If value is not a positive integer
    """
    if value is None:
        return

    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(
            message=f"{field_name} must be a positive integer",
            field=field_name,
            provided_value=value,
            expected="positive integer",
        )


def validate_id_list(value: str | None, field_name: str = "ids"):
    """
    Validate a comma-separated ID list such as "12,34". None is accepted.

    Raises:
        ValidationError: If value is not a comma-separated list of integers
    """
    if value is None:
        return

    if not _ID_LIST_RE.match(value.strip()):
        raise ValidationError(
            message=f"{field_name} must be comma-separated integer IDs",
            field=field_name,
            provided_value=value,
            expected="e.g. '12' or '12,34'",
        )


def validate_week_year(value: str | None, field_name: str = "week_year"):
    """Validate an ISO week-year such as '2026-07'. None is accepted."""
    if value is None:
        return

    if not _WEEK_YEAR_RE.match(value):
        raise ValidationError(
            message=f"{field_name} must be an ISO week-year",
            field=field_name,
            provided_value=value,
            expected="YYYY-WW, e.g. '2026-07'",
        )


def validate_month_year(value: str | None, field_name: str = "month_year"):
    """Validate a month such as '2026-02'. None is accepted."""
    if value is None:
        return

    if not _MONTH_YEAR_RE.match(value):
        raise ValidationError(
            message=f"{field_name} must be a month",
            field=field_name,
            provided_value=value,
            expected="YYYY-MM, e.g. '2026-02'",
        )


def validate_hours(hours: float, field_name: str = "hours"):
    """
    Validate hours for a timesheet entry.

    Raises:
        ValidationError: If hours is negative or more than a day
    """
    if hours < 0 or hours > 24:
        raise ValidationError(
            message=f"{field_name} must be between 0 and 24",
            field=field_name,
            provided_value=hours,
            expected="0 <= hours <= 24",
        )


def validate_offset(offset: int | None, field_name: str = "offset"):
    """Validate a pagination offset. None is accepted."""
    if offset is not None and offset < 0:
        raise ValidationError(
            message=f"{field_name} must be non-negative",
            field=field_name,
            provided_value=offset,
            expected="non-negative integer",
        )


def validate_count(count: int | None, field_name: str = "count"):
    """Validate a pagination page size. None is accepted."""
    if count is not None and count <= 0:
        raise ValidationError(
            message=f"{field_name} must be positive",
            field=field_name,
            provided_value=count,
            expected="positive integer",
        )
