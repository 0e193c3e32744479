"""Validation utilities for the expense tracker application."""

from typing import Any, Dict, List, Optional, Tuple
from datetime import date, datetime

from .exceptions import ValidationError


SPECIFIC_DATE_FORMAT = '%m-%d-%Y'

DATE_QUERY_GUIDANCE = "Please provide a specificDate (MM-DD-YYYY) or a fromDate and toDate range."


def validate_required_fields(data: Dict[str, Any], required_fields: List[str]) -> None:
    """
    Validate that required fields are present in data.

    Args:
        data: Data dictionary to validate
        required_fields: List of required field names

    Raises:
        ValidationError: If any required field is missing
    """
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")

    missing_fields = [field for field in required_fields if field not in data or data[field] is None]

    if missing_fields:
        raise ValidationError(
            f"Missing required fields: {', '.join(missing_fields)}"
        )


def validate_specific_date(date_str: str) -> date:
    """
    Validate a calendar date in MM-DD-YYYY format.

    Args:
        date_str: Date string to validate

    Returns:
        The parsed date

    Raises:
        ValidationError: If the date is missing or not a real MM-DD-YYYY date
    """
    if not date_str:
        raise ValidationError("Date is required")

    try:
        return datetime.strptime(date_str.strip(), SPECIFIC_DATE_FORMAT).date()
    except ValueError:
        raise ValidationError("Invalid specificDate format. Use MM-DD-YYYY")


def day_window(day: date) -> Tuple[str, str]:
    """
    Build the inclusive timestamp window covering one calendar day.

    Args:
        day: Calendar day

    Returns:
        (start, end) as 'YYYY-MM-DDT00:00:00' and 'YYYY-MM-DDT23:59:59'
    """
    iso_day = day.isoformat()
    return f"{iso_day}T00:00:00", f"{iso_day}T23:59:59"


def parse_date_query(query: Dict[str, str]) -> Tuple[Optional[date], Optional[Tuple[str, str]]]:
    """
    Work out which date filter a GET request asks for.

    specificDate wins over a range. A range needs both ends.

    Args:
        query: Query string parameters

    Returns:
        (specific_day, None) or (None, (from_date, to_date))

    Raises:
        ValidationError: If neither form is supplied or specificDate is invalid
    """
    specific_date = query.get('specificDate')
    if specific_date:
        return validate_specific_date(specific_date), None

    from_date = query.get('fromDate')
    to_date = query.get('toDate')
    if from_date and to_date:
        return None, (from_date, to_date)

    raise ValidationError(DATE_QUERY_GUIDANCE)
