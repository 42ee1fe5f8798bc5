"""
Input validation at the console boundary
The registry receives only cleaned strings
"""

from datetime import datetime

from service_center.exceptions import InvalidDate, InvalidInput

DATE_FORMAT = "%d-%m-%Y"


def require_text(value: str, field_name: str) -> str:
    """Strip a required field, rejecting blank input"""
    cleaned = (value or "").strip()
    if not cleaned:
        raise InvalidInput(f"{field_name} must not be empty")
    return cleaned


def validate_date(value: str, strict: bool = False) -> str:
    """
    Clean an appointment date

    Args:
        value: Date as entered (DD-MM-YYYY)
        strict: Also require a real calendar date in DD-MM-YYYY form

    Returns:
        str: Stripped date string, unchanged otherwise

    Raises:
        InvalidInput: If the date is blank
        InvalidDate: If strict and the date does not parse
    """
    cleaned = require_text(value, "Appointment date")
    if strict:
        try:
            parsed = datetime.strptime(cleaned, DATE_FORMAT)
        except ValueError:
            raise InvalidDate(cleaned) from None
        # strptime accepts single-digit fields like 1-1-2025
        if parsed.strftime(DATE_FORMAT) != cleaned:
            raise InvalidDate(cleaned)
    return cleaned
