"""Shared validation utilities"""

import re
from datetime import date, datetime, time
from typing import Optional

from ..errors import ValidationError

TIME_FORMATS = ("%H:%M", "%H:%M:%S", "%I:%M %p", "%I:%M%p")


def require_text(value: Optional[str], field: str) -> str:
    """Return the stripped value, or raise if it is missing or blank"""
    if value is None or not str(value).strip():
        raise ValidationError(f"{field} is required")
    return str(value).strip()


def validate_phone(phone: Optional[str]) -> str:
    """
    Validate a customer phone number.

    Accepts any formatting as long as it carries 10-15 digits.
    The number is stored as entered (stripped); the sender normalises it.

    Raises:
        ValidationError: If phone number is missing or invalid
    """
    phone = require_text(phone, "Phone")
    digits = re.sub(r"\D", "", phone)
    if len(digits) < 10 or len(digits) > 15:
        raise ValidationError("Invalid phone number. Please enter a valid mobile number.")
    return phone


def parse_date(value: Optional[str]) -> date:
    """Parse an ISO 'YYYY-MM-DD' date"""
    value = require_text(value, "Date")
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date '{value}'. Please use YYYY-MM-DD.")


def parse_time(value: Optional[str]) -> time:
    """Parse '10:00', '10:00:00' or '10:00 AM' into a time"""
    value = require_text(value, "Time")
    for fmt in TIME_FORMATS:
        try:
            return datetime.strptime(value.upper(), fmt).time()
        except ValueError:
            continue
    raise ValidationError(f"Invalid time '{value}'. Please use HH:MM.")
