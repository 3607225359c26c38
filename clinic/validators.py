# clinic/validators.py
"""Field validators for clinic records.

Every validator either returns the normalized value or raises
``ValidationError`` with a message meant for the person at the form.
"""
import re
from datetime import date, datetime
from enum import Enum
from typing import Optional, Type, TypeVar

from .exceptions import ValidationError

DATE_FORMAT = "%Y-%m-%d"
DATETIME_FORMAT = "%Y-%m-%d %H:%M"
MIN_DOB = date(1900, 1, 1)
PHONE_DIGITS = 10

DATE_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
DATETIME_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}$")
NON_DIGIT_PATTERN = re.compile(r"[^0-9]")

E = TypeVar("E", bound=Enum)


def require_text(value: Optional[str], label: str) -> str:
    """Return the trimmed value, or fail if nothing is left."""
    cleaned = (value or "").strip()
    if not cleaned:
        raise ValidationError(f"{label} is required.")
    return cleaned


def optional_text(value: Optional[str]) -> Optional[str]:
    cleaned = (value or "").strip()
    return cleaned or None


def normalize_phone(raw: Optional[str]) -> str:
    """Strip every non-digit; exactly 10 digits must remain.

    "(555) 123-4567" -> "5551234567"
    """
    digits = NON_DIGIT_PATTERN.sub("", raw or "")
    if len(digits) != PHONE_DIGITS:
        raise ValidationError("Phone must be exactly 10 digits.")
    return digits


def validate_email_optional(raw: Optional[str]) -> Optional[str]:
    """Blank means no email. Otherwise a loose local@domain.tld check.

    The first '@' needs a local part before it, and the last '.' must sit
    at least one character after the '@' without ending the string.
    """
    email = (raw or "").strip()
    if not email:
        return None
    at = email.find("@")
    dot = email.rfind(".")
    if at <= 0 or dot <= at + 1 or dot == len(email) - 1:
        raise ValidationError("Enter a valid email or leave it blank.")
    return email


def _parse_iso_date(text: str) -> date:
    # strptime alone accepts single-digit months and days
    if not DATE_PATTERN.match(text):
        raise ValueError(text)
    return datetime.strptime(text, DATE_FORMAT).date()


def parse_dob(text: Optional[str], today: Optional[date] = None) -> str:
    """Validate a date of birth and return it as YYYY-MM-DD."""
    cleaned = (text or "").strip()
    try:
        dob = _parse_iso_date(cleaned)
    except ValueError:
        raise ValidationError("DOB must be in YYYY-MM-DD format (e.g., 2000-01-31).")

    today = today or date.today()
    if dob > today:
        raise ValidationError("DOB cannot be in the future.")
    if dob < MIN_DOB:
        raise ValidationError("DOB must be 1900-01-01 or later.")
    return dob.strftime(DATE_FORMAT)


def parse_appointment_datetime(text: Optional[str], now: Optional[datetime] = None) -> str:
    """Validate "YYYY-MM-DD HH:MM" strictly and return it in canonical form.

    Impossible dates and times (Feb 30, 25:00) are rejected, as is anything
    earlier than ``now``.
    """
    cleaned = (text or "").strip()
    if not cleaned:
        raise ValidationError("Enter appointment date and time.")
    try:
        if not DATETIME_PATTERN.match(cleaned):
            raise ValueError(cleaned)
        when = datetime.strptime(cleaned, DATETIME_FORMAT)
    except ValueError:
        raise ValidationError("Invalid date/time. Use YYYY-MM-DD HH:MM (e.g., 2026-01-10 14:30).")

    now = now or datetime.now()
    if when < now:
        raise ValidationError("Appointment time cannot be in the past.")
    return when.strftime(DATETIME_FORMAT)


def parse_date_filter(text: Optional[str]) -> Optional[str]:
    """Blank means no filter; otherwise a strict YYYY-MM-DD date."""
    cleaned = (text or "").strip()
    if not cleaned:
        return None
    try:
        return _parse_iso_date(cleaned).strftime(DATE_FORMAT)
    except ValueError:
        raise ValidationError("Invalid date. Use YYYY-MM-DD (e.g., 2026-01-10).")


def parse_choice(value: Optional[str], choices: Type[E], label: str) -> E:
    cleaned = (value or "").strip()
    try:
        return choices(cleaned)
    except ValueError:
        allowed = ", ".join(c.value for c in choices)
        raise ValidationError(f"{label} must be one of: {allowed}.")
