from __future__ import annotations

import re
from typing import Optional

from ..common.datetime_utils import parse_calendar_date
from ..common.formatting import Number, parse_number, plain_number
from ..core.constants import PHONE_MIN_DIGITS
from .model import FieldProblem

EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_NOISE_RE = re.compile(r"[\s\-().]")
PHONE_DIGITS_RE = re.compile(r"\d{%d,}" % PHONE_MIN_DIGITS, re.ASCII)

END_DATE = "End Date"


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def required_check(value: Optional[str], field_name: str) -> Optional[FieldProblem]:
    if _blank(value):
        return FieldProblem(field_name, f"{field_name} is required")
    return None


def email_check(value: Optional[str]) -> Optional[FieldProblem]:
    # Optional field.
    if _blank(value):
        return None
    if not EMAIL_RE.fullmatch(value):
        return FieldProblem("email", "Invalid email format")
    return None


def phone_check(value: Optional[str]) -> Optional[FieldProblem]:
    """Check the local part of a phone number (the country code is picked separately)."""
    if _blank(value):
        return None
    cleaned = PHONE_NOISE_RE.sub("", value)
    if not PHONE_DIGITS_RE.fullmatch(cleaned):
        return FieldProblem(
            "phone",
            f"Invalid phone number format. Phone number must contain at least {PHONE_MIN_DIGITS} digits",
        )
    return None


def date_syntax_check(value: Optional[str], field_name: str) -> Optional[FieldProblem]:
    if _blank(value):
        return None
    if parse_calendar_date(value) is None:
        return FieldProblem(field_name, f"Invalid {field_name} format")
    return None


def date_range_check(start: Optional[str], end: Optional[str]) -> Optional[FieldProblem]:
    if _blank(start) or _blank(end):
        return None

    start_d = parse_calendar_date(start)
    end_d = parse_calendar_date(end)
    # Unparseable sides are reported by date_syntax_check.
    if start_d is None or end_d is None:
        return None

    if end_d < start_d:
        return FieldProblem(END_DATE, "End date must be after start date")
    return None


def salary_check(value: Optional[str], minimum: Number = 0) -> Optional[FieldProblem]:
    if _blank(value):
        return None

    salary = parse_number(value)
    if salary is None:
        return FieldProblem("salary", "Salary must be a valid number")
    if salary < minimum:
        return FieldProblem("salary", f"Salary must be at least {plain_number(minimum)}")
    return None
