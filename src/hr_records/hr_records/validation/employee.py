from __future__ import annotations

from typing import Iterable, Mapping, Optional

from ..core.constants import MINIMUM_WAGE
from .fields import (
    date_range_check,
    date_syntax_check,
    email_check,
    phone_check,
    required_check,
    salary_check,
)
from .model import FieldProblem, ValidationOutcome

EMPLOYEE_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "phone",
    "birth_date",
    "start_date",
    "end_date",
    "salary",
)


def validate_employee_record(candidate: Mapping[str, Optional[str]]) -> ValidationOutcome:
    """Run every employee-form check and collect all problems.

    Not short-circuiting: the form shows every problem at once. Missing keys
    count as absent values.
    """
    get = candidate.get
    checks = (
        required_check(get("first_name"), "First Name"),
        required_check(get("last_name"), "Last Name"),
        email_check(get("email")),
        phone_check(get("phone")),
        date_syntax_check(get("birth_date"), "Birth Date"),
        date_syntax_check(get("start_date"), "Start Date"),
        date_syntax_check(get("end_date"), "End Date"),
        date_range_check(get("start_date"), get("end_date")),
        salary_check(get("salary"), MINIMUM_WAGE),
    )
    return ValidationOutcome(problems=tuple(p for p in checks if p is not None))


def field_error(field_name: str, problems: Iterable[FieldProblem]) -> Optional[str]:
    """First message for ``field_name``, used to annotate a single form input."""
    for problem in problems:
        if problem.field == field_name:
            return problem.message
    return None
