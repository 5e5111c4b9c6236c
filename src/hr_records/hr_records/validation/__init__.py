"""Employee-record field validation.

Pure functions only: the same calls back the live-validation endpoint and the
employee service, so identical input always yields identical problems.
"""

from .employee import field_error, validate_employee_record
from .fields import (
    date_range_check,
    date_syntax_check,
    email_check,
    phone_check,
    required_check,
    salary_check,
)
from .model import FieldProblem, ValidationOutcome

__all__ = [
    "FieldProblem",
    "ValidationOutcome",
    "date_range_check",
    "date_syntax_check",
    "email_check",
    "field_error",
    "phone_check",
    "required_check",
    "salary_check",
    "validate_employee_record",
]
