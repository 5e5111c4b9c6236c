"""Age, minimum-wage and ID-document compliance findings.

Every check returns exactly one finding; missing input is a non-compliant
finding, never an omission. The clock is only read when ``today`` is not
given, so tests pin it.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from ..common.datetime_utils import parse_calendar_date, today_local
from ..common.formatting import Number, format_amount, parse_number
from ..core.constants import MINIMUM_AGE, MINIMUM_WAGE
from ..core.enums import ComplianceCategory
from .model import ComplianceFinding, ComplianceOutcome


def compute_age(birth: date, today: date) -> int:
    """Whole years between ``birth`` and ``today``."""
    age = today.year - birth.year
    if (today.month, today.day) < (birth.month, birth.day):
        age -= 1
    return age


def check_age(birth_date: Optional[str], *, today: Optional[date] = None) -> ComplianceFinding:
    if birth_date is None or not birth_date.strip():
        return ComplianceFinding(
            ComplianceCategory.AGE, "Birth date is required to verify age compliance", False
        )

    birth = parse_calendar_date(birth_date)
    if birth is None:
        return ComplianceFinding(
            ComplianceCategory.AGE, "Birth date is invalid; cannot verify age compliance", False
        )

    age = compute_age(birth, today or today_local())
    if age < MINIMUM_AGE:
        return ComplianceFinding(
            ComplianceCategory.AGE,
            f"Employee is {age} years old. Must be at least {MINIMUM_AGE} years old.",
            False,
            age=age,
        )
    return ComplianceFinding(
        ComplianceCategory.AGE, f"Employee is {age} years old (compliant)", True, age=age
    )


def check_minimum_wage(salary: Optional[str], minimum_wage: Number = MINIMUM_WAGE) -> ComplianceFinding:
    if salary is None or not salary.strip():
        return ComplianceFinding(
            ComplianceCategory.SALARY, "Salary is required to verify minimum wage compliance", False
        )

    amount = parse_number(salary)
    if amount is None:
        return ComplianceFinding(ComplianceCategory.SALARY, "Invalid salary value", False)

    if amount < minimum_wage:
        return ComplianceFinding(
            ComplianceCategory.SALARY,
            f"Salary is ${format_amount(amount)}. Minimum wage is ${format_amount(minimum_wage)}.",
            False,
        )
    return ComplianceFinding(
        ComplianceCategory.SALARY, f"Salary is ${format_amount(amount)} (compliant)", True
    )


def check_id_document(has_id_document: bool) -> ComplianceFinding:
    if not has_id_document:
        return ComplianceFinding(
            ComplianceCategory.ID_DOCUMENT, "ID document is required for compliance", False
        )
    return ComplianceFinding(ComplianceCategory.ID_DOCUMENT, "ID document uploaded (compliant)", True)


def check_compliance(
    birth_date: Optional[str],
    salary: Optional[str],
    has_id_document: bool,
    minimum_wage: Number = MINIMUM_WAGE,
    *,
    today: Optional[date] = None,
) -> ComplianceOutcome:
    """Evaluate age, salary and ID document, in that order."""
    return ComplianceOutcome(
        findings=(
            check_age(birth_date, today=today),
            check_minimum_wage(salary, minimum_wage),
            check_id_document(bool(has_id_document)),
        )
    )
