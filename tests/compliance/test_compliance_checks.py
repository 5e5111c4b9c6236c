from datetime import date

from src.hr_records.hr_records.compliance import (
    check_age,
    check_compliance,
    check_id_document,
    check_minimum_wage,
    compute_age,
)
from src.hr_records.hr_records.core.enums import ComplianceCategory


def test_exactly_eighteen_is_compliant(fixed_today):
    finding = check_age("2008-03-15", today=fixed_today)
    assert finding.satisfied is True
    assert finding.age == 18
    assert finding.message == "Employee is 18 years old (compliant)"


def test_one_day_short_of_eighteen(fixed_today):
    finding = check_age("2008-03-16", today=fixed_today)
    assert finding.satisfied is False
    assert finding.age == 17
    assert finding.message == "Employee is 17 years old. Must be at least 18 years old."


def test_birthday_borrow_by_month():
    assert compute_age(date(2000, 12, 1), date(2026, 3, 15)) == 25
    assert compute_age(date(2000, 1, 20), date(2026, 3, 15)) == 26


def test_leap_day_birthday():
    assert compute_age(date(2008, 2, 29), date(2026, 2, 28)) == 17
    assert compute_age(date(2008, 2, 29), date(2026, 3, 1)) == 18


def test_missing_birth_date():
    finding = check_age(None)
    assert finding.category == ComplianceCategory.AGE
    assert finding.satisfied is False
    assert finding.age is None
    assert "required" in finding.message


def test_unparseable_birth_date(fixed_today):
    finding = check_age("31/31/2000", today=fixed_today)
    assert finding.satisfied is False
    assert finding.age is None


def test_age_uses_clock_when_today_not_given(monkeypatch):
    from src.hr_records.hr_records.compliance import checks

    monkeypatch.setattr(checks, "today_local", lambda: date(2026, 1, 1))
    assert check_age("2008-01-02").age == 17


def test_minimum_wage_messages():
    assert check_minimum_wage(None).message == "Salary is required to verify minimum wage compliance"
    assert check_minimum_wage("abc").message == "Invalid salary value"

    below = check_minimum_wage("500", 600)
    assert below.satisfied is False
    assert below.message == "Salary is $500. Minimum wage is $600."

    ok = check_minimum_wage("1250000", 600)
    assert ok.satisfied is True
    assert ok.message == "Salary is $1,250,000 (compliant)"


def test_minimum_wage_threshold_uses_separators():
    finding = check_minimum_wage("1500.5", 2000)
    assert finding.message == "Salary is $1,500.5. Minimum wage is $2,000."


def test_minimum_wage_boundary():
    assert check_minimum_wage("600", 600).satisfied is True


def test_id_document():
    assert check_id_document(False).satisfied is False
    assert check_id_document(False).message == "ID document is required for compliance"
    assert check_id_document(True).satisfied is True
    assert check_id_document(True).category == ComplianceCategory.ID_DOCUMENT


def test_minor_fails_overall(fixed_today):
    outcome = check_compliance("2015-06-01", "1000", True, 600, today=fixed_today)
    assert outcome.all_satisfied is False
    assert len(outcome.findings) == 3
    assert [f.category for f in outcome.findings] == [
        ComplianceCategory.AGE,
        ComplianceCategory.SALARY,
        ComplianceCategory.ID_DOCUMENT,
    ]
    assert outcome.finding(ComplianceCategory.AGE).satisfied is False
    assert outcome.finding(ComplianceCategory.SALARY).satisfied is True


def test_all_missing_still_three_findings(fixed_today):
    outcome = check_compliance(None, None, False, today=fixed_today)
    assert len(outcome.findings) == 3
    assert not any(f.satisfied for f in outcome.findings)


def test_compliant_employee(fixed_today):
    outcome = check_compliance("1990-05-05", "600", True, today=fixed_today)
    assert outcome.all_satisfied is True
    assert outcome.to_dict()["findings"][0] == {
        "category": "age",
        "message": "Employee is 35 years old (compliant)",
        "satisfied": True,
        "age": 35,
    }


def test_repeated_calls_are_identical(fixed_today):
    first = check_compliance("2010-01-01", "700", False, today=fixed_today)
    second = check_compliance("2010-01-01", "700", False, today=fixed_today)
    assert first == second
    assert first.to_dict() == second.to_dict()


def test_minimum_wage_rejects_underscored_amount():
    assert check_minimum_wage("1_000", 600).message == "Invalid salary value"
