import pytest

from src.hr_records.hr_records.validation import (
    FieldProblem,
    date_range_check,
    date_syntax_check,
    email_check,
    phone_check,
    required_check,
    salary_check,
)


@pytest.mark.parametrize("value", [None, "", "   "])
def test_optional_fields_accept_blank(value):
    assert email_check(value) is None
    assert phone_check(value) is None
    assert date_syntax_check(value, "Birth Date") is None
    assert salary_check(value, 600) is None
    assert date_range_check(value, "2025-01-10") is None
    assert date_range_check("2025-01-10", value) is None


@pytest.mark.parametrize("value", [None, "", "  \t "])
def test_required_rejects_blank(value):
    assert required_check(value, "First Name") == FieldProblem("First Name", "First Name is required")


def test_required_accepts_text():
    assert required_check(" Ada ", "First Name") is None


def test_email():
    assert email_check("a@b.co") is None
    problem = email_check("not-an-email")
    assert problem.field == "email"
    assert problem.message == "Invalid email format"


@pytest.mark.parametrize("value", ["a b@c.de", "a@b", "a@@b.c", "@b.co", "a@b.co x"])
def test_email_rejects_malformed(value):
    assert email_check(value) is not None


def test_phone_strips_separators():
    assert phone_check("555-111-2222") is None
    assert phone_check("(03) 123.456") is None


def test_phone_needs_eight_digits():
    problem = phone_check("12345")
    assert problem.field == "phone"
    assert "at least 8 digits" in problem.message


def test_phone_rejects_letters_and_plus():
    assert phone_check("12345678a") is not None
    assert phone_check("+96112345678") is not None


def test_date_syntax():
    assert date_syntax_check("2025-02-28", "Start Date") is None
    assert date_syntax_check("2025-02-28T10:00:00", "Start Date") is None
    assert date_syntax_check("2025-02-30", "Start Date") == FieldProblem("Start Date", "Invalid Start Date format")
    assert date_syntax_check("yesterday", "End Date").message == "Invalid End Date format"


def test_date_range():
    problem = date_range_check("2025-01-10", "2025-01-05")
    assert problem == FieldProblem("End Date", "End date must be after start date")
    assert date_range_check("2025-01-05", "2025-01-10") is None
    assert date_range_check(None, "2025-01-10") is None


def test_date_range_same_day_is_valid():
    assert date_range_check("2025-01-05", "2025-01-05") is None


def test_date_range_ignores_unparseable_side():
    assert date_range_check("garbage", "2025-01-05") is None


def test_salary():
    assert salary_check("500", 600).message == "Salary must be at least 600"
    assert salary_check("600", 600) is None
    assert salary_check("abc", 600).message == "Salary must be a valid number"


def test_salary_defaults_to_zero_minimum():
    assert salary_check("0") is None
    assert salary_check("-1").message == "Salary must be at least 0"


@pytest.mark.parametrize("value", ["nan", "inf", "1e999"])
def test_salary_rejects_non_finite(value):
    assert salary_check(value, 600).message == "Salary must be a valid number"


def test_checks_are_repeatable():
    assert phone_check("12345") == phone_check("12345")
    assert salary_check("500", 600) == salary_check("500", 600)


@pytest.mark.parametrize("value", ["1_000", "١٠٠٠", "0x400", "1,000", "12abc"])
def test_salary_requires_plain_decimal_notation(value):
    assert salary_check(value, 600).message == "Salary must be a valid number"


@pytest.mark.parametrize("value", ["1000", "+1000", "1000.", ".5e4", "6E2"])
def test_salary_accepts_decimal_and_exponent_forms(value):
    assert salary_check(value, 600) is None


def test_phone_rejects_non_ascii_digits():
    assert phone_check("١٢٣٤٥٦٧٨").field == "phone"
    assert phone_check("１２３４５６７８") is not None
