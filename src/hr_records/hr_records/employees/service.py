from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Mapping, Optional, Sequence, Tuple

from ..common.datetime_utils import parse_calendar_date
from ..common.formatting import Number, parse_number, plain_number
from ..compliance import ComplianceOutcome, check_compliance
from ..core.constants import COUNTRY_CODES, DEFAULT_COUNTRY_CODE, MINIMUM_WAGE
from ..core.enums import ActiveFilter, DocumentType, EmployeeSort
from ..core.exceptions import NotFoundError, RecordValidationError, ValidationError
from ..storage.store import FileStore, UploadedFile
from ..validation import (
    ValidationOutcome,
    date_range_check,
    date_syntax_check,
    email_check,
    phone_check,
    required_check,
    salary_check,
    validate_employee_record,
)
from .model import Employee, EmployeeListRow, EmployeeProfile
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

FORM_FIELDS = (
    "first_name",
    "last_name",
    "birth_date",
    "email",
    "phone_country_code",
    "phone_number",
    "address",
    "job_title",
    "department",
    "salary",
    "start_date",
    "end_date",
)


def _clean(value: Optional[str]) -> Optional[str]:
    v = (value or "").strip()
    return v or None


def form_values(form: Mapping[str, str]) -> dict:
    """Submitted employee form values, blank inputs normalized to None."""
    values = {name: _clean(form.get(name)) for name in FORM_FIELDS}
    values["phone_country_code"] = values["phone_country_code"] or DEFAULT_COUNTRY_CODE
    return values


def join_phone(country_code: Optional[str], number: Optional[str]) -> Optional[str]:
    if not number:
        return None
    return f"{country_code or DEFAULT_COUNTRY_CODE}{number}"


def split_phone(phone: Optional[str]) -> Tuple[str, str]:
    """Split a stored phone back into (country code, number) for edit forms."""
    if not phone:
        return DEFAULT_COUNTRY_CODE, ""
    for code in sorted(COUNTRY_CODES, key=len, reverse=True):
        if phone.startswith(code):
            return code, phone[len(code):]
    return DEFAULT_COUNTRY_CODE, phone


def _has_upload(file: Optional[UploadedFile]) -> bool:
    return file is not None and bool(getattr(file, "filename", None))


def _outcome(*checks) -> ValidationOutcome:
    return ValidationOutcome(problems=tuple(p for p in checks if p is not None))


@dataclass(frozen=True)
class EmployeeListing:
    rows: Sequence[EmployeeListRow]
    departments: Sequence[str]
    sort_by: EmployeeSort
    department: Optional[str]
    active: ActiveFilter
    search: str


@dataclass(frozen=True)
class FormPreview:
    """Live-validation answer: the same verdicts the save would produce."""

    validation: ValidationOutcome
    compliance: ComplianceOutcome

    def to_dict(self) -> dict:
        return {"validation": self.validation.to_dict(), "compliance": self.compliance.to_dict()}


class EmployeeService:
    """Use cases around employee records; this is where submissions are trusted or rejected."""

    def __init__(self, employees: EmployeeRepository, files: FileStore, *, minimum_wage: Number = MINIMUM_WAGE):
        self._employees = employees
        self._files = files
        self._minimum_wage = minimum_wage

    @staticmethod
    def _candidate(values: Mapping[str, Optional[str]]) -> dict:
        # The phone is validated without its country code.
        return {
            "first_name": values.get("first_name"),
            "last_name": values.get("last_name"),
            "email": values.get("email"),
            "phone": values.get("phone_number"),
            "birth_date": values.get("birth_date"),
            "start_date": values.get("start_date"),
            "end_date": values.get("end_date"),
            "salary": values.get("salary"),
        }

    def preview(
        self,
        form: Mapping[str, str],
        *,
        has_id_document: bool = False,
        today: Optional[date] = None,
    ) -> FormPreview:
        values = form_values(form)
        return FormPreview(
            validation=validate_employee_record(self._candidate(values)),
            compliance=check_compliance(
                values["birth_date"],
                values["salary"],
                has_id_document,
                self._minimum_wage,
                today=today,
            ),
        )

    def create_employee(
        self,
        form: Mapping[str, str],
        files: Optional[Mapping[str, UploadedFile]] = None,
    ) -> int:
        values = form_values(form)
        outcome = validate_employee_record(self._candidate(values))
        if not outcome.ok:
            raise RecordValidationError(outcome.problems, values)

        employee_id = self._employees.create_employee(
            first_name=values["first_name"],
            last_name=values["last_name"],
            birth_date=parse_calendar_date(values["birth_date"]),
            email=values["email"],
            phone=join_phone(values["phone_country_code"], values["phone_number"]),
            address=values["address"],
        )
        if not employee_id:
            raise ValidationError("Failed to create employee")

        self._store_uploads(employee_id, files or {})

        if values["job_title"]:
            self._employees.create_profession(
                employee_id=employee_id,
                job_title=values["job_title"],
                department=values["department"],
                salary=parse_number(values["salary"]),
                start_date=parse_calendar_date(values["start_date"]),
                end_date=parse_calendar_date(values["end_date"]),
            )

        logger.info("Created employee %s", employee_id)
        return employee_id

    def _store_uploads(self, employee_id: int, files: Mapping[str, UploadedFile]) -> None:
        # A failed upload is logged and does not undo the employee record.
        photo = files.get("photo")
        if _has_upload(photo):
            try:
                path = self._files.save(photo, "photos", employee_id)
                self._employees.set_photo_path(employee_id=employee_id, photo_path=path)
            except Exception:
                logger.exception("Error saving photo for employee %s", employee_id)

        for field_name, document_type in (("id_document", DocumentType.ID), ("cv_document", DocumentType.CV)):
            upload = files.get(field_name)
            if not _has_upload(upload):
                continue
            try:
                path = self._files.save(upload, "documents", employee_id)
                self._employees.add_document(
                    employee_id=employee_id,
                    document_type=document_type,
                    file_path=path,
                    file_name=upload.filename,
                )
            except Exception:
                logger.exception("Error saving %s document for employee %s", document_type.value, employee_id)

    def _require(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def get_profile(self, employee_id: int, *, today: Optional[date] = None) -> EmployeeProfile:
        employee = self._require(employee_id)
        profession = self._employees.get_current_profession(employee.employee_id)
        documents = tuple(self._employees.list_documents(employee.employee_id))
        reviews = tuple(self._employees.list_reviews(employee.employee_id))

        has_id = any(d.document_type == DocumentType.ID for d in documents)
        salary = plain_number(profession.salary) if profession and profession.salary is not None else None
        compliance = check_compliance(
            employee.birth_date.isoformat() if employee.birth_date else None,
            salary,
            has_id,
            self._minimum_wage,
            today=today,
        )
        return EmployeeProfile(
            employee=employee,
            profession=profession,
            documents=documents,
            reviews=reviews,
            compliance=compliance,
        )

    def update_personal(self, employee_id: int, form: Mapping[str, str]) -> None:
        employee = self._require(employee_id)
        values = form_values(form)
        outcome = _outcome(
            required_check(values["first_name"], "First Name"),
            required_check(values["last_name"], "Last Name"),
            email_check(values["email"]),
            phone_check(values["phone_number"]),
            date_syntax_check(values["birth_date"], "Birth Date"),
        )
        if not outcome.ok:
            raise RecordValidationError(outcome.problems, values)

        self._employees.update_personal(
            employee_id=employee.employee_id,
            first_name=values["first_name"],
            last_name=values["last_name"],
            birth_date=parse_calendar_date(values["birth_date"]),
            email=values["email"],
            phone=join_phone(values["phone_country_code"], values["phone_number"]),
            address=values["address"],
        )

    def update_profession(self, employee_id: int, form: Mapping[str, str]) -> None:
        employee = self._require(employee_id)
        values = form_values(form)
        outcome = _outcome(
            required_check(values["job_title"], "Job Title"),
            date_syntax_check(values["start_date"], "Start Date"),
            date_syntax_check(values["end_date"], "End Date"),
            date_range_check(values["start_date"], values["end_date"]),
            salary_check(values["salary"], MINIMUM_WAGE),
        )
        if not outcome.ok:
            raise RecordValidationError(outcome.problems, values)

        fields = dict(
            job_title=values["job_title"],
            department=values["department"],
            salary=parse_number(values["salary"]),
            start_date=parse_calendar_date(values["start_date"]),
            end_date=parse_calendar_date(values["end_date"]),
        )
        current = self._employees.get_current_profession(employee.employee_id)
        if current:
            self._employees.update_profession(profession_id=current.profession_id, **fields)
        else:
            self._employees.create_profession(employee_id=employee.employee_id, **fields)

    def mark_inactive(self, employee_id: int, reason: Optional[str] = None) -> None:
        employee = self._require(employee_id)
        if not self._employees.mark_inactive(employee_id=employee.employee_id, reason=(reason or "").strip()):
            raise ValidationError("Failed to mark employee inactive")
        logger.info("Employee %s marked inactive", employee.employee_id)

    def list_employees(
        self,
        *,
        sort_by: Optional[str] = None,
        department: Optional[str] = None,
        active: Optional[str] = None,
        search: Optional[str] = None,
    ) -> EmployeeListing:
        try:
            sort_key = EmployeeSort(sort_by or EmployeeSort.ID.value)
        except ValueError:
            sort_key = EmployeeSort.ID
        try:
            active_filter = ActiveFilter(active or ActiveFilter.ALL.value)
        except ValueError:
            active_filter = ActiveFilter.ALL

        department = _clean(department)
        search = (search or "").strip()
        rows = self._employees.list_view(
            sort_by=sort_key,
            department=department,
            active=active_filter,
            search=search,
        )
        return EmployeeListing(
            rows=rows,
            departments=self._employees.list_departments(),
            sort_by=sort_key,
            department=department,
            active=active_filter,
            search=search,
        )

    def list_active(self) -> Sequence[Employee]:
        return self._employees.list_active()
