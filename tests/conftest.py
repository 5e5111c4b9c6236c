from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from pathlib import Path
from typing import Optional

import pytest

from src.hr_records.hr_records.core.enums import ActiveFilter, EmployeeSort
from src.hr_records.hr_records.employees.model import (
    Employee,
    EmployeeDocument,
    EmployeeListRow,
    PerformanceReview,
    Profession,
)
from src.hr_records.hr_records.timesheets.model import Timesheet, TimesheetRow


class InMemoryEmployees:
    def __init__(self):
        self.employees: dict[int, Employee] = {}
        self.professions: dict[int, Profession] = {}
        self.documents: list[EmployeeDocument] = []
        self.reviews: list[PerformanceReview] = []

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self.employees.get(employee_id)

    def create_employee(self, *, first_name, last_name, birth_date, email, phone, address) -> int:
        employee_id = len(self.employees) + 1
        self.employees[employee_id] = Employee(
            employee_id=employee_id,
            first_name=first_name,
            last_name=last_name,
            birth_date=birth_date,
            email=email,
            phone=phone,
            address=address,
        )
        return employee_id

    def update_personal(self, *, employee_id, first_name, last_name, birth_date, email, phone, address) -> bool:
        current = self.employees.get(employee_id)
        if not current:
            return False
        self.employees[employee_id] = replace(
            current,
            first_name=first_name,
            last_name=last_name,
            birth_date=birth_date,
            email=email,
            phone=phone,
            address=address,
        )
        return True

    def set_photo_path(self, *, employee_id, photo_path) -> bool:
        self.employees[employee_id] = replace(self.employees[employee_id], photo_path=photo_path)
        return True

    def mark_inactive(self, *, employee_id, reason) -> bool:
        current = self.employees.get(employee_id)
        if not current:
            return False
        self.employees[employee_id] = replace(current, inactive=True, inactivity_reason=reason)
        return True

    def get_current_profession(self, employee_id: int) -> Optional[Profession]:
        mine = [p for p in self.professions.values() if p.employee_id == employee_id]
        return max(mine, key=lambda p: p.profession_id) if mine else None

    def create_profession(self, *, employee_id, job_title, department, salary, start_date, end_date) -> int:
        profession_id = len(self.professions) + 1
        self.professions[profession_id] = Profession(
            profession_id=profession_id,
            employee_id=employee_id,
            job_title=job_title,
            department=department,
            salary=salary,
            start_date=start_date,
            end_date=end_date,
        )
        return profession_id

    def update_profession(self, *, profession_id, job_title, department, salary, start_date, end_date) -> bool:
        self.professions[profession_id] = replace(
            self.professions[profession_id],
            job_title=job_title,
            department=department,
            salary=salary,
            start_date=start_date,
            end_date=end_date,
        )
        return True

    def add_document(self, *, employee_id, document_type, file_path, file_name) -> int:
        document_id = len(self.documents) + 1
        self.documents.append(
            EmployeeDocument(
                document_id=document_id,
                employee_id=employee_id,
                document_type=document_type,
                file_path=file_path,
                file_name=file_name,
                uploaded_at=datetime(2026, 3, 1, 9, 0),
            )
        )
        return document_id

    def list_documents(self, employee_id: int):
        return [d for d in self.documents if d.employee_id == employee_id]

    def list_reviews(self, employee_id: int):
        return [r for r in self.reviews if r.employee_id == employee_id]

    def list_view(self, *, sort_by, department, active, search):
        self.last_list_args = {"sort_by": sort_by, "department": department, "active": active, "search": search}
        rows = []
        for e in self.employees.values():
            p = self.get_current_profession(e.employee_id)
            if department and (not p or p.department != department):
                continue
            if active == ActiveFilter.ACTIVE and e.inactive:
                continue
            if active == ActiveFilter.INACTIVE and not e.inactive:
                continue
            if search and search.lower() not in f"{e.first_name} {e.last_name}".lower():
                continue
            rows.append(
                EmployeeListRow(
                    employee_id=e.employee_id,
                    first_name=e.first_name,
                    last_name=e.last_name,
                    birth_date=e.birth_date,
                    email=e.email,
                    phone=e.phone,
                    inactive=e.inactive,
                    job_title=p.job_title if p else None,
                    department=p.department if p else None,
                    salary=p.salary if p else None,
                    start_date=p.start_date if p else None,
                    end_date=p.end_date if p else None,
                )
            )
        if sort_by == EmployeeSort.DEPARTMENT:
            rows.sort(key=lambda r: (r.department or "", r.employee_id))
        return rows

    def list_departments(self):
        return sorted({p.department for p in self.professions.values() if p.department})

    def list_active(self):
        return [e for e in self.employees.values() if not e.inactive]


class InMemoryTimesheets:
    def __init__(self, employees: InMemoryEmployees):
        self._employees = employees
        self.timesheets: dict[int, Timesheet] = {}

    def get_by_id(self, timesheet_id: int) -> Optional[Timesheet]:
        return self.timesheets.get(timesheet_id)

    def create(self, *, employee_id, work_date, start_time, end_time, hours_worked, notes, status) -> int:
        timesheet_id = len(self.timesheets) + 1
        self.timesheets[timesheet_id] = Timesheet(
            timesheet_id=timesheet_id,
            employee_id=employee_id,
            work_date=work_date,
            start_time=start_time,
            end_time=end_time,
            hours_worked=hours_worked,
            notes=notes,
            status=status,
        )
        return timesheet_id

    def update(self, *, timesheet_id, work_date, start_time, end_time, hours_worked, notes, status) -> bool:
        self.timesheets[timesheet_id] = replace(
            self.timesheets[timesheet_id],
            work_date=work_date,
            start_time=start_time,
            end_time=end_time,
            hours_worked=hours_worked,
            notes=notes,
            status=status,
        )
        return True

    def list_with_employees(self):
        rows = []
        for t in sorted(self.timesheets.values(), key=lambda t: t.start_time or datetime.min, reverse=True):
            e = self._employees.get_by_id(t.employee_id)
            rows.append(TimesheetRow(timesheet=t, first_name=e.first_name, last_name=e.last_name))
        return rows


class FakeUpload:
    """Minimal stand-in for werkzeug's FileStorage."""

    def __init__(self, filename: str, data: bytes = b"content"):
        self.filename = filename
        self.data = data

    def save(self, dst):
        Path(dst).write_bytes(self.data)


class RecordingStore:
    def __init__(self, *, fail_on: Optional[str] = None):
        self.saved: list[tuple[str, str, int]] = []
        self.deleted: list[str] = []
        self._fail_on = fail_on

    def ensure_dirs(self) -> None:
        pass

    def save(self, file, subdirectory: str, employee_id: int) -> str:
        if self._fail_on and file.filename == self._fail_on:
            raise OSError("disk full")
        self.saved.append((file.filename, subdirectory, employee_id))
        return f"/uploads/{subdirectory}/{employee_id}_{file.filename}"

    def delete(self, path: str) -> None:
        self.deleted.append(path)


@pytest.fixture
def fixed_today() -> date:
    return date(2026, 3, 15)


@pytest.fixture
def employees_repo() -> InMemoryEmployees:
    return InMemoryEmployees()


@pytest.fixture
def timesheets_repo(employees_repo) -> InMemoryTimesheets:
    return InMemoryTimesheets(employees_repo)


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def make_upload():
    return FakeUpload


@pytest.fixture
def failing_store():
    def _make(filename: str) -> RecordingStore:
        return RecordingStore(fail_on=filename)

    return _make


@pytest.fixture
def seeded_employee(employees_repo) -> int:
    employee_id = employees_repo.create_employee(
        first_name="John",
        last_name="Doe",
        birth_date=date(1995, 1, 1),
        email="john@example.com",
        phone="+961123456789",
        address="123 Main St",
    )
    employees_repo.create_profession(
        employee_id=employee_id,
        job_title="Web Developer",
        department="Engineering",
        salary=100000.0,
        start_date=date(2025, 5, 12),
        end_date=None,
    )
    return employee_id


