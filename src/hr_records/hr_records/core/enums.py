from __future__ import annotations

from enum import Enum


class ComplianceCategory(str, Enum):
    """Legal/policy requirement a compliance finding is about."""

    AGE = "age"
    SALARY = "salary"
    ID_DOCUMENT = "idDocument"


class DocumentType(str, Enum):
    """Kind of uploaded employee document stored in employee_documents."""

    ID = "ID"
    CV = "CV"


class TimesheetStatus(str, Enum):
    SUBMITTED = "Submitted"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class EmployeeSort(str, Enum):
    """Sort keys accepted by the employee list."""

    ID = "id"
    AGE = "age"
    END_DATE = "end_date"
    DEPARTMENT = "department"


class ActiveFilter(str, Enum):
    ALL = "all"
    ACTIVE = "active"
    INACTIVE = "inactive"
