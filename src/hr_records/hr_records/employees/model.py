from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional, Tuple

from ..compliance.model import ComplianceOutcome
from ..core.enums import DocumentType


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee's personal record (no DB access code)."""

    employee_id: int
    first_name: str
    last_name: str
    birth_date: Optional[date]
    email: Optional[str]
    phone: Optional[str]
    address: Optional[str]
    photo_path: Optional[str] = None
    inactive: bool = False
    inactivity_reason: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class Profession:
    """A professional assignment; the one with the highest id is current."""

    profession_id: int
    employee_id: int
    job_title: str
    department: Optional[str]
    salary: Optional[float]
    start_date: Optional[date]
    end_date: Optional[date]


@dataclass(frozen=True)
class EmployeeDocument:
    document_id: int
    employee_id: int
    document_type: DocumentType
    file_path: str
    file_name: str
    uploaded_at: Optional[datetime] = None


@dataclass(frozen=True)
class ReviewMetric:
    metric_id: int
    review_id: int
    metric_name: str
    score: Optional[float]


@dataclass(frozen=True)
class PerformanceReview:
    review_id: int
    employee_id: int
    review_date: date
    reviewer: Optional[str]
    overall_rating: Optional[float]
    comments: Optional[str]
    metrics: Tuple[ReviewMetric, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class EmployeeListRow:
    """Read-model for the employee list (employee joined with current profession and CV)."""

    employee_id: int
    first_name: str
    last_name: str
    birth_date: Optional[date]
    email: Optional[str]
    phone: Optional[str]
    inactive: bool
    job_title: Optional[str] = None
    department: Optional[str] = None
    salary: Optional[float] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    cv_path: Optional[str] = None
    cv_file_name: Optional[str] = None


@dataclass(frozen=True)
class EmployeeProfile:
    employee: Employee
    profession: Optional[Profession]
    documents: Tuple[EmployeeDocument, ...]
    reviews: Tuple[PerformanceReview, ...]
    compliance: ComplianceOutcome

    @property
    def has_id_document(self) -> bool:
        return any(d.document_type == DocumentType.ID for d in self.documents)
