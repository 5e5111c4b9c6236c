from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import ActiveFilter, DocumentType, EmployeeSort
from .model import Employee, EmployeeDocument, EmployeeListRow, PerformanceReview, Profession


class EmployeeRepository(Protocol):
    """Repository interface for employees and the records hanging off them.

    The service depends on this interface, not on a concrete database.
    """

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def create_employee(
        self,
        *,
        first_name: str,
        last_name: str,
        birth_date: Optional[date],
        email: Optional[str],
        phone: Optional[str],
        address: Optional[str],
    ) -> int:
        raise NotImplementedError

    def update_personal(
        self,
        *,
        employee_id: int,
        first_name: str,
        last_name: str,
        birth_date: Optional[date],
        email: Optional[str],
        phone: Optional[str],
        address: Optional[str],
    ) -> bool:
        raise NotImplementedError

    def set_photo_path(self, *, employee_id: int, photo_path: str) -> bool:
        raise NotImplementedError

    def mark_inactive(self, *, employee_id: int, reason: str) -> bool:
        raise NotImplementedError

    def get_current_profession(self, employee_id: int) -> Optional[Profession]:
        raise NotImplementedError

    def create_profession(
        self,
        *,
        employee_id: int,
        job_title: str,
        department: Optional[str],
        salary: Optional[float],
        start_date: Optional[date],
        end_date: Optional[date],
    ) -> int:
        raise NotImplementedError

    def update_profession(
        self,
        *,
        profession_id: int,
        job_title: str,
        department: Optional[str],
        salary: Optional[float],
        start_date: Optional[date],
        end_date: Optional[date],
    ) -> bool:
        raise NotImplementedError

    def add_document(self, *, employee_id: int, document_type: DocumentType, file_path: str, file_name: str) -> int:
        raise NotImplementedError

    def list_documents(self, employee_id: int) -> Sequence[EmployeeDocument]:
        raise NotImplementedError

    def list_reviews(self, employee_id: int) -> Sequence[PerformanceReview]:
        raise NotImplementedError

    def list_view(
        self,
        *,
        sort_by: EmployeeSort,
        department: Optional[str],
        active: ActiveFilter,
        search: str,
    ) -> Sequence[EmployeeListRow]:
        raise NotImplementedError

    def list_departments(self) -> Sequence[str]:
        raise NotImplementedError

    def list_active(self) -> Sequence[Employee]:
        raise NotImplementedError
