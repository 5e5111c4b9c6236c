from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from ..core.enums import ActiveFilter, DocumentType, EmployeeSort
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date, as_float, db_cursor, fetchall, fetchone
from .model import Employee, EmployeeDocument, EmployeeListRow, PerformanceReview, Profession, ReviewMetric
from .repository import EmployeeRepository

_ORDER_BY = {
    EmployeeSort.ID: "e.id",
    EmployeeSort.AGE: "e.birth_date DESC",
    EmployeeSort.END_DATE: "p.end_date DESC, e.id",
    EmployeeSort.DEPARTMENT: "p.department, e.id",
}

_EMPLOYEE_COLUMNS = (
    "id, first_name, last_name, birth_date, email, phone, address, photo_path, inactive, inactivity_reason"
)


def _employee(row: Dict[str, Any]) -> Employee:
    return Employee(
        employee_id=int(row["id"]),
        first_name=row["first_name"],
        last_name=row["last_name"],
        birth_date=as_date(row.get("birth_date")),
        email=row.get("email"),
        phone=row.get("phone"),
        address=row.get("address"),
        photo_path=row.get("photo_path"),
        inactive=bool(row.get("inactive")),
        inactivity_reason=row.get("inactivity_reason"),
    )


def _profession(row: Dict[str, Any]) -> Profession:
    return Profession(
        profession_id=int(row["profession_id"]),
        employee_id=int(row["employee_id"]),
        job_title=row["job_title"],
        department=row.get("department"),
        salary=as_float(row.get("salary")),
        start_date=as_date(row.get("start_date")),
        end_date=as_date(row.get("end_date")),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_EMPLOYEE_COLUMNS} FROM employees WHERE id=%s", (employee_id,))
            row = fetchone(cur)
            return _employee(row) if row else None

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(first_name, last_name, birth_date, email, phone, address, photo_path)
                VALUES(%s,%s,%s,%s,%s,%s,NULL)
                """,
                (first_name, last_name, birth_date, email, phone, address),
            )
            return int(cur.lastrowid)

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET first_name=%s, last_name=%s, birth_date=%s, email=%s, phone=%s, address=%s
                WHERE id=%s
                """,
                (first_name, last_name, birth_date, email, phone, address, employee_id),
            )
            return cur.rowcount > 0

    def set_photo_path(self, *, employee_id: int, photo_path: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE employees SET photo_path=%s WHERE id=%s", (photo_path, employee_id))
            return cur.rowcount > 0

    def mark_inactive(self, *, employee_id: int, reason: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE employees SET inactive=1, inactivity_reason=%s WHERE id=%s",
                (reason, employee_id),
            )
            return cur.rowcount > 0

    def get_current_profession(self, employee_id: int) -> Optional[Profession]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT profession_id, employee_id, job_title, department, salary, start_date, end_date
                FROM professions
                WHERE employee_id=%s
                ORDER BY profession_id DESC
                LIMIT 1
                """,
                (employee_id,),
            )
            row = fetchone(cur)
            return _profession(row) if row else None

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO professions(employee_id, job_title, department, salary, start_date, end_date)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (employee_id, job_title, department, salary, start_date, end_date),
            )
            return int(cur.lastrowid)

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE professions
                SET job_title=%s, department=%s, salary=%s, start_date=%s, end_date=%s
                WHERE profession_id=%s
                """,
                (job_title, department, salary, start_date, end_date, profession_id),
            )
            # MySQL reports 0 affected rows when nothing changed.
            return cur.rowcount >= 0

    def add_document(self, *, employee_id: int, document_type: DocumentType, file_path: str, file_name: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employee_documents(employee_id, document_type, file_path, file_name)
                VALUES(%s,%s,%s,%s)
                """,
                (employee_id, document_type.value, file_path, file_name),
            )
            return int(cur.lastrowid)

    def list_documents(self, employee_id: int) -> Sequence[EmployeeDocument]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT document_id, employee_id, document_type, file_path, file_name, uploaded_at
                FROM employee_documents
                WHERE employee_id=%s
                ORDER BY uploaded_at DESC
                """,
                (employee_id,),
            )
            return [
                EmployeeDocument(
                    document_id=int(r["document_id"]),
                    employee_id=int(r["employee_id"]),
                    document_type=DocumentType(r["document_type"]),
                    file_path=r["file_path"],
                    file_name=r["file_name"],
                    uploaded_at=r.get("uploaded_at"),
                )
                for r in fetchall(cur)
            ]

    def list_reviews(self, employee_id: int) -> Sequence[PerformanceReview]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT review_id, employee_id, review_date, reviewer, overall_rating, comments
                FROM performance_reviews
                WHERE employee_id=%s
                ORDER BY review_date DESC, created_at DESC
                """,
                (employee_id,),
            )
            reviews = fetchall(cur)
            if not reviews:
                return []

            ids = [int(r["review_id"]) for r in reviews]
            placeholders = ",".join(["%s"] * len(ids))
            cur.execute(
                f"""
                SELECT metric_id, review_id, metric_name, score
                FROM review_metrics
                WHERE review_id IN ({placeholders})
                ORDER BY metric_id ASC
                """,
                tuple(ids),
            )
            metrics_by_review: Dict[int, List[ReviewMetric]] = {}
            for m in fetchall(cur):
                metric = ReviewMetric(
                    metric_id=int(m["metric_id"]),
                    review_id=int(m["review_id"]),
                    metric_name=m["metric_name"],
                    score=as_float(m.get("score")),
                )
                metrics_by_review.setdefault(metric.review_id, []).append(metric)

            return [
                PerformanceReview(
                    review_id=int(r["review_id"]),
                    employee_id=int(r["employee_id"]),
                    review_date=as_date(r["review_date"]),
                    reviewer=r.get("reviewer"),
                    overall_rating=as_float(r.get("overall_rating")),
                    comments=r.get("comments"),
                    metrics=tuple(metrics_by_review.get(int(r["review_id"]), [])),
                )
                for r in reviews
            ]

    def list_view(
        self,
        *,
        sort_by: EmployeeSort,
        department: Optional[str],
        active: ActiveFilter,
        search: str,
    ) -> Sequence[EmployeeListRow]:
        where: list[str] = []
        params: list[Any] = []
        if department:
            where.append("p.department = %s")
            params.append(department)
        if active == ActiveFilter.ACTIVE:
            where.append("(e.inactive IS NULL OR e.inactive = 0)")
        elif active == ActiveFilter.INACTIVE:
            where.append("e.inactive = 1")
        if search:
            where.append("(e.first_name LIKE %s OR e.last_name LIKE %s)")
            params.extend([f"%{search}%", f"%{search}%"])
        where_sql = f"WHERE {' AND '.join(where)}" if where else ""

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT e.id, e.first_name, e.last_name, e.birth_date, e.email, e.phone, e.inactive,
                       p.job_title, p.department, p.salary, p.start_date, p.end_date,
                       cv.file_path AS cv_path, cv.file_name AS cv_file_name
                FROM employees e
                LEFT JOIN professions p ON p.profession_id = (
                    SELECT MAX(p2.profession_id) FROM professions p2 WHERE p2.employee_id = e.id
                )
                LEFT JOIN employee_documents cv ON cv.document_id = (
                    SELECT MAX(d.document_id) FROM employee_documents d
                    WHERE d.employee_id = e.id AND d.document_type = 'CV'
                )
                {where_sql}
                ORDER BY {_ORDER_BY[sort_by]}
                """,
                tuple(params),
            )
            return [
                EmployeeListRow(
                    employee_id=int(r["id"]),
                    first_name=r["first_name"],
                    last_name=r["last_name"],
                    birth_date=as_date(r.get("birth_date")),
                    email=r.get("email"),
                    phone=r.get("phone"),
                    inactive=bool(r.get("inactive")),
                    job_title=r.get("job_title"),
                    department=r.get("department"),
                    salary=as_float(r.get("salary")),
                    start_date=as_date(r.get("start_date")),
                    end_date=as_date(r.get("end_date")),
                    cv_path=r.get("cv_path"),
                    cv_file_name=r.get("cv_file_name"),
                )
                for r in fetchall(cur)
            ]

    def list_departments(self) -> Sequence[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT DISTINCT department
                FROM professions
                WHERE department IS NOT NULL AND department != ''
                ORDER BY department
                """
            )
            return [r["department"] for r in fetchall(cur)]

    def list_active(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_EMPLOYEE_COLUMNS}
                FROM employees
                WHERE inactive IS NULL OR inactive = 0
                ORDER BY first_name, last_name
                """
            )
            return [_employee(r) for r in fetchall(cur)]
