from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Optional, Sequence

from ..core.enums import TimesheetStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date, as_float, db_cursor, fetchall, fetchone
from .model import Timesheet, TimesheetRow
from .repository import TimesheetRepository


def _timesheet(row: Dict[str, Any]) -> Timesheet:
    return Timesheet(
        timesheet_id=int(row["id"]),
        employee_id=int(row["employee_id"]),
        work_date=as_date(row["work_date"]),
        start_time=row.get("start_time"),
        end_time=row.get("end_time"),
        hours_worked=as_float(row.get("hours_worked")),
        notes=row.get("notes"),
        status=TimesheetStatus(row.get("status") or TimesheetStatus.SUBMITTED.value),
    )


class MySQLTimesheetRepository(TimesheetRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, timesheet_id: int) -> Optional[Timesheet]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, employee_id, work_date, start_time, end_time, hours_worked, notes, status
                FROM timesheets
                WHERE id=%s
                """,
                (timesheet_id,),
            )
            row = fetchone(cur)
            return _timesheet(row) if row else None

    def create(
        self,
        *,
        employee_id: int,
        work_date: date,
        start_time: Optional[datetime],
        end_time: Optional[datetime],
        hours_worked: Optional[float],
        notes: Optional[str],
        status: TimesheetStatus,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO timesheets(employee_id, work_date, start_time, end_time, hours_worked, notes, status)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (employee_id, work_date, start_time, end_time, hours_worked, notes, status.value),
            )
            return int(cur.lastrowid)

    def update(
        self,
        *,
        timesheet_id: int,
        work_date: date,
        start_time: Optional[datetime],
        end_time: Optional[datetime],
        hours_worked: Optional[float],
        notes: Optional[str],
        status: TimesheetStatus,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE timesheets
                SET work_date=%s, start_time=%s, end_time=%s, hours_worked=%s, notes=%s, status=%s
                WHERE id=%s
                """,
                (work_date, start_time, end_time, hours_worked, notes, status.value, timesheet_id),
            )
            return cur.rowcount >= 0

    def list_with_employees(self) -> Sequence[TimesheetRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT t.id, t.employee_id, t.work_date, t.start_time, t.end_time,
                       t.hours_worked, t.notes, t.status,
                       e.first_name, e.last_name
                FROM timesheets t
                JOIN employees e ON e.id = t.employee_id
                ORDER BY t.start_time DESC
                """
            )
            return [
                TimesheetRow(timesheet=_timesheet(r), first_name=r["first_name"], last_name=r["last_name"])
                for r in fetchall(cur)
            ]
