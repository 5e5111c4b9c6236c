from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional, Sequence, Union

from ..common.datetime_utils import parse_hhmm, parse_iso_date
from ..common.formatting import parse_number
from ..common.validators import require_non_empty, require_positive_id
from ..core.enums import TimesheetStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import Timesheet, TimesheetRow
from .repository import TimesheetRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimesheetInput:
    work_date: date
    start_time: Optional[datetime]
    end_time: Optional[datetime]
    hours_worked: Optional[float]
    notes: Optional[str]
    status: TimesheetStatus


class TimesheetService:
    def __init__(self, timesheets: TimesheetRepository, employees: EmployeeRepository):
        self._timesheets = timesheets
        self._employees = employees

    @staticmethod
    def _parse_time(value: Optional[str]) -> Optional[time]:
        v = (value or "").strip()
        if not v:
            return None
        try:
            return parse_hhmm(v)
        except ValueError:
            raise ValidationError("Invalid time (HH:MM)")

    @staticmethod
    def _parse_hours(value: Optional[str]) -> Optional[float]:
        v = (value or "").strip()
        if not v:
            return None
        hours = parse_number(v)
        if hours is None:
            raise ValidationError("Hours worked must be a number.")
        if hours < 0:
            raise ValidationError("Hours worked cannot be negative.")
        return hours

    @staticmethod
    def _parse_status(value: Optional[str]) -> TimesheetStatus:
        v = (value or "").strip()
        if not v:
            return TimesheetStatus.SUBMITTED
        try:
            return TimesheetStatus(v)
        except ValueError:
            raise ValidationError("Invalid timesheet status")

    def _build(
        self,
        *,
        work_date: Optional[str],
        start_time: Optional[str],
        end_time: Optional[str],
        hours_worked: Optional[str],
        notes: Optional[str],
        status: Optional[str],
    ) -> TimesheetInput:
        try:
            day = parse_iso_date(require_non_empty(work_date, "Work date"))
        except ValueError:
            raise ValidationError("Invalid work date (YYYY-MM-DD)")

        start_t = self._parse_time(start_time)
        end_t = self._parse_time(end_time)
        start_dt = datetime.combine(day, start_t) if start_t else None
        end_dt = datetime.combine(day, end_t) if end_t else None
        if start_dt and end_dt and end_dt <= start_dt:
            raise ValidationError("End time must be after start time.")

        return TimesheetInput(
            work_date=day,
            start_time=start_dt,
            end_time=end_dt,
            hours_worked=self._parse_hours(hours_worked),
            notes=(notes or "").strip() or None,
            status=self._parse_status(status),
        )

    def create_timesheet(
        self,
        *,
        employee_id: Union[int, str, None],
        work_date: Optional[str],
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
        hours_worked: Optional[str] = None,
        notes: Optional[str] = None,
        status: Optional[str] = None,
    ) -> int:
        emp_id = require_positive_id(employee_id, "Employee")
        employee = self._employees.get_by_id(emp_id)
        if not employee or employee.inactive:
            raise ValidationError("Please select an active employee")

        data = self._build(
            work_date=work_date,
            start_time=start_time,
            end_time=end_time,
            hours_worked=hours_worked,
            notes=notes,
            status=status,
        )
        timesheet_id = self._timesheets.create(
            employee_id=emp_id,
            work_date=data.work_date,
            start_time=data.start_time,
            end_time=data.end_time,
            hours_worked=data.hours_worked,
            notes=data.notes,
            status=data.status,
        )
        logger.info("Created timesheet %s for employee %s", timesheet_id, emp_id)
        return timesheet_id

    def update_timesheet(
        self,
        timesheet_id: int,
        *,
        work_date: Optional[str],
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
        hours_worked: Optional[str] = None,
        notes: Optional[str] = None,
        status: Optional[str] = None,
    ) -> None:
        current = self.get_timesheet(timesheet_id)
        data = self._build(
            work_date=work_date,
            start_time=start_time,
            end_time=end_time,
            hours_worked=hours_worked,
            notes=notes,
            status=status,
        )
        if not self._timesheets.update(
            timesheet_id=current.timesheet_id,
            work_date=data.work_date,
            start_time=data.start_time,
            end_time=data.end_time,
            hours_worked=data.hours_worked,
            notes=data.notes,
            status=data.status,
        ):
            raise ValidationError("Failed to update timesheet")

    def get_timesheet(self, timesheet_id: int) -> Timesheet:
        timesheet = self._timesheets.get_by_id(int(timesheet_id))
        if not timesheet:
            raise NotFoundError("Timesheet not found")
        return timesheet

    def list_timesheets(self) -> Sequence[TimesheetRow]:
        return self._timesheets.list_with_employees()
