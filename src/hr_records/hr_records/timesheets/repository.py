from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import TimesheetStatus
from .model import Timesheet, TimesheetRow


class TimesheetRepository(Protocol):
    def get_by_id(self, timesheet_id: int) -> Optional[Timesheet]:
        raise NotImplementedError

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
        raise NotImplementedError

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
        raise NotImplementedError

    def list_with_employees(self) -> Sequence[TimesheetRow]:
        raise NotImplementedError
