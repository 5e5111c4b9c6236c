from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import TimesheetStatus


@dataclass(frozen=True)
class Timesheet:
    """Domain entity: one worked day reported by an employee."""

    timesheet_id: int
    employee_id: int
    work_date: date
    start_time: Optional[datetime]
    end_time: Optional[datetime]
    hours_worked: Optional[float]
    notes: Optional[str]
    status: TimesheetStatus = TimesheetStatus.SUBMITTED


@dataclass(frozen=True)
class TimesheetRow:
    """Read-model for the timesheet list (joined with the employee name)."""

    timesheet: Timesheet
    first_name: str
    last_name: str

    @property
    def employee_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
