from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .common.formatting import Number
from .core.constants import MINIMUM_WAGE
from .database.connection import DatabaseConnection, DBConfig
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .storage.local_store import LocalFileStorage
from .timesheets.mysql_timesheet_repository import MySQLTimesheetRepository
from .timesheets.repository import TimesheetRepository
from .timesheets.service import TimesheetService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository
    timesheets_repo: TimesheetRepository
    file_store: LocalFileStorage

    employee_service: EmployeeService
    timesheet_service: TimesheetService


def wire(
    *,
    employees_repo: EmployeeRepository,
    timesheets_repo: TimesheetRepository,
    file_store: LocalFileStorage,
    minimum_wage: Number = MINIMUM_WAGE,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    return Container(
        conn=conn,
        employees_repo=employees_repo,
        timesheets_repo=timesheets_repo,
        file_store=file_store,
        employee_service=EmployeeService(employees_repo, file_store, minimum_wage=minimum_wage),
        timesheet_service=TimesheetService(timesheets_repo, employees_repo),
    )


def build_container(*, db_config: dict, upload_root: str | Path, minimum_wage: Number = MINIMUM_WAGE) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))
    file_store = LocalFileStorage(upload_root)
    file_store.ensure_dirs()

    return wire(
        employees_repo=MySQLEmployeeRepository(conn),
        timesheets_repo=MySQLTimesheetRepository(conn),
        file_store=file_store,
        minimum_wage=minimum_wage,
        conn=conn,
    )
