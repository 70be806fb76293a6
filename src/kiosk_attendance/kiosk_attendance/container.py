from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.guard import SubmissionGuard, SubmissionLatch
from .attendance.mysql_attendance_repository import MySQLEventLogRepository, MySQLMonitorRepository
from .attendance.repository import EventLogRepository, MonitorRepository
from .attendance.service import AttendanceService, MonitorService
from .cleanup.service import CleanupService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .export.service import ExportService
from .stores.mysql_store_repository import MySQLStoreRepository
from .stores.repository import StoreRepository
from .stores.service import StoreAuthService
from .sync.feed import ChangeFeed


@dataclass(frozen=True)
class Container:
    stores_repo: StoreRepository
    employees_repo: EmployeeRepository
    events_repo: EventLogRepository
    monitor_repo: MonitorRepository
    change_feed: ChangeFeed

    store_auth_service: StoreAuthService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    monitor_service: MonitorService
    export_service: ExportService
    cleanup_service: CleanupService


def assemble_container(
    *,
    stores_repo: StoreRepository,
    employees_repo: EmployeeRepository,
    events_repo: EventLogRepository,
    monitor_repo: MonitorRepository,
    change_feed: Optional[ChangeFeed] = None,
) -> Container:
    """Wire services over any repository implementation (MySQL or in-memory)."""

    feed = change_feed or ChangeFeed()

    return Container(
        stores_repo=stores_repo,
        employees_repo=employees_repo,
        events_repo=events_repo,
        monitor_repo=monitor_repo,
        change_feed=feed,
        store_auth_service=StoreAuthService(stores_repo),
        employee_service=EmployeeService(employees_repo),
        attendance_service=AttendanceService(
            events_repo,
            monitor_repo,
            employees_repo,
            feed,
            guard=SubmissionGuard(),
            latch=SubmissionLatch(),
        ),
        monitor_service=MonitorService(monitor_repo),
        export_service=ExportService(events_repo, feed),
        cleanup_service=CleanupService(events_repo, monitor_repo, feed),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return assemble_container(
        stores_repo=MySQLStoreRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        events_repo=MySQLEventLogRepository(conn),
        monitor_repo=MySQLMonitorRepository(conn),
    )
