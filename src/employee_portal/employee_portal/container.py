from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .accounts.mysql_admin_repository import MySQLAdminAccountRepository
from .accounts.mysql_employee_account_repository import MySQLEmployeeAccountRepository
from .accounts.mysql_reset_repository import MySQLPasswordResetRepository
from .accounts.repository import AdminAccountRepository, EmployeeAccountRepository, PasswordResetRepository
from .accounts.service import AdminAuthService, EmployeeAuthService
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .dashboard.service import DashboardService
from .database.connection import DatabaseConnection
from .documents.mysql_document_repository import MySQLDocumentRepository
from .documents.repository import DocumentRepository
from .documents.service import DocumentService
from .employees.mysql_employee_repository import MySQLDepartmentRepository, MySQLEmployeeRepository
from .employees.repository import DepartmentRepository, EmployeeRepository
from .leaves.mysql_leave_repository import MySQLLeaveRepository
from .leaves.repository import LeaveRepository
from .leaves.service import LeaveService
from .notifications.mysql_notification_repository import MySQLNotificationRepository
from .notifications.repository import NotificationRepository
from .notifications.service import NotificationService
from .tasks.mysql_task_repository import MySQLTaskRepository
from .tasks.repository import TaskRepository
from .tasks.service import TaskService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    admins_repo: AdminAccountRepository
    accounts_repo: EmployeeAccountRepository
    resets_repo: PasswordResetRepository
    employees_repo: EmployeeRepository
    departments_repo: DepartmentRepository
    leaves_repo: LeaveRepository
    tasks_repo: TaskRepository
    attendance_repo: AttendanceRepository
    documents_repo: DocumentRepository
    notifications_repo: NotificationRepository

    admin_auth_service: AdminAuthService
    employee_auth_service: EmployeeAuthService
    leave_service: LeaveService
    task_service: TaskService
    attendance_service: AttendanceService
    document_service: DocumentService
    notification_service: NotificationService
    dashboard_service: DashboardService


def wire_container(
    *,
    conn: Optional[DatabaseConnection],
    admins_repo: AdminAccountRepository,
    accounts_repo: EmployeeAccountRepository,
    resets_repo: PasswordResetRepository,
    employees_repo: EmployeeRepository,
    departments_repo: DepartmentRepository,
    leaves_repo: LeaveRepository,
    tasks_repo: TaskRepository,
    attendance_repo: AttendanceRepository,
    documents_repo: DocumentRepository,
    notifications_repo: NotificationRepository,
    upload_folder: str | Path,
) -> Container:
    """Build services on top of the given repositories."""

    admin_auth_service = AdminAuthService(admins_repo)
    employee_auth_service = EmployeeAuthService(accounts_repo, admins_repo, employees_repo, resets_repo)
    leave_service = LeaveService(leaves_repo)
    task_service = TaskService(tasks_repo, employees_repo)
    attendance_service = AttendanceService(attendance_repo, leaves_repo)
    document_service = DocumentService(documents_repo, employees_repo, upload_folder=upload_folder)
    notification_service = NotificationService(notifications_repo, departments_repo, employees_repo)
    dashboard_service = DashboardService(
        employees_repo,
        resets_repo,
        leave_service=leave_service,
        task_service=task_service,
        attendance_service=attendance_service,
        notification_service=notification_service,
    )

    return Container(
        conn=conn,
        admins_repo=admins_repo,
        accounts_repo=accounts_repo,
        resets_repo=resets_repo,
        employees_repo=employees_repo,
        departments_repo=departments_repo,
        leaves_repo=leaves_repo,
        tasks_repo=tasks_repo,
        attendance_repo=attendance_repo,
        documents_repo=documents_repo,
        notifications_repo=notifications_repo,
        admin_auth_service=admin_auth_service,
        employee_auth_service=employee_auth_service,
        leave_service=leave_service,
        task_service=task_service,
        attendance_service=attendance_service,
        document_service=document_service,
        notification_service=notification_service,
        dashboard_service=dashboard_service,
    )


def build_container(*, db_config: dict, upload_folder: str | Path) -> Container:
    conn = DatabaseConnection.from_settings(db_config)
    return wire_container(
        conn=conn,
        admins_repo=MySQLAdminAccountRepository(conn),
        accounts_repo=MySQLEmployeeAccountRepository(conn),
        resets_repo=MySQLPasswordResetRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        departments_repo=MySQLDepartmentRepository(conn),
        leaves_repo=MySQLLeaveRepository(conn),
        tasks_repo=MySQLTaskRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        documents_repo=MySQLDocumentRepository(conn),
        notifications_repo=MySQLNotificationRepository(conn),
        upload_folder=upload_folder,
    )
