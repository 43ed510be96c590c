from __future__ import annotations

from datetime import date

from ..accounts.repository import PasswordResetRepository
from ..attendance.service import AttendanceService
from ..core.enums import RequestStatus, TaskStatus
from ..employees.repository import EmployeeRepository
from ..leaves.service import LeaveService
from ..notifications.service import NotificationService
from ..tasks.service import TaskService


class DashboardService:
    """Read-only summaries for the two portal home pages."""

    def __init__(
        self,
        employees: EmployeeRepository,
        resets: PasswordResetRepository,
        *,
        leave_service: LeaveService,
        task_service: TaskService,
        attendance_service: AttendanceService,
        notification_service: NotificationService,
    ):
        self._employees = employees
        self._resets = resets
        self._leaves = leave_service
        self._tasks = task_service
        self._attendance = attendance_service
        self._notifications = notification_service

    def admin_summary(self) -> dict:
        tasks = self._tasks.list_all()
        return {
            "employees": len(self._employees.list_all()),
            "pending_leaves": len(self._leaves.list_all(status=RequestStatus.PENDING)),
            "pending_password_resets": len(self._resets.list_requests(status=RequestStatus.PENDING)),
            "open_tasks": sum(1 for t in tasks if t.status != TaskStatus.COMPLETED),
        }

    def employee_summary(self, employee_id: int, *, today: date) -> dict:
        profile = self._employees.get_by_id(int(employee_id))
        record = self._attendance.get_today_record(int(employee_id), today)
        tasks = self._tasks.list_for_employee(int(employee_id))
        return {
            "profile": {
                "employee_id": profile.employee_id,
                "employee_code": profile.employee_code,
                "full_name": profile.full_name,
                "email": profile.email,
                "department": profile.department_name,
                "designation": profile.designation_title,
            }
            if profile
            else None,
            "today_attendance": record.to_dict() if record else None,
            "on_leave": self._leaves.is_on_leave(int(employee_id), today),
            "tasks": self._tasks.summarize(tasks, today=today),
            "notifications": [n.to_dict() for n in self._notifications.list_for_employee(int(employee_id))],
        }
