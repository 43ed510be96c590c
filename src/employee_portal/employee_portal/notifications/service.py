from __future__ import annotations

from typing import Sequence

from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_NOTIFICATION_LIMIT, NOTIFICATION_AUDIENCE_ALL
from ..core.exceptions import ValidationError
from ..employees.repository import DepartmentRepository, EmployeeRepository
from .model import Notification
from .repository import NotificationRepository


class NotificationService:
    def __init__(
        self,
        notifications: NotificationRepository,
        departments: DepartmentRepository,
        employees: EmployeeRepository,
    ):
        self._notifications = notifications
        self._departments = departments
        self._employees = employees

    def send(self, *, admin_id: int, title: str, message: str, target_audience: str) -> int:
        title = require_non_empty(title, "Title")
        message = require_non_empty(message, "Message")
        target = (target_audience or "").strip() or NOTIFICATION_AUDIENCE_ALL

        if target != NOTIFICATION_AUDIENCE_ALL:
            names = {d.department_name for d in self._departments.list_all()}
            if target not in names:
                raise ValidationError("Unknown department")

        return self._notifications.create_notification(
            title=title,
            message=message,
            target_audience=target,
            created_by=int(admin_id),
        )

    def list_all(self) -> Sequence[Notification]:
        return self._notifications.list_all()

    def list_for_employee(self, employee_id: int, *, limit: int = DEFAULT_NOTIFICATION_LIMIT) -> Sequence[Notification]:
        """Latest notifications addressed to everyone or to the employee's department."""

        audiences = [NOTIFICATION_AUDIENCE_ALL]
        profile = self._employees.get_by_id(int(employee_id))
        if profile and profile.department_name:
            audiences.append(profile.department_name)
        return self._notifications.list_for_audiences(audiences, limit=int(limit))
