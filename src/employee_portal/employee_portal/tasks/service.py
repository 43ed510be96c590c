from __future__ import annotations

from collections import Counter
from datetime import date
from typing import Optional, Sequence

from ..common.validators import require_non_empty
from ..core.enums import TaskStatus
from ..core.exceptions import AuthorizationError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import EmployeeTask
from .repository import TaskRepository


class TaskService:
    def __init__(self, tasks: TaskRepository, employees: EmployeeRepository):
        self._tasks = tasks
        self._employees = employees

    def assign(
        self,
        *,
        admin_id: int,
        employee_id: int,
        title: str,
        description: str,
        due_date: Optional[date],
    ) -> int:
        title = require_non_empty(title, "Title")
        if due_date is None:
            raise ValidationError("Due date is required")
        if not self._employees.get_by_id(int(employee_id)):
            raise ValidationError("Employee does not exist")

        return self._tasks.create_task(
            employee_id=int(employee_id),
            title=title,
            description=(description or "").strip(),
            due_date=due_date,
            assigned_by=int(admin_id),
        )

    def list_for_employee(self, employee_id: int) -> Sequence[EmployeeTask]:
        return self._tasks.list_tasks(employee_id=int(employee_id))

    def list_all(self) -> Sequence[EmployeeTask]:
        return self._tasks.list_tasks()

    @staticmethod
    def summarize(tasks: Sequence[EmployeeTask], *, today: date) -> dict:
        counts = Counter(t.status for t in tasks)
        return {
            "total": len(tasks),
            "pending": counts.get(TaskStatus.PENDING, 0),
            "in_progress": counts.get(TaskStatus.IN_PROGRESS, 0),
            "completed": counts.get(TaskStatus.COMPLETED, 0),
            "overdue": sum(1 for t in tasks if t.is_overdue(today)),
        }

    def update_status(self, *, employee_id: int, task_id: int, status: str) -> None:
        try:
            new_status = TaskStatus(status)
        except ValueError:
            raise ValidationError("Invalid task status")

        task = self._tasks.get_task(task_id=int(task_id))
        if not task:
            raise ValidationError("Task does not exist")
        if task.employee_id != int(employee_id):
            raise AuthorizationError()
        self._tasks.update_status(task_id=int(task_id), status=new_status)

    def change_due_date(self, *, task_id: int, due_date: Optional[date]) -> None:
        if due_date is None:
            raise ValidationError("Due date is required")
        if not self._tasks.get_task(task_id=int(task_id)):
            raise ValidationError("Task does not exist")
        self._tasks.update_due_date(task_id=int(task_id), due_date=due_date)
