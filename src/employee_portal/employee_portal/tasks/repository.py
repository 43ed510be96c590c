from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import TaskStatus
from .model import EmployeeTask


class TaskRepository(Protocol):
    def create_task(
        self,
        *,
        employee_id: int,
        title: str,
        description: str,
        due_date: date,
        assigned_by: int,
    ) -> int:
        raise NotImplementedError

    def get_task(self, *, task_id: int) -> Optional[EmployeeTask]:
        raise NotImplementedError

    def list_tasks(self, *, employee_id: Optional[int] = None, limit: int = 500) -> Sequence[EmployeeTask]:
        """Ordered by due date, earliest first."""

        raise NotImplementedError

    def update_status(self, *, task_id: int, status: TaskStatus) -> bool:
        raise NotImplementedError

    def update_due_date(self, *, task_id: int, due_date: date) -> bool:
        raise NotImplementedError
