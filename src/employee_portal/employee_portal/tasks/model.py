from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import TaskStatus


@dataclass(frozen=True)
class EmployeeTask:
    task_id: int
    employee_id: int
    title: str
    description: str
    due_date: date
    status: TaskStatus
    assigned_by: Optional[int] = None
    created_at: Optional[datetime] = None
    employee_name: Optional[str] = None

    def is_overdue(self, today: date) -> bool:
        return self.status != TaskStatus.COMPLETED and today > self.due_date

    def to_dict(self, *, today: date) -> dict:
        return {
            "task_id": self.task_id,
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "title": self.title,
            "description": self.description,
            "due_date": self.due_date.strftime("%Y-%m-%d"),
            "status": self.status.value,
            "is_overdue": self.is_overdue(today),
        }
