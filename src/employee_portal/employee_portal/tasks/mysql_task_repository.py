from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import TaskStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import EmployeeTask
from .repository import TaskRepository

_SELECT = """
    SELECT t.task_id, t.employee_id, t.title, t.description, t.due_date, t.status,
           t.assigned_by, t.created_at,
           CONCAT(e.first_name, ' ', e.last_name) AS employee_name
    FROM employee_tasks t
    JOIN employees e ON e.employee_id = t.employee_id
"""


def _to_task(r: dict) -> EmployeeTask:
    return EmployeeTask(
        task_id=int(r["task_id"]),
        employee_id=int(r["employee_id"]),
        title=r["title"],
        description=r.get("description") or "",
        due_date=r["due_date"],
        status=TaskStatus(r["status"]),
        assigned_by=r.get("assigned_by"),
        created_at=r.get("created_at"),
        employee_name=(r.get("employee_name") or "").strip() or None,
    )


class MySQLTaskRepository(TaskRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_task(
        self,
        *,
        employee_id: int,
        title: str,
        description: str,
        due_date: date,
        assigned_by: int,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employee_tasks(employee_id, title, description, due_date, status, assigned_by)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (int(employee_id), title, description, due_date, TaskStatus.PENDING.value, int(assigned_by)),
            )
            return int(cur.lastrowid)

    def get_task(self, *, task_id: int) -> Optional[EmployeeTask]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE t.task_id=%s", (int(task_id),))
            r = fetchone(cur)
            return _to_task(r) if r else None

    def list_tasks(self, *, employee_id: Optional[int] = None, limit: int = 500) -> Sequence[EmployeeTask]:
        where = "WHERE t.employee_id=%s" if employee_id is not None else ""
        params: list[object] = [int(employee_id)] if employee_id is not None else []
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"{_SELECT} {where} ORDER BY t.due_date ASC, t.task_id ASC LIMIT %s",
                tuple(params + [int(limit)]),
            )
            return [_to_task(r) for r in fetchall(cur)]

    def update_status(self, *, task_id: int, status: TaskStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE employee_tasks SET status=%s WHERE task_id=%s", (status.value, int(task_id)))
            return cur.rowcount > 0

    def update_due_date(self, *, task_id: int, due_date: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE employee_tasks SET due_date=%s WHERE task_id=%s", (due_date, int(task_id)))
            return cur.rowcount > 0
