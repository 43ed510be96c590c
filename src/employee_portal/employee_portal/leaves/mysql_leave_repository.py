from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import RequestStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import LeaveRequest
from .repository import LeaveRepository

_SELECT = """
    SELECT l.leave_id, l.employee_id, l.leave_type, l.start_date, l.end_date, l.reason,
           l.no_of_leaves, l.status, l.created_at, l.decided_by, l.decided_at, l.rejection_reason,
           CONCAT(e.first_name, ' ', e.last_name) AS employee_name
    FROM leave_requests l
    JOIN employees e ON e.employee_id = l.employee_id
"""


def _to_leave(r: dict) -> LeaveRequest:
    return LeaveRequest(
        leave_id=int(r["leave_id"]),
        employee_id=int(r["employee_id"]),
        leave_type=r["leave_type"],
        start_date=r["start_date"],
        end_date=r["end_date"],
        reason=r.get("reason") or "",
        no_of_leaves=int(r.get("no_of_leaves") or 0),
        status=RequestStatus(r["status"]),
        created_at=r.get("created_at"),
        decided_by=r.get("decided_by"),
        decided_at=r.get("decided_at"),
        rejection_reason=r.get("rejection_reason"),
        employee_name=(r.get("employee_name") or "").strip() or None,
    )


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_leave(
        self,
        *,
        employee_id: int,
        leave_type: str,
        start_date: date,
        end_date: date,
        reason: str,
        no_of_leaves: int,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO leave_requests(employee_id, leave_type, start_date, end_date, reason, no_of_leaves, status)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    int(employee_id),
                    leave_type,
                    start_date,
                    end_date,
                    reason,
                    int(no_of_leaves),
                    RequestStatus.PENDING.value,
                ),
            )
            return int(cur.lastrowid)

    def get_leave(self, *, leave_id: int) -> Optional[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE l.leave_id=%s", (int(leave_id),))
            r = fetchone(cur)
            return _to_leave(r) if r else None

    def list_leaves(
        self,
        *,
        status: Optional[RequestStatus] = None,
        employee_id: Optional[int] = None,
        limit: int = 200,
    ) -> Sequence[LeaveRequest]:
        clauses = ["1=1"]
        params: list[object] = []

        if status is not None:
            clauses.append("l.status=%s")
            params.append(status.value)
        if employee_id is not None:
            clauses.append("l.employee_id=%s")
            params.append(int(employee_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"{_SELECT} WHERE {where} ORDER BY l.created_at DESC LIMIT %s",
                tuple(params + [int(limit)]),
            )
            return [_to_leave(r) for r in fetchall(cur)]

    def delete_pending(self, *, leave_id: int, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM leave_requests WHERE leave_id=%s AND employee_id=%s AND status=%s",
                (int(leave_id), int(employee_id), RequestStatus.PENDING.value),
            )
            return cur.rowcount > 0

    def decide_leave(
        self,
        *,
        leave_id: int,
        status: RequestStatus,
        decided_by: int,
        rejection_reason: Optional[str] = None,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE leave_requests
                SET status=%s, decided_by=%s, decided_at=NOW(), rejection_reason=%s
                WHERE leave_id=%s AND status=%s
                """,
                (
                    status.value,
                    int(decided_by),
                    rejection_reason,
                    int(leave_id),
                    RequestStatus.PENDING.value,
                ),
            )
            return cur.rowcount > 0

    def approved_for_day(self, *, employee_id: int, day: date) -> Optional[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                {_SELECT}
                WHERE l.employee_id=%s AND l.status=%s AND l.start_date<=%s AND l.end_date>=%s
                LIMIT 1
                """,
                (int(employee_id), RequestStatus.APPROVED.value, day, day),
            )
            r = fetchone(cur)
            return _to_leave(r) if r else None
