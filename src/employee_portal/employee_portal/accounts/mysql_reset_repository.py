from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import RequestStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import PasswordResetRequest
from .repository import PasswordResetRepository

_COLUMNS = "request_id, employee_id, email, status, created_at, decided_by, decided_at"


def _to_request(row: dict) -> PasswordResetRequest:
    return PasswordResetRequest(
        request_id=int(row["request_id"]),
        employee_id=int(row["employee_id"]),
        email=row["email"],
        status=RequestStatus(row["status"]),
        created_at=row["created_at"],
        decided_by=row.get("decided_by"),
        decided_at=row.get("decided_at"),
    )


class MySQLPasswordResetRepository(PasswordResetRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_request(self, *, employee_id: int, email: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO password_resets(employee_id, email, status)
                VALUES(%s,%s,%s)
                """,
                (int(employee_id), email.lower(), RequestStatus.PENDING.value),
            )
            return int(cur.lastrowid)

    def get_request(self, *, request_id: int) -> Optional[PasswordResetRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM password_resets WHERE request_id=%s", (int(request_id),))
            row = fetchone(cur)
            return _to_request(row) if row else None

    def list_requests(self, *, status: Optional[RequestStatus] = None, limit: int = 200) -> Sequence[PasswordResetRequest]:
        clauses = []
        params: list[object] = []
        if status is not None:
            clauses.append("status=%s")
            params.append(status.value)
        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
        params.append(int(limit))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM password_resets
                {where}
                ORDER BY (status='Pending') DESC, created_at DESC
                LIMIT %s
                """,
                tuple(params),
            )
            return [_to_request(r) for r in fetchall(cur)]

    def decide_request(self, *, request_id: int, status: RequestStatus, decided_by: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE password_resets
                SET status=%s, decided_by=%s, decided_at=NOW()
                WHERE request_id=%s AND status=%s
                """,
                (status.value, int(decided_by), int(request_id), RequestStatus.PENDING.value),
            )
            return cur.rowcount > 0
