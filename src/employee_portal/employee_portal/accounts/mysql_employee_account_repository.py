from __future__ import annotations

from typing import Optional

import mysql.connector

from ..core.enums import AccountStatus, Role
from ..core.exceptions import AccountConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, is_duplicate_key
from .model import EmployeeAccount
from .repository import EmployeeAccountRepository

_COLUMNS = "account_id, employee_id, email, password_hash, status, role, created_at"


def _to_account(row: dict) -> EmployeeAccount:
    return EmployeeAccount(
        account_id=int(row["account_id"]),
        employee_id=int(row["employee_id"]),
        email=row["email"],
        password_hash=row["password_hash"],
        status=AccountStatus(row["status"]),
        role=Role(row.get("role") or Role.EMPLOYEE.value),
        created_at=row.get("created_at"),
    )


class MySQLEmployeeAccountRepository(EmployeeAccountRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_email(self, email: str) -> Optional[EmployeeAccount]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employee_accounts WHERE email=%s LIMIT 1", (email.lower(),))
            row = fetchone(cur)
            return _to_account(row) if row else None

    def get_by_employee_id(self, employee_id: int) -> Optional[EmployeeAccount]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employee_accounts WHERE employee_id=%s", (int(employee_id),))
            row = fetchone(cur)
            return _to_account(row) if row else None

    def create_account(
        self,
        *,
        employee_id: int,
        email: str,
        password_hash: str,
        status: AccountStatus,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    """
                    INSERT INTO employee_accounts(employee_id, email, password_hash, status, role)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (int(employee_id), email.lower(), password_hash, status.value, Role.EMPLOYEE.value),
                )
            except mysql.connector.IntegrityError as exc:
                # UNIQUE(employee_id) closes the check-then-insert race.
                if is_duplicate_key(exc):
                    raise AccountConflictError("This employee is already registered.") from exc
                raise
            return int(cur.lastrowid)

    def update_password(self, *, email: str, password_hash: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE employee_accounts SET password_hash=%s WHERE email=%s",
                (password_hash, email.lower()),
            )
            return cur.rowcount > 0
