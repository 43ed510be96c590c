from __future__ import annotations

from typing import Optional

import mysql.connector

from ..core.enums import Role
from ..core.exceptions import AccountConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, is_duplicate_key
from .model import AdminAccount
from .repository import AdminAccountRepository


def _to_admin(row: dict) -> AdminAccount:
    return AdminAccount(
        admin_id=int(row["admin_id"]),
        email=row["email"],
        user_name=row["user_name"],
        password_hash=row["password_hash"],
        role=Role(row.get("role") or Role.ADMIN.value),
    )


class MySQLAdminAccountRepository(AdminAccountRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_email(self, email: str) -> Optional[AdminAccount]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT admin_id, email, user_name, password_hash, role
                FROM admins
                WHERE email=%s
                LIMIT 1
                """,
                (email.lower(),),
            )
            row = fetchone(cur)
            return _to_admin(row) if row else None

    def get_by_user_name(self, user_name: str) -> Optional[AdminAccount]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT admin_id, email, user_name, password_hash, role
                FROM admins
                WHERE user_name=%s
                LIMIT 1
                """,
                (user_name,),
            )
            row = fetchone(cur)
            return _to_admin(row) if row else None

    def create_admin(self, *, email: str, user_name: str, password_hash: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    """
                    INSERT INTO admins(email, user_name, password_hash, role)
                    VALUES(%s,%s,%s,%s)
                    """,
                    (email.lower(), user_name, password_hash, Role.ADMIN.value),
                )
            except mysql.connector.IntegrityError as exc:
                if is_duplicate_key(exc):
                    raise AccountConflictError("An admin account with this email already exists.") from exc
                raise
            return int(cur.lastrowid)

    def update_password(self, *, email: str, password_hash: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE admins SET password_hash=%s WHERE email=%s", (password_hash, email.lower()))
            return cur.rowcount > 0
