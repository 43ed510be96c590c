from __future__ import annotations

from typing import Iterable, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Notification
from .repository import NotificationRepository

_COLUMNS = "notification_id, title, message, target_audience, created_at, created_by"


def _to_notification(r: dict) -> Notification:
    return Notification(
        notification_id=int(r["notification_id"]),
        title=r["title"],
        message=r["message"],
        target_audience=r["target_audience"],
        created_at=r.get("created_at"),
        created_by=r.get("created_by"),
    )


class MySQLNotificationRepository(NotificationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_notification(self, *, title: str, message: str, target_audience: str, created_by: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO notifications(title, message, target_audience, created_by)
                VALUES(%s,%s,%s,%s)
                """,
                (title, message, target_audience, int(created_by)),
            )
            return int(cur.lastrowid)

    def list_for_audiences(self, audiences: Iterable[str], *, limit: int) -> Sequence[Notification]:
        targets = list(audiences)
        if not targets:
            return []
        placeholders = ",".join(["%s"] * len(targets))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM notifications
                WHERE target_audience IN ({placeholders})
                ORDER BY created_at DESC, notification_id DESC
                LIMIT %s
                """,
                tuple(targets + [int(limit)]),
            )
            return [_to_notification(r) for r in fetchall(cur)]

    def list_all(self, *, limit: int = 200) -> Sequence[Notification]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM notifications ORDER BY created_at DESC, notification_id DESC LIMIT %s",
                (int(limit),),
            )
            return [_to_notification(r) for r in fetchall(cur)]
