from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Uploader
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import EmployeeDocument
from .repository import DocumentRepository

_COLUMNS = "document_id, employee_id, category, file_name, stored_name, uploaded_by, uploaded_at"


def _to_document(r: dict) -> EmployeeDocument:
    return EmployeeDocument(
        document_id=int(r["document_id"]),
        employee_id=int(r["employee_id"]),
        category=r["category"],
        file_name=r["file_name"],
        stored_name=r["stored_name"],
        uploaded_by=Uploader(r["uploaded_by"]),
        uploaded_at=r.get("uploaded_at"),
    )


class MySQLDocumentRepository(DocumentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_document(
        self,
        *,
        employee_id: int,
        category: str,
        file_name: str,
        stored_name: str,
        uploaded_by: Uploader,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO documents(employee_id, category, file_name, stored_name, uploaded_by)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (int(employee_id), category, file_name, stored_name, uploaded_by.value),
            )
            return int(cur.lastrowid)

    def get_document(self, *, document_id: int) -> Optional[EmployeeDocument]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM documents WHERE document_id=%s", (int(document_id),))
            r = fetchone(cur)
            return _to_document(r) if r else None

    def list_for_employee(self, employee_id: int) -> Sequence[EmployeeDocument]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM documents WHERE employee_id=%s ORDER BY uploaded_at DESC",
                (int(employee_id),),
            )
            return [_to_document(r) for r in fetchall(cur)]

    def delete_document(self, *, document_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM documents WHERE document_id=%s", (int(document_id),))
            return cur.rowcount > 0
