from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import coerce_date
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Department, EmployeeProfile
from .repository import DepartmentRepository, EmployeeRepository

_SELECT = """
    SELECT e.employee_id, e.employee_code, e.first_name, e.last_name, e.email, e.phone,
           e.date_of_birth, e.hire_date, e.department_id, e.designation_id,
           d.department_name, g.designation_title
    FROM employees e
    LEFT JOIN departments d ON d.department_id = e.department_id
    LEFT JOIN designations g ON g.designation_id = e.designation_id
"""


def _to_profile(row: dict) -> EmployeeProfile:
    return EmployeeProfile(
        employee_id=int(row["employee_id"]),
        employee_code=row.get("employee_code") or "",
        first_name=row.get("first_name") or "",
        last_name=row.get("last_name") or "",
        email=row["email"],
        phone=row.get("phone"),
        date_of_birth=coerce_date(row.get("date_of_birth")),
        hire_date=coerce_date(row.get("hire_date")),
        department_id=row.get("department_id"),
        designation_id=row.get("designation_id"),
        department_name=row.get("department_name"),
        designation_title=row.get("designation_title"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[EmployeeProfile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE e.employee_id=%s", (int(employee_id),))
            row = fetchone(cur)
            return _to_profile(row) if row else None

    def get_by_email(self, email: str) -> Optional[EmployeeProfile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE LOWER(e.email)=%s LIMIT 1", (email.lower(),))
            row = fetchone(cur)
            return _to_profile(row) if row else None

    def list_all(self) -> Sequence[EmployeeProfile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} ORDER BY e.first_name, e.last_name")
            return [_to_profile(r) for r in fetchall(cur)]


class MySQLDepartmentRepository(DepartmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT department_id, department_name, location FROM departments ORDER BY department_name")
            rows = fetchall(cur)
            return [
                Department(
                    department_id=int(r["department_id"]),
                    department_name=r["department_name"],
                    location=r.get("location"),
                )
                for r in rows
            ]
