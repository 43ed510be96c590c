from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class EmployeeProfile:
    """Domain entity: HR record of an employee.

    Owned by the HR data entry side; this application only reads it. The code,
    phone and birth date feed the employee password rule.
    """

    employee_id: int
    employee_code: str
    first_name: str
    last_name: str
    email: str
    phone: Optional[str]
    date_of_birth: Optional[date]
    hire_date: Optional[date] = None
    department_id: Optional[int] = None
    designation_id: Optional[int] = None
    department_name: Optional[str] = None
    designation_title: Optional[str] = None

    @property
    def full_name(self) -> str:
        name = f"{self.first_name or ''} {self.last_name or ''}".strip()
        if name:
            return name
        return (self.email or "").split("@")[0] or "Unknown"


@dataclass(frozen=True)
class Department:
    department_id: int
    department_name: str
    location: Optional[str] = None
