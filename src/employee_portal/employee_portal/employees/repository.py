from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Department, EmployeeProfile


class EmployeeRepository(Protocol):
    """Read-only access to employee profiles."""

    def get_by_id(self, employee_id: int) -> Optional[EmployeeProfile]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[EmployeeProfile]:
        raise NotImplementedError

    def list_all(self) -> Sequence[EmployeeProfile]:
        raise NotImplementedError


class DepartmentRepository(Protocol):
    def list_all(self) -> Sequence[Department]:
        raise NotImplementedError
