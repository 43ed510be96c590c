from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AccountStatus, RequestStatus, Role


@dataclass(frozen=True)
class AdminAccount:
    """Domain entity: administrator credential record."""

    admin_id: int
    email: str
    user_name: str
    password_hash: str
    role: Role = Role.ADMIN


@dataclass(frozen=True)
class EmployeeAccount:
    """Domain entity: login registration of an existing employee profile."""

    account_id: int
    employee_id: int
    email: str
    password_hash: str
    status: AccountStatus
    role: Role = Role.EMPLOYEE
    created_at: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        return self.status == AccountStatus.ACTIVE


@dataclass(frozen=True)
class PasswordResetRequest:
    request_id: int
    employee_id: int
    email: str
    status: RequestStatus
    created_at: datetime
    decided_by: Optional[int] = None
    decided_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "request_id": self.request_id,
            "employee_id": self.employee_id,
            "email": self.email,
            "status": self.status.value,
            "created_at": self.created_at.strftime("%Y-%m-%d %H:%M") if self.created_at else None,
            "decided_at": self.decided_at.strftime("%Y-%m-%d %H:%M") if self.decided_at else None,
        }
