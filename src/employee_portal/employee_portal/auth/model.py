from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping, Optional

from ..core.enums import Role


@dataclass(frozen=True)
class SessionIdentity:
    """What we store into the session after login.

    A snapshot taken at login time: later profile edits are not reflected until
    the next login.
    """

    account_id: int
    email: str
    display_name: str
    role: Role
    employee_id: Optional[int] = None

    def to_dict(self) -> dict:
        data = asdict(self)
        data["role"] = self.role.value
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SessionIdentity":
        employee_id = data.get("employee_id")
        return cls(
            account_id=int(data["account_id"]),
            email=str(data["email"]),
            display_name=str(data["display_name"]),
            role=Role(data["role"]),
            employee_id=int(employee_id) if employee_id is not None else None,
        )
