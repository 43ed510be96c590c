from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import AccountStatus, RequestStatus
from .model import AdminAccount, EmployeeAccount, PasswordResetRequest


class AdminAccountRepository(Protocol):
    """Repository interface for administrator accounts.

    Note (DIP): services depend on this interface, not on a concrete DB.
    Emails are stored and looked up lowercased.
    """

    def get_by_email(self, email: str) -> Optional[AdminAccount]:
        raise NotImplementedError

    def get_by_user_name(self, user_name: str) -> Optional[AdminAccount]:
        raise NotImplementedError

    def create_admin(self, *, email: str, user_name: str, password_hash: str) -> int:
        """Insert a new admin. Raises AccountConflictError on duplicate email."""

        raise NotImplementedError

    def update_password(self, *, email: str, password_hash: str) -> bool:
        raise NotImplementedError


class EmployeeAccountRepository(Protocol):
    def get_by_email(self, email: str) -> Optional[EmployeeAccount]:
        raise NotImplementedError

    def get_by_employee_id(self, employee_id: int) -> Optional[EmployeeAccount]:
        raise NotImplementedError

    def create_account(
        self,
        *,
        employee_id: int,
        email: str,
        password_hash: str,
        status: AccountStatus,
    ) -> int:
        """Insert a registration. Raises AccountConflictError if the employee already has one."""

        raise NotImplementedError

    def update_password(self, *, email: str, password_hash: str) -> bool:
        raise NotImplementedError


class PasswordResetRepository(Protocol):
    def create_request(self, *, employee_id: int, email: str) -> int:
        raise NotImplementedError

    def get_request(self, *, request_id: int) -> Optional[PasswordResetRequest]:
        raise NotImplementedError

    def list_requests(self, *, status: Optional[RequestStatus] = None, limit: int = 200) -> Sequence[PasswordResetRequest]:
        raise NotImplementedError

    def decide_request(self, *, request_id: int, status: RequestStatus, decided_by: int) -> bool:
        """Move a pending request to a final status. Returns False if it was not pending."""

        raise NotImplementedError
