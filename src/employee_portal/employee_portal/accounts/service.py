from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from ..auth.model import SessionIdentity
from ..common.validators import (
    normalize_email,
    require_email,
    require_matching,
    require_min_length,
    require_non_empty,
)
from ..core.constants import ADMIN_PASSWORD_MIN_LENGTH, EMPLOYEE_PASSWORD_MIN_LENGTH
from ..core.enums import AccountStatus, RequestStatus, Role
from ..core.exceptions import (
    AccountConflictError,
    AccountNotFoundError,
    InactiveAccountError,
    InvalidCredentialError,
    ValidationError,
)
from ..employees.model import EmployeeProfile
from ..employees.repository import EmployeeRepository
from .model import PasswordResetRequest
from .passwords import derive_employee_password, hash_password, verify_password
from .repository import AdminAccountRepository, EmployeeAccountRepository, PasswordResetRepository

logger = logging.getLogger(__name__)


class AdminAuthService:
    """Use cases: admin sign-up, login and password reset."""

    def __init__(self, admins: AdminAccountRepository):
        self._admins = admins

    def sign_up(self, *, email: str, password: str, user_name: str) -> int:
        email = require_email(email)
        require_non_empty(password, "Password")
        user_name = (user_name or "").strip() or email

        if self._admins.get_by_email(email):
            raise AccountConflictError("An admin account with this email already exists.")

        admin_id = self._admins.create_admin(email=email, user_name=user_name, password_hash=hash_password(password))
        logger.info("Admin account %s created", admin_id)
        return admin_id

    def authenticate(self, login: str, password: str) -> SessionIdentity:
        """Log in with an email, or with the user name when no '@' is given."""

        login = (login or "").strip()
        if "@" in login:
            admin = self._admins.get_by_email(normalize_email(login))
        else:
            admin = self._admins.get_by_user_name(login)

        if not admin:
            raise AccountNotFoundError()
        if not verify_password(admin.password_hash, password or ""):
            raise InvalidCredentialError()

        return SessionIdentity(
            account_id=admin.admin_id,
            email=admin.email,
            display_name=admin.user_name or admin.email,
            role=Role.ADMIN,
        )

    def reset_password(self, *, email: str, password: str, confirm_password: str) -> None:
        if not password or not confirm_password:
            raise ValidationError("Please fill both fields.")
        require_min_length(password, "Password", ADMIN_PASSWORD_MIN_LENGTH)
        require_matching(password, confirm_password)

        email = normalize_email(email)
        if not email or not self._admins.get_by_email(email):
            raise AccountNotFoundError()

        if not self._admins.update_password(email=email, password_hash=hash_password(password)):
            raise AccountNotFoundError()


@dataclass(frozen=True)
class Registration:
    """Result of registering an employee. ``password`` is shown once and never stored."""

    account_id: int
    employee_id: int
    email: str
    password: str


class EmployeeAuthService:
    """Use cases: employee registration, login and password recovery."""

    def __init__(
        self,
        accounts: EmployeeAccountRepository,
        admins: AdminAccountRepository,
        employees: EmployeeRepository,
        resets: Optional[PasswordResetRepository] = None,
    ):
        self._accounts = accounts
        self._admins = admins
        self._employees = employees
        self._resets = resets

    def register(self, email: str) -> Registration:
        """Self-service registration from the login page, keyed by profile email."""

        email = require_email(email)
        if self._admins.get_by_email(email):
            raise AccountConflictError("An admin account exists with this email.")

        profile = self._employees.get_by_email(email)
        if not profile:
            raise AccountNotFoundError("Email not found in employee records.")
        return self._register(profile)

    def register_employee(self, employee_id: int) -> Registration:
        """Admin action: register an existing employee profile."""

        profile = self._employees.get_by_id(int(employee_id))
        if not profile:
            raise ValidationError("Employee does not exist")
        email = require_email(profile.email)
        if self._admins.get_by_email(email):
            raise AccountConflictError("An admin account exists with this email.")
        return self._register(profile)

    def _register(self, profile: EmployeeProfile) -> Registration:
        email = normalize_email(profile.email)
        if self._accounts.get_by_employee_id(profile.employee_id):
            raise AccountConflictError("This employee is already registered.")

        password = derive_employee_password(profile.employee_code, profile.phone, profile.date_of_birth)
        account_id = self._accounts.create_account(
            employee_id=profile.employee_id,
            email=email,
            password_hash=hash_password(password),
            status=AccountStatus.ACTIVE,
        )
        logger.info("Employee %s registered as account %s", profile.employee_id, account_id)
        return Registration(account_id=account_id, employee_id=profile.employee_id, email=email, password=password)

    def authenticate(self, email: str, password: str) -> SessionIdentity:
        email = require_email(email)

        account = self._accounts.get_by_email(email)
        if account and self._admins.get_by_email(email):
            raise AccountConflictError("An admin account exists with this email.")
        if not account:
            raise AccountNotFoundError()
        if not verify_password(account.password_hash, password or ""):
            raise InvalidCredentialError()
        if not account.is_active:
            raise InactiveAccountError()

        profile = self._employees.get_by_id(account.employee_id)
        display_name = profile.full_name if profile else account.email.split("@")[0]
        return SessionIdentity(
            account_id=account.account_id,
            email=account.email,
            display_name=display_name,
            role=Role.EMPLOYEE,
            employee_id=account.employee_id,
        )

    def reset_password(self, *, email: str, new_password: str, confirm_password: str) -> None:
        """Overwrite the password directly; no approval is required."""

        if not email or not new_password or not confirm_password:
            raise ValidationError("Please fill in all fields.")
        require_matching(new_password, confirm_password)
        require_min_length(new_password, "Password", EMPLOYEE_PASSWORD_MIN_LENGTH)

        email = normalize_email(email)
        if not self._accounts.get_by_email(email):
            raise AccountNotFoundError("Email not found in employee records.")
        if not self._accounts.update_password(email=email, password_hash=hash_password(new_password)):
            raise AccountNotFoundError("Email not found in employee records.")

    def request_password_reset(self, email: str) -> int:
        resets = self._require_resets()
        email = normalize_email(email)
        account = self._accounts.get_by_email(email) if email else None
        if not account:
            raise AccountNotFoundError()
        return resets.create_request(employee_id=account.employee_id, email=account.email)

    def get_reset_request(self, *, request_id: int, email: Optional[str] = None) -> PasswordResetRequest:
        req = self._require_resets().get_request(request_id=int(request_id))
        if not req or (email is not None and req.email != normalize_email(email)):
            raise ValidationError("Request does not exist")
        return req

    def list_reset_requests(self, *, status: Optional[RequestStatus] = None) -> Sequence[PasswordResetRequest]:
        return self._require_resets().list_requests(status=status)

    def approve_reset_request(self, *, request_id: int, admin_id: int) -> None:
        self._decide_reset(request_id=request_id, admin_id=admin_id, status=RequestStatus.APPROVED)

    def reject_reset_request(self, *, request_id: int, admin_id: int) -> None:
        self._decide_reset(request_id=request_id, admin_id=admin_id, status=RequestStatus.REJECTED)

    def _decide_reset(self, *, request_id: int, admin_id: int, status: RequestStatus) -> None:
        resets = self._require_resets()
        req = resets.get_request(request_id=int(request_id))
        if not req:
            raise ValidationError("Request does not exist")
        if req.status != RequestStatus.PENDING:
            raise ValidationError("Request has already been processed")
        if not resets.decide_request(request_id=int(request_id), status=status, decided_by=int(admin_id)):
            raise ValidationError("Request has already been processed")

    def _require_resets(self) -> PasswordResetRepository:
        if self._resets is None:
            raise RuntimeError("Password reset repository is not configured")
        return self._resets
