from __future__ import annotations

import pytest

from fakes import FakeAdminRepo
from src.employee_portal.employee_portal.accounts.service import AdminAuthService
from src.employee_portal.employee_portal.core.enums import Role
from src.employee_portal.employee_portal.core.exceptions import (
    AccountConflictError,
    AccountNotFoundError,
    InvalidCredentialError,
    ValidationError,
)


@pytest.fixture
def service():
    svc = AdminAuthService(FakeAdminRepo())
    svc.sign_up(email="Admin@Company.com", password="admin12345", user_name="admin")
    return svc


def test_login_by_email(service):
    identity = service.authenticate("admin@company.com", "admin12345")
    assert identity.role == Role.ADMIN
    assert identity.email == "admin@company.com"
    assert identity.display_name == "admin"
    assert identity.employee_id is None


def test_login_by_user_name(service):
    assert service.authenticate("admin", "admin12345").account_id == 1


def test_login_failures(service):
    with pytest.raises(AccountNotFoundError):
        service.authenticate("someone@company.com", "admin12345")
    with pytest.raises(InvalidCredentialError):
        service.authenticate("admin@company.com", "wrong")


def test_sign_up_duplicate_email(service):
    with pytest.raises(AccountConflictError):
        service.sign_up(email="admin@company.com", password="x", user_name="again")


def test_sign_up_rejects_invalid_email():
    with pytest.raises(ValidationError):
        AdminAuthService(FakeAdminRepo()).sign_up(email="admin@company", password="x", user_name="a")


def test_reset_password(service):
    service.reset_password(email="admin@company.com", password="newpass123", confirm_password="newpass123")
    assert service.authenticate("admin", "newpass123").account_id == 1


def test_reset_password_rules(service):
    with pytest.raises(ValidationError, match="at least 8"):
        service.reset_password(email="admin@company.com", password="short", confirm_password="short")
    with pytest.raises(ValidationError, match="do not match"):
        service.reset_password(email="admin@company.com", password="newpass123", confirm_password="newpass124")
    with pytest.raises(AccountNotFoundError):
        service.reset_password(email="ghost@company.com", password="newpass123", confirm_password="newpass123")
