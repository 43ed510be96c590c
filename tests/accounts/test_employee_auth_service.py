from __future__ import annotations

from dataclasses import replace

import pytest

from fakes import ARJUN, PRIYA, FakeAdminRepo, FakeEmployeeAccountRepo, FakeEmployeeRepo, FakeResetRepo
from src.employee_portal.employee_portal.accounts.passwords import hash_password
from src.employee_portal.employee_portal.accounts.service import EmployeeAuthService
from src.employee_portal.employee_portal.core.enums import AccountStatus, Role
from src.employee_portal.employee_portal.core.exceptions import (
    AccountConflictError,
    AccountNotFoundError,
    InactiveAccountError,
    InvalidCredentialError,
    ValidationError,
)


@pytest.fixture
def admins():
    return FakeAdminRepo()


@pytest.fixture
def accounts():
    return FakeEmployeeAccountRepo()


@pytest.fixture
def service(accounts, admins):
    return EmployeeAuthService(accounts, admins, FakeEmployeeRepo(), FakeResetRepo())


def test_register_returns_derived_password_and_stores_only_hash(service, accounts):
    result = service.register_employee(1)

    assert result.password == "047#3210@1995"
    assert result.email == "arjun.mehta@company.com"
    stored = accounts.get_by_employee_id(1)
    assert stored.status == AccountStatus.ACTIVE
    assert stored.password_hash != result.password


def test_register_then_login_end_to_end(service):
    service.register_employee(1)

    identity = service.authenticate("arjun.mehta@company.com", "047#3210@1995")

    assert identity.role == Role.EMPLOYEE
    assert identity.employee_id == 1
    assert identity.display_name == "Arjun Mehta"

    with pytest.raises(InvalidCredentialError):
        service.authenticate("arjun.mehta@company.com", "047#3210@1994")


def test_login_email_is_case_insensitive(service):
    service.register_employee(1)
    assert service.authenticate("  Arjun.Mehta@Company.com ", "047#3210@1995").employee_id == 1


def test_register_refuses_email_owned_by_admin(service, admins, accounts):
    admins.create_admin(email="arjun.mehta@company.com", user_name="arjun", password_hash="x")

    with pytest.raises(AccountConflictError):
        service.register_employee(1)
    assert accounts.get_by_employee_id(1) is None


def test_register_twice_is_a_conflict(service):
    service.register_employee(1)
    with pytest.raises(AccountConflictError):
        service.register_employee(1)


def test_conflict_from_store_unique_index_is_surfaced(admins):
    class RacingAccounts(FakeEmployeeAccountRepo):
        def get_by_employee_id(self, employee_id):
            return None

    racing = RacingAccounts()
    svc = EmployeeAuthService(racing, admins, FakeEmployeeRepo())
    svc.register_employee(1)
    with pytest.raises(AccountConflictError):
        svc.register_employee(1)


def test_self_service_register_by_email(service):
    result = service.register("priya.nair@company.com")
    assert result.password == "12#123@0000"
    assert result.employee_id == PRIYA.employee_id


def test_self_service_register_unknown_email(service):
    with pytest.raises(AccountNotFoundError, match="Email not found in employee records."):
        service.register("nobody@company.com")


def test_register_unknown_employee_id(service):
    with pytest.raises(ValidationError):
        service.register_employee(99)


def test_register_refuses_profile_email_that_cannot_log_in(accounts, admins):
    profile = replace(ARJUN, email="arjun@univ.edu")
    service = EmployeeAuthService(accounts, admins, FakeEmployeeRepo([profile]))

    with pytest.raises(ValidationError, match="valid email"):
        service.register_employee(1)
    assert accounts.get_by_employee_id(1) is None


def test_login_unknown_email(service):
    with pytest.raises(AccountNotFoundError, match="Account not found."):
        service.authenticate("nobody@company.com", "whatever")


def test_login_rejects_malformed_email(service):
    with pytest.raises(ValidationError):
        service.authenticate("not-an-email", "whatever")


def test_login_conflict_when_email_in_both_tables(service, admins):
    service.register_employee(1)
    admins.create_admin(email="arjun.mehta@company.com", user_name="arjun", password_hash="x")

    with pytest.raises(AccountConflictError):
        service.authenticate("arjun.mehta@company.com", "047#3210@1995")


def test_inactive_account_checked_after_password(accounts, admins):
    accounts.create_account(
        employee_id=1,
        email="arjun.mehta@company.com",
        password_hash=hash_password("047#3210@1995"),
        status=AccountStatus.INACTIVE,
    )
    svc = EmployeeAuthService(accounts, admins, FakeEmployeeRepo())

    with pytest.raises(InvalidCredentialError):
        svc.authenticate("arjun.mehta@company.com", "wrong")
    with pytest.raises(InactiveAccountError):
        svc.authenticate("arjun.mehta@company.com", "047#3210@1995")


def test_reset_password_overwrites_without_approval(service):
    service.register_employee(1)

    service.reset_password(email="arjun.mehta@company.com", new_password="secret1", confirm_password="secret1")

    assert service.authenticate("arjun.mehta@company.com", "secret1").employee_id == 1
    with pytest.raises(InvalidCredentialError):
        service.authenticate("arjun.mehta@company.com", "047#3210@1995")


@pytest.mark.parametrize(
    "new, confirm, message",
    [
        ("", "", "Please fill in all fields."),
        ("secret1", "secret2", "Passwords do not match"),
        ("abc", "abc", "at least 6"),
    ],
)
def test_reset_password_validation(service, new, confirm, message):
    service.register_employee(1)
    with pytest.raises(ValidationError, match=message):
        service.reset_password(email="arjun.mehta@company.com", new_password=new, confirm_password=confirm)


def test_reset_password_unknown_email(service):
    with pytest.raises(AccountNotFoundError):
        service.reset_password(email="nobody@company.com", new_password="secret1", confirm_password="secret1")
