from __future__ import annotations

import pytest

from src.employee_portal.employee_portal.auth.holder import SessionHolder
from src.employee_portal.employee_portal.auth.model import SessionIdentity
from src.employee_portal.employee_portal.auth.storage import MappingSessionStorage
from src.employee_portal.employee_portal.core.enums import Role

ADMIN = SessionIdentity(account_id=1, email="admin@company.com", display_name="admin", role=Role.ADMIN)
EMPLOYEE = SessionIdentity(
    account_id=3, email="arjun.mehta@company.com", display_name="Arjun Mehta", role=Role.EMPLOYEE, employee_id=1
)


def _holder(backend=None):
    backend = {} if backend is None else backend
    return SessionHolder(MappingSessionStorage(backend)), backend


def test_login_persists_under_role_key():
    holder, backend = _holder()

    assert holder.login(ADMIN) is True

    assert holder.admin == ADMIN
    assert backend["admin_session"]["email"] == "admin@company.com"
    assert "employee_session" not in backend


def test_sessions_are_isolated():
    holder, backend = _holder()
    holder.login(ADMIN)
    holder.login(EMPLOYEE)

    holder.logout(Role.EMPLOYEE)

    assert holder.employee is None
    assert holder.admin == ADMIN
    assert "admin_session" in backend


def test_logout_is_idempotent():
    holder, backend = _holder()
    holder.login(ADMIN)
    holder.logout(Role.ADMIN)
    holder.logout(Role.ADMIN)
    holder.logout(Role.EMPLOYEE)

    assert holder.admin is None
    assert backend == {}


def test_restore_roundtrip_from_persisted_storage():
    first, backend = _holder()
    first.login(EMPLOYEE)

    second, _ = _holder(backend)
    assert not second.restored
    second.restore()

    assert second.restored
    assert second.employee == EMPLOYEE
    assert second.admin is None


@pytest.mark.parametrize(
    "raw",
    [
        "garbage",
        {"email": "x@company.com"},
        {"account_id": "nope", "email": "a", "display_name": "a", "role": "admin"},
        {"account_id": 1, "email": "a", "display_name": "a", "role": "superuser"},
        {"account_id": 1, "email": "a", "display_name": "a", "role": "employee"},
    ],
)
def test_restore_treats_malformed_entry_as_logged_out(raw):
    holder, backend = _holder({"admin_session": raw, "admin_session_last_activity": "2026-03-11T09:00:00"})

    holder.restore()

    assert holder.restored
    assert holder.admin is None
    assert "admin_session" not in backend
    assert "admin_session_last_activity" not in backend


def test_touch_and_last_activity(fixed_now):
    holder, backend = _holder()
    holder.touch(Role.ADMIN, fixed_now)
    assert holder.last_activity(Role.ADMIN) is None

    holder.login(ADMIN)
    holder.touch(Role.ADMIN, fixed_now)
    assert holder.last_activity(Role.ADMIN) == fixed_now

    backend["admin_session_last_activity"] = "yesterday"
    assert holder.last_activity(Role.ADMIN) is None


def test_logout_clears_activity_timestamp(fixed_now):
    holder, backend = _holder()
    holder.login(EMPLOYEE)
    holder.touch(Role.EMPLOYEE, fixed_now)

    holder.logout(Role.EMPLOYEE)

    assert "employee_session_last_activity" not in backend


def test_keys_must_be_distinct():
    with pytest.raises(ValueError):
        SessionHolder(MappingSessionStorage(), keys={Role.ADMIN: "session", Role.EMPLOYEE: "session"})


def test_identity_dict_roundtrip():
    data = EMPLOYEE.to_dict()
    assert data["role"] == "employee"
    assert SessionIdentity.from_dict(data) == EMPLOYEE
