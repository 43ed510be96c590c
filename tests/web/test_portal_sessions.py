from __future__ import annotations

from datetime import timedelta

import pytest

from src.employee_portal.employee_portal.auth import web
from src.employee_portal.employee_portal.core.exceptions import StorageError
from src.employee_portal.employee_portal.main import create_app

ADMIN_EMAIL = "admin@company.com"
ADMIN_PASSWORD = "admin12345"
EMPLOYEE_EMAIL = "arjun.mehta@company.com"
EMPLOYEE_PASSWORD = "047#3210@1995"


class Clock:
    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock(monkeypatch, fixed_now):
    c = Clock(fixed_now)
    monkeypatch.setattr(web, "now_local", c)
    return c


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    container.admin_auth_service.sign_up(email=ADMIN_EMAIL, password=ADMIN_PASSWORD, user_name="admin")
    container.employee_auth_service.register_employee(1)
    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()


def _login_admin(client):
    return client.post("/admin/login", json={"login": ADMIN_EMAIL, "password": ADMIN_PASSWORD})


def _login_employee(client, password=EMPLOYEE_PASSWORD):
    return client.post("/employee/login", json={"email": EMPLOYEE_EMAIL, "password": password})


def test_protected_views_redirect_to_their_login(client, clock):
    admin = client.get("/admin/dashboard")
    employee = client.get("/employee/dashboard")

    assert admin.status_code == 302
    assert admin.headers["Location"].endswith("/admin/login")
    assert employee.status_code == 302
    assert employee.headers["Location"].endswith("/employee/login")


def test_admin_login_opens_dashboard(client, clock):
    resp = _login_admin(client)
    assert resp.status_code == 200
    assert resp.get_json()["user"]["role"] == "admin"

    dash = client.get("/admin/dashboard")
    assert dash.status_code == 200
    assert dash.get_json()["summary"]["employees"] == 2


def test_employee_login_with_derived_password(client, clock):
    bad = _login_employee(client, password="047#3210@1994")
    assert bad.status_code == 401
    assert bad.get_json() == {"success": False, "message": "Invalid email or password."}

    ok = _login_employee(client)
    assert ok.status_code == 200
    dash = client.get("/employee/dashboard")
    assert dash.status_code == 200
    assert dash.get_json()["summary"]["profile"]["employee_code"] == "EMP047"


def test_unknown_account_message(client, clock):
    resp = client.post("/employee/login", json={"email": "ghost@company.com", "password": "x"})
    assert resp.status_code == 401
    assert resp.get_json()["message"] == "Account not found."


def test_employee_login_conflict_with_admin_email(client, container, clock):
    container.admin_auth_service.sign_up(email=EMPLOYEE_EMAIL, password="whatever1", user_name="arjun")
    resp = _login_employee(client)
    assert resp.status_code == 409
    assert client.get("/employee/dashboard").status_code == 302


def test_idle_session_expires_and_redirects(client, clock):
    _login_employee(client)

    clock.advance(minutes=5, seconds=1)
    expired = client.get("/employee/dashboard")

    assert expired.status_code == 302
    assert expired.headers["Location"].endswith("/employee/login?expired=1")
    again = client.get("/employee/dashboard")
    assert again.status_code == 302
    assert again.headers["Location"].endswith("/employee/login")


def test_interaction_before_deadline_keeps_session(client, clock):
    _login_employee(client)

    clock.advance(minutes=4, seconds=59)
    beat = client.post("/employee/activity", json={"event": "mousemove"})
    assert beat.status_code == 200
    assert beat.get_json()["reset"] is True

    clock.advance(minutes=4, seconds=59)
    assert client.get("/employee/dashboard").status_code == 200


def test_non_interaction_heartbeat_does_not_reset(client, clock):
    _login_admin(client)

    clock.advance(minutes=3)
    beat = client.post("/admin/activity", json={"event": "visibilitychange"})
    assert beat.get_json()["reset"] is False

    clock.advance(minutes=2, seconds=1)
    assert client.get("/admin/dashboard").status_code == 302


def test_admin_and_employee_sessions_are_independent(client, clock):
    _login_admin(client)
    _login_employee(client)

    client.post("/employee/logout")

    assert client.get("/admin/dashboard").status_code == 200
    assert client.get("/employee/dashboard").status_code == 302


def test_admin_expiry_leaves_employee_logged_in(client, clock):
    _login_admin(client)
    clock.advance(minutes=3)
    _login_employee(client)

    clock.advance(minutes=2, seconds=30)
    assert client.get("/admin/dashboard").status_code == 302
    assert client.get("/employee/dashboard").status_code == 200


def test_logout_is_idempotent(client, clock):
    _login_admin(client)
    assert client.post("/admin/logout").status_code == 200
    assert client.post("/admin/logout").status_code == 200
    assert client.get("/admin/dashboard").status_code == 302


def test_guard_waits_when_session_not_restored(app):
    with app.test_request_context("/admin/dashboard"):
        body, status = app.view_functions["admin_dashboard"]()
    assert status == 204
    assert body == ""


def test_admin_registers_employee_and_gets_password_once(client, clock):
    _login_admin(client)
    resp = client.post("/admin/employees/2/register")

    assert resp.status_code == 201
    assert resp.get_json()["password"] == "12#123@0000"
    again = client.post("/admin/employees/2/register")
    assert again.status_code == 409


def test_storage_failure_is_generic_503(client, container, monkeypatch, clock):
    def broken(email):
        raise StorageError()

    monkeypatch.setattr(container.admins_repo, "get_by_email", broken)
    resp = _login_admin(client)

    assert resp.status_code == 503
    assert resp.get_json()["message"] == "Service temporarily unavailable. Please try again."


def test_unexpected_error_is_500(client, container, monkeypatch, clock):
    def boom():
        raise RuntimeError("db password is hunter2")

    _login_admin(client)
    monkeypatch.setattr(container.dashboard_service, "admin_summary", boom)
    resp = client.get("/admin/dashboard")

    assert resp.status_code == 500
    assert "hunter2" not in resp.get_data(as_text=True)
