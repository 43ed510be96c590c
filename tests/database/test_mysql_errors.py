from __future__ import annotations

from datetime import date, datetime

import mysql.connector
import pytest

from src.employee_portal.employee_portal.accounts.mysql_employee_account_repository import (
    MySQLEmployeeAccountRepository,
)
from src.employee_portal.employee_portal.attendance.mysql_attendance_repository import MySQLAttendanceRepository
from src.employee_portal.employee_portal.core.enums import AccountStatus, AttendanceStatus
from src.employee_portal.employee_portal.core.exceptions import AccountConflictError, StorageError, ValidationError
from src.employee_portal.employee_portal.database.connection import DatabaseConnection


class FakeCursor:
    def __init__(self, error=None):
        self.error = error
        self.closed = False
        self.lastrowid = 7
        self.rowcount = 0
        self.executed = []

    def execute(self, sql, params=None):
        self.executed.append((sql, params))
        if self.error:
            raise self.error

    def fetchone(self):
        return None

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=True):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnectionFactory:
    def __init__(self, error=None, connect_error=None):
        self.conn = FakeConnection(FakeCursor(error))
        self.connect_error = connect_error

    def connect(self):
        if self.connect_error:
            raise self.connect_error
        return self.conn


def _duplicate_key():
    return mysql.connector.IntegrityError(msg="Duplicate entry '1' for key 'employee_id'", errno=1062)


def _create_account(repo):
    return repo.create_account(
        employee_id=1,
        email="Arjun.Mehta@company.com",
        password_hash="hash",
        status=AccountStatus.ACTIVE,
    )


def test_successful_insert_commits_and_closes():
    factory = FakeConnectionFactory()

    assert _create_account(MySQLEmployeeAccountRepository(factory)) == 7

    conn = factory.conn
    assert conn.committed and not conn.rolled_back
    assert conn.closed and conn._cursor.closed
    assert conn._cursor.executed[0][1][1] == "arjun.mehta@company.com"


def test_duplicate_employee_account_is_a_conflict():
    factory = FakeConnectionFactory(error=_duplicate_key())

    with pytest.raises(AccountConflictError, match="already registered"):
        _create_account(MySQLEmployeeAccountRepository(factory))

    assert factory.conn.rolled_back
    assert not factory.conn.committed
    assert factory.conn.closed


def test_other_integrity_errors_are_storage_errors():
    factory = FakeConnectionFactory(error=mysql.connector.IntegrityError(msg="FK violation", errno=1452))

    with pytest.raises(StorageError):
        _create_account(MySQLEmployeeAccountRepository(factory))
    assert factory.conn.rolled_back


def test_driver_failure_becomes_storage_error_and_rolls_back():
    factory = FakeConnectionFactory(error=mysql.connector.OperationalError(msg="Lost connection", errno=2013))

    with pytest.raises(StorageError) as excinfo:
        MySQLEmployeeAccountRepository(factory).get_by_email("arjun.mehta@company.com")

    assert str(excinfo.value) == "Service temporarily unavailable. Please try again."
    assert isinstance(excinfo.value.__cause__, mysql.connector.OperationalError)
    assert factory.conn.rolled_back and factory.conn.closed


def test_connect_failure_becomes_storage_error():
    factory = FakeConnectionFactory(connect_error=mysql.connector.InterfaceError(msg="Can't connect", errno=2003))

    with pytest.raises(StorageError):
        MySQLEmployeeAccountRepository(factory).get_by_employee_id(1)


def test_racing_check_in_is_reported_as_already_checked_in():
    factory = FakeConnectionFactory(error=_duplicate_key())
    repo = MySQLAttendanceRepository(factory)

    with pytest.raises(ValidationError, match="already checked in today"):
        repo.create_checkin(
            employee_id=1,
            work_date=date(2026, 3, 11),
            check_in_time=datetime(2026, 3, 11, 9, 30),
            status=AttendanceStatus.PRESENT,
        )
    assert factory.conn.rolled_back


def test_connection_uses_configured_database(monkeypatch):
    calls = []
    monkeypatch.setattr(mysql.connector, "connect", lambda **kwargs: calls.append(kwargs) or "conn")

    conn = DatabaseConnection.from_settings(
        {"host": "db", "port": "3307", "user": "hr", "password": "pw", "database": "employee_portal"}
    )

    assert conn.connect() == "conn"
    assert calls == [{"host": "db", "port": 3307, "user": "hr", "password": "pw", "database": "employee_portal"}]
