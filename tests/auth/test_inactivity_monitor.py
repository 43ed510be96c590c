from __future__ import annotations

from datetime import timedelta

import pytest

from src.employee_portal.employee_portal.auth.inactivity import InactivityMonitor, MonitorState
from src.employee_portal.employee_portal.core.enums import Role


class ExpiryRecorder:
    def __init__(self):
        self.calls = []

    def __call__(self, role):
        self.calls.append(role)


@pytest.fixture
def recorder():
    return ExpiryRecorder()


@pytest.fixture
def monitor(recorder, fixed_now):
    m = InactivityMonitor(Role.ADMIN, on_expire=recorder, clock=lambda: fixed_now)
    m.attach(now=fixed_now)
    return m


def test_expires_after_five_idle_minutes(monitor, recorder, fixed_now):
    assert not monitor.check(now=fixed_now + timedelta(minutes=4, seconds=59))
    assert monitor.state == MonitorState.ACTIVE

    assert monitor.check(now=fixed_now + timedelta(minutes=5, seconds=1))

    assert monitor.state == MonitorState.EXPIRED
    assert recorder.calls == [Role.ADMIN]


def test_event_at_459_keeps_session_alive(monitor, recorder, fixed_now):
    assert monitor.record_event("mousemove", now=fixed_now + timedelta(minutes=4, seconds=59))

    assert not monitor.check(now=fixed_now + timedelta(minutes=5, seconds=1))
    assert monitor.state == MonitorState.ACTIVE
    assert monitor.deadline == fixed_now + timedelta(minutes=9, seconds=59)
    assert recorder.calls == []


def test_expiry_fires_once(monitor, recorder, fixed_now):
    later = fixed_now + timedelta(minutes=10)
    monitor.check(now=later)
    monitor.check(now=later)
    monitor.record_event("keypress", now=later)

    assert recorder.calls == [Role.ADMIN]


def test_event_after_deadline_does_not_revive(monitor, recorder, fixed_now):
    assert not monitor.record_event("click", now=fixed_now + timedelta(minutes=6))
    assert monitor.state == MonitorState.EXPIRED
    assert recorder.calls == [Role.ADMIN]


def test_unknown_event_kinds_are_ignored(monitor, fixed_now):
    assert not monitor.record_event("focus", now=fixed_now + timedelta(minutes=1))
    assert monitor.last_activity == fixed_now


@pytest.mark.parametrize("kind", ["mousemove", "mousedown", "keypress", "keydown", "click", "scroll", "touchstart"])
def test_every_interaction_kind_resets(monitor, fixed_now, kind):
    assert monitor.record_event(kind, now=fixed_now + timedelta(minutes=2))


def test_detached_monitor_never_fires(monitor, recorder, fixed_now):
    monitor.detach()
    assert not monitor.check(now=fixed_now + timedelta(hours=1))
    assert monitor.deadline is None
    assert recorder.calls == []


def test_reattach_after_expiry_starts_fresh(monitor, recorder, fixed_now):
    monitor.check(now=fixed_now + timedelta(minutes=6))
    monitor.attach(now=fixed_now + timedelta(minutes=7))

    assert monitor.state == MonitorState.ACTIVE
    assert not monitor.check(now=fixed_now + timedelta(minutes=11))


def test_attach_resumes_persisted_timer(recorder, fixed_now):
    m = InactivityMonitor(Role.EMPLOYEE, on_expire=recorder)
    m.attach(now=fixed_now, last_activity=fixed_now - timedelta(minutes=5))

    assert m.check(now=fixed_now)
    assert recorder.calls == [Role.EMPLOYEE]


def test_timeout_must_be_positive(recorder):
    with pytest.raises(ValueError):
        InactivityMonitor(Role.ADMIN, on_expire=recorder, timeout=timedelta(0))
