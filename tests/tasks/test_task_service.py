from __future__ import annotations

from datetime import date

import pytest

from fakes import FakeEmployeeRepo, FakeTaskRepo
from src.employee_portal.employee_portal.core.enums import TaskStatus
from src.employee_portal.employee_portal.core.exceptions import AuthorizationError, ValidationError
from src.employee_portal.employee_portal.tasks.service import TaskService


@pytest.fixture
def service():
    return TaskService(FakeTaskRepo(), FakeEmployeeRepo())


def _assign(service, due=date(2026, 3, 10), employee_id=1):
    return service.assign(
        admin_id=1,
        employee_id=employee_id,
        title="Quarterly report",
        description="Draft the Q1 numbers",
        due_date=due,
    )


def test_assign_starts_pending(service):
    task_id = _assign(service)
    (task,) = service.list_for_employee(1)
    assert task.task_id == task_id
    assert task.status == TaskStatus.PENDING


def test_assign_requires_known_employee_and_due_date(service):
    with pytest.raises(ValidationError, match="Employee"):
        _assign(service, employee_id=42)
    with pytest.raises(ValidationError, match="Due date"):
        _assign(service, due=None)


def test_overdue_flag(service, fixed_now):
    today = fixed_now.date()
    late = _assign(service, due=date(2026, 3, 10))
    _assign(service, due=today)

    (late_task, today_task) = service.list_for_employee(1)
    assert late_task.is_overdue(today)
    assert not today_task.is_overdue(today)

    service.update_status(employee_id=1, task_id=late, status="Completed")
    assert not service.list_for_employee(1)[0].is_overdue(today)


def test_summary_counts(service, fixed_now):
    a = _assign(service, due=date(2026, 3, 1))
    b = _assign(service, due=date(2026, 3, 20))
    _assign(service, due=date(2026, 3, 21))
    service.update_status(employee_id=1, task_id=a, status="In Progress")
    service.update_status(employee_id=1, task_id=b, status="Completed")

    summary = service.summarize(service.list_for_employee(1), today=fixed_now.date())

    assert summary == {"total": 3, "pending": 1, "in_progress": 1, "completed": 1, "overdue": 1}


def test_employee_cannot_touch_someone_elses_task(service):
    task_id = _assign(service)
    with pytest.raises(AuthorizationError):
        service.update_status(employee_id=2, task_id=task_id, status="Completed")


def test_invalid_status(service):
    task_id = _assign(service)
    with pytest.raises(ValidationError, match="Invalid task status"):
        service.update_status(employee_id=1, task_id=task_id, status="Done")


def test_admin_changes_due_date(service, fixed_now):
    task_id = _assign(service, due=date(2026, 3, 1))
    service.change_due_date(task_id=task_id, due_date=date(2026, 4, 1))

    (task,) = service.list_all()
    assert task.due_date == date(2026, 4, 1)
    assert not task.is_overdue(fixed_now.date())

    with pytest.raises(ValidationError):
        service.change_due_date(task_id=999, due_date=date(2026, 4, 1))
