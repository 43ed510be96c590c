from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Portal a session or account belongs to."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class AccountStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class RequestStatus(str, Enum):
    """Approval workflow shared by leave and password reset requests."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class TaskStatus(str, Enum):
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


class AttendanceStatus(str, Enum):
    PRESENT = "Present"
    ABSENT = "Absent"
    ON_LEAVE = "On Leave"


class Uploader(str, Enum):
    EMPLOYEE = "Employee"
    ADMIN = "Admin"
