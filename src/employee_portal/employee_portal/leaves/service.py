from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..common.validators import require_non_empty
from ..core.enums import RequestStatus
from ..core.exceptions import AuthorizationError, ValidationError
from .model import LeaveRequest
from .repository import LeaveRepository

logger = logging.getLogger(__name__)


def count_leave_days(start_date: date, end_date: date) -> int:
    """Inclusive number of calendar days between two dates."""

    return (end_date - start_date).days + 1


class LeaveService:
    def __init__(self, leaves: LeaveRepository):
        self._leaves = leaves

    def apply(
        self,
        *,
        employee_id: int,
        leave_type: str,
        start_date: Optional[date],
        end_date: Optional[date],
        reason: str,
    ) -> int:
        leave_type = require_non_empty(leave_type, "Leave type")
        reason = require_non_empty(reason, "Reason")
        if start_date is None or end_date is None:
            raise ValidationError("Start and end dates are required")
        if end_date < start_date:
            raise ValidationError("End date must be on or after start date")

        return self._leaves.create_leave(
            employee_id=int(employee_id),
            leave_type=leave_type,
            start_date=start_date,
            end_date=end_date,
            reason=reason,
            no_of_leaves=count_leave_days(start_date, end_date),
        )

    def list_for_employee(self, employee_id: int) -> Sequence[LeaveRequest]:
        return self._leaves.list_leaves(employee_id=int(employee_id))

    def cancel(self, *, employee_id: int, leave_id: int) -> None:
        leave = self._leaves.get_leave(leave_id=int(leave_id))
        if not leave:
            raise ValidationError("Leave request does not exist")
        if leave.employee_id != int(employee_id):
            raise AuthorizationError()
        if leave.status != RequestStatus.PENDING:
            raise ValidationError("Only pending leave requests can be deleted")
        if not self._leaves.delete_pending(leave_id=int(leave_id), employee_id=int(employee_id)):
            raise ValidationError("Only pending leave requests can be deleted")

    def list_all(self, *, status: Optional[RequestStatus] = None) -> Sequence[LeaveRequest]:
        return self._leaves.list_leaves(status=status, limit=500)

    def approve(self, *, admin_id: int, leave_id: int) -> None:
        self._decide(admin_id=admin_id, leave_id=leave_id, status=RequestStatus.APPROVED)

    def reject(self, *, admin_id: int, leave_id: int, reason: str = "") -> None:
        self._decide(
            admin_id=admin_id,
            leave_id=leave_id,
            status=RequestStatus.REJECTED,
            rejection_reason=(reason or "").strip() or None,
        )

    def _decide(
        self,
        *,
        admin_id: int,
        leave_id: int,
        status: RequestStatus,
        rejection_reason: Optional[str] = None,
    ) -> None:
        leave = self._leaves.get_leave(leave_id=int(leave_id))
        if not leave:
            raise ValidationError("Leave request does not exist")
        if leave.status != RequestStatus.PENDING:
            raise ValidationError("Leave request has already been processed")

        ok = self._leaves.decide_leave(
            leave_id=int(leave_id),
            status=status,
            decided_by=int(admin_id),
            rejection_reason=rejection_reason,
        )
        if not ok:
            raise ValidationError("Leave request has already been processed")
        logger.info("Leave %s marked %s by admin %s", leave_id, status.value, admin_id)

    def is_on_leave(self, employee_id: int, day: date) -> bool:
        return self._leaves.approved_for_day(employee_id=int(employee_id), day=day) is not None
