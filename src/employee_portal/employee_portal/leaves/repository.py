from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import RequestStatus
from .model import LeaveRequest


class LeaveRepository(Protocol):
    def create_leave(
        self,
        *,
        employee_id: int,
        leave_type: str,
        start_date: date,
        end_date: date,
        reason: str,
        no_of_leaves: int,
    ) -> int:
        raise NotImplementedError

    def get_leave(self, *, leave_id: int) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def list_leaves(
        self,
        *,
        status: Optional[RequestStatus] = None,
        employee_id: Optional[int] = None,
        limit: int = 200,
    ) -> Sequence[LeaveRequest]:
        """Newest first."""

        raise NotImplementedError

    def delete_pending(self, *, leave_id: int, employee_id: int) -> bool:
        raise NotImplementedError

    def decide_leave(
        self,
        *,
        leave_id: int,
        status: RequestStatus,
        decided_by: int,
        rejection_reason: Optional[str] = None,
    ) -> bool:
        """Only pending requests change. Returns False otherwise."""

        raise NotImplementedError

    def approved_for_day(self, *, employee_id: int, day: date) -> Optional[LeaveRequest]:
        raise NotImplementedError
