from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import List, Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_HISTORY_DAYS
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..leaves.repository import LeaveRepository
from .model import AttendanceRecord, CalendarDay
from .repository import AttendanceRepository


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, leaves: LeaveRepository | None = None):
        self._attendance = attendance
        self._leaves = leaves

    def check_in(self, employee_id: int, *, now: datetime | None = None) -> int:
        now = now or now_local()
        today = now.date()

        if self._attendance.get_for_employee_and_date(int(employee_id), today):
            raise ValidationError("You have already checked in today")

        return self._attendance.create_checkin(
            employee_id=int(employee_id),
            work_date=today,
            check_in_time=now,
            status=AttendanceStatus.PRESENT,
        )

    def check_out(self, employee_id: int, *, now: datetime | None = None) -> AttendanceRecord:
        now = now or now_local()
        today = now.date()

        record = self._attendance.get_for_employee_and_date(int(employee_id), today)
        if not record:
            raise ValidationError("You have not checked in today")
        if record.check_out_time is not None:
            raise ValidationError("You have already checked out today")

        if not self._attendance.update_checkout(attendance_id=record.attendance_id, check_out_time=now):
            raise ValidationError("You have already checked out today")

        return AttendanceRecord(
            attendance_id=record.attendance_id,
            employee_id=record.employee_id,
            work_date=record.work_date,
            check_in_time=record.check_in_time,
            check_out_time=now,
            status=record.status,
        )

    def get_today_record(self, employee_id: int, today: date) -> Optional[AttendanceRecord]:
        return self._attendance.get_for_employee_and_date(int(employee_id), today)

    def history(
        self,
        employee_id: int,
        *,
        start_date: date | None = None,
        end_date: date | None = None,
        today: date | None = None,
    ) -> Sequence[AttendanceRecord]:
        today = today or now_local().date()
        end_date = end_date or today
        start_date = start_date or end_date - timedelta(days=DEFAULT_HISTORY_DAYS)
        if end_date < start_date:
            raise ValidationError("End date must be on or after start date")
        return self._attendance.list_between(int(employee_id), start_date, end_date)

    def monthly_days(self, employee_id: int, *, year: int, month: int, today: date | None = None) -> List[CalendarDay]:
        """Day-by-day status for one month.

        Weekdays between the employee's first ever record and today that have no
        record are Absent, or On Leave when an approved leave covers them.
        Weekends and future days carry no status. Empty until the first check-in.
        """

        if not 1 <= int(month) <= 12:
            raise ValidationError("Invalid month")

        today = today or now_local().date()
        first = self._attendance.first_record_date(int(employee_id))
        if first is None:
            return []

        last_day = calendar.monthrange(int(year), int(month))[1]
        start = date(int(year), int(month), 1)
        end = date(int(year), int(month), last_day)
        by_day = {r.work_date: r for r in self._attendance.list_between(int(employee_id), start, end)}

        days: List[CalendarDay] = []
        for n in range(last_day):
            day = start + timedelta(days=n)
            record = by_day.get(day)
            if record:
                days.append(CalendarDay(day, record.status, record.check_in_time, record.check_out_time))
            elif day.weekday() < 5 and first <= day <= today:
                days.append(CalendarDay(day, self._missing_status(int(employee_id), day)))
            else:
                days.append(CalendarDay(day, None))
        return days

    def _missing_status(self, employee_id: int, day: date) -> AttendanceStatus:
        if self._leaves and self._leaves.approved_for_day(employee_id=employee_id, day=day):
            return AttendanceStatus.ON_LEAVE
        return AttendanceStatus.ABSENT
