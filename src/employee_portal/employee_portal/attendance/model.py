from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance for one day."""

    attendance_id: int
    employee_id: int
    work_date: date
    check_in_time: datetime
    check_out_time: Optional[datetime]
    status: AttendanceStatus

    @property
    def total_hours(self) -> Optional[float]:
        if self.check_out_time is None:
            return None
        seconds = (self.check_out_time - self.check_in_time).total_seconds()
        return round(max(seconds, 0) / 3600, 2)

    def to_dict(self) -> dict:
        return {
            "attendance_id": self.attendance_id,
            "date": self.work_date.strftime("%Y-%m-%d"),
            "check_in": self.check_in_time.strftime("%H:%M:%S"),
            "check_out": self.check_out_time.strftime("%H:%M:%S") if self.check_out_time else None,
            "status": self.status.value,
            "total_hours": self.total_hours,
        }


@dataclass(frozen=True)
class CalendarDay:
    """Read-model for the monthly report. ``status`` is None for weekends and days not yet reached."""

    day: date
    status: Optional[AttendanceStatus]
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "date": self.day.strftime("%Y-%m-%d"),
            "status": self.status.value if self.status else None,
            "check_in": self.check_in.strftime("%H:%M") if self.check_in else None,
            "check_out": self.check_out.strftime("%H:%M") if self.check_out else None,
        }
