from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.web import admin_required, current_identity, employee_required
from ..common.datetime_utils import coerce_date, now_local
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    def _month_args(today):
        try:
            year = int(request.args.get("year") or today.year)
            month = int(request.args.get("month") or today.month)
        except ValueError:
            raise ValidationError("Invalid month")
        return year, month

    def _attendance_payload(employee_id: int) -> dict:
        today = now_local().date()
        year, month = _month_args(today)
        history = container.attendance_service.history(
            employee_id,
            start_date=coerce_date(request.args.get("start_date")),
            end_date=coerce_date(request.args.get("end_date")),
            today=today,
        )
        days = container.attendance_service.monthly_days(employee_id, year=year, month=month, today=today)
        record = container.attendance_service.get_today_record(employee_id, today)
        return {
            "success": True,
            "today": record.to_dict() if record else None,
            "history": [r.to_dict() for r in history],
            "month": {"year": year, "month": month, "days": [d.to_dict() for d in days]},
        }

    @app.route("/employee/attendance", methods=["GET"], endpoint="employee_attendance")
    @employee_required
    def employee_attendance():
        return jsonify(_attendance_payload(current_identity().employee_id))

    @app.route("/employee/attendance/check-in", methods=["POST"], endpoint="check_in")
    @employee_required
    def check_in():
        container.attendance_service.check_in(current_identity().employee_id, now=now_local())
        return jsonify({"success": True, "message": "Checked in"}), 201

    @app.route("/employee/attendance/check-out", methods=["POST"], endpoint="check_out")
    @employee_required
    def check_out():
        record = container.attendance_service.check_out(current_identity().employee_id, now=now_local())
        return jsonify({"success": True, "message": "Checked out", "record": record.to_dict()})

    @app.route("/admin/employees/<int:employee_id>/attendance", methods=["GET"], endpoint="admin_employee_attendance")
    @admin_required
    def admin_employee_attendance(employee_id: int):
        return jsonify(_attendance_payload(employee_id))
