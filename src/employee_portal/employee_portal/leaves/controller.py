from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.web import admin_required, current_identity, employee_required, request_data
from ..common.datetime_utils import coerce_date
from ..container import Container
from ..core.enums import RequestStatus
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/employee/leaves", methods=["GET", "POST"], endpoint="employee_leaves")
    @employee_required
    def employee_leaves():
        employee_id = current_identity().employee_id
        if request.method == "POST":
            data = request_data()
            leave_id = container.leave_service.apply(
                employee_id=employee_id,
                leave_type=data.get("leave_type") or "",
                start_date=coerce_date(data.get("start_date")),
                end_date=coerce_date(data.get("end_date")),
                reason=data.get("reason") or "",
            )
            return jsonify({"success": True, "message": "Leave request submitted", "leave_id": leave_id}), 201

        rows = container.leave_service.list_for_employee(employee_id)
        return jsonify({"success": True, "leaves": [r.to_dict() for r in rows]})

    @app.route("/employee/leaves/<int:leave_id>", methods=["DELETE"], endpoint="cancel_leave")
    @employee_required
    def cancel_leave(leave_id: int):
        container.leave_service.cancel(employee_id=current_identity().employee_id, leave_id=leave_id)
        return jsonify({"success": True, "message": "Leave request deleted"})

    @app.route("/admin/leaves", methods=["GET"], endpoint="admin_leaves")
    @admin_required
    def admin_leaves():
        raw = request.args.get("status")
        try:
            status = RequestStatus(raw) if raw else None
        except ValueError:
            raise ValidationError("Invalid status")
        rows = container.leave_service.list_all(status=status)
        return jsonify({"success": True, "leaves": [r.to_dict() for r in rows]})

    @app.route("/admin/leaves/<int:leave_id>/approve", methods=["POST"], endpoint="approve_leave")
    @admin_required
    def approve_leave(leave_id: int):
        container.leave_service.approve(admin_id=current_identity().account_id, leave_id=leave_id)
        return jsonify({"success": True, "message": "Leave approved"})

    @app.route("/admin/leaves/<int:leave_id>/reject", methods=["POST"], endpoint="reject_leave")
    @admin_required
    def reject_leave(leave_id: int):
        container.leave_service.reject(
            admin_id=current_identity().account_id,
            leave_id=leave_id,
            reason=request_data().get("reason") or "",
        )
        return jsonify({"success": True, "message": "Leave rejected"})
