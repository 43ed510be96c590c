from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.web import admin_required, current_identity, employee_required, request_data
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/admin/notifications", methods=["GET", "POST"], endpoint="admin_notifications")
    @admin_required
    def admin_notifications():
        if request.method == "POST":
            data = request_data()
            notification_id = container.notification_service.send(
                admin_id=current_identity().account_id,
                title=data.get("title") or "",
                message=data.get("message") or "",
                target_audience=data.get("target_audience") or "",
            )
            return jsonify({"success": True, "message": "Notification sent", "notification_id": notification_id}), 201

        rows = container.notification_service.list_all()
        return jsonify({"success": True, "notifications": [n.to_dict() for n in rows]})

    @app.route("/employee/notifications", methods=["GET"], endpoint="employee_notifications")
    @employee_required
    def employee_notifications():
        rows = container.notification_service.list_for_employee(current_identity().employee_id)
        return jsonify({"success": True, "notifications": [n.to_dict() for n in rows]})
