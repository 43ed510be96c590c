from __future__ import annotations

from flask import Flask, jsonify

from ..auth.web import admin_required, current_identity, employee_required
from ..common.datetime_utils import now_local
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/admin/dashboard", methods=["GET"], endpoint="admin_dashboard")
    @admin_required
    def admin_dashboard():
        return jsonify(
            {
                "success": True,
                "user": current_identity().to_dict(),
                "summary": container.dashboard_service.admin_summary(),
            }
        )

    @app.route("/employee/dashboard", methods=["GET"], endpoint="employee_dashboard")
    @employee_required
    def employee_dashboard():
        identity = current_identity()
        summary = container.dashboard_service.employee_summary(identity.employee_id, today=now_local().date())
        return jsonify({"success": True, "user": identity.to_dict(), "summary": summary})
