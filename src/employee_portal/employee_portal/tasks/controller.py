from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.web import admin_required, current_identity, employee_required, request_data
from ..common.datetime_utils import coerce_date, now_local
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/employee/tasks", methods=["GET"], endpoint="employee_tasks")
    @employee_required
    def employee_tasks():
        today = now_local().date()
        tasks = container.task_service.list_for_employee(current_identity().employee_id)
        return jsonify(
            {
                "success": True,
                "tasks": [t.to_dict(today=today) for t in tasks],
                "summary": container.task_service.summarize(tasks, today=today),
            }
        )

    @app.route("/employee/tasks/<int:task_id>/status", methods=["POST"], endpoint="update_task_status")
    @employee_required
    def update_task_status(task_id: int):
        container.task_service.update_status(
            employee_id=current_identity().employee_id,
            task_id=task_id,
            status=request_data().get("status") or "",
        )
        return jsonify({"success": True, "message": "Task status updated"})

    @app.route("/admin/tasks", methods=["GET", "POST"], endpoint="admin_tasks")
    @admin_required
    def admin_tasks():
        if request.method == "POST":
            data = request_data()
            task_id = container.task_service.assign(
                admin_id=current_identity().account_id,
                employee_id=int(data.get("employee_id") or 0),
                title=data.get("title") or "",
                description=data.get("description") or "",
                due_date=coerce_date(data.get("due_date")),
            )
            return jsonify({"success": True, "message": "Task assigned", "task_id": task_id}), 201

        today = now_local().date()
        return jsonify({"success": True, "tasks": [t.to_dict(today=today) for t in container.task_service.list_all()]})

    @app.route("/admin/tasks/<int:task_id>/due-date", methods=["POST"], endpoint="change_task_due_date")
    @admin_required
    def change_task_due_date(task_id: int):
        container.task_service.change_due_date(task_id=task_id, due_date=coerce_date(request_data().get("due_date")))
        return jsonify({"success": True, "message": "Due date updated"})
