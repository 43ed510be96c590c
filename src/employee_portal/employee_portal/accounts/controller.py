from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..auth.web import (
    admin_required,
    current_holder,
    current_identity,
    end_session,
    error_response,
    portal_required,
    record_activity,
    request_data,
    session_deadline,
    start_session,
)
from ..container import Container
from ..core.constants import ADMIN_LOGIN_ROUTE, EMPLOYEE_LOGIN_ROUTE
from ..core.enums import RequestStatus, Role
from ..core.exceptions import AccountConflictError, AuthenticationError, ValidationError

logger = logging.getLogger(__name__)


def _login_page(role: Role):
    return jsonify(
        {
            "success": True,
            "authenticated": current_holder().is_authenticated(role),
            "session_expired": request.args.get("expired") == "1",
        }
    )


def _registration_payload(result) -> dict:
    return {
        "success": True,
        "message": "Employee registered successfully",
        "account_id": result.account_id,
        "employee_id": result.employee_id,
        "email": result.email,
        "password": result.password,
    }


def register(app: Flask, container: Container) -> None:
    # -------- Admin portal --------
    @app.route("/admin/login", methods=["GET", "POST"], endpoint="admin_login")
    def admin_login():
        if request.method == "GET":
            return _login_page(Role.ADMIN)

        data = request_data()
        try:
            identity = container.admin_auth_service.authenticate(
                data.get("login") or data.get("email") or "",
                data.get("password") or "",
            )
        except AuthenticationError as e:
            logger.info("Admin login failed: %s", type(e).__name__)
            return error_response(e)

        start_session(identity)
        return jsonify({"success": True, "message": "Login successful", "user": identity.to_dict(), "redirect": "/admin/dashboard"})

    @app.route("/admin/signup", methods=["POST"], endpoint="admin_signup")
    def admin_signup():
        data = request_data()
        admin_id = container.admin_auth_service.sign_up(
            email=data.get("email") or "",
            password=data.get("password") or "",
            user_name=data.get("user_name") or "",
        )
        return jsonify({"success": True, "message": "Account created successfully", "admin_id": admin_id}), 201

    @app.route("/admin/logout", methods=["POST"], endpoint="admin_logout")
    def admin_logout():
        end_session(Role.ADMIN)
        return jsonify({"success": True, "message": "Logged out", "redirect": ADMIN_LOGIN_ROUTE})

    @app.route("/admin/new-password", methods=["POST"], endpoint="admin_new_password")
    def admin_new_password():
        data = request_data()
        container.admin_auth_service.reset_password(
            email=data.get("email") or "",
            password=data.get("password") or "",
            confirm_password=data.get("confirm_password") or "",
        )
        return jsonify({"success": True, "message": "Password updated successfully", "redirect": ADMIN_LOGIN_ROUTE})

    @app.route("/admin/activity", methods=["POST"], endpoint="admin_activity")
    @portal_required(Role.ADMIN, track=False)
    def admin_activity():
        return _activity(Role.ADMIN)

    @app.route("/admin/employees/<int:employee_id>/register", methods=["POST"], endpoint="admin_register_employee")
    @admin_required
    def admin_register_employee(employee_id: int):
        result = container.employee_auth_service.register_employee(employee_id)
        return jsonify(_registration_payload(result)), 201

    @app.route("/admin/password-resets", methods=["GET"], endpoint="admin_password_resets")
    @admin_required
    def admin_password_resets():
        raw = request.args.get("status")
        try:
            status = RequestStatus(raw) if raw else None
        except ValueError:
            raise ValidationError("Invalid status")
        rows = container.employee_auth_service.list_reset_requests(status=status)
        return jsonify({"success": True, "requests": [r.to_dict() for r in rows]})

    @app.route("/admin/password-resets/<int:request_id>/approve", methods=["POST"], endpoint="approve_password_reset")
    @admin_required
    def approve_password_reset(request_id: int):
        container.employee_auth_service.approve_reset_request(
            request_id=request_id,
            admin_id=current_identity().account_id,
        )
        return jsonify({"success": True, "message": "Request approved"})

    @app.route("/admin/password-resets/<int:request_id>/reject", methods=["POST"], endpoint="reject_password_reset")
    @admin_required
    def reject_password_reset(request_id: int):
        container.employee_auth_service.reject_reset_request(
            request_id=request_id,
            admin_id=current_identity().account_id,
        )
        return jsonify({"success": True, "message": "Request rejected"})

    # -------- Employee portal --------
    @app.route("/employee/login", methods=["GET", "POST"], endpoint="employee_login")
    def employee_login():
        if request.method == "GET":
            return _login_page(Role.EMPLOYEE)

        data = request_data()
        try:
            identity = container.employee_auth_service.authenticate(
                data.get("email") or "",
                data.get("password") or "",
            )
        except (AuthenticationError, AccountConflictError) as e:
            logger.info("Employee login failed: %s", type(e).__name__)
            return error_response(e)

        start_session(identity)
        return jsonify({"success": True, "message": "Login successful", "user": identity.to_dict(), "redirect": "/employee/dashboard"})

    @app.route("/employee/register", methods=["POST"], endpoint="employee_register")
    def employee_register():
        result = container.employee_auth_service.register(request_data().get("email") or "")
        return jsonify(_registration_payload(result)), 201

    @app.route("/employee/logout", methods=["POST"], endpoint="employee_logout")
    def employee_logout():
        end_session(Role.EMPLOYEE)
        return jsonify({"success": True, "message": "Logged out", "redirect": EMPLOYEE_LOGIN_ROUTE})

    @app.route("/employee/reset-password", methods=["POST"], endpoint="employee_reset_password")
    def employee_reset_password():
        data = request_data()
        container.employee_auth_service.reset_password(
            email=data.get("email") or "",
            new_password=data.get("new_password") or "",
            confirm_password=data.get("confirm_password") or "",
        )
        return jsonify({"success": True, "message": "Password updated successfully", "redirect": EMPLOYEE_LOGIN_ROUTE})

    @app.route("/employee/password-resets", methods=["POST"], endpoint="employee_request_password_reset")
    def employee_request_password_reset():
        request_id = container.employee_auth_service.request_password_reset(request_data().get("email") or "")
        return jsonify({"success": True, "message": "Request sent to admin", "request_id": request_id}), 201

    @app.route("/employee/password-resets/<int:request_id>", methods=["GET"], endpoint="employee_password_reset_status")
    def employee_password_reset_status(request_id: int):
        req = container.employee_auth_service.get_reset_request(
            request_id=request_id,
            email=request.args.get("email") or "",
        )
        return jsonify({"success": True, "request": req.to_dict()})

    @app.route("/employee/activity", methods=["POST"], endpoint="employee_activity")
    @portal_required(Role.EMPLOYEE, track=False)
    def employee_activity():
        return _activity(Role.EMPLOYEE)

    def _activity(role: Role):
        kind = str(request_data().get("event") or "")
        reset = record_activity(role, kind)
        deadline = session_deadline(role)
        return jsonify(
            {
                "success": True,
                "reset": reset,
                "expires_at": deadline.isoformat() if deadline else None,
                "user": current_identity().to_dict(),
            }
        )
