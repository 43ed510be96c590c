"""Flask glue for the session model.

Every request rebuilds a SessionHolder over ``flask.session`` (a signed cookie
the browser keeps), restores it and resumes one InactivityMonitor per logged-in
portal from the persisted last-activity timestamp. Protected views go through
``portal_required`` which asks the RouteGuard what to do.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from functools import wraps
from typing import Any, Mapping

from flask import Flask, current_app, g, jsonify, redirect, request, session
from werkzeug.exceptions import HTTPException

from ..common.datetime_utils import now_local
from ..core.constants import IDLE_TIMEOUT_MINUTES
from ..core.enums import Role
from ..core.exceptions import (
    AccountConflictError,
    AuthenticationError,
    AuthorizationError,
    DomainError,
    StorageError,
    ValidationError,
)
from .guard import GuardOutcome, RouteGuard
from .holder import SessionHolder
from .inactivity import InactivityMonitor
from .model import SessionIdentity
from .storage import MappingSessionStorage

logger = logging.getLogger(__name__)

_ERROR_STATUS = (
    (AccountConflictError, 409),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (StorageError, 503),
    (ValidationError, 400),
)


def status_for(exc: DomainError) -> int:
    for cls, code in _ERROR_STATUS:
        if isinstance(exc, cls):
            return code
    return 400


def error_response(exc: DomainError):
    return jsonify({"success": False, "message": str(exc)}), status_for(exc)


def request_data() -> Mapping[str, Any]:
    """JSON body if present, otherwise form fields."""

    return request.get_json(silent=True) or request.form


def current_holder() -> SessionHolder:
    holder = g.get("session_holder")
    if holder is None:
        # Not restored yet: guards answer WAIT for this holder.
        holder = SessionHolder(MappingSessionStorage(session))
        g.session_holder = holder
    return holder


def current_identity() -> SessionIdentity:
    return g.identity


def load_session() -> None:
    holder = SessionHolder(MappingSessionStorage(session))
    holder.restore()
    g.session_holder = holder
    g.expired_roles = set()
    g.monitors = {}

    now = now_local()
    timeout = timedelta(minutes=int(current_app.config.get("IDLE_TIMEOUT_MINUTES", IDLE_TIMEOUT_MINUTES)))

    def expire(role: Role) -> None:
        holder.logout(role)
        g.expired_roles.add(role)

    for role in Role:
        if not holder.is_authenticated(role):
            continue
        monitor = InactivityMonitor(role, on_expire=expire, timeout=timeout, clock=now_local)
        monitor.attach(now=now, last_activity=holder.last_activity(role))
        if not monitor.check(now=now):
            g.monitors[role] = monitor


def start_session(identity: SessionIdentity) -> None:
    holder = current_holder()
    holder.login(identity)
    holder.touch(identity.role, now_local())


def end_session(role: Role) -> None:
    current_holder().logout(role)
    monitors = g.get("monitors") or {}
    monitor = monitors.pop(role, None)
    if monitor:
        monitor.detach()


def record_activity(role: Role, kind: str) -> bool:
    """Feed one interaction to the portal's monitor. Returns True if the timer was reset."""

    monitor = (g.get("monitors") or {}).get(role)
    if monitor is None:
        return False
    reset = monitor.record_event(kind, now=now_local())
    if reset:
        current_holder().touch(role, monitor.last_activity)
    return reset


def session_deadline(role: Role):
    monitor = (g.get("monitors") or {}).get(role)
    return monitor.deadline if monitor else None


def portal_required(role: Role, *, track: bool = True):
    """Gate a view on the portal's session.

    WAIT answers 204 with no body, REDIRECT answers 302 to the portal's login
    route. ``track`` counts the request itself as user activity.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            holder = current_holder()
            decision = RouteGuard(holder).decide(role)
            if decision.outcome == GuardOutcome.WAIT:
                return "", 204
            if decision.outcome == GuardOutcome.REDIRECT:
                location = decision.location
                if role in g.get("expired_roles", ()):
                    location = f"{location}?expired=1"
                return redirect(location, code=302)

            if track:
                record_activity(role, "click")
            g.identity = holder.current(role)
            return view(*args, **kwargs)

        return wrapper

    return decorator


admin_required = portal_required(Role.ADMIN)
employee_required = portal_required(Role.EMPLOYEE)


def install(app: Flask) -> None:
    app.before_request(load_session)

    @app.errorhandler(DomainError)
    def handle_domain_error(exc: DomainError):
        return error_response(exc)

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        if isinstance(exc, HTTPException):
            return exc
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify({"success": False, "message": "Internal server error"}), 500
