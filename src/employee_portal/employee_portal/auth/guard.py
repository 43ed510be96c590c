from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from ..core.constants import ADMIN_LOGIN_ROUTE, EMPLOYEE_LOGIN_ROUTE
from ..core.enums import Role
from .holder import SessionHolder

LOGIN_ROUTES: Mapping[Role, str] = {
    Role.ADMIN: ADMIN_LOGIN_ROUTE,
    Role.EMPLOYEE: EMPLOYEE_LOGIN_ROUTE,
}


class GuardOutcome(str, Enum):
    RENDER = "render"
    WAIT = "wait"
    REDIRECT = "redirect"


@dataclass(frozen=True)
class GuardDecision:
    outcome: GuardOutcome
    location: Optional[str] = None
    replace: bool = False


class RouteGuard:
    """Decides what a protected view may do before it renders.

    Both portals wait for the session restore to finish instead of redirecting,
    which avoids bouncing a logged-in user to the login page during startup.
    """

    def __init__(self, holder: SessionHolder, *, login_routes: Mapping[Role, str] = LOGIN_ROUTES):
        self._holder = holder
        self._login_routes = dict(login_routes)

    def is_authorized(self, role: Role) -> bool:
        return self._holder.restored and self._holder.is_authenticated(role)

    def decide(self, role: Role) -> GuardDecision:
        if not self._holder.restored:
            return GuardDecision(GuardOutcome.WAIT)
        if self._holder.is_authenticated(role):
            return GuardDecision(GuardOutcome.RENDER)
        return GuardDecision(GuardOutcome.REDIRECT, location=self._login_routes[role], replace=True)
