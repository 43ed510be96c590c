from __future__ import annotations

import logging
from datetime import datetime, timedelta
from enum import Enum
from typing import Callable, Optional

from ..common.datetime_utils import now_local
from ..core.constants import IDLE_TIMEOUT_MINUTES
from ..core.enums import Role

logger = logging.getLogger(__name__)

ACTIVITY_EVENTS = frozenset({"mousemove", "mousedown", "keypress", "keydown", "click", "scroll", "touchstart"})


class MonitorState(str, Enum):
    DETACHED = "DETACHED"
    ACTIVE = "ACTIVE"
    EXPIRED = "EXPIRED"


class InactivityMonitor:
    """Idle timer for one portal.

    ACTIVE -> EXPIRED once no qualifying interaction has been seen for
    ``timeout``. EXPIRED is terminal for this monitor; a fresh login attaches
    again. ``on_expire`` runs at most once per expiry.
    """

    def __init__(
        self,
        role: Role,
        *,
        on_expire: Callable[[Role], None],
        timeout: timedelta = timedelta(minutes=IDLE_TIMEOUT_MINUTES),
        clock: Callable[[], datetime] = now_local,
    ):
        if timeout <= timedelta(0):
            raise ValueError("timeout must be positive")
        self.role = role
        self._on_expire = on_expire
        self._timeout = timeout
        self._clock = clock
        self._state = MonitorState.DETACHED
        self._last_activity: Optional[datetime] = None

    @property
    def state(self) -> MonitorState:
        return self._state

    @property
    def last_activity(self) -> Optional[datetime]:
        return self._last_activity

    @property
    def deadline(self) -> Optional[datetime]:
        if self._state != MonitorState.ACTIVE or self._last_activity is None:
            return None
        return self._last_activity + self._timeout

    def attach(self, *, now: Optional[datetime] = None, last_activity: Optional[datetime] = None) -> None:
        """Start watching. ``last_activity`` resumes a timer persisted earlier."""

        self._state = MonitorState.ACTIVE
        self._last_activity = last_activity or now or self._clock()

    def detach(self) -> None:
        self._state = MonitorState.DETACHED
        self._last_activity = None

    def record_event(self, kind: str, *, now: Optional[datetime] = None) -> bool:
        """Reset the timer for a qualifying interaction. Returns True if it was reset."""

        now = now or self._clock()
        if kind not in ACTIVITY_EVENTS:
            return False
        if self.check(now=now) or self._state != MonitorState.ACTIVE:
            return False
        self._last_activity = now
        return True

    def check(self, *, now: Optional[datetime] = None) -> bool:
        """Fire the expiry if the deadline passed. Returns True only on the transition."""

        if self._state != MonitorState.ACTIVE or self._last_activity is None:
            return False
        now = now or self._clock()
        if now - self._last_activity < self._timeout:
            return False

        self._state = MonitorState.EXPIRED
        logger.info("%s session expired after inactivity", self.role.value)
        self._on_expire(self.role)
        return True
