from __future__ import annotations

import logging
from datetime import datetime
from typing import Dict, Mapping, Optional

from ..core.constants import ADMIN_SESSION_KEY, EMPLOYEE_SESSION_KEY, LAST_ACTIVITY_SUFFIX
from ..core.enums import Role
from .model import SessionIdentity
from .storage import SessionStorage

logger = logging.getLogger(__name__)

SESSION_KEYS: Mapping[Role, str] = {
    Role.ADMIN: ADMIN_SESSION_KEY,
    Role.EMPLOYEE: EMPLOYEE_SESSION_KEY,
}


class SessionHolder:
    """Current identity per portal: at most one admin and, independently, one employee.

    Each slot is persisted under its own storage key so logging into one portal
    never overwrites the other.
    """

    def __init__(self, storage: SessionStorage, *, keys: Mapping[Role, str] = SESSION_KEYS):
        if len(set(keys.values())) != len(keys):
            raise ValueError("Session keys must be distinct per role")
        self._storage = storage
        self._keys = dict(keys)
        self._slots: Dict[Role, Optional[SessionIdentity]] = {role: None for role in self._keys}
        self._restored = False

    @property
    def restored(self) -> bool:
        return self._restored

    @property
    def admin(self) -> Optional[SessionIdentity]:
        return self._slots.get(Role.ADMIN)

    @property
    def employee(self) -> Optional[SessionIdentity]:
        return self._slots.get(Role.EMPLOYEE)

    def current(self, role: Role) -> Optional[SessionIdentity]:
        return self._slots.get(role)

    def is_authenticated(self, role: Role) -> bool:
        return self._slots.get(role) is not None

    def restore(self) -> None:
        """Load persisted identities. Missing or malformed entries mean logged out."""

        for role, key in self._keys.items():
            raw = self._storage.get(key)
            if raw is None:
                self._slots[role] = None
                continue
            try:
                identity = SessionIdentity.from_dict(raw)
                if identity.role != role:
                    raise ValueError(f"role {identity.role.value!r} stored under {key!r}")
            except (KeyError, TypeError, ValueError, AttributeError) as exc:
                logger.warning("Discarding malformed %s session: %s", role.value, exc)
                self._clear(role)
                continue
            self._slots[role] = identity
        self._restored = True

    def login(self, identity: SessionIdentity) -> bool:
        self._slots[identity.role] = identity
        self._storage.set(self._keys[identity.role], identity.to_dict())
        self._restored = True
        return True

    def logout(self, role: Role) -> None:
        self._clear(role)

    def touch(self, role: Role, when: datetime) -> None:
        """Persist the last user interaction for the portal's idle timer."""

        if self.is_authenticated(role):
            self._storage.set(self._activity_key(role), when.isoformat())

    def last_activity(self, role: Role) -> Optional[datetime]:
        raw = self._storage.get(self._activity_key(role))
        if not raw:
            return None
        try:
            return datetime.fromisoformat(str(raw))
        except ValueError:
            return None

    def _clear(self, role: Role) -> None:
        self._slots[role] = None
        self._storage.delete(self._keys[role])
        self._storage.delete(self._activity_key(role))

    def _activity_key(self, role: Role) -> str:
        return f"{self._keys[role]}{LAST_ACTIVITY_SUFFIX}"
