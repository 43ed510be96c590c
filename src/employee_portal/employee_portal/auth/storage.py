from __future__ import annotations

from typing import Any, MutableMapping, Optional, Protocol


class SessionStorage(Protocol):
    """Durable client-side key/value storage the session holder persists into."""

    def get(self, key: str) -> Optional[Any]:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError


class MappingSessionStorage(SessionStorage):
    """Storage over any mutable mapping.

    Used with a plain dict in tests and with ``flask.session`` (a signed cookie
    kept by the browser) in the web app.
    """

    def __init__(self, backend: Optional[MutableMapping[str, Any]] = None):
        self._backend = backend if backend is not None else {}

    def get(self, key: str) -> Optional[Any]:
        return self._backend.get(key)

    def set(self, key: str, value: Any) -> None:
        self._backend[key] = value

    def delete(self, key: str) -> None:
        self._backend.pop(key, None)
