from __future__ import annotations

from typing import Iterable, Protocol, Sequence

from .model import Notification


class NotificationRepository(Protocol):
    def create_notification(self, *, title: str, message: str, target_audience: str, created_by: int) -> int:
        raise NotImplementedError

    def list_for_audiences(self, audiences: Iterable[str], *, limit: int) -> Sequence[Notification]:
        """Newest first."""

        raise NotImplementedError

    def list_all(self, *, limit: int = 200) -> Sequence[Notification]:
        raise NotImplementedError
