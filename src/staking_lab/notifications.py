"""User-facing notifications emitted as a side effect of ledger events."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Iterable, Iterator
from dataclasses import replace
from datetime import UTC, datetime
from typing import Protocol

import pandas as pd

from .core.models import Notification, NotificationType

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


class NotificationSink(Protocol):
    """Consumer of emitted notifications (e.g. the notification list view)."""

    def receive(self, notification: Notification) -> None: ...


class NotificationEmitter:
    """Create notification records and forward them to an optional sink.

    The emitter keeps its own append-only history; display ordering is the
    consumer's concern (see :func:`sort_for_display`).
    """

    def __init__(self, sink: NotificationSink | None = None, *, clock: Clock = _utcnow) -> None:
        self.sink = sink
        self._clock = clock
        self._emitted: list[Notification] = []

    def emit(
        self,
        title: str,
        message: str,
        type: NotificationType | str = NotificationType.INFO,
        related_asset_id: str | None = None,
        action_url: str | None = None,
    ) -> Notification:
        notification = Notification(
            id=uuid.uuid4().hex,
            title=title,
            message=message,
            type=NotificationType(type),
            timestamp=self._clock(),
            read=False,
            related_asset_id=related_asset_id,
            action_url=action_url,
        )
        self._emitted.append(notification)
        if self.sink is not None:
            self.sink.receive(notification)
        logger.debug("Emitted %s notification %r", notification.type.value, title)
        return notification

    @property
    def emitted(self) -> list[Notification]:
        return list(self._emitted)

    def reset(self) -> None:
        self._emitted.clear()


def sort_for_display(notifications: Iterable[Notification]) -> list[Notification]:
    """Unread before read, newest first within each group."""

    by_time = sorted(notifications, key=lambda n: n.timestamp, reverse=True)
    return sorted(by_time, key=lambda n: n.read)


def format_time_ago(timestamp: datetime, now: datetime | None = None) -> str:
    now = now or _utcnow()
    seconds = int((now - timestamp).total_seconds())
    if seconds < 60:
        return "Just now"
    minutes = seconds // 60
    if minutes < 60:
        return f"{minutes} minute{'s' if minutes > 1 else ''} ago"
    hours = minutes // 60
    if hours < 24:
        return f"{hours} hour{'s' if hours > 1 else ''} ago"
    days = hours // 24
    if days < 7:
        return f"{days} day{'s' if days > 1 else ''} ago"
    return timestamp.date().isoformat()


class NotificationCenter:
    """Notification list with read-state toggles and clear actions.

    Newly received notifications are prepended, so iteration yields the most
    recent first.
    """

    def __init__(self, notifications: Iterable[Notification] | None = None) -> None:
        self._items: list[Notification] = list(notifications) if notifications else []

    def receive(self, notification: Notification) -> None:
        self._items.insert(0, notification)

    @property
    def unread_count(self) -> int:
        return sum(1 for n in self._items if not n.read)

    def mark_as_read(self, notification_id: str) -> None:
        self._items = [
            replace(n, read=True) if n.id == notification_id else n for n in self._items
        ]

    def mark_all_as_read(self) -> None:
        self._items = [replace(n, read=True) for n in self._items]

    def clear(self, notification_id: str) -> None:
        self._items = [n for n in self._items if n.id != notification_id]

    def clear_all(self) -> None:
        self._items = []

    def for_display(self) -> list[Notification]:
        return sort_for_display(self._items)

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame([n.to_dict() for n in self._items])

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Notification]:
        return iter(self._items)


__all__ = [
    "NotificationCenter",
    "NotificationEmitter",
    "NotificationSink",
    "format_time_ago",
    "sort_for_display",
]
