from datetime import UTC, datetime, timedelta

import pytest

from staking_lab.core import Notification, NotificationType
from staking_lab.notifications import (
    NotificationCenter,
    NotificationEmitter,
    format_time_ago,
    sort_for_display,
)

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


def _note(id: str, hours_ago: float, read: bool = False) -> Notification:
    return Notification(
        id=id,
        title=id,
        message="",
        type=NotificationType.INFO,
        timestamp=NOW - timedelta(hours=hours_ago),
        read=read,
    )


def test_emit_assigns_id_timestamp_and_unread() -> None:
    emitter = NotificationEmitter(clock=lambda: NOW)
    first = emitter.emit("Price Alert", "DANGOTE up 5.2%", "market", related_asset_id="2")
    second = emitter.emit("Hello", "welcome")

    assert first.id != second.id
    assert first.timestamp == NOW
    assert first.read is False
    assert first.type is NotificationType.MARKET
    assert first.related_asset_id == "2"
    assert second.type is NotificationType.INFO
    assert emitter.emitted == [first, second]


def test_emit_rejects_unknown_type() -> None:
    with pytest.raises(ValueError):
        NotificationEmitter().emit("t", "m", "urgent")


def test_emit_forwards_to_sink() -> None:
    center = NotificationCenter()
    emitter = NotificationEmitter(center, clock=lambda: NOW)
    older = emitter.emit("one", "m")
    newer = emitter.emit("two", "m")
    assert [n.id for n in center] == [newer.id, older.id]
    assert center.unread_count == 2


def test_sort_for_display_unread_first_then_newest() -> None:
    notes = [_note("read-new", 1, read=True), _note("unread-old", 24), _note("unread-new", 2)]
    assert [n.id for n in sort_for_display(notes)] == ["unread-new", "unread-old", "read-new"]


def test_center_read_state_and_clear() -> None:
    center = NotificationCenter([_note("a", 1), _note("b", 2), _note("c", 3, read=True)])
    assert center.unread_count == 2

    center.mark_as_read("a")
    assert center.unread_count == 1
    center.mark_as_read("missing")
    assert center.unread_count == 1

    center.mark_all_as_read()
    assert center.unread_count == 0

    center.clear("b")
    assert [n.id for n in center] == ["a", "c"]
    center.clear_all()
    assert len(center) == 0
    assert center.to_dataframe().empty


@pytest.mark.parametrize(
    ("delta", "expected"),
    [
        (timedelta(seconds=30), "Just now"),
        (timedelta(minutes=1), "1 minute ago"),
        (timedelta(minutes=45), "45 minutes ago"),
        (timedelta(hours=2), "2 hours ago"),
        (timedelta(days=1), "1 day ago"),
        (timedelta(days=6), "6 days ago"),
        (timedelta(days=10), "2024-05-22"),
    ],
)
def test_format_time_ago(delta: timedelta, expected: str) -> None:
    assert format_time_ago(NOW - delta, NOW) == expected
