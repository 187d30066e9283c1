import json
import re
import sqlite3
from datetime import datetime

import pytest

from notiflog import capture
from notiflog.capture import (
    NotificationPayload,
    PostedNotification,
    format_time,
    listen,
    on_notification_posted,
)

TIME_RE = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$")


def test_format_time():
    assert format_time(datetime(2024, 1, 1, 10, 5, 9)) == "2024-01-01 10:05:09"


def test_format_time_defaults_to_now():
    assert TIME_RE.match(format_time())


def test_posts_title_and_text(store):
    on_notification_posted({"notification": {"title": "Mail", "text": "New message"}}, store)

    [entry] = store.list_all()
    assert entry.title == "Mail"
    assert entry.text == "New message"
    assert TIME_RE.match(entry.time)


def test_missing_title_defaults_to_unknown(store):
    on_notification_posted({"notification": {"title": None, "text": "hi"}}, store)

    [entry] = store.list_all()
    assert entry.title == "Unknown"
    assert entry.text == "hi"


def test_missing_text_defaults_to_empty(store):
    on_notification_posted({"notification": {"title": "Mail"}}, store)

    [entry] = store.list_all()
    assert entry.title == "Mail"
    assert entry.text == ""


def test_empty_payload_uses_both_defaults(store):
    on_notification_posted(PostedNotification(notification=NotificationPayload()), store)

    [entry] = store.list_all()
    assert (entry.title, entry.text) == ("Unknown", "")


def test_empty_strings_are_kept(store):
    on_notification_posted({"notification": {"title": "", "text": ""}}, store)

    [entry] = store.list_all()
    assert entry.title == ""


@pytest.mark.parametrize("event", [
    None,
    {},
    {"notification": None},
    {"package": "org.example.mail"},
    PostedNotification(),
    {"notification": "not an object"},
    "not an event",
    42,
])
def test_absent_or_malformed_events_are_skipped(store, event):
    on_notification_posted(event, store)
    assert store.list_all() == []


@pytest.mark.parametrize("payload, expected", [
    ({"title": 12345, "text": "hi"}, ("Unknown", "hi")),
    ({"title": ["not", "text"], "text": "body"}, ("Unknown", "body")),
    ({"title": "Mail", "text": {"nested": True}}, ("Mail", "")),
    ({"title": 1.5, "text": None}, ("Unknown", "")),
])
def test_non_text_metadata_uses_defaults(store, payload, expected):
    assert on_notification_posted({"notification": payload}, store) is True

    [entry] = store.list_all()
    assert (entry.title, entry.text) == expected


def test_skipped_event_reports_false(store):
    assert on_notification_posted({"notification": None}, store) is False


def test_extra_fields_are_ignored(store):
    on_notification_posted(
        {"package": "org.example.chat", "key": "0|chat|1", "notification": {"title": "Chat", "text": "Ping", "priority": 2}},
        store,
    )

    [entry] = store.list_all()
    assert (entry.title, entry.text) == ("Chat", "Ping")


def test_time_is_capture_time(store, monkeypatch):
    monkeypatch.setattr(capture, "format_time", lambda moment=None: "2030-05-06 07:08:09")

    on_notification_posted({"notification": {"title": "Mail", "text": "x"}}, store)

    assert store.list_all()[0].time == "2030-05-06 07:08:09"


def test_uses_configured_store_by_default(isolated_env):
    from notiflog.db import LogStore

    on_notification_posted({"notification": {"title": "Mail"}})

    store = LogStore(isolated_env / "data" / "logs.db")
    assert [e.title for e in store.list_all()] == ["Mail"]


def test_storage_errors_propagate(tmp_path):
    class BrokenStore:
        def append(self, title, text, time):
            raise sqlite3.OperationalError("disk I/O error")

    with pytest.raises(sqlite3.OperationalError):
        on_notification_posted({"notification": {"title": "Mail"}}, BrokenStore())


def test_listen_preserves_delivery_order(store):
    lines = [
        json.dumps({"notification": {"title": "first"}}),
        "",
        json.dumps({"notification": {"title": "second", "text": "b"}}),
        "{not json",
        json.dumps({"notification": None}),
        json.dumps({"notification": {"title": "third"}}),
    ]

    consumed = listen(lines, store)

    assert consumed == 5
    assert [e.title for e in store.list_all()] == ["third", "second", "first"]
