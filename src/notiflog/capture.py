"""
Capture module for Notiflog.

Turns "notification posted" events into log rows. This is the hot path:
one call per delivered notification, handled to completion before
returning. Nothing is queued, batched or reordered.
"""

import json
import logging
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from notiflog.db import LogStore

logger = logging.getLogger(__name__)

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

DEFAULT_TITLE = "Unknown"
DEFAULT_TEXT = ""


class NotificationPayload(BaseModel):
    """Metadata carried by a posted notification."""

    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    text: str | None = None

    @field_validator("title", "text", mode="before")
    @classmethod
    def _non_text_is_unset(cls, value: Any) -> str | None:
        # Non-text metadata is treated as unset
        return value if isinstance(value, str) else None


class PostedNotification(BaseModel):
    """A raw "notification posted" event as delivered by the host."""

    model_config = ConfigDict(extra="ignore")

    notification: NotificationPayload | None = None


def format_time(moment: datetime | None = None) -> str:
    """Format a moment (default: now) as local wall-clock time."""
    return (moment or datetime.now()).strftime(TIME_FORMAT)


def _coerce_event(event: Any) -> PostedNotification | None:
    """Validate a raw event. Malformed events come back as None."""
    if event is None or isinstance(event, PostedNotification):
        return event
    if not isinstance(event, Mapping):
        logger.debug("Skipping event of type %s", type(event).__name__)
        return None
    try:
        return PostedNotification.model_validate(event)
    except ValidationError as e:
        logger.debug("Skipping malformed event: %s", e)
        return None


def on_notification_posted(event: Any, store: LogStore | None = None) -> bool:
    """
    Log a single posted notification.

    Absent events, events without a notification payload and malformed
    events are skipped silently. Missing or non-text title/text are
    replaced with "Unknown" and "". The timestamp is taken now, not from
    the event.

    Storage errors are not caught.

    Args:
        event: PostedNotification, a mapping of the same shape, or None
        store: Target log store (default: LogStore at the configured path)

    Returns:
        True if a row was appended, False if the event was skipped
    """
    posted = _coerce_event(event)
    if posted is None or posted.notification is None:
        return False

    payload = posted.notification
    title = payload.title if payload.title is not None else DEFAULT_TITLE
    text = payload.text if payload.text is not None else DEFAULT_TEXT
    time = format_time()

    store = store or LogStore()
    store.append(title, text, time)
    return True


def listen(lines: Iterable[str], store: LogStore | None = None) -> int:
    """
    Consume JSON-lines events in delivery order.

    Each non-blank line is one event. Lines that are not valid JSON are
    skipped like any other malformed event.

    Returns the number of lines consumed.
    """
    store = store or LogStore()
    consumed = 0

    for line in lines:
        line = line.strip()
        if not line:
            continue
        consumed += 1

        try:
            event = json.loads(line)
        except json.JSONDecodeError as e:
            logger.debug("Skipping undecodable event line: %s", e)
            continue

        on_notification_posted(event, store)

    return consumed
