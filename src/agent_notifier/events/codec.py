"""JSON wire format for notifications.

The payload handed to the notify program is a compact JSON object: a ``type``
discriminant first, then the variant's fields in declaration order, all keys
hyphenated. Optional fields that are unset are left out rather than sent as
``null``.
"""

from __future__ import annotations

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from agent_notifier.events.types import NOTIFICATION_TYPES, Notification
from agent_notifier.exceptions import NotificationDecodeError, NotificationEncodeError

_NOTIFICATION_ADAPTER: TypeAdapter[Notification] = TypeAdapter(Notification)


def notification_type(notification: Notification) -> str:
    """Return the wire discriminant, e.g. ``agent-turn-complete``."""
    return notification.type


def serialize_notification(notification: Notification) -> str:
    """Serialize a notification to its canonical JSON payload.

    Raises:
        NotificationEncodeError: If the value is not a notification variant or
            pydantic cannot serialize it.
    """
    if not isinstance(notification, NOTIFICATION_TYPES):
        raise NotificationEncodeError(
            f"Unsupported notification type: {type(notification).__name__}"
        )

    try:
        return notification.model_dump_json(by_alias=True, exclude_none=True)
    except PydanticSerializationError as exc:
        raise NotificationEncodeError(f"Failed to serialize notification: {exc}") from exc


def parse_notification(payload: str | bytes) -> Notification:
    """Parse a JSON payload produced by :func:`serialize_notification`.

    Raises:
        NotificationDecodeError: If the payload is not valid JSON, names an
            unknown ``type``, or breaks a variant's field rules.
    """
    try:
        return _NOTIFICATION_ADAPTER.validate_json(payload)
    except ValidationError as exc:
        raise NotificationDecodeError(f"Invalid notification payload: {exc}") from exc
