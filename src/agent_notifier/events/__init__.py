"""Notification variants and their JSON wire format."""

from agent_notifier.events.codec import (
    notification_type,
    parse_notification,
    serialize_notification,
)
from agent_notifier.events.types import (
    NOTIFICATION_TYPES,
    AgentTurnComplete,
    ApprovalRequested,
    ApprovalResponse,
    ApprovalType,
    Notification,
    SessionEnd,
    SessionStart,
    TurnCancelled,
    UserPromptSubmit,
)

__all__ = [
    "Notification",
    "NOTIFICATION_TYPES",
    "ApprovalType",
    "SessionStart",
    "SessionEnd",
    "UserPromptSubmit",
    "ApprovalRequested",
    "ApprovalResponse",
    "AgentTurnComplete",
    "TurnCancelled",
    "notification_type",
    "parse_notification",
    "serialize_notification",
]
