"""agent-notifier: forward agent session lifecycle events to an external program."""

from agent_notifier.config import NotifierConfig, load_notifier_config
from agent_notifier.events import (
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
    notification_type,
    parse_notification,
    serialize_notification,
)
from agent_notifier.exceptions import (
    AgentNotifierError,
    ConfigError,
    NotificationDecodeError,
    NotificationEncodeError,
    NotifierLaunchError,
)
from agent_notifier.notifier import UserNotifier
from agent_notifier.observer import (
    CompositeObserver,
    NotifierObserver,
    NullObserver,
    Observer,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "UserNotifier",
    "NotifierConfig",
    "load_notifier_config",
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
    "Observer",
    "NullObserver",
    "NotifierObserver",
    "CompositeObserver",
    "AgentNotifierError",
    "NotificationEncodeError",
    "NotificationDecodeError",
    "NotifierLaunchError",
    "ConfigError",
]
