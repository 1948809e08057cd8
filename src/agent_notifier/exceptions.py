"""Exception hierarchy for agent-notifier."""

from __future__ import annotations


class AgentNotifierError(Exception):
    """Base exception for all agent-notifier errors."""


class NotificationEncodeError(AgentNotifierError):
    """A notification could not be converted to its JSON payload."""


class NotificationDecodeError(AgentNotifierError):
    """A JSON payload is not a valid notification."""


class NotifierLaunchError(AgentNotifierError):
    """The configured notify program could not be started."""

    def __init__(self, message: str, executable: str) -> None:
        super().__init__(message)
        self.executable = executable


class ConfigError(AgentNotifierError):
    """Error loading or validating notifier configuration."""
