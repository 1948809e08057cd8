"""Fire-and-forget delivery of notifications to a user-configured program."""

from __future__ import annotations

import logging
import subprocess
from typing import Sequence

from agent_notifier.config import NotifierConfig
from agent_notifier.events.codec import serialize_notification
from agent_notifier.events.types import Notification
from agent_notifier.exceptions import NotificationEncodeError, NotifierLaunchError

logger = logging.getLogger(__name__)


class UserNotifier:
    """Passes each notification as a JSON argument to an external program.

    The program is started as ``<executable> [<fixed-args>...] <json-payload>``
    and never waited on. Its output and exit status are ignored.
    """

    def __init__(self, notify_command: Sequence[str] | None = None) -> None:
        self._notify_command = (
            tuple(notify_command) if notify_command is not None else None
        )

    @classmethod
    def from_config(cls, config: NotifierConfig) -> UserNotifier:
        return cls(config.notify)

    @property
    def notify_command(self) -> tuple[str, ...] | None:
        return self._notify_command

    @property
    def enabled(self) -> bool:
        return bool(self._notify_command)

    def notify(self, notification: Notification) -> None:
        """Deliver a notification, best effort.

        Never raises: an unserializable notification is logged at error level
        and a program that cannot be started is logged at warning level.
        """
        try:
            self.launch(notification)
        except NotificationEncodeError:
            logger.error("Failed to serialize notification payload", exc_info=True)
        except NotifierLaunchError as exc:
            logger.warning(
                "Failed to spawn notifier '%s': %s", exc.executable, exc.__cause__
            )

    def launch(self, notification: Notification) -> subprocess.Popen[bytes] | None:
        """Start the notify program for a notification without waiting on it.

        Returns:
            The child process handle, or None when no command is configured.

        Raises:
            NotificationEncodeError: If the notification cannot be serialized.
            NotifierLaunchError: If the program cannot be started.
        """
        if not self._notify_command:
            return None

        payload = serialize_notification(notification)
        executable, *fixed_args = self._notify_command
        argv = [executable, *fixed_args, payload]

        try:
            # No pipes: a child that writes a lot must never block on us.
            process = subprocess.Popen(
                argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except (OSError, ValueError) as exc:
            raise NotifierLaunchError(
                f"Failed to spawn notifier '{executable}': {exc}", executable
            ) from exc

        logger.debug(
            "Spawned notifier '%s' (pid %s) for %s",
            executable,
            process.pid,
            notification.type,
        )
        return process
