"""Observer protocol and implementations for notification delivery."""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol, Sequence

from agent_notifier.events.types import Notification
from agent_notifier.notifier import UserNotifier

logger = logging.getLogger(__name__)


class Observer(Protocol):
    """Receives session lifecycle notifications with a single emit method."""

    async def emit(self, notification: Notification) -> None: ...


class NullObserver:
    """No-op observer that discards all notifications."""

    async def emit(self, notification: Notification) -> None:
        pass


class NotifierObserver:
    """Forward notifications to a :class:`UserNotifier`."""

    def __init__(self, notifier: UserNotifier) -> None:
        self._notifier = notifier

    @property
    def notifier(self) -> UserNotifier:
        return self._notifier

    async def emit(self, notification: Notification) -> None:
        self._notifier.notify(notification)


class CompositeObserver:
    """Fan-out observer that forwards notifications to multiple observers.

    If a child observer raises an exception, it is logged but does not
    prevent other observers from receiving the notification.
    """

    def __init__(self, observers: Sequence[Observer]) -> None:
        self._observers = list(observers)

    async def emit(self, notification: Notification) -> None:
        if not self._observers:
            return

        results = await asyncio.gather(
            *(observer.emit(notification) for observer in self._observers),
            return_exceptions=True,
        )
        for observer, result in zip(self._observers, results):
            if isinstance(result, Exception):
                logger.warning(
                    "Observer %s.emit raised %s: %s",
                    observer.__class__.__name__,
                    type(result).__name__,
                    result,
                )
