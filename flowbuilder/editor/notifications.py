"""Transient, auto-dismissing user notifications."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from ..config import ClearPolicy
from .scheduler import Scheduler

logger = logging.getLogger(__name__)


class NotificationType(str, Enum):
    """Severity of a notification."""

    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    """A message shown to the user until its timer clears it."""

    message: str
    type: NotificationType = NotificationType.SUCCESS
    token: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "type": self.type.value}


Listener = Callable[["Notification | None"], None]


class NotificationCenter:
    """Holds the currently displayed notification and clears it on a timer.

    Only one notification is displayed at a time; showing a new one
    replaces the current one. Every shown notification is kept in
    ``history``.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        delay: float = 3.0,
        clear_policy: ClearPolicy = "token",
    ):
        self._scheduler = scheduler
        self.delay = delay
        self.clear_policy = clear_policy
        self._current: Notification | None = None
        self._token = 0
        self._listeners: list[Listener] = []
        self.history: list[Notification] = []

    @property
    def current(self) -> Notification | None:
        """The notification on display, if any."""
        return self._current

    def subscribe(self, listener: Listener) -> None:
        """Register a callback invoked with each new display state."""
        self._listeners.append(listener)

    def show(
        self, message: str, type: NotificationType = NotificationType.SUCCESS
    ) -> Notification:
        """Display a notification and schedule its dismissal.

        Args:
            message: Text to show.
            type: Severity of the notification.

        Returns:
            The displayed notification.
        """
        self._token += 1
        notification = Notification(message=message, type=NotificationType(type), token=self._token)
        self.history.append(notification)
        self._set_current(notification)
        self._scheduler.call_later(self.delay, lambda: self._expire(notification.token))
        return notification

    def success(self, message: str) -> Notification:
        return self.show(message, NotificationType.SUCCESS)

    def error(self, message: str) -> Notification:
        return self.show(message, NotificationType.ERROR)

    def clear(self) -> None:
        """Dismiss the current notification immediately."""
        self._set_current(None)

    def _expire(self, token: int) -> None:
        if self._current is None:
            return
        if self.clear_policy == "token" and self._current.token != token:
            logger.debug("Timer %d expired after notification %d replaced it", token, self._current.token)
            return
        self._set_current(None)

    def _set_current(self, notification: Notification | None) -> None:
        self._current = notification
        for listener in self._listeners:
            listener(notification)
