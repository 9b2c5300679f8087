"""Outbound notification contract used by the application services."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class Notification:
    """A message addressed to a runner."""

    email_address: str
    subject: str
    message: str


class NotificationService(Protocol):
    """Protocol for notification senders (console, log, email, ...)."""

    async def notify(self, notification: Notification) -> None:
        """Send a notification.

        Senders may raise on failure; callers decide whether that is fatal.
        """
        ...
