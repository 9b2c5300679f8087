"""Console notification sender."""

from dataclasses import asdict

import structlog

from ...application.notification import Notification

logger = structlog.get_logger()


class ConsoleNotificationService:
    """Writes notifications to the log instead of delivering them."""

    async def notify(self, notification: Notification) -> None:
        logger.info("Notification received", **asdict(notification))
