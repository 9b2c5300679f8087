"""Runner use cases: registration and renaming."""

import uuid

import structlog

from ..core.entities import Runner
from ..core.errors import RunnerNotFoundError
from ..core.repositories import RunnerRepository
from .notification import Notification, NotificationService

logger = structlog.get_logger()

DEFAULT_WELCOME_SUBJECT = "Welcome {name}"
DEFAULT_WELCOME_MESSAGE = "Welcome to the race tracker service!"


class RunnerService:
    """Application service for runner operations."""

    def __init__(
        self,
        repository: RunnerRepository,
        notification_service: NotificationService,
        welcome_subject_template: str = DEFAULT_WELCOME_SUBJECT,
        welcome_message: str = DEFAULT_WELCOME_MESSAGE,
    ):
        """Initialize the runner service.

        Args:
            repository: Runner storage
            notification_service: Sender for the welcome notification
            welcome_subject_template: Subject format string, receives ``name``
            welcome_message: Body of the welcome notification
        """
        self.repository = repository
        self.notification_service = notification_service
        self.welcome_subject_template = welcome_subject_template
        self.welcome_message = welcome_message

    async def create_runner(self, name: str, email: str) -> uuid.UUID:
        """Register a new runner and send a best-effort welcome notification.

        Args:
            name: Runner name
            email: Runner email address

        Returns:
            The new runner's ID

        Raises:
            EmptyNameError: If the name is empty
            InvalidEmailError: If the email address is malformed
            Exception: Whatever the repository raises when storing fails
        """
        runner = Runner.create(name, email)

        await self.repository.add(runner)

        logger.info("Created runner", runner_id=str(runner.id))

        await self._send_welcome(runner)

        return runner.id

    async def rename_runner(self, runner_id: uuid.UUID, new_name: str) -> None:
        """Rename a stored runner.

        Raises:
            RunnerNotFoundError: If the runner is not stored
            EmptyNameError: If the new name is empty
        """
        runner = await self.repository.get_by_id(runner_id)
        if runner is None:
            raise RunnerNotFoundError(f"runner with ID {runner_id} not found")

        runner.rename(new_name)

        await self.repository.update(runner)

        logger.info("Renamed runner", runner_id=str(runner_id))

    async def _send_welcome(self, runner: Runner) -> None:
        """Notify the runner; failures are logged and never propagated."""
        try:
            notification = Notification(
                email_address=str(runner.email_address),
                subject=self.welcome_subject_template.format(name=runner.name),
                message=self.welcome_message,
            )
            await self.notification_service.notify(notification)
        except Exception as e:
            logger.warning(
                "Failed to send welcome notification",
                runner_id=str(runner.id),
                error=str(e),
            )
