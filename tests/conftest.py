"""Shared pytest fixtures for race tracker tests."""

from unittest.mock import AsyncMock

import pytest

from race_tracker.adapters.storage.memory import InMemoryRaceRepository, InMemoryRunnerRepository
from race_tracker.application.notification import Notification
from race_tracker.application.race_service import RaceService
from race_tracker.application.runner_service import RunnerService


class RecordingNotificationService:
    """Notification sender that keeps every notification for assertions."""

    def __init__(self):
        self.sent: list[Notification] = []

    async def notify(self, notification: Notification) -> None:
        self.sent.append(notification)


class FailingNotificationService:
    """Notification sender whose every delivery fails."""

    def __init__(self):
        self.attempts = 0

    async def notify(self, notification: Notification) -> None:
        self.attempts += 1
        raise ConnectionError("smtp server unavailable")


@pytest.fixture
def runner_repository():
    """Fresh in-memory runner repository."""
    return InMemoryRunnerRepository()


@pytest.fixture
def race_repository():
    """Fresh in-memory race repository."""
    return InMemoryRaceRepository()


@pytest.fixture
def notification_service():
    """Recording notification sender."""
    return RecordingNotificationService()


@pytest.fixture
def failing_notification_service():
    """Notification sender that always raises."""
    return FailingNotificationService()


@pytest.fixture
def runner_service(runner_repository, notification_service):
    """Runner service over in-memory storage."""
    return RunnerService(runner_repository, notification_service)


@pytest.fixture
def race_service(race_repository):
    """Race service over in-memory storage."""
    return RaceService(race_repository)


@pytest.fixture
def mock_race_repository():
    """Race repository double for asserting which calls were made."""
    repo = AsyncMock()
    repo.get_race_results.return_value = []
    return repo


@pytest.fixture
def mock_runner_repository():
    """Runner repository double for asserting which calls were made."""
    return AsyncMock()
