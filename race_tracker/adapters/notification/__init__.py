"""Notification adapters for the race tracker service."""

from .console import ConsoleNotificationService

__all__ = ["ConsoleNotificationService"]
