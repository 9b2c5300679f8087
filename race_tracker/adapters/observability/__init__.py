"""Observability adapters for the race tracker service."""

from .structured_logging import configure_logging

__all__ = ["configure_logging"]
