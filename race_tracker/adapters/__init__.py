"""Adapters layer for the race tracker service.

This layer contains the adapters that translate between the core domain
and external systems (storage, notification delivery, logging).
"""
