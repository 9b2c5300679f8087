"""Tests for the race tracker service."""
