"""Test doubles for the selection core."""

from tests.mocks.scheduler import FakeScheduler

__all__ = ["FakeScheduler"]
