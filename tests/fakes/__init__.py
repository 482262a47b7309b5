"""
Fake port implementations for testing.

This package provides in-memory fakes of the application ports for fast,
isolated tests. No network, no filesystem.

Usage:
    from tests.fakes import FakeWorkoutSource, FakeCoachClient, InMemoryKeyValueStore

    source = FakeWorkoutSource(workouts=[make_hevy_workout()])
    store = InMemoryKeyValueStore()
"""

from tests.fakes.coach_client import FakeCoachClient
from tests.fakes.key_value_store import InMemoryKeyValueStore
from tests.fakes.workout_source import FakeWorkoutSource

__all__ = [
    "FakeCoachClient",
    "FakeWorkoutSource",
    "InMemoryKeyValueStore",
]
