"""
Shared pytest fixtures for HevySpotter tests.
"""

import pytest

from backend.settings import Settings
from tests.factories import make_hevy_workout
from tests.fakes import FakeCoachClient, FakeWorkoutSource, InMemoryKeyValueStore


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def source() -> FakeWorkoutSource:
    return FakeWorkoutSource(workouts=[make_hevy_workout("w1"), make_hevy_workout("w2")])


@pytest.fixture
def coach() -> FakeCoachClient:
    return FakeCoachClient()


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Test settings isolated from the environment and the user's home."""
    return Settings(
        environment="test",
        hevy_api_key=None,
        openai_api_key=None,
        data_dir=tmp_path,
        _env_file=None,
    )
