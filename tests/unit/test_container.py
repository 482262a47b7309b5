"""
Unit tests for the composition root.
"""

import pytest

from backend.container import Container
from domain.models import UserSettings
from infrastructure import HevyClient
from services.llm import OpenAICoachClient


@pytest.fixture
def env_settings(test_settings):
    return test_settings.model_copy(update={"hevy_api_key": "env-hevy", "openai_api_key": "env-openai"})


@pytest.mark.unit
class TestContainer:
    def test_environment_credentials_used_when_nothing_stored(self, env_settings, store):
        user = Container(env_settings, store=store).user_settings()
        assert user.hevy_api_key == "env-hevy"
        assert user.openai_api_key == "env-openai"

    def test_stored_credentials_override_environment(self, env_settings, store):
        container = Container(env_settings, store=store)
        container.settings_store.save(UserSettings(hevy_api_key="stored-hevy"))
        user = container.user_settings()
        assert user.hevy_api_key == "stored-hevy"
        assert user.openai_api_key == "env-openai"

    def test_clients_only_with_keys(self, test_settings, store):
        container = Container(test_settings, store=store)
        assert container.hevy_client(None) is None
        assert container.coach_client("") is None
        assert isinstance(container.hevy_client("k"), HevyClient)
        assert isinstance(container.coach_client("sk-test"), OpenAICoachClient)

    def test_coordinator_follows_credential(self, test_settings, store):
        container = Container(test_settings, store=store)
        assert container.coordinator().credential is None

        container.settings_store.save(UserSettings(hevy_api_key="key-a"))
        first = container.coordinator()
        assert first.credential == "key-a"
        assert container.coordinator() is first

        container.settings_store.save(UserSettings(hevy_api_key="key-b"))
        assert container.coordinator() is not first
