"""
Composition root shared by the HTTP service and the CLI.

Builds the file-backed store, the coordinator registry and per-call
clients from explicit Settings. Stored user settings override the
environment credentials.
"""

import logging
from typing import Optional

from application.use_cases import (
    AnalyzeWorkouts,
    CoordinatorRegistry,
    GenerateRoutine,
    SyncCoordinator,
)
from backend.settings import Settings
from domain.models import UserSettings
from infrastructure import (
    AnalysisCache,
    FileKeyValueStore,
    HevyClient,
    UserSettingsStore,
    WorkoutCache,
)
from services.llm import OpenAICoachClient

logger = logging.getLogger(__name__)


class Container:
    """Long-lived components for one process."""

    def __init__(self, settings: Settings, store=None):
        """
        Args:
            settings: Application settings
            store: KeyValueStore override (defaults to FileKeyValueStore under data_dir)
        """
        self.settings = settings
        self.store = store if store is not None else FileKeyValueStore(settings.data_dir)
        self.settings_store = UserSettingsStore(self.store)
        self.analysis_cache = AnalysisCache(self.store)
        self.registry = CoordinatorRegistry(self._build_coordinator)

    # -------------------------------------------------------------------------
    # Credentials
    # -------------------------------------------------------------------------

    def user_settings(self) -> UserSettings:
        """Stored settings with environment credentials filled in where unset."""
        stored = self.settings_store.load()
        return stored.model_copy(
            update={
                "hevy_api_key": stored.hevy_api_key or self.settings.hevy_api_key,
                "openai_api_key": stored.openai_api_key or self.settings.openai_api_key,
            }
        )

    # -------------------------------------------------------------------------
    # Clients
    # -------------------------------------------------------------------------

    def hevy_client(self, api_key: Optional[str]) -> Optional[HevyClient]:
        if not api_key:
            return None
        return HevyClient(
            api_key,
            base_url=self.settings.hevy_api_base_url,
            timeout=self.settings.http_timeout_seconds,
        )

    def coach_client(self, api_key: Optional[str]) -> Optional[OpenAICoachClient]:
        if not api_key:
            return None
        return OpenAICoachClient(
            api_key,
            model=self.settings.openai_model,
            timeout=self.settings.http_timeout_seconds,
        )

    # -------------------------------------------------------------------------
    # Use cases
    # -------------------------------------------------------------------------

    def _build_coordinator(self, credential: Optional[str]) -> SyncCoordinator:
        if not credential:
            return SyncCoordinator(None, None, None)
        cache = WorkoutCache(
            self.store,
            credential,
            freshness_hours=self.settings.workout_cache_ttl_hours,
        )
        return SyncCoordinator(credential, self.hevy_client(credential), cache)

    def coordinator(self) -> SyncCoordinator:
        """Coordinator for the currently configured Hevy credential."""
        return self.registry.get(self.user_settings().hevy_api_key)

    def analyze_workouts(self) -> AnalyzeWorkouts:
        user = self.user_settings()
        return AnalyzeWorkouts(
            self.coach_client(user.openai_api_key),
            self.analysis_cache,
            philosophy=user.training_philosophy,
            coach_template_id=user.selected_template_id,
        )

    def generate_routine(self) -> GenerateRoutine:
        user = self.user_settings()
        return GenerateRoutine(
            self.hevy_client(user.hevy_api_key),
            self.coach_client(user.openai_api_key),
            philosophy=user.training_philosophy,
        )
