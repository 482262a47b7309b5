"""Local persistence: a file-backed key-value store and typed caches over it."""

from infrastructure.storage.caches import (
    AnalysisCache,
    JsonSlot,
    UserSettingsStore,
    WorkoutCache,
    now_ms,
    workout_cache_key,
)
from infrastructure.storage.key_value_store import FileKeyValueStore

__all__ = [
    "AnalysisCache",
    "FileKeyValueStore",
    "JsonSlot",
    "UserSettingsStore",
    "WorkoutCache",
    "now_ms",
    "workout_cache_key",
]
