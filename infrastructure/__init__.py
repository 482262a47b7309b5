"""
Infrastructure layer for HevySpotter.

This package contains concrete implementations of the application ports:
- hevy_client: Hevy public API over httpx (WorkoutSource)
- storage/: file-backed key-value store and the typed caches built on it
"""

from infrastructure.hevy_client import HevyClient
from infrastructure.storage import (
    AnalysisCache,
    FileKeyValueStore,
    UserSettingsStore,
    WorkoutCache,
)

__all__ = [
    "AnalysisCache",
    "FileKeyValueStore",
    "HevyClient",
    "UserSettingsStore",
    "WorkoutCache",
]
