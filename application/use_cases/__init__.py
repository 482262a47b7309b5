"""
Use cases for HevySpotter.

- SyncCoordinator: cache-or-fetch workout sync with observable state
- AnalyzeWorkouts: coaching analysis of recent sessions
- GenerateRoutine: AI routine design validated against the catalog
"""

from application.use_cases.analyze_workouts import AnalyzeWorkouts
from application.use_cases.generate_routine import (
    GenerateRoutine,
    build_routine_payload,
    filter_valid_exercises,
    normalize_sets,
)
from application.use_cases.sync_workouts import (
    CoordinatorRegistry,
    SyncCoordinator,
    SyncState,
    SyncStatus,
)

__all__ = [
    "AnalyzeWorkouts",
    "CoordinatorRegistry",
    "GenerateRoutine",
    "SyncCoordinator",
    "SyncState",
    "SyncStatus",
    "build_routine_payload",
    "filter_valid_exercises",
    "normalize_sets",
]
