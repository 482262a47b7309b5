"""
Domain models for HevySpotter.

Pure value objects, independent of infrastructure concerns:
- HevyWorkout / HevyExercise / HevySet: raw Hevy payloads
- SimplifiedWorkout: display-ready workout derived from a raw one
- CacheEntry: persisted workout cache blob
- AnalysisResult: coaching analysis from the language model
- ExerciseTemplate / GeneratedRoutine: catalog entries and AI routines
- UserSettings: credentials and coaching preferences
"""

from domain.models.analysis import AnalysisResult
from domain.models.hevy import HevyExercise, HevySet, HevyWorkout
from domain.models.routine import (
    ExerciseTemplate,
    GeneratedExercise,
    GeneratedRoutine,
    RoutineCreationResult,
    RoutineFolder,
    RoutineSet,
)
from domain.models.user_settings import DEFAULT_COACH_TEMPLATE_ID, UserSettings
from domain.models.workout import (
    CacheEntry,
    SetRecord,
    SimplifiedExercise,
    SimplifiedWorkout,
)

__all__ = [
    "AnalysisResult",
    "CacheEntry",
    "DEFAULT_COACH_TEMPLATE_ID",
    "ExerciseTemplate",
    "GeneratedExercise",
    "GeneratedRoutine",
    "HevyExercise",
    "HevySet",
    "HevyWorkout",
    "RoutineCreationResult",
    "RoutineFolder",
    "RoutineSet",
    "SetRecord",
    "SimplifiedExercise",
    "SimplifiedWorkout",
    "UserSettings",
]
