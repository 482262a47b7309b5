"""
Domain converters.

- transform_workouts: raw Hevy workouts -> SimplifiedWorkout list
- format_set_summary: structured set -> display string

All converters are pure functions with no side effects.
"""

from domain.converters.hevy_to_workout import (
    SET_SEPARATOR,
    duration_minutes,
    format_set_summary,
    transform_workout,
    transform_workouts,
)

__all__ = [
    "SET_SEPARATOR",
    "duration_minutes",
    "format_set_summary",
    "transform_workout",
    "transform_workouts",
]
