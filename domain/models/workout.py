"""
Simplified workout models.

A SimplifiedWorkout is the display-ready shape derived from a raw Hevy
workout. It is what the local cache stores and what analytics and the
coaching prompts consume.

The cached JSON uses the camelCase keys of the original dashboard
(``startTime``, ``durationMinutes``); both spellings are accepted on read.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SetRecord(BaseModel):
    """Structured set data kept alongside the rendered summary string."""

    model_config = ConfigDict(frozen=True)

    type: str = "normal"
    weight_kg: Optional[float] = None
    reps: Optional[int] = None
    distance_meters: Optional[float] = None
    duration_seconds: Optional[float] = None
    rpe: Optional[float] = None

    @property
    def volume_kg(self) -> float:
        """Weight x reps, or 0 when either is missing."""
        if not self.weight_kg or not self.reps:
            return 0.0
        return self.weight_kg * self.reps


class SimplifiedExercise(BaseModel):
    """An exercise with display summaries for each set."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    sets: List[str] = Field(default_factory=list)
    set_records: List[SetRecord] = Field(default_factory=list, alias="setRecords")


class SimplifiedWorkout(BaseModel):
    """
    Display-oriented workout.

    Invariants:
        - duration_minutes is never negative
        - date is the calendar day of start_time as written by the source
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date: str
    start_time: str = Field(alias="startTime")
    title: str = ""
    duration_minutes: int = Field(default=0, ge=0, alias="durationMinutes")
    exercises: List[SimplifiedExercise] = Field(default_factory=list)


class CacheEntry(BaseModel):
    """Persisted workout cache blob: epoch-millisecond timestamp plus payload."""

    timestamp: int = Field(description="Write time in epoch milliseconds")
    workouts: List[SimplifiedWorkout] = Field(default_factory=list)
