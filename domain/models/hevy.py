"""
Raw Hevy API payload models.

These mirror the subset of the Hevy public API that the dashboard reads.
The models are deliberately lenient: every field is optional or defaulted
and unknown fields are ignored, so upstream additions never break a sync.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class HevySet(BaseModel):
    """A single logged set. All measurements are optional and unit-tagged."""

    model_config = ConfigDict(extra="ignore")

    index: Optional[int] = None
    type: str = "normal"
    weight_kg: Optional[float] = None
    reps: Optional[int] = None
    distance_meters: Optional[float] = None
    duration_seconds: Optional[float] = None
    rpe: Optional[float] = None


class HevyExercise(BaseModel):
    """An exercise inside a logged workout, with its ordered sets."""

    model_config = ConfigDict(extra="ignore")

    title: str = ""
    notes: Optional[str] = None
    sets: List[HevySet] = Field(default_factory=list)


class HevyWorkout(BaseModel):
    """A logged workout as returned by ``GET /v1/workouts``."""

    model_config = ConfigDict(extra="ignore")

    id: str = ""
    title: str = ""
    description: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    exercises: List[HevyExercise] = Field(default_factory=list)
