"""
Exercise catalog and routine models.

ExerciseTemplate entries come from the Hevy exercise catalog and are used
as the validation set for AI-generated routines. GeneratedRoutine is the
shape the language model is asked to produce.
"""

import math
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ExerciseTemplate(BaseModel):
    """An entry of the Hevy exercise catalog."""

    model_config = ConfigDict(extra="ignore")

    id: str
    title: str = ""
    type: str = ""
    primary_muscle_group: Optional[str] = None


class RoutineFolder(BaseModel):
    """A Hevy routine folder."""

    model_config = ConfigDict(extra="ignore")

    id: int | str
    title: str = ""
    index: Optional[int] = None


def _coerce_number(value: Any, cast) -> Any:
    if value is None or value == "":
        return None
    try:
        number = float(str(value))
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return cast(number)


class RoutineSet(BaseModel):
    """A target set within a generated routine exercise."""

    model_config = ConfigDict(extra="ignore")

    type: str = "normal"
    weight_kg: Optional[float] = None
    reps: Optional[int] = None
    rpe: Optional[float] = None

    @field_validator("type", mode="before")
    @classmethod
    def default_type(cls, v: Any) -> str:
        return v or "normal"

    @field_validator("weight_kg", "rpe", mode="before")
    @classmethod
    def coerce_float(cls, v: Any) -> Optional[float]:
        return _coerce_number(v, float)

    @field_validator("reps", mode="before")
    @classmethod
    def coerce_int(cls, v: Any) -> Optional[int]:
        return _coerce_number(v, int)

    def to_payload(self) -> dict:
        """Request body shape for ``POST /v1/routines``; unset fields are omitted."""
        data: dict = {"type": self.type}
        if self.weight_kg:
            data["weight_kg"] = self.weight_kg
        if self.reps:
            data["reps"] = self.reps
        return data


class GeneratedExercise(BaseModel):
    """One exercise chosen by the language model."""

    model_config = ConfigDict(extra="ignore")

    exercise_template_id: str
    exercise_name: Optional[str] = None
    sets: List[RoutineSet] = Field(default_factory=list)


class GeneratedRoutine(BaseModel):
    """A routine designed by the language model, before catalog validation."""

    model_config = ConfigDict(extra="ignore")

    title: str
    exercises: List[GeneratedExercise] = Field(default_factory=list)


class RoutineCreationResult(BaseModel):
    """Outcome of writing a generated routine back to Hevy."""

    routine_id: Optional[str] = None
    title: str
    folder_id: int | str
    exercise_count: int
    skipped_template_ids: List[str] = Field(default_factory=list)
