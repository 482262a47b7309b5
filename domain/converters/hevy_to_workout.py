"""
Converter: raw Hevy workouts to SimplifiedWorkout.

Pure, total and order-preserving: the i-th output corresponds to the i-th
input. Malformed timestamps never raise; they produce a zero duration.
"""

import logging
import math
from datetime import datetime
from typing import Any, Iterable, List, Optional, Union

from domain.models import (
    HevySet,
    HevyWorkout,
    SetRecord,
    SimplifiedExercise,
    SimplifiedWorkout,
)

logger = logging.getLogger(__name__)

SET_SEPARATOR = " x "


def _format_number(value: float) -> str:
    """Render 80.0 as "80" and 82.5 as "82.5"."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def format_set_summary(hevy_set: Union[HevySet, SetRecord]) -> str:
    """
    Render a set as a display string, e.g. "80kg x 8 reps x @RPE8".

    Only fields that are present (and non-zero) are included, always in the
    order weight, reps, distance, duration, RPE.
    """
    parts: List[str] = []
    if hevy_set.weight_kg:
        parts.append(f"{_format_number(hevy_set.weight_kg)}kg")
    if hevy_set.reps:
        parts.append(f"{hevy_set.reps} reps")
    if hevy_set.distance_meters:
        parts.append(f"{_format_number(hevy_set.distance_meters)}m")
    if hevy_set.duration_seconds:
        parts.append(f"{_format_number(hevy_set.duration_seconds)}s")
    if hevy_set.rpe:
        parts.append(f"@RPE{_format_number(hevy_set.rpe)}")
    return SET_SEPARATOR.join(parts)


def _parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def duration_minutes(start_time: Optional[str], end_time: Optional[str]) -> int:
    """
    Whole minutes between two ISO timestamps, rounded half up.

    Returns 0 when the end precedes the start or either timestamp is
    missing or unparseable.
    """
    start = _parse_timestamp(start_time)
    end = _parse_timestamp(end_time)
    if start is None or end is None:
        return 0
    try:
        seconds = (end - start).total_seconds()
    except TypeError:
        # naive and aware timestamps cannot be subtracted
        return 0
    minutes = math.floor(seconds / 60 + 0.5)
    return minutes if minutes > 0 else 0


def _to_set_record(hevy_set: HevySet) -> SetRecord:
    return SetRecord(
        type=hevy_set.type,
        weight_kg=hevy_set.weight_kg,
        reps=hevy_set.reps,
        distance_meters=hevy_set.distance_meters,
        duration_seconds=hevy_set.duration_seconds,
        rpe=hevy_set.rpe,
    )


def transform_workout(workout: HevyWorkout) -> SimplifiedWorkout:
    """Convert a single raw workout."""
    start_time = workout.start_time or ""
    return SimplifiedWorkout(
        date=start_time[:10],
        start_time=start_time,
        title=workout.title,
        duration_minutes=duration_minutes(workout.start_time, workout.end_time),
        exercises=[
            SimplifiedExercise(
                name=exercise.title,
                sets=[format_set_summary(s) for s in exercise.sets],
                set_records=[_to_set_record(s) for s in exercise.sets],
            )
            for exercise in workout.exercises
        ],
    )


def transform_workouts(data: Union[Iterable[Any], dict]) -> List[SimplifiedWorkout]:
    """
    Convert raw workouts to simplified workouts.

    Args:
        data: A list of HevyWorkout models or dicts (from fetch_all_workouts),
              or a single page response dict with a "workouts" key.

    Returns:
        Simplified workouts in input order
    """
    if isinstance(data, dict):
        data = data.get("workouts") or []

    simplified = []
    for item in data:
        workout = item if isinstance(item, HevyWorkout) else HevyWorkout.model_validate(item)
        simplified.append(transform_workout(workout))

    logger.debug(f"Transformed {len(simplified)} workouts")
    return simplified
