"""
Monthly training volume.

Sums weight x reps per calendar month over a fixed 12-month trailing
window (current month inclusive), oldest month first, zero-filled.

Volume is computed from the structured set records when a workout carries
them. Workouts restored from an older cache only have the display strings;
for those each "80kg x 8 reps" summary is parsed best-effort and anything
unparseable contributes zero.
"""

import calendar
from datetime import date
from typing import Dict, List, Optional

from pydantic import BaseModel

from core.constants import VOLUME_MONTHS
from domain.converters import SET_SEPARATOR
from domain.models import SimplifiedExercise, SimplifiedWorkout


class VolumePoint(BaseModel):
    month: str
    label: str
    volume: float


def parse_set_volume(summary: str) -> float:
    """
    Best-effort volume of a set summary string.

    >>> parse_set_volume("80kg x 8 reps")
    640.0
    >>> parse_set_volume("bodyweight")
    0.0
    """
    parts = summary.split(SET_SEPARATOR)
    if len(parts) < 2:
        return 0.0
    try:
        weight = float(parts[0].replace("kg", "").strip())
        reps = float(parts[1].replace(" reps", "").strip())
    except ValueError:
        return 0.0
    return weight * reps


def exercise_volume(exercise: SimplifiedExercise) -> float:
    if exercise.set_records:
        return sum(record.volume_kg for record in exercise.set_records)
    return sum(parse_set_volume(s) for s in exercise.sets)


def workout_volume(workout: SimplifiedWorkout) -> float:
    """Total weight x reps across all exercises of a workout."""
    return sum(exercise_volume(ex) for ex in workout.exercises)


def _trailing_months(today: date, count: int) -> List[str]:
    keys = []
    for offset in range(count - 1, -1, -1):
        month_index = today.year * 12 + (today.month - 1) - offset
        year, month = divmod(month_index, 12)
        keys.append(f"{year:04d}-{month + 1:02d}")
    return keys


def build_volume_series(
    workouts: List[SimplifiedWorkout],
    today: Optional[date] = None,
) -> List[VolumePoint]:
    """
    Build the monthly volume trend.

    Args:
        workouts: Simplified workouts in any order
        today: Anchor day (defaults to the local date)

    Returns:
        VOLUME_MONTHS points ordered oldest to newest
    """
    today = today or date.today()
    totals: Dict[str, float] = {key: 0.0 for key in _trailing_months(today, VOLUME_MONTHS)}

    for workout in workouts:
        key = workout.date[:7]
        if key in totals:
            totals[key] += workout_volume(workout)

    return [
        VolumePoint(
            month=key,
            label=calendar.month_abbr[int(key[5:7])],
            volume=volume,
        )
        for key, volume in totals.items()
    ]
