"""
Activity heatmap bucketing.

Builds a trailing window of 53 Monday-start weeks ending with the week
that contains "today", sums workout minutes per calendar day and maps each
day to an intensity level. Also derives the weekday and duration insights
shown next to the calendar.
"""

import calendar
from collections import defaultdict
from datetime import date, timedelta
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from core.constants import HEATMAP_WEEKS
from domain.models import SimplifiedWorkout

# Sunday-first, matching the weekday index used for tie-breaks
WEEKDAY_NAMES = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]

# Minimum workouts before a "most active day" insight is meaningful
MIN_WORKOUTS_FOR_INSIGHT = 5


class HeatmapDay(BaseModel):
    date: str
    minutes: int
    level: int = Field(ge=0, le=4)
    day_index: int = Field(ge=0, le=6, description="0 = Monday")


class MonthLabel(BaseModel):
    label: str
    week_index: int


class HeatmapInsights(BaseModel):
    most_active_day: str
    most_active_share: int = Field(description="Percent of workouts on the most active day")
    least_active_day: str
    least_active_share: int = Field(description="Percent of workouts on the least active day")
    total_workouts: int
    avg_workouts_per_week: float
    total_minutes: int
    avg_minutes_per_workout: int
    has_enough_data: bool


class Heatmap(BaseModel):
    weeks: List[List[HeatmapDay]]
    month_labels: List[MonthLabel]
    insights: HeatmapInsights


def _round_half_up(value: float) -> int:
    return int(value + 0.5) if value >= 0 else -int(-value + 0.5)


def intensity_level(minutes: float) -> int:
    """
    Map total daily minutes to a heatmap level.

    0 -> 0, (0, 20] -> 1, (20, 40] -> 2, (40, 70] -> 3, above 70 -> 4.
    """
    if minutes <= 0:
        return 0
    if minutes <= 20:
        return 1
    if minutes <= 40:
        return 2
    if minutes <= 70:
        return 3
    return 4


def _weekday_counts(workouts: List[SimplifiedWorkout]) -> List[int]:
    counts = [0] * 7
    for workout in workouts:
        try:
            day = date.fromisoformat(workout.date)
        except ValueError:
            continue
        counts[(day.weekday() + 1) % 7] += 1
    return counts


def build_insights(workouts: List[SimplifiedWorkout]) -> HeatmapInsights:
    """Weekday frequency and duration statistics over all workouts."""
    total = len(workouts)
    counts = _weekday_counts(workouts)

    # strict comparisons keep the first index on ties
    most = 0
    for idx, count in enumerate(counts):
        if count > counts[most]:
            most = idx
    least = 0
    for idx, count in enumerate(counts):
        if count < counts[least]:
            least = idx

    total_minutes = sum(w.duration_minutes for w in workouts)

    return HeatmapInsights(
        most_active_day=WEEKDAY_NAMES[most],
        most_active_share=_round_half_up(counts[most] / total * 100) if total else 0,
        least_active_day=WEEKDAY_NAMES[least],
        least_active_share=_round_half_up(counts[least] / total * 100) if total else 0,
        total_workouts=total,
        avg_workouts_per_week=round(total / HEATMAP_WEEKS, 1),
        total_minutes=total_minutes,
        avg_minutes_per_workout=_round_half_up(total_minutes / total) if total else 0,
        has_enough_data=total > MIN_WORKOUTS_FOR_INSIGHT,
    )


def build_heatmap(
    workouts: List[SimplifiedWorkout],
    today: Optional[date] = None,
) -> Heatmap:
    """
    Build the activity calendar.

    Args:
        workouts: Simplified workouts in any order
        today: Anchor day (defaults to the local date)

    Returns:
        Heatmap with HEATMAP_WEEKS weeks of 7 days, oldest week first
    """
    today = today or date.today()

    daily_minutes: Dict[str, int] = defaultdict(int)
    for workout in workouts:
        daily_minutes[workout.date] += workout.duration_minutes

    current_monday = today - timedelta(days=today.weekday())
    start = current_monday - timedelta(weeks=HEATMAP_WEEKS - 1)

    weeks: List[List[HeatmapDay]] = []
    month_labels: List[MonthLabel] = []
    for week_index in range(HEATMAP_WEEKS):
        week_start = start + timedelta(weeks=week_index)
        label = calendar.month_abbr[week_start.month]
        if not month_labels or month_labels[-1].label != label:
            month_labels.append(MonthLabel(label=label, week_index=week_index))

        week = []
        for day_index in range(7):
            key = (week_start + timedelta(days=day_index)).isoformat()
            minutes = daily_minutes.get(key, 0)
            week.append(
                HeatmapDay(
                    date=key,
                    minutes=minutes,
                    level=intensity_level(minutes),
                    day_index=day_index,
                )
            )
        weeks.append(week)

    return Heatmap(weeks=weeks, month_labels=month_labels, insights=build_insights(workouts))
