"""
Unit tests for the Hevy to SimplifiedWorkout converter.
"""

import pytest

from domain.converters import transform_workouts
from domain.converters.hevy_to_workout import duration_minutes, format_set_summary
from domain.models import HevySet
from tests.factories import make_hevy_workout


@pytest.mark.unit
class TestFormatSetSummary:
    def test_weight_and_reps(self):
        assert format_set_summary(HevySet(weight_kg=80, reps=8)) == "80kg x 8 reps"

    def test_fractional_weight_keeps_decimal(self):
        assert format_set_summary(HevySet(weight_kg=82.5, reps=5)) == "82.5kg x 5 reps"

    def test_all_fields_in_fixed_order(self):
        summary = format_set_summary(
            HevySet(weight_kg=20, reps=12, distance_meters=400, duration_seconds=90, rpe=8)
        )
        assert summary == "20kg x 12 reps x 400m x 90s x @RPE8"

    def test_bodyweight_set_has_only_reps(self):
        assert format_set_summary(HevySet(reps=15)) == "15 reps"

    def test_cardio_set(self):
        assert format_set_summary(HevySet(distance_meters=5000, duration_seconds=1500)) == "5000m x 1500s"

    def test_empty_set_is_empty_string(self):
        assert format_set_summary(HevySet()) == ""


@pytest.mark.unit
class TestDurationMinutes:
    def test_one_hour(self):
        assert duration_minutes("2024-03-05T18:00:00Z", "2024-03-05T19:00:00Z") == 60

    def test_rounds_half_up(self):
        assert duration_minutes("2024-03-05T18:00:00Z", "2024-03-05T18:00:30Z") == 1
        assert duration_minutes("2024-03-05T18:00:00Z", "2024-03-05T18:00:29Z") == 0

    def test_end_before_start_is_zero(self):
        assert duration_minutes("2024-03-05T19:00:00Z", "2024-03-05T18:00:00Z") == 0

    def test_missing_or_malformed_is_zero(self):
        assert duration_minutes(None, "2024-03-05T18:00:00Z") == 0
        assert duration_minutes("yesterday", "2024-03-05T18:00:00Z") == 0

    def test_offsets_are_respected(self):
        assert duration_minutes("2024-03-05T18:00:00+01:00", "2024-03-05T18:00:00Z") == 60


@pytest.mark.unit
class TestTransformWorkouts:
    def test_preserves_order_and_length(self):
        raw = [make_hevy_workout(f"w{i}", title=f"Workout {i}") for i in range(5)]
        result = transform_workouts(raw)
        assert [w.title for w in result] == [f"Workout {i}" for i in range(5)]

    def test_accepts_page_response(self):
        result = transform_workouts({"page": 1, "workouts": [make_hevy_workout()]})
        assert len(result) == 1

    def test_date_is_prefix_of_start_time(self):
        result = transform_workouts([make_hevy_workout(start_time="2024-12-31T23:30:00-05:00")])
        assert result[0].date == "2024-12-31"
        assert result[0].start_time == "2024-12-31T23:30:00-05:00"

    def test_duration_never_negative(self):
        raw = make_hevy_workout(start_time="2024-03-05T19:00:00Z", end_time="2024-03-05T18:00:00Z")
        assert transform_workouts([raw])[0].duration_minutes == 0

    def test_sets_and_records_align(self):
        workout = transform_workouts([make_hevy_workout()])[0]
        exercise = workout.exercises[0]
        assert exercise.name == "Bench Press (Barbell)"
        assert exercise.sets == ["80kg x 8 reps", "80kg x 6 reps x @RPE8"]
        assert [r.volume_kg for r in exercise.set_records] == [640, 480]

    def test_missing_fields_do_not_raise(self):
        result = transform_workouts([{"id": "x"}])
        assert result[0].date == ""
        assert result[0].duration_minutes == 0
        assert result[0].exercises == []

    def test_empty_input(self):
        assert transform_workouts([]) == []
        assert transform_workouts({}) == []
