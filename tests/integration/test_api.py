"""
Integration tests for the HTTP API.

Runs the full FastAPI app with an in-memory store; remote ports are
replaced with fakes through dependency_overrides.
"""

import pytest
from fastapi.testclient import TestClient

from api.deps import get_analyze_workouts, get_coordinator, get_generate_routine
from application.exceptions import AuthError, RemoteError
from application.use_cases import (
    AnalyzeWorkouts,
    CoordinatorRegistry,
    GenerateRoutine,
    SyncCoordinator,
)
from backend.main import create_app
from domain.models import ExerciseTemplate, GeneratedExercise, GeneratedRoutine, RoutineSet
from infrastructure.storage import AnalysisCache, WorkoutCache
from tests.factories import make_hevy_workout
from tests.fakes import FakeCoachClient, FakeWorkoutSource, InMemoryKeyValueStore


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def source():
    return FakeWorkoutSource(
        workouts=[
            make_hevy_workout("w1", start_time="2024-03-05T18:00:00Z", end_time="2024-03-05T19:00:00Z"),
            make_hevy_workout("w2", start_time="2024-03-03T18:00:00Z", end_time="2024-03-03T18:45:00Z"),
        ],
        catalog=[ExerciseTemplate(id="A", title="Squat")],
    )


@pytest.fixture
def coach():
    return FakeCoachClient(
        routine=GeneratedRoutine(
            title="Leg Day",
            exercises=[
                GeneratedExercise(exercise_template_id="A", sets=[RoutineSet(reps=5, weight_kg=100)]),
                GeneratedExercise(exercise_template_id="ZZZ", sets=[]),
            ],
        )
    )


@pytest.fixture
def coordinator(store, source):
    return SyncCoordinator("hevy-key", source, WorkoutCache(store, "hevy-key"))


@pytest.fixture
def app(test_settings, store, source, coach, coordinator):
    app = create_app(settings=test_settings, store=store)
    app.state.container.registry = CoordinatorRegistry(lambda credential: coordinator)
    app.dependency_overrides[get_coordinator] = lambda: coordinator
    app.dependency_overrides[get_analyze_workouts] = lambda: AnalyzeWorkouts(coach, AnalysisCache(store))
    app.dependency_overrides[get_generate_routine] = lambda: GenerateRoutine(source, coach)
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.mark.integration
class TestHealth:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}


@pytest.mark.integration
class TestSettingsEndpoints:
    def test_defaults(self, client):
        body = client.get("/settings").json()
        assert body["hevy_api_key"] is None
        assert body["selected_template_id"] == "drill-sergeant"

    def test_update_masks_keys(self, client):
        response = client.put("/settings", json={"hevy_api_key": "abcdef123456", "selected_template_id": "scientist"})
        assert response.status_code == 200
        body = response.json()
        assert body["hevy_api_key"] == "****3456"
        assert body["selected_template_id"] == "scientist"
        assert client.get("/settings").json()["hevy_api_key"] == "****3456"

    def test_partial_update_keeps_other_fields(self, client):
        client.put("/settings", json={"openai_api_key": "sk-aaaa1111"})
        client.put("/settings", json={"training_philosophy": "PPL"})
        body = client.get("/settings").json()
        assert body["openai_api_key"] == "****1111"
        assert body["training_philosophy"] == "PPL"

    def test_empty_key_clears(self, client):
        client.put("/settings", json={"openai_api_key": "sk-aaaa1111"})
        client.put("/settings", json={"openai_api_key": ""})
        assert client.get("/settings").json()["openai_api_key"] is None

    def test_unknown_persona_rejected(self, client):
        assert client.put("/settings", json={"selected_template_id": "yoda"}).status_code == 422


@pytest.mark.integration
class TestWorkoutEndpoints:
    def test_idle_before_sync(self, client):
        body = client.get("/workouts").json()
        assert body["status"] == "idle"
        assert body["workouts"] == []

    def test_sync_then_read(self, client):
        response = client.post("/workouts/sync")
        assert response.status_code == 200
        assert len(response.json()["workouts"]) == 2

        body = client.get("/workouts").json()
        assert body["workouts"][0]["date"] == "2024-03-05"
        assert body["workouts"][0]["durationMinutes"] == 60
        assert body["last_synced_at"] is not None

    def test_sync_failure_maps_to_502_with_upstream_status(self, client, source):
        source.fetch_error = RemoteError("Failed to fetch workouts: 500", status_code=500, body="boom")
        response = client.post("/workouts/sync")
        assert response.status_code == 502
        detail = response.json()["detail"]
        assert detail["upstream_status"] == 500
        assert detail["body"] == "boom"
        assert client.get("/workouts").json()["status"] == "errored"

    def test_sync_auth_failure_maps_to_401(self, client, source):
        source.fetch_error = AuthError("Invalid Hevy API key")
        assert client.post("/workouts/sync").status_code == 401


@pytest.mark.integration
class TestAnalyticsEndpoints:
    def test_heatmap_shape(self, client):
        client.post("/workouts/sync")
        body = client.get("/analytics/heatmap").json()
        assert len(body["weeks"]) == 53
        assert body["insights"]["total_workouts"] == 2

    def test_volume_series(self, client):
        body = client.get("/analytics/volume").json()
        assert len(body) == 12
        assert all(point["volume"] == 0 for point in body)


@pytest.mark.integration
class TestCoachEndpoints:
    def test_templates(self, client):
        body = client.get("/coach/templates").json()
        assert body["selected_template_id"] == "drill-sergeant"
        assert len(body["templates"]) == 3

    def test_analysis_missing_is_404(self, client):
        assert client.get("/coach/analysis").status_code == 404

    def test_analysis_without_workouts_is_422(self, client):
        assert client.post("/coach/analysis", json={"session_count": 5}).status_code == 422

    def test_invalid_session_count_is_422(self, client):
        client.post("/workouts/sync")
        assert client.post("/coach/analysis", json={"session_count": 4}).status_code == 422

    def test_analysis_lifecycle(self, client, coach):
        client.post("/workouts/sync")

        created = client.post("/coach/analysis", json={"session_count": 3})
        assert created.status_code == 200
        assert created.json()["neglect"] == ["Hamstrings"]
        assert len(coach.analysis_calls[0]["workouts"]) == 2

        assert client.get("/coach/analysis").json() == created.json()
        assert client.delete("/coach/analysis").status_code == 204
        assert client.get("/coach/analysis").status_code == 404

    def test_routine_requires_analysis(self, client):
        assert client.post("/coach/routine").status_code == 404

    def test_routine_generation(self, client, source):
        client.post("/workouts/sync")
        client.post("/coach/analysis", json={"session_count": 3})

        response = client.post("/coach/routine")

        assert response.status_code == 200
        body = response.json()
        assert body["exercise_count"] == 1
        assert body["skipped_template_ids"] == ["ZZZ"]
        assert source.created_folders == ["AI"]
        sets = source.created_routines[0]["exercises"][0]["sets"]
        assert sets == [{"type": "normal", "weight_kg": 100.0, "reps": 5}] * 3

    def test_missing_openai_key_is_401(self, app, client, store):
        app.dependency_overrides[get_analyze_workouts] = lambda: AnalyzeWorkouts(None, AnalysisCache(store))
        client.post("/workouts/sync")
        assert client.post("/coach/analysis", json={"session_count": 3}).status_code == 401
