"""
FastAPI Dependency Providers for HevySpotter.

The process-wide Container is created by create_app() and stored on
``app.state``. Providers below hand out the pieces routers need; use case
providers build a fresh instance per request so that settings changes take
effect immediately.

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_coordinator] = lambda: coordinator
"""

from fastapi import Depends, Request

from application.use_cases import AnalyzeWorkouts, GenerateRoutine, SyncCoordinator
from backend.container import Container
from backend.settings import Settings
from infrastructure.storage import UserSettingsStore


# =============================================================================
# Core Providers
# =============================================================================


def get_container(request: Request) -> Container:
    """Process-wide composition root created in create_app()."""
    return request.app.state.container


def get_settings(container: Container = Depends(get_container)) -> Settings:
    return container.settings


def get_settings_store(container: Container = Depends(get_container)) -> UserSettingsStore:
    return container.settings_store


# =============================================================================
# Use Case Providers
# =============================================================================


def get_coordinator(container: Container = Depends(get_container)) -> SyncCoordinator:
    """Coordinator for the currently configured Hevy credential."""
    return container.coordinator()


def get_analyze_workouts(container: Container = Depends(get_container)) -> AnalyzeWorkouts:
    return container.analyze_workouts()


def get_generate_routine(container: Container = Depends(get_container)) -> GenerateRoutine:
    return container.generate_routine()
