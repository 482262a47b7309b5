"""
Router package for HevySpotter.

This package contains all API routers organized by resource:
- health: Liveness endpoint
- settings: Credentials, training philosophy, coach persona
- workouts: Sync state and manual sync
- analytics: Activity heatmap and monthly volume
- coach: Personas, analysis, routine generation
"""

from api.routers.analytics import router as analytics_router
from api.routers.coach import router as coach_router
from api.routers.health import router as health_router
from api.routers.settings import router as settings_router
from api.routers.workouts import router as workouts_router

__all__ = [
    "analytics_router",
    "coach_router",
    "health_router",
    "settings_router",
    "workouts_router",
]
