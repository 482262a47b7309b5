"""Request and response models for the HTTP API."""

from api.schemas.coach import AnalysisRequest, CoachTemplateResponse, CoachTemplatesResponse
from api.schemas.settings import SettingsResponse, SettingsUpdateRequest
from api.schemas.workouts import WorkoutsResponse

__all__ = [
    "AnalysisRequest",
    "CoachTemplateResponse",
    "CoachTemplatesResponse",
    "SettingsResponse",
    "SettingsUpdateRequest",
    "WorkoutsResponse",
]
