"""Coaching schemas."""

from typing import List

from pydantic import BaseModel, Field

from core.constants import DEFAULT_SESSION_COUNT


class AnalysisRequest(BaseModel):
    """Request body for POST /coach/analysis."""

    session_count: int = Field(
        default=DEFAULT_SESSION_COUNT,
        description="Number of recent sessions to analyze (3, 5, 10 or 20)",
    )


class CoachTemplateResponse(BaseModel):
    id: str
    name: str
    icon: str
    description: str


class CoachTemplatesResponse(BaseModel):
    selected_template_id: str
    templates: List[CoachTemplateResponse]
