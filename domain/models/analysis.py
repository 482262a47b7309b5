"""Coaching analysis returned by the language model."""

from typing import List

from pydantic import BaseModel, Field


class AnalysisResult(BaseModel):
    """Structured coaching analysis of recent workouts."""

    summary: str = Field(description="One or two sentence overview")
    trends: List[str] = Field(default_factory=list, description="Progressive overload observations")
    neglect: List[str] = Field(default_factory=list, description="Missing muscle groups or patterns")
    recommendations: List[str] = Field(default_factory=list, description="Actionable tips")
