"""
Analyze workouts use case.

First stage of the coaching pipeline: validate inputs, take the N most
recent sessions, ask the coach for an analysis, and persist the result so
it survives restarts until the user deletes it.
"""

import logging
from typing import List, Optional

from application.exceptions import AuthError, ValidationError
from application.ports import CoachClient
from core.constants import ALLOWED_SESSION_COUNTS, DEFAULT_SESSION_COUNT
from domain.models import AnalysisResult, SimplifiedWorkout
from infrastructure.storage import AnalysisCache
from services.coach_templates import get_coach_template

logger = logging.getLogger(__name__)


class AnalyzeWorkouts:
    """Produce, persist, read and clear the coaching analysis."""

    def __init__(
        self,
        coach: Optional[CoachClient],
        analysis_cache: AnalysisCache,
        philosophy: Optional[str] = None,
        coach_template_id: Optional[str] = None,
    ):
        """
        Args:
            coach: Coach client, or None when no OpenAI key is configured
            analysis_cache: Persistent slot for the latest analysis
            philosophy: Free-text training philosophy from user settings
            coach_template_id: Selected persona id from user settings
        """
        self._coach = coach
        self._cache = analysis_cache
        self._philosophy = philosophy
        self._template = get_coach_template(coach_template_id)

    async def execute(
        self,
        workouts: List[SimplifiedWorkout],
        session_count: int = DEFAULT_SESSION_COUNT,
    ) -> AnalysisResult:
        """
        Analyze the most recent sessions.

        Args:
            workouts: Synced workouts in source order (newest first)
            session_count: How many recent sessions to analyze (3, 5, 10 or 20)

        Returns:
            The persisted AnalysisResult

        Raises:
            AuthError: No OpenAI key configured, or key rejected
            ValidationError: No workouts, or unsupported session count
            RemoteError / ParseError: Inference call failed
        """
        if self._coach is None:
            raise AuthError("OpenAI API key missing. Please check settings.")
        if not workouts:
            raise ValidationError("No workouts to analyze.")
        if session_count not in ALLOWED_SESSION_COUNTS:
            raise ValidationError(
                f"Invalid session count {session_count}. Must be one of: {ALLOWED_SESSION_COUNTS}"
            )

        recent = list(workouts[:session_count])
        logger.info(f"Analyzing {len(recent)} sessions with coach '{self._template.id}'")

        analysis = await self._coach.request_coaching_analysis(
            recent,
            philosophy=self._philosophy,
            system_prompt=self._template.system_prompt,
        )
        self._cache.write(analysis)
        return analysis

    def latest(self) -> Optional[AnalysisResult]:
        """The persisted analysis, if any."""
        return self._cache.read()

    def clear(self) -> None:
        """Delete the persisted analysis."""
        self._cache.clear()
        logger.info("Analysis summary deleted")
