"""
Coach client port (interface).

This Protocol defines the contract for the language-model inference API
used to analyze workouts and to design routines.
"""

from typing import List, Optional, Protocol

from domain.models import (
    AnalysisResult,
    ExerciseTemplate,
    GeneratedRoutine,
    SimplifiedWorkout,
)


class CoachClient(Protocol):
    """Language-model coaching operations."""

    async def request_coaching_analysis(
        self,
        workouts: List[SimplifiedWorkout],
        philosophy: Optional[str] = None,
        system_prompt: Optional[str] = None,
    ) -> AnalysisResult:
        """
        Analyze recent workouts.

        Raises:
            AuthError: Credential rejected
            RemoteError: Any other non-2xx response
            ParseError: Reply was not JSON matching AnalysisResult
        """
        ...

    async def request_generated_routine(
        self,
        analysis: AnalysisResult,
        catalog: List[ExerciseTemplate],
        philosophy: Optional[str] = None,
    ) -> GeneratedRoutine:
        """Design a routine from an analysis using only catalog exercises."""
        ...
