"""
Generate routine use case.

Second stage of the coaching pipeline:

1. Fetch the top of the exercise catalog
2. Ask the coach for a routine built from the analysis
3. Drop exercises whose template id is not in the catalog
4. Normalize every exercise to at least three sets
5. Locate or create the "AI" routine folder
6. Submit the routine

Each step's failure aborts the remaining steps. Side effects that already
happened (e.g. a created folder) are not rolled back.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from application.exceptions import AuthError, ValidationError
from application.ports import CoachClient, WorkoutSource
from core.constants import AI_FOLDER_TITLE, DEFAULT_ROUTINE_REPS, MIN_ROUTINE_SETS
from domain.models import (
    AnalysisResult,
    ExerciseTemplate,
    GeneratedExercise,
    GeneratedRoutine,
    RoutineCreationResult,
    RoutineFolder,
    RoutineSet,
)

logger = logging.getLogger(__name__)


def filter_valid_exercises(
    routine: GeneratedRoutine,
    catalog: List[ExerciseTemplate],
) -> Tuple[List[GeneratedExercise], List[str]]:
    """
    Split generated exercises into catalog-backed and unknown ones.

    Returns:
        (valid exercises in original order, skipped template ids)
    """
    valid_ids = {template.id for template in catalog}
    valid: List[GeneratedExercise] = []
    skipped: List[str] = []
    for exercise in routine.exercises:
        if exercise.exercise_template_id in valid_ids:
            valid.append(exercise)
        else:
            logger.warning(f"Skipping invalid exercise ID: {exercise.exercise_template_id}")
            skipped.append(exercise.exercise_template_id)
    return valid, skipped


def normalize_sets(sets: List[RoutineSet]) -> List[RoutineSet]:
    """
    Enforce the minimum set count.

    - 0 sets: three default sets of DEFAULT_ROUTINE_REPS "normal" reps
    - 1-2 sets: the last set is repeated until there are three
    - 3 or more: unchanged
    """
    if not sets:
        return [
            RoutineSet(type="normal", reps=DEFAULT_ROUTINE_REPS)
            for _ in range(MIN_ROUTINE_SETS)
        ]

    normalized = list(sets)
    while len(normalized) < MIN_ROUTINE_SETS:
        normalized.append(normalized[-1].model_copy())
    return normalized


def build_routine_payload(
    title: str,
    folder_id: Any,
    exercises: List[GeneratedExercise],
) -> Dict[str, Any]:
    """Request body for ``POST /v1/routines`` (without the ``routine`` wrapper)."""
    return {
        "title": title,
        "folder_id": folder_id,
        "exercises": [
            {
                "exercise_template_id": exercise.exercise_template_id,
                "sets": [s.to_payload() for s in normalize_sets(exercise.sets)],
            }
            for exercise in exercises
        ],
    }


class GenerateRoutine:
    """Design a routine from an analysis and write it back to Hevy."""

    def __init__(
        self,
        source: Optional[WorkoutSource],
        coach: Optional[CoachClient],
        philosophy: Optional[str] = None,
        folder_title: str = AI_FOLDER_TITLE,
    ):
        """
        Args:
            source: Hevy client, or None when no Hevy key is configured
            coach: Coach client, or None when no OpenAI key is configured
            philosophy: Free-text training philosophy from user settings
            folder_title: Routine folder that receives generated routines
        """
        self._source = source
        self._coach = coach
        self._philosophy = philosophy
        self._folder_title = folder_title

    async def execute(self, analysis: AnalysisResult) -> RoutineCreationResult:
        """
        Generate and submit a routine.

        Args:
            analysis: The coaching analysis to act on

        Returns:
            RoutineCreationResult describing what was written

        Raises:
            AuthError: A key is missing or rejected
            ValidationError: No generated exercise exists in the catalog
            RemoteError / ParseError: A remote stage failed
        """
        if self._coach is None:
            raise AuthError("OpenAI API key missing. Please check settings.")
        if self._source is None:
            raise AuthError("Hevy API key missing. Please check settings.")

        logger.info("Fetching exercise catalog")
        catalog = await self._source.fetch_top_exercise_catalog()

        logger.info("Designing workout")
        routine = await self._coach.request_generated_routine(
            analysis, catalog, philosophy=self._philosophy
        )

        valid, skipped = filter_valid_exercises(routine, catalog)
        if not valid:
            raise ValidationError("No valid exercises found in generated workout.")

        folder = await self._find_or_create_folder()
        payload = build_routine_payload(routine.title, folder.id, valid)

        logger.info(f"Saving routine '{routine.title}' with {len(valid)} exercises")
        response = await self._source.create_routine(payload)

        return RoutineCreationResult(
            routine_id=_created_routine_id(response),
            title=routine.title,
            folder_id=folder.id,
            exercise_count=len(valid),
            skipped_template_ids=skipped,
        )

    async def _find_or_create_folder(self) -> RoutineFolder:
        folders = await self._source.list_routine_folders()
        for folder in folders:
            if folder.title == self._folder_title:
                return folder
        logger.info(f"Creating routine folder '{self._folder_title}'")
        return await self._source.create_routine_folder(self._folder_title)


def _created_routine_id(response: Dict[str, Any]) -> Optional[str]:
    # Hevy answers with {"routine": [{...}]} or {"routine": {...}}
    routine = response.get("routine") if isinstance(response, dict) else None
    if isinstance(routine, list):
        routine = routine[0] if routine else None
    if isinstance(routine, dict) and routine.get("id") is not None:
        return str(routine["id"])
    return None
