"""
Coach router.

Endpoints for the two-stage coaching pipeline:
- Persona listing
- Analysis: produce, read, delete
- Routine generation from the stored analysis
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from api.deps import get_analyze_workouts, get_container, get_coordinator, get_generate_routine
from api.errors import to_http_exception
from api.schemas.coach import AnalysisRequest, CoachTemplateResponse, CoachTemplatesResponse
from application.exceptions import HevySpotterError
from application.use_cases import AnalyzeWorkouts, GenerateRoutine, SyncCoordinator
from backend.container import Container
from domain.models import AnalysisResult, RoutineCreationResult
from services.coach_templates import COACH_TEMPLATES

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/coach",
    tags=["Coach"],
)


# =============================================================================
# Personas
# =============================================================================


@router.get("/templates", response_model=CoachTemplatesResponse)
def list_templates(container: Container = Depends(get_container)) -> CoachTemplatesResponse:
    """Available coach personas and the selected one."""
    return CoachTemplatesResponse(
        selected_template_id=container.user_settings().selected_template_id,
        templates=[
            CoachTemplateResponse(
                id=template.id,
                name=template.name,
                icon=template.icon,
                description=template.description,
            )
            for template in COACH_TEMPLATES
        ],
    )


# =============================================================================
# Analysis
# =============================================================================


@router.get("/analysis", response_model=AnalysisResult)
def get_analysis(use_case: AnalyzeWorkouts = Depends(get_analyze_workouts)) -> AnalysisResult:
    """The stored analysis, 404 if none."""
    analysis = use_case.latest()
    if analysis is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No analysis stored")
    return analysis


@router.post("/analysis", response_model=AnalysisResult)
async def create_analysis(
    request: AnalysisRequest,
    use_case: AnalyzeWorkouts = Depends(get_analyze_workouts),
    coordinator: SyncCoordinator = Depends(get_coordinator),
) -> AnalysisResult:
    """Analyze the most recent sessions and store the result."""
    workouts = list(coordinator.state.workouts or [])
    try:
        return await use_case.execute(workouts, session_count=request.session_count)
    except HevySpotterError as e:
        raise to_http_exception(e) from e


@router.delete("/analysis", status_code=status.HTTP_204_NO_CONTENT)
def delete_analysis(use_case: AnalyzeWorkouts = Depends(get_analyze_workouts)) -> Response:
    """Delete the stored analysis."""
    use_case.clear()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =============================================================================
# Routine Generation
# =============================================================================


@router.post("/routine", response_model=RoutineCreationResult)
async def create_routine(
    analyze: AnalyzeWorkouts = Depends(get_analyze_workouts),
    use_case: GenerateRoutine = Depends(get_generate_routine),
) -> RoutineCreationResult:
    """Design a routine from the stored analysis and save it to Hevy."""
    analysis = analyze.latest()
    if analysis is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No analysis stored. Run an analysis first.",
        )
    try:
        result = await use_case.execute(analysis)
    except HevySpotterError as e:
        raise to_http_exception(e) from e
    logger.info(f"Routine '{result.title}' saved with {result.exercise_count} exercises")
    return result
