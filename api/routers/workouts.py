"""
Workouts router.

Exposes the sync coordinator: the current state (with stale data while a
refresh runs) and a manual sync trigger.
"""

from fastapi import APIRouter, Depends

from api.deps import get_coordinator
from api.errors import to_http_exception
from api.schemas.workouts import WorkoutsResponse
from application.exceptions import HevySpotterError
from application.use_cases import SyncCoordinator

router = APIRouter(
    prefix="/workouts",
    tags=["Workouts"],
)


@router.get("", response_model=WorkoutsResponse)
def get_workouts(coordinator: SyncCoordinator = Depends(get_coordinator)) -> WorkoutsResponse:
    """Current sync state and displayable workouts."""
    return WorkoutsResponse.from_state(coordinator.state)


@router.post("/sync", response_model=WorkoutsResponse)
async def sync_workouts(
    coordinator: SyncCoordinator = Depends(get_coordinator),
) -> WorkoutsResponse:
    """
    Fetch all workouts now, bypassing the freshness window.

    Raises:
        HTTPException: 401 without a Hevy key, 502 when Hevy fails
    """
    try:
        state = await coordinator.sync()
    except HevySpotterError as e:
        raise to_http_exception(e) from e
    return WorkoutsResponse.from_state(state)
