"""
Analytics router.

Both views are computed on the fly from whatever workouts the coordinator
currently holds; with no data they describe an empty year.
"""

from typing import List

from fastapi import APIRouter, Depends

from api.deps import get_coordinator
from application.use_cases import SyncCoordinator
from services.analytics import Heatmap, VolumePoint, build_heatmap, build_volume_series

router = APIRouter(
    prefix="/analytics",
    tags=["Analytics"],
)


@router.get("/heatmap", response_model=Heatmap)
def get_heatmap(coordinator: SyncCoordinator = Depends(get_coordinator)) -> Heatmap:
    """53-week activity heatmap with month labels and weekday insights."""
    return build_heatmap(list(coordinator.state.workouts or []))


@router.get("/volume", response_model=List[VolumePoint])
def get_volume(coordinator: SyncCoordinator = Depends(get_coordinator)) -> List[VolumePoint]:
    """Total lifted volume for each of the trailing twelve months, oldest first."""
    return build_volume_series(list(coordinator.state.workouts or []))
