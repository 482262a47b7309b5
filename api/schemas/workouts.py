"""Workout sync state schema."""

from typing import List, Optional

from pydantic import BaseModel, Field

from application.use_cases import SyncState, SyncStatus
from domain.models import SimplifiedWorkout


class WorkoutsResponse(BaseModel):
    """Snapshot of the coordinator: status plus whatever data is displayable."""

    status: SyncStatus
    is_syncing: bool
    error: Optional[str] = None
    last_synced_at: Optional[int] = None
    workouts: List[SimplifiedWorkout] = Field(default_factory=list)

    @classmethod
    def from_state(cls, state: SyncState) -> "WorkoutsResponse":
        return cls(
            status=state.status,
            is_syncing=state.is_syncing,
            error=str(state.error) if state.error is not None else None,
            last_synced_at=state.last_synced_at,
            workouts=list(state.workouts or []),
        )
