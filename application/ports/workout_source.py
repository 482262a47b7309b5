"""
Workout source port (interface).

This Protocol defines the contract for the remote fitness-tracking API.
The Hevy HTTP client satisfies it; tests use an in-memory fake.
"""

from typing import Any, Dict, List, Protocol

from domain.models import ExerciseTemplate, HevyWorkout, RoutineFolder


class WorkoutSource(Protocol):
    """Remote workout history, exercise catalog and routines."""

    async def fetch_workouts_page(self, page: int, page_size: int) -> List[HevyWorkout]:
        """
        Fetch one page of workouts, newest first.

        Raises:
            AuthError: On HTTP 401
            RemoteError: On any other non-2xx response
        """
        ...

    async def fetch_all_workouts(self) -> List[HevyWorkout]:
        """Fetch every workout by sequential paging, stopping on a short page."""
        ...

    async def fetch_top_exercise_catalog(self) -> List[ExerciseTemplate]:
        """Fetch the first catalog pages; failed pages contribute nothing."""
        ...

    async def list_routine_folders(self) -> List[RoutineFolder]:
        """List the user's routine folders."""
        ...

    async def create_routine_folder(self, title: str) -> RoutineFolder:
        """Create a routine folder."""
        ...

    async def create_routine(self, routine: Dict[str, Any]) -> Dict[str, Any]:
        """Create a routine and return the raw response body."""
        ...
