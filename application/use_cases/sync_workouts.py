"""
Sync workouts use case.

The SyncCoordinator owns the in-memory workout list for one credential.
It decides between serving the local cache and fetching from the remote
source, exposes an immutable SyncState, and notifies subscribers on every
state change.

States:
    IDLE     no fetch in flight; workouts may or may not be present
    SYNCING  at least one fetch in flight; the last displayed data stays visible
    ERRORED  the last fetch failed; the last displayed data stays visible

Lifecycle:
    load()  on mount: a fresh cached entry is served without a network call;
            an absent or stale entry triggers a fetch (stale data is shown
            until it resolves). Failures are recorded in the state.
    sync()  manual: always fetches, overwrites the cache, and re-raises
            failures after recording them.

Concurrent refreshes are not deduplicated. Each refresh takes a sequence
number when it starts; a refresh that completes after a later-started one
has already been applied is discarded, so the cache and the subscribers
always end on the newest-started result.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from application.exceptions import AuthError
from application.ports import WorkoutSource
from domain.converters import transform_workouts
from domain.models import SimplifiedWorkout
from infrastructure.storage import WorkoutCache, now_ms

logger = logging.getLogger(__name__)


class SyncStatus(str, Enum):
    IDLE = "idle"
    SYNCING = "syncing"
    ERRORED = "errored"


@dataclass(frozen=True)
class SyncState:
    """Snapshot of the coordinator, published to subscribers."""

    status: SyncStatus = SyncStatus.IDLE
    workouts: Optional[Tuple[SimplifiedWorkout, ...]] = None
    error: Optional[Exception] = None
    last_synced_at: Optional[int] = None

    @property
    def has_data(self) -> bool:
        return self.workouts is not None

    @property
    def is_syncing(self) -> bool:
        return self.status == SyncStatus.SYNCING


Listener = Callable[[SyncState], None]


class SyncCoordinator:
    """Cache-or-fetch orchestration for one credential."""

    def __init__(
        self,
        credential: Optional[str],
        source: Optional[WorkoutSource],
        cache: Optional[WorkoutCache],
        clock: Callable[[], int] = now_ms,
    ):
        """
        Initialize the coordinator.

        Args:
            credential: Hevy API key; None or empty disables all fetching
            source: Remote workout source for this credential
            cache: Workout cache scoped to this credential
            clock: Epoch-millisecond clock
        """
        self._credential = credential or None
        self._source = source
        self._cache = cache
        self._clock = clock
        self._state = SyncState()
        self._listeners: List[Listener] = []
        self._started = 0
        self._applied = 0
        self._in_flight = 0

    # -------------------------------------------------------------------------
    # Observation
    # -------------------------------------------------------------------------

    @property
    def credential(self) -> Optional[str]:
        return self._credential

    @property
    def state(self) -> SyncState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a state listener.

        Returns:
            A callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_state(self, state: SyncState) -> None:
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("Sync state listener failed")

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    async def load(self) -> SyncState:
        """
        Mount behavior: serve a fresh cache entry or refresh in place.

        Never raises; a failed refresh leaves the coordinator ERRORED.
        """
        if not self._credential:
            return self._state

        entry = self._cache.read()
        if entry is not None and entry.workouts:
            self._set_state(
                replace(
                    self._state,
                    workouts=tuple(entry.workouts),
                    last_synced_at=entry.timestamp,
                )
            )
            if self._cache.is_fresh(entry, self._clock()):
                logger.info(f"Serving {len(entry.workouts)} cached workouts")
                return self._state
            logger.info("Workout cache is stale, refreshing in background")

        try:
            await self._refresh()
        except Exception as e:
            logger.error(f"Automatic workout sync failed: {e}")
        return self._state

    async def sync(self) -> SyncState:
        """
        Manual sync: always re-fetch, regardless of cache freshness.

        Raises:
            AuthError: No credential configured, or credential rejected
            RemoteError / ParseError: Fetch failed; last-good data is kept
        """
        if not self._credential:
            raise AuthError("No Hevy API key configured")
        await self._refresh()
        return self._state

    async def _refresh(self) -> None:
        self._started += 1
        sequence = self._started
        self._in_flight += 1
        self._set_state(replace(self._state, status=SyncStatus.SYNCING, error=None))

        try:
            raw = await self._source.fetch_all_workouts()
            workouts = transform_workouts(raw)
        except Exception as e:
            self._in_flight -= 1
            if sequence > self._applied:
                self._set_state(replace(self._state, status=SyncStatus.ERRORED, error=e))
            else:
                self._settle()
            raise

        self._in_flight -= 1
        if sequence < self._applied:
            logger.warning(
                f"Discarding sync #{sequence}: sync #{self._applied} already applied"
            )
            self._settle()
            return

        entry = self._cache.write(workouts, timestamp=self._clock())
        self._applied = sequence
        logger.info(f"Synced {len(workouts)} workouts")
        self._set_state(
            SyncState(
                status=SyncStatus.SYNCING if self._in_flight else SyncStatus.IDLE,
                workouts=tuple(workouts),
                error=None,
                last_synced_at=entry.timestamp,
            )
        )

    def _settle(self) -> None:
        # A superseded sync finished last; drop the SYNCING flag it left behind.
        if not self._in_flight and self._state.status == SyncStatus.SYNCING:
            self._set_state(replace(self._state, status=SyncStatus.IDLE))


CoordinatorFactory = Callable[[Optional[str]], SyncCoordinator]


class CoordinatorRegistry:
    """
    One coordinator per credential.

    Changing the credential starts from a fresh coordinator; returning to a
    previous credential reuses its coordinator and in-memory state.
    """

    def __init__(self, factory: CoordinatorFactory):
        self._factory = factory
        self._coordinators: Dict[Optional[str], SyncCoordinator] = {}

    def get(self, credential: Optional[str]) -> SyncCoordinator:
        key = credential or None
        coordinator = self._coordinators.get(key)
        if coordinator is None:
            coordinator = self._factory(key)
            self._coordinators[key] = coordinator
        return coordinator
