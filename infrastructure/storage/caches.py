"""
Typed caches over a KeyValueStore.

Three logical slots live in the store:
- the workout cache ({timestamp, workouts}), one slot per credential
- the coaching analysis (no expiry, cleared by explicit user action)
- the user settings (load at startup, save on change)

All values are plain JSON. A stored value that is not valid JSON, or that
does not match the expected shape, is treated as absent: it is logged and
never raised to the caller.
"""

import hashlib
import json
import logging
import time
from typing import Any, List, Optional

from pydantic import ValidationError as PydanticValidationError

from application.ports import KeyValueStore
from core.constants import ANALYSIS_CACHE_SLOT, SETTINGS_SLOT, WORKOUTS_CACHE_SLOT
from domain.models import AnalysisResult, CacheEntry, SimplifiedWorkout, UserSettings

logger = logging.getLogger(__name__)

DEFAULT_FRESHNESS_HOURS = 24


def now_ms() -> int:
    """Current time in epoch milliseconds."""
    return int(time.time() * 1000)


class JsonSlot:
    """A single JSON-encoded slot of a KeyValueStore."""

    def __init__(self, store: KeyValueStore, key: str):
        self._store = store
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def read(self) -> Optional[Any]:
        """Return the decoded value, or None if absent or corrupt."""
        try:
            raw = self._store.get(self._key)
        except OSError as e:
            logger.error(f"Cache read failed for {self._key}: {e}")
            return None
        except UnicodeDecodeError as e:
            logger.warning(f"Discarding undecodable cache value in {self._key}: {e}")
            return None
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Discarding corrupt cache value in {self._key}: {e}")
            return None

    def write(self, value: Any) -> None:
        self._store.set(self._key, json.dumps(value))

    def clear(self) -> None:
        self._store.delete(self._key)


def workout_cache_key(credential: str) -> str:
    """Slot name for a credential; the raw key never appears in the slot name."""
    digest = hashlib.sha256(credential.encode("utf-8")).hexdigest()[:16]
    return f"{WORKOUTS_CACHE_SLOT}:{digest}"


class WorkoutCache:
    """
    Credential-scoped workout cache with a fixed freshness window.

    A stale entry is still returned by read(); freshness only gates
    whether a background refetch is needed.
    """

    def __init__(
        self,
        store: KeyValueStore,
        credential: str,
        freshness_hours: float = DEFAULT_FRESHNESS_HOURS,
    ):
        self._slot = JsonSlot(store, workout_cache_key(credential))
        self._window_ms = int(freshness_hours * 60 * 60 * 1000)

    @property
    def window_ms(self) -> int:
        return self._window_ms

    def read(self) -> Optional[CacheEntry]:
        data = self._slot.read()
        if data is None:
            return None
        try:
            return CacheEntry.model_validate(data)
        except PydanticValidationError as e:
            logger.warning(f"Discarding malformed workout cache entry: {e.error_count()} errors")
            return None

    def write(self, workouts: List[SimplifiedWorkout], timestamp: Optional[int] = None) -> CacheEntry:
        entry = CacheEntry(
            timestamp=now_ms() if timestamp is None else timestamp,
            workouts=list(workouts),
        )
        self._slot.write(entry.model_dump(mode="json", by_alias=True))
        return entry

    def clear(self) -> None:
        self._slot.clear()

    def is_fresh(self, entry: CacheEntry, now: Optional[int] = None) -> bool:
        current = now_ms() if now is None else now
        return current - entry.timestamp < self._window_ms


class AnalysisCache:
    """The last coaching analysis, kept until the user deletes it."""

    def __init__(self, store: KeyValueStore):
        self._slot = JsonSlot(store, ANALYSIS_CACHE_SLOT)

    def read(self) -> Optional[AnalysisResult]:
        data = self._slot.read()
        if data is None:
            return None
        try:
            return AnalysisResult.model_validate(data)
        except PydanticValidationError:
            logger.warning("Discarding malformed stored analysis")
            return None

    def write(self, analysis: AnalysisResult) -> None:
        self._slot.write(analysis.model_dump(mode="json"))

    def clear(self) -> None:
        self._slot.clear()


class UserSettingsStore:
    """Persisted user settings. Corrupt or missing values yield defaults."""

    def __init__(self, store: KeyValueStore):
        self._slot = JsonSlot(store, SETTINGS_SLOT)

    def load(self) -> UserSettings:
        data = self._slot.read()
        if data is None:
            return UserSettings()
        try:
            return UserSettings.model_validate(data)
        except PydanticValidationError:
            logger.warning("Stored settings are malformed, using defaults")
            return UserSettings()

    def save(self, settings: UserSettings) -> UserSettings:
        self._slot.write(settings.model_dump(mode="json"))
        return settings
