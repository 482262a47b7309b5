"""
Port interfaces (Protocols) for HevySpotter.

This package defines the interface contracts that the infrastructure
layer must implement. Using Protocols enables:
- Clean separation of concerns
- Easy testing with fake implementations
- Dependency inversion (depend on abstractions, not concretions)
"""

from application.ports.coach_client import CoachClient
from application.ports.key_value_store import KeyValueStore
from application.ports.workout_source import WorkoutSource

__all__ = [
    "CoachClient",
    "KeyValueStore",
    "WorkoutSource",
]
