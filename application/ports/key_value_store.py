"""
Key-value store port (interface).

A minimal string-keyed, string-valued store, the local equivalent of a
browser's localStorage. Values are opaque strings; JSON encoding and
corruption handling belong to the typed caches built on top.
"""

from typing import Optional, Protocol


class KeyValueStore(Protocol):
    """String-keyed persistent slots."""

    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the slot is empty."""
        ...

    def set(self, key: str, value: str) -> None:
        """Overwrite the slot."""
        ...

    def delete(self, key: str) -> None:
        """Remove the slot; a missing slot is not an error."""
        ...
