"""A least-recently-used cache with constant-time lookups and updates."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Hashable
from typing import Any

MISSING = -1


class LRUCache:
    """Fixed-capacity cache that evicts the least recently used key.

    Both ``get`` and ``put`` mark a key as the most recently used one.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        # Most recently used entries live at the end.
        self._entries: OrderedDict[Hashable, Any] = OrderedDict()

    def get(self, key: Hashable) -> Any:
        """Return the value stored for ``key``, or -1 when it is absent."""
        try:
            value = self._entries[key]
        except KeyError:
            return MISSING
        self._entries.move_to_end(key)
        return value

    def put(self, key: Hashable, value: Any) -> None:
        """Store ``value`` under ``key``, evicting the oldest key if over capacity."""
        if key in self._entries:
            self._entries[key] = value
            self._entries.move_to_end(key)
            return
        self._entries[key] = value
        if len(self._entries) > self.capacity:
            self._entries.popitem(last=False)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __str__(self) -> str:
        chain = "<->".join(
            f"{key}:{value}" for key, value in reversed(self._entries.items())
        )
        return f"Current_size = {len(self)}\n{chain}"