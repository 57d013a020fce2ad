"""Three FIFO queues: a linear fixed array, a ring buffer and a linked queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class QueueFullError(Exception):
    """Raised when adding to a queue that has no room left."""


class QueueEmptyError(Exception):
    """Raised when reading from or removing from an empty queue."""


def _check_capacity(capacity: int) -> None:
    if capacity < 1:
        raise ValueError(f"capacity must be positive, got {capacity}")


class ArrayQueue:
    """Queue over a fixed row of slots that are never reused until it empties.

    Each enqueue takes the next slot; dequeuing does not free slots, so the
    queue reports full once every slot has been used, even if some values
    were removed. When the last value leaves, all slots become free again.
    """

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._items: deque[Any] = deque()
        self._slots_used = 0

    def enqueue(self, value: Any) -> None:
        """Append ``value`` at the rear."""
        if self.is_full():
            raise QueueFullError("queue full")
        self._items.append(value)
        self._slots_used += 1

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        if self.is_empty():
            raise QueueEmptyError("queue empty")
        value = self._items.popleft()
        if not self._items:
            self._slots_used = 0
        return value

    def front(self) -> Any:
        """The value that would be dequeued next."""
        if self.is_empty():
            raise QueueEmptyError("queue empty")
        return self._items[0]

    def rear(self) -> Any:
        """The value enqueued most recently."""
        if self.is_empty():
            raise QueueEmptyError("queue empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return self._slots_used == self.capacity

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))


class CircularQueue:
    """Fixed-capacity ring buffer queue: removed slots are reused at once."""

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        """Append ``value`` at the rear."""
        if self.is_full():
            raise QueueFullError("queue full")
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        if self.is_empty():
            raise QueueEmptyError("queue empty")
        return self._items.popleft()

    def front(self) -> Any:
        """The value that would be dequeued next."""
        if self.is_empty():
            raise QueueEmptyError("queue empty")
        return self._items[0]

    def rear(self) -> Any:
        """The value enqueued most recently."""
        if self.is_empty():
            raise QueueEmptyError("queue empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))


class LinkedQueue:
    """Unbounded queue that grows as values are added."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        """Append ``value`` at the end."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the first value."""
        if not self._items:
            raise QueueEmptyError("queue empty")
        return self._items.popleft()

    def peek(self) -> Any:
        """The first value, without removing it."""
        if not self._items:
            raise QueueEmptyError("queue empty")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)