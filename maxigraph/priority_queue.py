"""Priority queue adapter over `MaxiphobicHeap`.

The queue never deduplicates: equal or repeated elements are all kept, which
lazy-deletion algorithms rely on to leave superseded entries in place.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from maxigraph.heap import KeyFunc, MaxiphobicHeap

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """Min-priority queue: ``enqueue``, ``first`` and ``dequeue``."""

    def __init__(self, key: KeyFunc = None) -> None:
        self._heap: MaxiphobicHeap[T] = MaxiphobicHeap(key=key)

    def is_empty(self) -> bool:
        return self._heap.is_empty()

    def size(self) -> int:
        return self._heap.size()

    def __len__(self) -> int:
        return self._heap.size()

    def __bool__(self) -> bool:
        return not self._heap.is_empty()

    def enqueue(self, element: T) -> None:
        """Add an element. O(log n)."""
        self._heap.insert(element)

    def first(self) -> T:
        """Return the highest-priority (smallest) element.

        Raises:
            EmptyStructureError: If the queue is empty.
        """
        return self._heap.minimum()

    def dequeue(self) -> None:
        """Remove the highest-priority element.

        Raises:
            EmptyStructureError: If the queue is empty.
        """
        self._heap.delete_minimum()

    def clear(self) -> None:
        self._heap.clear()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size()})"
