"""Maxiphobic heap: a weight-balanced mergeable min-heap.

A maxiphobic heap (Okasaki) is a binary tree in which every node's element is
no greater than its children's elements. Its primitive operation is ``merge``:
the smaller root wins and keeps its element; the winner's two children and the
losing tree are the three candidate subtrees. The heaviest candidate (by node
count) is kept whole as the left child, and the two lighter ones are merged
recursively into the right child.

Because the kept child holds at least a third of the combined weight, each
recursive step works on at most two thirds of the nodes, so ``insert``,
``merge`` and ``delete_minimum`` run in O(log n).

Notes:
    Ordering is supplied as a ``key`` callable, as for ``sorted``. On equal keys
    the first merge operand (the receiving heap's root) wins; no insertion-order
    stability is promised across equal elements.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    Deque,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    TypeVar,
)

from maxigraph.errors import EmptyStructureError

T = TypeVar("T")

#: Maps an element to its sort key; ``None`` means natural ordering.
KeyFunc = Optional[Callable[[Any], Any]]


@dataclass(eq=False)
class _Node(Generic[T]):
    """Heap tree node; ``weight`` is the number of nodes in this subtree."""

    element: T
    weight: int = 1
    left: Optional[_Node[T]] = None
    right: Optional[_Node[T]] = None


def _weight(node: Optional[_Node[Any]]) -> int:
    return 0 if node is None else node.weight


class MaxiphobicHeap(Generic[T]):
    """Mergeable min-heap with O(log n) insert, merge and delete-minimum.

    Attributes:
        _key: Sort-key function, or None for natural ordering.
        _root: Root node of the tree; None when the heap is empty.
    """

    def __init__(self, key: KeyFunc = None) -> None:
        """Create an empty heap.

        Args:
            key: Optional function mapping an element to its sort key.
        """
        self._key: KeyFunc = key
        self._root: Optional[_Node[T]] = None

    @classmethod
    def of(cls, *elements: T, key: KeyFunc = None) -> MaxiphobicHeap[T]:
        """Build a heap holding ``elements`` in O(n)."""
        return cls.from_iterable(elements, key=key)

    @classmethod
    def from_iterable(
        cls, iterable: Iterable[T], key: KeyFunc = None
    ) -> MaxiphobicHeap[T]:
        """Build a heap from an iterable in O(n).

        Singletons are paired through a FIFO queue: two trees are taken from
        the front, merged and the result goes to the back, until one tree is
        left. Each round halves the number of trees while doubling their size,
        so the total merge work is linear.

        Args:
            iterable: Elements to store.
            key: Optional sort-key function.

        Returns:
            A new heap containing every element of ``iterable``.
        """
        heap: MaxiphobicHeap[T] = cls(key=key)
        pending: Deque[_Node[T]] = deque(_Node(element) for element in iterable)
        if not pending:
            return heap

        while len(pending) > 1:
            first = pending.popleft()
            second = pending.popleft()
            pending.append(heap._merge(first, second))  # type: ignore[arg-type]

        heap._root = pending[0]
        return heap

    def copy(self) -> MaxiphobicHeap[T]:
        """Return an independent heap with the same elements and shape. O(n)."""
        clone: MaxiphobicHeap[T] = type(self)(key=self._key)
        if self._root is None:
            return clone

        clone._root = _Node(self._root.element, self._root.weight)
        # Walk both trees in lockstep; no recursion since tree depth is unbounded.
        stack: List[tuple] = [(self._root, clone._root)]
        while stack:
            original, duplicate = stack.pop()
            if original.left is not None:
                duplicate.left = _Node(original.left.element, original.left.weight)
                stack.append((original.left, duplicate.left))
            if original.right is not None:
                duplicate.right = _Node(original.right.element, original.right.weight)
                stack.append((original.right, duplicate.right))
        return clone

    #
    # Queries
    #
    def ordering(self) -> KeyFunc:
        """Return the sort-key function (None for natural ordering)."""
        return self._key

    def is_empty(self) -> bool:
        """Return True if the heap stores no element. O(1)."""
        return self._root is None

    def size(self) -> int:
        """Return the number of stored elements. O(1)."""
        return _weight(self._root)

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return self._root is not None

    def minimum(self) -> T:
        """Return the smallest element without removing it. O(1).

        Raises:
            EmptyStructureError: If the heap is empty.
        """
        if self._root is None:
            raise EmptyStructureError("minimum on empty heap")
        return self._root.element

    #
    # Updates
    #
    def clear(self) -> None:
        """Drop every element. O(1)."""
        self._root = None

    def insert(self, element: T) -> None:
        """Add ``element`` by merging a singleton tree into the root. O(log n)."""
        self._root = self._merge(self._root, _Node(element))

    def delete_minimum(self) -> None:
        """Remove the smallest element. O(log n).

        Raises:
            EmptyStructureError: If the heap is empty.
        """
        if self._root is None:
            raise EmptyStructureError("delete_minimum on empty heap")
        self._root = self._merge(self._root.left, self._root.right)

    def merge(self, other: MaxiphobicHeap[T]) -> None:
        """Meld ``other`` into this heap in O(log n), leaving ``other`` empty.

        Args:
            other: Heap with the same ordering.

        Raises:
            ValueError: If ``other`` is this heap or uses a different ordering.
        """
        if other is self:
            raise ValueError("Cannot merge a heap with itself.")
        if other._key is not self._key:
            raise ValueError("Cannot merge heaps with different orderings.")
        self._root = self._merge(self._root, other._root)
        other._root = None

    #
    # Internals
    #
    def _precedes(self, a: T, b: T) -> bool:
        if self._key is None:
            return a < b  # type: ignore[operator]
        return self._key(a) < self._key(b)

    def _merge(
        self, node1: Optional[_Node[T]], node2: Optional[_Node[T]]
    ) -> Optional[_Node[T]]:
        if node1 is None:
            return node2
        if node2 is None:
            return node1

        # Strict comparison: on ties the first operand stays the root
        if self._precedes(node2.element, node1.element):
            node1, node2 = node2, node1

        node1.weight += node2.weight

        heavy, light1, light2 = node1.left, node1.right, node2
        if _weight(light1) > _weight(heavy):
            heavy, light1 = light1, heavy
        if _weight(light2) > _weight(heavy):
            heavy, light2 = light2, heavy

        node1.left = heavy
        node1.right = self._merge(light1, light2)
        return node1

    def _nodes(self) -> Iterator[_Node[T]]:
        """Yield every node in pre-order."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def __repr__(self) -> str:
        parts: List[str] = []
        # Explicit stack of pending tokens: nodes expand to "Node(left, x, right)"
        stack: List[Any] = [self._root]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
            elif item is None:
                parts.append("null")
            else:
                stack.extend(
                    [")", item.right, ", ", f"{item.element!r}", ", ", item.left]
                )
                parts.append("Node(")
        return f"{type(self).__name__}({''.join(parts)})"
