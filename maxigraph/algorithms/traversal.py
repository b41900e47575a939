"""Breadth-first and depth-first spanning-tree traversals.

Both traversals share one loop over a frontier of pending edges seeded with a
sentinel edge ``None -> source``. A popped edge whose destination was already
visited is discarded; otherwise the destination is visited, its discovering
vertex is recorded as its parent, and an edge to every unvisited successor is
pushed. The frontier discipline is the only difference: FIFO for BFS, LIFO for
DFS.

Example:
    g = StrictDiGraph()
    for v in "ABC":
        g.add_vertex(v)
    g.add_edge("A", "B")
    g.add_edge("B", "C")

    BFSPaths.of(g, "A").path_to("C")  # ['A', 'B', 'C']
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from typing import (
    Any,
    ClassVar,
    Deque,
    List,
    NamedTuple,
    Optional,
    Set,
    Type,
    TypeVar,
)

from maxigraph.algorithms.paths import resolve_path
from maxigraph.graph.view import as_traversable
from maxigraph.logging import get_logger, log_run_summary
from maxigraph.types import ParentMap, Path, Vertex

logger = get_logger(__name__)

TPaths = TypeVar("TPaths", bound="_SpanningTreePaths")


class PendingEdge(NamedTuple):
    """Frontier entry: an edge whose destination may still be unvisited."""

    source: Optional[Vertex]
    destination: Vertex


class _SpanningTreePaths(ABC):
    """Shared traversal loop; subclasses pick which end of the frontier to pop.

    Attributes:
        source: The vertex the traversal started from.
    """

    kind: ClassVar[str]

    def __init__(self, graph: Any, source: Vertex) -> None:
        """Traverse ``graph`` from ``source``.

        Args:
            graph: Object with ``successors(vertex)``, or any NetworkX graph.
            source: Start vertex.

        Raises:
            UnknownVertexError: If ``source`` is not in the graph.
        """
        self.source = source
        self._visited: Set[Vertex] = set()
        self._traversal: List[Vertex] = []
        self._parent_of: ParentMap = {}
        self._run(as_traversable(graph))

    @classmethod
    def of(cls: Type[TPaths], graph: Any, source: Vertex) -> TPaths:
        """Traverse ``graph`` from ``source`` and return the result."""
        return cls(graph, source)

    @staticmethod
    @abstractmethod
    def _pop(frontier: Deque[PendingEdge]) -> PendingEdge:
        """Remove and return the next edge to process."""

    def _run(self, graph: Any) -> None:
        frontier: Deque[PendingEdge] = deque([PendingEdge(None, self.source)])
        visited = self._visited

        while frontier:
            edge = self._pop(frontier)
            vertex = edge.destination
            if vertex in visited:
                continue

            visited.add(vertex)
            self._traversal.append(vertex)
            self._parent_of[vertex] = edge.source

            for successor in graph.successors(vertex):
                if successor not in visited:
                    frontier.append(PendingEdge(vertex, successor))

        log_run_summary(
            logger,
            "%s from %r visited %d vertices",
            self.kind,
            self.source,
            len(visited),
        )

    def traversal(self) -> List[Vertex]:
        """Return the vertices in visit order, starting with the source."""
        return list(self._traversal)

    def visited(self, vertex: Vertex) -> bool:
        """Return True if ``vertex`` was reached from the source."""
        return vertex in self._visited

    def spanning_tree(self) -> ParentMap:
        """Return a copy of the parent map; the source maps to ``None``."""
        return dict(self._parent_of)

    def path_to(self, destination: Vertex) -> Path:
        """Return the tree path from the source to ``destination``.

        Raises:
            UnreachableVertexError: If ``destination`` was never visited.
        """
        return resolve_path(self._parent_of, destination)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(source={self.source!r}, "
            f"visited={len(self._visited)})"
        )


class BFSPaths(_SpanningTreePaths):
    """Breadth-first spanning tree: tree paths use the fewest edges."""

    kind = "BFS"

    @staticmethod
    def _pop(frontier: Deque[PendingEdge]) -> PendingEdge:
        return frontier.popleft()


class DFSPaths(_SpanningTreePaths):
    """Depth-first spanning tree."""

    kind = "DFS"

    @staticmethod
    def _pop(frontier: Deque[PendingEdge]) -> PendingEdge:
        return frontier.pop()
