"""Graph capabilities consumed by the traversal and shortest-path algorithms."""

from __future__ import annotations

from typing import Iterable, NamedTuple, Protocol, Set, runtime_checkable

from maxigraph.types import Cost, Vertex


class Successor(NamedTuple):
    """Adjacent vertex together with the weight of the edge leading to it."""

    vertex: Vertex
    weight: Cost


@runtime_checkable
class Traversable(Protocol):
    """Anything that can list the successors of a vertex.

    ``successors`` must raise `UnknownVertexError` for a vertex that is not in
    the graph.
    """

    def successors(self, vertex: Vertex) -> Iterable[Vertex]: ...


@runtime_checkable
class WeightedGraph(Protocol):
    """Weighted graph capability used by Dijkstra."""

    def vertices(self) -> Set[Vertex]: ...

    def successors(self, vertex: Vertex) -> Iterable[Successor]: ...
