"""Adapters exposing arbitrary NetworkX graphs through the algorithm capabilities.

Plain NetworkX graphs raise ``NetworkXError`` (or have no ``successors`` at
all, for undirected graphs). The views here translate lookups of missing
vertices into `UnknownVertexError` and resolve edge weights, choosing the
cheapest of any parallel edges in multigraphs.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, Optional, Set, Union

import networkx as nx

from maxigraph.errors import UnknownVertexError
from maxigraph.graph.base import Successor, Traversable, WeightedGraph
from maxigraph.graph.strict import (
    DEFAULT_WEIGHT_ATTR,
    StrictDiGraph,
    StrictGraph,
)
from maxigraph.types import Cost, Vertex

#: Either an edge attribute name or ``f(u, v, edge_data) -> weight or None``.
WeightSpec = Union[str, Callable[[Vertex, Vertex, Dict[str, Any]], Optional[Cost]]]


def _weight_function(
    graph: nx.Graph, weight: WeightSpec, default: Cost
) -> Callable[[Vertex, Vertex, Dict[str, Any]], Optional[Cost]]:
    """Return ``f(u, v, data)`` resolving the weight of the edge(s) ``u -> v``.

    For multigraphs ``data`` maps edge keys to attribute dicts and the minimum
    weight among the parallel edges is used.
    """
    if callable(weight):
        return weight
    if graph.is_multigraph():
        return lambda u, v, d: min(attr.get(weight, default) for attr in d.values())
    return lambda u, v, d: d.get(weight, default)


class TraversableView:
    """Unweighted ``successors`` over any NetworkX graph."""

    def __init__(self, graph: nx.Graph) -> None:
        self.graph = graph

    def successors(self, vertex: Vertex) -> Iterator[Vertex]:
        adj = self.graph.adj
        if vertex not in adj:
            raise UnknownVertexError(f"Vertex '{vertex}' is not in the graph.", vertex)
        return iter(adj[vertex])


class WeightedView:
    """`WeightedGraph` capability over any NetworkX graph.

    Attributes:
        graph: The wrapped graph; never modified.
        weight: Edge attribute name or weight callable. A callable returning
            None hides that edge.
        default: Weight for edges without the attribute.
    """

    def __init__(
        self,
        graph: nx.Graph,
        weight: WeightSpec = DEFAULT_WEIGHT_ATTR,
        default: Cost = 1,
    ) -> None:
        self.graph = graph
        self.weight = weight
        self.default = default
        self._weight_of = _weight_function(graph, weight, default)

    def vertices(self) -> Set[Vertex]:
        return set(self.graph.nodes)

    def successors(self, vertex: Vertex) -> Iterator[Successor]:
        """Iterate over ``(vertex, weight)`` pairs adjacent from ``vertex``.

        Raises:
            UnknownVertexError: If ``vertex`` is not in the graph.
        """
        adj = self.graph.adj
        if vertex not in adj:
            raise UnknownVertexError(f"Vertex '{vertex}' is not in the graph.", vertex)
        return self._iter_successors(vertex, adj[vertex])

    def _iter_successors(
        self, vertex: Vertex, neighbors: Dict[Vertex, Any]
    ) -> Iterator[Successor]:
        for neighbor, data in neighbors.items():
            cost = self._weight_of(vertex, neighbor, data)
            if cost is None:
                continue
            yield Successor(neighbor, cost)


def as_traversable(graph: Any) -> Traversable:
    """Return ``graph`` itself if it already raises `UnknownVertexError`, else a view.

    Strict graphs and non-NetworkX objects are passed through unchanged.
    """
    if isinstance(graph, nx.Graph) and not isinstance(
        graph, (StrictGraph, StrictDiGraph)
    ):
        return TraversableView(graph)
    return graph


def as_weighted(
    graph: Any, weight: WeightSpec = DEFAULT_WEIGHT_ATTR, default: Cost = 1
) -> WeightedGraph:
    """Wrap a NetworkX graph in a `WeightedView`; pass other objects through."""
    if isinstance(graph, nx.Graph):
        return WeightedView(graph, weight=weight, default=default)
    return graph
