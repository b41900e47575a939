"""Strict graphs with explicit vertex management.

`StrictGraph` and `StrictDiGraph` extend the NetworkX graph classes so that
edges never create vertices implicitly, duplicate vertices are rejected and
every lookup of a missing vertex raises `UnknownVertexError`. Both expose the
``successors``/``vertices`` capabilities the algorithms consume.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Set

import networkx as nx

from maxigraph.errors import GraphError, UnknownVertexError
from maxigraph.types import Vertex

DEFAULT_WEIGHT_ATTR = "weight"


class _StrictVertexMixin:
    """Vertex/edge validation shared by the directed and undirected variants.

    Relies on NetworkX's ``_adj`` outgoing adjacency, which for undirected
    graphs holds the neighbours.
    """

    _adj: Any

    def __init__(self, incoming_graph_data: Any = None, **attr: Any) -> None:
        """Create the graph, optionally from NetworkX-convertible data.

        A bare edge list declares no vertices and is always rejected; seed
        from a dict-of-dicts or another graph instead.

        Raises:
            UnknownVertexError: If the data holds an edge to a vertex that was
                not declared.
        """
        try:
            super().__init__(incoming_graph_data, **attr)  # type: ignore[call-arg]
        except (nx.NetworkXError, TypeError) as err:
            # NetworkX wraps conversion failures; surface the vertex error
            if isinstance(err.__cause__, GraphError):
                raise err.__cause__ from None
            raise

    #
    # Vertex management
    #
    def add_node(self, node_for_adding: Vertex, **attr: Any) -> None:
        """Add a single vertex, disallowing duplicates.

        Args:
            node_for_adding: The vertex to add.
            **attr: Arbitrary attributes for this vertex.

        Raises:
            ValueError: If the vertex already exists in the graph.
        """
        if node_for_adding in self._adj:
            raise ValueError(
                f"Vertex '{node_for_adding}' already exists in this graph."
            )
        super().add_node(node_for_adding, **attr)  # type: ignore[misc]

    def add_vertex(self, vertex: Vertex, **attr: Any) -> None:
        """Alias of `add_node`."""
        self.add_node(vertex, **attr)

    def remove_node(self, n: Vertex) -> None:
        """Remove a vertex and its incident edges.

        Raises:
            UnknownVertexError: If the vertex does not exist.
        """
        if n not in self._adj:
            raise UnknownVertexError(f"Vertex '{n}' does not exist.", n)
        super().remove_node(n)  # type: ignore[misc]

    def remove_vertex(self, vertex: Vertex) -> None:
        """Alias of `remove_node`."""
        self.remove_node(vertex)

    def vertices(self) -> Set[Vertex]:
        """Return a fresh set with every vertex."""
        return set(self._adj)

    #
    # Edge management
    #
    def add_edge(self, u_of_edge: Vertex, v_of_edge: Vertex, **attr: Any) -> None:
        """Add an edge between two existing vertices.

        Re-adding an existing edge updates its attributes, as in NetworkX.

        Raises:
            UnknownVertexError: If either endpoint is not in the graph.
        """
        if u_of_edge not in self._adj:
            raise UnknownVertexError(
                f"Source vertex '{u_of_edge}' does not exist.", u_of_edge
            )
        if v_of_edge not in self._adj:
            raise UnknownVertexError(
                f"Target vertex '{v_of_edge}' does not exist.", v_of_edge
            )
        super().add_edge(u_of_edge, v_of_edge, **attr)  # type: ignore[misc]

    def add_edges_from(self, ebunch_to_add: Iterable[tuple], **attr: Any) -> None:
        """Add each ``(u, v)`` or ``(u, v, data)`` item through `add_edge`.

        ``add_weighted_edges_from`` and edge-list construction both end up here.

        Raises:
            UnknownVertexError: If an endpoint is not in the graph. Edges added
                before the failing item are kept.
            ValueError: If an item is not a 2-tuple or 3-tuple.
        """
        for edge in ebunch_to_add:
            if len(edge) == 3:
                u, v, data = edge
            elif len(edge) == 2:
                u, v = edge
                data = {}
            else:
                raise ValueError(f"Edge tuple {edge} must be a 2-tuple or 3-tuple.")
            self.add_edge(u, v, **{**attr, **data})

    def remove_edge(self, u: Vertex, v: Vertex) -> None:
        """Remove the edge between ``u`` and ``v``.

        Raises:
            UnknownVertexError: If either endpoint is not in the graph.
            ValueError: If the vertices exist but no such edge does.
        """
        if u not in self._adj:
            raise UnknownVertexError(f"Source vertex '{u}' does not exist.", u)
        if v not in self._adj:
            raise UnknownVertexError(f"Target vertex '{v}' does not exist.", v)
        if v not in self._adj[u]:
            raise ValueError(f"No edge from '{u}' to '{v}' to remove.")
        super().remove_edge(u, v)  # type: ignore[misc]

    #
    # Capabilities
    #
    def successors(self, n: Vertex) -> Iterator[Vertex]:
        """Iterate over the vertices adjacent from ``n``.

        Raises:
            UnknownVertexError: If ``n`` is not in the graph.
        """
        try:
            return iter(self._adj[n])
        except KeyError:
            raise UnknownVertexError(f"Vertex '{n}' is not in the graph.", n) from None


class StrictDiGraph(_StrictVertexMixin, nx.DiGraph):
    """Directed graph with strict vertex rules. Inherits from networkx.DiGraph."""


class StrictGraph(_StrictVertexMixin, nx.Graph):
    """Undirected graph with strict vertex rules. Inherits from networkx.Graph.

    ``successors`` of a vertex are its neighbours.
    """
