"""maxigraph: mergeable heaps and the graph algorithms built on them.

maxigraph provides a maxiphobic (weight-balanced, mergeable) min-heap, a
priority queue adapter over it, breadth-/depth-first spanning-tree traversals
with path reconstruction, and lazy-deletion Dijkstra shortest paths.

Primary API:
    MaxiphobicHeap, PriorityQueue - Mergeable heap and queue adapter
    BFSPaths, DFSPaths - Spanning-tree traversals with ``path_to``
    dijkstra(), dijkstra_paths(), dijkstra_tree() - Single-source shortest paths
    StrictGraph, StrictDiGraph - NetworkX graphs with strict vertex rules
    WeightedView - Weighted capability over any NetworkX graph

Example:
    from maxigraph import StrictGraph, dijkstra_paths

    g = StrictGraph()
    for v in "ABCD":
        g.add_vertex(v)
    g.add_edge("A", "B", weight=1)
    g.add_edge("A", "C", weight=4)
    g.add_edge("B", "C", weight=2)
    g.add_edge("C", "D", weight=1)

    dijkstra_paths(g, "A")["D"]  # (4, ['A', 'B', 'C', 'D'])
"""

from __future__ import annotations

from maxigraph import logging
from maxigraph.algorithms import (
    BFSPaths,
    DFSPaths,
    ShortestPathTree,
    dijkstra,
    dijkstra_paths,
    dijkstra_tree,
)
from maxigraph.config import DIJKSTRA_CONFIG, DijkstraConfig
from maxigraph.errors import (
    EmptyStructureError,
    GraphError,
    MaxigraphError,
    NegativeWeightError,
    UnknownVertexError,
    UnreachableVertexError,
)
from maxigraph.graph import (
    StrictDiGraph,
    StrictGraph,
    Successor,
    Traversable,
    WeightedGraph,
    WeightedView,
)
from maxigraph.heap import MaxiphobicHeap
from maxigraph.priority_queue import PriorityQueue

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Structures
    "MaxiphobicHeap",
    "PriorityQueue",
    # Algorithms
    "BFSPaths",
    "DFSPaths",
    "dijkstra",
    "dijkstra_paths",
    "dijkstra_tree",
    "ShortestPathTree",
    # Graphs
    "StrictGraph",
    "StrictDiGraph",
    "Successor",
    "Traversable",
    "WeightedGraph",
    "WeightedView",
    # Configuration
    "DijkstraConfig",
    "DIJKSTRA_CONFIG",
    # Errors
    "MaxigraphError",
    "EmptyStructureError",
    "GraphError",
    "UnknownVertexError",
    "UnreachableVertexError",
    "NegativeWeightError",
    # Utilities
    "logging",
]
