"""Graph algorithms: spanning-tree traversals and shortest paths."""

from maxigraph.algorithms.dijkstra import (
    Extension,
    ShortestPathTree,
    dijkstra,
    dijkstra_paths,
    dijkstra_tree,
)
from maxigraph.algorithms.paths import resolve_path
from maxigraph.algorithms.traversal import BFSPaths, DFSPaths, PendingEdge

__all__ = [
    "BFSPaths",
    "DFSPaths",
    "PendingEdge",
    "Extension",
    "ShortestPathTree",
    "dijkstra",
    "dijkstra_paths",
    "dijkstra_tree",
    "resolve_path",
]
