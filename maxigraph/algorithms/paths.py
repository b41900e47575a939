"""Path reconstruction from parent-pointer spanning trees."""

from __future__ import annotations

from maxigraph.errors import UnreachableVertexError
from maxigraph.types import ParentMap, Path, Vertex


def resolve_path(parent_of: ParentMap, destination: Vertex) -> Path:
    """Walk parent links back from ``destination`` and return a source-first path.

    The walk stops at the ``None`` sentinel recorded as the source's parent, so
    the path to the source itself is ``[source]``.

    Args:
        parent_of: Parent map produced by a traversal or shortest-path run.
        destination: Vertex to reconstruct the path to.

    Returns:
        List of vertices from the source to ``destination``, both included.

    Raises:
        UnreachableVertexError: If ``destination`` is not in ``parent_of``.
    """
    if destination not in parent_of:
        raise UnreachableVertexError(
            f"Vertex '{destination}' was not reached from the source.", destination
        )

    path = [destination]
    vertex = parent_of[destination]
    while vertex is not None:
        path.append(vertex)
        vertex = parent_of[vertex]
    path.reverse()
    return path
