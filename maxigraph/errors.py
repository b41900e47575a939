"""Exception hierarchy for maxigraph.

All errors derive from `MaxigraphError`. Each concrete error also inherits a
builtin exception so callers catching ``KeyError``/``IndexError``/``ValueError``
keep working.
"""

from __future__ import annotations

from typing import Hashable, Optional


class MaxigraphError(Exception):
    """Base class for all maxigraph errors."""


class EmptyStructureError(MaxigraphError, IndexError):
    """Raised when reading or removing the minimum of an empty heap or queue."""


class GraphError(MaxigraphError):
    """Base class for graph-related errors.

    Attributes:
        vertex: The offending vertex, if any.
    """

    def __init__(self, message: str, vertex: Optional[Hashable] = None) -> None:
        super().__init__(message)
        self.message = message
        self.vertex = vertex

    def __str__(self) -> str:
        return self.message


class UnknownVertexError(GraphError, KeyError):
    """Raised when a vertex is not present in the graph."""


class UnreachableVertexError(GraphError, LookupError):
    """Raised when a path is requested to a vertex the run never reached."""


class NegativeWeightError(GraphError, ValueError):
    """Raised when weight checking is enabled and a negative edge weight is met."""
