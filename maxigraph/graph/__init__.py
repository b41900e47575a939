"""Graph capabilities and NetworkX-backed graph types.

This package provides the `Traversable`/`WeightedGraph` protocols consumed by
the algorithms, the strict graph types `StrictGraph`/`StrictDiGraph`, and views
adapting plain NetworkX graphs (`TraversableView`, `WeightedView`).
"""

from maxigraph.graph.base import Successor, Traversable, WeightedGraph
from maxigraph.graph.strict import StrictDiGraph, StrictGraph
from maxigraph.graph.view import (
    TraversableView,
    WeightedView,
    as_traversable,
    as_weighted,
)

__all__ = [
    "Successor",
    "Traversable",
    "WeightedGraph",
    "StrictGraph",
    "StrictDiGraph",
    "TraversableView",
    "WeightedView",
    "as_traversable",
    "as_weighted",
]
