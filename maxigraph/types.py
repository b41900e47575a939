"""Shared type aliases."""

from __future__ import annotations

from typing import Dict, Hashable, List, Optional, Union

#: Numeric cost of an edge or path (distance, latency, etc.).
Cost = Union[int, float]

#: Any hashable value identifies a vertex.
Vertex = Hashable

#: Source-first vertex sequence.
Path = List[Vertex]

#: Spanning tree in parent-pointer form; the source maps to ``None``.
ParentMap = Dict[Vertex, Optional[Vertex]]
