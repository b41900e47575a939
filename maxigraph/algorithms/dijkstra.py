"""Single-source shortest paths with a lazy-deletion priority queue.

Implements Dijkstra's algorithm over graphs with non-negative edge weights.
Vertices move one at a time from the unfinalized set to the finalized set. Each
step dequeues the cheapest `Extension` (a candidate edge from a finalized vertex
with the total cost of reaching its destination). If that destination is
already finalized the entry is stale and is dropped; otherwise the destination
is finalized at that cost and one new extension per successor is enqueued.

Notes:
    Stale entries are never updated or removed early, so the queue may hold up
    to O(E) superseded extensions. The run stops when every vertex is finalized
    or when the queue runs dry; vertices never reached are simply absent from
    the results.

    Equal-cost extensions leave the queue in the order they were enqueued.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import count
from typing import Any, Dict, Iterator, List, Optional, Tuple, cast

from maxigraph.algorithms.paths import resolve_path
from maxigraph.config import DIJKSTRA_CONFIG, DijkstraConfig
from maxigraph.errors import NegativeWeightError, UnreachableVertexError
from maxigraph.graph.strict import DEFAULT_WEIGHT_ATTR
from maxigraph.graph.view import WeightSpec, as_weighted
from maxigraph.logging import get_logger, log_run_summary
from maxigraph.priority_queue import PriorityQueue
from maxigraph.types import Cost, ParentMap, Path, Vertex

logger = get_logger(__name__)


@dataclass(frozen=True)
class Extension:
    """Candidate edge ``source -> destination`` reaching it at ``total_cost``.

    Attributes:
        source: Finalized vertex the candidate extends from.
        destination: Vertex the candidate would finalize.
        total_cost: Cost of the whole path from the run's source.
        seq: Enqueue order; breaks ties between equal costs.
        path: Accumulated vertex sequence, only carried by `dijkstra_paths`.
    """

    source: Vertex
    destination: Vertex
    total_cost: Cost
    seq: int
    path: Optional[Tuple[Vertex, ...]] = None


def _priority(extension: Extension) -> Tuple[Cost, int]:
    return extension.total_cost, extension.seq


def _finalize(
    graph: Any,
    source: Vertex,
    config: DijkstraConfig,
    carry_paths: bool,
) -> Iterator[Extension]:
    """Yield the extension that finalizes each reachable vertex, cheapest first.

    The source itself is finalized up front and is not yielded.

    Raises:
        UnknownVertexError: If ``source`` is not in the graph.
        NegativeWeightError: If ``config.check_weights`` and a negative weight
            is found.
    """
    remaining = set(graph.vertices())
    remaining.discard(source)
    finalized = {source}
    queue: PriorityQueue[Extension] = PriorityQueue(key=_priority)
    seq = count()
    pushed = 0
    stale = 0

    def expand(vertex: Vertex, base_cost: Cost, base_path: Optional[tuple]) -> int:
        enqueued = 0
        for neighbor, weight in graph.successors(vertex):
            if config.check_weights and weight < 0:
                raise NegativeWeightError(
                    f"Edge '{vertex}' -> '{neighbor}' has negative weight {weight}.",
                    vertex,
                )
            total_cost = base_cost + weight
            if not config.admits(total_cost):
                continue
            path = base_path + (neighbor,) if base_path is not None else None
            queue.enqueue(Extension(vertex, neighbor, total_cost, next(seq), path))
            enqueued += 1
        return enqueued

    pushed += expand(source, 0, (source,) if carry_paths else None)

    while remaining and queue:
        extension = queue.first()
        queue.dequeue()

        if extension.destination in finalized:
            stale += 1
            continue

        finalized.add(extension.destination)
        remaining.discard(extension.destination)
        yield extension

        pushed += expand(
            extension.destination, extension.total_cost, extension.path
        )

    log_run_summary(
        logger,
        "Dijkstra from %r: finalized %d vertices, %d unreached, "
        "%d extensions enqueued, %d stale discarded, %d left in queue",
        source,
        len(finalized),
        len(remaining),
        pushed,
        stale,
        len(queue),
    )


def dijkstra(
    graph: Any,
    source: Vertex,
    weight: WeightSpec = DEFAULT_WEIGHT_ATTR,
    config: Optional[DijkstraConfig] = None,
) -> Dict[Vertex, Cost]:
    """Compute shortest-path costs from ``source`` to every reachable vertex.

    Args:
        graph: A `WeightedGraph` (``vertices()`` plus weighted ``successors``),
            or any NetworkX graph, which is wrapped in a `WeightedView`.
        source: The source vertex.
        weight: Edge attribute or weight callable, used for NetworkX graphs.
        config: Run configuration; defaults to the global `DIJKSTRA_CONFIG`.

    Returns:
        Mapping of each reachable vertex to its minimal cost; the source maps
        to 0. Unreachable vertices are absent.

    Raises:
        UnknownVertexError: If ``source`` is not in the graph.
    """
    config = config or DIJKSTRA_CONFIG
    costs: Dict[Vertex, Cost] = {source: 0}
    for extension in _finalize(as_weighted(graph, weight), source, config, False):
        costs[extension.destination] = extension.total_cost
    return costs


def dijkstra_paths(
    graph: Any,
    source: Vertex,
    weight: WeightSpec = DEFAULT_WEIGHT_ATTR,
    config: Optional[DijkstraConfig] = None,
) -> Dict[Vertex, Tuple[Cost, Path]]:
    """Compute shortest-path costs and vertex sequences from ``source``.

    Every extension carries its full path, so memory is O(V) per queued
    extension. Prefer `dijkstra_tree` for large graphs.

    Args:
        graph: A `WeightedGraph` or any NetworkX graph.
        source: The source vertex.
        weight: Edge attribute or weight callable, used for NetworkX graphs.
        config: Run configuration; defaults to the global `DIJKSTRA_CONFIG`.

    Returns:
        Mapping of each reachable vertex to ``(cost, path)`` where ``path`` is
        source-first; the source maps to ``(0, [source])``.

    Raises:
        UnknownVertexError: If ``source`` is not in the graph.
    """
    config = config or DIJKSTRA_CONFIG
    results: Dict[Vertex, Tuple[Cost, Path]] = {source: (0, [source])}
    for extension in _finalize(as_weighted(graph, weight), source, config, True):
        path = cast(Tuple[Vertex, ...], extension.path)
        results[extension.destination] = (extension.total_cost, list(path))
    return results


@dataclass
class ShortestPathTree:
    """Shortest-path costs plus the parent-pointer tree they were found along.

    Attributes:
        source: The run's source vertex.
        costs: Minimal cost per reachable vertex.
        parent_of: Predecessor per reachable vertex; the source maps to None.
    """

    source: Vertex
    costs: Dict[Vertex, Cost] = field(default_factory=dict)
    parent_of: ParentMap = field(default_factory=dict)

    def reachable(self, vertex: Vertex) -> bool:
        return vertex in self.costs

    def cost_to(self, vertex: Vertex) -> Cost:
        """Return the minimal cost to ``vertex``.

        Raises:
            UnreachableVertexError: If ``vertex`` was not reached.
        """
        if vertex not in self.costs:
            raise UnreachableVertexError(
                f"Vertex '{vertex}' was not reached from '{self.source}'.", vertex
            )
        return self.costs[vertex]

    def path_to(self, vertex: Vertex) -> Path:
        """Reconstruct the shortest path to ``vertex`` from the parent pointers.

        Raises:
            UnreachableVertexError: If ``vertex`` was not reached.
        """
        return resolve_path(self.parent_of, vertex)

    def paths(self) -> Dict[Vertex, List[Vertex]]:
        """Return the shortest path to every reachable vertex."""
        return {vertex: self.path_to(vertex) for vertex in self.costs}


def dijkstra_tree(
    graph: Any,
    source: Vertex,
    weight: WeightSpec = DEFAULT_WEIGHT_ATTR,
    config: Optional[DijkstraConfig] = None,
) -> ShortestPathTree:
    """Compute shortest-path costs and parent pointers from ``source``.

    Same control flow as `dijkstra`; finalizing a vertex also records the
    extension's source as its parent, so paths are rebuilt on demand instead
    of being carried through the queue.

    Raises:
        UnknownVertexError: If ``source`` is not in the graph.
    """
    config = config or DIJKSTRA_CONFIG
    tree = ShortestPathTree(source, {source: 0}, {source: None})
    for extension in _finalize(as_weighted(graph, weight), source, config, False):
        tree.costs[extension.destination] = extension.total_cost
        tree.parent_of[extension.destination] = extension.source
    return tree
