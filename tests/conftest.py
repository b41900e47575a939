"""Shared graph fixtures."""

from __future__ import annotations

import pytest

from maxigraph.graph import StrictDiGraph, StrictGraph


def _strict(cls, vertices, edges):
    g = cls()
    for v in vertices:
        g.add_vertex(v)
    for u, v, w in edges:
        g.add_edge(u, v, weight=w)
    return g


@pytest.fixture
def diamond():
    # Weight (undirected):
    #       [1]
    #    A─────B
    #    │    ╱
    # [4]│   ╱[2]
    #    │  ╱
    #    C─────D
    #       [1]
    return _strict(
        StrictGraph,
        "ABCD",
        [("A", "B", 1), ("A", "C", 4), ("B", "C", 2), ("C", "D", 1)],
    )


@pytest.fixture
def square1():
    # Weight (directed):
    #       [1]        [1]
    #   ┌────────►B─────────┐
    #   │                   │
    #   │                   ▼
    #   A                   C
    #   │                   ▲
    #   │   [2]        [2]  │
    #   └────────►D─────────┘
    return _strict(
        StrictDiGraph,
        "ABCD",
        [("A", "B", 1), ("B", "C", 1), ("A", "D", 2), ("D", "C", 2)],
    )


@pytest.fixture
def tree1():
    # Directed, unit weights:
    #          A
    #        ╱   ╲
    #       B     C
    #      ╱ ╲     ╲
    #     D   E     F
    return _strict(
        StrictDiGraph,
        "ABCDEF",
        [
            ("A", "B", 1),
            ("A", "C", 1),
            ("B", "D", 1),
            ("B", "E", 1),
            ("C", "F", 1),
        ],
    )


@pytest.fixture
def islands():
    # Undirected:
    #     [3]        [5]
    #  A─────B    C─────D     E
    return _strict(StrictGraph, "ABCDE", [("A", "B", 3), ("C", "D", 5)])


@pytest.fixture
def cycle1():
    # Directed ring with a chord:
    #  A ─[1]─► B ─[1]─► C ─[1]─► D
    #  ▲                          │
    #  └───────────[1]────────────┘
    #  A ─[5]─► C
    return _strict(
        StrictDiGraph,
        "ABCD",
        [
            ("A", "B", 1),
            ("B", "C", 1),
            ("C", "D", 1),
            ("D", "A", 1),
            ("A", "C", 5),
        ],
    )
