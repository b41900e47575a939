"""Configuration classes for maxigraph algorithms."""

import math
from dataclasses import dataclass

from maxigraph.types import Cost


@dataclass
class DijkstraConfig:
    """Configuration for the Dijkstra shortest-path runs."""

    # Raise NegativeWeightError on a negative edge weight instead of trusting
    # the caller's non-negativity precondition
    check_weights: bool = False

    # Candidates costlier than this are never enqueued
    max_path_cost: Cost = math.inf

    def admits(self, cost: Cost) -> bool:
        """Return True if a candidate of the given total cost may be enqueued."""
        return cost <= self.max_path_cost


# Global configuration instance
DIJKSTRA_CONFIG = DijkstraConfig()
