"""Type definitions and errors for the weighted graph engine."""
from typing import Dict, Hashable, List, Optional
from dataclasses import dataclass, field

from . import config

# Cost is an int for reachable vertices and math.inf otherwise.
Cost = float


@dataclass
class ShortestPaths:
    """Outcome of a Dijkstra run from a single start vertex."""
    start: Hashable
    end: Hashable
    costs: Dict[Hashable, Cost] = field(default_factory=dict)
    predecessors: Dict[Hashable, Optional[Hashable]] = field(default_factory=dict)
    finish_order: List[Hashable] = field(default_factory=list)
    path: List[Hashable] = field(default_factory=list)

    @property
    def reachable(self) -> bool:
        """True if the reconstructed path leads from start to end."""
        return bool(self.path)

    @property
    def distance(self) -> Cost:
        """Cost of the path to end, or inf when end is unreachable."""
        if not self.path:
            return config.INFINITY
        return self.costs[self.end]


# Errors
class GraphError(ValueError):
    """Base error for rejected graph operations."""
    pass


class DuplicateVertexError(GraphError):
    """Vertex is already present in the graph."""

    def __init__(self, vertex):
        super().__init__(f"Vertex {vertex!r} is already in the graph")
        self.vertex = vertex


class UnknownVertexError(GraphError):
    """Vertex is not present in the graph."""

    def __init__(self, vertex):
        super().__init__(f"Vertex {vertex!r} not found in the graph")
        self.vertex = vertex


class InvalidWeightError(GraphError):
    """Edge weight is not a non-negative integer."""

    def __init__(self, weight):
        super().__init__(f"Edge weight must be a non-negative integer, got {weight!r}")
        self.weight = weight
