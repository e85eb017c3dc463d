"""Directed weighted graph store with observer-instrumented algorithms."""
from types import MappingProxyType
from typing import Dict, Hashable, Iterator, List, Mapping, Optional, Tuple

from .logging import get_logger
from .observer import GraphAlgorithmObserver
from .paths import dijkstra
from .traversal import bfs, dfs
from .types import (
    DuplicateVertexError, InvalidWeightError, ShortestPaths, UnknownVertexError,
)

logger = get_logger(__name__)


class WeightedGraph:
    """A general directed graph with non-negative integer edge weights.

    The graph never stores duplicate vertices, and every edge must join two
    vertices already in the graph. Vertices may be any hashable value.

    Observers registered with ``register_observer`` are notified while
    ``run_bfs``, ``run_dfs`` and ``run_dijkstra`` progress.
    """

    def __init__(self):
        self._adj: Dict[Hashable, Dict[Hashable, int]] = {}
        self._observers: List[GraphAlgorithmObserver] = []

    def __repr__(self) -> str:
        return f"<{type(self).__name__} vertices={self.vertex_count} edges={self.edge_count}>"

    def __len__(self) -> int:
        return len(self._adj)

    def __contains__(self, vertex) -> bool:
        return vertex in self._adj

    # -----------------
    # OBSERVERS
    # -----------------

    def register_observer(self, observer: GraphAlgorithmObserver) -> None:
        """Append an observer; the same observer may be registered twice."""
        self._observers.append(observer)

    @property
    def observers(self) -> Tuple[GraphAlgorithmObserver, ...]:
        return tuple(self._observers)

    # -----------------
    # VERTEX OPERATIONS
    # -----------------

    def add_vertex(self, vertex: Hashable) -> None:
        """Add a vertex with no outgoing edges.

        Raises:
            DuplicateVertexError: if the vertex is already in the graph.
        """
        if vertex in self._adj:
            raise DuplicateVertexError(vertex)
        self._adj[vertex] = {}
        logger.debug("Added vertex %r", vertex)

    def contains_vertex(self, vertex: Hashable) -> bool:
        return vertex in self._adj

    def vertices(self) -> List[Hashable]:
        """All vertices, in insertion order."""
        return list(self._adj)

    @property
    def vertex_count(self) -> int:
        return len(self._adj)

    # -----------------
    # EDGE OPERATIONS
    # -----------------

    def add_edge(self, from_vertex: Hashable, to_vertex: Hashable, weight: int) -> None:
        """Add or overwrite the directed edge ``from_vertex -> to_vertex``.

        Args:
            from_vertex: the vertex the edge leads from
            to_vertex: the vertex the edge leads to
            weight: the non-negative integer weight of the edge

        Raises:
            UnknownVertexError: if either vertex is not in the graph.
            InvalidWeightError: if the weight is negative or not an integer.
        """
        if from_vertex not in self._adj:
            raise UnknownVertexError(from_vertex)
        if to_vertex not in self._adj:
            raise UnknownVertexError(to_vertex)
        if isinstance(weight, bool) or not isinstance(weight, int) or weight < 0:
            raise InvalidWeightError(weight)

        self._adj[from_vertex][to_vertex] = weight
        logger.debug("Added edge %r -> %r (%d)", from_vertex, to_vertex, weight)

    def get_weight(self, from_vertex: Hashable, to_vertex: Hashable) -> Optional[int]:
        """Weight of the edge ``from_vertex -> to_vertex``, or None if there is no edge.

        Raises:
            UnknownVertexError: if either vertex is not in the graph.
        """
        if from_vertex not in self._adj:
            raise UnknownVertexError(from_vertex)
        if to_vertex not in self._adj:
            raise UnknownVertexError(to_vertex)
        return self._adj[from_vertex].get(to_vertex)

    def neighbors(self, vertex: Hashable) -> Mapping[Hashable, int]:
        """Read-only view of the outgoing edges of ``vertex``, in insertion order."""
        if vertex not in self._adj:
            raise UnknownVertexError(vertex)
        return MappingProxyType(self._adj[vertex])

    def edges(self) -> Iterator[Tuple[Hashable, Hashable, int]]:
        for from_vertex, targets in self._adj.items():
            for to_vertex, weight in targets.items():
                yield from_vertex, to_vertex, weight

    @property
    def edge_count(self) -> int:
        return sum(len(targets) for targets in self._adj.values())

    # -----------------
    # ALGORITHMS
    # -----------------

    def run_bfs(self, start: Hashable, end: Hashable) -> bool:
        """Breadth-first search from ``start`` that stops once ``end`` is visited."""
        return bfs(self, start, end)

    def run_dfs(self, start: Hashable, end: Hashable) -> bool:
        """Depth-first search from ``start`` that stops once ``end`` is visited."""
        return dfs(self, start, end)

    def run_dijkstra(self, start: Hashable, end: Hashable) -> ShortestPaths:
        """Dijkstra's algorithm over the whole graph, reporting the path to ``end``."""
        return dijkstra(self, start, end)
