"""Dijkstra's single-source shortest-path algorithm."""
from typing import TYPE_CHECKING, Dict, Hashable, List, Set
import heapq

from . import config
from .logging import get_logger
from .observer import GraphAlgorithmObserver as Observer, notify_all
from .types import Cost, ShortestPaths, UnknownVertexError

if TYPE_CHECKING:
    from .graph import WeightedGraph

logger = get_logger(__name__)

# Marks "no predecessor"; None is a legal vertex.
_NO_PREDECESSOR = object()


def dijkstra(graph: "WeightedGraph", start: Hashable, end: Hashable) -> ShortestPaths:
    """Run Dijkstra's algorithm from ``start`` over every vertex of the graph.

    The algorithm does not stop at ``end``: it continues until every vertex
    is in the finished set, notifying observers as each one is finished.
    Among vertices of equal cost the one inserted into the graph first is
    finished first, and an equal-cost alternative never replaces a recorded
    predecessor. Vertices that cannot be reached are finished last with
    cost ``inf``.

    Once all vertices are finished, observers receive the least-cost path
    from ``start`` to ``end``; the path is empty if ``end`` is unreachable
    or not in the graph.
    """
    if start not in graph:
        raise UnknownVertexError(start)

    observers = graph.observers
    notify_all(observers, Observer.notify_dijkstra_has_begun)
    logger.debug("Dijkstra from %r", start)

    order = {vertex: index for index, vertex in enumerate(graph.vertices())}
    costs: Dict[Hashable, Cost] = {vertex: config.INFINITY for vertex in order}
    pred: Dict[Hashable, Hashable] = {}
    costs[start] = 0
    finished: Set[Hashable] = set()
    finish_order: List[Hashable] = []

    heap = [(0, order[start], start)]

    while heap:
        cost, _, vertex = heapq.heappop(heap)
        if vertex in finished:
            continue

        finished.add(vertex)
        finish_order.append(vertex)
        notify_all(observers, Observer.notify_dijkstra_vertex_finished, vertex, cost)

        for neighbor, weight in graph.neighbors(vertex).items():
            if neighbor in finished:
                continue
            candidate = cost + weight
            if candidate < costs[neighbor]:
                costs[neighbor] = candidate
                pred[neighbor] = vertex
                heapq.heappush(heap, (candidate, order[neighbor], neighbor))

    for vertex in order:
        if vertex not in finished:
            finished.add(vertex)
            finish_order.append(vertex)
            notify_all(observers, Observer.notify_dijkstra_vertex_finished, vertex, config.INFINITY)

    path = reconstruct_path(pred, start, end)
    logger.debug("Dijkstra finished %d vertices, path to %r has %d vertices",
                 len(finish_order), end, len(path))
    notify_all(observers, Observer.notify_dijkstra_is_over, list(path))

    return ShortestPaths(
        start=start,
        end=end,
        costs=costs,
        predecessors={vertex: pred.get(vertex) for vertex in order},
        finish_order=finish_order,
        path=path,
    )


def reconstruct_path(pred: Dict[Hashable, Hashable],
                     start: Hashable, end: Hashable) -> List[Hashable]:
    """Walk predecessors back from ``end``; [] unless the walk arrives at ``start``.

    ``pred`` maps a vertex to its predecessor. A vertex with no predecessor
    is either absent or, as in ``ShortestPaths.predecessors``, maps to None.
    """
    path = [end]
    seen = {end}
    current = end
    while current != start:
        current = pred.get(current, _NO_PREDECESSOR)
        if current is _NO_PREDECESSOR or current in seen:
            return []
        path.append(current)
        seen.add(current)
    path.reverse()
    return path


def path_weight(graph: "WeightedGraph", path: List[Hashable]) -> int:
    """Sum of the edge weights along ``path``.

    Raises:
        ValueError: if two consecutive vertices are not joined by an edge.
    """
    total = 0
    for from_vertex, to_vertex in zip(path, path[1:]):
        weight = graph.get_weight(from_vertex, to_vertex)
        if weight is None:
            raise ValueError(f"No edge from {from_vertex!r} to {to_vertex!r}")
        total += weight
    return total
