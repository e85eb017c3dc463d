"""BFS and DFS traversal implementations."""
from typing import TYPE_CHECKING, Hashable, Set
from collections import deque

from .logging import get_logger
from .observer import GraphAlgorithmObserver as Observer, notify_all
from .types import UnknownVertexError

if TYPE_CHECKING:
    from .graph import WeightedGraph

logger = get_logger(__name__)


def bfs(graph: "WeightedGraph", start: Hashable, end: Hashable) -> bool:
    """Breadth-first search from ``start`` until ``end`` has been visited.

    The queue may hold a vertex more than once when it has several incoming
    edges, so the visited check happens on dequeue. Observers get
    ``notify_search_is_over`` right after ``end`` is visited and nothing is
    processed after that. If ``end`` is never reached the search simply
    drains the queue.

    Returns:
        True if ``end`` was visited.
    """
    if start not in graph:
        raise UnknownVertexError(start)

    observers = graph.observers
    notify_all(observers, Observer.notify_bfs_has_begun)
    logger.debug("BFS from %r to %r", start, end)

    visited: Set[Hashable] = set()
    queue = deque([start])

    while queue:
        vertex = queue.popleft()
        if vertex in visited:
            continue

        notify_all(observers, Observer.notify_visit, vertex)
        visited.add(vertex)

        for neighbor in graph.neighbors(vertex):
            if neighbor not in visited:
                queue.append(neighbor)

        if vertex == end:
            logger.debug("BFS reached %r after %d visits", end, len(visited))
            notify_all(observers, Observer.notify_search_is_over)
            return True

    logger.debug("BFS exhausted %d vertices without reaching %r", len(visited), end)
    return False


def dfs(graph: "WeightedGraph", start: Hashable, end: Hashable) -> bool:
    """Depth-first search from ``start`` until ``end`` has been visited.

    Vertices are visited in pre-order, neighbors in adjacency order. The
    recursion is unrolled onto a stack of neighbor iterators; finding
    ``end`` abandons every pending iterator at once.

    Returns:
        True if ``end`` was visited.
    """
    if start not in graph:
        raise UnknownVertexError(start)

    observers = graph.observers
    notify_all(observers, Observer.notify_dfs_has_begun)
    logger.debug("DFS from %r to %r", start, end)

    visited: Set[Hashable] = set()
    found = _enter(observers, start, end, visited)
    stack = [] if found else [iter(graph.neighbors(start))]

    while stack and not found:
        for neighbor in stack[-1]:
            if neighbor in visited:
                continue
            if _enter(observers, neighbor, end, visited):
                found = True
            else:
                stack.append(iter(graph.neighbors(neighbor)))
            break
        else:
            stack.pop()

    if not found:
        logger.debug("DFS exhausted %d vertices without reaching %r", len(visited), end)
        return False

    logger.debug("DFS reached %r after %d visits", end, len(visited) + 1)
    notify_all(observers, Observer.notify_search_is_over)
    return True


def _enter(observers, vertex, end, visited) -> bool:
    """Visit one vertex; True means it is the end vertex."""
    notify_all(observers, Observer.notify_visit, vertex)
    if vertex == end:
        return True
    visited.add(vertex)
    return False
