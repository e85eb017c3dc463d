"""Observer protocol notified by the graph traversal algorithms."""
from typing import Any, Callable, Hashable, List, Sequence, Tuple


class GraphAlgorithmObserver:
    """A listener invoked at the event points of the graph algorithms.

    By default every method does nothing; subclass and override the
    notifications you care about. All calls are made synchronously, on the
    thread running the traversal, in observer registration order.
    """

    def notify_bfs_has_begun(self) -> None:
        """Invoked once before breadth-first search visits any vertex."""
        return

    def notify_dfs_has_begun(self) -> None:
        """Invoked once before depth-first search visits any vertex."""
        return

    def notify_dijkstra_has_begun(self) -> None:
        """Invoked once before Dijkstra's algorithm finishes any vertex."""
        return

    def notify_visit(self, vertex: Hashable) -> None:
        """Invoked once per vertex visited by BFS or DFS, as it is visited."""
        return

    def notify_dijkstra_vertex_finished(self, vertex: Hashable, cost: float) -> None:
        """Invoked once per vertex as Dijkstra moves it into the finished set.

        ``cost`` is the optimal cost from the start vertex, or ``math.inf``
        when the vertex cannot be reached.
        """
        return

    def notify_search_is_over(self) -> None:
        """Invoked once, right after BFS or DFS visits the end vertex."""
        return

    def notify_dijkstra_is_over(self, path: List[Hashable]) -> None:
        """Invoked once after every vertex is finished.

        ``path`` runs from start to end, and is empty when end is unreachable.
        """
        return


class RecordingObserver(GraphAlgorithmObserver):
    """Observer that keeps every notification as an event tuple."""

    def __init__(self):
        self.events: List[Tuple[Any, ...]] = []

    def notify_bfs_has_begun(self):
        self.events.append(("bfs_begun",))

    def notify_dfs_has_begun(self):
        self.events.append(("dfs_begun",))

    def notify_dijkstra_has_begun(self):
        self.events.append(("dijkstra_begun",))

    def notify_visit(self, vertex):
        self.events.append(("visit", vertex))

    def notify_dijkstra_vertex_finished(self, vertex, cost):
        self.events.append(("finished", vertex, cost))

    def notify_search_is_over(self):
        self.events.append(("search_over",))

    def notify_dijkstra_is_over(self, path):
        self.events.append(("dijkstra_over", list(path)))

    @property
    def visits(self) -> List[Hashable]:
        return [e[1] for e in self.events if e[0] == "visit"]

    @property
    def finished(self) -> List[Tuple[Hashable, float]]:
        return [(e[1], e[2]) for e in self.events if e[0] == "finished"]

    @property
    def path(self) -> List[Hashable]:
        """Path from the last Dijkstra run, or [] if none completed."""
        for e in reversed(self.events):
            if e[0] == "dijkstra_over":
                return e[1]
        return []

    @property
    def search_over_count(self) -> int:
        return sum(1 for e in self.events if e[0] in ("search_over", "dijkstra_over"))

    def clear(self) -> None:
        self.events.clear()


def notify_all(observers: Sequence[GraphAlgorithmObserver],
               method: Callable[..., None], *args) -> None:
    """Call ``method`` on every observer in order.

    ``method`` is the ``GraphAlgorithmObserver`` function itself, e.g.
    ``GraphAlgorithmObserver.notify_visit``; each observer's own override runs.
    """
    name = method.__name__
    for observer in observers:
        getattr(observer, name)(*args)
