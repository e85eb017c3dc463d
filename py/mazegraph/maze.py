"""Rectangular mazes and their conversion into weighted graphs."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional, Set, Tuple

from . import config
from .graph import WeightedGraph
from .logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, order=True)
class Juncture:
    """A cell of a maze; (0, 0) is the upper left corner."""
    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def above(self) -> "Juncture":
        return Juncture(self.x, self.y - 1)

    def below(self) -> "Juncture":
        return Juncture(self.x, self.y + 1)

    def left(self) -> "Juncture":
        return Juncture(self.x - 1, self.y)

    def right(self) -> "Juncture":
        return Juncture(self.x + 1, self.y)


class Maze(ABC):
    """Interface a maze exposes to ``MazeGraph``."""

    @abstractmethod
    def get_maze_width(self) -> int:
        pass

    @abstractmethod
    def get_maze_height(self) -> int:
        pass

    @abstractmethod
    def is_wall_above(self, juncture: Juncture) -> bool:
        pass

    @abstractmethod
    def is_wall_below(self, juncture: Juncture) -> bool:
        pass

    @abstractmethod
    def is_wall_to_left(self, juncture: Juncture) -> bool:
        pass

    @abstractmethod
    def is_wall_to_right(self, juncture: Juncture) -> bool:
        pass

    @abstractmethod
    def get_weight_above(self, juncture: Juncture) -> int:
        pass

    @abstractmethod
    def get_weight_below(self, juncture: Juncture) -> int:
        pass

    @abstractmethod
    def get_weight_to_left(self, juncture: Juncture) -> int:
        pass

    @abstractmethod
    def get_weight_to_right(self, juncture: Juncture) -> int:
        pass


class GridMaze(Maze):
    """In-memory maze of ``width`` x ``height`` junctures.

    Every passage is open unless walled off with ``add_wall``. The outer
    border is always a wall. Weights are directional: ``set_weight(a, b, w)``
    only affects moving from ``a`` to ``b``.
    """

    def __init__(self, width: int, height: int, default_weight: Optional[int] = None):
        if width <= 0 or height <= 0:
            raise ValueError(f"Maze dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.default_weight = config.DEFAULT_MAZE_WEIGHT if default_weight is None else default_weight
        self._walls: Set[FrozenSet[Juncture]] = set()
        self._weights: Dict[Tuple[Juncture, Juncture], int] = {}

    def contains(self, juncture: Juncture) -> bool:
        return 0 <= juncture.x < self.width and 0 <= juncture.y < self.height

    def _check_adjacent(self, a: Juncture, b: Juncture) -> None:
        if not (self.contains(a) and self.contains(b)):
            raise ValueError(f"Juncture outside maze: {a} or {b}")
        if abs(a.x - b.x) + abs(a.y - b.y) != 1:
            raise ValueError(f"Junctures {a} and {b} are not adjacent")

    def add_wall(self, a: Juncture, b: Juncture) -> None:
        """Block the passage between two adjacent junctures."""
        self._check_adjacent(a, b)
        self._walls.add(frozenset((a, b)))

    def set_weight(self, a: Juncture, b: Juncture, weight: int) -> None:
        """Set the cost of moving from ``a`` to the adjacent juncture ``b``."""
        self._check_adjacent(a, b)
        self._weights[(a, b)] = weight

    def _is_wall(self, a: Juncture, b: Juncture) -> bool:
        if not self.contains(b):
            return True
        return frozenset((a, b)) in self._walls

    def _weight(self, a: Juncture, b: Juncture) -> int:
        return self._weights.get((a, b), self.default_weight)

    def get_maze_width(self):
        return self.width

    def get_maze_height(self):
        return self.height

    def is_wall_above(self, juncture):
        return self._is_wall(juncture, juncture.above())

    def is_wall_below(self, juncture):
        return self._is_wall(juncture, juncture.below())

    def is_wall_to_left(self, juncture):
        return self._is_wall(juncture, juncture.left())

    def is_wall_to_right(self, juncture):
        return self._is_wall(juncture, juncture.right())

    def get_weight_above(self, juncture):
        return self._weight(juncture, juncture.above())

    def get_weight_below(self, juncture):
        return self._weight(juncture, juncture.below())

    def get_weight_to_left(self, juncture):
        return self._weight(juncture, juncture.left())

    def get_weight_to_right(self, juncture):
        return self._weight(juncture, juncture.right())


class MazeGraph(WeightedGraph):
    """A ``WeightedGraph`` of ``Juncture`` vertices built from a maze.

    Junctures are added column by column. Each pair of adjacent junctures
    with no wall between them gets two directed edges, one each way, with
    the weights the maze reports for that direction.
    """

    def __init__(self, maze: Maze):
        super().__init__()
        for x in range(maze.get_maze_width()):
            for y in range(maze.get_maze_height()):
                current = Juncture(x, y)
                self.add_vertex(current)

                # Right and lower neighbors are linked when they are added.
                left = current.left()
                if not maze.is_wall_to_left(current) and left in self:
                    self.add_edge(current, left, maze.get_weight_to_left(current))
                    self.add_edge(left, current, maze.get_weight_to_right(left))

                above = current.above()
                if not maze.is_wall_above(current) and above in self:
                    self.add_edge(current, above, maze.get_weight_above(current))
                    self.add_edge(above, current, maze.get_weight_below(above))

        logger.debug("Built maze graph with %d junctures and %d edges",
                     self.vertex_count, self.edge_count)
