"""Weighted graph engine - public API."""
from .types import (
    ShortestPaths, GraphError, DuplicateVertexError, UnknownVertexError, InvalidWeightError
)
from .observer import GraphAlgorithmObserver, RecordingObserver
from .graph import WeightedGraph
from .traversal import bfs, dfs
from .paths import dijkstra, reconstruct_path, path_weight
from .maze import Juncture, Maze, GridMaze, MazeGraph

__all__ = [
    'ShortestPaths', 'GraphError', 'DuplicateVertexError', 'UnknownVertexError',
    'InvalidWeightError', 'GraphAlgorithmObserver', 'RecordingObserver',
    'WeightedGraph', 'bfs', 'dfs', 'dijkstra', 'reconstruct_path', 'path_weight',
    'Juncture', 'Maze', 'GridMaze', 'MazeGraph',
]
