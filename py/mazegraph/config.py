"""
Configuration constants for mazegraph.

Tunable values are read from the environment once at import time.
"""

import math
import os

# Level applied to mazegraph loggers ("DEBUG", "INFO", "WARNING", ...)
LOG_LEVEL = os.environ.get("MAZEGRAPH_LOG_LEVEL", "WARNING").upper()

# Log record format shared by every mazegraph handler
LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

# Weight used by GridMaze for passages with no explicit weight
DEFAULT_MAZE_WEIGHT = int(os.environ.get("MAZEGRAPH_DEFAULT_MAZE_WEIGHT", "1"))

# Cost reported for vertices Dijkstra cannot reach
INFINITY = math.inf
