#!/usr/bin/env python3
"""CLI wrapper for the graph engine.

Usage: ``mazegraph <command>`` with a JSON object on stdin::

    {"vertices": ["A", "B"], "edges": [["A", "B", 1]], "start": "A", "end": "B"}

The recorded observer events are printed as JSON.
"""
import sys
import json

from . import config
from .graph import WeightedGraph
from .observer import RecordingObserver
from .types import GraphError


class InputError(ValueError):
    """The stdin document does not describe a graph."""
    pass


def _vertex(value):
    # JSON arrays are not hashable; treat them as coordinates.
    if isinstance(value, list):
        return tuple(_vertex(v) for v in value)
    if isinstance(value, dict):
        raise InputError(f"Vertex must be a string, number or array, got {value!r}")
    return value


def _jsonable(value):
    if isinstance(value, float) and value == config.INFINITY:
        return None
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value


def _list_field(document, name):
    value = document.get(name, [])
    if not isinstance(value, list):
        raise InputError(f"Field '{name}' must be an array")
    return value


def build_graph(document):
    """Build a WeightedGraph from the decoded stdin document.

    Raises:
        InputError: if the document is not shaped like a graph.
        GraphError: if the graph itself rejects a vertex or edge.
    """
    if not isinstance(document, dict):
        raise InputError("Input must be a JSON object")

    graph = WeightedGraph()
    for vertex in _list_field(document, "vertices"):
        graph.add_vertex(_vertex(vertex))
    for edge in _list_field(document, "edges"):
        if not isinstance(edge, list) or len(edge) != 3:
            raise InputError(f"Edge must be [from, to, weight], got {edge!r}")
        from_vertex, to_vertex, weight = edge
        graph.add_edge(_vertex(from_vertex), _vertex(to_vertex), weight)
    return graph


def _run(method):
    def command(document):
        graph = build_graph(document)
        recorder = RecordingObserver()
        graph.register_observer(recorder)
        getattr(graph, method)(_vertex(document["start"]), _vertex(document["end"]))
        return {"events": [_jsonable(list(event)) for event in recorder.events]}
    return command


COMMANDS = {
    'bfs': _run('run_bfs'),
    'dfs': _run('run_dfs'),
    'dijkstra': _run('run_dijkstra'),
}


def main(argv=None, stdin=None, stdout=None):
    argv = sys.argv[1:] if argv is None else argv
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    if not argv:
        print(json.dumps({"error": "No command provided"}), file=stdout)
        return 1
    cmd = argv[0]
    if cmd not in COMMANDS:
        print(json.dumps({"error": f"Unknown command: {cmd}"}), file=stdout)
        return 1

    try:
        document = json.loads(stdin.read())
        result = COMMANDS[cmd](document)
    except json.JSONDecodeError as e:
        print(json.dumps({"error": f"Invalid JSON input: {e}"}), file=stdout)
        return 1
    except KeyError as e:
        print(json.dumps({"error": f"Missing field: {e.args[0]}"}), file=stdout)
        return 1
    except (GraphError, InputError) as e:
        print(json.dumps({"error": str(e)}), file=stdout)
        return 1

    print(json.dumps(result), file=stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
