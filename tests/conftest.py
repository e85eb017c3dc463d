"""Shared test configuration for the mazegraph tests."""

import os
import sys
import pytest


def load_python_impl():
    """Load the package from py/ so the tests run without installing it."""
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    py_dir = os.path.join(base_dir, "py")
    if py_dir not in sys.path:
        sys.path.insert(0, py_dir)
    import mazegraph
    return mazegraph


@pytest.fixture
def lib():
    """The mazegraph package."""
    return load_python_impl()


@pytest.fixture
def recorder(lib):
    """A fresh RecordingObserver."""
    return lib.RecordingObserver()


@pytest.fixture
def diamond(lib):
    """A->B(1), A->C(4), B->C(2), B->D(5), C->D(1)."""
    g = lib.WeightedGraph()
    for v in "ABCD":
        g.add_vertex(v)
    g.add_edge("A", "B", 1)
    g.add_edge("A", "C", 4)
    g.add_edge("B", "C", 2)
    g.add_edge("B", "D", 5)
    g.add_edge("C", "D", 1)
    return g


def build_graph(lib, vertices, edges):
    """Build a graph from a vertex iterable and (from, to, weight) triples."""
    g = lib.WeightedGraph()
    for v in vertices:
        g.add_vertex(v)
    for from_vertex, to_vertex, weight in edges:
        g.add_edge(from_vertex, to_vertex, weight)
    return g


@pytest.fixture
def make_graph(lib):
    """Factory fixture: make_graph(vertices, edges)."""
    return lambda vertices, edges=(): build_graph(lib, vertices, edges)
