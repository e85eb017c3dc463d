"""Tests for graph store operations: vertices, edges and weights."""
import pytest


class TestVertices:
    """Tests for vertex insertion and membership."""

    def test_add_vertex(self, lib):
        """Added vertex is contained."""
        g = lib.WeightedGraph()
        g.add_vertex("A")
        assert g.contains_vertex("A")
        assert "A" in g
        assert g.vertex_count == 1

    def test_contains_missing_vertex(self, lib):
        """Missing vertex is not contained."""
        g = lib.WeightedGraph()
        assert not g.contains_vertex("A")
        assert len(g) == 0

    def test_duplicate_vertex_rejected(self, lib):
        """Adding a vertex twice fails and leaves the graph unchanged."""
        g = lib.WeightedGraph()
        g.add_vertex("A")
        with pytest.raises(lib.DuplicateVertexError) as exc:
            g.add_vertex("A")
        assert exc.value.vertex == "A"
        assert g.vertex_count == 1

    def test_duplicate_keeps_edges(self, make_graph, lib):
        """A rejected duplicate does not reset the vertex's edges."""
        g = make_graph("AB", [("A", "B", 3)])
        with pytest.raises(lib.DuplicateVertexError):
            g.add_vertex("A")
        assert g.get_weight("A", "B") == 3

    def test_equal_values_are_same_vertex(self, lib):
        """Vertices comparing equal are one node."""
        g = lib.WeightedGraph()
        g.add_vertex((1, 2))
        with pytest.raises(lib.DuplicateVertexError):
            g.add_vertex((1, 2))

    def test_vertices_in_insertion_order(self, make_graph):
        """vertices() keeps insertion order."""
        g = make_graph(["C", "A", "B"])
        assert g.vertices() == ["C", "A", "B"]

    def test_errors_are_value_errors(self, lib):
        """Graph errors share a ValueError base."""
        assert issubclass(lib.DuplicateVertexError, lib.GraphError)
        assert issubclass(lib.UnknownVertexError, ValueError)
        assert issubclass(lib.InvalidWeightError, ValueError)


class TestEdges:
    """Tests for edge insertion."""

    def test_add_edge(self, make_graph):
        """Edge weight is recorded."""
        g = make_graph("AB", [("A", "B", 7)])
        assert g.get_weight("A", "B") == 7
        assert g.edge_count == 1

    def test_edge_is_directed(self, make_graph):
        """Reverse edge does not exist implicitly."""
        g = make_graph("AB", [("A", "B", 7)])
        assert g.get_weight("B", "A") is None

    def test_both_directions_independent(self, make_graph):
        """Each direction carries its own weight."""
        g = make_graph("AB", [("A", "B", 1), ("B", "A", 9)])
        assert g.get_weight("A", "B") == 1
        assert g.get_weight("B", "A") == 9

    def test_zero_weight_allowed(self, make_graph):
        """Zero is a valid weight."""
        g = make_graph("AB", [("A", "B", 0)])
        assert g.get_weight("A", "B") == 0

    def test_self_loop(self, make_graph):
        """An edge may lead back to its own vertex."""
        g = make_graph("A", [("A", "A", 2)])
        assert g.get_weight("A", "A") == 2

    def test_readd_overwrites_weight(self, make_graph):
        """Re-adding an edge replaces its weight."""
        g = make_graph("ABC", [("A", "B", 1), ("A", "C", 1), ("A", "B", 5)])
        assert g.get_weight("A", "B") == 5
        assert g.edge_count == 2
        # Original adjacency position is kept
        assert list(g.neighbors("A")) == ["B", "C"]

    def test_missing_from_vertex(self, make_graph, lib):
        """Missing source vertex is rejected."""
        g = make_graph("B")
        with pytest.raises(lib.UnknownVertexError) as exc:
            g.add_edge("A", "B", 1)
        assert exc.value.vertex == "A"
        assert g.edge_count == 0

    def test_missing_to_vertex(self, make_graph, lib):
        """Missing target vertex is rejected."""
        g = make_graph("A")
        with pytest.raises(lib.UnknownVertexError) as exc:
            g.add_edge("A", "B", 1)
        assert exc.value.vertex == "B"
        assert g.edge_count == 0
        assert dict(g.neighbors("A")) == {}

    def test_missing_vertex_checked_before_weight(self, make_graph, lib):
        """Unknown vertex is reported even with a bad weight."""
        g = make_graph("A")
        with pytest.raises(lib.UnknownVertexError):
            g.add_edge("A", "Z", -1)

    def test_negative_weight(self, make_graph, lib):
        """Negative weight is rejected without recording an edge."""
        g = make_graph("AB")
        with pytest.raises(lib.InvalidWeightError) as exc:
            g.add_edge("A", "B", -1)
        assert exc.value.weight == -1
        assert g.get_weight("A", "B") is None

    def test_negative_weight_keeps_existing_edge(self, make_graph, lib):
        """A rejected overwrite leaves the old weight."""
        g = make_graph("AB", [("A", "B", 4)])
        with pytest.raises(lib.InvalidWeightError):
            g.add_edge("A", "B", -2)
        assert g.get_weight("A", "B") == 4

    @pytest.mark.parametrize("weight", [1.5, "3", None, True])
    def test_non_integer_weight(self, make_graph, lib, weight):
        """Only integer weights are accepted."""
        g = make_graph("AB")
        with pytest.raises(lib.InvalidWeightError):
            g.add_edge("A", "B", weight)
        assert g.edge_count == 0

    def test_edges_listing(self, make_graph):
        """edges() yields every triple in insertion order."""
        g = make_graph("ABC", [("A", "B", 1), ("B", "C", 2), ("A", "C", 3)])
        assert list(g.edges()) == [("A", "B", 1), ("A", "C", 3), ("B", "C", 2)]


class TestWeights:
    """Tests for weight lookup."""

    def test_no_edge_returns_none(self, make_graph):
        """Existing vertices without an edge give None."""
        g = make_graph("AB")
        assert g.get_weight("A", "B") is None

    def test_missing_from_raises(self, make_graph, lib):
        """Lookup from a missing vertex fails."""
        g = make_graph("B")
        with pytest.raises(lib.UnknownVertexError):
            g.get_weight("A", "B")

    def test_missing_to_raises(self, make_graph, lib):
        """Lookup to a missing vertex fails even though A has no edges."""
        g = make_graph("A")
        with pytest.raises(lib.UnknownVertexError):
            g.get_weight("A", "B")


class TestNeighbors:
    """Tests for the read-only adjacency view."""

    def test_neighbors_in_insertion_order(self, make_graph):
        """Neighbors keep edge insertion order."""
        g = make_graph("ABCD", [("A", "D", 1), ("A", "B", 2), ("A", "C", 3)])
        assert list(g.neighbors("A")) == ["D", "B", "C"]
        assert g.neighbors("A")["B"] == 2

    def test_neighbors_is_read_only(self, make_graph):
        """The view cannot be used to mutate the graph."""
        g = make_graph("AB", [("A", "B", 1)])
        with pytest.raises(TypeError):
            g.neighbors("A")["B"] = 99
        assert g.get_weight("A", "B") == 1

    def test_neighbors_missing_vertex(self, make_graph, lib):
        """Unknown vertex has no adjacency."""
        g = make_graph("A")
        with pytest.raises(lib.UnknownVertexError):
            g.neighbors("Z")
