"""Tests for Edge and AdjacencyIndex."""

import pytest

from relgraph import AdjacencyIndex, Edge


class TestEdge:
    """Tests for the Edge value type."""

    def test_self_loop(self) -> None:
        assert Edge(1, 1).is_self_loop
        assert not Edge(1, 2).is_self_loop

    def test_reversed(self) -> None:
        assert Edge(1, 2).reversed() == Edge(2, 1)

    def test_edges_collapse_in_sets(self) -> None:
        assert len({Edge(1, 2), Edge(1, 2), Edge(2, 1)}) == 2

    def test_coerce_pair(self) -> None:
        assert Edge.coerce((1, 2)) == Edge(1, 2)
        assert Edge.coerce([3, 4]) == Edge(3, 4)

    def test_coerce_edge_is_identity(self) -> None:
        edge = Edge(1, 2)
        assert Edge.coerce(edge) is edge

    @pytest.mark.parametrize("value", [(1,), (1, 2, 3), 5])
    def test_coerce_rejects_non_pairs(self, value: object) -> None:
        with pytest.raises(ValueError, match="pair"):
            Edge.coerce(value)  # type: ignore[arg-type]


class TestAdjacencyIndex:
    """Tests for building and querying the adjacency index."""

    def test_neighbors_in_edge_order(self) -> None:
        index = AdjacencyIndex.from_edges([Edge(1, 3), Edge(2, 1), Edge(1, 2)])
        # Not sorted at build time
        assert index.neighbors(1) == (3, 2)
        assert index.neighbors(2) == (1,)

    def test_vertex_without_outgoing_edges(self) -> None:
        index = AdjacencyIndex.from_edges([Edge(1, 2)])
        assert index.neighbors(2) == ()

    def test_unknown_vertex(self) -> None:
        index = AdjacencyIndex.from_edges([Edge(1, 2)])
        assert index.neighbors(99) == ()

    def test_self_loop_is_a_neighbor(self) -> None:
        index = AdjacencyIndex.from_edges([Edge(1, 1)])
        assert index.neighbors(1) == (1,)

    def test_sources_and_len(self) -> None:
        index = AdjacencyIndex.from_edges([Edge(1, 2), Edge(1, 3), Edge(3, 1)])
        assert index.sources() == frozenset({1, 3})
        assert len(index) == 3

    def test_empty(self) -> None:
        index: AdjacencyIndex[int] = AdjacencyIndex.from_edges([])
        assert len(index) == 0
        assert index.sources() == frozenset()

    def test_index_is_immutable(self) -> None:
        index = AdjacencyIndex.from_edges([Edge(1, 2)])
        with pytest.raises(AttributeError):
            index._neighbors = {}  # type: ignore[misc]
