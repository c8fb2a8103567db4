"""Tests for DirectedGraph structure queries and the PageRank iteration."""

import logging

import numpy as np
import pytest

from dense_pagerank.graph import DAMPING, DirectedGraph, find_dangling_vertices
from dense_pagerank.matrix import IndexOutOfRange

EPSILON = 0.01


def _graph(n: int, edges: list[tuple[int, int]]) -> DirectedGraph:
    g = DirectedGraph(n)
    for src, dst in edges:
        g.connect(src, dst)
    return g


class TestStructure:
    """Edge insertion, in-neighbors, and out-degree."""

    def test_fresh_graph(self) -> None:
        g = DirectedGraph(5)
        assert g.vertex_count == 5
        assert g.adjacency.shape == (5, 5)
        assert np.all(g.scores == 0.0)
        assert all(g.out_degree(v) == 0 for v in range(5))
        assert all(g.in_neighbors(v) == [] for v in range(5))

    def test_connect_updates_degree_and_neighbors(self) -> None:
        g = DirectedGraph(4)
        g.connect(1, 3)
        assert g.out_degree(1) == 1
        assert 1 in g.in_neighbors(3)
        g.connect(1, 0)
        assert g.out_degree(1) == 2
        assert g.in_neighbors(0) == [1]

    def test_connect_idempotent(self) -> None:
        g = DirectedGraph(3)
        g.connect(0, 2)
        g.connect(0, 2)
        assert g.out_degree(0) == 1
        assert g.in_neighbors(2) == [0]
        assert list(g.edges()) == [(0, 2)]

    def test_in_neighbors_ascending_not_insertion_order(self) -> None:
        g = _graph(5, [(4, 0), (2, 0), (3, 0), (1, 0)])
        assert g.in_neighbors(0) == [1, 2, 3, 4]

    def test_direction_matters(self) -> None:
        g = _graph(2, [(0, 1)])
        assert g.in_neighbors(1) == [0]
        assert g.in_neighbors(0) == []
        assert g.out_degree(1) == 0

    def test_self_loop_excluded(self) -> None:
        g = _graph(3, [(1, 1), (1, 2)])
        assert g.adjacency.get(1, 1) is True
        assert g.out_degree(1) == 1
        assert g.in_neighbors(1) == []

    def test_connect_out_of_range(self) -> None:
        g = DirectedGraph(3)
        with pytest.raises(IndexOutOfRange):
            g.connect(3, 0)
        with pytest.raises(IndexOutOfRange):
            g.connect(0, 3)

    def test_queries_out_of_range(self) -> None:
        g = DirectedGraph(3)
        with pytest.raises(IndexOutOfRange):
            g.in_neighbors(3)
        with pytest.raises(IndexOutOfRange):
            g.out_degree(-1)

    def test_dangling_vertices(self) -> None:
        g = _graph(4, [(0, 1), (1, 0), (2, 2)])
        assert find_dangling_vertices(g) == [2, 3]


class TestReferenceVectors:
    """Published example graphs after 100 sweeps."""

    def test_two_cycle(self) -> None:
        g = _graph(2, [(0, 1), (1, 0)])
        scores = g.pagerank(100)
        assert abs(scores[0] - 1.0) < EPSILON
        assert abs(scores[1] - 1.0) < EPSILON

    def test_four_vertex(self) -> None:
        g = _graph(4, [(0, 1), (0, 2), (1, 2), (2, 0), (3, 2)])
        scores = g.pagerank(100)
        expected = [1.5, 0.78, 1.58, 0.15]
        for vertex, value in enumerate(expected):
            assert abs(scores[vertex] - value) < EPSILON, (
                f"vertex {vertex}: {scores[vertex]}"
            )

    def test_eight_vertex_star(self) -> None:
        edges = [
            (0, 1), (0, 2), (0, 3),
            (1, 0), (2, 0), (3, 0),
            (3, 4), (3, 5), (3, 6), (3, 7),
            (4, 0), (5, 0), (6, 0), (7, 0),
        ]
        g = _graph(8, edges)
        scores = g.pagerank(100)
        expected = [3.35, 1.1, 1.1, 1.1, 0.34, 0.34, 0.34, 0.34]
        for vertex, value in enumerate(expected):
            assert abs(scores[vertex] - value) < EPSILON, (
                f"vertex {vertex}: {scores[vertex]}"
            )


class TestIterationSemantics:
    """Sweep count, update order, and accumulation across calls."""

    def test_zero_iterations_leaves_scores(self) -> None:
        g = _graph(3, [(0, 1), (1, 2)])
        scores = g.pagerank(0)
        assert np.all(scores == 0.0)

    def test_zero_iterations_after_run(self) -> None:
        g = _graph(2, [(0, 1), (1, 0)])
        before = g.pagerank(5).copy()
        np.testing.assert_array_equal(g.pagerank(0), before)

    def test_negative_iterations_rejected(self) -> None:
        with pytest.raises(ValueError, match="iterations"):
            DirectedGraph(2).pagerank(-1)

    def test_returns_own_scores(self) -> None:
        g = _graph(2, [(0, 1)])
        assert g.pagerank(1) is g.scores

    def test_no_in_neighbors_scores_base(self) -> None:
        g = _graph(4, [(0, 1), (0, 2), (1, 2), (2, 0), (3, 2)])
        for iterations in (1, 7):
            g.pagerank(iterations)
            assert g.scores[3] == 1.0 - DAMPING
            assert g.scores[3] == pytest.approx(0.15)

    def test_in_place_update_order(self) -> None:
        """Vertex 1 sees vertex 0's value from the same sweep."""
        g = _graph(2, [(0, 1), (1, 0)])
        g.pagerank(1)
        base = 1.0 - DAMPING
        assert g.scores[0] == pytest.approx(base)
        assert g.scores[1] == pytest.approx(base + DAMPING * base)

    def test_later_neighbor_uses_previous_sweep(self) -> None:
        """Vertex 0 reads vertex 1's pre-sweep value (0.0 on the first sweep)."""
        g = _graph(2, [(1, 0)])
        g.pagerank(1)
        assert g.scores[0] == pytest.approx(1.0 - DAMPING)
        g.pagerank(1)
        assert g.scores[0] == pytest.approx(
            (1.0 - DAMPING) + DAMPING * (1.0 - DAMPING)
        )

    def test_calls_accumulate(self) -> None:
        edges = [(0, 1), (0, 2), (1, 2), (2, 0), (3, 2)]
        split = _graph(4, edges)
        split.pagerank(3)
        split.pagerank(4)
        whole = _graph(4, edges)
        whole.pagerank(7)
        np.testing.assert_allclose(split.scores, whole.scores)

    def test_self_loop_contributes_nothing(self) -> None:
        with_loop = _graph(3, [(0, 1), (1, 0), (1, 1), (2, 2)])
        without = _graph(3, [(0, 1), (1, 0)])
        np.testing.assert_allclose(with_loop.pagerank(20), without.pagerank(20))

    def test_split_by_out_degree(self) -> None:
        g = _graph(3, [(0, 1), (0, 2)])
        g.pagerank(1)
        base = 1.0 - DAMPING
        assert g.scores[1] == pytest.approx(base + DAMPING * base / 2)
        assert g.scores[2] == pytest.approx(g.scores[1])

    def test_empty_graph(self) -> None:
        g = DirectedGraph(0)
        assert g.pagerank(10).size == 0

    def test_scores_stay_finite_with_dangling(self) -> None:
        g = _graph(3, [(0, 1), (1, 2)])
        scores = g.pagerank(50)
        assert np.all(np.isfinite(scores))
        assert scores[2] == pytest.approx(0.15 + 0.85 * (0.15 + 0.85 * 0.15))

    def test_dangling_warning_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        g = _graph(2, [(0, 1)])
        with caplog.at_level(logging.WARNING, logger="dense_pagerank.graph.directed"):
            g.pagerank(1)
        assert "Dangling" in caplog.text
