"""Directed graph over a dense boolean adjacency matrix, with PageRank.

The PageRank iteration is the in-place (Gauss-Seidel) variant: within a
sweep, vertex v sees the already-updated scores of in-neighbors u < v and
the previous sweep's scores of in-neighbors u > v. The fixed point matches
the synchronous (Jacobi) update, but the trajectory, and therefore the
scores after a fixed number of sweeps, does not.
"""

import logging
from collections.abc import Iterator

import numpy as np

from dense_pagerank.matrix import DenseMatrix, IndexOutOfRange

log = logging.getLogger(__name__)

DAMPING = 0.85


class DirectedGraph:
    """Directed graph on vertices 0..N-1 with one PageRank score per vertex.

    adjacency.get(u, v) is True when the edge u -> v exists. Edges can only
    be added. Self-loops may be stored but never count towards in-neighbors,
    out-degree, or rank.
    """

    def __init__(self, vertex_count: int) -> None:
        self.adjacency = DenseMatrix(vertex_count, vertex_count, dtype=bool)
        self.scores = np.zeros(vertex_count, dtype=np.float64)

    @property
    def vertex_count(self) -> int:
        return len(self.scores)

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise IndexOutOfRange(
                f"Vertex {vertex} out of range for graph with "
                f"{self.vertex_count} vertices"
            )

    def connect(self, src: int, dst: int) -> None:
        """Record the directed edge src -> dst. Connecting twice is a no-op."""
        self.adjacency.set(src, dst, True)

    def edges(self) -> Iterator[tuple[int, int]]:
        """Yield every stored (src, dst) edge in row-major order."""
        for src in range(self.vertex_count):
            for dst in range(self.vertex_count):
                if self.adjacency.get(src, dst):
                    yield (src, dst)

    def in_neighbors(self, vertex: int) -> list[int]:
        """Vertices u != vertex with an edge u -> vertex, ascending."""
        self._check_vertex(vertex)
        result: list[int] = []
        for source_vertex in range(self.vertex_count):
            if source_vertex != vertex and self.adjacency.get(source_vertex, vertex):
                result.append(source_vertex)
        return result

    def out_degree(self, vertex: int) -> int:
        """Number of vertices w != vertex with an edge vertex -> w."""
        self._check_vertex(vertex)
        count = 0
        for target in range(self.vertex_count):
            if target != vertex and self.adjacency.get(vertex, target):
                count += 1
        return count

    def pagerank(self, iterations: int) -> np.ndarray:
        """Run `iterations` in-place sweeps and return the score array.

        For each vertex v in ascending order:
            scores[v] = (1 - d) + d * sum(scores[u] / out_degree(u))
        over in-neighbors u of v, with d = DAMPING. There is no convergence
        check and no dangling-vertex redistribution. Calls accumulate: each
        call continues from the current scores.

        Args:
            iterations: Number of full sweeps over all vertices (>= 0).

        Returns:
            The graph's own scores array (mutated in place, not a copy).

        Raises:
            ValueError: If iterations is negative.
        """
        if iterations < 0:
            raise ValueError(f"iterations must be >= 0, got {iterations}")

        n = self.vertex_count
        # Edges are fixed for the duration of the call.
        out_degrees = [self.out_degree(v) for v in range(n)]
        inbound = [self.in_neighbors(v) for v in range(n)]

        log.debug(
            "PageRank start: vertices=%d, edges=%d, iterations=%d",
            n,
            sum(out_degrees),
            iterations,
        )
        dangling = [v for v in range(n) if out_degrees[v] == 0]
        if dangling and iterations > 0:
            log.warning(
                "Dangling vertices %s have no outgoing edges; "
                "their rank is not redistributed",
                dangling,
            )

        scores = self.scores
        for _ in range(iterations):
            for vertex in range(n):
                contribution = 0.0
                for in_neighbor in inbound[vertex]:
                    contribution += scores[in_neighbor] / out_degrees[in_neighbor]
                scores[vertex] = (1.0 - DAMPING) + DAMPING * contribution

        if not np.all(np.isfinite(scores)):
            log.warning("PageRank produced non-finite scores: %s", scores)
        log.debug("PageRank done after %d sweeps", iterations)
        return scores

    def __repr__(self) -> str:
        return f"DirectedGraph(vertex_count={self.vertex_count})"
