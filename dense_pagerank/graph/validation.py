"""Structural checks on a DirectedGraph."""

import logging

from dense_pagerank.graph.directed import DirectedGraph

log = logging.getLogger(__name__)


def find_dangling_vertices(graph: DirectedGraph) -> list[int]:
    """Return vertices with no outgoing edges, ignoring self-loops.

    A dangling vertex never contributes to any other vertex's score, so the
    rank it accumulates leaks out of the graph on every sweep.
    """
    dangling = [v for v in range(graph.vertex_count) if graph.out_degree(v) == 0]
    log.debug("Dangling vertices: %s", dangling)
    return dangling
