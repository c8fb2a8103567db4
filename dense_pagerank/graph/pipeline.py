"""Build a graph from config, rank it, and format the scores."""

import logging

import numpy as np

from dense_pagerank.config.graph_config import GraphConfig
from dense_pagerank.graph.directed import DirectedGraph
from dense_pagerank.graph.types import PageRankResult
from dense_pagerank.graph.validation import find_dangling_vertices

log = logging.getLogger(__name__)


def build_graph(config: GraphConfig) -> DirectedGraph:
    """Create a DirectedGraph with every edge listed in the config."""
    graph = DirectedGraph(config.n_vertices)
    for src, dst in config.edges:
        graph.connect(src, dst)
    log.info(
        "Graph built: n=%d, edges=%d",
        config.n_vertices,
        len(set(config.edges)),
    )
    return graph


def run_pagerank(
    config: GraphConfig, graph: DirectedGraph | None = None
) -> PageRankResult:
    """Run the configured number of sweeps and snapshot the scores.

    Args:
        config: Graph configuration (edges and iteration count).
        graph: Optional prebuilt graph; built from config when omitted.

    Returns:
        PageRankResult holding a copy of the scores.
    """
    if graph is None:
        graph = build_graph(config)
    dangling = find_dangling_vertices(graph)
    scores = graph.pagerank(config.iterations)
    return PageRankResult(
        scores=scores.copy(),
        iterations=config.iterations,
        dangling=tuple(dangling),
    )


def format_scores(scores: np.ndarray) -> str:
    """One `vertex: i, pagerank: value` line per vertex, ascending."""
    return "".join(
        f"vertex: {vertex}, pagerank: {float(value)}\n"
        for vertex, value in enumerate(scores)
    )
