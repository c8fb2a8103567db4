"""Directed graph with dense adjacency and in-place PageRank."""

from dense_pagerank.graph.directed import DAMPING, DirectedGraph
from dense_pagerank.graph.pipeline import build_graph, format_scores, run_pagerank
from dense_pagerank.graph.types import PageRankResult
from dense_pagerank.graph.validation import find_dangling_vertices

__all__ = [
    "DAMPING",
    "DirectedGraph",
    "PageRankResult",
    "build_graph",
    "find_dangling_vertices",
    "format_scores",
    "run_pagerank",
]
