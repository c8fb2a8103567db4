#!/usr/bin/env python3
"""Entry point for ranking a small directed graph.

Builds the graph from a JSON config (or the built-in four-vertex example),
prints its adjacency matrix, runs a fixed number of PageRank sweeps, and
prints one score line per vertex.

Usage:
    python run_pagerank.py
    python run_pagerank.py --config graph.json
    python run_pagerank.py --config graph.json --iterations 20 --verbose
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import TextIO

from dense_pagerank.config import EXAMPLE_CONFIG, GraphConfig, config_from_json
from dense_pagerank.graph import build_graph, format_scores, run_pagerank

log = logging.getLogger(__name__)


def run(config: GraphConfig, out: TextIO) -> None:
    """Render the adjacency matrix and the ranked scores to `out`."""
    graph = build_graph(config)
    out.write(graph.adjacency.render())
    result = run_pagerank(config, graph)
    if result.dangling:
        log.info("Dangling vertices: %s", list(result.dangling))
    out.write(format_scores(result.scores))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Compute PageRank for a small dense directed graph"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to graph config JSON file (default: built-in example)",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=None,
        help="Override the configured number of sweeps",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.config is None:
        config = EXAMPLE_CONFIG
    else:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        config = config_from_json(config_path.read_text())
        log.info("Config loaded from %s", config_path)

    try:
        if args.iterations is not None:
            config = replace(config, iterations=args.iterations)
        run(config, sys.stdout)
    except Exception:
        log.exception("PageRank run failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
