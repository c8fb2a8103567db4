"""Built-in configuration used when no config file is supplied."""

from dense_pagerank.config.graph_config import GraphConfig

# Four-vertex demonstration graph; after 100 sweeps the scores settle
# near [1.5, 0.78, 1.58, 0.15].
EXAMPLE_CONFIG = GraphConfig(
    n_vertices=4,
    edges=((0, 1), (0, 2), (1, 2), (2, 0), (3, 2)),
    iterations=100,
    description="four-vertex demonstration graph",
)
