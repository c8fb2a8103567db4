"""Graph run configuration with frozen, serializable dataclasses."""

from dense_pagerank.config.graph_config import GraphConfig
from dense_pagerank.config.defaults import EXAMPLE_CONFIG
from dense_pagerank.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "GraphConfig",
    "EXAMPLE_CONFIG",
    "config_from_dict",
    "config_from_json",
    "config_to_dict",
    "config_to_json",
]
