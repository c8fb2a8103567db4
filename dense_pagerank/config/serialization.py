"""JSON serialization and deserialization for graph configs."""

import json
from dataclasses import asdict
from typing import Any

from dacite import from_dict, Config as DaciteConfig

from dense_pagerank.config.graph_config import GraphConfig

_DACITE_CONFIG = DaciteConfig(
    cast=[tuple],
    check_types=True,
    strict=True,
)


def config_to_json(config: GraphConfig) -> str:
    """Serialize a GraphConfig to a JSON string.

    Uses sorted keys and 2-space indent for human readability and diffability.
    """
    return json.dumps(asdict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> GraphConfig:
    """Deserialize a JSON string to a GraphConfig.

    Uses dacite with strict=True to reject unknown keys and cast=[tuple] to
    turn JSON arrays (the edge list and each [src, dst] pair) back into tuples.
    """
    return config_from_dict(json.loads(json_str))


def config_to_dict(config: GraphConfig) -> dict[str, Any]:
    """Convert a GraphConfig to a plain dictionary."""
    return asdict(config)


def config_from_dict(d: dict[str, Any]) -> GraphConfig:
    """Reconstruct a GraphConfig from a plain dictionary."""
    return from_dict(data_class=GraphConfig, data=d, config=_DACITE_CONFIG)
