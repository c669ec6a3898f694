"""Generator configuration system with frozen, validated, serializable dataclasses."""

from depthgraph.config.generation import (
    MAX_RETRIES,
    GeneratorConfig,
    GraphConfig,
)
from depthgraph.config.defaults import DEFAULT_CONFIG
from depthgraph.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "MAX_RETRIES",
    "GeneratorConfig",
    "GraphConfig",
    "DEFAULT_CONFIG",
    "config_from_dict",
    "config_from_json",
    "config_to_dict",
    "config_to_json",
]
