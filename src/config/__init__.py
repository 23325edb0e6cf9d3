"""Simulation configuration with frozen, hashable, serializable dataclasses."""

from src.config.experiment import (
    GREEDY_HUB_STRATEGIES,
    BenchmarkConfig,
    SearchConfig,
    SimulationConfig,
)
from src.config.defaults import DEFAULT_CONFIG
from src.config.hashing import (
    block_request_hash,
    config_hash,
    full_config_hash,
    search_config_hash,
)
from src.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "GREEDY_HUB_STRATEGIES",
    "BenchmarkConfig",
    "SearchConfig",
    "SimulationConfig",
    "DEFAULT_CONFIG",
    "block_request_hash",
    "config_hash",
    "full_config_hash",
    "search_config_hash",
    "config_from_dict",
    "config_from_json",
    "config_to_dict",
    "config_to_json",
]
