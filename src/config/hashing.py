"""Fingerprints that tie a block result to the settings that produced it.

Results whose search fingerprints match were computed with the same new-edge
weight, greedy hub and validation switch, so their suggested edges are
comparable for the same graph.
"""

import hashlib
import json
from dataclasses import asdict
from typing import Any

from src.config.experiment import SearchConfig, SimulationConfig

HASH_LENGTH = 16


def _digest(payload: dict[str, Any]) -> str:
    text = json.dumps(payload, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(text.encode("utf-8")).hexdigest()[:HASH_LENGTH]


def config_hash(config: SimulationConfig | SearchConfig) -> str:
    """SHA-256 prefix over the sorted JSON form of a config dataclass."""
    return _digest(asdict(config))


def search_config_hash(config: SimulationConfig) -> str:
    """Fingerprint of the search settings only.

    Seed, description, tags and benchmark cases never change which edges a
    simulation suggests, so they are left out.
    """
    return config_hash(config.search)


def full_config_hash(config: SimulationConfig) -> str:
    """Fingerprint of the whole run configuration, seed included."""
    return config_hash(config)


def block_request_hash(
    config: SimulationConfig, blocker_id: int, blocked_id: int
) -> str:
    """Fingerprint of one block request under the configured search settings.

    Removing a friendship is symmetric, so the pair is unordered: blocking
    B from A and A from B produce the same request hash.
    """
    return _digest(
        {
            "search": asdict(config.search),
            "pair": sorted((blocker_id, blocked_id)),
        }
    )
