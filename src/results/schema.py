"""Block result schema validation and writing.

Uses a Python validation function (not jsonschema) to check required
fields, types, and internal consistency before writing result.json files.
"""

import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from src.blocking.types import BlockResult, SearchStats
from src.config.experiment import SimulationConfig
from src.config.hashing import (
    block_request_hash,
    full_config_hash,
    search_config_hash,
)
from src.results.run_id import generate_run_id

SCHEMA_VERSION = "1.0"

REQUIRED_TOP_FIELDS = {
    "schema_version",
    "run_id",
    "timestamp",
    "description",
    "tags",
    "config",
    "result",
}

REQUIRED_RESULT_FIELDS = {
    "blocker",
    "blocked",
    "still_connected",
    "edges_needed",
    "suggested_edges",
    "message",
}


def _user_to_dict(user: Any) -> dict[str, Any]:
    return {"id": user.id, "name": user.name, "profile": user.profile}


def block_result_to_dict(
    result: BlockResult, stats: SearchStats | None = None
) -> dict[str, Any]:
    """Convert a BlockResult (and optional counters) to plain JSON types."""
    d: dict[str, Any] = {
        "blocker": _user_to_dict(result.blocker),
        "blocked": _user_to_dict(result.blocked),
        "still_connected": result.still_connected,
        "edges_needed": result.edges_needed,
        "suggested_edges": [
            [pair.first.id, pair.second.id] for pair in result.suggested_edges
        ],
        "message": result.message,
    }
    if stats is not None:
        d["stats"] = {
            **asdict(stats),
            "pruning_effectiveness": stats.pruning_effectiveness,
        }
    return d


def validate_result(result: dict[str, Any]) -> list[str]:
    """Validate a result dict against the project schema.

    Returns a list of error strings. An empty list means the result is valid.

    Checks:
    - All required top-level fields are present
    - result block has all required fields
    - edges_needed matches the number of suggested edges
    - a connected graph never carries suggested edges
    - timestamp is ISO 8601
    """
    errors: list[str] = []

    missing = REQUIRED_TOP_FIELDS - set(result.keys())
    if missing:
        errors.append(f"Missing required top-level fields: {sorted(missing)}")

    if "schema_version" in result and not isinstance(result["schema_version"], str):
        errors.append("schema_version must be a string")

    if "tags" in result and not isinstance(result["tags"], list):
        errors.append("tags must be a list")

    if "config" in result and not isinstance(result["config"], dict):
        errors.append("config must be a dict")

    if "timestamp" in result:
        ts = result["timestamp"]
        if not isinstance(ts, str):
            errors.append("timestamp must be a string")
        else:
            try:
                datetime.fromisoformat(ts)
            except ValueError:
                errors.append("timestamp must be in ISO 8601 format")

    block = result.get("result")
    if block is None:
        return errors
    if not isinstance(block, dict):
        errors.append("result must be a dict")
        return errors

    missing = REQUIRED_RESULT_FIELDS - set(block.keys())
    if missing:
        errors.append(f"result missing fields: {sorted(missing)}")
        return errors

    edges = block["suggested_edges"]
    if not isinstance(edges, list):
        errors.append("result.suggested_edges must be a list")
    else:
        if block["edges_needed"] != len(edges):
            errors.append(
                f"result.edges_needed ({block['edges_needed']}) != "
                f"len(suggested_edges) ({len(edges)})"
            )
        for edge in edges:
            if not (isinstance(edge, list) and len(edge) == 2):
                errors.append(f"Malformed suggested edge: {edge!r}")
        if block["still_connected"] and edges:
            errors.append("Connected result must not suggest edges")

    return errors


def write_result(
    result: BlockResult,
    config: SimulationConfig,
    stats: SearchStats | None = None,
    results_dir: str = "results",
) -> str:
    """Write result.json for one block simulation.

    Creates results/{run_id}/result.json.

    Args:
        result: The simulation outcome.
        config: The configuration the simulation ran with.
        stats: Optional counters of the simulation call.
        results_dir: Base directory for result output.

    Returns:
        The generated run_id string.

    Raises:
        ValueError: If the assembled result fails validation.
    """
    run_id = generate_run_id(config, result.blocker, result.blocked)
    out_dir = Path(results_dir) / run_id
    out_dir.mkdir(parents=True, exist_ok=True)

    payload = {
        "schema_version": SCHEMA_VERSION,
        "run_id": run_id,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "description": config.description,
        "tags": list(config.tags),
        "config": asdict(config),
        "result": block_result_to_dict(result, stats),
        "metadata": {
            "config_hash": full_config_hash(config),
            "search_config_hash": search_config_hash(config),
            "request_hash": block_request_hash(
                config, result.blocker.id, result.blocked.id
            ),
        },
    }

    errors = validate_result(payload)
    if errors:
        raise ValueError(
            "Result validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        )

    with open(out_dir / "result.json", "w") as f:
        json.dump(payload, f, indent=2)

    return run_id


def load_result(result_path: str | Path) -> dict[str, Any]:
    """Load and validate a result.json file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the loaded result fails validation.
    """
    path = Path(result_path)
    with open(path) as f:
        result = json.load(f)

    errors = validate_result(result)
    if errors:
        raise ValueError(
            f"Result validation failed for {path}:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )

    return result
