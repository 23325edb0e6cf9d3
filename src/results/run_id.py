"""Run ID generation with scannable slug format."""

from datetime import datetime, timezone

from src.config.experiment import SimulationConfig
from src.graph.types import User


def generate_run_id(config: SimulationConfig, blocker: User, blocked: User) -> str:
    """Generate a scannable run ID for one block simulation.

    Format: block_{blocker_id}-{blocked_id}_{hub}_s{seed}_{YYYYMMDD}_{HHMMSS}
    Example: block_1-2_smallest_s42_20261019_143012
    """
    ts = datetime.now(timezone.utc)
    return (
        f"block_{blocker.id}-{blocked.id}"
        f"_{config.search.greedy_hub}"
        f"_s{config.seed}"
        f"_{ts.strftime('%Y%m%d_%H%M%S')}"
    )
