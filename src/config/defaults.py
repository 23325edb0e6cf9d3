"""Default configuration: single source of truth for simulation parameters."""

from src.config.experiment import SimulationConfig

# All-default values: trial edge weight 1, smallest-component greedy hub,
# three benchmark cases (6/9/12 users), seed=42.
DEFAULT_CONFIG = SimulationConfig()
