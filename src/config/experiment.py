"""Simulation configuration dataclasses, all frozen and slotted for immutability."""

from dataclasses import dataclass, field

GREEDY_HUB_STRATEGIES = ("smallest", "largest")


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """Reconnection search parameters."""

    new_edge_weight: int = 1  # weight given to suggested edges in trial graphs
    greedy_hub: str = "smallest"  # which component the greedy star hangs off
    validate_solutions: bool = True  # cross-check solutions with scipy


@dataclass(frozen=True, slots=True)
class BenchmarkConfig:
    """Synthetic disconnected-graph cases. Index i of each tuple forms one case."""

    n_users_values: tuple[int, ...] = (6, 9, 12)
    n_edges_values: tuple[int, ...] = (4, 6, 9)
    n_components_values: tuple[int, ...] = (2, 3, 3)


@dataclass(frozen=True, slots=True)
class SimulationConfig:
    """Top-level configuration composing all sub-configs.

    Cross-parameter validation runs in __post_init__ to reject invalid
    configurations early.
    """

    search: SearchConfig = field(default_factory=SearchConfig)
    benchmark: BenchmarkConfig = field(default_factory=BenchmarkConfig)
    seed: int = 42
    description: str = ""
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.search.new_edge_weight < 0:
            raise ValueError(
                f"new_edge_weight ({self.search.new_edge_weight}) must be >= 0"
            )
        if self.search.greedy_hub not in GREEDY_HUB_STRATEGIES:
            raise ValueError(
                f"greedy_hub must be one of {GREEDY_HUB_STRATEGIES}, "
                f"got {self.search.greedy_hub!r}"
            )
        bench = self.benchmark
        lengths = {
            len(bench.n_users_values),
            len(bench.n_edges_values),
            len(bench.n_components_values),
        }
        if len(lengths) != 1:
            raise ValueError(
                "benchmark value tuples must have equal length, got "
                f"{len(bench.n_users_values)}, {len(bench.n_edges_values)}, "
                f"{len(bench.n_components_values)}"
            )
        for n_users, n_components in zip(
            bench.n_users_values, bench.n_components_values
        ):
            if not 1 <= n_components <= n_users:
                raise ValueError(
                    f"n_components ({n_components}) must be between 1 and "
                    f"n_users ({n_users})"
                )
