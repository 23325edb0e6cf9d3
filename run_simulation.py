#!/usr/bin/env python3
"""Entry point for block simulation demos and benchmarks.

Builds the sample friendship graphs, simulates each block, compares the
optimal reconnection with the greedy star, and optionally benchmarks the
search on synthetic disconnected graphs.

Usage:
    python run_simulation.py
    python run_simulation.py --scenario chain --verbose
    python run_simulation.py --config config.json --benchmark
    python run_simulation.py --output results
"""

import argparse
import logging
import sys
import time
from collections.abc import Callable
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

import numpy as np
from dacite import DaciteError

from src.config import DEFAULT_CONFIG, SimulationConfig, config_from_json, full_config_hash

log = logging.getLogger(__name__)


@contextmanager
def stage_timer(name: str) -> Generator[None, None, None]:
    """Context manager that prints stage banners with elapsed time."""
    print(f"\n=== {name} ===")
    log.info("Starting: %s", name)
    t0 = time.monotonic()
    yield
    elapsed = time.monotonic() - t0
    print(f"... done in {elapsed:.3f}s")
    log.info("Completed: %s in %.3fs", name, elapsed)


def _ring_scenario():
    """Ring A-B-C-D-A; blocking A-B leaves the path D-C-B."""
    from src.graph import make_users, ring_graph

    a, b, c, d = make_users(["Ana", "Bruno", "Carlos", "Diana"])
    return ring_graph([a, b, c, d]), a, b


def _bridge_scenario():
    """Chain A-B-C; A-B is a bridge."""
    from src.graph import chain_graph, make_users

    a, b, c = make_users(["Ana", "Bruno", "Carlos"])
    return chain_graph([a, b, c]), a, b


def _chain_scenario():
    """Chain A-B-C-D-E; blocking B-C splits {A,B} from {C,D,E}."""
    from src.graph import chain_graph, make_users

    users = make_users(["A", "B", "C", "D", "E"])
    return chain_graph(users), users[1], users[2]


def _long_path_scenario():
    """Path A-B-G-C-D-E-F; blocking B-G splits it in two."""
    from src.graph import chain_graph, make_users

    a, b, c, d, e, f, g = make_users(
        ["Ana", "Bruno", "Carlos", "Diana", "Elena", "Franco", "Gloria"]
    )
    return chain_graph([a, b, g, c, d, e, f]), b, g


def _complete_scenario():
    """K4: every block leaves plenty of alternative paths."""
    from src.graph import complete_graph, make_users

    users = make_users(["U0", "U1", "U2", "U3"], start_id=10)
    return complete_graph(users), users[0], users[1]


def _star_scenario():
    """Star with five leaves; blocking a spoke isolates that leaf."""
    from src.graph import make_users, star_graph

    center, *leaves = make_users(
        ["Center"] + [f"Leaf{i}" for i in range(5)], start_id=20
    )
    return star_graph(center, leaves), center, leaves[0]


SCENARIOS: dict[str, Callable] = {
    "ring": _ring_scenario,
    "bridge": _bridge_scenario,
    "chain": _chain_scenario,
    "long_path": _long_path_scenario,
    "complete": _complete_scenario,
    "star": _star_scenario,
}


def run_scenarios(
    config: SimulationConfig, names: list[str], results_dir: str | None = None
) -> None:
    """Simulate each named scenario and print its report."""
    from src.blocking import BlockSimulator, count_connections
    from src.results import write_result

    simulator = BlockSimulator(config)

    for name in names:
        with stage_timer(f"Scenario: {name}"):
            graph, blocker, blocked = SCENARIOS[name]()
            print(graph.describe())
            print(f"\nSimulating block: {blocker} -> {blocked}\n")

            result = simulator.simulate_block(graph, blocker, blocked)
            stats = simulator.stats
            print(result.report(stats))

            if not result.still_connected:
                working = graph.copy()
                working.remove_edge(blocker, blocked)
                greedy = simulator.find_fast_reconnection(working)
                print("--- Greedy comparison ---")
                optimal = count_connections(result.edges_needed)
                print(f"Backtracking (optimal): {optimal}")
                print(f"Greedy (heuristic):     {count_connections(len(greedy))}")
                for pair in greedy:
                    print(f"  {pair}")

            if results_dir is not None:
                run_id = write_result(result, config, stats, results_dir)
                log.info("Result written to %s/%s", results_dir, run_id)


def run_benchmark(config: SimulationConfig) -> None:
    """Time the exhaustive search on synthetic disconnected graphs."""
    from src.blocking import BlockSimulator
    from src.graph import generate_disconnected_graph
    from src.reporting import BenchmarkRow, render_benchmark_table

    simulator = BlockSimulator(config)
    bench = config.benchmark
    rows: list[BenchmarkRow] = []

    for n_users, n_edges, n_components in zip(
        bench.n_users_values, bench.n_edges_values, bench.n_components_values
    ):
        rng = np.random.default_rng(config.seed)
        graph = generate_disconnected_graph(n_users, n_edges, n_components, rng)

        components = simulator.identify_components(graph)
        optimal = simulator.find_minimal_reconnection(graph)
        stats = simulator.stats
        greedy = simulator.find_fast_reconnection(graph)

        log.info(
            "Benchmark n=%d: components=%d, optimal=%d, greedy=%d",
            n_users,
            len(components),
            len(optimal),
            len(greedy),
        )
        rows.append(
            BenchmarkRow(
                n_users=n_users,
                n_edges=graph.edge_count,
                n_components=len(components),
                elapsed_ms=stats.elapsed_ms,
                nodes_explored=stats.nodes_explored,
                pruning_effectiveness=stats.pruning_effectiveness,
                optimal_edges=len(optimal),
                greedy_edges=len(greedy),
            )
        )

    print(render_benchmark_table(rows))


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Simulate blocks in a social graph and repair connectivity"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to simulation config JSON file (defaults built in)",
    )
    parser.add_argument(
        "--scenario",
        choices=[*SCENARIOS, "all"],
        default="all",
        help="Sample scenario to run",
    )
    parser.add_argument(
        "--benchmark",
        action="store_true",
        help="Also benchmark the search on synthetic disconnected graphs",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Directory for result.json files (nothing written by default)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate the config and show the plan without simulating",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    args = parser.parse_args()

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = DEFAULT_CONFIG
    if args.config is not None:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        try:
            config = config_from_json(config_path.read_text())
        except (ValueError, DaciteError) as exc:
            print(f"Error: invalid config: {exc}", file=sys.stderr)
            sys.exit(1)

    names = list(SCENARIOS) if args.scenario == "all" else [args.scenario]

    print(f"Config hash: {full_config_hash(config)}")
    print(f"Search:      new_edge_weight={config.search.new_edge_weight}, "
          f"greedy_hub={config.search.greedy_hub}, "
          f"validate={config.search.validate_solutions}")
    print(f"Scenarios:   {', '.join(names)}")
    print(f"Seed:        {config.seed}")

    if args.dry_run:
        print("\n[dry-run] Config loaded successfully. Exiting.")
        return

    try:
        run_scenarios(config, names, args.output)
        if args.benchmark:
            with stage_timer("Benchmark"):
                run_benchmark(config)
    except Exception:
        log.exception("Simulation failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
