"""Block simulation: remove one friendship and repair connectivity if needed."""

import logging

from src.blocking.backtracking import find_minimal_reconnection
from src.blocking.greedy import find_fast_reconnection
from src.blocking.types import BlockResult, SearchContext, SearchStats, UserPair
from src.config.defaults import DEFAULT_CONFIG
from src.config.experiment import SimulationConfig
from src.graph.connectivity import identify_components, verify_connectivity
from src.graph.social import SocialGraph
from src.graph.types import User
from src.graph.validation import validate_solution

log = logging.getLogger(__name__)

NO_CONNECTION_MESSAGE = "No connection to remove"
STILL_CONNECTED_MESSAGE = "Graph remains connected after the block"


def count_connections(n_edges: int, new: bool = False) -> str:
    """``"1 connection"``, ``"3 new connections"`` and so on."""
    noun = "connection" if n_edges == 1 else "connections"
    return f"{n_edges} new {noun}" if new else f"{n_edges} {noun}"


def _reconnection_message(n_edges: int) -> str:
    return f"{count_connections(n_edges, new=True)} required"


class BlockSimulator:
    """Entry point for block simulations and the analyses behind them.

    Every public method works on a private copy of its input graph and
    replaces ``stats`` with the counters of that call only.
    """

    def __init__(self, config: SimulationConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self._stats = SearchStats()

    @property
    def stats(self) -> SearchStats:
        """Counters of the most recent public call."""
        return self._stats

    def simulate_block(
        self, graph: SocialGraph, blocker: User, blocked: User
    ) -> BlockResult:
        """Simulate ``blocker`` blocking ``blocked`` on a copy of ``graph``.

        Returns:
            BlockResult describing whether the graph stays connected and,
            if not, the minimum set of new friendships that reconnects it.
        """
        ctx = SearchContext()
        working = graph.copy()

        if not working.are_adjacent(blocker, blocked):
            log.info("No friendship between %s and %s to block", blocker, blocked)
            self._stats = ctx.snapshot()
            return BlockResult(
                blocker, blocked, True, 0, (), NO_CONNECTION_MESSAGE
            )

        working.remove_edge(blocker, blocked)
        ctx.operations += 1

        if verify_connectivity(working, ctx):
            log.info("Block %s -> %s keeps the graph connected", blocker, blocked)
            self._stats = ctx.snapshot()
            return BlockResult(
                blocker, blocked, True, 0, (), STILL_CONNECTED_MESSAGE
            )

        weight = self.config.search.new_edge_weight
        solution = find_minimal_reconnection(working, ctx, weight)
        self._check_solution(working, solution)
        self._stats = ctx.snapshot()

        log.info(
            "Block %s -> %s disconnects the graph; %d new edges needed "
            "(explored=%d, pruned=%d)",
            blocker,
            blocked,
            len(solution),
            self._stats.nodes_explored,
            self._stats.nodes_pruned,
        )
        return BlockResult(
            blocker,
            blocked,
            False,
            len(solution),
            tuple(solution),
            _reconnection_message(len(solution)),
        )

    def verify_connectivity(self, graph: SocialGraph) -> bool:
        ctx = SearchContext()
        connected = verify_connectivity(graph, ctx)
        self._stats = ctx.snapshot()
        return connected

    def identify_components(self, graph: SocialGraph) -> list[set[User]]:
        ctx = SearchContext()
        components = identify_components(graph, ctx)
        self._stats = ctx.snapshot()
        return components

    def find_minimal_reconnection(self, graph: SocialGraph) -> list[UserPair]:
        """Optimal reconnection of ``graph`` (empty if already connected)."""
        ctx = SearchContext()
        weight = self.config.search.new_edge_weight
        solution = find_minimal_reconnection(graph, ctx, weight)
        self._check_solution(graph, solution)
        self._stats = ctx.snapshot()
        return solution

    def find_fast_reconnection(self, graph: SocialGraph) -> list[UserPair]:
        """Greedy star reconnection of ``graph`` (empty if already connected)."""
        ctx = SearchContext()
        solution = find_fast_reconnection(graph, ctx, self.config.search.greedy_hub)
        self._stats = ctx.snapshot()
        return solution

    def _check_solution(self, graph: SocialGraph, solution: list[UserPair]) -> None:
        if not self.config.search.validate_solutions or not solution:
            return
        errors = validate_solution(graph, solution, self.config.search.new_edge_weight)
        for error in errors:
            log.warning("Reconnection check failed: %s", error)


def simulate_block(
    graph: SocialGraph,
    blocker: User,
    blocked: User,
    config: SimulationConfig = DEFAULT_CONFIG,
) -> BlockResult:
    """Convenience wrapper around BlockSimulator.simulate_block."""
    return BlockSimulator(config).simulate_block(graph, blocker, blocked)
