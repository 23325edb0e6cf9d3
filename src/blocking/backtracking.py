"""Exhaustive minimum reconnection search by backtracking with pruning.

Explores include/exclude decisions over the ordered candidate list. A
branch stops as soon as its accumulated edges connect the graph, branches
that can no longer beat the best known size are pruned, and the whole
search ends once a solution reaches the lower bound of components - 1.

Worst case O(2^C) trial connectivity checks for C candidates; with the
bound the include-first path usually finds the optimum immediately.
"""

import logging

from src.blocking.candidates import generate_candidates
from src.blocking.types import SearchContext, UserPair
from src.graph.connectivity import identify_components, verify_connectivity
from src.graph.social import SocialGraph

log = logging.getLogger(__name__)


class ReconnectionSearch:
    """One backtracking run over a fixed candidate list.

    Counting convention for ``context.nodes_pruned``: a node counts as
    pruned whenever a subtree with undecided candidates is abandoned
    because it cannot improve on the best solution. That covers the size
    bound, feasible nodes whose extensions are never explored, and the
    exclude branches skipped after the lower bound is reached.
    """

    def __init__(
        self,
        graph: SocialGraph,
        candidates: list[UserPair],
        lower_bound: int,
        context: SearchContext,
        new_edge_weight: float = 1,
    ) -> None:
        self.graph = graph
        self.candidates = candidates
        self.lower_bound = lower_bound
        self.context = context
        self.new_edge_weight = new_edge_weight
        self.best: list[UserPair] | None = None
        self._current: list[UserPair] = []
        self._finished = False

    def run(self) -> list[UserPair]:
        self._step(0)
        return list(self.best) if self.best is not None else []

    def _connects(self) -> bool:
        """Does the working graph plus the accumulated edges form one component?"""
        trial = self.graph.copy()
        for first, second in self._current:
            trial.add_edge(first, second, self.new_edge_weight)
        return verify_connectivity(trial, self.context)

    def _step(self, index: int) -> None:
        ctx = self.context
        ctx.nodes_explored += 1

        if self._current and self._connects():
            if self.best is None or len(self._current) < len(self.best):
                self.best = list(self._current)
                log.debug(
                    "New best reconnection of size %d at node %d",
                    len(self.best),
                    ctx.nodes_explored,
                )
            if index < len(self.candidates):
                ctx.nodes_pruned += 1
            if self.best is not None and len(self.best) == self.lower_bound:
                self._finished = True
            return

        if index >= len(self.candidates):
            return

        if self.best is not None and len(self._current) >= len(self.best):
            ctx.nodes_pruned += 1
            return

        # Include candidate[index]
        self._current.append(self.candidates[index])
        self._step(index + 1)
        self._current.pop()

        if self._finished:
            ctx.nodes_pruned += 1
            return

        # Exclude candidate[index]
        self._step(index + 1)


def find_minimal_reconnection(
    graph: SocialGraph,
    context: SearchContext | None = None,
    new_edge_weight: float = 1,
) -> list[UserPair]:
    """Find a minimum-size set of new edges that connects ``graph``.

    ``graph`` is not modified. Among equally small solutions the first one
    in candidate order wins.

    Args:
        graph: Possibly disconnected graph.
        context: Counters to update; a private one is used when omitted.
        new_edge_weight: Weight of the trial edges.

    Returns:
        The suggested pairs, empty when the graph has at most one component.
    """
    ctx = context if context is not None else SearchContext()

    components = identify_components(graph, ctx)
    if len(components) <= 1:
        return []

    candidates = generate_candidates(components)
    lower_bound = len(components) - 1
    log.debug(
        "Searching reconnection: components=%d, candidates=%d, lower_bound=%d",
        len(components),
        len(candidates),
        lower_bound,
    )

    search = ReconnectionSearch(graph, candidates, lower_bound, ctx, new_edge_weight)
    solution = search.run()

    log.debug(
        "Search finished: size=%d, explored=%d, pruned=%d",
        len(solution),
        ctx.nodes_explored,
        ctx.nodes_pruned,
    )
    return solution
