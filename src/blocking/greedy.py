"""Star-topology reconnection heuristic, kept for comparison with the search."""

import logging

from src.blocking.candidates import representative
from src.blocking.types import SearchContext, UserPair
from src.config.experiment import GREEDY_HUB_STRATEGIES
from src.graph.connectivity import identify_components
from src.graph.social import SocialGraph

log = logging.getLogger(__name__)


def find_fast_reconnection(
    graph: SocialGraph,
    context: SearchContext | None = None,
    hub: str = "smallest",
) -> list[UserPair]:
    """Connect every component to one hub component.

    Components are sorted by size (stable, so ties keep discovery order) and
    the first one becomes the hub: the smallest by default, the largest with
    ``hub="largest"``. Always returns K - 1 pairs for K components, the same
    count as the exhaustive search, though usually a different topology.

    Raises:
        ValueError: If hub is not a known strategy.
    """
    if hub not in GREEDY_HUB_STRATEGIES:
        raise ValueError(f"hub must be one of {GREEDY_HUB_STRATEGIES}, got {hub!r}")

    components = identify_components(graph, context)
    if len(components) <= 1:
        return []

    ordered = sorted(components, key=len, reverse=hub == "largest")
    hub_user = representative(ordered[0])
    pairs = [UserPair(hub_user, representative(c)) for c in ordered[1:]]

    log.debug("Greedy star around %s: %d edges", hub_user, len(pairs))
    return pairs
