"""Traversal-based connectivity test and component decomposition.

Both operations run an iterative depth-first search with an explicit
stack, so deep chains never hit the interpreter recursion limit. Cost is
O(V + E) per call.
"""

import logging
from typing import TYPE_CHECKING

from src.graph.social import SocialGraph
from src.graph.types import User

if TYPE_CHECKING:
    from src.blocking.types import SearchContext

log = logging.getLogger(__name__)


def _traverse(graph: SocialGraph, start_id: int, visited: set[int]) -> set[int]:
    """Depth-first walk from start_id, skipping ids already in ``visited``.

    Returns the ids reached by this walk; ``visited`` is updated in place.
    """
    reached = {start_id}
    visited.add(start_id)
    stack = [start_id]
    while stack:
        current = stack.pop()
        for nid in graph.neighbor_ids(current):
            if nid not in visited:
                visited.add(nid)
                reached.add(nid)
                stack.append(nid)
    return reached


def reachable_from(
    graph: SocialGraph, user: User, context: "SearchContext | None" = None
) -> set[User]:
    """All users reachable from ``user`` (including itself).

    Unknown users reach nothing and yield an empty set.
    """
    if not graph.contains(user):
        return set()
    reached = _traverse(graph, user.id, set())
    if context is not None:
        context.operations += len(reached)
    return {graph.get_user(uid) for uid in reached}


def verify_connectivity(
    graph: SocialGraph, context: "SearchContext | None" = None
) -> bool:
    """True iff every user is reachable from the first user.

    Graphs with zero or one user are vacuously connected.
    """
    users = graph.users()
    if len(users) <= 1:
        return True

    reached = _traverse(graph, users[0].id, set())
    if context is not None:
        context.operations += len(reached)
    return len(reached) == len(users)


def identify_components(
    graph: SocialGraph, context: "SearchContext | None" = None
) -> list[set[User]]:
    """Partition the users into maximal connected components.

    Components are returned in the order their first user was added to
    the graph.
    """
    visited: set[int] = set()
    components: list[set[User]] = []

    for user in graph.users():
        if user.id in visited:
            continue
        reached = _traverse(graph, user.id, visited)
        components.append({graph.get_user(uid) for uid in reached})

    if context is not None:
        context.operations += len(visited)

    log.debug(
        "Found %d components over %d users", len(components), graph.vertex_count
    )
    return components
