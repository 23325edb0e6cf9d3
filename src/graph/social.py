"""Undirected weighted social graph backed by adjacency dictionaries.

Users are indexed by id; each user maps to an insertion-ordered dict of
neighbour id -> weight. Every edge is stored in both adjacency dicts with
the same weight. Operations that reference unknown users are no-ops or
return a sentinel, never raise.
"""

import logging
from collections.abc import Iterator

from src.graph.types import NO_EDGE, Edge, User, interaction_weight

log = logging.getLogger(__name__)


class SocialGraph:
    """Friendship graph keyed by user identity."""

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._adjacency: dict[int, dict[int, float]] = {}
        self._edge_count = 0

    # ── Mutation ───────────────────────────────────────────────────

    def add_user(self, user: User) -> None:
        """Register a user. Adding an existing user does nothing."""
        if user.id not in self._users:
            self._users[user.id] = user
            self._adjacency[user.id] = {}

    def add_edge(self, u1: User, u2: User, weight: float = 1) -> bool:
        """Add an undirected edge, registering unknown users first.

        An existing edge is left unchanged (including its weight) and
        self-loops are ignored.

        Returns:
            True if a new edge was created.

        Raises:
            ValueError: If weight is negative.
        """
        if weight < 0:
            raise ValueError(f"Edge weight must be non-negative, got {weight}")
        if u1 == u2:
            log.debug("Ignoring self-loop on user %d", u1.id)
            return False

        self.add_user(u1)
        self.add_user(u2)

        if u2.id in self._adjacency[u1.id]:
            return False

        self._adjacency[u1.id][u2.id] = weight
        self._adjacency[u2.id][u1.id] = weight
        self._edge_count += 1
        return True

    def add_edge_from_interactions(
        self, u1: User, u2: User, interactions: int
    ) -> bool:
        """Add an edge whose weight shrinks as the interaction count grows."""
        return self.add_edge(u1, u2, interaction_weight(interactions))

    def remove_edge(self, u1: User, u2: User) -> bool:
        """Remove the edge between two users.

        Returns:
            True if an edge existed and was removed, False otherwise.
        """
        if not self.are_adjacent(u1, u2):
            return False

        del self._adjacency[u1.id][u2.id]
        del self._adjacency[u2.id][u1.id]
        self._edge_count -= 1
        return True

    # ── Queries ────────────────────────────────────────────────────

    def contains(self, user: User) -> bool:
        return user.id in self._users

    def __contains__(self, user: object) -> bool:
        return isinstance(user, User) and self.contains(user)

    def users(self) -> list[User]:
        """All users in insertion order."""
        return list(self._users.values())

    def get_user(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def neighbors(self, user: User) -> list[tuple[User, float]]:
        """(neighbour, weight) pairs in the order the edges were added."""
        adjacent = self._adjacency.get(user.id)
        if adjacent is None:
            return []
        return [(self._users[nid], w) for nid, w in adjacent.items()]

    def neighbor_ids(self, user_id: int) -> Iterator[int]:
        """Neighbour ids of ``user_id`` without materialising User records."""
        return iter(self._adjacency.get(user_id, ()))

    def are_adjacent(self, u1: User, u2: User) -> bool:
        adjacent = self._adjacency.get(u1.id)
        return adjacent is not None and u2.id in adjacent

    def edge_weight(self, u1: User, u2: User) -> float:
        """Weight of the edge between two users, or NO_EDGE if absent."""
        adjacent = self._adjacency.get(u1.id)
        if adjacent is None:
            return NO_EDGE
        return adjacent.get(u2.id, NO_EDGE)

    def degree(self, user: User) -> int:
        return len(self._adjacency.get(user.id, ()))

    def edges(self) -> list[Edge]:
        """Each undirected edge once, oriented from the earlier-added user."""
        seen: set[int] = set()
        result: list[Edge] = []
        for uid, adjacent in self._adjacency.items():
            for nid, weight in adjacent.items():
                if nid not in seen:
                    result.append(Edge(self._users[uid], self._users[nid], weight))
            seen.add(uid)
        return result

    @property
    def vertex_count(self) -> int:
        return len(self._users)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def is_empty(self) -> bool:
        return not self._users

    # ── Copy & display ─────────────────────────────────────────────

    def copy(self) -> "SocialGraph":
        """Deep copy: adjacency dicts are rebuilt, User records are immutable."""
        clone = SocialGraph()
        clone._users = dict(self._users)
        clone._adjacency = {
            uid: dict(adjacent) for uid, adjacent in self._adjacency.items()
        }
        clone._edge_count = self._edge_count
        return clone

    def describe(self) -> str:
        """Multi-line adjacency dump for debugging and demos."""
        lines = [
            "Social graph:",
            f"  Users: {self.vertex_count}",
            f"  Friendships: {self.edge_count}",
            "",
        ]
        for user in self._users.values():
            names = [str(n) for n, _ in self.neighbors(user)]
            lines.append(f"{user} -> {', '.join(names) if names else '(no friends)'}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"SocialGraph(users={self.vertex_count}, edges={self.edge_count})"
