"""Sample graph builders and a seeded generator of disconnected graphs."""

import logging
from collections.abc import Sequence

import numpy as np

from src.graph.social import SocialGraph
from src.graph.types import User

log = logging.getLogger(__name__)


def make_users(names: Sequence[str], start_id: int = 1, profile: str = "student") -> list[User]:
    """Create users with consecutive ids from a list of names."""
    return [
        User(id=start_id + i, name=name, profile=profile)
        for i, name in enumerate(names)
    ]


def chain_graph(users: Sequence[User], weight: float = 1) -> SocialGraph:
    """Path u0 - u1 - ... - u(n-1)."""
    graph = SocialGraph()
    for user in users:
        graph.add_user(user)
    for a, b in zip(users, users[1:]):
        graph.add_edge(a, b, weight)
    return graph


def ring_graph(users: Sequence[User], weight: float = 1) -> SocialGraph:
    """Chain closed back onto its first user."""
    graph = chain_graph(users, weight)
    if len(users) > 2:
        graph.add_edge(users[-1], users[0], weight)
    return graph


def complete_graph(users: Sequence[User], weight: float = 1) -> SocialGraph:
    graph = SocialGraph()
    for user in users:
        graph.add_user(user)
    for i, a in enumerate(users):
        for b in users[i + 1:]:
            graph.add_edge(a, b, weight)
    return graph


def star_graph(center: User, leaves: Sequence[User], weight: float = 1) -> SocialGraph:
    """Every leaf befriends ``center`` and nobody else."""
    graph = SocialGraph()
    graph.add_user(center)
    for leaf in leaves:
        graph.add_edge(center, leaf, weight)
    return graph


def generate_disconnected_graph(
    n_users: int,
    n_edges: int,
    n_components: int,
    rng: np.random.Generator,
) -> SocialGraph:
    """Generate a graph whose users fall into ``n_components`` blocks.

    Users are shuffled into contiguous blocks of near-equal size. Each block
    is wired as a random spanning chain until the edge budget runs out, so
    the result has at least ``n_components`` components (more when the
    budget is smaller than ``n_users - n_components``). No edge ever joins
    two blocks.

    Args:
        n_users: Number of users.
        n_edges: Maximum number of edges to create.
        n_components: Number of user blocks.
        rng: numpy random Generator for reproducibility.

    Returns:
        The generated graph.

    Raises:
        ValueError: If n_components is not in [1, n_users] or n_edges < 0.
    """
    if not 1 <= n_components <= n_users:
        raise ValueError(
            f"n_components ({n_components}) must be between 1 and "
            f"n_users ({n_users})"
        )
    if n_edges < 0:
        raise ValueError(f"n_edges ({n_edges}) must be non-negative")

    users = [User(id=i, name=f"U{i}") for i in range(n_users)]
    graph = SocialGraph()
    for user in users:
        graph.add_user(user)

    order = rng.permutation(n_users)
    blocks = np.array_split(order, n_components)

    created = 0
    for block in blocks:
        for a, b in zip(block[:-1], block[1:]):
            if created >= n_edges:
                break
            graph.add_edge(users[int(a)], users[int(b)], 1)
            created += 1

    log.debug(
        "Generated graph: users=%d, edges=%d, blocks=%d",
        n_users,
        created,
        n_components,
    )
    return graph
