"""Cross-component candidate edges for the reconnection search.

Joining any single pair of users from two components merges those
components entirely, so one representative per component is enough for
the cardinality objective: K components always need exactly K - 1 edges.
The representative is the member with the lowest id, which makes the
suggested topology reproducible across runs.
"""

from collections.abc import Sequence

from src.blocking.types import UserPair
from src.graph.types import User


def representative(component: set[User]) -> User:
    """The member with the lowest id."""
    return min(component, key=lambda user: user.id)


def generate_candidates(components: Sequence[set[User]]) -> list[UserPair]:
    """One candidate per unordered component pair, K * (K - 1) / 2 in total.

    Ordered by (i, j) with i < j in component order, so the first K - 1
    candidates form a star around component 0.
    """
    reps = [representative(component) for component in components]
    return [
        UserPair(reps[i], reps[j])
        for i in range(len(reps))
        for j in range(i + 1, len(reps))
    ]
