"""Independent checks of component partitions and reconnection solutions.

Exports the graph to a symmetric scipy sparse matrix and counts components
with scipy.sparse.csgraph, giving a second opinion that does not share
code with the depth-first analyzer.
"""

import logging
from collections.abc import Iterable, Sequence

import numpy as np
import scipy.sparse
from scipy.sparse.csgraph import connected_components

from src.graph.connectivity import reachable_from
from src.graph.social import SocialGraph
from src.graph.types import User

log = logging.getLogger(__name__)


def to_sparse_adjacency(
    graph: SocialGraph,
) -> tuple[scipy.sparse.csr_matrix, list[User]]:
    """Build the symmetric weighted adjacency matrix of ``graph``.

    Zero-weight edges are stored with a tiny positive value so that they
    survive as explicit structure in the sparse matrix.

    Returns:
        (adjacency, users) where row/column i of adjacency is users[i].
    """
    users = graph.users()
    index = {user.id: i for i, user in enumerate(users)}
    n = len(users)

    rows: list[int] = []
    cols: list[int] = []
    data: list[float] = []
    for edge in graph.edges():
        i, j = index[edge.source.id], index[edge.target.id]
        weight = float(edge.weight) if edge.weight > 0 else np.finfo(np.float64).eps
        rows.extend((i, j))
        cols.extend((j, i))
        data.extend((weight, weight))

    adj = scipy.sparse.csr_matrix(
        (
            np.asarray(data, dtype=np.float64),
            (np.asarray(rows, dtype=np.int64), np.asarray(cols, dtype=np.int64)),
        ),
        shape=(n, n),
    )
    return adj, users


def count_components_sparse(graph: SocialGraph) -> int:
    """Number of connected components according to scipy."""
    if graph.is_empty():
        return 0
    adj, _ = to_sparse_adjacency(graph)
    n_components, _ = connected_components(adj, directed=False)
    return int(n_components)


def validate_partition(
    graph: SocialGraph, components: Sequence[set[User]]
) -> list[str]:
    """Check that ``components`` is a true component partition of ``graph``.

    Checks (cheapest first):
    1. Sets are pairwise disjoint
    2. Union equals the vertex set
    3. Each set is exactly the reach of any of its members
    4. Component count agrees with scipy

    Returns:
        List of error strings (empty = valid partition).
    """
    errors: list[str] = []

    seen: set[User] = set()
    for idx, component in enumerate(components):
        overlap = seen & component
        if overlap:
            errors.append(
                f"Component {idx} overlaps earlier components on "
                f"{sorted(u.id for u in overlap)}"
            )
        seen |= component

    all_users = set(graph.users())
    if seen != all_users:
        missing = sorted(u.id for u in all_users - seen)
        extra = sorted(u.id for u in seen - all_users)
        errors.append(f"Partition mismatch: missing={missing}, unknown={extra}")

    for idx, component in enumerate(components):
        if not component:
            errors.append(f"Component {idx} is empty")
            continue
        member = next(iter(component))
        if reachable_from(graph, member) != component:
            errors.append(f"Component {idx} is not a maximal connected set")

    expected = count_components_sparse(graph)
    if expected != len(components):
        errors.append(
            f"Component count {len(components)} disagrees with scipy ({expected})"
        )

    return errors


def validate_solution(
    graph: SocialGraph,
    pairs: Iterable[tuple[User, User]],
    weight: float = 1,
) -> list[str]:
    """Check that adding ``pairs`` to ``graph`` makes it connected.

    ``graph`` is not modified; the pairs are applied to a copy.

    Returns:
        List of error strings (empty = valid solution).
    """
    errors: list[str] = []
    trial = graph.copy()
    seen: set[frozenset[int]] = set()

    for u1, u2 in pairs:
        key = frozenset((u1.id, u2.id))
        if key in seen:
            errors.append(f"Duplicate suggested edge {u1.id}-{u2.id}")
        seen.add(key)
        for user in (u1, u2):
            if not graph.contains(user):
                errors.append(f"Suggested edge references unknown user {user.id}")
        trial.add_edge(u1, u2, weight)

    n_components = count_components_sparse(trial)
    if n_components > 1:
        errors.append(
            f"Graph still has {n_components} components after adding "
            f"{len(seen)} edges"
        )

    if errors:
        log.debug("Solution validation failed: %s", "; ".join(errors))
    return errors
