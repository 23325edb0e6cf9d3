"""Social graph structure, connectivity analysis, and graph builders."""

from src.graph.connectivity import (
    identify_components,
    reachable_from,
    verify_connectivity,
)
from src.graph.generator import (
    chain_graph,
    complete_graph,
    generate_disconnected_graph,
    make_users,
    ring_graph,
    star_graph,
)
from src.graph.social import SocialGraph
from src.graph.types import NO_EDGE, Edge, User, interaction_weight
from src.graph.validation import (
    count_components_sparse,
    to_sparse_adjacency,
    validate_partition,
    validate_solution,
)

__all__ = [
    "Edge",
    "NO_EDGE",
    "SocialGraph",
    "User",
    "chain_graph",
    "complete_graph",
    "count_components_sparse",
    "generate_disconnected_graph",
    "identify_components",
    "interaction_weight",
    "make_users",
    "reachable_from",
    "ring_graph",
    "star_graph",
    "to_sparse_adjacency",
    "validate_partition",
    "validate_solution",
    "verify_connectivity",
]
