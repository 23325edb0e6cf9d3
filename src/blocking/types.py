"""Result records and per-call instrumentation for block simulation."""

import time
from collections.abc import Iterator
from dataclasses import dataclass, field

from src.graph.types import User
from src.reporting import render_block_report


@dataclass(frozen=True, eq=False, slots=True)
class UserPair:
    """Unordered pair of users proposed as a new friendship.

    Equality and hashing are symmetric: UserPair(a, b) == UserPair(b, a).
    """

    first: User
    second: User

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UserPair):
            return NotImplemented
        return {self.first, self.second} == {other.first, other.second}

    def __hash__(self) -> int:
        return hash(frozenset((self.first, self.second)))

    def __iter__(self) -> Iterator[User]:
        yield self.first
        yield self.second

    def spans(self, side_a: set[User], side_b: set[User]) -> bool:
        """True if the pair has one endpoint in each of the two sets."""
        return (self.first in side_a and self.second in side_b) or (
            self.first in side_b and self.second in side_a
        )

    def __str__(self) -> str:
        return f"{self.first} <-> {self.second}"


@dataclass(frozen=True, slots=True)
class SearchStats:
    """Read-only snapshot of the counters for one public call.

    Informative only; the functional result never depends on these values.
    """

    operations: int = 0
    nodes_explored: int = 0
    nodes_pruned: int = 0
    elapsed_ms: float = 0.0

    @property
    def pruning_effectiveness(self) -> float:
        """Percentage of decision-tree nodes cut by pruning."""
        total = self.nodes_explored + self.nodes_pruned
        if self.nodes_explored == 0:
            return 0.0
        return 100.0 * self.nodes_pruned / total


@dataclass
class SearchContext:
    """Mutable counters threaded through one simulation or search call.

    A fresh context is created per public call, so concurrent calls never
    share state.
    """

    operations: int = 0
    nodes_explored: int = 0
    nodes_pruned: int = 0
    started_at: float = field(default_factory=time.perf_counter)

    def snapshot(self) -> SearchStats:
        return SearchStats(
            operations=self.operations,
            nodes_explored=self.nodes_explored,
            nodes_pruned=self.nodes_pruned,
            elapsed_ms=(time.perf_counter() - self.started_at) * 1000.0,
        )


@dataclass(frozen=True, slots=True)
class BlockResult:
    """Immutable outcome of simulating one block."""

    blocker: User
    blocked: User
    still_connected: bool
    edges_needed: int
    suggested_edges: tuple[UserPair, ...]
    message: str

    def report(self, stats: SearchStats | None = None) -> str:
        """Human-readable summary, optionally with the search counters."""
        return render_block_report(self, stats)
