"""User and relationship data structures for the social graph."""

from dataclasses import dataclass, field

# Returned by weight lookups when no edge exists between two users.
NO_EDGE = -1


def interaction_weight(interactions: int) -> int:
    """Map an interaction count to an edge weight.

    More interactions means a closer relationship and a lower weight:
    0 interactions -> 100, 99 or more -> 1.
    """
    return max(1, 100 - interactions)


@dataclass(frozen=True)
class User:
    """A member of the social network.

    Equality and hashing use ``id`` alone; the descriptive attributes are
    excluded from comparison so that two records for the same member are
    interchangeable as graph keys.
    """

    id: int
    name: str = field(default="", compare=False)
    profile: str = field(default="student", compare=False)  # student, professor, researcher
    email: str = field(default="", compare=False)
    max_ad_seconds: int = field(default=60, compare=False)

    def __post_init__(self) -> None:
        """Derive a default email from the name (uses object.__setattr__ since frozen)."""
        if not self.name:
            object.__setattr__(self, "name", f"user{self.id}")
        if not self.email:
            local = self.name.lower().replace(" ", "")
            object.__setattr__(self, "email", f"{local}@university.edu")

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Edge:
    """One undirected relationship, reported once per pair."""

    source: User
    target: User
    weight: float
