"""Block simulation with optimal and greedy connectivity repair."""

from src.blocking.backtracking import ReconnectionSearch, find_minimal_reconnection
from src.blocking.candidates import generate_candidates, representative
from src.blocking.greedy import find_fast_reconnection
from src.blocking.simulator import (
    NO_CONNECTION_MESSAGE,
    STILL_CONNECTED_MESSAGE,
    BlockSimulator,
    count_connections,
    simulate_block,
)
from src.blocking.types import BlockResult, SearchContext, SearchStats, UserPair

__all__ = [
    "BlockResult",
    "BlockSimulator",
    "NO_CONNECTION_MESSAGE",
    "ReconnectionSearch",
    "STILL_CONNECTED_MESSAGE",
    "SearchContext",
    "SearchStats",
    "UserPair",
    "count_connections",
    "find_fast_reconnection",
    "find_minimal_reconnection",
    "generate_candidates",
    "representative",
    "simulate_block",
]
