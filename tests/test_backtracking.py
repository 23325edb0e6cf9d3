"""Tests for candidate generation and the backtracking reconnection search."""

import numpy as np
import pytest

from src.blocking import (
    ReconnectionSearch,
    SearchContext,
    UserPair,
    find_minimal_reconnection,
    generate_candidates,
    representative,
)
from src.graph import (
    SocialGraph,
    User,
    generate_disconnected_graph,
    identify_components,
    make_users,
    ring_graph,
    validate_solution,
    verify_connectivity,
)


def _isolated_pairs(n_pairs: int) -> SocialGraph:
    """Users 1..2n joined as (1,2), (3,4), ... with no other edges."""
    g = SocialGraph()
    for i in range(n_pairs):
        g.add_edge(User(2 * i + 1), User(2 * i + 2))
    return g


def _isolated_users(n: int) -> SocialGraph:
    g = SocialGraph()
    for i in range(1, n + 1):
        g.add_user(User(i))
    return g


class TestUserPair:
    """Symmetric pair semantics."""

    def test_symmetric_equality(self) -> None:
        assert UserPair(User(1), User(2)) == UserPair(User(2), User(1))
        assert hash(UserPair(User(1), User(2))) == hash(UserPair(User(2), User(1)))

    def test_distinct_pairs_differ(self) -> None:
        assert UserPair(User(1), User(2)) != UserPair(User(1), User(3))

    def test_unpacking(self) -> None:
        first, second = UserPair(User(1), User(2))
        assert (first.id, second.id) == (1, 2)

    def test_spans(self) -> None:
        pair = UserPair(User(3), User(1))
        assert pair.spans({User(1)}, {User(2), User(3)})
        assert not pair.spans({User(1), User(3)}, {User(2)})


class TestCandidates:
    """One representative pair per component pair."""

    def test_representative_lowest_id(self) -> None:
        assert representative({User(9), User(4), User(7)}).id == 4

    @pytest.mark.parametrize("k", [1, 2, 3, 4, 6])
    def test_candidate_count(self, k: int) -> None:
        components = identify_components(_isolated_users(k))
        assert len(generate_candidates(components)) == k * (k - 1) // 2

    def test_candidate_order(self) -> None:
        components = identify_components(_isolated_pairs(3))
        candidates = generate_candidates(components)
        assert [(p.first.id, p.second.id) for p in candidates] == [(1, 3), (1, 5), (3, 5)]

    def test_candidates_cross_components(self) -> None:
        components = identify_components(_isolated_pairs(4))
        for pair in generate_candidates(components):
            homes = [i for i, c in enumerate(components) if pair.first in c or pair.second in c]
            assert len(homes) == 2


class TestFindMinimalReconnection:
    """Optimal search results and instrumentation."""

    def test_connected_graph_needs_nothing(self) -> None:
        ctx = SearchContext()
        g = ring_graph(make_users(["A", "B", "C"]))
        assert find_minimal_reconnection(g, ctx) == []
        assert ctx.nodes_explored == 0

    def test_empty_graph_needs_nothing(self) -> None:
        assert find_minimal_reconnection(SocialGraph()) == []

    @pytest.mark.parametrize("k", [2, 3, 4, 5])
    def test_returns_k_minus_one_edges(self, k: int) -> None:
        g = _isolated_users(k)
        solution = find_minimal_reconnection(g)
        assert len(solution) == k - 1
        assert validate_solution(g, solution) == []

    def test_solution_connects_graph(self) -> None:
        g = _isolated_pairs(3)
        trial = g.copy()
        for first, second in find_minimal_reconnection(g):
            trial.add_edge(first, second)
        assert verify_connectivity(trial)

    def test_input_graph_not_modified(self) -> None:
        g = _isolated_pairs(3)
        find_minimal_reconnection(g)
        assert g.edge_count == 3
        assert len(identify_components(g)) == 3

    def test_first_minimal_solution_in_candidate_order(self) -> None:
        solution = find_minimal_reconnection(_isolated_pairs(3))
        assert solution == [UserPair(User(1), User(3)), UserPair(User(1), User(5))]

    def test_three_components_counters(self) -> None:
        ctx = SearchContext()
        find_minimal_reconnection(_isolated_pairs(3), ctx)
        assert ctx.nodes_explored == 3
        assert ctx.nodes_pruned == 3

    def test_two_components_counters(self) -> None:
        ctx = SearchContext()
        find_minimal_reconnection(_isolated_pairs(2), ctx)
        assert ctx.nodes_explored == 2
        assert ctx.nodes_pruned == 1

    @pytest.mark.parametrize("k", [3, 4, 5, 6])
    def test_pruning_triggers_when_candidates_exceed_bound(self, k: int) -> None:
        ctx = SearchContext()
        find_minimal_reconnection(_isolated_users(k), ctx)
        assert ctx.nodes_pruned > 0

    def test_counts_operations(self) -> None:
        ctx = SearchContext()
        find_minimal_reconnection(_isolated_pairs(2), ctx)
        assert ctx.operations > 0

    def test_random_disconnected_graphs(self) -> None:
        rng = np.random.default_rng(42)
        for n_users, n_edges, n_components in [(6, 4, 2), (9, 6, 3), (12, 9, 3), (10, 4, 4)]:
            g = generate_disconnected_graph(n_users, n_edges, n_components, rng)
            k = len(identify_components(g))
            solution = find_minimal_reconnection(g)
            assert len(solution) == k - 1
            assert validate_solution(g, solution) == []


class TestReconnectionSearch:
    """Search behaviour when the lower bound cannot stop it early."""

    def test_bound_pruning_without_early_exit(self) -> None:
        g = _isolated_pairs(3)
        candidates = generate_candidates(identify_components(g))
        ctx = SearchContext()
        # lower_bound 0 is unreachable, so the whole tree is walked.
        search = ReconnectionSearch(g, candidates, lower_bound=0, context=ctx)
        solution = search.run()

        assert solution == candidates[:2]
        assert ctx.nodes_pruned > 0
        assert ctx.nodes_explored > 3

    def test_no_candidates(self) -> None:
        ctx = SearchContext()
        search = ReconnectionSearch(SocialGraph(), [], lower_bound=0, context=ctx)
        assert search.run() == []
        assert ctx.nodes_explored == 1
