import random

import pytest

from teamnote.hopcroft_karp import HopcroftKarp


def _brute_matching(n, edges):
    adj = {u: sorted({v for a, v in edges if a == u}) for u in range(1, n + 1)}

    def best(u, used):
        if u > n:
            return 0
        result = best(u + 1, used)
        for v in adj[u]:
            if v not in used:
                result = max(result, 1 + best(u + 1, used | {v}))
        return result

    return best(1, frozenset())


def _check_consistent(hk, edges, size):
    edge_set = set(edges)
    matched = [(u, v) for u, v in enumerate(hk.match_left) if u and v]
    assert len(matched) == size
    for u, v in matched:
        assert (u, v) in edge_set
        assert hk.match_right[v] == u
    assert sum(1 for v in hk.match_right[1:] if v) == size


def test_complete_bipartite():
    hk = HopcroftKarp(2, 3)
    edges = [(u, v) for u in (1, 2) for v in (1, 2, 3)]
    for u, v in edges:
        hk.add_edge(u, v)
    size = hk.matching()
    assert size == 2
    _check_consistent(hk, edges, size)


def test_needs_augmenting_path():
    hk = HopcroftKarp(2, 2)
    edges = [(1, 1), (1, 2), (2, 1)]
    for u, v in edges:
        hk.add_edge(u, v)
    assert hk.matching() == 2
    assert hk.match_left[1:] == [2, 1]


def test_no_edges():
    hk = HopcroftKarp(3, 3)
    assert hk.matching() == 0
    assert hk.match_left == [0, 0, 0, 0]


def test_second_call_adds_nothing():
    hk = HopcroftKarp(2, 2)
    hk.add_edge(1, 1)
    hk.add_edge(2, 2)
    assert hk.matching() == 2
    assert hk.matching() == 0


@pytest.mark.parametrize("seed", range(40))
def test_matches_brute_force(seed):
    rng = random.Random(seed)
    n, m = rng.randint(1, 6), rng.randint(1, 6)
    edges = [
        (rng.randint(1, n), rng.randint(1, m)) for _ in range(rng.randint(0, 15))
    ]
    hk = HopcroftKarp(n, m)
    for u, v in edges:
        hk.add_edge(u, v)
    size = hk.matching()
    assert size == _brute_matching(n, edges)
    _check_consistent(hk, edges, size)


def test_long_chain_matches_fully():
    n = 3000
    hk = HopcroftKarp(n, n)
    edges = [(u, u) for u in range(1, n + 1)] + [(u + 1, u) for u in range(1, n)]
    for u, v in reversed(edges):
        hk.add_edge(u, v)
    size = hk.matching()
    assert size == n
    _check_consistent(hk, edges, size)


def test_out_of_range_edge_rejected():
    hk = HopcroftKarp(2, 2)
    with pytest.raises(ValueError):
        hk.add_edge(3, 1)
    with pytest.raises(ValueError):
        hk.add_edge(1, 0)