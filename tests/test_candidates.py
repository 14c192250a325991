"""Join step tests."""

from __future__ import annotations

import pytest

from apriori_candidates import generate_candidates, join_pair
from apriori_errors import InvariantError


def test_singletons_to_pairs() -> None:
    assert generate_candidates([(0,), (1,), (2,)]) == [(0, 1), (0, 2), (1, 2)]


def test_pairs_to_triples_deduplicated() -> None:
    # (0,1)+(0,2), (0,1)+(1,2) and (0,2)+(1,2) all give (0,1,2)
    assert generate_candidates([(0, 1), (0, 2), (1, 2)]) == [(0, 1, 2)]


def test_result_is_sorted_whatever_the_input_order() -> None:
    assert generate_candidates([(5, 3), (1, 3)]) == [(1, 3, 5)]


def test_pairs_too_far_apart_are_not_joined() -> None:
    assert generate_candidates([(0, 1), (2, 3)]) == []
    assert join_pair((0, 1), (2, 3)) is None


def test_no_all_subsets_prune() -> None:
    # (1, 2) is not in the level, the candidate is kept all the same
    assert generate_candidates([(0, 1), (0, 2)]) == [(0, 1, 2)]


def test_edge_sizes() -> None:
    assert generate_candidates([]) == []
    assert generate_candidates([(4,)]) == []
    assert generate_candidates([(0, 1, 2)]) == []


def test_duplicate_itemsets_are_a_logic_error() -> None:
    with pytest.raises(InvariantError):
        generate_candidates([(0, 1), (1, 0)])


def test_mixed_sizes_are_a_logic_error() -> None:
    with pytest.raises(InvariantError):
        generate_candidates([(0,), (0, 1)])


def test_candidate_sizes_are_uniform() -> None:
    level = [(0, 1, 2), (0, 1, 3), (0, 2, 3), (1, 2, 4), (2, 3, 4)]
    candidates = generate_candidates(level)
    assert candidates
    assert all(len(c) == 4 for c in candidates)
    assert len(set(candidates)) == len(candidates)
    assert all(list(c) == sorted(c) for c in candidates)
