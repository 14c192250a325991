"""Support counting tests."""

from __future__ import annotations

import pytest

from apriori_miner import MiningSession
from apriori_sinks import CollectingSink
from apriori_support import (
    count_support,
    count_support_joblib,
    filter_frequent,
    is_frequent,
    scan_level,
)


def test_count_support(scenario_store) -> None:
    support = count_support([(0,), (1,), (2,), (0, 1), (0, 1, 2)], scenario_store)
    assert support == {(0,): 3, (1,): 3, (2,): 3, (0, 1): 2, (0, 1, 2): 1}
    assert list(support) == [(0,), (1,), (2,), (0, 1), (0, 1, 2)]


def test_count_support_joblib_matches_sequential(basket_store) -> None:
    candidates = [(i, j) for i in range(6) for j in range(i + 1, 6)]
    expected = count_support(candidates, basket_store)
    assert count_support_joblib(candidates, basket_store, n_jobs=2, chunk_size=4) == expected


def test_is_frequent_inclusive() -> None:
    assert is_frequent(2, 4, 0.5)
    assert not is_frequent(1, 4, 0.5)
    assert is_frequent(0, 4, 0.0)
    assert not is_frequent(0, 0, 0.0)


def test_filter_frequent() -> None:
    support = {(0,): 3, (1,): 1, (2,): 2}
    assert filter_frequent(support, 0.5, 4) == {(0,): 3, (2,): 2}
    assert filter_frequent(support, 1.0, 4) == {}


@pytest.mark.parametrize("n_jobs", [1, 2])
def test_scan_level_reports_frequent_only(scenario_store, n_jobs: int) -> None:
    sink = CollectingSink()
    session = MiningSession(scenario_store, 0.5, sink, n_jobs=n_jobs, chunk_size=1)
    frequent = scan_level(session, [(0, 1), (0, 2), (1, 2)])
    assert frequent == {(0, 1): 2, (0, 2): 2, (1, 2): 2}
    assert sink.results == [((0, 1), 2), ((0, 2), 2), ((1, 2), 2)]

    sink = CollectingSink()
    session = MiningSession(scenario_store, 0.5, sink, n_jobs=n_jobs)
    assert scan_level(session, [(0, 1, 2)]) == {}
    assert sink.results == []


def test_scan_level_forwards_counts(scenario_store) -> None:
    sink = CollectingSink()
    session = MiningSession(scenario_store, 0.75, sink)
    scan_level(session, [(0,), (1,), (2,), (0, 1)])
    assert sink.results == [((0,), 3), ((1,), 3), ((2,), 3)]
