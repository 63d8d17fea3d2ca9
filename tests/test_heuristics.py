import math

import pytest

from gridsearch import heuristics
from gridsearch.heuristics import euclidean, euclidean_int, get_heuristic, list_heuristics, manhattan


def test_manhattan():
    assert manhattan((0, 0), (2, 3)) == 5
    assert manhattan((4, 1), (1, 4)) == 6
    assert manhattan((2, 2), (2, 2)) == 0


def test_euclidean():
    assert euclidean((0, 0), (3, 4)) == 5.0
    assert math.isclose(euclidean((0, 0), (1, 1)), math.sqrt(2))


def test_euclidean_int_truncates():
    assert euclidean_int((0, 0), (1, 1)) == 1
    assert euclidean_int((0, 0), (2, 2)) == 2   # 2.83 -> 2
    assert isinstance(euclidean_int((0, 0), (1, 2)), int)


def test_euclidean_never_exceeds_manhattan():
    for a in [(0, 0), (3, 7), (5, 2)]:
        for b in [(0, 0), (9, 9), (1, 4)]:
            assert euclidean_int(a, b) <= euclidean(a, b) <= manhattan(a, b)


def test_registry_lookup():
    assert get_heuristic("manhattan") is manhattan
    assert list_heuristics() == ["euclidean", "euclidean_int", "manhattan"]
    assert set(heuristics.LABELS) == set(list_heuristics())


def test_unknown_heuristic_raises():
    with pytest.raises(ValueError, match="Available"):
        get_heuristic("chebyshev")
