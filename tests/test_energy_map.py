import pytest

from qdynamics.energy_map import next_permutation
from qdynamics.numerics import ck_n


def _walk(places, max_num):
    current = [max_num] + [0] * (places - 1)
    seen = [current]
    while current[-1] != max_num:
        current = next_permutation(current, max_num)
        seen.append(current)
    return seen


def test_wraps_from_last_to_first():
    assert next_permutation([0, 0, 2], 2) == [2, 0, 0]


@pytest.mark.parametrize("places,max_num", [(2, 3), (3, 2), (3, 3), (4, 2)])
def test_walk_visits_every_distribution_once(places, max_num):
    seen = _walk(places, max_num)
    assert all(sum(v) == max_num for v in seen)
    assert all(min(v) >= 0 for v in seen)
    assert len({tuple(v) for v in seen}) == len(seen)
    assert len(seen) == ck_n(max_num, places + max_num - 1)


def test_input_is_not_modified():
    start = [2, 0, 0]
    result = next_permutation(start, 2)
    assert start == [2, 0, 0]
    assert sum(result) == 2


def test_walk_returns_to_start_after_cycle():
    seen = _walk(3, 2)
    assert next_permutation(seen[-1], 2) == seen[0]


def test_empty_distribution_rejected():
    with pytest.raises(ValueError):
        next_permutation([], 1)


def test_distribution_without_next_rejected():
    with pytest.raises(ValueError):
        next_permutation([0, 0, 1], 2)