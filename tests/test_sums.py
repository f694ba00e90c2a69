from collections import Counter

import pytest

from algokit.sums import four_sum, three_sum, two_sum


def test_three_sum_example():
    assert three_sum([-1, 0, 1, 2, -1, -4]) == [[-1, -1, 2], [-1, 0, 1]]


def test_three_sum_no_solution():
    assert three_sum([0, 1, 1]) == []


def test_three_sum_all_zero_reported_once():
    assert three_sum([0, 0, 0, 0]) == [[0, 0, 0]]


@pytest.mark.parametrize(
    "nums",
    [[-4, -2, -2, 0, 1, 2, 3, 4, 6], [5, -5, 0, 10, -10, 3, -3, 2, -1]],
)
def test_three_sum_invariants(nums):
    result = three_sum(nums)
    assert result
    assert result == sorted(result)
    assert len({tuple(t) for t in result}) == len(result)
    available = Counter(nums)
    for triple in result:
        assert sum(triple) == 0
        assert triple == sorted(triple)
        assert not Counter(triple) - available


def test_three_sum_does_not_modify_input():
    nums = [3, -1, -2, 0]
    three_sum(nums)
    assert nums == [3, -1, -2, 0]


def test_four_sum_example():
    assert four_sum([1, 0, -1, 0, -2, 2], 0) == [
        [-2, -1, 1, 2],
        [-2, 0, 0, 2],
        [-1, 0, 0, 1],
    ]


def test_four_sum_repeated_values():
    assert four_sum([2, 2, 2, 2, 2], 8) == [[2, 2, 2, 2]]


@pytest.mark.parametrize("target", [0, 3, -2])
def test_four_sum_invariants(target):
    nums = [4, -3, 1, 0, -1, 2, 3, -2, 5]
    result = four_sum(nums, target)
    assert result == sorted(result)
    available = Counter(nums)
    for quad in result:
        assert sum(quad) == target
        assert quad == sorted(quad)
        assert not Counter(quad) - available


def test_two_sum_single_pair():
    assert two_sum([2, 7, 11, 15], 9) == [(2, 7)]


def test_two_sum_multiple_pairs_in_order():
    assert two_sum([5, 1, 4, 2, 3], 6) == [(1, 5), (2, 4)]


def test_two_sum_none_found():
    assert two_sum([1, 2, 3], 100) == []


def test_two_sum_pairs_add_up():
    nums = [8, -3, 5, 0, 2, 6, -1, 9]
    for left, right in two_sum(nums, 5):
        assert left + right == 5
        assert left <= right