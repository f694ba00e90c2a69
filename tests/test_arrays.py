import math
from collections import Counter

import pytest

from algokit.arrays import (
    bag_of_tokens_score,
    contains_duplicate,
    fib,
    find_duplicate,
    longest_consecutive,
    majority_element,
    majority_elements,
    max_odd_binary,
    max_profit,
    max_profit_multiple,
    max_satisfaction,
    merge_intervals,
    merge_sorted_arrays,
    min_common,
    move_zeroes,
    move_zeros_left,
    next_greater,
    pivot_index,
    product_except_self,
    rearrange_by_sign,
    remove_duplicates,
    remove_element,
    single_number,
    sort_colors,
    sorted_squares,
)


def test_max_profit_example():
    assert max_profit([7, 1, 5, 3, 6, 4]) == 5


def test_max_profit_falling_prices_matches_single_day():
    assert max_profit([9, 7, 4, 1]) == max_profit([9])


def test_max_profit_empty_raises():
    with pytest.raises(ValueError):
        max_profit([])


def test_max_profit_multiple_rising():
    prices = [1, 2, 3, 4, 5]
    assert max_profit_multiple(prices) == prices[-1] - prices[0]


def test_max_profit_multiple_at_least_single():
    prices = [7, 1, 5, 3, 6, 4, 8, 2]
    assert max_profit_multiple(prices) >= max_profit(prices)


def test_contains_duplicate():
    assert contains_duplicate([1, 2, 3, 1]) is True
    assert contains_duplicate([1, 2, 3, 4]) is False


def test_find_duplicate():
    assert find_duplicate([1, 2, 3, 2]) == 2
    assert find_duplicate([4, 1, 3, 2, 4]) == 4


def test_fib_base_cases():
    assert fib(0) == 0
    assert fib(1) == 1


@pytest.mark.parametrize("n", range(2, 25))
def test_fib_recurrence(n):
    assert fib(n) == fib(n - 1) + fib(n - 2)


def test_fib_negative_raises():
    with pytest.raises(ValueError):
        fib(-1)


def test_pivot_index_example():
    assert pivot_index([1, 7, 3, 6, 5, 6]) == 3


@pytest.mark.parametrize("nums", [[2, 1, -1], [-1, 1, 0], [4], [1, 2, 3, 0, 6]])
def test_pivot_index_balances_sides(nums):
    i = pivot_index(nums)
    assert 0 <= i < len(nums)
    assert sum(nums[:i]) == sum(nums[i + 1:])


def test_pivot_index_none():
    nums = [1, 2, 3]
    assert pivot_index(nums) not in range(len(nums))


def test_longest_consecutive():
    assert longest_consecutive([100, 4, 200, 1, 3, 2]) == 4
    assert longest_consecutive([0, 1, 1, 2]) == 3


def test_longest_consecutive_empty():
    assert not longest_consecutive([])


def test_majority_element():
    assert majority_element([2, 2, 1, 1, 1, 2, 2]) == 2
    assert majority_element([1, 2, 3]) is None


def test_majority_elements():
    assert majority_elements([3, 2, 3]) == [3]
    assert majority_elements([1, 2]) == [1, 2]
    assert majority_elements([1, 2, 3]) == []


def test_merge_sorted_arrays_is_sorted_union():
    first, second = [1, 3, 5, 7], [2, 3, 8]
    merged = merge_sorted_arrays(first, second)
    assert merged == sorted(merged)
    assert Counter(merged) == Counter(first) + Counter(second)


def test_merge_intervals_example():
    assert merge_intervals([[1, 3], [2, 6], [8, 10], [15, 18]]) == [
        [1, 6],
        [8, 10],
        [15, 18],
    ]


def test_merge_intervals_unsorted_touching():
    assert merge_intervals([[4, 5], [1, 4]]) == [[1, 5]]


def test_merge_intervals_empty_raises():
    with pytest.raises(ValueError):
        merge_intervals([])


def test_min_common():
    assert min_common([1, 2, 3], [2, 4]) == 2
    assert min_common([1, 3], [2, 4]) is None


def test_max_odd_binary_shape():
    for s in ["010", "0101", "1", "1100", "111000"]:
        result = max_odd_binary(s)
        assert sorted(result) == sorted(s)
        assert result.endswith("1")
        body = result[:-1]
        assert body == "".join(sorted(body, reverse=True))


def test_move_zeroes():
    assert move_zeroes([0, 1, 0, 3, 12]) == [1, 3, 12, 0, 0]


def test_move_zeros_left():
    assert move_zeros_left([1, 0, 2, 0]) == [0, 0, 1, 2]


def test_next_greater():
    assert next_greater([4, 1, 2], [1, 3, 4, 2]) == [-1, 3, -1]
    assert next_greater([2, 4], [1, 2, 3, 4]) == [3, -1]


def test_product_except_self_without_zero():
    nums = [1, 2, 3, 4, -2]
    total = math.prod(nums)
    for value, product in zip(nums, product_except_self(nums)):
        assert value * product == total


def test_product_except_self_one_zero():
    assert product_except_self([1, 0, 3]) == [0, 3, 0]


def test_product_except_self_two_zeros():
    assert product_except_self([0, 0, 2]) == [0, 0, 0]


def test_rearrange_by_sign():
    assert rearrange_by_sign([3, 1, -2, -5, 2, -4]) == [3, -2, 1, -5, 2, -4]


def test_rearrange_by_sign_unbalanced_raises():
    with pytest.raises(ValueError):
        rearrange_by_sign([1, 2, 3])


def test_max_satisfaction_example():
    assert max_satisfaction([-1, -8, 0, 5, -9]) == 14


def test_max_satisfaction_all_negative():
    assert max_satisfaction([-1, -4, -5]) == 0


def test_max_satisfaction_not_below_plain_sum():
    dishes = [4, 3, 2]
    assert max_satisfaction(dishes) >= sum(dishes)


def test_remove_duplicates():
    assert remove_duplicates([0, 0, 1, 1, 1, 2, 2, 3, 3, 4]) == [0, 1, 2, 3, 4]


def test_remove_element():
    assert remove_element([3, 2, 2, 3], 3) == [2, 2]


def test_single_number():
    assert single_number([4, 1, 2, 1, 2]) == 4


def test_sort_colors():
    assert sort_colors([2, 0, 2, 1, 1, 0]) == [0, 0, 1, 1, 2, 2]


def test_sort_colors_rejects_unknown():
    with pytest.raises(ValueError):
        sort_colors([0, 3, 1])


def test_sorted_squares_invariants():
    nums = [-7, -4, -1, 0, 3, 10]
    result = sorted_squares(nums)
    assert result == sorted(result)
    assert sorted(math.isqrt(v) for v in result) == sorted(abs(x) for x in nums)


def test_bag_of_tokens_enough_power_plays_all():
    tokens = [100, 200, 300]
    assert bag_of_tokens_score(tokens, sum(tokens)) == len(tokens)


def test_bag_of_tokens_too_weak():
    assert not bag_of_tokens_score([100, 200], 50)
    assert not bag_of_tokens_score([], 50)


def test_bag_of_tokens_bounded_by_count():
    tokens = [100, 200, 300, 400]
    assert 0 < bag_of_tokens_score(tokens, 200) <= len(tokens)