"""Classic problems on lists of integers."""

from __future__ import annotations

import functools
import heapq
import math
import operator
from collections import Counter, deque
from collections.abc import Iterable, Sequence
from itertools import groupby, pairwise

_END = object()


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from a single buy followed by a single sell."""
    if not prices:
        raise ValueError("prices must not be empty")
    best = 0
    lowest = prices[0]
    for price in prices[1:]:
        best = max(best, price - lowest)
        lowest = min(lowest, price)
    return best


def max_profit_multiple(prices: Iterable[int]) -> int:
    """Best profit when any number of buy/sell transactions is allowed."""
    return sum(max(today - yesterday, 0) for yesterday, today in pairwise(prices))


def contains_duplicate(nums: Sequence[int]) -> bool:
    """Whether any value occurs more than once."""
    return len(set(nums)) != len(nums)


def find_duplicate(arr: Sequence[int]) -> int:
    """The repeated value in a list holding 1..n-1 plus one duplicate."""
    n = len(arr) - 1
    return sum(arr) - n * (n + 1) // 2


def fib(n: int) -> int:
    """The n-th Fibonacci number, with fib(0) == 0 and fib(1) == 1."""
    if n < 0:
        raise ValueError("n must not be negative")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def pivot_index(nums: Sequence[int]) -> int:
    """Leftmost index whose left and right sums are equal, or -1."""
    total = sum(nums)
    left = 0
    for i, value in enumerate(nums):
        if left == total - left - value:
            return i
        left += value
    return -1


def longest_consecutive(arr: Iterable[int]) -> int:
    """Length of the longest run of consecutive integers among the values."""
    present = set(arr)
    best = 1 if present else 0
    for value in present:
        if value - 1 in present:
            continue
        length = 1
        while value + length in present:
            length += 1
        best = max(best, length)
    return best


def majority_element(arr: Sequence[int]) -> int | None:
    """The value occurring more than len/2 times, or None."""
    for value, count in Counter(arr).items():
        if count > len(arr) // 2:
            return value
    return None


def majority_elements(arr: Sequence[int]) -> list[int]:
    """Values occurring more than len/3 times, in order of first appearance."""
    return [value for value, count in Counter(arr).items() if count > len(arr) // 3]


def merge_sorted_arrays(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge two ascending sequences into one ascending list."""
    return list(heapq.merge(first, second))


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping [start, end] intervals after ordering them by start."""
    ordered = sorted(intervals, key=operator.itemgetter(0))
    if not ordered:
        raise ValueError("no intervals to merge")
    start, end = ordered[0]
    merged: list[list[int]] = []
    for lo, hi in ordered[1:]:
        if hi < start:
            merged.append([lo, hi])
        elif lo <= end:
            start = min(lo, start)
            end = max(hi, end)
        else:
            merged.append([start, end])
            start, end = lo, hi
    merged.append([start, end])
    return merged


def min_common(nums1: Iterable[int], nums2: Iterable[int]) -> int | None:
    """Smallest value shared by two ascending sequences, or None."""
    first, second = iter(nums1), iter(nums2)
    a, b = next(first, _END), next(second, _END)
    while a is not _END and b is not _END:
        if a == b:
            return a
        if a < b:
            a = next(first, _END)
        else:
            b = next(second, _END)
    return None


def max_odd_binary(s: str) -> str:
    """Rearrange the bits of ``s`` into the largest odd binary number."""
    zeros = s.count("0")
    ones = len(s) - zeros
    return "1" * max(ones - 1, 0) + "0" * zeros + "1"


def move_zeroes(nums: Iterable[int]) -> list[int]:
    """Non-zero values in their order, followed by all the zeros."""
    values = list(nums)
    non_zero = [x for x in values if x != 0]
    return non_zero + [0] * (len(values) - len(non_zero))


def move_zeros_left(nums: Iterable[int]) -> list[int]:
    """All the zeros, followed by the non-zero values in their order."""
    values = list(nums)
    non_zero = [x for x in values if x != 0]
    return [0] * (len(values) - len(non_zero)) + non_zero


def next_greater(nums1: Iterable[int], nums2: Sequence[int]) -> list[int]:
    """For each value of nums1, the first greater value after it in nums2, or -1."""
    result = []
    for wanted in nums1:
        location = None
        greater = -1
        for j, value in enumerate(nums2):
            if value == wanted:
                location = j
            if location is not None and j > location and value > wanted:
                greater = value
                break
        result.append(greater)
    return result


def product_except_self(nums: Sequence[int]) -> list[int]:
    """For each position, the product of every other value."""
    zeros = sum(1 for x in nums if x == 0)
    product = math.prod(x for x in nums if x != 0)
    if zeros > 1:
        return [0] * len(nums)
    if zeros == 1:
        return [product if x == 0 else 0 for x in nums]
    return [product // x for x in nums]


def rearrange_by_sign(nums: Sequence[int]) -> list[int]:
    """Alternate non-negative and non-positive values, keeping each kind's order.

    Raises ValueError when one kind runs out before the result is full.
    """
    positives = (x for x in nums if x >= 0)
    negatives = (x for x in nums if x <= 0)
    result: list[int] = []
    try:
        while len(result) < len(nums):
            result.append(next(positives))
            if len(result) == len(nums):
                break
            result.append(next(negatives))
    except StopIteration:
        raise ValueError("not enough values of each sign to alternate") from None
    return result


def max_satisfaction(satisfaction: Iterable[int]) -> int:
    """Largest like-time coefficient sum from cooking a subset of dishes."""
    ordered = sorted(satisfaction)
    if not ordered or ordered[-1] < 0:
        return 0
    kept: list[int] = []
    suffix = 0
    for value in reversed(ordered):
        suffix += value
        if suffix < 0:
            break
        kept.append(value)
    return sum(step * value for step, value in enumerate(reversed(kept), start=1))


def remove_duplicates(nums: Iterable[int]) -> list[int]:
    """Collapse runs of equal values in a sorted sequence."""
    return [value for value, _ in groupby(nums)]


def remove_element(nums: Iterable[int], val: int) -> list[int]:
    """The values that differ from ``val``."""
    return [x for x in nums if x != val]


def single_number(nums: Iterable[int]) -> int:
    """The one value that occurs once when all others occur twice."""
    return functools.reduce(operator.xor, nums, 0)


def sort_colors(nums: Iterable[int]) -> list[int]:
    """Order a sequence of colour codes 0, 1 and 2."""
    counts = Counter(nums)
    unknown = set(counts) - {0, 1, 2}
    if unknown:
        raise ValueError(f"colour codes must be 0, 1 or 2, got {sorted(unknown)}")
    return [0] * counts[0] + [1] * counts[1] + [2] * counts[2]


def sorted_squares(nums: Iterable[int]) -> list[int]:
    """Squares of an ascending sequence, in ascending order."""
    pending = deque(nums)
    squares: list[int] = []
    while pending:
        if abs(pending[0]) > abs(pending[-1]):
            value = pending.popleft()
        else:
            value = pending.pop()
        squares.append(value * value)
    squares.reverse()
    return squares


def bag_of_tokens_score(tokens: Iterable[int], power: int) -> int:
    """Best score from playing tokens face up (cost power) or face down (cost score)."""
    remaining = deque(sorted(tokens))
    score = best = 0
    while remaining:
        if remaining[0] <= power:
            power -= remaining.popleft()
            score += 1
            best = max(best, score)
        elif score > 0:
            power += remaining.pop()
            score -= 1
        else:
            break
    return best