"""Finding tuples of numbers that add up to a target."""

from __future__ import annotations

from collections.abc import Iterable


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """Return every distinct triple that sums to zero, in ascending order.

    Each triple is itself sorted ascending.
    """
    values = sorted(nums)
    found: set[tuple[int, int, int]] = set()
    for i, first in enumerate(values):
        lo, hi = i + 1, len(values) - 1
        while lo < hi:
            pair = values[lo] + values[hi]
            if pair == -first:
                found.add((first, values[lo], values[hi]))
                lo += 1
                hi -= 1
            elif pair > -first:
                hi -= 1
            else:
                lo += 1
    return [list(triple) for triple in sorted(found)]


def four_sum(nums: Iterable[int], target: int) -> list[list[int]]:
    """Return every distinct quadruple that sums to ``target``, in ascending order."""
    values = sorted(nums)
    count = len(values)
    found: set[tuple[int, int, int, int]] = set()
    for a in range(count):
        for b in range(a + 1, count):
            remaining = target - (values[a] + values[b])
            lo, hi = b + 1, count - 1
            while lo < hi:
                pair = values[lo] + values[hi]
                if pair == remaining:
                    found.add((values[a], values[b], values[lo], values[hi]))
                    lo += 1
                    hi -= 1
                elif pair > remaining:
                    hi -= 1
                else:
                    lo += 1
    return [list(quad) for quad in sorted(found)]


def two_sum(arr: Iterable[int], target: int) -> list[tuple[int, int]]:
    """Return the pairs found by a two-pointer sweep over the sorted values.

    Pairs are reported smallest first; an empty list means no pair sums to
    ``target``.
    """
    values = sorted(arr)
    pairs: list[tuple[int, int]] = []
    lo, hi = 0, len(values) - 1
    while lo < hi:
        total = values[lo] + values[hi]
        if total == target:
            pairs.append((values[lo], values[hi]))
            lo += 1
            hi -= 1
        elif total < target:
            lo += 1
        else:
            hi -= 1
    return pairs