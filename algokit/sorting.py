"""Merge sort and a command that sorts integers."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence

_SAMPLE = (1, 3, 5, 2, 7)


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """A new ascending list of the values, sorted by recursive merging."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def main(argv: Sequence[str] | None = None) -> int:
    """Print the given integers, or a built-in sample, in ascending order."""
    parser = argparse.ArgumentParser(
        prog="merge-sort", description="Sort integers with merge sort."
    )
    parser.add_argument("values", nargs="*", type=int, help="integers to sort")
    args = parser.parse_args(argv)
    values = args.values or list(_SAMPLE)
    print(" ".join(str(value) for value in merge_sort(values)))
    return 0