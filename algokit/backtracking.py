"""Search problems solved by exhaustive backtracking."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import combinations, product

MOD = 1_000_000_007

_KEYPAD = ("", "", "abc", "def", "ghi", "jkl", "mno", "pqrs", "tuv", "wxyz")
_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def combine(n: int, k: int) -> list[list[int]]:
    """Every k-element combination of 1..n, in lexicographic order."""
    if k < 0:
        raise ValueError("k must not be negative")
    return [list(combo) for combo in combinations(range(1, n + 1), k)]


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Combinations of candidates, each usable any number of times, summing to target.

    Candidates are taken in the order given; every candidate must be positive.
    """
    values = list(candidates)
    if any(value <= 0 for value in values):
        raise ValueError("candidates must be positive")

    def search(start: int, remaining: int, chosen: tuple[int, ...]) -> Iterator[list[int]]:
        if remaining == 0:
            yield list(chosen)
            return
        if remaining < 0:
            return
        for i in range(start, len(values)):
            yield from search(i, remaining - values[i], chosen + (values[i],))

    return list(search(0, target, ()))


def combination_sum2(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Distinct combinations summing to target, each candidate used at most once."""
    values = sorted(candidates)

    def search(
        i: int, remaining: int, chosen: tuple[int, ...], previous_taken: bool
    ) -> Iterator[list[int]]:
        if remaining == 0:
            yield list(chosen)
            return
        if remaining < 0 or i >= len(values):
            return
        repeats_skipped = i > 0 and not previous_taken and values[i - 1] == values[i]
        if not repeats_skipped:
            yield from search(i + 1, remaining - values[i], chosen + (values[i],), True)
        yield from search(i + 1, remaining, chosen, False)

    return list(search(0, target, (), False))


def combination_sum3(k: int, n: int) -> list[list[int]]:
    """Every set of k distinct digits 1..9 summing to n, in lexicographic order."""
    if k < 0:
        return []
    return [list(combo) for combo in combinations(range(1, 10), k) if sum(combo) == n]


def flood_fill(
    image: Sequence[Sequence[int]], sr: int, sc: int, color: int
) -> list[list[int]]:
    """A copy of image with the 4-connected region around (sr, sc) recoloured."""
    grid = [list(row) for row in image]
    if not (0 <= sr < len(grid) and 0 <= sc < len(grid[sr])):
        raise IndexError("the starting cell lies outside the image")
    old = grid[sr][sc]
    if old == color:
        return grid
    pending = [(sr, sc)]
    while pending:
        r, c = pending.pop()
        if not (0 <= r < len(grid) and 0 <= c < len(grid[r])) or grid[r][c] != old:
            continue
        grid[r][c] = color
        pending.extend((r + dr, c + dc) for dr, dc in _STEPS)
    return grid


def letter_combinations(digits: str) -> list[str]:
    """Every string the digits could spell on a telephone keypad."""
    if not digits:
        return []
    if any(ch not in "0123456789" for ch in digits):
        raise ValueError(f"not a string of digits: {digits!r}")
    return ["".join(letters) for letters in product(*(_KEYPAD[int(d)] for d in digits))]


def max_unique_length(arr: Sequence[str]) -> int:
    """Longest concatenation of some of the strings with no character repeated."""
    words = [(len(word), frozenset(word)) for word in arr]

    def best(i: int, used: frozenset[str]) -> int:
        if i == len(words):
            return 0
        skipped = best(i + 1, used)
        length, chars = words[i]
        if len(chars) == length and not chars & used:
            return max(skipped, length + best(i + 1, used | chars))
        return skipped

    return best(0, frozenset())


def solve_n_queens(n: int) -> list[list[str]]:
    """Every placement of n non-attacking queens, as rows of 'Q' and '.'."""
    if n < 0:
        raise ValueError("n must not be negative")
    solutions: list[list[str]] = []
    placed: list[int] = []
    columns: set[int] = set()
    falling: set[int] = set()
    rising: set[int] = set()

    def place(row: int) -> None:
        if row == n:
            solutions.append(["." * col + "Q" + "." * (n - col - 1) for col in placed])
            return
        for col in range(n):
            if col in columns or row - col in falling or row + col in rising:
                continue
            placed.append(col)
            columns.add(col)
            falling.add(row - col)
            rising.add(row + col)
            place(row + 1)
            placed.pop()
            columns.discard(col)
            falling.discard(row - col)
            rising.discard(row + col)

    place(0)
    return solutions


def num_rolls_to_target(n: int, k: int, target: int) -> int:
    """Ways n dice with faces 1..k can total target, modulo 10**9 + 7."""
    if n < 0 or target < 0:
        return 0
    ways = [1] + [0] * target
    for _ in range(n):
        ways = [
            sum(ways[total - face] for face in range(1, k + 1) if total - face >= 0) % MOD
            for total in range(target + 1)
        ]
    return ways[target]


def can_partition_k_subsets(nums: Sequence[int], k: int) -> bool:
    """Whether the non-negative values split into k groups of equal sum."""
    if k <= 0:
        raise ValueError("k must be positive")
    if any(value < 0 for value in nums):
        raise ValueError("values must not be negative")
    total = sum(nums)
    if total % k:
        return False
    side = total // k
    values = sorted(nums, reverse=True)
    if values and values[0] > side:
        return False
    buckets = [0] * k

    def place(i: int) -> bool:
        if i == len(values):
            return True
        value = values[i]
        tried: set[int] = set()
        for b, load in enumerate(buckets):
            if load in tried or load + value > side:
                continue
            tried.add(load)
            buckets[b] += value
            if place(i + 1):
                return True
            buckets[b] -= value
        return False

    return place(0)


def _swap_permutations(values: list[int], start: int, distinct: bool) -> Iterator[list[int]]:
    if start == len(values):
        yield list(values)
        return
    seen: set[int] = set()
    for k in range(start, len(values)):
        if distinct:
            if values[k] in seen:
                continue
            seen.add(values[k])
        values[start], values[k] = values[k], values[start]
        yield from _swap_permutations(values, start + 1, distinct)
        values[start], values[k] = values[k], values[start]


def permute(nums: Sequence[int]) -> list[list[int]]:
    """Every ordering of the values, generated by successive swaps."""
    return list(_swap_permutations(list(nums), 0, distinct=False))


def permute_unique(nums: Sequence[int]) -> list[list[int]]:
    """Every distinct ordering of values that may repeat."""
    return list(_swap_permutations(list(nums), 0, distinct=True))


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Every subset of the values, each keeping the values' order."""
    values = list(nums)

    def search(i: int, chosen: tuple[int, ...]) -> Iterator[list[int]]:
        if i == len(values):
            yield list(chosen)
            return
        yield from search(i + 1, chosen)
        yield from search(i + 1, chosen + (values[i],))

    return list(search(0, ()))


def subsets_with_dup(nums: Sequence[int]) -> list[list[int]]:
    """Every distinct subset of values that may repeat, each in ascending order."""
    values = sorted(nums)

    def search(i: int, chosen: tuple[int, ...]) -> Iterator[list[int]]:
        if i == len(values):
            yield list(chosen)
            return
        yield from search(i + 1, chosen + (values[i],))
        j = i
        while j + 1 < len(values) and values[j] == values[j + 1]:
            j += 1
        yield from search(j + 1, chosen)

    return list(search(0, ()))


def exist(board: Sequence[Sequence[str]], word: str) -> bool:
    """Whether word can be traced through adjacent cells, each used at most once."""
    path: set[tuple[int, int]] = set()

    def search(r: int, c: int, i: int) -> bool:
        if i == len(word):
            return True
        if not (0 <= r < len(board) and 0 <= c < len(board[r])):
            return False
        if (r, c) in path or board[r][c] != word[i]:
            return False
        path.add((r, c))
        found = any(search(r + dr, c + dc, i + 1) for dr, dc in _STEPS)
        path.discard((r, c))
        return found

    return any(search(r, c, 0) for r, row in enumerate(board) for c in range(len(row)))