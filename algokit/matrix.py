"""Problems on rectangular grids of numbers and characters."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import chain

_DIRECTIONS = ((0, -1), (0, 1), (-1, 0), (1, 0))


def rook_captures(board: Sequence[Sequence[str]]) -> int:
    """Number of pawns ``p`` the rook ``R`` can take in one move.

    Bishops ``B`` block the rook's path.
    """
    position = next(
        (
            (r, c)
            for r, row in enumerate(board)
            for c, cell in enumerate(row)
            if cell == "R"
        ),
        None,
    )
    if position is None:
        raise ValueError("the board has no rook")
    start_row, start_col = position
    captures = 0
    for dr, dc in _DIRECTIONS:
        r, c = start_row + dr, start_col + dc
        while 0 <= r < len(board) and 0 <= c < len(board[r]):
            cell = board[r][c]
            if cell == "p":
                captures += 1
                break
            if cell == "B":
                break
            r, c = r + dr, c + dc
    return captures


def projection_area(grid: Sequence[Sequence[int]]) -> int:
    """Total area of the top, front and side projections of stacked cubes."""
    if not grid or not grid[0]:
        raise ValueError("the grid must not be empty")
    top = sum(1 for value in chain.from_iterable(grid) if value != 0)
    side = sum(max(row) for row in grid)
    front = sum(max(column) for column in zip(*grid))
    return top + side + front


def flip_and_invert(image: Sequence[Sequence[int]]) -> list[list[int]]:
    """Mirror each row of a binary image and invert every bit."""
    return [[bit ^ 1 for bit in reversed(row)] for row in image]


def lucky_numbers(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Values that are the minimum of their row and the maximum of their column."""
    lucky = []
    for i, row in enumerate(matrix):
        col = min(range(len(row)), key=row.__getitem__)
        top = max(range(len(matrix)), key=lambda k: matrix[k][col])
        if top == i:
            lucky.append(row[col])
    return lucky


def diagonal_sum(mat: Sequence[Sequence[int]]) -> int:
    """Sum of both diagonals of a square matrix, the centre counted once."""
    n = len(mat)
    total = 0
    for i, row in enumerate(mat):
        total += row[i]
        if i != n - 1 - i:
            total += row[n - 1 - i]
    return total


def reshape(mat: Sequence[Sequence[int]], r: int, c: int) -> list[list[int]]:
    """Refill the values row by row into an r x c matrix.

    When the sizes do not match, a copy of the original is returned.
    """
    flat = list(chain.from_iterable(mat))
    if r * c != len(flat) or (mat and r == len(mat)):
        return [list(row) for row in mat]
    return [flat[start:start + c] for start in range(0, len(flat), c)]


def maximum_wealth(accounts: Sequence[Sequence[int]]) -> int:
    """The largest total held by any one customer."""
    return max((sum(row) for row in accounts), default=0) if accounts else 0


def num_special(mat: Sequence[Sequence[int]]) -> int:
    """Number of ones that are alone in both their row and their column."""
    row_counts = [sum(1 for v in row if v == 1) for row in mat]
    col_counts = [sum(1 for v in column if v == 1) for column in zip(*mat)]
    return sum(
        1
        for i, row in enumerate(mat)
        for j, value in enumerate(row)
        if value == 1 and row_counts[i] == 1 and col_counts[j] == 1
    )


def is_toeplitz(matrix: Sequence[Sequence[int]]) -> bool:
    """Whether every top-left to bottom-right diagonal holds a single value."""
    return all(
        row[j] == above[j - 1]
        for above, row in zip(matrix, matrix[1:])
        for j in range(1, len(row))
    )


def count_negatives(mat: Sequence[Sequence[int]]) -> int:
    """Negative values in a matrix sorted non-increasingly along rows and columns."""
    if not mat or not mat[0]:
        return 0
    rows = len(mat)
    count = 0
    i, j = 0, len(mat[0]) - 1
    while i < rows and j >= 0:
        if mat[i][j] < 0:
            count += rows - i
            j -= 1
        else:
            i += 1
    return count