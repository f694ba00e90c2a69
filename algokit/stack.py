"""Stack-based problems and a stack kept in a single queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


class QueueStack:
    """A last-in, first-out stack whose front of queue is the top."""

    def __init__(self) -> None:
        self._queue: deque[int] = deque()

    def __len__(self) -> int:
        return len(self._queue)

    def is_empty(self) -> bool:
        """Whether the stack holds no elements."""
        return not self._queue

    def push(self, element: int) -> None:
        """Put ``element`` on top."""
        self._queue.appendleft(element)

    def pop(self) -> int:
        """Remove and return the top element."""
        if not self._queue:
            raise IndexError("pop from an empty stack")
        return self._queue.popleft()

    def top(self) -> int:
        """Return the top element without removing it."""
        if not self._queue:
            raise IndexError("top of an empty stack")
        return self._queue[0]


def visible_people(heights: Sequence[int]) -> list[int]:
    """For each person in a queue, how many people to their right they can see."""
    taller: list[int] = []
    counts: list[int] = []
    for height in reversed(heights):
        seen = 0
        while taller and taller[-1] <= height:
            taller.pop()
            seen += 1
        counts.append(seen + 1 if taller else seen)
        taller.append(height)
    counts.reverse()
    return counts