"""Problems on singly linked lists of integers."""

from __future__ import annotations

import functools
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode(val={self.val!r})"


def _values(head: ListNode | None) -> Iterator[int]:
    return iter(head) if head is not None else iter(())


def _length(head: ListNode | None) -> int:
    return sum(1 for _ in _values(head))


def _advance(node: ListNode | None, steps: int) -> ListNode | None:
    """Follow ``steps`` links from ``node``; the list may end exactly there."""
    for _ in range(steps):
        if node is None:
            raise ValueError("the list is too short")
        node = node.next
    return node


def build_list(values: Iterable[int]) -> ListNode | None:
    """Link the values into a list and return its head, or None when empty."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def binary_to_integer(head: ListNode | None) -> int:
    """Read the list's bits, most significant first, as an integer."""
    return functools.reduce(lambda acc, bit: acc * 2 + bit, _values(head), 0)


def has_cycle(head: ListNode | None) -> bool:
    """Whether following the links from ``head`` ever loops back."""
    if head is None:
        return False
    slow: ListNode | None = head
    fast = head.next
    while fast is not None and fast.next is not None:
        if slow is fast:
            return True
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
    return False


def delete_node(head: ListNode | None, pos: int) -> ListNode | None:
    """Unlink the node at index ``pos``; an index past the end changes nothing."""
    if head is None:
        return None
    if pos == 0:
        return head.next
    node = head
    for _ in range(pos - 1):
        if node.next is None:
            break
        node = node.next
    if node.next is not None:
        node.next = node.next.next
    return head


def find_intersection(
    first: ListNode | None, second: ListNode | None
) -> ListNode | None:
    """The first node shared by both lists, or None."""
    len_first, len_second = _length(first), _length(second)
    first = _advance(first, max(len_first - len_second, 0))
    second = _advance(second, max(len_second - len_first, 0))
    while first is not None and second is not None:
        if first is second:
            return first
        first, second = first.next, second.next
    return None


def kth_from_end(head: ListNode | None, k: int) -> ListNode | None:
    """The k-th node counted from the end, the last node being the first."""
    front = _advance(head, k)
    back = head
    while front is not None:
        front = front.next
        back = back.next  # type: ignore[union-attr]
    return back


def max_twin_sum(head: ListNode | None) -> int:
    """Largest sum of a node and its twin in a list of even length.

    The result is never below zero.
    """
    values = list(_values(head))
    if not values or len(values) % 2:
        raise ValueError("twin sums need a non-empty list of even length")
    half = len(values) // 2
    return max(0, max(a + b for a, b in zip(values[:half], reversed(values))))


def merge_sorted(first: ListNode | None, second: ListNode | None) -> ListNode | None:
    """Splice two ascending lists into one ascending list, reusing their nodes."""
    dummy = ListNode(-1)
    tail = dummy
    while first is not None and second is not None:
        if first.val < second.val:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return dummy.next


def merge_in_between(
    list1: ListNode, a: int, b: int, list2: ListNode | None
) -> ListNode:
    """Replace the nodes of ``list1`` at indexes a..b with the whole of ``list2``."""
    if a < 1 or b < a:
        raise ValueError("indexes must satisfy 1 <= a <= b")
    before = _advance(list1, a - 1)
    if before is None:
        raise ValueError("the list is too short")
    after = _advance(before, b - a + 2)
    before.next = list2
    tail = before
    while tail.next is not None:
        tail = tail.next
    tail.next = after
    return list1


def find_middle(head: ListNode | None) -> ListNode | None:
    """The middle node; for an even length, the second of the two middles."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
    return slow


def is_palindrome(head: ListNode | None) -> bool:
    """Whether the list reads the same in both directions."""
    values = list(_values(head))
    return values == values[::-1]


def remove_value(head: ListNode | None, k: int) -> ListNode | None:
    """Unlink every node holding ``k`` and return the new head."""
    dummy = ListNode(-1, head)
    node: ListNode | None = dummy
    while node is not None:
        while node.next is not None and node.next.val == k:
            node.next = node.next.next
        node = node.next
    return dummy.next


def remove_duplicates(head: ListNode | None) -> ListNode | None:
    """Keep only the first node holding each value."""
    seen: set[int] = set()
    previous: ListNode | None = None
    node = head
    while node is not None:
        if node.val in seen:
            previous.next = node.next  # type: ignore[union-attr]
        else:
            seen.add(node.val)
            previous = node
        node = node.next
    return head


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the n-th node from the end and return the new head."""
    if head is None or head.next is None:
        return None
    front = _advance(head, n)
    if front is None:
        return head.next
    back = head
    while front.next is not None:
        front = front.next
        back = back.next  # type: ignore[assignment]
    back.next = back.next.next  # type: ignore[union-attr]
    return head


def reverse(head: ListNode | None) -> ListNode | None:
    """Reverse the links in place and return the new head."""
    previous: ListNode | None = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def reorder(head: ListNode | None) -> None:
    """Relink the list in place as first, last, second, second-to-last, ..."""
    if head is None:
        return
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next
    second = reverse(slow.next)
    slow.next = None
    first = head.next
    tail = head
    while second is not None:
        tail.next = second
        second = second.next
        tail = tail.next
        if first is None:
            break
        tail.next = first
        tail = first
        first = first.next


def _spiral_cells(rows: int, cols: int) -> Iterator[tuple[int, int]]:
    top, bottom, left, right = 0, rows - 1, 0, cols - 1
    while top <= bottom and left <= right:
        for col in range(left, right + 1):
            yield top, col
        top += 1
        for row in range(top, bottom + 1):
            yield row, right
        right -= 1
        for col in range(right, left - 1, -1):
            yield bottom, col
        bottom -= 1
        for row in range(bottom, top - 1, -1):
            yield row, left
        left += 1


def spiral_matrix(m: int, n: int, head: ListNode | None) -> list[list[int]]:
    """Lay the list's values clockwise into an m x n grid; empty cells hold -1."""
    grid = [[-1] * n for _ in range(m)]
    for (row, col), value in zip(_spiral_cells(m, n), _values(head)):
        grid[row][col] = value
    return grid


def swap_pairs(head: ListNode | None) -> ListNode | None:
    """Swap every two adjacent nodes and return the new head."""
    dummy = ListNode(-1, head)
    node = dummy
    while node.next is not None and node.next.next is not None:
        first = node.next
        second = first.next
        first.next = second.next
        node.next = second
        second.next = first
        node = first
    return dummy.next