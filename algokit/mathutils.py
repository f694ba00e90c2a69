"""Number-theory helpers: primes and powers."""

from __future__ import annotations

import math
from collections.abc import Sequence


def count_primes(n: int) -> int:
    """Number of primes strictly below ``n``."""
    if n < 2:
        return 0
    sieve = bytearray([1]) * n
    sieve[0] = sieve[1] = 0
    for i in range(2, math.isqrt(n) + 1):
        if sieve[i]:
            sieve[i * i::i] = bytes(len(range(i * i, n, i)))
    return sum(sieve)


def is_prime(n: int) -> bool:
    """Whether ``n`` is a prime number."""
    if n < 2:
        return False
    return all(n % d for d in range(2, math.isqrt(n) + 1))


def diagonal_prime(nums: Sequence[Sequence[int]]) -> int:
    """The largest prime on either diagonal of a square matrix, or 0."""
    n = len(nums)
    candidates = (value for i, row in enumerate(nums) for value in (row[i], row[n - 1 - i]))
    return max((value for value in candidates if is_prime(value)), default=0)


def power(x: int, n: int) -> int:
    """``x`` raised to the non-negative integer power ``n``."""
    if n < 0:
        raise ValueError("the exponent must not be negative")
    return x**n


def is_power_of_two(n: int) -> bool:
    """Whether ``n`` is a positive power of two, 1 included."""
    return n > 0 and n & (n - 1) == 0