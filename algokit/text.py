"""Small string problems."""

from __future__ import annotations

import string
from collections import Counter

_VOWELS = frozenset("aeiouAEIOU")
_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_ALNUM = frozenset(string.ascii_letters + string.digits)


def count_vowels(s: str) -> int:
    """Number of ASCII vowels in ``s``, either case."""
    return sum(1 for ch in s if ch in _VOWELS)


def halves_are_alike(s: str) -> bool:
    """Whether both halves of ``s`` hold the same number of vowels."""
    middle = len(s) // 2
    return count_vowels(s[:middle]) == count_vowels(s[middle:])


def num_jewels_in_stones(jewels: str, stones: str) -> int:
    """How many stones are jewels, counting each jewel letter as often as listed."""
    kinds = Counter(jewels)
    return sum(kinds[stone] for stone in stones)


def reverse_string(s: str) -> str:
    """``s`` with its characters in reverse order."""
    return s[::-1]


def sort_sentence(s: str) -> str:
    """Rebuild a sentence whose words each end with their 1-based position digit."""
    slots: dict[int, str] = {}
    for word in s.split():
        if not word[-1].isdigit():
            raise ValueError(f"word {word!r} has no position digit")
        slots[int(word[-1])] = word[:-1]
    words = [slots[key] for key in sorted(slots) if slots[key]]
    if not words:
        raise ValueError("the sentence holds no words")
    return " ".join(words)


def to_lower_case(s: str) -> str:
    """``s`` with ASCII capitals turned into lower case."""
    return s.translate(_LOWER)


def is_palindrome(s: str) -> bool:
    """Whether the ASCII letters and digits of ``s`` read the same both ways, ignoring case."""
    cleaned = to_lower_case("".join(ch for ch in s if ch in _ALNUM))
    return cleaned == cleaned[::-1]