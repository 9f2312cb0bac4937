"""String drills: counting, reversing, binary conversion and substring search."""

from __future__ import annotations

from collections import Counter
from itertools import permutations


def longest_common_subsequence(text1: str, text2: str) -> int:
    """Number of characters the two strings share, counted with multiplicity."""
    if not text1 or not text2:
        return 0
    return sum((Counter(text1) & Counter(text2)).values())


def character_counts(s: str) -> Counter[str]:
    """How often each character occurs in ``s``."""
    return Counter(s)


def reverse_words(s: str) -> str:
    """Reverse each space-separated word while keeping the words in place."""
    return " ".join(word[::-1] for word in s.split(" "))


def to_binary(n: int) -> str:
    """Binary digits of a positive integer."""
    if n < 1:
        raise ValueError(f"to_binary() needs a positive integer, got {n}")
    digits = []
    while n != 1:
        digits.append("1" if n % 2 == 1 else "0")
        n //= 2
    digits.append("1")
    return "".join(reversed(digits))


def from_binary(s: str) -> int:
    """Value of a string of binary digits; any character other than '1' counts as 0."""
    value = 0
    for ch in s:
        value = value * 2 + (ch == "1")
    return value


def string_permutations(s: str) -> list[str]:
    """Every ordering of the characters of ``s``, by position, in backtracking order."""
    return ["".join(p) for p in permutations(s)]


def check_inclusion_brute_force(s1: str, s2: str) -> bool:
    """True if some permutation of ``s1`` occurs in ``s2``, trying every permutation."""
    return any(candidate in s2 for candidate in string_permutations(s1))


def check_inclusion(s1: str, s2: str) -> bool:
    """True if some permutation of ``s1`` occurs in ``s2``, comparing window counts."""
    width = len(s1)
    if width > len(s2):
        return False
    wanted = Counter(s1)
    return any(
        Counter(s2[start:start + width]) == wanted
        for start in range(len(s2) - width + 1)
    )


def contains_substring_scan(needle: str, haystack: str) -> bool:
    """True if ``needle`` occurs in ``haystack``, comparing every window."""
    width = len(needle)
    if width > len(haystack):
        return False
    return any(
        haystack[start:start + width] == needle
        for start in range(len(haystack) - width + 1)
    )


def contains_substring(needle: str, haystack: str) -> bool:
    """True if ``needle`` occurs in ``haystack``."""
    return needle in haystack