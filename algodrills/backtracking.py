"""Backtracking and recursion drills: N-queens, combination sums, permutations."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import permutations


def solve_n_queens(n: int) -> list[list[str]]:
    """Every placement of ``n`` non-attacking queens, as rows of '.' and 'Q'.

    Boards are listed in the order found by trying each row's columns left to right.
    """
    if n < 0:
        raise ValueError(f"board size must not be negative, got {n}")
    solutions: list[list[str]] = []
    placed: list[int] = []
    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> None:
        if row == n:
            solutions.append(["." * col + "Q" + "." * (n - col - 1) for col in placed])
            return
        for col in range(n):
            if col in columns or row - col in diagonals or row + col in anti_diagonals:
                continue
            placed.append(col)
            columns.add(col)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            place(row + 1)
            placed.pop()
            columns.discard(col)
            diagonals.discard(row - col)
            anti_diagonals.discard(row + col)

    place(0)
    return solutions


def combination_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """Combinations of ``nums`` (each usable any number of times) summing to ``target``.

    Values appear in the order of ``nums``; the values must be positive.
    """
    if any(value < 1 for value in nums):
        raise ValueError("combination_sum() needs positive values")
    result: list[list[int]] = []
    chosen: list[int] = []

    def explore(index: int, remaining: int) -> None:
        if index == len(nums):
            if remaining == 0:
                result.append(list(chosen))
            return
        value = nums[index]
        if value <= remaining:
            chosen.append(value)
            explore(index, remaining - value)
            chosen.pop()
        explore(index + 1, remaining)

    explore(0, target)
    return result


def combination_sum2(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Distinct combinations using each candidate at most once, summing to ``target``.

    Each combination is sorted and the list is in lexicographic order.
    """
    ordered = sorted(candidates)
    found: set[tuple[int, ...]] = set()
    chosen: list[int] = []

    def explore(index: int, remaining: int) -> None:
        if remaining == 0:
            found.add(tuple(sorted(chosen)))
            return
        if index == len(ordered):
            return
        value = ordered[index]
        if value <= remaining:
            chosen.append(value)
            explore(index + 1, remaining - value)
            chosen.pop()
        explore(index + 1, remaining)

    explore(0, target)
    return [list(combination) for combination in sorted(found)]


def permute(nums: Sequence[int]) -> list[list[int]]:
    """Every ordering of ``nums`` by position, in backtracking order."""
    return [list(p) for p in permutations(nums)]


def count_down(n: int) -> list[int]:
    """The numbers from ``n`` down to 1."""
    if n < 0:
        raise ValueError(f"count_down() needs a non-negative number, got {n}")
    return list(range(n, 0, -1))


def reverse_string(s: str) -> str:
    """The characters of ``s`` in reverse order."""
    return s[::-1]


def reverse_list(arr: list[int]) -> None:
    """Reverse ``arr`` in place by swapping mirrored positions."""
    last = len(arr) - 1
    for i in range(len(arr) // 2):
        arr[i], arr[last - i] = arr[last - i], arr[i]


def _reversed_copy(items: list[int]) -> list[int]:
    if len(items) <= 1:
        return list(items)
    middle = len(items) // 2
    return _reversed_copy(items[middle:]) + _reversed_copy(items[:middle])


def reverse_list_recursive(arr: list[int]) -> None:
    """Reverse ``arr`` in place by recursively reversing and swapping its halves."""
    arr[:] = _reversed_copy(arr)


def is_palindrome(s: str) -> bool:
    """True if ``s`` reads the same forwards and backwards."""
    return all(s[i] == s[-1 - i] for i in range(len(s) // 2))