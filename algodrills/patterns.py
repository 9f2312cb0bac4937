"""Text patterns of stars and digits, one row per line."""

from __future__ import annotations

from collections.abc import Iterable


def _render(rows: Iterable[str]) -> str:
    return "".join(f"{row}\n" for row in rows)


def square(n: int) -> str:
    """An ``n`` by ``n`` square of stars."""
    return _render("*" * n for _ in range(n))


def right_angle(n: int) -> str:
    """Rows of 1 to ``n`` stars."""
    return _render("*" * i for i in range(1, n + 1))


def right_angle_with_numbers(n: int) -> str:
    """Row ``i`` holds the number ``i`` written ``i`` times, for ``i`` from 1 to ``n``."""
    return _render(str(i) * i for i in range(1, n + 1))


def right_angle_with_incremental_numbers(n: int) -> str:
    """Row ``i`` holds the numbers 1 to ``i`` run together, for ``i`` from 1 to ``n``."""
    return _render("".join(map(str, range(1, i + 1))) for i in range(1, n + 1))


def reverse_right_angle(n: int) -> str:
    """Rows of ``n - 1``, ``n - 3``, ... stars, down to one or zero stars."""
    return _render("*" * i for i in range(n - 1, -1, -2))


def reverse_right_angle_with_incremental_numbers(n: int) -> str:
    """Row ``i`` holds the numbers 1 to ``i`` run together, for ``i`` from ``n`` down to 1."""
    return _render("".join(map(str, range(1, i + 1))) for i in range(n, 0, -1))