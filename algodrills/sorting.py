"""Merge sort and inversion counting."""

from __future__ import annotations

from collections.abc import Sequence


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    l = r = 0
    while l < len(left) and r < len(right):
        if left[l] < right[r]:
            merged.append(left[l])
            l += 1
        else:
            merged.append(right[r])
            r += 1
    merged.extend(left[l:])
    merged.extend(right[r:])
    return merged


def merge_sort(arr: Sequence[int]) -> list[int]:
    """A new ascending list holding the values of ``arr``."""
    if len(arr) <= 1:
        return list(arr)
    mid = (len(arr) - 1) // 2 + 1
    return _merge(merge_sort(arr[:mid]), merge_sort(arr[mid:]))


def _sort_and_count(items: list[int]) -> tuple[list[int], int]:
    if len(items) <= 1:
        return items, 0
    mid = (len(items) - 1) // 2 + 1
    left, left_count = _sort_and_count(items[:mid])
    right, right_count = _sort_and_count(items[mid:])
    merged: list[int] = []
    count = left_count + right_count
    l = r = 0
    while l < len(left) and r < len(right):
        if left[l] <= right[r]:
            merged.append(left[l])
            l += 1
        else:
            count += len(left) - l
            merged.append(right[r])
            r += 1
    merged.extend(left[l:])
    merged.extend(right[r:])
    return merged, count


def count_inversions(arr: Sequence[int]) -> int:
    """Number of pairs ``i < j`` with ``arr[i] > arr[j]``; ``arr`` is left untouched."""
    return _sort_and_count(list(arr))[1]