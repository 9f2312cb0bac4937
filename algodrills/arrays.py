"""Classic array drills: searching, counting, partitioning and sliding windows."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def majority_element_brute_force(nums: Sequence[int]) -> int:
    """Return the element with the longest run after sorting, or -1 for an empty input."""
    if len(nums) == 1:
        return nums[0]
    ordered = sorted(nums)
    best = -1
    best_count: int | None = None
    count = 0
    for previous, current in pairwise(ordered):
        if previous != current:
            count = 0
        count += 1
        if best_count is None or best_count < count:
            best = previous
            best_count = count
    return best


def majority_element(nums: Sequence[int]) -> int:
    """Boyer-Moore voting: the majority element, or -1 for an empty input."""
    count = 0
    candidate = -1
    for n in nums:
        if count == 0:
            candidate = n
        count += 1 if n == candidate else -1
    return candidate


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """All distinct triplets summing to zero, each sorted, in lexicographic order."""
    triplets: set[tuple[int, ...]] = set()
    for i, first in enumerate(nums):
        seen: set[int] = set()
        for second in nums[i + 1:]:
            third = -(first + second)
            if third in seen:
                triplets.add(tuple(sorted((first, second, third))))
            seen.add(second)
    return [list(triplet) for triplet in sorted(triplets)]


def sort_012(arr: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place with a single pass."""
    low = -1
    mid = 0
    high = len(arr) - 1
    while mid <= high:
        if arr[mid] == 0:
            low += 1
            arr[low], arr[mid] = arr[mid], arr[low]
            mid += 1
        elif arr[mid] == 1:
            mid += 1
        else:
            arr[mid], arr[high] = arr[high], arr[mid]
            high -= 1


def max_profit_brute_force(prices: Sequence[int]) -> int:
    """Best profit from one buy followed by one sell, trying every pair."""
    best = 0
    for i, buy in enumerate(prices):
        for sell in prices[i + 1:]:
            if sell > buy:
                best = max(best, sell - buy)
    return best


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from one buy followed by one sell, in one pass."""
    lowest: int | None = None
    best = 0
    for price in prices:
        lowest = price if lowest is None else min(lowest, price)
        best = max(best, price - lowest)
    return best


def contains_nearby_duplicate(nums: Sequence[int], k: int) -> bool:
    """True if two equal values sit at most ``k`` positions apart."""
    last_seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        if value in last_seen and abs(index - last_seen[value]) <= k:
            return True
        last_seen[value] = index
    return False


def contains_duplicate(nums: Sequence[int]) -> bool:
    """True if any value occurs more than once."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def find_missing_numbers(nums: Sequence[int]) -> list[int]:
    """Numbers in ``1..len(nums)`` that do not occur in ``nums``, ascending."""
    present = set(nums)
    return [n for n in range(1, len(nums) + 1) if n not in present]


def max_subarray_sum_brute_force(arr: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run, trying every start."""
    if not arr:
        raise ValueError("max_subarray_sum_brute_force() needs a non-empty sequence")
    best: int | None = None
    for start in range(len(arr)):
        running = 0
        for value in arr[start:]:
            running += value
            best = running if best is None else max(best, running)
    assert best is not None
    return best


def max_subarray_sum(arr: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run (Kadane)."""
    if not arr:
        raise ValueError("max_subarray_sum() needs a non-empty sequence")
    best: int | None = None
    running = 0
    for value in arr:
        running += value
        best = running if best is None else max(best, running)
        if running < 0:
            running = 0
    assert best is not None
    return best


def minimum_abs_difference(arr: Sequence[int]) -> list[list[int]]:
    """Adjacent pairs of the sorted values whose difference is the smallest."""
    ordered = sorted(arr)
    pairs = list(pairwise(ordered))
    if not pairs:
        return []
    smallest = min(b - a for a, b in pairs)
    return [[a, b] for a, b in pairs if b - a == smallest]


def min_subarray_len_brute_force(target: int, nums: Sequence[int]) -> int:
    """Length of the shortest run with sum at least ``target``, or 0 if none."""
    best: int | None = None
    for start in range(len(nums)):
        total = 0
        for offset, value in enumerate(nums[start:], start=1):
            total += value
            if total >= target:
                best = offset if best is None else min(best, offset)
                break
    return best or 0


def min_subarray_len(target: int, nums: Sequence[int]) -> int:
    """Length of the shortest run with sum at least ``target`` (sliding window), or 0."""
    best: int | None = None
    left = 0
    total = 0
    for right, value in enumerate(nums):
        total += value
        while total >= target and left <= right:
            length = right - left + 1
            best = length if best is None else min(best, length)
            total -= nums[left]
            left += 1
    return best or 0


def shift_positive_right(arr: Sequence[int]) -> list[int]:
    """A new list with the negatives first and the rest after, both in original order."""
    return [v for v in arr if v < 0] + [v for v in arr if v >= 0]


def shift_positive_right_in_place(arr: list[int]) -> None:
    """Move negatives to the front and positives to the back in place."""
    start = 0
    end = len(arr) - 1
    while start < end:
        while start < end and arr[start] < 0:
            start += 1
        while start < end and arr[end] > 0:
            end -= 1
        if start < end:
            arr[start], arr[end] = arr[end], arr[start]


def sorted_squares(nums: Sequence[int]) -> list[int]:
    """Sort the values, then square each one in that order."""
    return [n * n for n in sorted(nums)]


def union_of_arrays(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Distinct values of both sequences, in order of first appearance."""
    return list(dict.fromkeys([*first, *second]))


def longest_mountain(arr: Sequence[int]) -> int:
    """Length of the longest strictly rising then strictly falling run, or 0."""
    n = len(arr)
    longest = 0
    for peak in range(1, n - 1):
        if not (arr[peak - 1] < arr[peak] > arr[peak + 1]):
            continue
        left = peak - 1
        while left > 0 and arr[left - 1] < arr[left]:
            left -= 1
        right = peak + 1
        while right < n - 1 and arr[right] > arr[right + 1]:
            right += 1
        longest = max(longest, right - left + 1)
    return longest


def find_pivot(nums: Sequence[int]) -> int:
    """First index whose left and right sums are equal, or -1."""
    total = sum(nums)
    left = 0
    for index, value in enumerate(nums):
        if left == total - left - value:
            return index
        left += value
    return -1