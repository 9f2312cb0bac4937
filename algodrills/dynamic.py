"""Dynamic programming drills: house robber, stairs, frog jumps, typed strings."""

from __future__ import annotations

from collections.abc import Sequence
from functools import cache, reduce
from itertools import accumulate, groupby

MOD = 1_000_000_007


def rob(nums: Sequence[int]) -> int:
    """Largest sum of non-adjacent houses, by recursion over pick / skip."""

    @cache
    def best(index: int) -> int:
        if index == 0:
            return nums[0]
        if index < 0:
            return 0
        return max(best(index - 2) + nums[index], best(index - 1))

    return best(len(nums) - 1)


def rob_tabulated(nums: Sequence[int]) -> int:
    """Largest sum of non-adjacent houses, keeping only the last two totals."""
    if not nums:
        raise ValueError("rob_tabulated() needs at least one house")
    prev, prev2 = nums[0], 0
    for value in nums[1:]:
        prev, prev2 = max(value + prev2, prev), prev
    return prev


def climb_stairs(n: int) -> int:
    """Ways to climb ``n`` stairs in steps of 1 or 2, by plain recursion."""
    if n <= 2:
        return n
    return climb_stairs(n - 1) + climb_stairs(n - 2)


def climb_stairs_memo(n: int) -> int:
    """Ways to climb ``n`` stairs in steps of 1 or 2, with a memo table."""
    memo: dict[int, int] = {}

    def ways(step: int) -> int:
        if step <= 2:
            return step
        if step not in memo:
            memo[step] = ways(step - 1) + ways(step - 2)
        return memo[step]

    return ways(n)


def climb_stairs_iterative(n: int) -> int:
    """Ways to climb ``n`` stairs in steps of 1 or 2, in constant space."""
    one, two = 1, 1
    for _ in range(n - 1):
        one, two = one + two, one
    return one


def _check_stones(n: int, heights: Sequence[int]) -> None:
    if not 1 <= n <= len(heights):
        raise ValueError(
            f"stone count must be between 1 and {len(heights)}, got {n}"
        )


def frog_jump(n: int, heights: Sequence[int]) -> int:
    """Least energy to reach stone ``n - 1`` jumping one or two stones, by recursion."""
    _check_stones(n, heights)

    def cost(index: int) -> int:
        if index == 0:
            return 0
        left = cost(index - 1) + abs(heights[index] - heights[index - 1])
        if index > 1:
            return min(left, cost(index - 2) + abs(heights[index] - heights[index - 2]))
        return left

    return cost(n - 1)


def frog_jump_memo(n: int, heights: Sequence[int]) -> int:
    """Least energy to reach stone ``n - 1`` jumping one or two stones, memoised."""
    _check_stones(n, heights)
    memo: dict[int, int] = {}

    def cost(index: int) -> int:
        if index == 0:
            return 0
        if index not in memo:
            left = cost(index - 1) + abs(heights[index] - heights[index - 1])
            if index > 1:
                left = min(left, cost(index - 2) + abs(heights[index] - heights[index - 2]))
            memo[index] = left
        return memo[index]

    return cost(n - 1)


def find_groups(word: str) -> list[int]:
    """Lengths of the runs of identical consecutive characters in ``word``."""
    return [sum(1 for _ in run) for _, run in groupby(word)]


def _product(groups: Sequence[int]) -> int:
    return reduce(lambda acc, size: acc * size % MOD, groups, 1)


def possible_string_count(word: str, k: int) -> int:
    """Originals of length at least ``k`` that could have been typed as ``word``.

    Uses a full table of ways per group count and length; modulo 1e9+7.
    """
    groups = find_groups(word)
    if k <= len(groups):
        return _product(groups)
    total = sum(groups)
    table = [[0] * (total + 1) for _ in range(len(groups) + 1)]
    table[0][0] = 1
    for i, size in enumerate(groups, start=1):
        above = table[i - 1]
        for j in range(total + 1):
            table[i][j] = sum(above[j - take] for take in range(1, min(size, j) + 1)) % MOD
    return sum(table[-1][k:]) % MOD


def possible_string_count_optimized(word: str, k: int) -> int:
    """Same count as :func:`possible_string_count`, keeping only two rows."""
    groups = find_groups(word)
    if k <= len(groups):
        return _product(groups)
    total = sum(groups)
    prev = [1] + [0] * total
    for size in groups:
        prev = [
            sum(prev[j - take] for take in range(1, min(size, j) + 1)) % MOD
            for j in range(total + 1)
        ]
    return sum(prev[k:]) % MOD


def possible_string_count_rolling(word: str, k: int) -> int:
    """Same count as :func:`possible_string_count`, using prefix sums per row."""
    groups = find_groups(word)
    if k <= len(groups):
        return _product(groups)
    total = sum(groups)
    ways = [1] + [0] * total
    for size in groups:
        prefix = list(accumulate(ways, initial=0))
        ways = [0] + [
            (prefix[j] - prefix[j - min(size, j)]) % MOD for j in range(1, total + 1)
        ]
    return sum(ways[k:]) % MOD