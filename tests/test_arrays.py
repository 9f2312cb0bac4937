import math
import random

import pytest

from algodrills.arrays import (
    contains_duplicate,
    contains_nearby_duplicate,
    find_missing_numbers,
    find_pivot,
    longest_mountain,
    majority_element,
    majority_element_brute_force,
    max_profit,
    max_profit_brute_force,
    max_subarray_sum,
    max_subarray_sum_brute_force,
    min_subarray_len,
    min_subarray_len_brute_force,
    minimum_abs_difference,
    shift_positive_right,
    shift_positive_right_in_place,
    sort_012,
    sorted_squares,
    three_sum,
    union_of_arrays,
)


def _random_lists(seed, count=40, low=-10, high=10, max_len=12):
    rng = random.Random(seed)
    return [
        [rng.randint(low, high) for _ in range(rng.randint(1, max_len))]
        for _ in range(count)
    ]


@pytest.mark.parametrize("func", [majority_element, majority_element_brute_force])
def test_majority_element_finds_majority(func):
    nums = [5, 1, 5, 2, 5, 3, 5]
    assert func(nums) == 5


@pytest.mark.parametrize("func", [majority_element, majority_element_brute_force])
def test_majority_element_single(func):
    assert func([42]) == 42


def test_majority_brute_force_does_not_mutate():
    nums = [3, 1, 3]
    majority_element_brute_force(nums)
    assert nums == [3, 1, 3]


def test_three_sum_example():
    assert three_sum([-1, 0, 1, 2, -1, -4]) == [[-1, -1, 2], [-1, 0, 1]]


@pytest.mark.parametrize("nums", _random_lists(1))
def test_three_sum_invariants(nums):
    result = three_sum(nums)
    assert result == sorted(result)
    assert len({tuple(t) for t in result}) == len(result)
    for triplet in result:
        assert sum(triplet) == 0
        assert triplet == sorted(triplet)
        for value in triplet:
            assert triplet.count(value) <= nums.count(value)


@pytest.mark.parametrize("arr", _random_lists(2, low=0, high=2))
def test_sort_012_sorts(arr):
    expected = sorted(arr)
    sort_012(arr)
    assert arr == expected


@pytest.mark.parametrize("prices", _random_lists(3, low=0, high=20))
def test_max_profit_agrees(prices):
    assert max_profit(prices) == max_profit_brute_force(prices)
    assert max_profit(prices) >= 0


def test_max_profit_falling_prices():
    assert max_profit([9, 7, 4, 1]) == max_profit_brute_force([9, 7, 4, 1]) == 0


def test_contains_nearby_duplicate():
    assert contains_nearby_duplicate([1, 2, 3, 1], 3)
    assert not contains_nearby_duplicate([1, 2, 3, 1], 2)


def test_contains_duplicate():
    assert contains_duplicate([1, 2, 1])
    assert not contains_duplicate([1, 2, 3])


@pytest.mark.parametrize("nums", _random_lists(4, low=1, high=8))
def test_find_missing_numbers_invariant(nums):
    missing = find_missing_numbers(nums)
    n = len(nums)
    assert set(missing).isdisjoint(nums)
    assert set(missing) | set(nums) >= set(range(1, n + 1))
    assert missing == sorted(missing)


@pytest.mark.parametrize("arr", _random_lists(5))
def test_max_subarray_agrees(arr):
    assert max_subarray_sum(arr) == max_subarray_sum_brute_force(arr)


def test_max_subarray_all_negative_is_max_element():
    arr = [-8, -3, -6]
    assert max_subarray_sum(arr) == max(arr)


@pytest.mark.parametrize("func", [max_subarray_sum, max_subarray_sum_brute_force])
def test_max_subarray_empty_raises(func):
    with pytest.raises(ValueError):
        func([])


def test_minimum_abs_difference_example():
    assert minimum_abs_difference([4, 2, 1, 3]) == [[1, 2], [2, 3], [3, 4]]


def test_minimum_abs_difference_short_input():
    assert minimum_abs_difference([7]) == []


@pytest.mark.parametrize("arr", _random_lists(6, low=-50, high=50))
def test_minimum_abs_difference_invariant(arr):
    pairs = minimum_abs_difference(arr)
    if len(arr) > 1:
        diffs = {b - a for a, b in pairs}
        assert len(diffs) == 1
        ordered = sorted(arr)
        assert diffs.pop() == min(b - a for a, b in zip(ordered, ordered[1:]))


def test_min_subarray_len_example():
    assert min_subarray_len(7, [2, 3, 1, 2, 4, 3]) == 2


@pytest.mark.parametrize("nums", _random_lists(7, low=1, high=9))
def test_min_subarray_len_agrees(nums):
    for target in (1, 5, 15, 40):
        assert min_subarray_len(target, nums) == min_subarray_len_brute_force(target, nums)


def test_min_subarray_len_unreachable():
    assert min_subarray_len(100, [1, 2]) == 0
    assert min_subarray_len_brute_force(100, [1, 2]) == 0


def test_shift_positive_right_keeps_order():
    arr = [-12, 11, -13, -5, 6, -7, 5, -3, -6]
    result = shift_positive_right(arr)
    assert result[:6] == [v for v in arr if v < 0]
    assert result[6:] == [v for v in arr if v >= 0]


def test_shift_positive_right_in_place():
    arr = [-12, 11, -13, -5, 6, -7, 5, -3, -6]
    original = list(arr)
    shift_positive_right_in_place(arr)
    assert sorted(arr) == sorted(original)
    negatives = sum(1 for v in original if v < 0)
    assert all(v < 0 for v in arr[:negatives])
    assert all(v > 0 for v in arr[negatives:])


@pytest.mark.parametrize("nums", _random_lists(8, low=0, high=30))
def test_sorted_squares_non_negative(nums):
    result = sorted_squares(nums)
    assert result == sorted(result)
    assert [math.isqrt(v) for v in result] == sorted(nums)


def test_union_of_arrays():
    a = [1, 2, 3, 2, 1]
    b = [3, 2, 2, 3, 3, 4]
    result = union_of_arrays(a, b)
    assert set(result) == set(a) | set(b)
    assert len(result) == len(set(result))


def test_longest_mountain_whole_list():
    arr = [1, 2, 3, 2, 1]
    assert longest_mountain(arr) == len(arr)


def test_longest_mountain_none():
    assert longest_mountain([1, 2, 3, 4]) == 0
    assert longest_mountain([2, 2, 2]) == 0


def test_find_pivot():
    nums = [1, 7, 3, 6, 5, 6]
    pivot = find_pivot(nums)
    assert pivot >= 0
    assert sum(nums[:pivot]) == sum(nums[pivot + 1:])


def test_find_pivot_missing():
    assert find_pivot([1, 2, 3]) == -1