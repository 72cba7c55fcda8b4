"""Single-array scans: leaders, majority elements, runs, sums, missing numbers, profit."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from functools import reduce
from itertools import accumulate, groupby
from operator import xor


def leaders_brute(nums: Iterable[int]) -> list[int]:
    """Return, left to right, the values that no later value exceeds."""
    values = list(nums)
    return [
        value
        for i, value in enumerate(values)
        if all(value >= later for later in values[i + 1:])
    ]


def leaders_optimal(nums: Iterable[int]) -> list[int]:
    """Return, left to right, the values strictly greater than every later value."""
    leaders: list[int] = []
    best = float("-inf")
    for value in reversed(list(nums)):
        if value > best:
            leaders.append(value)
        best = max(best, value)
    leaders.reverse()
    return leaders


def majority_elements_brute(nums: Iterable[int]) -> list[int]:
    """Return the values occurring more than ``n // 3`` times, in order of first appearance."""
    values = list(nums)
    limit = len(values) // 3
    major: list[int] = []
    for value in values:
        if (not major or major[0] != value) and values.count(value) > limit:
            major.append(value)
        if len(major) == 2:
            break
    return major


def majority_elements_better(nums: Iterable[int]) -> list[int]:
    """Return the values occurring more than ``n // 3`` times, in order of reaching that count."""
    values = list(nums)
    needed = len(values) // 3 + 1
    counts: Counter[int] = Counter()
    major: list[int] = []
    for value in values:
        counts[value] += 1
        if counts[value] == needed:
            major.append(value)
        if len(major) == 2:
            break
    return major


def max_consecutive_ones(nums: Iterable[int]) -> int:
    """Return the length of the longest run of 1s."""
    return max((sum(1 for _ in run) for key, run in groupby(nums) if key == 1), default=0)


def max_subarray_sum(nums: Iterable[int]) -> int:
    """Return the largest sum of any non-empty contiguous subarray."""
    values = list(nums)
    if not values:
        raise ValueError("max_subarray_sum needs at least one value")
    return max(max(accumulate(values[start:])) for start in range(len(values)))


def missing_number_brute(nums: Iterable[int]) -> int:
    """Return the smallest of ``0..n`` absent from ``n`` values, checking each in turn."""
    values = list(nums)
    present = set(values)
    return next((i for i in range(len(values)) if i not in present), len(values))


def missing_number_better(nums: Iterable[int]) -> int:
    """Return the value of ``0..n`` missing from ``n`` distinct values, by summation."""
    values = list(nums)
    n = len(values)
    return n * (n + 1) // 2 - sum(values)


def missing_number_optimal(nums: Iterable[int]) -> int:
    """Return the value of ``0..n`` missing from ``n`` distinct values, by XOR."""
    values = list(nums)
    return reduce(xor, range(len(values) + 1), 0) ^ reduce(xor, values, 0)


def max_profit(prices: Iterable[int]) -> int:
    """Return the best gain from one buy followed by one later sell; 0 if none is positive."""
    it = iter(prices)
    lowest = next(it, None)
    if lowest is None:
        return 0
    best = 0
    for price in it:
        best = max(best, price - lowest)
        lowest = min(lowest, price)
    return best