"""Consecutive runs, lexicographic successors and subarray sums of integer sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from itertools import accumulate


def longest_consecutive_brute(nums: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers among ``nums``.

    Each run is followed upward by membership tests on the list. Returns 0 when empty.
    """
    values = list(nums)
    longest = 0
    for start in values:
        length = 1
        current = start
        while current + 1 in values:
            length += 1
            current += 1
        longest = max(longest, length)
    return longest


def longest_consecutive_better(nums: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers, by sorting first.

    Returns 0 when empty.
    """
    values = sorted(nums)
    if not values:
        return 0
    longest = 1
    length = 0
    last: int | None = None
    for value in values:
        if last is not None and value - 1 == last:
            length += 1
            last = value
        elif value != last:
            length = 1
            last = value
        longest = max(longest, length)
    return longest


def longest_consecutive_optimal(nums: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers, using a set.

    Runs are only walked from their smallest member. Returns 0 when empty.
    """
    present = set(nums)
    if not present:
        return 0
    longest = 1
    for value in present:
        if value - 1 in present:
            continue
        length = 1
        while value + length in present:
            length += 1
        longest = max(longest, length)
    return longest


def next_permutation(nums: Iterable[int]) -> list[int]:
    """Return the lexicographically next arrangement of ``nums``.

    The last arrangement wraps round to the first, that is, to sorted order.
    """
    items = list(nums)
    pivot = next(
        (i for i in range(len(items) - 2, -1, -1) if items[i] < items[i + 1]),
        None,
    )
    if pivot is None:
        items.reverse()
        return items
    swap_with = next(
        i for i in range(len(items) - 1, pivot, -1) if items[i] > items[pivot]
    )
    items[pivot], items[swap_with] = items[swap_with], items[pivot]
    items[pivot + 1:] = reversed(items[pivot + 1:])
    return items


def count_subarrays_with_sum_brute(nums: Iterable[int], k: int) -> int:
    """Return how many non-empty contiguous subarrays sum to ``k``, trying every start."""
    values = list(nums)
    return sum(
        1
        for start in range(len(values))
        for total in accumulate(values[start:])
        if total == k
    )


def count_subarrays_with_sum_optimal(nums: Iterable[int], k: int) -> int:
    """Return how many non-empty contiguous subarrays sum to ``k``, using prefix sums."""
    seen: Counter[int] = Counter({0: 1})
    count = 0
    for prefix in accumulate(nums):
        count += seen[prefix - k]
        seen[prefix] += 1
    return count