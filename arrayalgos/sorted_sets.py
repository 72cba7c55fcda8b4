"""Set operations on sorted sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from heapq import merge
from itertools import groupby


def sorted_union(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Return the distinct values of two sorted sequences, merged in sorted order."""
    result: list[int] = []
    for value in merge(first, second):
        if not result or result[-1] != value:
            result.append(value)
    return result


def sorted_intersection(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the values common to two sorted sequences, kept as often as both hold them."""
    result: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            i += 1
        elif second[j] < first[i]:
            j += 1
        else:
            result.append(first[i])
            i += 1
            j += 1
    return result


def count_unique_sorted(nums: Iterable[int]) -> int:
    """Return how many distinct values a sorted sequence holds."""
    return sum(1 for _ in groupby(nums))