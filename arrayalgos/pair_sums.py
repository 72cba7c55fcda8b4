"""Searches for pairs adding up to a target and triples adding up to zero."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import combinations

Pair = tuple[int, int]


def two_sum_brute(nums: Iterable[int], target: int) -> Pair | None:
    """Return the first index pair ``(i, j)``, ``i < j``, whose values sum to ``target``.

    Pairs are tried in order of ``i``, then ``j``. Returns ``None`` when no pair matches.
    """
    for (i, first), (j, second) in combinations(enumerate(nums), 2):
        if first + second == target:
            return i, j
    return None


def two_sum_better(nums: Iterable[int], target: int) -> Pair | None:
    """Return an index pair ``(i, j)``, ``i < j``, whose values sum to ``target``.

    The pair with the smallest ``j`` is found in one pass; ``i`` is the latest
    earlier index holding the complement. Returns ``None`` when no pair matches.
    """
    seen: dict[int, int] = {}
    for j, value in enumerate(nums):
        i = seen.get(target - value)
        if i is not None:
            return i, j
        seen[value] = j
    return None


def _as_sorted_lists(triples: set[tuple[int, int, int]]) -> list[list[int]]:
    return [list(triple) for triple in sorted(triples)]


def three_sum_brute(nums: Iterable[int]) -> list[list[int]]:
    """Return every distinct sorted triple summing to zero, checking all triples."""
    found = {tuple(sorted(triple)) for triple in combinations(nums, 3) if sum(triple) == 0}
    return _as_sorted_lists(found)


def three_sum_better(nums: Iterable[int]) -> list[list[int]]:
    """Return every distinct sorted triple summing to zero, using a set per first element."""
    values = list(nums)
    found: set[tuple[int, int, int]] = set()
    for i, first in enumerate(values):
        seen: set[int] = set()
        for second in values[i + 1:]:
            third = -(first + second)
            if third in seen:
                found.add(tuple(sorted((first, second, third))))
            seen.add(second)
    return _as_sorted_lists(found)


def three_sum_optimal(nums: Iterable[int]) -> list[list[int]]:
    """Return every distinct sorted triple summing to zero, by sorting and two pointers."""
    values = sorted(nums)
    n = len(values)
    result: list[list[int]] = []
    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        j, k = i + 1, n - 1
        while j < k:
            total = first + values[j] + values[k]
            if total < 0:
                j += 1
            elif total > 0:
                k -= 1
            else:
                result.append([first, values[j], values[k]])
                j += 1
                k -= 1
                while j < k and values[j] == values[j - 1]:
                    j += 1
                while j < k and values[k] == values[k + 1]:
                    k -= 1
    return result