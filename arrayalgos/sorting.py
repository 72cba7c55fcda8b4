"""Classic comparison sorts and the three-way Dutch national flag partition."""

from __future__ import annotations

from collections.abc import Iterable


def selection_sort(nums: Iterable[int]) -> list[int]:
    """Return a sorted copy, built by repeatedly selecting the smallest remaining value."""
    items = list(nums)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def bubble_sort(nums: Iterable[int]) -> list[int]:
    """Return a sorted copy, built by bubbling the largest values to the end."""
    items = list(nums)
    for end in range(len(items) - 1, 0, -1):
        for j in range(end):
            if items[j + 1] < items[j]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def insertion_sort(nums: Iterable[int]) -> list[int]:
    """Return a sorted copy, built by sinking each value into the sorted prefix."""
    items = list(nums)
    for i in range(1, len(items)):
        j = i
        while j > 0 and items[j - 1] > items[j]:
            items[j - 1], items[j] = items[j], items[j - 1]
            j -= 1
    return items


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li] < right[ri]:
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged


def merge_sort(nums: Iterable[int]) -> list[int]:
    """Return a sorted copy using top-down merge sort."""
    items = list(nums)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[int], low: int, high: int) -> int:
    pivot = items[low]
    i, j = low, high
    while i < j:
        while items[i] <= pivot and i < high:
            i += 1
        while items[j] > pivot and j > low:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
    items[low], items[j] = items[j], items[low]
    return j


def quick_sort(nums: Iterable[int]) -> list[int]:
    """Return a sorted copy using quick sort with the first element as pivot."""
    items = list(nums)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        split = _partition(items, low, high)
        pending.append((low, split - 1))
        pending.append((split + 1, high))
    return items


def dutch_flag_sort(nums: Iterable[int]) -> list[int]:
    """Return a copy with 0s first, then 1s, then every other value, in one pass.

    Values other than 0 and 1 are all treated as the high class.
    """
    items = list(nums)
    low = mid = 0
    high = len(items) - 1
    while mid <= high:
        if items[mid] == 0:
            items[mid], items[low] = items[low], items[mid]
            low += 1
            mid += 1
        elif items[mid] == 1:
            mid += 1
        else:
            items[mid], items[high] = items[high], items[mid]
            high -= 1
    return items