"""Rotation of a sequence by a number of places."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum


class Direction(str, Enum):
    """Rotation direction, written as a single letter."""

    LEFT = "l"
    RIGHT = "r"


def rotate(nums: Iterable[int], k: int, direction: str | Direction) -> list[int]:
    """Return a rotated copy of ``nums``.

    ``"l"`` brings the last ``k`` values to the front; ``"r"`` moves the first
    ``k`` values to the back. ``k`` must lie between 0 and the length.
    """
    try:
        direction = Direction(direction)
    except ValueError:
        raise ValueError("Invalid Input") from None
    items = list(nums)
    n = len(items)
    if not 0 <= k <= n:
        raise ValueError(f"k must be between 0 and {n}, got {k}")
    if direction is Direction.LEFT:
        return items[n - k:] + items[:n - k]
    return items[k:] + items[:k]