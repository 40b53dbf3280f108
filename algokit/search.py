"""Binary searches over sorted and mountain-shaped sequences."""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Sequence


class MountainArray:
    """Read-only sequence that strictly rises to one peak and then strictly falls."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = tuple(values)

    def get(self, index: int) -> int:
        """Return the value at index."""
        return self._values[index]

    def length(self) -> int:
        """Return the number of values."""
        return len(self._values)

    def __len__(self) -> int:
        return len(self._values)


def first_occurrence(nums: Sequence[int], target: int) -> int:
    """Return the first index of target in sorted nums, or -1."""
    index = bisect.bisect_left(nums, target)
    return index if index < len(nums) and nums[index] == target else -1


def last_occurrence(nums: Sequence[int], target: int) -> int:
    """Return the last index of target in sorted nums, or -1."""
    index = bisect.bisect_right(nums, target) - 1
    return index if index >= 0 and nums[index] == target else -1


def search_range(nums: Sequence[int], target: int) -> list[int]:
    """Return [first, last] indices of target in sorted nums, or [-1, -1]."""
    return [first_occurrence(nums, target), last_occurrence(nums, target)]


def find_peak_index(low: int, high: int, mountain: MountainArray) -> int:
    """Return the index of the peak between low and high, inclusive."""
    while low != high:
        mid = low + (high - low) // 2
        if mountain.get(mid) < mountain.get(mid + 1):
            low = mid + 1
        else:
            high = mid
    return low


def _slope_search(
    low: int, high: int, target: int, mountain: MountainArray, descending: bool
) -> int:
    while low != high:
        mid = low + (high - low) // 2
        value = mountain.get(mid)
        go_right = value > target if descending else value < target
        if go_right:
            low = mid + 1
        else:
            high = mid
    return low


def find_in_mountain_array(target: int, mountain: MountainArray) -> int:
    """Return the smallest index holding target in the mountain, or -1."""
    length = mountain.length()
    if length < 3:
        raise ValueError("a mountain array needs at least three values")
    peak = find_peak_index(1, length - 2, mountain)

    rising = _slope_search(0, peak, target, mountain, descending=False)
    if mountain.get(rising) == target:
        return rising

    falling = _slope_search(peak + 1, length - 1, target, mountain, descending=True)
    if mountain.get(falling) == target:
        return falling

    return -1