"""Algorithms over integer sequences."""

from __future__ import annotations

import bisect
import math
from collections import Counter
from collections.abc import Sequence
from itertools import pairwise


def max_area(height: Sequence[int]) -> int:
    """Return the most water two of the given vertical lines can hold."""
    if len(height) < 2:
        raise ValueError("at least two lines are needed to hold water")
    best = -math.inf
    i, j = 0, len(height) - 1
    while i < j:
        best = max(best, min(height[i], height[j]) * (j - i))
        if height[i] < height[j]:
            i += 1
        else:
            j -= 1
    return int(best)


def candy(ratings: Sequence[int]) -> int:
    """Return the fewest candies for children whose higher-rated neighbours get more."""
    n = len(ratings)
    total = n
    i = 1
    while i < n:
        if ratings[i] == ratings[i - 1]:
            i += 1
            continue

        peak = 0
        while ratings[i] > ratings[i - 1]:
            peak += 1
            total += peak
            i += 1
            if i == n:
                return total

        valley = 0
        while i < n and ratings[i] < ratings[i - 1]:
            valley += 1
            total += valley
            i += 1

        # The summit was counted on both slopes; keep only the taller one.
        total -= min(peak, valley)
    return total


def majority_elements(nums: Sequence[int]) -> list[int]:
    """Return, in ascending order, the values seen more than len(nums) // 3 times."""
    threshold = len(nums) // 3
    counts = Counter(nums)
    return sorted(value for value, count in counts.items() if count > threshold)


def find_132_pattern(nums: Sequence[int]) -> bool:
    """Tell whether some i < j < k has nums[i] < nums[k] < nums[j]."""
    stack: list[int] = []
    middle = -math.inf
    for value in reversed(nums):
        while stack and stack[-1] < value:
            if middle > stack[-1]:
                return True
            middle = stack.pop()
        stack.append(value)
    return bool(stack) and middle > stack[-1]


def is_monotonic(nums: Sequence[int]) -> bool:
    """Tell whether the sequence never rises or never falls."""
    increasing = decreasing = True
    for a, b in pairwise(nums):
        if a > b:
            increasing = False
        if a < b:
            decreasing = False
        if not increasing and not decreasing:
            return False
    return True


def group_the_people(group_sizes: Sequence[int]) -> list[list[int]]:
    """Split people into groups whose size each person asked for."""
    groups: list[list[int]] = []
    pending: dict[int, list[int]] = {}
    for person, size in enumerate(group_sizes):
        members = pending.setdefault(size, [])
        members.append(person)
        if len(members) == size:
            groups.append(members)
            pending[size] = []
    return groups


def _popcount(value: int) -> int:
    return bin(value & 0xFFFFFFFF).count("1")


def sort_by_bits(arr: Sequence[int]) -> list[int]:
    """Sort by the number of one bits, then by value."""
    return sorted(arr, key=lambda value: (_popcount(value), value))


def build_array(target: Sequence[int], n: int) -> list[str]:
    """Return the Push/Pop operations that build target from the stream 1..n."""
    operations: list[str] = []
    position = 0
    for number in range(1, n + 1):
        if position == len(target):
            break
        operations.append("Push")
        if target[position] == number:
            position += 1
        else:
            operations.append("Pop")
    return operations


def get_last_moment(n: int, left: Sequence[int], right: Sequence[int]) -> int:
    """Return when the last ant falls off a plank of length n."""
    times = [abs(position) for position in left]
    times.extend(abs(n - position) for position in right)
    return max(times, default=0)


def num_identical_pairs(nums: Sequence[int]) -> int:
    """Count index pairs i < j with equal values."""
    return sum(count * (count - 1) // 2 for count in Counter(nums).values())


def maximum_score(nums: Sequence[int], k: int) -> int:
    """Return the best min(subarray) * length over subarrays that contain index k."""
    if not 0 <= k < len(nums):
        raise IndexError("k is outside the array")
    last = len(nums) - 1
    lowest = best = nums[k]
    i = j = k
    while True:
        if i > 0 and j < last:
            if nums[i - 1] >= nums[j + 1]:
                i -= 1
            else:
                j += 1
        elif i == 0 and j < last:
            j += 1
        elif j == last and i > 0:
            i -= 1
        lowest = min(lowest, nums[i], nums[j])
        best = max(best, lowest * (j - i + 1))
        if not (i > 0 or j < last):
            break
    return best


def min_operations(nums: Sequence[int]) -> int:
    """Return how many values must change to make the array a run of consecutive integers."""
    n = len(nums)
    distinct = sorted(set(nums))
    best = n
    j = 0
    for i, start in enumerate(distinct):
        while j < len(distinct) and distinct[j] < start + n:
            j += 1
        best = min(best, n - j + i)
    return best


def full_bloom_flowers(
    flowers: Sequence[Sequence[int]], people: Sequence[int]
) -> list[int]:
    """For each arrival time, count the flowers in bloom."""
    starts = sorted(start for start, _ in flowers)
    ends = sorted(end for _, end in flowers)
    return [
        bisect.bisect_right(starts, arrival) - bisect.bisect_left(ends, arrival)
        for arrival in people
    ]


def find_champion(grid: Sequence[Sequence[int]]) -> int:
    """Return the team with the most wins, the last one on a tie."""
    if not grid:
        raise ValueError("the tournament has no teams")
    best_wins = 0
    winner = 0
    for team, row in enumerate(grid):
        wins = sum(1 for cell in row if cell == 1)
        if wins >= best_wins:
            best_wins = wins
            winner = team
    return winner


def maximum_strong_pair_xor(nums: Sequence[int]) -> int:
    """Return the largest XOR of a pair x, y with |x - y| <= min(x, y)."""
    best = 0
    for x in nums:
        for y in nums:
            if abs(x - y) <= min(x, y):
                best = max(best, x ^ y)
    return best