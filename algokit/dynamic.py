"""Dynamic-programming counts and optimisations."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Sequence
from itertools import accumulate

MOD = 1_000_000_007


def unique_paths(m: int, n: int) -> int:
    """Count right/down paths from the top-left to the bottom-right of an m x n grid."""
    if m < 0 or n < 0:
        raise ValueError("grid dimensions must not be negative")
    if m == 0 or n == 0:
        return 0
    row = [1] * n
    for _ in range(m - 1):
        row = list(accumulate(row))
    return row[-1]


def min_cost_climbing_stairs(cost: Sequence[int]) -> int:
    """Return the cheapest way past the top when each step costs what it says."""
    if len(cost) < 2:
        raise ValueError("at least two steps are needed")
    before, last = cost[0], cost[1]
    for price in cost[2:]:
        before, last = last, price + min(before, last)
    return min(before, last)


def num_factored_binary_trees(arr: Sequence[int]) -> int:
    """Count binary trees whose inner nodes are products of their children, modulo 1e9+7."""
    if any(value < 1 for value in arr):
        raise ValueError("values must be positive")
    values = sorted(arr)
    present = set(values)
    trees = dict.fromkeys(values, 1)
    for root in values:
        limit = math.isqrt(root)
        for left in values:
            if left > limit:
                break
            if root % left:
                continue
            right = root // left
            if right not in present:
                continue
            product = trees[left] * trees[right]
            added = product if right == left else 2 * product
            trees[root] = (trees[root] + added) % MOD
    return sum(trees.values()) % MOD


def constrained_subset_sum(nums: Sequence[int], k: int) -> int:
    """Return the best non-empty subsequence sum whose chosen indices are at most k apart."""
    if not nums:
        raise ValueError("nums must not be empty")
    sums: list[int] = []
    window: deque[int] = deque()
    for i, value in enumerate(nums):
        total = value + (sums[window[0]] if window else 0)
        sums.append(total)
        while window and (i - window[0] >= k or total >= sums[window[-1]]):
            if total >= sums[window[-1]]:
                window.pop()
            else:
                window.popleft()
        if total > 0:
            window.append(i)
    return max(sums)


def count_vowel_permutation(n: int) -> int:
    """Count strings of n vowels following the successor rules, modulo 1e9+7."""
    if n < 1:
        raise ValueError("n must be at least 1")
    a = e = i = o = u = 1
    for _ in range(n - 1):
        a, e, i, o, u = (
            (e + i + u) % MOD,
            (a + i) % MOD,
            (e + o) % MOD,
            i,
            (i + o) % MOD,
        )
    return (a + e + i + o + u) % MOD


def num_ways(steps: int, arr_len: int) -> int:
    """Count stay/left/right walks of the given length that end where they began."""
    if steps < 0:
        raise ValueError("steps must not be negative")
    if arr_len < 1:
        raise ValueError("arr_len must be at least 1")
    # A walk never gets further out than it can come back from.
    width = min(arr_len, steps // 2 + 1)
    ways = [1] + [0] * (width - 1)
    for _ in range(steps):
        from_left = [0, *ways[:-1]]
        from_right = [*ways[1:], 0]
        ways = [
            (stay + left + right) % MOD
            for stay, left, right in zip(ways, from_left, from_right)
        ]
    return ways[0]


def num_of_arrays(n: int, m: int, k: int) -> int:
    """Count arrays of n values in 1..m whose running maximum changes exactly k times."""
    if n < 1 or m < 1 or k < 1:
        return 0
    # ways[b - 1][c]: arrays whose maximum is b after c changes of the maximum.
    ways = [[1 if c == 1 else 0 for c in range(k + 1)] for _ in range(m)]
    for _ in range(n - 1):
        updated: list[list[int]] = []
        smaller = [0] * (k + 1)
        for b, row in enumerate(ways, start=1):
            shifted = [0, *smaller[:-1]]
            updated.append([(b * count + rise) % MOD for count, rise in zip(row, shifted)])
            smaller = [(total + count) % MOD for total, count in zip(smaller, row)]
        ways = updated
    return sum(row[k] for row in ways) % MOD


def max_dot_product(nums1: Sequence[int], nums2: Sequence[int]) -> int:
    """Return the largest dot product of equal-length non-empty subsequences."""
    if not nums1 or not nums2:
        raise ValueError("both sequences must be non-empty")
    previous: list[float] = [-math.inf] * (len(nums2) + 1)
    for x in nums1:
        current: list[float] = [-math.inf]
        for y, diagonal, above in zip(nums2, previous, previous[1:]):
            product = x * y
            current.append(max(product, diagonal + product, above, current[-1]))
        previous = current
    return int(previous[-1])


def paint_walls(cost: Sequence[int], time: Sequence[int]) -> int:
    """Return the least paid to paint every wall with a paid and a free painter."""
    if len(cost) != len(time):
        raise ValueError("cost and time must have the same length")
    walls = len(cost)
    best: list[float] = [0, *([math.inf] * walls)]
    for price, duration in zip(cost, time):
        covered = duration + 1
        best = [
            min(current, best[max(0, remaining - covered)] + price)
            for remaining, current in enumerate(best)
        ]
    return int(best[walls])