"""Shortest-path and scheduling algorithms on grids and DAGs."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Sequence

_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def minimum_effort_path(heights: Sequence[Sequence[int]]) -> int:
    """Return the least largest height step on a path from the top-left to the bottom-right."""
    if not heights or not heights[0]:
        raise ValueError("the grid must not be empty")
    rows, cols = len(heights), len(heights[0])
    effort = [[math.inf] * cols for _ in range(rows)]
    effort[0][0] = 0
    heap: list[tuple[int, int, int]] = [(0, 0, 0)]
    while heap:
        current, r, c = heapq.heappop(heap)
        if (r, c) == (rows - 1, cols - 1):
            return current
        for dr, dc in _STEPS:
            nr, nc = r + dr, c + dc
            if not (0 <= nr < rows and 0 <= nc < cols):
                continue
            step = max(current, abs(heights[nr][nc] - heights[r][c]))
            if step < effort[nr][nc]:
                effort[nr][nc] = step
                heapq.heappush(heap, (step, nr, nc))
    return 0


def minimum_time(
    n: int, relations: Sequence[Sequence[int]], time: Sequence[int]
) -> int:
    """Return the months needed to finish n courses given prerequisites and durations."""
    if n < 1:
        raise ValueError("there must be at least one course")
    if len(time) != n:
        raise ValueError("time must have one entry per course")
    following: list[list[int]] = [[] for _ in range(n)]
    in_degree = [0] * n
    for before, after in relations:
        following[before - 1].append(after - 1)
        in_degree[after - 1] += 1

    finish = [0] * n
    queue: deque[int] = deque()
    for course, degree in enumerate(in_degree):
        if degree == 0:
            queue.append(course)
            finish[course] = time[course]

    while queue:
        course = queue.popleft()
        for nxt in following[course]:
            finish[nxt] = max(finish[nxt], finish[course] + time[nxt])
            in_degree[nxt] -= 1
            if in_degree[nxt] == 0:
                queue.append(nxt)
    return max(finish)