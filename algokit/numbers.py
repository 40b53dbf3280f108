"""Small integer and combinatorial functions."""

from __future__ import annotations

from itertools import pairwise


def _next_pascal_row(row: list[int]) -> list[int]:
    return [1, *(a + b for a, b in pairwise(row)), 1]


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """Return the first num_rows rows of Pascal's triangle."""
    if num_rows < 0:
        raise ValueError("num_rows must not be negative")
    rows: list[list[int]] = []
    for _ in range(num_rows):
        rows.append(_next_pascal_row(rows[-1]) if rows else [1])
    return rows


def pascal_row(row_index: int) -> list[int]:
    """Return row row_index (counting from zero) of Pascal's triangle."""
    if row_index < 0:
        raise ValueError("row_index must not be negative")
    row = [1]
    for _ in range(row_index):
        row = _next_pascal_row(row)
    return row


def is_power_of_four(n: int) -> bool:
    """Tell whether n is 4 to some non-negative power."""
    while n > 1:
        if n % 4:
            return False
        n //= 4
    return n == 1


def integer_break(n: int) -> int:
    """Return the largest product of at least two positive integers summing to n."""
    if n == 2:
        return 1
    if n == 3:
        return 2
    product = 1
    while n > 4:
        product *= 3
        n -= 3
    return product * n


def poor_pigs(buckets: int, minutes_to_die: int, minutes_to_test: int) -> int:
    """Return the fewest pigs that find the poisoned bucket in the time given."""
    if buckets < 1:
        raise ValueError("there must be at least one bucket")
    states = minutes_to_test // minutes_to_die + 1
    if buckets > 1 and states < 2:
        raise ValueError("there is not enough time for a single test")
    pigs = 0
    capacity = 1
    while capacity < buckets:
        capacity *= states
        pigs += 1
    return pigs


def tribonacci(n: int) -> int:
    """Return the n-th Tribonacci number, with T0 = 0 and T1 = T2 = 1."""
    if n < 0:
        raise ValueError("n must not be negative")
    a, b, c = 0, 1, 1
    for _ in range(n):
        a, b, c = b, c, a + b + c
    return a


def count_symmetric_integers(low: int, high: int) -> int:
    """Count integers in [low, high] with an even number of digits whose halves sum alike."""
    count = 0
    for number in range(low, high + 1):
        digits = str(number)
        if len(digits) % 2:
            continue
        half = len(digits) // 2
        if sum(map(int, digits[:half])) == sum(map(int, digits[half:])):
            count += 1
    return count


def is_palindrome(x: int) -> bool:
    """Tell whether the decimal digits of x read the same both ways."""
    if x < 0 or (x % 10 == 0 and x != 0):
        return False
    reversed_half = 0
    while x > reversed_half:
        reversed_half = reversed_half * 10 + x % 10
        x //= 10
    return x == reversed_half or x == reversed_half // 10


def maximum_achievable_x(num: int, t: int) -> int:
    """Return the largest x that can equal num after t paired +/-1 steps."""
    return num + 2 * t