import math
from itertools import pairwise

import pytest

from algokit.numbers import (
    count_symmetric_integers,
    integer_break,
    is_palindrome,
    is_power_of_four,
    maximum_achievable_x,
    pascal_row,
    pascal_triangle,
    poor_pigs,
    tribonacci,
)


def test_pascal_triangle_shape_and_rule():
    rows = pascal_triangle(7)
    assert [len(row) for row in rows] == list(range(1, 8))
    for row in rows:
        assert row[0] == row[-1] == 1
    for above, row in pairwise(rows):
        assert row[1:-1] == [a + b for a, b in pairwise(above)]


def test_pascal_triangle_empty_and_negative():
    assert pascal_triangle(0) == []
    with pytest.raises(ValueError):
        pascal_triangle(-1)


def test_pascal_triangle_last_row_matches_row():
    assert pascal_triangle(10)[-1] == pascal_row(9)


@pytest.mark.parametrize("index", [0, 1, 4, 12])
def test_pascal_row_binomials(index):
    row = pascal_row(index)
    assert row == [math.comb(index, k) for k in range(index + 1)]
    assert sum(row) == 2**index
    assert row == row[::-1]


def test_pascal_row_negative():
    with pytest.raises(ValueError):
        pascal_row(-3)


@pytest.mark.parametrize("power", range(8))
def test_is_power_of_four_true(power):
    assert is_power_of_four(4**power)


@pytest.mark.parametrize("n", [0, -4, 2, 8, 32, 12])
def test_is_power_of_four_false(n):
    assert not is_power_of_four(n)


def test_integer_break_small_cases():
    assert integer_break(2) == 1
    assert integer_break(3) == 2
    assert integer_break(10) == 36


def test_integer_break_beats_keeping_whole():
    values = [integer_break(n) for n in range(4, 20)]
    assert all(a <= b for a, b in pairwise(values))
    assert all(integer_break(n) >= n for n in range(4, 20))


def test_poor_pigs_examples():
    assert poor_pigs(1000, 15, 60) == 5
    assert poor_pigs(4, 15, 15) == 2
    assert poor_pigs(1, 15, 15) == 0


@pytest.mark.parametrize(
    "buckets, die, test", [(125, 1, 4), (126, 1, 4), (1000, 15, 60), (2, 10, 10)]
)
def test_poor_pigs_is_minimal(buckets, die, test):
    states = test // die + 1
    pigs = poor_pigs(buckets, die, test)
    assert states**pigs >= buckets
    assert states ** (pigs - 1) < buckets


def test_poor_pigs_without_time():
    with pytest.raises(ValueError):
        poor_pigs(4, 30, 15)


def test_tribonacci_start_and_recurrence():
    assert [tribonacci(n) for n in range(3)] == [0, 1, 1]
    for n in range(3, 30):
        assert tribonacci(n) == tribonacci(n - 1) + tribonacci(n - 2) + tribonacci(n - 3)


def test_tribonacci_negative():
    with pytest.raises(ValueError):
        tribonacci(-1)


def test_count_symmetric_integers():
    assert count_symmetric_integers(1, 100) == 9


def test_count_symmetric_integers_is_additive():
    whole = count_symmetric_integers(1, 3000)
    assert whole == count_symmetric_integers(1, 1500) + count_symmetric_integers(
        1501, 3000
    )
    assert count_symmetric_integers(100, 999) == 0


@pytest.mark.parametrize("x", [0, 7, 121, 1221, 12321, 1000000001])
def test_is_palindrome_true(x):
    assert is_palindrome(x)


@pytest.mark.parametrize("x", [-121, 10, 123, 1000021])
def test_is_palindrome_false(x):
    assert not is_palindrome(x)


def test_maximum_achievable_x():
    assert maximum_achievable_x(17, 0) == 17
    for t in range(5):
        assert maximum_achievable_x(3, t + 1) - maximum_achievable_x(3, t) == 2