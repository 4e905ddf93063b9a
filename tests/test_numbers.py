import pytest

from leetcrust.solutions.numbers import (
    get_no_zero_integers,
    has_zero,
    maximum69_number,
    replace_non_coprimes,
    sum_zero,
)


@pytest.mark.parametrize(
    "n, expected",
    [(5, [-2, -1, 1, 2, 0]), (3, [-1, 0, 1]), (1, [0])],
)
def test_sum_zero(n, expected):
    assert sorted(sum_zero(n)) == sorted(expected)


@pytest.mark.parametrize("n", [2, 4, 7, 10])
def test_sum_zero_invariants(n):
    result = sum_zero(n)
    assert len(result) == n
    assert len(set(result)) == n
    assert sum(result) == 0


@pytest.mark.parametrize("n, expected", [(2, [1, 1]), (11, [2, 9])])
def test_get_no_zero_integers(n, expected):
    assert get_no_zero_integers(n) == expected


@pytest.mark.parametrize("n", [101, 1010, 10000, 9999])
def test_get_no_zero_integers_invariant(n):
    a, b = get_no_zero_integers(n)
    assert a + b == n
    assert "0" not in str(a) and "0" not in str(b)


@pytest.mark.parametrize("value", [9001, 1061, 1650, 401])
def test_has_zero_true(value):
    assert has_zero(value)


@pytest.mark.parametrize("value", [9221, 1])
def test_has_zero_false(value):
    assert not has_zero(value)


@pytest.mark.parametrize("num, expected", [(9669, 9969), (9996, 9999), (9999, 9999)])
def test_maximum69_number(num, expected):
    assert maximum69_number(num) == expected


@pytest.mark.parametrize(
    "nums, expected",
    [
        ([6, 4, 3, 2, 7, 6, 2], [12, 7, 6]),
        ([2, 2, 1, 1, 3, 3, 3], [2, 1, 1, 3]),
        ([2, 6], [6]),
    ],
)
def test_replace_non_coprimes(nums, expected):
    assert replace_non_coprimes(nums) == expected