import pytest

from leetcrust.solutions.text import (
    can_be_typed_words,
    can_be_valid,
    is_isomorphic,
    is_valid,
    prefix_count,
    shifting_letters,
)


@pytest.mark.parametrize(
    "text, broken, expected",
    [("hello world", "ad", 1), ("leet code", "lt", 1), ("leet code", "e", 0)],
)
def test_can_be_typed_words(text, broken, expected):
    assert can_be_typed_words(text, broken) == expected


@pytest.mark.parametrize(
    "s, t, expected",
    [("egg", "add", True), ("foo", "bar", False), ("paper", "title", True)],
)
def test_is_isomorphic(s, t, expected):
    assert is_isomorphic(s, t) is expected


def test_is_isomorphic_length_mismatch():
    assert is_isomorphic("ab", "abc") is False


@pytest.mark.parametrize(
    "s, expected",
    [("()", True), ("()[]{}", True), ("(]", False), ("([])", True), ("([)]", False)],
)
def test_is_valid(s, expected):
    assert is_valid(s) is expected


def test_is_valid_rejects_other_characters():
    with pytest.raises(ValueError):
        is_valid("(a)")


@pytest.mark.parametrize(
    "s, locked, expected",
    [
        ("))()))", "010100", True),
        ("()()", "0000", True),
        (")", "0", False),
        ("(((())(((())", "111111010111", True),
    ],
)
def test_can_be_valid(s, locked, expected):
    assert can_be_valid(s, locked) is expected


@pytest.mark.parametrize(
    "words, pref, expected",
    [
        (["pay", "attention", "practice", "attend"], "at", 2),
        (["leetcode", "win", "loops", "success"], "code", 0),
    ],
)
def test_prefix_count(words, pref, expected):
    assert prefix_count(words, pref) == expected


@pytest.mark.parametrize(
    "s, shifts, expected",
    [
        ("abc", [[0, 1, 0], [1, 2, 1], [0, 2, 1]], "ace"),
        ("dztz", [[0, 0, 0], [1, 1, 1]], "catz"),
    ],
)
def test_shifting_letters(s, shifts, expected):
    assert shifting_letters(s, shifts) == expected


def test_shifting_letters_round_trip():
    shifted = shifting_letters("hello", [[0, 4, 1], [1, 3, 1]])
    assert shifting_letters(shifted, [[0, 4, 0], [1, 3, 0]]) == "hello"