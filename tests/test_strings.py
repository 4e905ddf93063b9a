import pytest

from leetcrust.solutions.strings import (
    can_construct,
    compare_version,
    count_palindromic_subsequence,
    is_palindrome,
    longest_diverse_string,
    remove_subfolders,
    string_matching,
)


@pytest.mark.parametrize(
    "s, expected",
    [
        ("A man, a plan, a canal: Panama", True),
        ("race a car", False),
        (" ", True),
        ("a.", True),
    ],
)
def test_is_palindrome(s, expected):
    assert is_palindrome(s) is expected


@pytest.mark.parametrize(
    "folder, expected",
    [
        (["/a", "/a/b", "/c/d", "/c/d/e", "/c/f"], ["/a", "/c/d", "/c/f"]),
        (["/a", "/a/b/c", "/a/b/d"], ["/a"]),
        (["/a/b/c", "/a/b/ca", "/a/b/d"], ["/a/b/c", "/a/b/ca", "/a/b/d"]),
    ],
)
def test_remove_subfolders(folder, expected):
    assert remove_subfolders(folder) == expected


@pytest.mark.parametrize(
    "s, k, expected",
    [("annabelle", 2, True), ("leetcode", 3, False), ("true", 4, True)],
)
def test_can_construct(s, k, expected):
    assert can_construct(s, k) is expected


def test_longest_diverse_string_example():
    assert longest_diverse_string(7, 1, 0) == "aabaa"


@pytest.mark.parametrize("a, b, c", [(1, 1, 7), (2, 2, 1), (0, 0, 0)])
def test_longest_diverse_string_invariants(a, b, c):
    result = longest_diverse_string(a, b, c)
    assert result.count("a") <= a
    assert result.count("b") <= b
    assert result.count("c") <= c
    for letter in "abc":
        assert letter * 3 not in result


@pytest.mark.parametrize(
    "words, expected",
    [
        (["mass", "as", "hero", "superhero"], ["as", "hero"]),
        (["leetcode", "et", "code"], ["et", "code"]),
        (["blue", "green", "bu"], []),
    ],
)
def test_string_matching(words, expected):
    assert string_matching(words) == expected


@pytest.mark.parametrize(
    "version1, version2, expected",
    [
        ("1.2", "1.10", -1),
        ("1.01", "1.001", 0),
        ("1.0", "1.0.0.0", 0),
        ("1.0.1", "1", 1),
    ],
)
def test_compare_version(version1, version2, expected):
    assert compare_version(version1, version2) == expected
    assert compare_version(version2, version1) == -expected


@pytest.mark.parametrize(
    "s, expected",
    [("aabca", 3), ("adc", 0), ("bbcbaba", 4)],
)
def test_count_palindromic_subsequence(s, expected):
    assert count_palindromic_subsequence(s) == expected