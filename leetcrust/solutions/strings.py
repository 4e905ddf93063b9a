"""Solutions to string problems."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Sequence
from itertools import zip_longest


def is_palindrome(s: str) -> bool:
    """Whether ``s`` reads the same both ways, ignoring case and non-alphanumerics."""
    cleaned = [char.lower() for char in s if char.isascii() and char.isalnum()]
    return cleaned == cleaned[::-1]


def remove_subfolders(folder: Sequence[str]) -> list[str]:
    """Drop every folder lying inside another folder of the list; result is sorted."""
    result: list[str] = []
    for path in sorted(folder):
        if result and path.startswith(result[-1] + "/"):
            continue
        result.append(path)
    return result


def can_construct(s: str, k: int) -> bool:
    """Whether all letters of ``s`` can be used to build exactly ``k`` palindromes."""
    counts = Counter(s)
    singles = sum(count % 2 for count in counts.values())
    pairs = sum(count // 2 for count in counts.values())
    if singles > k:
        return False
    return singles + 2 * pairs >= k


def longest_diverse_string(a: int, b: int, c: int) -> str:
    """A long string of at most a 'a', b 'b' and c 'c' with no letter thrice in a row."""
    # entries are (-count, -code) so that the largest count, then letter, comes first
    entries = sorted(
        ((count, letter) for count, letter in ((a, "a"), (b, "b"), (c, "c"))),
        reverse=True,
    )
    (first_count, first), second, third = entries
    first_count = min(first_count, (1 + second[0] + third[0]) << 1)
    heap = [(-count, -ord(letter)) for count, letter in ((first_count, first), second, third)]
    heapq.heapify(heap)

    last: str | None = None
    pieces: list[str] = []
    while heap:
        neg_count, neg_code = heapq.heappop(heap)
        count, letter = -neg_count, chr(-neg_code)
        if count <= 0:
            break
        amount = 1 if count == 1 else 2
        count -= amount

        neg_count2, neg_code2 = heapq.heappop(heap)
        count2, letter2 = -neg_count2 - 1, chr(-neg_code2)

        invert = last is not None and last == letter
        last = letter if invert else letter2

        main = letter * amount
        other = letter2 if count2 >= 0 else ""
        pieces.append(other + main if invert else main + other)

        heapq.heappush(heap, (-count2, -ord(letter2)))
        heapq.heappush(heap, (-count, -ord(letter)))
    return "".join(pieces)


def string_matching(words: Sequence[str]) -> list[str]:
    """Words that are substrings of some longer word of the list, in input order."""
    return [
        word
        for word in words
        if any(len(other) > len(word) and word in other for other in words)
    ]


def compare_version(version1: str, version2: str) -> int:
    """Compare two dotted version numbers: -1, 0 or 1."""
    parts1 = [int(part) for part in version1.split(".")]
    parts2 = [int(part) for part in version2.split(".")]
    for left, right in zip_longest(parts1, parts2, fillvalue=0):
        if left < right:
            return -1
        if left > right:
            return 1
    return 0


def count_palindromic_subsequence(s: str) -> int:
    """Number of distinct palindromic subsequences of length three."""
    left = {s[0]}
    right = Counter(s[1:])
    outers: dict[str, set[str]] = {}
    for middle in s[1:-1]:
        right[middle] -= 1
        if right[middle] == 0:
            del right[middle]
        outers.setdefault(middle, set()).update(left & right.keys())
        left.add(middle)
    return sum(len(found) for found in outers.values())