"""Solutions to text and bracket problems."""

from __future__ import annotations

from collections.abc import Sequence

_PAIRS = {")": "(", "}": "{", "]": "["}


def can_be_typed_words(text: str, broken_letters: str) -> int:
    """Number of words of ``text`` that avoid every broken letter."""
    broken = set(broken_letters)
    return sum(1 for word in text.split() if broken.isdisjoint(word))


def is_isomorphic(s: str, t: str) -> bool:
    """Whether the characters of ``s`` map one to one onto those of ``t``."""
    if len(s) != len(t):
        return False
    forward: dict[str, str] = {}
    backward: dict[str, str] = {}
    for source, target in zip(s, t):
        if source in forward:
            if forward[source] != target:
                return False
        elif target in backward:
            return False
        else:
            forward[source] = target
            backward[target] = source
    return True


def is_valid(s: str) -> bool:
    """Whether the brackets of ``s`` are balanced and well nested.

    Raises ValueError on a character that is not a bracket.
    """
    stack: list[str] = []
    for char in s:
        if char in "({[":
            stack.append(char)
        elif char in _PAIRS:
            if not stack or stack.pop() != _PAIRS[char]:
                return False
        else:
            raise ValueError(f"wrong input: {char!r}")
    return not stack


def can_be_valid(s: str, locked: str) -> bool:
    """Whether the unlocked parentheses can be flipped to make ``s`` valid."""
    if len(s) % 2 == 1:
        return False
    lowest, highest = 0, 0
    for char, lock in zip(s, locked):
        if lock == "0":
            lowest, highest = max(lowest - 1, 0), highest + 1
        elif char == "(":
            lowest, highest = lowest + 1, highest + 1
        elif highest == 0:
            return False
        else:
            lowest, highest = max(lowest - 1, 0), highest - 1
    return lowest == 0


def prefix_count(words: Sequence[str], pref: str) -> int:
    """Number of words starting with ``pref``."""
    return sum(1 for word in words if word.startswith(pref))


def shifting_letters(s: str, shifts: Sequence[Sequence[int]]) -> str:
    """Apply forward (1) or backward (0) shifts over index ranges of ``s``."""
    coefficients = [0] * (len(s) + 1)
    for start, end, direction in shifts:
        step = 1 if direction == 1 else 25
        coefficients[start] += step
        coefficients[end + 1] -= step

    base = ord("a")
    shifted = []
    total = 0
    for char, coefficient in zip(s, coefficients):
        total += coefficient
        shifted.append(chr((ord(char) + total - base) % 26 + base))
    return "".join(shifted)