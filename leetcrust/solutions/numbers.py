"""Solutions to number problems."""

from __future__ import annotations

from math import gcd


def sum_zero(n: int) -> list[int]:
    """Return ``n`` distinct integers summing to zero."""
    half = n >> 1
    result = list(range(1, half + 1)) + list(range(-half, 0))
    if n % 2 != 0:
        result.append(0)
    return result


def has_zero(b: int) -> bool:
    """Whether the decimal form of ``b`` (1 to 9999) contains a zero digit.

    Only the last three digits of ``b`` are checked.
    """
    if b % 10 == 0:
        return True
    if b >= 100:
        if b % 100 < 10:
            return True
        if b >= 1000:
            return b % 1000 < 100
    return False


def get_no_zero_integers(n: int) -> list[int]:
    """Split ``n`` into two positive integers without any zero digit."""
    a = 1
    while a < 10000:
        if a == 1000:
            a += 111
        elif a % 100 == 0:
            a += 11
        elif a % 10 == 0:
            a += 1
        b = n - a
        if not has_zero(b):
            return [a, b]
        a += 1
    raise ValueError(f"no pair of zero-free integers sums to {n}")


def maximum69_number(num: int) -> int:
    """Turn the first 6 of ``num`` into a 9."""
    digits = str(num)
    position = digits.find("6")
    if position == -1:
        return num
    return num + 3 * 10 ** (len(digits) - 1 - position)


def replace_non_coprimes(nums: list[int]) -> list[int]:
    """Repeatedly merge adjacent non-coprime numbers into their least common multiple."""
    stack = [nums[0]]
    for value in nums[1:]:
        current = stack.pop()
        divisor = gcd(current, value)
        if divisor == 1:
            stack.extend((current, value))
            continue
        lcm = current // divisor * value
        while stack:
            previous = stack[-1]
            divisor = gcd(previous, lcm)
            if divisor == 1:
                break
            stack.pop()
            lcm *= previous // divisor
        stack.append(lcm)
    return stack