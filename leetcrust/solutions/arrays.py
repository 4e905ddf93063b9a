"""Solutions to array and grid problems."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate


def max_area(height: Sequence[int]) -> int:
    """Largest amount of water held between two of the vertical lines."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, (right - left) * min(height[left], height[right]))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def minimum_total(triangle: Sequence[Sequence[int]]) -> int:
    """Minimum path sum from the top of the triangle to its bottom row."""
    minimal = [triangle[0][0]]
    for row in triangle[1:]:
        size = len(minimal)
        minimal.append(minimal[-1] + row[size])
        for j in range(size - 1, 0, -1):
            minimal[j] = row[j] + min(minimal[j], minimal[j - 1])
        minimal[0] += row[0]
    return min(minimal)


def max_profit(prices: Sequence[int]) -> int:
    """Best profit with any number of buy and sell transactions."""
    return sum(max(0, after - before) for before, after in zip(prices, prices[1:]))


def count_servers(grid: Sequence[Sequence[int]]) -> int:
    """Number of servers sharing a row or a column with another server."""
    rows = [sum(1 for cell in row if cell == 1) for row in grid]
    cols = [sum(1 for cell in column if cell == 1) for column in zip(*grid)]
    total = sum(count for count in rows if count >= 2)
    total += sum(
        1
        for row, row_count in zip(grid, rows)
        if row_count == 1
        for cell, col_count in zip(row, cols)
        if cell == 1 and col_count >= 2
    )
    return total


def longest_consecutive(nums: Sequence[int]) -> int:
    """Length of the longest run of consecutive integers found in ``nums``."""
    values = set(nums)
    best = 0
    for value in values:
        if value - 1 in values:
            continue
        end = value
        while end + 1 in values:
            end += 1
        best = max(best, end - value + 1)
    return best


def can_complete_circuit(gas: Sequence[int], cost: Sequence[int]) -> int:
    """Index of the station from which the whole circuit can be driven, or -1."""
    start = 0
    fuel = 0
    total = 0
    for index, (refill, spend) in enumerate(zip(gas, cost)):
        delta = refill - spend
        total += delta
        fuel += delta
        if fuel < 0:
            fuel = 0
            start = index + 1
    return -1 if total < 0 else start


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """All distinct triplets summing to zero, in ascending order."""
    ordered = sorted(nums)
    n = len(ordered)
    output: list[list[int]] = []
    for i in range(n - 2):
        if i > 0 and ordered[i] == ordered[i - 1]:
            continue
        j, k = i + 1, n - 1
        while j < k:
            total = ordered[i] + ordered[j] + ordered[k]
            if total < 0:
                j += 1
            elif total > 0:
                k -= 1
            else:
                output.append([ordered[i], ordered[j], ordered[k]])
                j += 1
                k -= 1
                while j < k and ordered[j] == ordered[j - 1]:
                    j += 1
                while j < k < n - 1 and ordered[k] == ordered[k + 1]:
                    k -= 1
    return output


def majority_element(nums: Sequence[int]) -> int:
    """The element appearing more than half of the time (Boyer-Moore vote)."""
    count = 0
    candidate = 0
    for value in nums:
        if count == 0:
            candidate, count = value, 1
        elif value == candidate:
            count += 1
        else:
            count -= 1
    return candidate


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Indices of two numbers adding up to ``target``; raises ValueError if none do."""
    first_index: dict[int, int] = {}
    for index, value in enumerate(nums):
        other = target - value
        if other in first_index:
            return [index, first_index[other]]
        first_index.setdefault(value, index)
    raise ValueError(f"no two numbers add up to {target}")


def grid_game(grid: Sequence[Sequence[int]]) -> int:
    """Points the second robot collects when the first plays to minimise them."""
    top, bottom = grid[0], grid[1]
    bottom_prefix = [0, *accumulate(bottom)]
    top_suffix = [*accumulate(reversed(top))][::-1] + [0]
    return min(
        max(bottom_prefix[i], top_suffix[i + 1]) for i in range(len(top))
    )


def ways_to_split_array(nums: Sequence[int]) -> int:
    """Number of split points where the left sum is at least the right sum."""
    total = sum(nums)
    return sum(
        1 for prefix in accumulate(nums[:-1]) if prefix >= total - prefix
    )


def min_operations(boxes: str) -> list[int]:
    """Moves needed to gather all balls in each box in turn."""
    balls = [char == "1" for char in boxes]
    right_balls = sum(balls)
    right_steps = sum(index for index, ball in enumerate(balls) if ball)
    left_balls = 0
    left_steps = 0
    result = []
    for ball in balls:
        if ball:
            right_balls -= 1
            left_balls += 1
        result.append(left_steps + right_steps)
        left_steps += left_balls
        right_steps -= right_balls
    return result


def max_score(s: str) -> int:
    """Best count of zeros on the left plus ones on the right over all splits."""
    score = s.count("1")
    best = 0
    for char in s[:-1]:
        score += -1 if char == "1" else 1
        best = max(best, score)
    return best