"""Solutions to data structure design problems."""

from __future__ import annotations

import heapq
import math
from collections import defaultdict
from collections.abc import Sequence

_EMPTY_MIN = 2**31 - 1


class MinStack:
    """A stack that reports its minimum in constant time."""

    def __init__(self) -> None:
        self._min = _EMPTY_MIN
        self._items: list[tuple[int, int]] = []

    def push(self, val: int) -> None:
        self._min = min(self._min, val)
        self._items.append((val, self._min))

    def pop(self) -> None:
        """Drop the top value; does nothing on an empty stack."""
        if self._items:
            self._items.pop()
        self._min = self._items[-1][1] if self._items else _EMPTY_MIN

    def top(self) -> int:
        """Return the top value; raises IndexError on an empty stack."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1][0]

    def get_min(self) -> int:
        """Return the smallest value held, or 2**31 - 1 when empty."""
        return self._min


class FoodRatings:
    """Tracks food ratings and the best rated food of each cuisine."""

    def __init__(
        self, foods: Sequence[str], cuisines: Sequence[str], ratings: Sequence[int]
    ) -> None:
        self._heaps: defaultdict[str, list[tuple[int, str]]] = defaultdict(list)
        self._cuisine_of: dict[str, str] = {}
        self._rating_of: dict[str, int] = {}
        for food, cuisine, rating in zip(foods, cuisines, ratings):
            heapq.heappush(self._heaps[cuisine], (-rating, food))
            self._cuisine_of[food] = cuisine
            self._rating_of[food] = rating

    def change_rating(self, food: str, new_rating: int) -> None:
        self._rating_of[food] = new_rating
        heapq.heappush(self._heaps[self._cuisine_of[food]], (-new_rating, food))

    def highest_rated(self, cuisine: str) -> str:
        """Best rated food of a cuisine; ties go to the lexicographically smallest."""
        if cuisine not in self._heaps:
            raise KeyError(cuisine)
        heap = self._heaps[cuisine]
        while heap:
            negated, food = heap[0]
            if self._rating_of[food] == -negated:
                return food
            heapq.heappop(heap)
        raise LookupError(f"no food left for cuisine {cuisine!r}")


def _gain(passed: int, total: int) -> float:
    return (total - passed) / (total * (total + 1.0))


def max_average_ratio(classes: Sequence[Sequence[int]], extra_students: int) -> float:
    """Best average pass ratio after assigning extra students who always pass."""
    heap = [(-_gain(p, t), -p, -t) for p, t in classes]
    heapq.heapify(heap)
    for _ in range(extra_students):
        _, neg_p, neg_t = heapq.heappop(heap)
        p, t = 1 - neg_p, 1 - neg_t
        heapq.heappush(heap, (-_gain(p, t), -p, -t))
    return math.fsum(p / t for _, p, t in heap) / len(classes)