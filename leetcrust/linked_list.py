"""Singly linked list nodes used by list problems."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class ListNode:
    """A node of a singly linked list."""

    val: int
    next: ListNode | None = None


def to_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def from_list(node: ListNode | None) -> list[int]:
    """Collect the values of a linked list in order."""
    values = []
    while node is not None:
        values.append(node.val)
        node = node.next
    return values