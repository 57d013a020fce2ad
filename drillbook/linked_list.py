"""Singly linked lists: building, walking, reversing and merging."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import pairwise


@dataclass(eq=False)
class ListNode:
    """One node of a singly linked list."""

    value: int
    next: ListNode | None = None

    def __repr__(self) -> str:
        return f"ListNode({self.value!r})"


def _iter_nodes(head: ListNode | None) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def from_values(values: Iterable[int]) -> ListNode | None:
    """Build a list holding ``values`` in order; None when there are none."""
    dummy = ListNode(0)
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def natural_list(n: int) -> ListNode | None:
    """Build the list ``1 -> 2 -> ... -> n``; None when ``n`` is zero."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    return from_values(range(1, n + 1))


def iter_values(head: ListNode | None) -> Iterator[int]:
    """Yield the values of the list starting at ``head``."""
    for node in _iter_nodes(head):
        yield node.value


def length(head: ListNode | None) -> int:
    """Number of nodes in the list starting at ``head``."""
    return sum(1 for _ in _iter_nodes(head))


def format_list(head: ListNode | None) -> str:
    """Render the list as its values, each followed by a space, then a full stop."""
    return "".join(f"{value} " for value in iter_values(head)) + "."


def reverse_by_storage(head: ListNode | None) -> ListNode | None:
    """Reverse the list by first collecting its nodes; return the new head."""
    nodes = list(_iter_nodes(head))
    if not nodes:
        return None
    for earlier, later in pairwise(nodes):
        later.next = earlier
    nodes[0].next = None
    return nodes[-1]


def reverse(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place, relinking as it goes; return the new head."""
    previous = None
    node = head
    while node is not None:
        following = node.next
        node.next = previous
        previous = node
        node = following
    return previous


def merge_two_lists(
    first: ListNode | None, second: ListNode | None
) -> ListNode | None:
    """Splice two sorted lists into one sorted list, reusing their nodes.

    On equal values the node from ``first`` comes first.
    """
    dummy = ListNode(0)
    tail = dummy
    while first is not None and second is not None:
        if first.value <= second.value:
            tail.next = first
            first = first.next
        else:
            tail.next = second
            second = second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return dummy.next