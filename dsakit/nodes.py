"""Singly linked list nodes and basic operations on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list. Nodes compare by identity."""

    val: int = 0
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[ListNode]:
        """Yield this node and every node that follows it."""
        node: Optional[ListNode] = self
        while node is not None:
            yield node
            node = node.next


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; None when empty."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of the list starting at ``head``."""
    if head is None:
        return []
    return [node.val for node in head]


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    prev: Optional[ListNode] = None
    curr = head
    while curr is not None:
        curr.next, prev, curr = prev, curr, curr.next
    return prev


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list without access to the head.

    The node must not be the last one in the list.
    """
    if node.next is None:
        raise ValueError("cannot delete the last node of a list")
    node.val = node.next.val
    node.next = node.next.next