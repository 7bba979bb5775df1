"""Linked list nodes carrying an extra random pointer, and deep copying."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class RandomNode:
    """A list node with a pointer to any node of the list, or None."""

    val: int
    next: Optional[RandomNode] = None
    random: Optional[RandomNode] = None


def copy_random_list(head: Optional[RandomNode]) -> Optional[RandomNode]:
    """Return a deep copy of the list, random pointers included."""
    clones: dict[int, RandomNode] = {}
    node = head
    while node is not None:
        clones[id(node)] = RandomNode(node.val)
        node = node.next
    node = head
    while node is not None:
        clone = clones[id(node)]
        if node.next is not None:
            clone.next = clones[id(node.next)]
        if node.random is not None:
            clone.random = clones[id(node.random)]
        node = node.next
    return clones[id(head)] if head is not None else None