"""Operations that restructure a singly linked list."""

from __future__ import annotations

from typing import Optional

from dsakit.nodes import ListNode


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Remove the ``n``-th node counted from the end and return the head."""
    if n < 1:
        raise ValueError("n must be at least 1")
    dummy = ListNode(0, head)
    first: Optional[ListNode] = dummy
    for _ in range(n + 1):
        if first is None:
            raise ValueError("n is larger than the length of the list")
        first = first.next
    second = dummy
    while first is not None:
        first = first.next
        second = second.next
    second.next = second.next.next
    return dummy.next


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop repeated values from a sorted list, keeping one of each."""
    node = head
    while node is not None:
        while node.next is not None and node.val == node.next.val:
            node.next = node.next.next
        node = node.next
    return head


def remove_elements(head: Optional[ListNode], val: int) -> Optional[ListNode]:
    """Remove every node whose value equals ``val`` and return the head."""
    while head is not None and head.val == val:
        head = head.next
    node = head
    while node is not None and node.next is not None:
        if node.next.val == val:
            node.next = node.next.next
        else:
            node = node.next
    return head


def swap_pairs(head: Optional[ListNode]) -> Optional[ListNode]:
    """Swap every two adjacent nodes and return the new head."""
    dummy = ListNode(0, head)
    prev = dummy
    while prev.next is not None and prev.next.next is not None:
        first = prev.next
        second = first.next
        first.next = second.next
        second.next = first
        prev.next = second
        prev = first
    return dummy.next


def odd_even_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Group nodes at odd positions before those at even positions."""
    if head is None or head.next is None:
        return head
    odd = head
    even = even_head = head.next
    while even is not None and even.next is not None:
        odd.next = odd.next.next
        even.next = even.next.next
        odd = odd.next
        even = even.next
    odd.next = even_head
    return head


def reorder_list(head: Optional[ListNode]) -> None:
    """Reorder L0, L1, ..., Ln into L0, Ln, L1, Ln-1, ... in place."""
    if head is None or head.next is None or head.next.next is None:
        return
    nodes = list(head)
    pointer = head
    for _ in range(len(nodes) // 2):
        element = nodes.pop()
        element.next = pointer.next
        pointer.next = element
        pointer = element.next
    pointer.next = None


def merge_nodes(head: Optional[ListNode]) -> Optional[ListNode]:
    """Replace each run between zeros with a node holding its sum.

    The list starts with a zero; values after the last zero are dropped.
    """
    if head is None:
        return head
    slow: Optional[ListNode] = head
    last: Optional[ListNode] = None
    total = 0
    fast = head.next
    while fast is not None:
        if fast.val != 0:
            total += fast.val
        else:
            slow.val = total
            last = slow
            slow = slow.next
            total = 0
        fast = fast.next
    if last is None:
        raise ValueError("list has no zero after its head")
    last.next = None
    return head