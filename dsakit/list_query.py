"""Questions answered by walking singly linked lists."""

from __future__ import annotations

from typing import Optional

from dsakit.nodes import ListNode, to_values


def _length(head: Optional[ListNode]) -> int:
    return 0 if head is None else sum(1 for _ in head)


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both lists, or None."""
    len_a = _length(head_a)
    len_b = _length(head_b)
    while len_a > len_b:
        head_a = head_a.next
        len_a -= 1
    while len_b > len_a:
        head_b = head_b.next
        len_b -= 1
    while head_a is not head_b:
        head_a = head_a.next
        head_b = head_b.next
    return head_a


def is_palindrome_list(head: Optional[ListNode]) -> bool:
    """Tell whether the list's values read the same in both directions."""
    if head is None or head.next is None:
        return True
    first_half: list[int] = []
    slow: Optional[ListNode] = head
    fast: Optional[ListNode] = head
    while fast is not None and fast.next is not None:
        first_half.append(slow.val)
        slow = slow.next
        fast = fast.next.next
    if fast is not None:
        slow = slow.next
    while first_half and slow is not None:
        if first_half.pop() != slow.val:
            return False
        slow = slow.next
    return True


def add_two_numbers(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored most significant digit first."""
    digits1 = to_values(l1)
    digits2 = to_values(l2)
    carry = 0
    head: Optional[ListNode] = None
    while digits1 or digits2 or carry:
        total = carry
        if digits1:
            total += digits1.pop()
        if digits2:
            total += digits2.pop()
        carry, digit = divmod(total, 10)
        head = ListNode(digit, head)
    return head


def next_larger_nodes(head: Optional[ListNode]) -> list[int]:
    """For each node, the value of the first later node that is larger, else 0."""
    values = to_values(head)
    answer = [0] * len(values)
    pending: list[int] = []
    for index, value in enumerate(values):
        while pending and value > values[pending[-1]]:
            answer[pending.pop()] = value
        pending.append(index)
    return answer


def nodes_between_critical_points(head: Optional[ListNode]) -> list[int]:
    """Return the minimum and maximum distance between critical points.

    A critical point is a local maximum or minimum. With fewer than two
    critical points the answer is ``[-1, -1]``.
    """
    values = to_values(head)
    critical = [
        index
        for index, (prev, curr, nxt) in enumerate(
            zip(values, values[1:], values[2:]), start=1
        )
        if (curr > prev and curr > nxt) or (curr < prev and curr < nxt)
    ]
    if len(critical) < 2:
        return [-1, -1]
    min_distance = min(b - a for a, b in zip(critical, critical[1:]))
    return [min_distance, critical[-1] - critical[0]]