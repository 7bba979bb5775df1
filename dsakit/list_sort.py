"""Merging and sorting of singly linked lists."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from dsakit.nodes import ListNode


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list.

    On equal values the node from ``list2`` comes first.
    """
    dummy = ListNode(-1)
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next = list1
            list1 = list1.next
        else:
            tail.next = list2
            list2 = list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def _merge(left: Optional[ListNode], right: Optional[ListNode]) -> Optional[ListNode]:
    """Merge two sorted lists, taking from ``left`` on equal values."""
    dummy = ListNode(0)
    tail = dummy
    while left is not None and right is not None:
        if left.val <= right.val:
            tail.next = left
            left = left.next
        else:
            tail.next = right
            right = right.next
        tail = tail.next
    tail.next = left if left is not None else right
    return dummy.next


def merge_k_lists(lists: Sequence[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge any number of sorted lists by pairwise divide and conquer."""

    def merge_range(start: int, end: int) -> Optional[ListNode]:
        if start > end:
            return None
        if start == end:
            return lists[start]
        mid = start + (end - start) // 2
        return _merge(merge_range(start, mid), merge_range(mid + 1, end))

    if not lists:
        return None
    return merge_range(0, len(lists) - 1)


def insertion_sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort the list by insertion and return its new head."""
    dummy = ListNode(0)
    curr = head
    while curr is not None:
        following = curr.next
        prev = dummy
        while prev.next is not None and prev.next.val < curr.val:
            prev = prev.next
        curr.next = prev.next
        prev.next = curr
        curr = following
    return dummy.next


def sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort the list by merge sort and return its new head."""
    if head is None or head.next is None:
        return head
    before_middle = head
    slow: ListNode = head
    fast: Optional[ListNode] = head
    while fast is not None and fast.next is not None:
        before_middle = slow
        slow = slow.next
        fast = fast.next.next
    before_middle.next = None
    return _merge(sort_list(head), sort_list(slow))