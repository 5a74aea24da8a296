"""Singly linked lists and merging of sorted lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


def build_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order; None when empty."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head: ListNode | None) -> list[int]:
    """Return the values of a linked list as a Python list."""
    return [] if head is None else list(head)


def merge_two_lists(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Splice two sorted lists into one sorted list.

    On equal values the node from ``l2`` comes first.
    """
    dummy = ListNode(0)
    tail = dummy
    while l1 is not None and l2 is not None:
        if l1.val < l2.val:
            tail.next, l1 = l1, l1.next
        else:
            tail.next, l2 = l2, l2.next
        tail = tail.next
    tail.next = l1 if l1 is not None else l2
    return dummy.next


def merge_k_lists(lists: Sequence[ListNode | None]) -> ListNode | None:
    """Merge any number of sorted lists by divide and conquer."""
    if not lists:
        return None

    def merge_range(start: int, end: int) -> ListNode | None:
        if start == end:
            return lists[start]
        if start + 1 == end:
            return merge_two_lists(lists[start], lists[end])
        mid = start + (end - start) // 2
        return merge_two_lists(merge_range(start, mid), merge_range(mid + 1, end))

    return merge_range(0, len(lists) - 1)