"""Merge sort over chains of :class:`~chainlist.node.Node`."""

from __future__ import annotations

from typing import Optional

from chainlist.node import Node


def split_at_mid(head: Optional[Node]) -> Optional[Node]:
    """Cut the chain at its middle and return the head of the right half.

    The left half keeps ``head``. A chain of fewer than two nodes is
    left whole, and its head is returned as is.
    """
    slow = fast = head
    prev: Optional[Node] = None
    while fast is not None and fast.next is not None:
        prev = slow
        slow = slow.next
        fast = fast.next.next
    if prev is not None:
        prev.next = None
    return slow


def merge(left: Optional[Node], right: Optional[Node]) -> Optional[Node]:
    """Merge two sorted chains into one and return its head.

    Equal values keep their order: those from ``left`` come first.
    """
    anchor = Node(0)
    last = anchor
    while left is not None and right is not None:
        if right.data < left.data:
            last.next, right = right, right.next
        else:
            last.next, left = left, left.next
        last = last.next
    last.next = left if left is not None else right
    return anchor.next


def merge_sort(head: Optional[Node]) -> Optional[Node]:
    """Sort the chain starting at ``head`` and return the new head."""
    if head is None or head.next is None:
        return head
    right = split_at_mid(head)
    return merge(merge_sort(head), merge_sort(right))