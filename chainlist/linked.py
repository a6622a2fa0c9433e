"""A singly linked list with head and tail references."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from chainlist.node import Node


class LinkedList:
    """Singly linked list of integers.

    ``head`` and ``tail`` are public so that callers may splice nodes
    directly, for instance to build a cycle for :meth:`remove_cycle`.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Optional[Node] = None
        self.tail: Optional[Node] = None
        for value in values:
            self.push_back(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, value: int) -> None:
        """Add ``value`` before the current head."""
        node = Node(value, self.head)
        if self.head is None:
            self.tail = node
        self.head = node

    def push_back(self, value: int) -> None:
        """Add ``value`` after the current tail."""
        node = Node(value)
        if self.tail is None:
            self.head = self.tail = node
        else:
            self.tail.next = node
            self.tail = node

    def pop_front(self) -> int:
        """Remove and return the first value."""
        if self.head is None:
            raise IndexError("pop from empty list")
        node = self.head
        self.head = node.next
        node.next = None
        if self.head is None:
            self.tail = None
        return node.data

    def pop_back(self) -> int:
        """Remove and return the last value."""
        if self.head is None or self.tail is None:
            raise IndexError("pop from empty list")
        last = self.tail
        if self.head is last:
            self.head = self.tail = None
            return last.data
        node = self.head
        while node.next is not last:
            node = node.next
        node.next = None
        self.tail = node
        return last.data

    def insert(self, value: int, pos: int) -> None:
        """Insert ``value`` so that it ends up at index ``pos``."""
        if pos < 0:
            raise IndexError("position is invalid")
        if pos == 0:
            self.push_front(value)
            return
        prev = self.head
        for _ in range(pos - 1):
            if prev is None:
                break
            prev = prev.next
        if prev is None:
            raise IndexError("position is invalid")
        if prev is self.tail:
            self.push_back(value)
            return
        prev.next = Node(value, prev.next)

    def search(self, key: int) -> int:
        """Return the index of the first ``key``, or -1 if it is absent."""
        for index, value in enumerate(self):
            if value == key:
                return index
        return -1

    def search_recursive(self, key: int) -> int:
        """Recursive form of :meth:`search`, with the same result."""

        def find(node: Optional[Node]) -> int:
            if node is None:
                return -1
            if node.data == key:
                return 0
            index = find(node.next)
            return -1 if index == -1 else index + 1

        return find(self.head)

    def reverse(self) -> None:
        """Reverse the list in place."""
        prev: Optional[Node] = None
        curr = self.head
        self.tail = curr
        while curr is not None:
            following = curr.next
            curr.next = prev
            prev = curr
            curr = following
        self.head = prev

    def remove_nth_from_end(self, n: int) -> int:
        """Remove the ``n``-th node counted from the end (1 is the tail).

        Returns the removed value.
        """
        size = len(self)
        if not 1 <= n <= size:
            raise IndexError("position is invalid")
        if n == size:
            return self.pop_front()
        prev = self.head
        for _ in range(size - n - 1):
            prev = prev.next
        target = prev.next
        prev.next = target.next
        target.next = None
        if target is self.tail:
            self.tail = prev
        return target.data

    def _meeting_point(self) -> Optional[Node]:
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
            if slow is fast:
                return fast
        return None

    def has_cycle(self) -> bool:
        """Return whether following ``next`` links ever loops."""
        return self._meeting_point() is not None

    def remove_cycle(self) -> bool:
        """Break a cycle if there is one; return whether one was removed."""
        fast = self._meeting_point()
        if fast is None:
            return False
        slow = self.head
        if slow is fast:
            # The loop closes back onto the head.
            while fast.next is not slow:
                fast = fast.next
            last = fast
        else:
            last = fast
            while slow is not fast:
                slow = slow.next
                last = fast
                fast = fast.next
        last.next = None
        self.tail = last
        return True

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[int]:
        for node in self._nodes():
            yield node.data

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "NULL"