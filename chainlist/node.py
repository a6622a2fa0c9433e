"""Singly linked node type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(eq=False)
class Node:
    """One element of a singly linked chain.

    Nodes compare by identity, so chains that loop back on themselves can
    still be compared and walked safely by cycle-aware code.
    """

    data: int
    next: Optional["Node"] = None

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the chain."""
        node: Optional[Node] = self
        while node is not None:
            yield node.data
            node = node.next