"""Small command-line walk-through of list operations."""

from __future__ import annotations

import argparse
from collections import deque
from typing import Iterable, Optional, Sequence

from chainlist.linked import LinkedList


def format_values(values: Iterable[int]) -> str:
    """Render values as ``a -> b -> NULL``."""
    return "".join(f"{value} -> " for value in values) + "NULL"


def _deque_demo() -> None:
    values: deque[int] = deque()
    for value in (4, 3, 2, 1, 0):
        values.appendleft(value)
    print(format_values(values))
    print(len(values))
    print(f"head = {values[0]}")
    print(f"tail = {values[-1]}")
    values.popleft()
    values.pop()
    print(format_values(values))


def _linked_demo() -> None:
    chain = LinkedList()
    for value in (6, 5, 4, 3):
        chain.push_front(value)
    print(chain)
    for value in (2, 1):
        chain.push_back(value)
    print(chain)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the chosen demonstration and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="chainlist", description="Show basic list operations."
    )
    parser.add_argument(
        "--demo",
        choices=("deque", "linked", "all"),
        default="all",
        help="which demonstration to run",
    )
    args = parser.parse_args(argv)
    if args.demo in ("deque", "all"):
        _deque_demo()
    if args.demo in ("linked", "all"):
        _linked_demo()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())