"""A singly linked list of integers with searching, reversal, cycle handling and merge sort."""

__version__ = "0.1.0"
__all__ = ["demo", "linked", "node", "sorting"]