"""Dedup-aware linear collections used as traversal frontiers.

This module contains:
- LinkedList[T]: A singly-linked sequence that never holds a value twice
- DedupQueue[T]: FIFO frontier for breadth-first traversal
- DedupStack[T]: LIFO frontier for depth-first traversal
"""

from ._frontier import DedupQueue, DedupStack
from ._linked_list import LinkedList

__all__ = ["DedupQueue", "DedupStack", "LinkedList"]
