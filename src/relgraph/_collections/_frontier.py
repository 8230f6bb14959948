"""Queue and stack frontiers that ignore re-insertion of a waiting value."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._linked_list import LinkedList

if TYPE_CHECKING:
    from collections.abc import Hashable


class _Frontier[T: Hashable]:
    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: LinkedList[T] = LinkedList()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __contains__(self, value: object) -> bool:
        return value in self._items


class DedupQueue[T: Hashable](_Frontier[T]):
    """First-in first-out frontier.

    A value already waiting in the queue is not enqueued a second time.
    """

    __slots__ = ()

    def enqueue(self, value: T) -> bool:
        """Add `value` at the back. Returns False if it was already queued."""
        return self._items.add_last(value)

    def dequeue(self) -> T:
        """Remove and return the value at the front.

        Raises:
            IndexError: If the queue is empty.

        """
        return self._items.remove_first()


class DedupStack[T: Hashable](_Frontier[T]):
    """Last-in first-out frontier.

    A value already on the stack keeps its position; pushing it again is a
    no-op.
    """

    __slots__ = ()

    def push(self, value: T) -> bool:
        """Put `value` on top. Returns False if it was already on the stack."""
        return self._items.add_first(value)

    def pop(self) -> T:
        """Remove and return the top value.

        Raises:
            IndexError: If the stack is empty.

        """
        return self._items.remove_first()
