"""Singly-linked sequence with duplicate suppression."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Hashable, Iterator


@dataclass(slots=True)
class _Node[T]:
    data: T
    next: _Node[T] | None = None


class LinkedList[T: Hashable]:
    """A singly-linked list that holds each value at most once.

    Insertion at either end and removal from the head are O(1). Membership
    is answered from a side set, so it is O(1) as well.

    Inserting a value that is already present is a no-op; the `add_*`
    methods report whether the value was actually inserted.
    """

    __slots__ = ("_head", "_members", "_tail")

    def __init__(self) -> None:
        self._head: _Node[T] | None = None
        self._tail: _Node[T] | None = None
        self._members: set[T] = set()

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def __len__(self) -> int:
        return len(self._members)

    def __bool__(self) -> bool:
        return self._head is not None

    def __contains__(self, value: object) -> bool:
        return value in self._members

    def __iter__(self) -> Iterator[T]:
        current = self._head
        while current is not None:
            yield current.data
            current = current.next

    def add_first(self, value: T) -> bool:
        """Insert `value` at the head unless it is already present.

        Returns:
            True if the value was inserted, False if it was suppressed.

        """
        if value in self._members:
            return False
        node = _Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._members.add(value)
        return True

    def add_last(self, value: T) -> bool:
        """Insert `value` at the tail unless it is already present.

        Returns:
            True if the value was inserted, False if it was suppressed.

        """
        if value in self._members:
            return False
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._members.add(value)
        return True

    def remove_first(self) -> T:
        """Remove and return the value at the head.

        Raises:
            IndexError: If the list is empty.

        """
        if self._head is None:
            msg = "remove_first from an empty LinkedList"
            raise IndexError(msg)
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._members.discard(node.data)
        return node.data

    def peek_first(self) -> T:
        """Return the value at the head without removing it."""
        if self._head is None:
            msg = "peek_first on an empty LinkedList"
            raise IndexError(msg)
        return self._head.data

    def peek_last(self) -> T:
        """Return the value at the tail without removing it."""
        if self._tail is None:
            msg = "peek_last on an empty LinkedList"
            raise IndexError(msg)
        return self._tail.data
