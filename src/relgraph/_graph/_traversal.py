"""Traversal algorithms over an ordered neighbor function.

Every function here is pure: the roots, the neighbor function and the
visited record are passed explicitly, and nothing outlives the call.
`neighbors` must return a vertex's neighbors in ascending order.

Roots are expanded one at a time, in the order given. A root that an
earlier root's traversal already reached is skipped, so the expansions of
two roots never interleave.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from relgraph._collections import DedupQueue, DedupStack

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

type NeighborFn[T] = Callable[[T], Sequence[T]]


class TraversalDepthError(RecursionError):
    """A recursive traversal ran past the interpreter recursion limit."""


@dataclass(slots=True)
class Visited[T]:
    """Vertices in the order they were visited, with O(1) membership.

    Attributes:
        order: Visited vertices, first visit first.

    """

    order: list[T] = field(default_factory=list)
    _seen: set[T] = field(default_factory=set)

    def add(self, vertex: T) -> bool:
        """Record a visit. Returns False if `vertex` was already visited."""
        if vertex in self._seen:
            return False
        self._seen.add(vertex)
        self.order.append(vertex)
        return True

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._seen

    def __len__(self) -> int:
        return len(self.order)


def iterative_breadth_first[T](roots: Iterable[T], neighbors: NeighborFn[T]) -> list[T]:
    """Breadth-first traversal driven by a `DedupQueue`."""
    visited: Visited[T] = Visited()
    queue: DedupQueue[T] = DedupQueue()
    for root in roots:
        if root in visited:
            continue
        queue.enqueue(root)
        while queue:
            current = queue.dequeue()
            if not visited.add(current):
                continue
            for neighbor in neighbors(current):
                if neighbor not in visited:
                    queue.enqueue(neighbor)
    return visited.order


def iterative_depth_first[T](roots: Iterable[T], neighbors: NeighborFn[T]) -> list[T]:
    """Depth-first traversal driven by a `DedupStack`.

    Neighbors are pushed in descending order so the smallest is popped
    first. A neighbor that is already waiting on the stack keeps its place
    instead of moving to the top.
    """
    visited: Visited[T] = Visited()
    stack: DedupStack[T] = DedupStack()
    for root in roots:
        if root in visited:
            continue
        stack.push(root)
        while stack:
            current = stack.pop()
            if not visited.add(current):
                continue
            for neighbor in reversed(neighbors(current)):
                if neighbor not in visited:
                    stack.push(neighbor)
    return visited.order


def _drain_level[T](queue: DedupQueue[T], visited: Visited[T], neighbors: NeighborFn[T]) -> None:
    # One call per BFS level; the next level is what this call leaves queued.
    if not queue:
        return
    for _ in range(len(queue)):
        current = queue.dequeue()
        if not visited.add(current):
            continue
        for neighbor in neighbors(current):
            if neighbor not in visited:
                queue.enqueue(neighbor)
    _drain_level(queue, visited, neighbors)


def recursive_breadth_first[T](roots: Iterable[T], neighbors: NeighborFn[T]) -> list[T]:
    """Breadth-first traversal that drains its queue recursively.

    Produces the same sequence as `iterative_breadth_first`.

    Raises:
        TraversalDepthError: If the graph has more levels than the recursion limit allows.

    """
    visited: Visited[T] = Visited()
    queue: DedupQueue[T] = DedupQueue()
    for root in roots:
        if root in visited:
            continue
        queue.enqueue(root)
        try:
            _drain_level(queue, visited, neighbors)
        except RecursionError as e:
            msg = f"Recursive breadth-first search from root {root!r} exceeded the recursion limit"
            raise TraversalDepthError(msg) from e
    return visited.order


def _visit[T](current: T, visited: Visited[T], neighbors: NeighborFn[T]) -> None:
    visited.add(current)
    for neighbor in neighbors(current):
        if neighbor not in visited:
            _visit(neighbor, visited, neighbors)


def recursive_depth_first[T](roots: Iterable[T], neighbors: NeighborFn[T]) -> list[T]:
    """Pre-order depth-first traversal using call recursion.

    Raises:
        TraversalDepthError: If a path is deeper than the recursion limit allows.

    """
    visited: Visited[T] = Visited()
    for root in roots:
        if root in visited:
            continue
        try:
            _visit(root, visited, neighbors)
        except RecursionError as e:
            msg = f"Recursive depth-first search from root {root!r} exceeded the recursion limit"
            raise TraversalDepthError(msg) from e
    return visited.order


def reachable[T](start: T, neighbors: NeighborFn[T]) -> list[T]:
    """Vertices reachable from `start` along outgoing edges, `start` first."""
    return iterative_depth_first([start], neighbors)
