"""Adjacency list index built once from an edge sequence."""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ._edge import Edge

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AdjacencyIndex[T]:
    """Mapping from each source vertex to its outgoing neighbors.

    Neighbors keep the order in which their edges were supplied; they are
    not sorted here.

    Attributes:
        _neighbors: Mapping from source vertex to its destinations.

    """

    _neighbors: dict[T, tuple[T, ...]] = field(default_factory=dict)

    @classmethod
    def from_edges(cls, edges: Iterable[Edge[T]]) -> AdjacencyIndex[T]:
        """Build the index by appending each destination under its source.

        Example:
            >>> from relgraph import Edge
            >>> index = AdjacencyIndex.from_edges([Edge(1, 3), Edge(1, 2)])
            >>> index.neighbors(1)
            (3, 2)

        """
        neighbors: defaultdict[T, list[T]] = defaultdict(list)
        for edge in edges:
            neighbors[edge.source].append(edge.destination)

        index = cls(_neighbors={k: tuple(v) for k, v in neighbors.items()})
        logger.debug("Built adjacency index for %d source vertices", len(index._neighbors))
        return index

    def neighbors(self, vertex: T) -> tuple[T, ...]:
        """Get the destinations of edges leaving `vertex`.

        Returns:
            Destinations in edge order, or an empty tuple for a vertex
            without outgoing edges (including unknown vertices).

        """
        return self._neighbors.get(vertex, ())

    def sources(self) -> frozenset[T]:
        """Vertices with at least one outgoing edge."""
        return frozenset(self._neighbors)

    def __len__(self) -> int:
        """Return the number of indexed edges."""
        return sum(len(v) for v in self._neighbors.values())
