"""Directed graph over a totally ordered vertex domain."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from relgraph._config import RelgraphConfig
from relgraph._vertex import VertexTypeError, min_vertex, sort_vertices, vertex_key

from ._adjacency import AdjacencyIndex
from ._edge import Edge
from ._traversal import (
    iterative_breadth_first,
    iterative_depth_first,
    reachable,
    recursive_breadth_first,
    recursive_depth_first,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

logger = logging.getLogger(__name__)


class GraphValidationError(ValueError):
    """A graph failed validation on construction.

    Attributes:
        errors: One message per problem found.

    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__("Invalid graph: " + "; ".join(errors))


@dataclass(frozen=True, slots=True, init=False)
class Graph[T]:
    """An immutable directed graph with relation queries and traversals.

    Vertices are integers or integers encoded as text, ordered numerically.
    Self-loops and cycles are allowed; duplicate edges collapse.

    The adjacency index is built on construction. Every query afterwards is
    read-only and allocates its own working state, so a graph can be shared
    freely.

    Example:
        >>> graph = Graph({1, 2, 3}, {(1, 2), (2, 3)})
        >>> graph.roots()
        (1,)
        >>> graph.iterative_breadth_first_search()
        [1, 2, 3]

    """

    _vertices: tuple[T, ...] = field(compare=False)
    _edges: tuple[Edge[T], ...] = field(compare=False)
    _vertex_set: frozenset[T] = field(repr=False)
    _edge_set: frozenset[Edge[T]] = field(repr=False)
    _adjacency: AdjacencyIndex[T] = field(repr=False, compare=False)
    _config: RelgraphConfig = field(repr=False, compare=False)

    def __init__(
        self,
        vertices: Iterable[T],
        edges: Iterable[Edge[T] | tuple[T, T]],
        config: RelgraphConfig | None = None,
    ) -> None:
        """Build a graph and its adjacency index.

        Args:
            vertices: The vertex set. Duplicates collapse, first occurrence wins.
            edges: `Edge` objects or (source, destination) pairs.
            config: Behavior switches. Defaults to `RelgraphConfig()`.

        Raises:
            GraphValidationError: If `config.strict` is set and the graph is invalid.

        """
        vertex_tuple = tuple(dict.fromkeys(vertices))
        edge_tuple = tuple(dict.fromkeys(Edge.coerce(e) for e in edges))

        object.__setattr__(self, "_vertices", vertex_tuple)
        object.__setattr__(self, "_edges", edge_tuple)
        object.__setattr__(self, "_vertex_set", frozenset(vertex_tuple))
        object.__setattr__(self, "_edge_set", frozenset(edge_tuple))
        object.__setattr__(self, "_adjacency", AdjacencyIndex.from_edges(edge_tuple))
        object.__setattr__(self, "_config", config if config is not None else RelgraphConfig())

        logger.debug("Constructed graph with %d vertices and %d edges", len(vertex_tuple), len(edge_tuple))

        if self._config.strict:
            errors = self.validate()
            if errors:
                raise GraphValidationError(errors)

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Edge[T] | tuple[T, T]],
        vertices: Iterable[T] = (),
        config: RelgraphConfig | None = None,
    ) -> Graph[T]:
        """Build a graph whose vertex set also includes every edge endpoint.

        Example:
            >>> Graph.from_edges([(1, 2)], vertices=[3]).vertices
            (3, 1, 2)

        """
        edge_list = [Edge.coerce(e) for e in edges]
        all_vertices = [*vertices]
        for edge in edge_list:
            all_vertices.extend((edge.source, edge.destination))
        return cls(all_vertices, edge_list, config)

    @property
    def vertices(self) -> tuple[T, ...]:
        """All vertices, in the order they were supplied."""
        return self._vertices

    @property
    def edges(self) -> tuple[Edge[T], ...]:
        """All edges, in the order they were supplied."""
        return self._edges

    @property
    def config(self) -> RelgraphConfig:
        return self._config

    def neighbors(self, vertex: T) -> tuple[T, ...]:
        """Get the destinations of edges leaving `vertex`, in edge order."""
        return self._adjacency.neighbors(vertex)

    def indegree(self, vertex: T) -> int:
        """Count the edges whose destination is `vertex`."""
        return sum(1 for edge in self._edges if edge.destination == vertex)

    def validate(self) -> list[str]:
        """Validate the graph and return a list of error messages.

        Checks for:
        - Vertices outside the comparable domain
        - Edges whose endpoints are not in the vertex set

        Returns:
            List of error messages. Empty list if graph is valid.

        """
        errors: list[str] = []

        for vertex in self._vertices:
            try:
                vertex_key(vertex)
            except VertexTypeError as e:
                errors.append(f"Vertex {vertex!r} is not comparable: {e}")

        for edge in self._edges:
            missing = [v for v in dict.fromkeys((edge.source, edge.destination)) if v not in self._vertex_set]
            if missing:
                errors.append(
                    f"Edge {edge.source!r} -> {edge.destination!r} references unknown vertices: {missing}",
                )

        return errors

    # Relation predicates

    def is_reflexive(self) -> bool:
        """Check that every vertex has a self-loop."""
        return all(Edge(v, v) in self._edge_set for v in self._vertices)

    def is_symmetric(self) -> bool:
        """Check that every edge (s, d) has a reverse edge (d, s)."""
        return all(edge.reversed() in self._edge_set for edge in self._edges)

    def is_transitive(self) -> bool:
        """Check that edges (a, b) and (b, c) always imply an edge (a, c)."""
        for edge in self._edges:
            for target in self._adjacency.neighbors(edge.destination):
                if Edge(edge.source, target) not in self._edge_set:
                    return False
        return True

    def is_antisymmetric(self) -> bool:
        """Check that no edge between two distinct vertices has a reverse edge.

        Self-loops never violate antisymmetry.
        """
        return not any(not edge.is_self_loop and edge.reversed() in self._edge_set for edge in self._edges)

    def is_equivalence(self) -> bool:
        """Check whether the edges form an equivalence relation."""
        return self.is_reflexive() and self.is_symmetric() and self.is_transitive()

    # Equivalence classes and roots

    def equivalence_class(self, vertex: T) -> frozenset[T]:
        """Get the equivalence class containing `vertex`.

        Equivalence classes only exist when the whole graph is an
        equivalence relation. Otherwise, and for vertices not in the graph,
        the result is empty.

        Args:
            vertex: The vertex to query.

        Returns:
            Every vertex reachable from `vertex`, `vertex` included.

        """
        if vertex not in self._vertex_set or not self.is_equivalence():
            return frozenset()
        return frozenset(reachable(vertex, self.neighbors))

    def equivalence_classes(self) -> list[frozenset[T]]:
        """Get every equivalence class, ordered by smallest member.

        Returns:
            The partition of the vertex set, or an empty list when the graph
            is not an equivalence relation.

        """
        if not self.is_equivalence():
            return []

        classes: list[frozenset[T]] = []
        covered: set[T] = set()
        # In ascending order, the first uncovered vertex is always its class minimum
        for vertex in sort_vertices(self._vertices):
            if vertex in covered:
                continue
            members = frozenset(reachable(vertex, self.neighbors))
            covered.update(members)
            classes.append(members)
        return classes

    def roots(self) -> tuple[T, ...]:
        """Get the vertices traversals start from, in ascending order.

        A root is either a vertex no edge points to, or, when the graph is an
        equivalence relation, the smallest member of an equivalence class.

        Returns:
            Roots sorted by the numeric vertex order, without duplicates.

        """
        indegree = dict.fromkeys(self._vertices, 0)
        for edge in self._edges:
            if edge.destination in indegree:
                indegree[edge.destination] += 1

        roots = {vertex for vertex, count in indegree.items() if count == 0}
        roots.update(min_vertex(members) for members in self.equivalence_classes())

        ordered = tuple(sort_vertices(roots))
        logger.debug("Selected %d roots: %r", len(ordered), ordered)
        return ordered

    # Traversals

    def iterative_breadth_first_search(self) -> list[T]:
        """Visit every vertex reachable from the roots, level by level, using a queue."""
        return self._traverse(iterative_breadth_first, "iterative breadth-first")

    def iterative_depth_first_search(self) -> list[T]:
        """Visit every vertex reachable from the roots, deepest first, using a stack."""
        return self._traverse(iterative_depth_first, "iterative depth-first")

    def recursive_breadth_first_search(self) -> list[T]:
        """Same order as `iterative_breadth_first_search`, draining the queue recursively.

        Raises:
            TraversalDepthError: If the graph has too many levels for the recursion limit.

        """
        return self._traverse(recursive_breadth_first, "recursive breadth-first")

    def recursive_depth_first_search(self) -> list[T]:
        """Visit every vertex reachable from the roots in recursive pre-order.

        Raises:
            TraversalDepthError: If a path is too deep for the recursion limit.

        """
        return self._traverse(recursive_depth_first, "recursive depth-first")

    def _ordered_neighbors(self, vertex: T) -> list[T]:
        return sort_vertices(self._adjacency.neighbors(vertex))

    def _traverse(
        self,
        algorithm: Callable[[Sequence[T], Callable[[T], Sequence[T]]], list[T]],
        name: str,
    ) -> list[T]:
        roots = self.roots()
        if not roots and self._config.warn_on_empty_roots:
            logger.warning("Graph has no roots; %s search visits nothing", name)
        order = algorithm(roots, self._ordered_neighbors)
        logger.debug("%s search visited %d vertices", name.capitalize(), len(order))
        return order

    def __len__(self) -> int:
        """Return the number of vertices in the graph."""
        return len(self._vertices)

    def __contains__(self, vertex: object) -> bool:
        """Check if a vertex is in the graph."""
        return vertex in self._vertex_set
