"""Graph module providing the directed relation graph.

This module contains:
- Graph[T]: An immutable directed graph with relation predicates, root selection and traversals
- Edge[T]: An ordered (source, destination) pair
- AdjacencyIndex[T]: Outgoing neighbors per vertex, in edge order
- Traversal algorithms (breadth-first and depth-first, iterative and recursive)
"""

from ._adjacency import AdjacencyIndex
from ._edge import Edge
from ._graph import Graph, GraphValidationError
from ._traversal import (
    TraversalDepthError,
    Visited,
    iterative_breadth_first,
    iterative_depth_first,
    reachable,
    recursive_breadth_first,
    recursive_depth_first,
)

__all__ = [
    "AdjacencyIndex",
    "Edge",
    "Graph",
    "GraphValidationError",
    "TraversalDepthError",
    "Visited",
    "iterative_breadth_first",
    "iterative_depth_first",
    "reachable",
    "recursive_breadth_first",
    "recursive_depth_first",
]
