"""Directed graphs over numerically ordered vertices: relation checks and traversals."""

__all__ = [
    "AdjacencyIndex",
    "ConfigError",
    "DedupQueue",
    "DedupStack",
    "Edge",
    "Graph",
    "GraphValidationError",
    "LinkedList",
    "RelgraphConfig",
    "TraversalDepthError",
    "VertexKey",
    "VertexKind",
    "VertexTypeError",
    "compare_vertices",
    "get_config",
    "load_config",
    "min_vertex",
    "sort_vertices",
    "vertex_key",
]

from ._collections import DedupQueue, DedupStack, LinkedList
from ._config import ConfigError, RelgraphConfig, get_config, load_config
from ._graph import AdjacencyIndex, Edge, Graph, GraphValidationError, TraversalDepthError
from ._vertex import (
    VertexKey,
    VertexKind,
    VertexTypeError,
    compare_vertices,
    min_vertex,
    sort_vertices,
    vertex_key,
)
