"""Numeric-aware ordering for vertex values.

Vertices are either plain integers or integers encoded as text. Both are
resolved to a canonical `VertexKey` before comparison, so "10" sorts after
"2" and mixed integer/text vertex sets still have a total order.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

_INTEGER_TEXT = re.compile(r"\s*[+-]?\d+\s*")


class VertexTypeError(TypeError):
    """A vertex value outside the supported domain was compared."""


class VertexKind(StrEnum):
    """Tag of a vertex value."""

    INTEGER = "integer"
    NUMERIC_TEXT = "numeric_text"


@dataclass(frozen=True, slots=True, order=True)
class VertexKey:
    """Canonical sort key of a vertex.

    Ordering is by `number` first. `kind` and `text` only break ties between
    distinct values with the same number (e.g. `2` and `"02"`).

    Attributes:
        number: The integer value of the vertex.
        kind: Whether the vertex was an integer or numeric text.
        text: The original text for numeric text vertices, empty otherwise.

    """

    number: int
    kind: VertexKind
    text: str = ""


def vertex_key(value: object) -> VertexKey:
    """Resolve a vertex value to its canonical key.

    Args:
        value: An `int` or a `str` holding an integer literal.

    Returns:
        The key used for ordering the vertex.

    Raises:
        VertexTypeError: If the value is not a supported vertex.

    Examples:
        >>> vertex_key("10") > vertex_key("2")
        True
        >>> vertex_key(3)
        VertexKey(number=3, kind=<VertexKind.INTEGER: 'integer'>, text='')

    """
    # bool is an int subclass but never a valid vertex
    if isinstance(value, int) and not isinstance(value, bool):
        return VertexKey(number=value, kind=VertexKind.INTEGER)
    if isinstance(value, str):
        if _INTEGER_TEXT.fullmatch(value) is None:
            msg = f"Vertex text {value!r} is not an integer"
            raise VertexTypeError(msg)
        return VertexKey(number=int(value), kind=VertexKind.NUMERIC_TEXT, text=value)
    msg = f"Unsupported vertex type {type(value).__name__!r}: expected int or integer text"
    raise VertexTypeError(msg)


def compare_vertices(a: object, b: object) -> int:
    """Compare two vertices numerically.

    Returns:
        -1 if `a` orders before `b`, 1 if after, 0 if they share a key.

    """
    key_a = vertex_key(a)
    key_b = vertex_key(b)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0


def sort_vertices[T](values: Iterable[T], *, reverse: bool = False) -> list[T]:
    """Sort vertices by their canonical key."""
    return sorted(values, key=vertex_key, reverse=reverse)


def min_vertex[T](values: Iterable[T]) -> T:
    """Return the smallest vertex.

    Raises:
        ValueError: If `values` is empty.
        VertexTypeError: If any value is not a supported vertex.

    """
    return min(values, key=vertex_key)
