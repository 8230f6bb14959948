"""Directed edge between two vertices."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Edge[T]:
    """An ordered (source, destination) pair.

    Source and destination may be the same vertex (a self-loop).
    """

    source: T
    destination: T

    @classmethod
    def coerce(cls, value: Edge[T] | tuple[T, T]) -> Edge[T]:
        """Return `value` as an Edge, accepting any 2-item pair.

        Raises:
            ValueError: If `value` is neither an Edge nor a pair.

        """
        if isinstance(value, Edge):
            return value
        try:
            source, destination = value
        except (TypeError, ValueError) as e:
            msg = f"Expected an Edge or a (source, destination) pair, got {value!r}"
            raise ValueError(msg) from e
        return cls(source, destination)

    @property
    def is_self_loop(self) -> bool:
        """Whether the edge starts and ends at the same vertex."""
        return self.source == self.destination

    def reversed(self) -> Edge[T]:
        """Return the edge pointing the other way."""
        return Edge(self.destination, self.source)
