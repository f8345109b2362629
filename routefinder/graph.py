"""Directed weighted graphs whose vertices are single-character names."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Tuple, Union

Weight = Union[int, float]
Edge = Tuple[str, str, Weight]

_NAME_LIMIT = 256


def _check_name(name: str) -> str:
    if not isinstance(name, str) or len(name) != 1 or ord(name) >= _NAME_LIMIT:
        raise ValueError(f"vertex name must be a single character below code {_NAME_LIMIT}: {name!r}")
    return name


@dataclass(frozen=True)
class Graph:
    """An adjacency matrix over vertices ordered by character code.

    A weight of zero means there is no edge.
    """

    names: tuple[str, ...]
    matrix: tuple[tuple[Weight, ...], ...]
    _index: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_index", {name: i for i, name in enumerate(self.names)})

    @classmethod
    def from_edges(cls, edges: Iterable[Edge]) -> "Graph":
        """Build a graph from (source, target, weight) triples; later edges win."""
        edge_list = [(_check_name(src), _check_name(dst), weight) for src, dst, weight in edges]
        names = tuple(sorted({n for src, dst, _ in edge_list for n in (src, dst)}, key=ord))
        index = {name: i for i, name in enumerate(names)}
        rows = [[0] * len(names) for _ in names]
        for src, dst, weight in edge_list:
            rows[index[src]][index[dst]] = weight
        return cls(names, tuple(tuple(row) for row in rows))

    def index_of(self, name: str) -> int:
        """Return the index of a vertex; raise KeyError if it is not in the graph."""
        try:
            return self._index[name]
        except KeyError:
            raise KeyError(f"no vertex named {name!r}") from None

    def name_of(self, index: int) -> str:
        """Return the name of the vertex at an index."""
        if not 0 <= index < len(self.names):
            raise IndexError(f"vertex index out of range: {index}")
        return self.names[index]

    def __len__(self) -> int:
        return len(self.names)

    def __contains__(self, name: object) -> bool:
        return name in self._index