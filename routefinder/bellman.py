"""Bellman-Ford relaxation steps and shortest paths over named vertices."""

from __future__ import annotations

from typing import Iterable, Sequence

from .graph import Edge, Graph, Weight

UNSET = -1


def bellman_ford_step(
    edges: Iterable[Edge],
    start: str,
    values: Sequence[Weight],
    previous: Sequence[int],
) -> tuple[list[Weight], list[int]]:
    """Run one relaxation round and return new (values, previous) lists.

    A value of -1 means unreached. If the start vertex is unreached, it is
    set to 0 and its direct positive neighbours are filled in. Otherwise
    every edge out of a reached vertex is relaxed once against the values
    as they stood at the start of the round. If the start vertex is not in
    the graph, the values are returned unchanged and the last previous
    entry is set to 0.
    """
    graph = Graph.from_edges(edges)
    size = len(graph)
    if len(values) != size or len(previous) != size:
        raise ValueError(f"values and previous must each hold {size} entries")
    values = list(values)
    previous = list(previous)

    if start not in graph:
        if previous:
            previous[-1] = 0
        return values, previous

    origin = graph.index_of(start)
    if values[origin] == UNSET:
        values[origin] = 0
        for target, weight in enumerate(graph.matrix[origin]):
            if values[target] == UNSET and weight > 0:
                values[target] = weight
                previous[target] = origin
        return values, previous

    snapshot = list(values)
    for source, row in enumerate(graph.matrix):
        if snapshot[source] == UNSET:
            continue
        for target, weight in enumerate(row):
            if weight == 0:
                continue
            candidate = weight + snapshot[source]
            if candidate < values[target] or values[target] == UNSET:
                values[target] = candidate
                previous[target] = source
    return values, previous


def bellman_ford_path(edges: Iterable[Edge], start: str, goal: str) -> str:
    """Return the shortest path from start to goal as space-separated names.

    An empty string is returned when either vertex is missing. An
    unreachable goal yields just its own name. Raises ValueError when the
    predecessor chain loops, as it does around a negative cycle.
    """
    graph = Graph.from_edges(edges)
    if start not in graph or goal not in graph:
        return ""

    size = len(graph)
    values: list[Weight] = [UNSET] * size
    previous = [UNSET] * size
    origin = graph.index_of(start)

    for target, weight in enumerate(graph.matrix[origin]):
        if values[target] == UNSET and weight > 0:
            values[target] = weight
            previous[target] = origin
        values[origin] = 0

    for _ in range(size - 1):
        snapshot = list(values)
        for source, row in enumerate(graph.matrix):
            if snapshot[source] == UNSET:
                continue
            for target, weight in enumerate(row):
                if weight != 0 and (
                    weight + snapshot[source] < values[target] or values[target] == UNSET
                ):
                    values[target] = weight + snapshot[source]
                    previous[target] = source

    route: list[str] = []
    seen: set[int] = set()
    current = graph.index_of(goal)
    while current != UNSET:
        if current in seen:
            raise ValueError("predecessor chain forms a cycle; the graph has a negative cycle")
        seen.add(current)
        route.append(graph.name_of(current))
        parent = previous[current]
        current = UNSET if parent == current else parent
    return " ".join(reversed(route))