"""Shortest round trips through every vertex of a named graph.

Graphs of up to twenty vertices are solved exactly with the Held-Karp
dynamic programme. Larger graphs are searched approximately with an ant
colony.
"""

from __future__ import annotations

import random
from itertools import pairwise
from typing import Iterable, Optional, Sequence

from .graph import Edge, Graph, Weight

EXACT_LIMIT = 20

_DEPOSIT = 4
_EVAPORATION = 0.1
_ALPHA = 1
_BETA = 4
_ITERATIONS = 200
_INITIAL_PHEROMONE = 100.0
_VISIBILITY_SCALE = 100.0


def traveling(edges: Iterable[Edge], start: str, rng: Optional[random.Random] = None) -> str:
    """Return a round trip from start through every vertex, names separated by spaces.

    Exact for graphs of at most twenty vertices, approximate above that.
    An empty string means no round trip was found. Raises KeyError if the
    start vertex is not in the graph.
    """
    graph = Graph.from_edges(edges)
    if len(graph) <= EXACT_LIMIT:
        return held_karp(graph, start)
    return ant_colony(graph, start, rng)


def held_karp(graph: Graph, start: str) -> str:
    """Return the shortest Hamiltonian circuit from start, or "" if there is none."""
    origin = graph.index_of(start)
    n = len(graph)
    weights = graph.matrix
    full = (1 << n) - 1
    start_bit = 1 << origin

    # cost[mask * n + v]: cheapest way to finish the circuit from v once mask is visited.
    cost: list[Optional[Weight]] = [None] * ((full + 1) * n)
    successor = [-1] * ((full + 1) * n)

    for vertex in range(n):
        if vertex != origin and weights[vertex][origin] != 0:
            cost[full * n + vertex] = weights[vertex][origin]

    for mask in range(full - 1, 0, -1):
        if not mask & start_bit:
            continue
        for here in range(n):
            if not mask & (1 << here) or (here == origin and mask != start_bit):
                continue
            slot = mask * n + here
            best = cost[slot]
            choice = successor[slot]
            for there, weight in enumerate(weights[here]):
                bit = 1 << there
                if mask & bit or weight == 0:
                    continue
                rest = cost[(mask | bit) * n + there]
                if rest is None:
                    continue
                candidate = rest + weight
                if best is not None and best < candidate:
                    continue
                best, choice = candidate, there
            cost[slot] = best
            successor[slot] = choice

    if cost[start_bit * n + origin] is None:
        return ""

    route = [start]
    mask = start_bit
    vertex = successor[start_bit * n + origin]
    while mask != full:
        route.append(graph.name_of(vertex))
        mask |= 1 << vertex
        vertex = successor[mask * n + vertex]
    route.append(start)
    return " ".join(route)


def _roulette(choices: Sequence[tuple[int, float]], draw: float) -> Optional[int]:
    """Pick a vertex from (index, probability) pairs ordered by index.

    Intervals are laid out from the highest index downwards; a draw past
    the total (from rounding) falls to the lowest index.
    """
    if not choices:
        return None
    running = 0.0
    for vertex, probability in reversed(choices):
        running += probability
        if draw <= running:
            return vertex
    return choices[0][0]


def _walk(
    home: int,
    weights: Sequence[Sequence[Weight]],
    visibility: list[list[float]],
    pheromone: list[list[float]],
    rng: random.Random,
) -> Optional[tuple[list[int], Weight]]:
    """Send one ant round the graph; return its closed tour and cost, or None."""
    n = len(weights)
    tour = [home]
    visited = {home}
    total_cost: Weight = 0
    for _ in range(n - 1):
        here = tour[-1]
        attraction = {
            there: pheromone[here][there] ** _ALPHA * visibility[here][there] ** _BETA
            for there in range(n)
            if there not in visited
        }
        total = sum(attraction.values())
        if total == 0:
            return None
        choices = [(there, value / total) for there, value in attraction.items() if value / total != 0]
        chosen = _roulette(choices, rng.random())
        if chosen is None:
            continue
        visited.add(chosen)
        total_cost += weights[here][chosen]
        tour.append(chosen)

    closing = weights[tour[-1]][home]
    if closing == 0:
        return None
    tour.append(home)
    return tour, total_cost + closing


def ant_colony(graph: Graph, start: str, rng: Optional[random.Random] = None) -> str:
    """Return an approximately shortest circuit from start found by an ant colony.

    One ant starts from each vertex in every one of 200 rounds. An empty
    string means no ant ever completed a circuit.
    """
    origin = graph.index_of(start)
    rng = rng if rng is not None else random.Random()
    weights = graph.matrix
    n = len(graph)

    visibility = [[_VISIBILITY_SCALE / w if w != 0 else 0.0 for w in row] for row in weights]
    pheromone = [[_INITIAL_PHEROMONE if w != 0 else 0.0 for w in row] for row in weights]

    best_cost: Optional[Weight] = None
    best_tour: list[int] = []

    for _ in range(_ITERATIONS):
        finished: list[tuple[list[int], Weight]] = []
        for home in range(n):
            result = _walk(home, weights, visibility, pheromone, rng)
            if result is None:
                continue
            tour, cost = result
            finished.append(result)
            if best_cost is None or cost < best_cost:
                best_cost = cost
                best_tour = tour

        # Deposits are accumulated as whole numbers.
        delta = [[0] * n for _ in range(n)]
        for tour, cost in finished:
            if cost == 0:
                continue
            for here, there in pairwise(tour):
                delta[here][there] = int(delta[here][there] + _DEPOSIT / cost)

        pheromone = [
            [(1 - _EVAPORATION) * level + added for level, added in zip(row, added_row)]
            for row, added_row in zip(pheromone, delta)
        ]

    if not best_tour:
        return ""
    position = best_tour.index(origin)
    order = best_tour[position:] + best_tour[1 : position + 1]
    return " ".join(graph.name_of(index) for index in order)