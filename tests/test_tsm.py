import random
from itertools import pairwise

import pytest

from routefinder.graph import Graph
from routefinder.tsm import ant_colony, held_karp, traveling

CYCLE_EDGES = [
    ("A", "B", 1),
    ("B", "C", 1),
    ("C", "A", 1),
]


def _complete_edges(names, seed):
    gen = random.Random(seed)
    return [
        (src, dst, gen.randint(1, 500))
        for src in names
        for dst in names
        if src != dst
    ]


def _route_cost(edges, route):
    weights = {(src, dst): weight for src, dst, weight in edges}
    stops = route.split()
    return sum(weights[(a, b)] for a, b in pairwise(stops))


def _assert_circuit(route, start, names):
    stops = route.split()
    assert stops[0] == start
    assert stops[-1] == start
    assert len(stops) == len(names) + 1
    assert sorted(stops[:-1]) == sorted(names)


def test_held_karp_directed_cycle():
    assert held_karp(Graph.from_edges(CYCLE_EDGES), "A") == "A B C A"


def test_held_karp_directed_cycle_other_start():
    assert held_karp(Graph.from_edges(CYCLE_EDGES), "B") == "B C A B"


def test_held_karp_without_return_edge_is_empty():
    edges = [("A", "B", 3), ("B", "C", 4)]
    assert held_karp(Graph.from_edges(edges), "A") == ""


def test_held_karp_single_vertex_is_empty():
    assert held_karp(Graph.from_edges([("A", "A", 5)]), "A") == ""


def test_held_karp_unknown_start():
    with pytest.raises(KeyError):
        held_karp(Graph.from_edges(CYCLE_EDGES), "Z")


def test_held_karp_prefers_cheap_direction():
    edges = CYCLE_EDGES + [("B", "A", 10), ("C", "B", 10), ("A", "C", 10)]
    route = held_karp(Graph.from_edges(edges), "A")
    assert _route_cost(edges, route) == 3


def test_held_karp_complete_graph_is_valid_and_no_worse_than_identity():
    names = list("ABCDEF")
    edges = _complete_edges(names, seed=7)
    route = held_karp(Graph.from_edges(edges), "C")
    _assert_circuit(route, "C", names)
    identity = "C D E F A B C"
    assert _route_cost(edges, route) <= _route_cost(edges, identity)


def test_traveling_small_graph_matches_held_karp():
    names = list("PQRST")
    edges = _complete_edges(names, seed=3)
    assert traveling(edges, "R") == held_karp(Graph.from_edges(edges), "R")


def test_traveling_unknown_start():
    with pytest.raises(KeyError):
        traveling(CYCLE_EDGES, "Q")


def test_ant_colony_directed_cycle():
    route = ant_colony(Graph.from_edges(CYCLE_EDGES), "B", random.Random(0))
    assert route == "B C A B"


def test_ant_colony_without_circuit_is_empty():
    edges = [("A", "B", 3), ("B", "C", 4)]
    assert ant_colony(Graph.from_edges(edges), "A", random.Random(0)) == ""


def test_ant_colony_unknown_start():
    with pytest.raises(KeyError):
        ant_colony(Graph.from_edges(CYCLE_EDGES), "Z", random.Random(0))


def test_ant_colony_is_reproducible_with_seed():
    names = list("ABCDEFG")
    graph = Graph.from_edges(_complete_edges(names, seed=11))
    first = ant_colony(graph, "D", random.Random(42))
    second = ant_colony(graph, "D", random.Random(42))
    assert first == second
    _assert_circuit(first, "D", names)


def test_ant_colony_small_graph_not_worse_than_exact_by_much():
    names = list("ABCDE")
    edges = _complete_edges(names, seed=5)
    graph = Graph.from_edges(edges)
    approximate = ant_colony(graph, "A", random.Random(1))
    exact = held_karp(graph, "A")
    _assert_circuit(approximate, "A", names)
    assert _route_cost(edges, exact) <= _route_cost(edges, approximate)


def test_traveling_large_graph_gives_full_circuit():
    names = [chr(ord("A") + i) for i in range(21)]
    edges = _complete_edges(names, seed=9)
    route = traveling(edges, "K", random.Random(2))
    _assert_circuit(route, "K", names)