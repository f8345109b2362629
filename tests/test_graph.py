import pytest

from routefinder.graph import Graph


def test_vertices_ordered_by_character_code():
    graph = Graph.from_edges([("b", "a", 3), ("Z", "c", 2)])
    assert graph.names == ("Z", "a", "b", "c")
    assert len(graph) == 4


def test_matrix_holds_weights_at_vertex_indices():
    graph = Graph.from_edges([("b", "a", 3), ("a", "c", 2)])
    assert graph.matrix[graph.index_of("b")][graph.index_of("a")] == 3
    assert graph.matrix[graph.index_of("a")][graph.index_of("c")] == 2
    assert graph.matrix[graph.index_of("c")][graph.index_of("a")] == 0


def test_later_edge_overwrites_earlier():
    graph = Graph.from_edges([("a", "b", 1), ("a", "b", 7)])
    assert graph.matrix[0][1] == 7


def test_index_and_name_round_trip():
    graph = Graph.from_edges([("x", "y", 1), ("!", "~", 5), ("y", "!", 2)])
    for name in graph.names:
        assert graph.name_of(graph.index_of(name)) == name
    for index in range(len(graph)):
        assert graph.index_of(graph.name_of(index)) == index


def test_contains():
    graph = Graph.from_edges([("a", "b", 1)])
    assert "a" in graph
    assert "q" not in graph


def test_missing_name_raises_key_error():
    graph = Graph.from_edges([("a", "b", 1)])
    with pytest.raises(KeyError):
        graph.index_of("z")


@pytest.mark.parametrize("index", [-1, 2, 10])
def test_bad_index_raises_index_error(index):
    graph = Graph.from_edges([("a", "b", 1)])
    with pytest.raises(IndexError):
        graph.name_of(index)


@pytest.mark.parametrize("name", ["ab", "", "\u20ac"])
def test_invalid_names_rejected(name):
    with pytest.raises(ValueError):
        Graph.from_edges([(name, "a", 1)])


def test_empty_graph():
    graph = Graph.from_edges([])
    assert graph.names == ()
    assert graph.matrix == ()