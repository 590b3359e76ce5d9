import pytest
from hypothesis import given, strategies as st

from algokit.graphs import kruskal_mst_weight, transpose_graph

SOURCE_GRAPH = [[1, 4, 3], [], [0], [2], [1, 3]]


def test_source_example_transpose():
    assert transpose_graph(SOURCE_GRAPH) == [[2], [0, 4], [3], [0, 4], [0]]


def test_transpose_of_empty_graph():
    assert transpose_graph([]) == []


def test_transpose_rejects_out_of_range_edge():
    with pytest.raises(ValueError):
        transpose_graph([[1], [5]])


graphs = st.integers(min_value=1, max_value=8).flatmap(
    lambda n: st.lists(
        st.lists(st.integers(min_value=0, max_value=n - 1), max_size=6),
        min_size=n,
        max_size=n,
    )
)


@given(graph=graphs)
def test_double_transpose_keeps_edges(graph):
    twice = transpose_graph(transpose_graph(graph))
    assert [sorted(targets) for targets in twice] == [sorted(targets) for targets in graph]


@given(graph=graphs)
def test_transpose_keeps_edge_count(graph):
    assert sum(map(len, transpose_graph(graph))) == sum(map(len, graph))


def test_kruskal_on_tree_takes_every_edge():
    edges = [(1, 2, 4), (2, 3, 6), (3, 4, 9)]
    assert kruskal_mst_weight(4, edges) == 4 + 6 + 9


def test_kruskal_drops_heaviest_edge_of_triangle():
    edges = [(1, 2, 1), (2, 3, 2), (1, 3, 3)]
    assert kruskal_mst_weight(3, edges) == 1 + 2


def test_kruskal_without_edges():
    assert kruskal_mst_weight(5, []) == 0


def test_kruskal_rejects_out_of_range_vertex():
    with pytest.raises(ValueError):
        kruskal_mst_weight(3, [(1, 7, 2)])


tree_edges = st.integers(min_value=2, max_value=10).flatmap(
    lambda n: st.tuples(
        st.just(n),
        st.lists(st.integers(min_value=0, max_value=100), min_size=n - 1, max_size=n - 1),
    )
)


@given(data=tree_edges, extra=st.integers(min_value=0, max_value=50))
def test_heavy_extra_edge_does_not_change_mst(data, extra):
    n, weights = data
    path = [(i, i + 1, w) for i, w in zip(range(1, n), weights)]
    base = kruskal_mst_weight(n, path)
    heavy = (1, n, max(weights) + 1 + extra)
    assert kruskal_mst_weight(n, path + [heavy]) == base == sum(weights)


@given(data=tree_edges)
def test_edge_order_does_not_matter(data):
    n, weights = data
    path = [(i, i + 1, w) for i, w in zip(range(1, n), weights)]
    chords = [(1, n, 5), (1, (n + 1) // 2, 7)]
    edges = path + chords
    assert kruskal_mst_weight(n, edges) == kruskal_mst_weight(n, list(reversed(edges)))