import pytest
from hypothesis import given, strategies as st

from algolab.traversal import CycleError, bfs, connected_components, topological_sort


PATH_AND_ISOLATED = [
    [0, 1, 0, 0],
    [1, 0, 1, 0],
    [0, 1, 0, 0],
    [0, 0, 0, 0],
]


@st.composite
def undirected_graphs(draw):
    n = draw(st.integers(min_value=1, max_value=7))
    matrix = [[0] * n for _ in range(n)]
    for i in range(n):
        for j in range(i + 1, n):
            if draw(st.booleans()):
                matrix[i][j] = matrix[j][i] = 1
    return matrix


@st.composite
def dags(draw):
    n = draw(st.integers(min_value=0, max_value=7))
    matrix = [[0] * n for _ in range(n)]
    for i in range(n):
        for j in range(i + 1, n):
            if draw(st.booleans()):
                matrix[i][j] = 1
    return matrix


def test_bfs_reaches_connected_nodes_and_marks_them():
    visited = set()
    order = bfs(PATH_AND_ISOLATED, 0, visited)
    assert order == [0, 1, 2]
    assert visited == {0, 1, 2}


def test_bfs_does_not_enter_visited_nodes():
    visited = {1}
    assert bfs(PATH_AND_ISOLATED, 0, visited) == [0]


def test_bfs_rejects_bad_start():
    with pytest.raises(IndexError):
        bfs(PATH_AND_ISOLATED, 4)


def test_non_square_matrix_rejected():
    with pytest.raises(ValueError):
        connected_components([[0, 1], [1]])


def test_components_of_disconnected_graph():
    components = connected_components(PATH_AND_ISOLATED)
    assert len(components) == 2
    assert sorted(sorted(c) for c in components) == [[0, 1, 2], [3]]


@given(undirected_graphs())
def test_components_partition_nodes(matrix):
    components = connected_components(matrix)
    flat = [node for component in components for node in component]
    assert sorted(flat) == list(range(len(matrix)))
    owner = {node: index for index, comp in enumerate(components) for node in comp}
    for i, row in enumerate(matrix):
        for j, edge in enumerate(row):
            if edge:
                assert owner[i] == owner[j]


def test_complete_graph_is_connected():
    n = 5
    matrix = [[0 if i == j else 1 for j in range(n)] for i in range(n)]
    components = connected_components(matrix)
    assert len(components) == 1
    assert sorted(components[0]) == list(range(n))


@given(dags())
def test_topological_order_respects_edges(matrix):
    order = topological_sort(matrix)
    assert sorted(order) == list(range(len(matrix)))
    position = {node: index for index, node in enumerate(order)}
    for u, row in enumerate(matrix):
        for v, edge in enumerate(row):
            if edge:
                assert position[u] < position[v]


def test_topological_order_of_chain_follows_chain():
    matrix = [
        [0, 0, 0],
        [0, 0, 1],
        [1, 0, 0],
    ]
    assert topological_sort(matrix) == [1, 2, 0]


def test_cycle_raises():
    matrix = [
        [0, 1, 0],
        [0, 0, 1],
        [1, 0, 0],
    ]
    with pytest.raises(CycleError):
        topological_sort(matrix)


def test_self_loop_is_a_cycle():
    with pytest.raises(CycleError):
        topological_sort([[1]])