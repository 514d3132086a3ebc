import pytest
from hypothesis import given, strategies as st

from algolab.tsp import Tour, solve_tsp


@st.composite
def complete_graphs(draw):
    n = draw(st.integers(min_value=2, max_value=6))
    matrix = [[0] * n for _ in range(n)]
    for i in range(n):
        for j in range(i + 1, n):
            w = draw(st.integers(min_value=1, max_value=50))
            matrix[i][j] = matrix[j][i] = w
    return matrix


def _cycle_cost(graph, order):
    closed = list(order) + [order[0]]
    return sum(graph[a][b] for a, b in zip(closed, closed[1:]))


def test_classic_four_city_example():
    graph = [
        [0, 10, 15, 20],
        [10, 0, 35, 25],
        [15, 35, 0, 30],
        [20, 25, 30, 0],
    ]
    tour = solve_tsp(graph)
    assert tour == Tour((0, 1, 3, 2), 80)


@given(complete_graphs())
def test_tour_visits_every_vertex_once(graph):
    tour = solve_tsp(graph)
    assert tour.order[0] == 0
    assert sorted(tour.order) == list(range(len(graph)))
    assert tour.cost == _cycle_cost(graph, tour.order)


@given(complete_graphs())
def test_tour_no_worse_than_identity_order(graph):
    tour = solve_tsp(graph)
    assert tour.cost <= _cycle_cost(graph, list(range(len(graph))))


def test_only_existing_edges_used():
    graph = [
        [0, 1, 0, 1],
        [1, 0, 1, 0],
        [0, 1, 0, 1],
        [1, 0, 1, 0],
    ]
    tour = solve_tsp(graph)
    closed = list(tour.order) + [0]
    assert all(graph[a][b] for a, b in zip(closed, closed[1:]))
    assert tour.cost == len(graph)


def test_no_round_trip_raises():
    graph = [
        [0, 1, 1],
        [1, 0, 0],
        [1, 0, 0],
    ]
    with pytest.raises(ValueError):
        solve_tsp(graph)


def test_single_vertex_without_loop_raises():
    with pytest.raises(ValueError):
        solve_tsp([[0]])


def test_empty_or_ragged_matrix_raises():
    with pytest.raises(ValueError):
        solve_tsp([])
    with pytest.raises(ValueError):
        solve_tsp([[0, 1], [1]])