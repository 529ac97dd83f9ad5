import io

import pytest

from netlab.dvr import MAX_ROUTERS, Route, distance_vector, format_tables, main

INF = 999

SPARSE = [
    [0, 1, INF, INF, 10],
    [1, 0, 2, INF, INF],
    [INF, 2, 0, 3, INF],
    [INF, INF, 3, 0, 1],
    [10, INF, INF, 1, 0],
]


def test_worked_example_goes_through_middle_router():
    tables = distance_vector([[0, 2, 7], [2, 0, 1], [7, 1, 0]])
    assert tables[0][2] == Route(via=1, distance=3)
    assert tables[2][0] == Route(via=1, distance=3)


def test_result_is_a_fixed_point():
    tables = distance_vector(SPARSE)
    size = len(SPARSE)
    for i in range(size):
        for j in range(size):
            for k in range(size):
                assert tables[i][j].distance <= SPARSE[i][k] + tables[k][j].distance


def test_distances_never_exceed_direct_cost():
    tables = distance_vector(SPARSE)
    for row, costs in zip(tables, SPARSE):
        for route, cost in zip(row, costs):
            assert route.distance <= cost


def test_symmetric_costs_give_symmetric_distances():
    tables = distance_vector(SPARSE)
    size = len(SPARSE)
    for i in range(size):
        for j in range(size):
            assert tables[i][j].distance == tables[j][i].distance


def test_diagonal_is_forced_to_zero():
    tables = distance_vector([[5, 3], [3, 9]])
    assert tables[0][0] == Route(via=0, distance=0)
    assert tables[1][1] == Route(via=1, distance=0)


def test_no_shortcut_keeps_direct_routes():
    costs = [[1 if i != j else 0 for j in range(4)] for i in range(4)]
    tables = distance_vector(costs)
    for i, row in enumerate(tables):
        for j, route in enumerate(row):
            assert route == Route(via=j, distance=costs[i][j])


def test_input_matrix_is_not_modified():
    costs = [[7, 2], [2, 7]]
    distance_vector(costs)
    assert costs == [[7, 2], [2, 7]]


def test_non_square_matrix_is_rejected():
    with pytest.raises(ValueError):
        distance_vector([[0, 1], [1]])


def test_negative_cost_is_rejected():
    with pytest.raises(ValueError):
        distance_vector([[0, -1], [1, 0]])


def test_too_many_routers_is_rejected():
    size = MAX_ROUTERS + 1
    with pytest.raises(ValueError):
        distance_vector([[0] * size for _ in range(size)])


def test_format_tables_layout():
    text = format_tables(distance_vector([[0, 4], [4, 0]]))
    assert text == (
        "\n\nRouting Table For Router 1\n"
        "To Node 1 via 1|Distance: 0\n"
        "To Node 2 via 2|Distance: 4\n"
        "\n\nRouting Table For Router 2\n"
        "To Node 1 via 1|Distance: 4\n"
        "To Node 2 via 2|Distance: 0\n"
    )


def test_main_reads_matrix_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n0\n5\n5\n0\n"))
    assert main([]) == 0
    output = capsys.readouterr().out
    assert "Routing Table For Router 2" in output
    assert "To Node 2 via 2|Distance: 5" in output


def test_main_rejects_non_numeric_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("two\n"))
    assert main([]) == 1
    assert "expected an integer" in capsys.readouterr().err