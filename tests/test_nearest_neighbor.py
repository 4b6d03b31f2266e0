from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from greedy_tsp.algs.heuristics import nearest_neighbor_tour
from greedy_tsp.common.errors import DegenerateInput
from greedy_tsp.data.schemas import Instance
from tests.test_utils import check_closed_tour, gen_cities, rng


def test_nn_follows_closest_city() -> None:
    cities = [(1, 0.0, 0.0), (2, 10.0, 0.0), (3, 1.0, 0.0), (4, 3.0, 0.0)]
    result = nearest_neighbor_tour(cities)
    assert result.tour == (1, 3, 4, 2, 1)
    assert result.total_distance == 1 + 2 + 7 + 10
    assert result.algorithm == "nearest_neighbor"


def test_nn_ties_go_to_earliest_record() -> None:
    cities = [(1, 0.0, 0.0), (9, 0.0, 5.0), (5, 5.0, 0.0)]
    assert nearest_neighbor_tour(cities).tour[:2] == (1, 9)


def test_nn_custom_start() -> None:
    cities = [(1, 0.0, 0.0), (2, 0.0, 10.0), (3, 10.0, 10.0), (4, 10.0, 0.0)]
    result = nearest_neighbor_tour(cities, start_id=3)
    assert result.tour[0] == result.tour[-1] == 3
    assert result.total_distance == 40
    with pytest.raises(DegenerateInput):
        nearest_neighbor_tour(cities, start_id=42)


def test_nn_two_cities() -> None:
    result = nearest_neighbor_tour([(1, 0.0, 0.0), (2, 6.0, 8.0)])
    assert result.tour == (1, 2, 1)
    assert result.total_distance == 20


@pytest.mark.parametrize("records", [[], [(1, 0.0, 0.0)]])
def test_nn_degenerate(records) -> None:
    with pytest.raises(DegenerateInput):
        nearest_neighbor_tour(records)


def test_nn_accepts_instance() -> None:
    cities = gen_cities(rng(2), 10)
    assert nearest_neighbor_tour(Instance(tuple(cities))) == nearest_neighbor_tour(cities)


@given(st.integers(min_value=2, max_value=40), st.integers(min_value=0, max_value=99_999))
def test_nn_property_valid_tour(n: int, seed: int) -> None:
    cities = gen_cities(rng(seed), n)
    check_closed_tour(cities, nearest_neighbor_tour(cities))
