from __future__ import annotations

import numpy as np
import pytest

from greedy_tsp.algs.reference import build_tour
from greedy_tsp.data.gen_instances import FAMILIES, InstanceConfig, draw_instance, random_instance
from tests.test_utils import check_closed_tour


@pytest.mark.parametrize("family", FAMILIES)
def test_draw_instance_is_reproducible(family: str) -> None:
    cfg = InstanceConfig(n=40, family=family, square_size=500.0)
    a = draw_instance(cfg, np.random.default_rng(5))
    b = draw_instance(cfg, np.random.default_rng(5))
    assert a == b
    assert a.n_cities == 40
    assert [cid for cid, _, _ in a.cities] == list(range(1, 41))
    for _, x, y in a.cities:
        assert 0.0 <= x <= 500.0 and 0.0 <= y <= 500.0


def test_grid_family_has_distinct_lattice_points() -> None:
    inst = draw_instance(InstanceConfig(n=30, family="grid", square_size=60.0), np.random.default_rng(1))
    points = {(x, y) for _, x, y in inst.cities}
    assert len(points) == 30
    assert all(x % 10.0 == 0.0 and y % 10.0 == 0.0 for x, y in points)


def test_integral_snaps_coordinates() -> None:
    inst = random_instance(25, seed=3, integral=True)
    assert all(float(x).is_integer() and float(y).is_integer() for _, x, y in inst.cities)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"n": -1},
        {"n": 5, "family": "spiral"},
        {"n": 5, "square_size": 0.0},
        {"n": 5, "clusters": 0},
        {"n": 5, "spread": 1.5},
    ],
)
def test_config_validation(kwargs) -> None:
    with pytest.raises(ValueError):
        InstanceConfig(**kwargs)


@pytest.mark.parametrize("family", FAMILIES)
def test_generated_instances_solve(family: str) -> None:
    inst = random_instance(60, seed=11, family=family)
    check_closed_tour(inst.cities, build_tour(inst))
