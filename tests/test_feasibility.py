from __future__ import annotations

import pytest

from greedy_tsp.algs.feasibility import FeasibilityChecker
from greedy_tsp.algs.registry import CityRegistry
from greedy_tsp.common.errors import ContractViolation


def _line(n: int) -> CityRegistry:
    return CityRegistry([(i + 1, float(i), 0.0) for i in range(n)])


def test_isolated_cities_are_always_legal() -> None:
    reg = _line(3)
    checker = FeasibilityChecker(reg)
    assert checker.is_legal(0, 2)
    assert checker.traversals == 0


def test_degree_two_blocks_edge() -> None:
    reg = _line(4)
    reg.connect(0, 1)
    reg.connect(1, 2)
    checker = FeasibilityChecker(reg)
    assert not checker.is_legal(1, 3)
    assert not checker.is_legal(3, 1)


def test_duplicate_edge_rejected() -> None:
    reg = _line(3)
    reg.connect(0, 1)
    checker = FeasibilityChecker(reg)
    assert not checker.is_legal(0, 1)
    assert not checker.is_legal(1, 0)


def test_edge_closing_path_into_cycle_rejected() -> None:
    reg = _line(5)
    reg.connect(0, 1)
    reg.connect(1, 2)
    reg.connect(2, 3)
    checker = FeasibilityChecker(reg)
    # 0 and 3 are the ends of the same path.
    assert not checker.is_legal(0, 3)
    assert not checker.is_legal(3, 0)
    # Joining the path to the isolated city 4 is fine.
    assert checker.is_legal(3, 4)


def test_joining_two_separate_paths_is_legal() -> None:
    reg = _line(6)
    reg.connect(0, 1)
    reg.connect(1, 2)
    reg.connect(3, 4)
    reg.connect(4, 5)
    checker = FeasibilityChecker(reg)
    assert checker.is_legal(2, 3)
    assert checker.is_legal(0, 5)
    assert checker.traversals == 2


def test_reachable_walks_from_path_interior() -> None:
    reg = _line(4)
    reg.connect(0, 1)
    reg.connect(1, 2)
    checker = FeasibilityChecker(reg)
    assert checker.reachable(1, 0)
    assert checker.reachable(1, 2)
    assert not checker.reachable(1, 3)


def test_unknown_city_fails_fast() -> None:
    checker = FeasibilityChecker(_line(3))
    with pytest.raises(ContractViolation):
        checker.is_legal(0, 7)
    with pytest.raises(ContractViolation):
        checker.is_legal(-1, 1)
    with pytest.raises(ContractViolation):
        checker.is_legal(1, 1)


def test_existing_cycle_is_reported_as_contract_violation() -> None:
    reg = _line(4)
    reg.connect(0, 1)
    reg.connect(1, 2)
    reg.connect(2, 0)  # bypasses the checker on purpose
    checker = FeasibilityChecker(reg)
    with pytest.raises(ContractViolation, match="cycle"):
        checker.reachable(0, 3)
