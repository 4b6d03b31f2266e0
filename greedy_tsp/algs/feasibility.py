"""Legality test for committing a candidate edge to the partial tour."""

from __future__ import annotations

from typing import List, Optional, Set, Tuple

from greedy_tsp.algs.registry import CityRegistry
from greedy_tsp.common.errors import ContractViolation

__all__ = ["FeasibilityChecker"]


class FeasibilityChecker:
    """Decide whether edge ``(a, b)`` may join the partial tour.

    An edge is legal iff

    1. neither end already has degree 2,
    2. the two cities are not already adjacent, and
    3. ``b`` is not reachable from ``a`` through committed edges, i.e. the edge
       would not close a cycle.  The final cycle-closing edge is added by the
       finaliser, never through this check.

    Components of the partial tour are simple paths, so the reachability
    search costs at most the length of ``a``'s path.
    """

    def __init__(self, registry: CityRegistry) -> None:
        self.registry = registry
        self.traversals = 0

    def is_legal(self, a: int, b: int) -> bool:
        reg = self.registry
        reg.require(a, b)
        if a == b:
            raise ContractViolation(f"candidate edge joins index {a} to itself")

        if reg.degree(a) >= 2 or reg.degree(b) >= 2:
            return False
        if reg.is_adjacent(a, b):
            return False
        # An isolated city cannot lie on anyone's path.
        if reg.degree(a) == 0 or reg.degree(b) == 0:
            return True
        return not self.reachable(a, b)

    def reachable(self, start: int, target: int) -> bool:
        """Iterative DFS from ``start`` looking for ``target`` with parent exclusion.

        Meeting an already visited city means the forest holds a cycle, which
        can only come from a construction bug.
        """
        self.traversals += 1
        reg = self.registry
        visited: Set[int] = {start}
        stack: List[Tuple[int, Optional[int]]] = [(start, None)]
        while stack:
            current, parent = stack.pop()
            for nb in reg.neighbors(current):
                if nb == parent:
                    continue
                if nb == target:
                    return True
                if nb in visited:
                    raise ContractViolation(
                        f"partial tour already contains a cycle through city "
                        f"{reg.city(nb).id}"
                    )
                visited.add(nb)
                stack.append((nb, current))
        return False
