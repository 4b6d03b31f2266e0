"""Greedy-edge tour construction.

Edges are taken in ascending cost; an edge is committed whenever it keeps the
partial tour a union of simple paths.  After ``n - 1`` commits a Hamiltonian
path remains and its two endpoints are joined to close the tour.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from greedy_tsp.algs.candidates import CandidateEdgeStream
from greedy_tsp.algs.feasibility import FeasibilityChecker
from greedy_tsp.algs.geometry import log
from greedy_tsp.algs.registry import CityRecord, CityRegistry
from greedy_tsp.common.errors import ContractViolation
from greedy_tsp.data.schemas import Instance, TourResult
from greedy_tsp.report import walk_cycle

ALGORITHM = "greedy_edge"

__all__ = [
    "ALGORITHM",
    "CommitStats",
    "EdgeCommitter",
    "TourFinalizer",
    "build_tour",
    "build_registry",
]


@dataclass
class CommitStats:
    total_distance: int = 0
    committed: int = 0
    examined: int = 0
    rejected: int = 0
    edges: List[Tuple[int, int, int]] = field(default_factory=list)


class EdgeCommitter:
    """Consume candidates cheapest-first until a spanning path is built."""

    def __init__(
        self,
        registry: CityRegistry,
        stream: Optional[CandidateEdgeStream] = None,
        checker: Optional[FeasibilityChecker] = None,
    ) -> None:
        self.registry = registry
        self.stream = stream if stream is not None else CandidateEdgeStream(registry)
        self.checker = checker if checker is not None else FeasibilityChecker(registry)
        self.stats = CommitStats()

    @property
    def target(self) -> int:
        # n - 1 edges form the Hamiltonian path; the closing edge is the finaliser's.
        return len(self.registry) - 1

    def run(self) -> CommitStats:
        reg, stats, target = self.registry, self.stats, self.target
        for cand in self.stream:
            if stats.committed == target:
                break
            stats.examined += 1
            if not self.checker.is_legal(cand.a, cand.b):
                stats.rejected += 1
                continue
            reg.connect(cand.a, cand.b)
            stats.total_distance += cand.cost
            stats.committed += 1
            stats.edges.append((cand.a, cand.b, cand.cost))
            log(
                "Edge from %d to %d of weight %d",
                reg.city(cand.a).id,
                reg.city(cand.b).id,
                cand.cost,
            )

        if stats.committed != target:
            raise ContractViolation(
                f"candidate stream exhausted after {stats.committed} of {target} edges"
            )
        return stats


class TourFinalizer:
    """Join the two open ends of the Hamiltonian path."""

    def __init__(self, registry: CityRegistry) -> None:
        self.registry = registry

    def run(self, stats: CommitStats) -> int:
        reg = self.registry
        ends = reg.endpoints()
        if len(ends) != 2:
            raise ContractViolation(
                f"expected exactly 2 path endpoints before closing, found {len(ends)}"
            )
        a, b = ends
        cost = reg.cost(a, b)
        reg.connect(a, b)
        stats.total_distance += cost
        stats.committed += 1
        stats.edges.append((a, b, cost))
        log("Closing edge from %d to %d of weight %d", reg.city(a).id, reg.city(b).id, cost)
        return cost


def build_registry(cities: Union[Instance, Iterable[CityRecord]]) -> CityRegistry:
    records = cities.cities if isinstance(cities, Instance) else cities
    return CityRegistry(records)


def build_tour(cities: Union[Instance, Sequence[CityRecord]]) -> TourResult:
    """Greedy-edge tour over ``(id, x, y)`` records.

    Raises
    ------
    DegenerateInput
        Fewer than two cities, duplicate ids or non-finite coordinates.
    ContractViolation
        An internal invariant failed; indicates a bug, never bad input.
    """
    registry = build_registry(cities)
    committer = EdgeCommitter(registry)
    stats = committer.run()
    TourFinalizer(registry).run(stats)

    order = walk_cycle(registry)
    ids = [registry.city(i).id for i in order]
    return TourResult(
        tour=tuple(ids + [ids[0]]),
        total_distance=stats.total_distance,
        algorithm=ALGORITHM,
        meta={
            "edges_committed": stats.committed,
            "candidates_examined": stats.examined,
            "candidates_rejected": stats.rejected,
            "cycle_checks": committer.checker.traversals,
        },
    )
