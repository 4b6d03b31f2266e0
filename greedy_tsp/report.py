# greedy_tsp/report.py
"""
Walk a finished tour and render the console summary.

Timing wraps a whole solver call and is kept out of :class:`TourResult`.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Callable, List, Tuple

from greedy_tsp.algs.registry import CityRegistry
from greedy_tsp.common.errors import ContractViolation
from greedy_tsp.data.schemas import TourResult

__all__ = ["TourReport", "walk_cycle", "timed", "format_report"]


def walk_cycle(registry: CityRegistry, start: int = 0) -> List[int]:
    """Arena indices in visiting order, starting at ``start``.

    Raises :class:`ContractViolation` unless the committed edges form one
    simple cycle through every city.
    """
    n = len(registry)
    registry.require(start)
    for city in registry:
        if city.degree != 2:
            raise ContractViolation(f"city {city.id} has degree {city.degree}, expected 2")

    order = [start]
    visited = {start}
    current = start
    while True:
        nxt = next((nb for nb in registry.neighbors(current) if nb not in visited), None)
        if nxt is None:
            break
        order.append(nxt)
        visited.add(nxt)
        current = nxt

    if len(order) != n:
        raise ContractViolation(
            f"tour walk covered {len(order)} of {n} cities; edges form several cycles"
        )
    if not registry.is_adjacent(current, start):
        raise ContractViolation("tour walk did not return to its start")
    return order


@dataclass(frozen=True)
class TourReport:
    result: TourResult
    elapsed_sec: float
    label: str = ""

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed_sec * 1000.0


def timed(fn: Callable[..., TourResult], *args: Any, **kwargs: Any) -> Tuple[TourResult, float]:
    t0 = time.perf_counter()
    result = fn(*args, **kwargs)
    return result, time.perf_counter() - t0


def format_report(report: TourReport, *, show_tour: bool = True) -> str:
    res = report.result
    lines = []
    if report.label:
        lines.append(f"== {report.label} [{res.algorithm}] ==")
    if show_tour:
        lines.append(" ".join(str(cid) for cid in res.tour))
    lines.append(f"Total Distance: {res.total_distance}")
    lines.append(f"Time in ms: {report.elapsed_ms:.3f}")
    return "\n".join(lines)
