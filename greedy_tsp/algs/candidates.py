"""Cost-ordered stream of every unordered city pair."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import numpy as np

from greedy_tsp.algs.geometry import pairwise_costs
from greedy_tsp.algs.registry import CityRegistry

__all__ = ["CandidateEdge", "CandidateEdgeStream"]


@dataclass(frozen=True, slots=True)
class CandidateEdge:
    cost: int
    a: int
    b: int


class CandidateEdgeStream:
    """All C(n,2) pairs ``a < b`` in ascending cost, ties by ``(a, b)``.

    Costs and the sort order live in compact numpy arrays; the
    :class:`CandidateEdge` objects are only materialised while iterating, so a
    consumer that stops early never pays for the tail.
    """

    def __init__(self, registry: CityRegistry) -> None:
        n = len(registry)
        rows, cols = np.triu_indices(n, k=1)
        index_dtype = np.int32 if n < 2**31 else np.int64
        self._rows = rows.astype(index_dtype, copy=False)
        self._cols = cols.astype(index_dtype, copy=False)
        self._costs = pairwise_costs(registry.coords(), self._rows, self._cols)
        # triu_indices is row-major, so a stable sort leaves ties in (a, b) order.
        self._order = np.argsort(self._costs, kind="stable")

    def __len__(self) -> int:
        return int(self._order.size)

    def __iter__(self) -> Iterator[CandidateEdge]:
        rows, cols, costs = self._rows, self._cols, self._costs
        for k in self._order:
            yield CandidateEdge(int(costs[k]), int(rows[k]), int(cols[k]))

    def peek(self, count: int = 1) -> list[CandidateEdge]:
        """First ``count`` candidates without consuming an iterator."""
        head = self._order[:count]
        return [
            CandidateEdge(int(self._costs[k]), int(self._rows[k]), int(self._cols[k]))
            for k in head
        ]
