"""Nearest-neighbour baseline used for comparison against greedy-edge."""

from __future__ import annotations

from typing import Optional, Sequence, Union

import numpy as np

from greedy_tsp.algs.geometry import cost_matrix, log
from greedy_tsp.common.constants import MIN_CITIES
from greedy_tsp.common.errors import DegenerateInput
from greedy_tsp.data.schemas import CityRecord, Instance, TourResult

ALGORITHM = "nearest_neighbor"

__all__ = ["ALGORITHM", "nearest_neighbor_tour"]


def nearest_neighbor_tour(
    cities: Union[Instance, Sequence[CityRecord]],
    start_id: Optional[int] = None,
) -> TourResult:
    """Start at ``start_id`` (default: first record), hop to the closest
    unvisited city until none remain, then return to the start.

    Ties go to the earliest input record.  Costs use the same rounded metric
    as the greedy-edge builder so totals are directly comparable.
    """
    # Instance validates ids and coordinates for us.
    inst = cities if isinstance(cities, Instance) else Instance(tuple(cities))
    n = inst.n_cities
    if n < MIN_CITIES:
        raise DegenerateInput(f"a tour needs at least {MIN_CITIES} distinct cities, got {n}")

    ids = [cid for cid, _, _ in inst.cities]
    coords = np.array([(x, y) for _, x, y in inst.cities], dtype=np.float64)
    D = cost_matrix(coords)

    if start_id is None:
        current = 0
    else:
        try:
            current = ids.index(start_id)
        except ValueError:
            raise DegenerateInput(f"start city {start_id} is not in the instance") from None

    start = current
    visited = np.zeros(n, dtype=bool)
    visited[current] = True
    order = [current]
    total = 0
    for _ in range(n - 1):
        row = np.where(visited, np.iinfo(np.int64).max, D[current])
        nxt = int(np.argmin(row))
        total += int(D[current, nxt])
        visited[nxt] = True
        order.append(nxt)
        current = nxt
    total += int(D[current, start])
    order.append(start)
    log("Nearest neighbour tour from %d: %d", ids[start], total)

    return TourResult(
        tour=tuple(ids[i] for i in order),
        total_distance=total,
        algorithm=ALGORITHM,
        meta={"start_id": ids[start]},
    )
