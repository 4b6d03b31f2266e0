"""Index-based city arena holding the partial tour.

Cities are stored densely, ordered by id, and refer to their tour neighbours
by arena index.  The arena order doubles as the tie-break order for equal-cost
candidate edges, which is what makes a run independent of input record order.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from greedy_tsp.algs.geometry import euc_2d_cost
from greedy_tsp.common.constants import MAX_COORD, MIN_CITIES
from greedy_tsp.common.errors import ContractViolation, DegenerateInput

CityRecord = Tuple[int, float, float]

__all__ = ["City", "CityRecord", "CityRegistry", "coerce_record"]


def coerce_record(rec: Sequence[Any]) -> CityRecord:
    """Return ``(id, x, y)`` as ``(int, float, float)`` or raise :class:`DegenerateInput`.

    Ids must be integral (a string such as ``"7"`` is parsed; ``1.7`` is not
    truncated) and coordinates finite with magnitude at most ``MAX_COORD``.
    """
    raw_id = rec[0]
    try:
        cid = int(raw_id)
    except (TypeError, ValueError, OverflowError) as exc:
        raise DegenerateInput(f"city id {raw_id!r} is not an integer") from exc
    if isinstance(raw_id, bool) or (not isinstance(raw_id, str) and cid != raw_id):
        raise DegenerateInput(f"city id {raw_id!r} is not an integer")
    x, y = float(rec[1]), float(rec[2])
    if not (math.isfinite(x) and math.isfinite(y)):
        raise DegenerateInput(f"city {cid} has non-finite coordinates ({x}, {y})")
    if abs(x) > MAX_COORD or abs(y) > MAX_COORD:
        raise DegenerateInput(
            f"city {cid} coordinates ({x}, {y}) exceed the supported magnitude {MAX_COORD:g}"
        )
    return cid, x, y


@dataclass(slots=True)
class City:
    id: int
    x: float
    y: float
    degree: int = 0
    neighbors: List[Optional[int]] = field(default_factory=lambda: [None, None])

    @property
    def point(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def add_neighbor(self, index: int) -> None:
        if self.neighbors[0] is None:
            self.neighbors[0] = index
        elif self.neighbors[1] is None:
            self.neighbors[1] = index
        else:
            raise ContractViolation(f"city {self.id} already has two tour neighbours")
        self.degree += 1


class CityRegistry:
    """Dense arena of :class:`City` records; ``connect`` is the only mutator."""

    def __init__(self, records: Iterable[CityRecord]) -> None:
        cities: List[City] = []
        seen: set[int] = set()
        for rec in records:
            cid, x, y = coerce_record(rec)
            if cid in seen:
                raise DegenerateInput(f"duplicate city id {cid}")
            seen.add(cid)
            cities.append(City(cid, x, y))
        if len(cities) < MIN_CITIES:
            raise DegenerateInput(
                f"a tour needs at least {MIN_CITIES} distinct cities, got {len(cities)}"
            )
        cities.sort(key=lambda c: c.id)
        self._cities = cities
        self._index: Dict[int, int] = {c.id: i for i, c in enumerate(cities)}

    # ------------------------------------------------------------------ #
    #  Lookup
    # ------------------------------------------------------------------ #
    def __len__(self) -> int:
        return len(self._cities)

    def __iter__(self) -> Iterator[City]:
        return iter(self._cities)

    def __contains__(self, index: object) -> bool:
        if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
            return False
        return 0 <= index < len(self._cities)

    def city(self, index: int) -> City:
        self.require(index)
        return self._cities[index]

    def index_of(self, city_id: int) -> int:
        try:
            return self._index[city_id]
        except KeyError:
            raise ContractViolation(f"unknown city id {city_id}") from None

    def ids(self) -> List[int]:
        return [c.id for c in self._cities]

    def require(self, *indices: int) -> None:
        for index in indices:
            if index not in self:
                raise ContractViolation(f"city index {index!r} is not in the registry")

    def degree(self, index: int) -> int:
        return self.city(index).degree

    def neighbors(self, index: int) -> Tuple[int, ...]:
        return tuple(nb for nb in self.city(index).neighbors if nb is not None)

    def is_adjacent(self, a: int, b: int) -> bool:
        return b in self.city(a).neighbors

    def cost(self, a: int, b: int) -> int:
        return euc_2d_cost(self.city(a).point, self.city(b).point)

    def coords(self) -> np.ndarray:
        return np.array([(c.x, c.y) for c in self._cities], dtype=np.float64)

    # ------------------------------------------------------------------ #
    #  Partial tour
    # ------------------------------------------------------------------ #
    def connect(self, a: int, b: int) -> None:
        """Record an undirected tour edge; both ends must have a free slot."""
        ca, cb = self.city(a), self.city(b)
        if a == b:
            raise ContractViolation(f"cannot connect city {ca.id} to itself")
        if ca.degree >= 2 or cb.degree >= 2:
            raise ContractViolation(
                f"edge {ca.id}-{cb.id} would give a city degree 3"
            )
        ca.add_neighbor(b)
        cb.add_neighbor(a)

    def endpoints(self) -> List[int]:
        """Indices of degree-1 cities, in arena order."""
        return [i for i, c in enumerate(self._cities) if c.degree == 1]

    def edges(self) -> List[Tuple[int, int]]:
        """Committed edges as ``(i, j)`` with ``i <= j``; a doubled edge appears twice."""
        out: List[Tuple[int, int]] = []
        for i, c in enumerate(self._cities):
            for nb in c.neighbors:
                if nb is not None and i < nb:
                    out.append((i, nb))
        return out

    def degree_histogram(self) -> Sequence[int]:
        hist = [0, 0, 0]
        for c in self._cities:
            hist[c.degree] += 1
        return hist
