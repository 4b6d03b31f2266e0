from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Sequence, Tuple, Union

from greedy_tsp.algs.geometry import route_cost
from greedy_tsp.algs.registry import coerce_record
from greedy_tsp.common.errors import DegenerateInput

SCHEMA_VERSION = "1.0"
HASH_PRECISION = 9

CityRecord = Tuple[int, float, float]


def _round_float(value: float, precision: int = HASH_PRECISION) -> float:
    rounded = round(value, precision)
    # Coerce -0.0 to +0.0 for stability
    if rounded == 0.0:
        return 0.0
    return rounded


def compute_instance_hash(
    cities: Iterable[CityRecord],
    precision: int = HASH_PRECISION,
) -> str:
    """Order-independent sha256 over the id-sorted city records."""
    payload = {
        "cities": [
            [int(cid), _round_float(x, precision), _round_float(y, precision)]
            for cid, x, y in sorted(cities, key=lambda rec: rec[0])
        ],
    }
    serialized = json.dumps(payload, sort_keys=True, separators=(",", ":")).encode("utf-8")
    return hashlib.sha256(serialized).hexdigest()


@dataclass(frozen=True, slots=True)
class Instance:
    cities: Tuple[CityRecord, ...]
    name: str = "unnamed"
    comment: str = ""

    def __post_init__(self) -> None:
        canon: List[CityRecord] = []
        seen: set[int] = set()
        for idx, rec in enumerate(self.cities):
            if len(rec) != 3:
                raise DegenerateInput(f"city record #{idx} must be (id, x, y), got {rec!r}")
            cid, x, y = coerce_record(rec)
            if cid in seen:
                raise DegenerateInput(f"duplicate city id {cid}")
            seen.add(cid)
            canon.append((cid, x, y))
        object.__setattr__(self, "cities", tuple(canon))

    @property
    def n_cities(self) -> int:
        return len(self.cities)

    @property
    def hash_id(self) -> str:
        return compute_instance_hash(self.cities)

    def coordinates(self) -> Dict[int, Tuple[float, float]]:
        return {cid: (x, y) for cid, x, y in self.cities}


@dataclass(frozen=True, slots=True)
class TourResult:
    tour: Tuple[int, ...]
    total_distance: int
    algorithm: str = "unspecified"
    meta: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        tour = tuple(int(c) for c in self.tour)
        if len(tour) < 3 or tour[0] != tour[-1]:
            raise ValueError("tour must be a closed sequence that returns to its start")
        object.__setattr__(self, "tour", tour)
        object.__setattr__(self, "total_distance", int(self.total_distance))

    @property
    def cities(self) -> Tuple[int, ...]:
        """Visiting order without the return to the start."""
        return self.tour[:-1]

    @property
    def n_cities(self) -> int:
        return len(self.tour) - 1


def tour_result_to_dict(result: TourResult, instance: Instance | None = None) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "schema_version": SCHEMA_VERSION,
        "algorithm": result.algorithm,
        "n_cities": result.n_cities,
        "tour": list(result.tour),
        "total_distance": result.total_distance,
        "meta": dict(result.meta),
    }
    if instance is not None:
        payload["instance"] = {"name": instance.name, "hash_id": instance.hash_id}
    return payload


def validate_tour(
    cities: Union[Instance, Sequence[CityRecord]],
    result: TourResult,
) -> None:
    """Raise ``ValueError`` unless ``result`` is a closed tour of ``cities`` whose
    reported length equals an independent re-sum of its edges."""
    records = cities.cities if isinstance(cities, Instance) else tuple(cities)
    coords = {int(cid): (float(x), float(y)) for cid, x, y in records}

    visit = result.cities
    if len(visit) != len(coords):
        raise ValueError(f"tour visits {len(visit)} cities, instance has {len(coords)}")
    if set(visit) != set(coords):
        missing = sorted(set(coords) - set(visit))
        raise ValueError(f"tour is not a permutation of the city ids (missing {missing})")
    if len(set(visit)) != len(visit):
        raise ValueError("tour visits a city more than once")

    expected = route_cost([coords[cid] for cid in result.tour])
    if expected != result.total_distance:
        raise ValueError(
            f"reported distance {result.total_distance} != re-summed distance {expected}"
        )


__all__ = [
    "SCHEMA_VERSION",
    "HASH_PRECISION",
    "CityRecord",
    "Instance",
    "TourResult",
    "compute_instance_hash",
    "tour_result_to_dict",
    "validate_tour",
]
