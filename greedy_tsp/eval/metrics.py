"""Evaluation metrics and summary utilities for tour outputs."""

from __future__ import annotations

from typing import Dict, Mapping, Sequence

import numpy as np

from greedy_tsp.algs.heuristics.nearest_neighbor import nearest_neighbor_tour
from greedy_tsp.algs.reference.greedy_edge_ref import build_tour
from greedy_tsp.data.schemas import Instance, TourResult

__all__ = [
    "gap_pct",
    "length_summary",
    "compare_heuristics",
]


def gap_pct(cost: float, reference: float) -> float:
    """Relative excess of ``cost`` over ``reference`` in percent."""
    if reference <= 0.0:
        return 0.0
    return 100.0 * (cost - reference) / reference


def length_summary(lengths: Sequence[float]) -> dict[str, float]:
    if not lengths:
        return {"count": 0}
    arr = np.array(lengths, dtype=float)
    return {
        "count": float(arr.size),
        "mean": float(arr.mean()),
        "p50": float(np.percentile(arr, 50)),
        "p95": float(np.percentile(arr, 95)),
        "max": float(arr.max()),
    }


def compare_heuristics(instance: Instance) -> Dict[str, object]:
    """Run greedy-edge and nearest-neighbour on one instance and report the gap."""
    results: Mapping[str, TourResult] = {
        "greedy_edge": build_tour(instance),
        "nearest_neighbor": nearest_neighbor_tour(instance),
    }
    greedy = results["greedy_edge"].total_distance
    nn = results["nearest_neighbor"].total_distance
    return {
        "name": instance.name,
        "n_cities": instance.n_cities,
        "greedy_edge": greedy,
        "nearest_neighbor": nn,
        "greedy_vs_nn_pct": gap_pct(greedy, nn),
    }
