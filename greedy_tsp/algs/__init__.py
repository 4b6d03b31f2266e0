"""Algorithm package entry points with the greedy-edge solver exposed by default."""

from __future__ import annotations

import greedy_tsp.algs.heuristics as heuristics
import greedy_tsp.algs.reference as reference
from greedy_tsp.algs.candidates import CandidateEdge, CandidateEdgeStream
from greedy_tsp.algs.feasibility import FeasibilityChecker
from greedy_tsp.algs.heuristics import nearest_neighbor_tour
from greedy_tsp.algs.reference import (
    EdgeCommitter,
    TourFinalizer,
    build_tour,
    greedy_edge,
)
from greedy_tsp.algs.registry import City, CityRegistry

nn = nearest_neighbor_tour

__all__ = [
    "greedy_edge",
    "nn",
    "build_tour",
    "nearest_neighbor_tour",
    "City",
    "CityRegistry",
    "CandidateEdge",
    "CandidateEdgeStream",
    "FeasibilityChecker",
    "EdgeCommitter",
    "TourFinalizer",
    "reference",
    "heuristics",
]
