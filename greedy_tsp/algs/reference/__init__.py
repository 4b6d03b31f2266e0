"""Greedy-edge tour construction (the reference solver)."""

from __future__ import annotations

from greedy_tsp.algs.reference.greedy_edge_ref import (
    CommitStats,
    EdgeCommitter,
    TourFinalizer,
    build_registry,
    build_tour,
)

greedy_edge = build_tour

__all__ = [
    "greedy_edge",
    "build_tour",
    "build_registry",
    "CommitStats",
    "EdgeCommitter",
    "TourFinalizer",
]
