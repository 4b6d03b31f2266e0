"""Baseline heuristics retained for comparison against greedy-edge."""

from __future__ import annotations

from greedy_tsp.algs.heuristics.nearest_neighbor import nearest_neighbor_tour

__all__ = ["nearest_neighbor_tour"]
