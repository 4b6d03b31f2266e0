"""
Speed and quality sweep for greedy-edge against the nearest-neighbour baseline.

Three distributions:
    • Uniform    – cities uniform in a square
    • Clustered  – Gaussian clusters
    • Grid       – cities on lattice points (many equal-cost ties)
"""

from __future__ import annotations

import argparse
import statistics
import time
from typing import List, Tuple

import numpy as np

from greedy_tsp.algs.heuristics.nearest_neighbor import nearest_neighbor_tour
from greedy_tsp.algs.reference.greedy_edge_ref import build_tour
from greedy_tsp.common.constants import RNG_SEEDS
from greedy_tsp.data.gen_instances import InstanceConfig, draw_instance
from greedy_tsp.eval.metrics import gap_pct


def parse_sizes(value: str) -> Tuple[int, ...]:
    return tuple(int(p.strip()) for p in value.split(",") if p.strip())


def _bench(family: str, sizes: Tuple[int, ...], runs: int, rng: np.random.Generator) -> None:
    print(f"\n=== Greedy-edge ({family}) ===")
    for n in sizes:
        times: List[float] = []
        gaps: List[float] = []
        for _ in range(runs):
            inst = draw_instance(InstanceConfig(n=n, family=family), rng)
            t0 = time.perf_counter()
            greedy = build_tour(inst)
            times.append(time.perf_counter() - t0)
            gaps.append(gap_pct(greedy.total_distance, nearest_neighbor_tour(inst).total_distance))
        std = statistics.stdev(times) if len(times) > 1 else 0.0
        print(
            f"n={n:6d} | t_avg={statistics.mean(times):.4f}s "
            f"| t_std={std:.4f}s | vs_nn={statistics.mean(gaps):+.2f}%"
        )


def main() -> None:
    parser = argparse.ArgumentParser(description="Greedy-edge timing sweep")
    parser.add_argument("--sizes", type=parse_sizes, default=(100, 500, 1000, 2000))
    parser.add_argument("--runs", type=int, default=3)
    parser.add_argument("--seed", type=int, default=RNG_SEEDS["bench"])
    args = parser.parse_args()

    rng = np.random.default_rng(args.seed)
    for family in ("uniform", "clustered", "grid"):
        _bench(family, args.sizes, args.runs, rng)


if __name__ == "__main__":
    main()
