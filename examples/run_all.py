#!/usr/bin/env python3
"""examples/run_all.py – smoke‑test for the tour builders.

Run this file directly, or execute `python -m examples.run_all` from the project
root.  It prints small, illustrative outputs and timings for:

  1. Greedy-edge on the 10×10 square (expected total 40)
  2. Greedy-edge vs nearest-neighbour on a TSPLIB snippet
  3. Greedy-edge vs nearest-neighbour on a seeded random instance
"""

from __future__ import annotations

from typing import List, Tuple

import greedy_tsp.algs.geometry as geometry
from greedy_tsp.algs.heuristics.nearest_neighbor import nearest_neighbor_tour
from greedy_tsp.algs.reference.greedy_edge_ref import build_tour
from greedy_tsp.data.gen_instances import random_instance
from greedy_tsp.data.io_utils import parse_tsplib
from greedy_tsp.eval.metrics import gap_pct
from greedy_tsp.report import TourReport, format_report, timed

SEP = "=" * 80

WI_SNIPPET = """\
NAME : wi_snippet
COMMENT : eight cities taken from the Western Sahara set
TYPE : TSP
DIMENSION : 8
EDGE_WEIGHT_TYPE : EUC_2D
NODE_COORD_SECTION
1 20833.3333 17100.0000
2 20900.0000 17066.6667
3 21300.0000 13016.6667
4 21600.0000 14150.0000
5 21600.0000 14966.6667
6 21600.0000 16500.0000
7 22183.3333 13133.3333
8 22583.3333 14300.0000
EOF
"""


def _hdr(title: str) -> None:
    print(f"\n{SEP}\n{title}\n{SEP}\n")


def run_square_example() -> None:
    _hdr("1 – Greedy-edge on a 10×10 square")
    cities: List[Tuple[int, float, float]] = [
        (1, 0.0, 0.0),
        (2, 0.0, 10.0),
        (3, 10.0, 10.0),
        (4, 10.0, 0.0),
    ]
    print(f"Input cities             : {cities}\n")
    result, dt = timed(build_tour, cities)
    print(format_report(TourReport(result, dt)))


def run_tsplib_example() -> None:
    _hdr("2 – TSPLIB snippet, greedy-edge vs nearest-neighbour")
    inst = parse_tsplib(WI_SNIPPET.splitlines())
    for fn in (build_tour, nearest_neighbor_tour):
        result, dt = timed(fn, inst)
        print(format_report(TourReport(result, dt, label=inst.name)))
        print()


def run_random_example(n: int = 300, seed: int = 7) -> None:
    _hdr(f"3 – Random uniform instance (n={n}, seed={seed})")
    inst = random_instance(n, seed)
    greedy, dt_g = timed(build_tour, inst)
    nn, dt_n = timed(nearest_neighbor_tour, inst)
    print(format_report(TourReport(greedy, dt_g, label=inst.name), show_tour=False))
    print(format_report(TourReport(nn, dt_n, label=inst.name), show_tour=False))
    print(f"greedy vs nn             : {gap_pct(greedy.total_distance, nn.total_distance):+.2f}%")


def main() -> None:
    run_square_example()
    # Trace every committed edge for the small TSPLIB example only.
    geometry.enable_verbose()
    run_tsplib_example()
    geometry.VERBOSE = False
    run_random_example()


if __name__ == "__main__":
    main()
