"""Command-line driver: load TSPLIB files, build tours, print reports."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, TextIO

from greedy_tsp.algs.geometry import enable_verbose
from greedy_tsp.algs.heuristics.nearest_neighbor import nearest_neighbor_tour
from greedy_tsp.algs.reference.greedy_edge_ref import build_tour
from greedy_tsp.common.errors import DegenerateInput, LoadError
from greedy_tsp.data.io_utils import read_tsplib, write_results_jsonl
from greedy_tsp.data.schemas import Instance, TourResult, tour_result_to_dict
from greedy_tsp.report import TourReport, format_report, timed

SOLVERS: Dict[str, Callable[[Instance], TourResult]] = {
    "greedy": build_tour,
    "nn": nearest_neighbor_tour,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="greedy-tsp",
        description="Approximate Euclidean TSP tours with the greedy-edge heuristic.",
    )
    parser.add_argument("files", nargs="+", type=Path, help="TSPLIB files with NODE_COORD_SECTION")
    parser.add_argument(
        "--algorithm",
        choices=("greedy", "nn", "both"),
        default="greedy",
        help="tour builder to run (default: greedy)",
    )
    parser.add_argument("--no-tour", action="store_true", help="omit the visiting order")
    parser.add_argument("--verbose", action="store_true", help="trace every committed edge")
    parser.add_argument("--out", type=Path, default=None, help="write JSONL results here")
    return parser


def run(
    argv: Optional[Sequence[str]] = None,
    *,
    stdout: TextIO = sys.stdout,
    stderr: TextIO = sys.stderr,
) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        enable_verbose()

    names = ["greedy", "nn"] if args.algorithm == "both" else [args.algorithm]
    records: List[dict] = []
    failed = 0
    for path in args.files:
        try:
            instance = read_tsplib(path)
        except LoadError as exc:
            print(f"error: {exc}", file=stderr)
            failed += 1
            continue
        for name in names:
            try:
                result, elapsed = timed(SOLVERS[name], instance)
            except DegenerateInput as exc:
                print(f"error: {path}: {exc}", file=stderr)
                failed += 1
                break
            report = TourReport(result=result, elapsed_sec=elapsed, label=instance.name)
            print(format_report(report, show_tour=not args.no_tour), file=stdout)
            payload = tour_result_to_dict(result, instance)
            payload["elapsed_ms"] = report.elapsed_ms
            records.append(payload)

    if args.out is not None:
        write_results_jsonl(args.out, records)
    return 1 if failed else 0


def main() -> None:  # pragma: no cover
    sys.exit(run())


if __name__ == "__main__":  # pragma: no cover
    main()
