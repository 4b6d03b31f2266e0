#!/usr/bin/env python3
"""Write seeded synthetic instances as TSPLIB files.

    python scripts/gen_instances.py --out data/ --sizes 50,200,1000 --family clustered
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Tuple

import numpy as np

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))

from greedy_tsp.common.constants import RNG_SEEDS
from greedy_tsp.data.gen_instances import FAMILIES, InstanceConfig, draw_instance
from greedy_tsp.data.io_utils import write_tsplib


def parse_sizes(value: str) -> Tuple[int, ...]:
    try:
        sizes = tuple(int(v.strip()) for v in value.split(",") if v.strip())
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected comma-separated integers, got {value!r}") from exc
    if not sizes:
        raise argparse.ArgumentTypeError("at least one size is required")
    return sizes


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--out", type=Path, required=True)
    parser.add_argument("--sizes", type=parse_sizes, default=(50, 200, 1000))
    parser.add_argument("--family", choices=FAMILIES, default="uniform")
    parser.add_argument("--square-size", type=float, default=1000.0)
    parser.add_argument("--integral", action="store_true")
    parser.add_argument("--seed", type=int, default=RNG_SEEDS["data"])
    args = parser.parse_args()

    rng = np.random.default_rng(args.seed)
    for n in args.sizes:
        cfg = InstanceConfig(n=n, square_size=args.square_size, family=args.family, integral=args.integral)
        inst = draw_instance(cfg, rng)
        target = args.out / f"{inst.name}.tsp"
        write_tsplib(target, inst)
        print(f"wrote {target} ({inst.n_cities} cities, hash {inst.hash_id[:12]})")


if __name__ == "__main__":
    main()
