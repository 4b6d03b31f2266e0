#!/usr/bin/env python3
"""Solve one or more TSPLIB files: ``python scripts/solve_tsp.py dj38.tsp --algorithm both``."""

from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))

from greedy_tsp.cli import run

if __name__ == "__main__":
    sys.exit(run())
