"""Constants and error types shared across :mod:`greedy_tsp`."""

from __future__ import annotations

from greedy_tsp.common.constants import (
    DEFAULT_SEED,
    EOF_MARKER,
    EUC_2D,
    MAX_COORD,
    MIN_CITIES,
    NODE_COORD_SECTION,
    RNG_SEEDS,
    seed_everywhere,
)
from greedy_tsp.common.errors import (
    ContractViolation,
    DegenerateInput,
    LoadError,
    TSPError,
)

__all__ = [
    "DEFAULT_SEED",
    "EOF_MARKER",
    "EUC_2D",
    "MAX_COORD",
    "MIN_CITIES",
    "NODE_COORD_SECTION",
    "RNG_SEEDS",
    "seed_everywhere",
    "ContractViolation",
    "DegenerateInput",
    "LoadError",
    "TSPError",
]
