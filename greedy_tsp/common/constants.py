from __future__ import annotations

import os
import random
from typing import Dict

import numpy as np

DEFAULT_SEED: int = 1337

RNG_SEEDS: Dict[str, int] = {
    "tests": DEFAULT_SEED,
    "bench": 4242,
    "data": 5150,
}

# TSPLIB sentinels and the only edge weight type we accept.
NODE_COORD_SECTION: str = "NODE_COORD_SECTION"
EOF_MARKER: str = "EOF"
EUC_2D: str = "EUC_2D"

# Minimum number of cities for which a tour is defined.
MIN_CITIES: int = 2

# Largest accepted |x| or |y|.  Any two such points are at most 2**62 * sqrt(2)
# apart, so every rounded cost fits an int64.
MAX_COORD: float = float(2**61)


def seed_everywhere(seed: int) -> None:
    """Seed all supported RNG backends deterministically."""
    random.seed(seed)
    os.environ["PYTHONHASHSEED"] = str(seed)
    np.random.seed(seed)


__all__ = [
    "DEFAULT_SEED",
    "RNG_SEEDS",
    "NODE_COORD_SECTION",
    "EOF_MARKER",
    "EUC_2D",
    "MIN_CITIES",
    "MAX_COORD",
    "seed_everywhere",
]
