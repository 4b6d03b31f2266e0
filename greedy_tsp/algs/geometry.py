"""Light-weight geometry helpers shared by all tour builders."""

from __future__ import annotations

import logging
import math
from typing import Sequence, Tuple

import numpy as np

from greedy_tsp.common.errors import DegenerateInput

# Global debug switch
VERBOSE: bool = False

LOGGER_NAME = "greedy_tsp"
LOG_FORMAT = "[%(asctime)s][%(name)s][%(levelname)s]: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

_logger = logging.getLogger(LOGGER_NAME)

Point = Tuple[float, float]

# Rounded costs at or above this do not fit an int64.
_INT64_CEILING = float(2**63)


def log(msg: str, *args) -> None:  # pragma: no cover
    if VERBOSE:
        _logger.debug(msg, *args)


def enable_verbose(level: int = logging.DEBUG) -> logging.Logger:
    """Turn on the debug trace and attach a console handler once."""
    global VERBOSE
    VERBOSE = True
    _logger.setLevel(level)
    if not any(getattr(h, "_greedy_tsp_console", False) for h in _logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
        handler._greedy_tsp_console = True  # type: ignore[attr-defined]
        _logger.addHandler(handler)
    return _logger


# --------------------------------------------------------------------------- #
#  Distance metric                                                            #
# --------------------------------------------------------------------------- #
def nint(d: float) -> int:
    """Round half away from zero (TSPLIB ``nint``), not banker's rounding."""
    return int(math.floor(d + 0.5))


def euc_2d_cost(a: Point, b: Point) -> int:
    """Rounded Euclidean distance between two points."""
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return nint(math.sqrt(dx * dx + dy * dy))


def pairwise_costs(coords: np.ndarray, rows: np.ndarray, cols: np.ndarray) -> np.ndarray:
    """Vectorised :func:`euc_2d_cost` for the index pairs ``(rows[k], cols[k])``.

    Uses the same ``sqrt(dx*dx + dy*dy)`` expression as the scalar version so
    both agree exactly; ``np.hypot`` would not.  Raises :class:`DegenerateInput`
    rather than wrapping when a cost does not fit an int64.
    """
    dx = coords[rows, 0] - coords[cols, 0]
    dy = coords[rows, 1] - coords[cols, 1]
    rounded = np.floor(np.sqrt(dx * dx + dy * dy) + 0.5)
    if rounded.size and not rounded.max() < _INT64_CEILING:
        raise DegenerateInput(
            f"pairwise distance {rounded.max()!r} exceeds the int64 cost range"
        )
    return rounded.astype(np.int64)


def cost_matrix(coords: np.ndarray) -> np.ndarray:
    """Full symmetric ``(n, n)`` matrix of rounded costs."""
    n = len(coords)
    rows, cols = np.indices((n, n))
    return pairwise_costs(coords, rows.ravel(), cols.ravel()).reshape(n, n)


def route_cost(points: Sequence[Point]) -> int:
    """Sum of consecutive costs along ``points`` (pass a closed route to include the return)."""
    return sum(euc_2d_cost(points[k], points[k + 1]) for k in range(len(points) - 1))


__all__ = [
    "VERBOSE",
    "LOGGER_NAME",
    "LOG_FORMAT",
    "LOG_DATEFMT",
    "log",
    "enable_verbose",
    "nint",
    "euc_2d_cost",
    "pairwise_costs",
    "cost_matrix",
    "route_cost",
]
