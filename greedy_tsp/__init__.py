# Solver APIs – default exports
from .algs.reference import build_tour, greedy_edge
from .algs.heuristics import nearest_neighbor_tour

# Geometry, data model & constants
from .algs.geometry import VERBOSE, enable_verbose, euc_2d_cost, route_cost
from .common.constants import (
    DEFAULT_SEED,
    RNG_SEEDS,
    seed_everywhere,
)
from .common.errors import ContractViolation, DegenerateInput, LoadError, TSPError
from .data.schemas import Instance, TourResult, validate_tour
from .data.io_utils import read_tsplib
from .report import TourReport, format_report, timed

# Building blocks – available under .algs.*
from . import algs as algs

__version__ = "0.1.0"

__all__ = [
    # solvers
    "build_tour",
    "greedy_edge",
    "nearest_neighbor_tour",
    # geometry
    "VERBOSE",
    "enable_verbose",
    "euc_2d_cost",
    "route_cost",
    "DEFAULT_SEED",
    "RNG_SEEDS",
    "seed_everywhere",
    # errors
    "TSPError",
    "LoadError",
    "DegenerateInput",
    "ContractViolation",
    # data
    "Instance",
    "TourResult",
    "validate_tour",
    "read_tsplib",
    # reporting
    "TourReport",
    "format_report",
    "timed",
    "algs",
]
