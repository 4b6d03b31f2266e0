"""Instance schemas, TSPLIB I/O and synthetic instance generation."""

from __future__ import annotations

from greedy_tsp.data.gen_instances import InstanceConfig, draw_instance, random_instance
from greedy_tsp.data.io_utils import (
    parse_tsplib,
    read_tsplib,
    write_results_jsonl,
    write_tsplib,
)
from greedy_tsp.data.schemas import (
    Instance,
    TourResult,
    compute_instance_hash,
    tour_result_to_dict,
    validate_tour,
)

__all__ = [
    "Instance",
    "InstanceConfig",
    "TourResult",
    "compute_instance_hash",
    "draw_instance",
    "parse_tsplib",
    "random_instance",
    "read_tsplib",
    "tour_result_to_dict",
    "validate_tour",
    "write_results_jsonl",
    "write_tsplib",
]
