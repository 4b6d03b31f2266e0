"""Synthetic Euclidean instance generation.

``InstanceConfig`` declares the family and its geometric knobs;
``draw_instance`` samples an :class:`~greedy_tsp.data.schemas.Instance` from a
``numpy.random.Generator`` so the same seed always reproduces the same cities.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from greedy_tsp.data.schemas import Instance

FAMILIES = ("uniform", "clustered", "grid")


@dataclass(frozen=True)
class InstanceConfig:
    """Configuration bundle for instance families."""

    n: int
    square_size: float = 1000.0
    family: str = "uniform"
    clusters: int = 5
    spread: float = 0.05  # cluster std-dev as a fraction of square_size
    integral: bool = False  # snap coordinates to integers, as many TSPLIB files do

    def __post_init__(self) -> None:
        if self.n < 0:
            raise ValueError("n must be non-negative")
        if self.family not in FAMILIES:
            raise ValueError(f"family must be one of {FAMILIES}, got {self.family!r}")
        if not (math.isfinite(self.square_size) and self.square_size > 0.0):
            raise ValueError("square_size must be positive and finite")
        if self.clusters <= 0:
            raise ValueError("clusters must be positive")
        if not (0.0 < self.spread < 1.0):
            raise ValueError("spread must lie in (0, 1)")


def _uniform(cfg: InstanceConfig, rng: np.random.Generator) -> np.ndarray:
    return rng.uniform(0.0, cfg.square_size, size=(cfg.n, 2))


def _clustered(cfg: InstanceConfig, rng: np.random.Generator) -> np.ndarray:
    centres = rng.uniform(0.1 * cfg.square_size, 0.9 * cfg.square_size, size=(cfg.clusters, 2))
    labels = rng.integers(0, cfg.clusters, size=cfg.n)
    pts = centres[labels] + rng.normal(0.0, cfg.spread * cfg.square_size, size=(cfg.n, 2))
    return np.clip(pts, 0.0, cfg.square_size)


def _grid(cfg: InstanceConfig, rng: np.random.Generator) -> np.ndarray:
    side = max(1, math.ceil(math.sqrt(cfg.n)))
    step = cfg.square_size / side
    cells = rng.permutation(side * side)[: cfg.n]
    return np.stack([(cells % side) * step, (cells // side) * step], axis=1).astype(np.float64)


_SAMPLERS = {"uniform": _uniform, "clustered": _clustered, "grid": _grid}


def draw_instance(cfg: InstanceConfig, rng: np.random.Generator, *, name: str | None = None) -> Instance:
    pts = _SAMPLERS[cfg.family](cfg, rng)
    if cfg.integral:
        pts = np.rint(pts)
    cities = tuple((i + 1, float(x), float(y)) for i, (x, y) in enumerate(pts))
    return Instance(cities=cities, name=name or f"{cfg.family}{cfg.n}")


def random_instance(n: int, seed: int, **kwargs) -> Instance:
    """Shorthand for ``draw_instance(InstanceConfig(n, **kwargs), default_rng(seed))``."""
    return draw_instance(InstanceConfig(n=n, **kwargs), np.random.default_rng(seed))


__all__ = ["FAMILIES", "InstanceConfig", "draw_instance", "random_instance"]
