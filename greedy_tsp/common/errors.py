"""Exception hierarchy shared by the loader, the solvers and the reporter.

Problems that untrusted input can trigger derive from :class:`ValueError`;
broken internal invariants derive from :class:`RuntimeError`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class TSPError(Exception):
    """Base class for every error raised by :mod:`greedy_tsp`."""


class LoadError(TSPError, ValueError):
    """Malformed or unreadable coordinate input."""

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str | Path] = None,
        line_no: Optional[int] = None,
    ) -> None:
        self.path = None if path is None else str(path)
        self.line_no = line_no
        where = []
        if self.path is not None:
            where.append(self.path)
        if line_no is not None:
            where.append(f"line {line_no}")
        prefix = ":".join(where)
        super().__init__(f"{prefix}: {message}" if prefix else message)


class DegenerateInput(TSPError, ValueError):
    """Input for which no tour is defined (fewer than two distinct cities)."""


class ContractViolation(TSPError, RuntimeError):
    """An invariant of the tour construction was broken."""


__all__ = [
    "TSPError",
    "LoadError",
    "DegenerateInput",
    "ContractViolation",
]
