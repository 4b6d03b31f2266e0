"""TSPLIB coordinate files in, JSONL results out."""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from greedy_tsp.common.constants import EOF_MARKER, EUC_2D, MAX_COORD, NODE_COORD_SECTION
from greedy_tsp.common.errors import DegenerateInput, LoadError
from greedy_tsp.data.schemas import CityRecord, Instance

__all__ = [
    "parse_tsplib",
    "read_tsplib",
    "write_tsplib",
    "write_results_jsonl",
]


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def _parse_header(line: str) -> tuple[str, str] | None:
    if ":" in line:
        key, _, value = line.partition(":")
    else:
        # Some files write "NAME dj38" without the colon.
        key, _, value = line.partition(" ")
    key = key.strip().upper()
    if not key:
        return None
    return key, value.strip()


def _parse_record(line: str, *, path: Optional[str | Path], line_no: int) -> CityRecord:
    fields = line.split()
    if len(fields) != 3:
        raise LoadError(
            f"expected '<id> <x> <y>', got {len(fields)} field(s): {line!r}",
            path=path,
            line_no=line_no,
        )
    try:
        cid = int(fields[0])
        x = float(fields[1])
        y = float(fields[2])
    except ValueError as exc:
        raise LoadError(f"malformed number in {line!r}", path=path, line_no=line_no) from exc
    if not (math.isfinite(x) and math.isfinite(y)):
        raise LoadError(f"non-finite coordinate in {line!r}", path=path, line_no=line_no)
    if abs(x) > MAX_COORD or abs(y) > MAX_COORD:
        raise LoadError(
            f"coordinate magnitude above {MAX_COORD:g} in {line!r}",
            path=path,
            line_no=line_no,
        )
    return cid, x, y


def parse_tsplib(lines: Iterable[str], *, path: Optional[str | Path] = None) -> Instance:
    """Parse TSPLIB text into an :class:`Instance`.

    Header ``KEY : VALUE`` lines precede ``NODE_COORD_SECTION``; each data line
    is ``<int id> <float x> <float y>`` and ``EOF`` ends the section.  A file
    that stops without ``EOF`` is accepted.  Any malformed data line aborts the
    whole load with :class:`LoadError`.
    """
    header: Dict[str, str] = {}
    records: List[CityRecord] = []
    seen: Dict[int, int] = {}
    in_section = False

    for line_no, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not in_section:
            if not line:
                continue
            if line == NODE_COORD_SECTION:
                in_section = True
                continue
            if line == EOF_MARKER:
                break
            parsed = _parse_header(line)
            if parsed is not None:
                header[parsed[0]] = parsed[1]
            continue

        if line == EOF_MARKER:
            break
        if not line:
            continue
        cid, x, y = _parse_record(line, path=path, line_no=line_no)
        if cid in seen:
            raise LoadError(
                f"duplicate city id {cid} (first defined on line {seen[cid]})",
                path=path,
                line_no=line_no,
            )
        seen[cid] = line_no
        records.append((cid, x, y))

    if not in_section:
        raise LoadError(f"no {NODE_COORD_SECTION} found", path=path)

    weight_type = header.get("EDGE_WEIGHT_TYPE")
    if weight_type is not None and weight_type.upper() != EUC_2D:
        raise LoadError(f"unsupported EDGE_WEIGHT_TYPE {weight_type!r}; only {EUC_2D}", path=path)

    dimension = header.get("DIMENSION")
    if dimension is not None:
        try:
            expected = int(dimension)
        except ValueError as exc:
            raise LoadError(f"malformed DIMENSION {dimension!r}", path=path) from exc
        if expected != len(records):
            raise LoadError(
                f"DIMENSION is {expected} but {len(records)} coordinate records were read",
                path=path,
            )

    try:
        return Instance(
            cities=tuple(records),
            name=header.get("NAME", Path(path).stem if path is not None else "unnamed"),
            comment=header.get("COMMENT", ""),
        )
    except DegenerateInput as exc:  # pragma: no cover - records are pre-validated
        raise LoadError(str(exc), path=path) from exc


def read_tsplib(path: str | Path) -> Instance:
    target = Path(path)
    try:
        with target.open("r", encoding="utf-8") as handle:
            return parse_tsplib(handle, path=target)
    except OSError as exc:
        raise LoadError(f"cannot read file: {exc.strerror or exc}", path=target) from exc
    except UnicodeDecodeError as exc:
        raise LoadError("file is not valid UTF-8 text", path=target) from exc


def write_tsplib(path: str | Path, instance: Instance) -> None:
    target = Path(path)
    _ensure_parent(target)
    with target.open("w", encoding="utf-8") as handle:
        handle.write(f"NAME : {instance.name}\n")
        if instance.comment:
            handle.write(f"COMMENT : {instance.comment}\n")
        handle.write("TYPE : TSP\n")
        handle.write(f"DIMENSION : {instance.n_cities}\n")
        handle.write(f"EDGE_WEIGHT_TYPE : {EUC_2D}\n")
        handle.write(f"{NODE_COORD_SECTION}\n")
        for cid, x, y in instance.cities:
            handle.write(f"{cid} {x!r} {y!r}\n")
        handle.write(f"{EOF_MARKER}\n")


def write_results_jsonl(path: str | Path, records: Sequence[Mapping[str, Any]]) -> None:
    target = Path(path)
    _ensure_parent(target)
    with target.open("w", encoding="utf-8") as handle:
        for payload in records:
            handle.write(json.dumps(payload, sort_keys=True, separators=(",", ":"), allow_nan=False))
            handle.write("\n")
