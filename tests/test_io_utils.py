from __future__ import annotations

import json
from pathlib import Path

import pytest

from greedy_tsp.algs.reference import build_tour
from greedy_tsp.common.errors import LoadError
from greedy_tsp.data.io_utils import parse_tsplib, read_tsplib, write_results_jsonl, write_tsplib
from greedy_tsp.data.schemas import Instance, tour_result_to_dict

SQUARE_TSP = """\
NAME : square4
COMMENT : 10x10 square
TYPE : TSP
DIMENSION : 4
EDGE_WEIGHT_TYPE : EUC_2D
NODE_COORD_SECTION
   1 0 0
2 0.0 10.0\t
3   10 10

4 10.0 0.0
EOF
this line is ignored
"""


def test_parse_square_file() -> None:
    inst = parse_tsplib(SQUARE_TSP.splitlines())
    assert inst.name == "square4"
    assert inst.comment == "10x10 square"
    assert inst.cities == ((1, 0.0, 0.0), (2, 0.0, 10.0), (3, 10.0, 10.0), (4, 10.0, 0.0))
    assert build_tour(inst).total_distance == 40


def test_missing_eof_is_tolerated() -> None:
    text = "NODE_COORD_SECTION\n1 0 0\n2 3 4\n"
    inst = parse_tsplib(text.splitlines())
    assert inst.n_cities == 2
    assert inst.name == "unnamed"


def test_malformed_coordinate_aborts_load() -> None:
    text = SQUARE_TSP.replace("3   10 10", "3 ten 10")
    with pytest.raises(LoadError) as exc_info:
        parse_tsplib(text.splitlines(), path="square.tsp")
    assert exc_info.value.line_no == 9
    assert exc_info.value.path == "square.tsp"
    assert "malformed" in str(exc_info.value)


@pytest.mark.parametrize(
    "bad_line",
    ["1.5 0 0", "5 1 2 3", "5 1", "5 nan 1", "5 1 inf", "5 1e19 0"],
)
def test_bad_data_lines(bad_line: str) -> None:
    text = f"NODE_COORD_SECTION\n1 0 0\n{bad_line}\nEOF\n"
    with pytest.raises(LoadError):
        parse_tsplib(text.splitlines())


def test_missing_section_is_a_load_error() -> None:
    with pytest.raises(LoadError, match="NODE_COORD_SECTION"):
        parse_tsplib(["NAME : nothing", "DIMENSION : 0", "EOF"])


def test_dimension_mismatch() -> None:
    text = SQUARE_TSP.replace("DIMENSION : 4", "DIMENSION : 5")
    with pytest.raises(LoadError, match="DIMENSION"):
        parse_tsplib(text.splitlines())


def test_non_euclidean_weight_type_rejected() -> None:
    text = SQUARE_TSP.replace("EUC_2D", "GEO")
    with pytest.raises(LoadError, match="GEO"):
        parse_tsplib(text.splitlines())


def test_duplicate_id_reports_both_lines() -> None:
    text = "NODE_COORD_SECTION\n1 0 0\n2 1 1\n1 5 5\nEOF\n"
    with pytest.raises(LoadError, match="first defined on line 2") as exc_info:
        parse_tsplib(text.splitlines())
    assert exc_info.value.line_no == 4


def test_read_missing_file(tmp_path: Path) -> None:
    with pytest.raises(LoadError) as exc_info:
        read_tsplib(tmp_path / "nope.tsp")
    assert isinstance(exc_info.value.__cause__, OSError)


def test_write_then_read_preserves_instance(tmp_path: Path) -> None:
    inst = Instance(
        cities=((3, 0.1, 1e-7), (1, 12345.678901, -2.5), (2, 1e20, 0.0)),
        name="odd_floats",
        comment="round trip",
    )
    target = tmp_path / "nested" / "odd.tsp"
    write_tsplib(target, inst)
    back = read_tsplib(target)
    assert back == inst
    assert back.hash_id == inst.hash_id


def test_name_defaults_to_file_stem(tmp_path: Path) -> None:
    target = tmp_path / "berlin_mini.tsp"
    target.write_text("NODE_COORD_SECTION\n1 0 0\n2 1 1\nEOF\n", encoding="utf-8")
    assert read_tsplib(target).name == "berlin_mini"


def test_write_results_jsonl(tmp_path: Path, square_cities) -> None:
    inst = Instance(tuple(square_cities), name="square")
    payload = tour_result_to_dict(build_tour(inst), inst)
    out = tmp_path / "out" / "results.jsonl"
    write_results_jsonl(out, [payload, payload])
    lines = out.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    rec = json.loads(lines[0])
    assert rec["total_distance"] == 40
    assert rec["instance"]["name"] == "square"
    assert rec["tour"] == [1, 2, 3, 4, 1]
