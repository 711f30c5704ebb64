from __future__ import annotations

import json

import pytest

from contracts import (
    GridValidationError,
    SchemaValidationError,
    assert_valid_grid,
    grid_from_document,
    load_grid_file,
    parse_grid_string,
    validate_grid,
)

HARD = "020000000/000600003/074080000/000003002/080040010/600500000/000010780/500009000/000000040"


def test_parse_grid_string_accepts_dots_and_separators() -> None:
    text = HARD.replace("0", ".").replace("/", "\n")
    grid = parse_grid_string(text)
    assert grid[0] == [0, 2, 0, 0, 0, 0, 0, 0, 0]
    assert grid[8][7] == 4


def test_parse_grid_string_reads_printed_boards() -> None:
    drawing = "\n".join(
        [
            "+-------+-------+-------+",
            "| 1 2 3 | 4 5 6 | 7 8 9 |",
        ]
    )
    text = drawing + "\n" + "0" * 72
    grid = parse_grid_string(text)
    assert grid[0] == list(range(1, 10))


def test_parse_grid_string_rejects_bad_input() -> None:
    with pytest.raises(GridValidationError) as excinfo:
        parse_grid_string("12x" + "0" * 78)
    assert excinfo.value.issues[0].code == "grid-char"

    with pytest.raises(GridValidationError) as excinfo:
        parse_grid_string("0" * 80)
    assert excinfo.value.issues[0].code == "grid-length"


def test_validate_grid_reports_shape_errors() -> None:
    report = validate_grid([[0] * 9] * 8)
    assert not report.ok
    assert report.errors[0].code == "grid-rows"

    bad = [[0] * 9 for _ in range(9)]
    bad[2][3] = 12
    report = validate_grid(bad)
    assert [issue.path for issue in report.errors] == ["$[2][3]"]
    with pytest.raises(GridValidationError):
        assert_valid_grid(bad)


def test_duplicate_givens_are_warnings_only() -> None:
    grid = [[0] * 9 for _ in range(9)]
    grid[0][0] = 4
    grid[0][5] = 4
    report = validate_grid(grid)
    assert report.ok
    assert [issue.code for issue in report.warnings] == ["duplicate-given"]
    assert report.warnings[0].severity == "WARN"


def test_grid_from_document_accepts_string_and_array() -> None:
    from_string = grid_from_document({"name": "hard", "grid": HARD})
    from_array = grid_from_document({"grid": from_string})
    assert from_string == from_array


def test_grid_from_document_enforces_schema() -> None:
    with pytest.raises(SchemaValidationError) as excinfo:
        grid_from_document({"grid": [[0] * 9] * 9, "extra": True})
    assert excinfo.value.code == "schema-violation"

    with pytest.raises(SchemaValidationError):
        grid_from_document({"grid": [[0] * 9] * 8})

    with pytest.raises(SchemaValidationError):
        grid_from_document({"name": "missing grid"})


def test_load_grid_file_json_and_text(tmp_path) -> None:
    json_path = tmp_path / "puzzle.json"
    json_path.write_text(json.dumps({"grid": HARD}), encoding="utf-8")
    text_path = tmp_path / "puzzle.txt"
    text_path.write_text(HARD.replace("/", "\n"), encoding="utf-8")

    assert load_grid_file(json_path) == load_grid_file(text_path)
