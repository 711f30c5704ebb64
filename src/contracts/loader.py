"""Readers that turn textual or JSON puzzles into 9x9 digit grids."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List

from solver.board import BOARD_LEN, BOARD_SIZE

from .errors import GridValidationError, make_error
from .schema_validator import validate_document
from .validator import assert_valid_grid

_SEPARATORS = set(" \t\r\n|+-/")


def parse_grid_string(text: str) -> List[List[int]]:
    """Parse 81 cells written as digits, ``0`` or ``.`` marking blanks.

    Whitespace and the ``| + - /`` characters used by grid drawings are
    ignored, so the output of the printer can be fed back in.
    """

    cells: List[int] = []
    for position, ch in enumerate(text):
        if ch in _SEPARATORS:
            continue
        if ch == ".":
            cells.append(0)
        elif ch in "0123456789":
            cells.append(int(ch))
        else:
            raise GridValidationError(
                [make_error("grid-char", f"unexpected character {ch!r}", f"$[{position}]")]
            )
    if len(cells) != BOARD_SIZE:
        raise GridValidationError(
            [make_error("grid-length", f"expected {BOARD_SIZE} cells, got {len(cells)}", "$")]
        )
    return [cells[start : start + BOARD_LEN] for start in range(0, BOARD_SIZE, BOARD_LEN)]


def grid_from_document(document: Any) -> List[List[int]]:
    """Extract the grid from a schema-valid puzzle document."""

    validate_document(document)
    raw = document["grid"]
    if isinstance(raw, str):
        grid = parse_grid_string(raw)
    else:
        grid = [list(row) for row in raw]
    assert_valid_grid(grid)
    return grid


def load_grid_file(path: str | Path) -> List[List[int]]:
    """Load a grid from a ``.json`` puzzle document or a plain text file."""

    path = Path(path)
    text = path.read_text("utf-8")
    if path.suffix.lower() == ".json":
        return grid_from_document(json.loads(text))
    return parse_grid_string(text)


__all__ = ["grid_from_document", "load_grid_file", "parse_grid_string"]
