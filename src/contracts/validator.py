"""Structural checks for 9x9 digit grids.

Shape and range problems are errors: the solver cannot even build a board
from such a grid.  Duplicate givens are only warnings, because a
contradictory puzzle is still a legal solver input and simply stays unsolved.
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

from solver.board import BLOCK_SIZE, BOARD_LEN

from .errors import (
    GridValidationError,
    ValidationIssue,
    ValidationReport,
    make_error,
    make_warning,
)


def _check_shape(grid: Any) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    if not isinstance(grid, (list, tuple)):
        return [make_error("grid-type", "grid must be a sequence of rows", "$")]
    if len(grid) != BOARD_LEN:
        issues.append(make_error("grid-rows", f"expected {BOARD_LEN} rows, got {len(grid)}", "$"))
    for r, row in enumerate(grid):
        path = f"$[{r}]"
        if not isinstance(row, (list, tuple)):
            issues.append(make_error("row-type", "row must be a sequence of digits", path))
            continue
        if len(row) != BOARD_LEN:
            issues.append(make_error("row-length", f"expected {BOARD_LEN} cells, got {len(row)}", path))
        for c, value in enumerate(row):
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= BOARD_LEN:
                issues.append(
                    make_error("cell-range", f"cell must be an integer in [0, {BOARD_LEN}], got {value!r}", f"{path}[{c}]")
                )
    return issues


def _houses() -> List[Tuple[str, List[Tuple[int, int]]]]:
    houses: List[Tuple[str, List[Tuple[int, int]]]] = []
    for r in range(BOARD_LEN):
        houses.append((f"row {r}", [(r, c) for c in range(BOARD_LEN)]))
    for c in range(BOARD_LEN):
        houses.append((f"column {c}", [(r, c) for r in range(BOARD_LEN)]))
    for b in range(BOARD_LEN):
        top = BLOCK_SIZE * (b // BLOCK_SIZE)
        left = BLOCK_SIZE * (b % BLOCK_SIZE)
        houses.append(
            (
                f"block {b}",
                [(top + i, left + j) for i in range(BLOCK_SIZE) for j in range(BLOCK_SIZE)],
            )
        )
    return houses


def _check_duplicates(grid: Any) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    for label, cells in _houses():
        seen: Dict[int, Tuple[int, int]] = {}
        for r, c in cells:
            value = grid[r][c]
            if value == 0:
                continue
            if value in seen:
                first = seen[value]
                issues.append(
                    make_warning(
                        "duplicate-given",
                        f"digit {value} appears twice in {label} (also at r{first[0]}c{first[1]})",
                        f"$[{r}][{c}]",
                    )
                )
            else:
                seen[value] = (r, c)
    return issues


def validate_grid(grid: Any) -> ValidationReport:
    """Return a report describing what is wrong with ``grid``."""

    errors = _check_shape(grid)
    warnings: List[ValidationIssue] = []
    if not errors:
        warnings = _check_duplicates(grid)
    return ValidationReport(ok=not errors, errors=errors, warnings=warnings)


def assert_valid_grid(grid: Any) -> ValidationReport:
    """Raise :class:`GridValidationError` unless the grid can be solved."""

    report = validate_grid(grid)
    if not report.ok:
        raise GridValidationError(report.errors)
    return report


__all__ = ["assert_valid_grid", "validate_grid"]
