"""Input contracts for Sudoku puzzles: parsing, schema and grid checks."""

from __future__ import annotations

from .errors import GridValidationError, SchemaValidationError, ValidationIssue, ValidationReport
from .loader import grid_from_document, load_grid_file, parse_grid_string
from .validator import assert_valid_grid, validate_grid

__all__ = [
    "GridValidationError",
    "SchemaValidationError",
    "ValidationIssue",
    "ValidationReport",
    "assert_valid_grid",
    "grid_from_document",
    "load_grid_file",
    "parse_grid_string",
    "validate_grid",
]
