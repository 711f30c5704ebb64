"""Wave-function-collapse solver for the classic 9x9 Sudoku."""

from __future__ import annotations

from .board import (
    BLOCK_SIZE,
    BOARD_LEN,
    BOARD_SIZE,
    Board,
    Grid,
    block_start,
    col_start,
    coord_to_idx,
    idx_to_coord,
    row_start,
)
from .cell import Cell, CellKind, CellValidationError, TokenKind
from .deduce import solve_pure_negative
from .errors import SolverStateError
from .propagate import propagate
from .search import STALL_LIMIT, solve
from .stats import SolveStats


def construct(grid) -> Board:
    """Build a board from a 9x9 digit grid (``0`` = blank)."""

    return Board.from_zero_grid(grid)


def initialize(board: Board) -> Board:
    return board.initialize_superpositions()


def is_solved(board: Board) -> bool:
    return board.is_solved()


__all__ = [
    "BLOCK_SIZE",
    "BOARD_LEN",
    "BOARD_SIZE",
    "Board",
    "Cell",
    "CellKind",
    "CellValidationError",
    "Grid",
    "STALL_LIMIT",
    "SolveStats",
    "SolverStateError",
    "TokenKind",
    "block_start",
    "col_start",
    "construct",
    "coord_to_idx",
    "idx_to_coord",
    "initialize",
    "is_solved",
    "propagate",
    "row_start",
    "solve",
    "solve_pure_negative",
]
