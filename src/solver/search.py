"""Solve loop: propagation to a fixed point, single collapses, backtracking."""

from __future__ import annotations

from typing import Optional

from .board import BOARD_SIZE, Board
from .cell import Cell
from .deduce import solve_pure_negative
from .errors import SolverStateError
from .propagate import propagate
from .stats import SolveStats, TECHNIQUE_BRANCH, TECHNIQUE_SINGLE

# Consecutive iterations without a single collapse tolerated before branching.
STALL_LIMIT = 3


def _propagation_pass(board: Board, stats: Optional[SolveStats]) -> None:
    for idx in range(BOARD_SIZE):
        solve_pure_negative(board, idx, stats)
        propagate(board, idx, stats)


def _collapse_pass(board: Board, stats: Optional[SolveStats]) -> Optional[bool]:
    """Collapse every single-candidate cell.

    Returns whether anything collapsed, or ``None`` as soon as a cell runs
    out of candidates.
    """

    collapsed = False
    cells = board.cells
    for idx in range(BOARD_SIZE):
        cell = cells[idx]
        if cell.is_superposition:
            value = cell.collapse()
            if value is not None:
                cells[idx] = Cell.collapsed(value)
                if stats is not None:
                    stats.record_placement(TECHNIQUE_SINGLE)
                solve_pure_negative(board, idx, stats)
                propagate(board, idx, stats)
                collapsed = True

        if cells[idx].count_candidates() == 0:
            if stats is not None:
                stats.contradictions += 1
            return None
    return collapsed


def _backtrack(board: Board, stats: Optional[SolveStats], depth: int) -> None:
    idx = board.first_superposition()
    if idx is None:
        raise SolverStateError("unsolved board has no superposition left to branch on")

    for digit in board.cells[idx].candidates_list():
        branch = board.clone()
        branch[idx] = Cell.collapsed(digit)
        if stats is not None:
            stats.branches += 1
            stats.record_placement(TECHNIQUE_BRANCH)
        _solve(branch, stats, depth + 1)
        if branch.is_solved():
            board.adopt(branch)
            return


def _solve(board: Board, stats: Optional[SolveStats], depth: int) -> None:
    if stats is not None:
        stats.record_depth(depth)

    iters_without_collapse = 0
    while not board.is_solved():
        _propagation_pass(board, stats)

        collapsed = _collapse_pass(board, stats)
        if collapsed is None:
            return

        if collapsed:
            iters_without_collapse = 0
        else:
            iters_without_collapse += 1
        if iters_without_collapse > STALL_LIMIT:
            break

    if not board.is_solved():
        _backtrack(board, stats, depth)


def solve(board: Board, stats: Optional[SolveStats] = None) -> Board:
    """Solve ``board`` in place and return it.

    There is no success flag: a contradictory or unsolvable puzzle leaves the
    board unsolved, which callers detect with :meth:`Board.is_solved`.
    """

    _solve(board, stats, 0)
    return board


__all__ = ["STALL_LIMIT", "solve"]
