"""Pure-negative deduction (hidden singles).

If no other cell of a row, column or block can hold a digit, the cell that
still lists it as a candidate must hold it.
"""

from __future__ import annotations

from typing import Optional, Sequence

from .board import Board, peer_groups
from .cell import Cell, CellKind
from .stats import SolveStats, TECHNIQUE_PURE_NEGATIVE


def _held_elsewhere(cells: Sequence[Cell], group: Sequence[int], idx: int, digit: int) -> bool:
    for peer in group:
        if peer == idx:
            continue
        cell = cells[peer]
        if cell.kind is CellKind.SUPERPOSITION:
            if cell.candidates[digit - 1]:
                return True
        elif cell.value == digit:
            # Peers that were never propagated still hold their digit.
            return True
    return False


def solve_pure_negative(board: Board, idx: int, stats: Optional[SolveStats] = None) -> Optional[int]:
    """Collapse the cell at ``idx`` when it is the only place for a digit.

    Candidates are tried in ascending order and, for each one, the row is
    checked before the column and the column before the block.  The first
    forced digit wins.  Returns the digit placed, or ``None``.
    """

    cell = board.cells[idx]
    if cell.kind is not CellKind.SUPERPOSITION:
        return None

    cells = board.cells
    for digit in cell.candidates_list():
        for group in peer_groups(idx):
            if not _held_elsewhere(cells, group, idx, digit):
                cells[idx] = Cell.collapsed(digit)
                if stats is not None:
                    stats.record_placement(TECHNIQUE_PURE_NEGATIVE)
                return digit
    return None


__all__ = ["solve_pure_negative"]
