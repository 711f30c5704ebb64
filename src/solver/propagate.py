"""Peer elimination: broadcast a determined digit to its row, column and block."""

from __future__ import annotations

from typing import Optional

from .board import Board, peer_groups
from .cell import CellKind
from .stats import SolveStats


def propagate(board: Board, idx: int, stats: Optional[SolveStats] = None) -> None:
    """Clear the digit held at ``idx`` from the candidates of every peer.

    Only superposition peers are touched and a cell is never collapsed here;
    spotting peers that end up with zero or one candidate is left to the
    solve loop.  Running it again for the same cell changes nothing.
    """

    cell = board.cells[idx]
    if cell.kind is not CellKind.FIXED and cell.kind is not CellKind.COLLAPSED:
        return

    digit = cell.value
    cells = board.cells
    for group in peer_groups(idx):
        for peer in group:
            current = cells[peer]
            narrowed = current.without(digit)
            if narrowed is not current:
                cells[peer] = narrowed
                if stats is not None:
                    stats.eliminations += 1


__all__ = ["propagate"]
