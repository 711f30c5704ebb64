"""Construct-initialise-solve runs with timing and event logging."""

from __future__ import annotations

import hashlib
import time
from dataclasses import dataclass
from typing import Optional, Sequence

from solver import Board, SolveStats, solve

from . import log


@dataclass(frozen=True)
class SolveOutcome:
    """Result of a single solve run."""

    puzzle: Board
    board: Board
    solved: bool
    time_ms: int
    stats: SolveStats
    digest: str


def puzzle_digest(grid: Sequence[Sequence[int]]) -> str:
    """Hex ``sha256`` of the 81-digit string of ``grid``."""

    text = "".join(str(int(value)) for row in grid for value in row)
    return hashlib.sha256(text.encode("ascii")).hexdigest()


def solve_grid(grid: Sequence[Sequence[int]], *, stats: Optional[SolveStats] = None) -> SolveOutcome:
    stats = stats if stats is not None else SolveStats()
    puzzle = Board.from_zero_grid(grid)
    board = puzzle.clone()

    started = time.perf_counter()
    board.initialize_superpositions()
    solve(board, stats)
    time_ms = int((time.perf_counter() - started) * 1000)

    outcome = SolveOutcome(
        puzzle=puzzle,
        board=board,
        solved=board.is_solved(),
        time_ms=time_ms,
        stats=stats,
        digest=puzzle_digest(grid),
    )
    log.emit(
        log.EVENT_SOLVE,
        {
            "puzzle_digest": outcome.digest,
            "solved": outcome.solved,
            "time_ms": outcome.time_ms,
            "result": board.to_string(),
            "stats": stats.to_payload(),
        },
    )
    return outcome


__all__ = ["SolveOutcome", "puzzle_digest", "solve_grid"]
