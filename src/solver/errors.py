"""Error types raised by the solver core."""

from __future__ import annotations


class SolverStateError(RuntimeError):
    """Raised when the board is in a state the solver can never produce.

    Puzzle failures (contradictions, exhausted search) are not errors; they
    leave the board unsolved.  This exception marks programming mistakes such
    as initialising a board twice or solving one that was never initialised.
    """


__all__ = ["SolverStateError"]
