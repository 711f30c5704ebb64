"""Cell states for the wave-function-collapse Sudoku solver.

A cell is a closed variant: it is either blank (before initialisation), a
given clue, a digit deduced by the solver, or a superposition of the digits
that are still possible.  Cells are immutable; the board replaces a cell
whenever its state changes, which keeps board clones cheap and independent.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

DIGITS = 9

_ALL_CANDIDATES: Tuple[bool, ...] = (True,) * DIGITS


class CellValidationError(ValueError):
    """Raised when a cell payload does not describe a legal cell state."""


class CellKind(str, Enum):
    """Discriminator of the four cell forms."""

    BLANK = "BLANK"
    FIXED = "FIXED"
    COLLAPSED = "COLLAPSED"
    SUPERPOSITION = "SUPERPOSITION"


class TokenKind(str, Enum):
    """What a renderer has to draw for a cell."""

    BLANK = "blank"
    GIVEN = "given"
    DEDUCED = "deduced"
    UNRESOLVED = "unresolved"


@dataclass(frozen=True, slots=True)
class Cell:
    """Single board cell.

    ``value`` is meaningful for ``FIXED`` and ``COLLAPSED`` cells only and
    ``candidates`` for ``SUPERPOSITION`` cells only; position ``k`` of the
    candidate tuple stands for digit ``k + 1``.
    """

    kind: CellKind
    value: int = 0
    candidates: Tuple[bool, ...] = ()

    def __post_init__(self) -> None:
        if self.kind in (CellKind.FIXED, CellKind.COLLAPSED):
            if not 1 <= self.value <= DIGITS:
                raise CellValidationError(f"digit must be in [1, {DIGITS}], got {self.value!r}")
        elif self.kind is CellKind.SUPERPOSITION:
            if len(self.candidates) != DIGITS:
                raise CellValidationError(
                    f"superposition needs {DIGITS} candidate flags, got {len(self.candidates)}"
                )

    @classmethod
    def blank(cls) -> "Cell":
        return _BLANK

    @classmethod
    def fixed(cls, value: int) -> "Cell":
        return cls(CellKind.FIXED, int(value))

    @classmethod
    def collapsed(cls, value: int) -> "Cell":
        return cls(CellKind.COLLAPSED, int(value))

    @classmethod
    def superposition(cls, candidates: Optional[Tuple[bool, ...]] = None) -> "Cell":
        if candidates is None:
            return _FULL_SUPERPOSITION
        return cls(CellKind.SUPERPOSITION, candidates=tuple(bool(flag) for flag in candidates))

    @property
    def is_determined(self) -> bool:
        return self.kind is CellKind.FIXED or self.kind is CellKind.COLLAPSED

    @property
    def is_superposition(self) -> bool:
        return self.kind is CellKind.SUPERPOSITION

    def count_candidates(self) -> Optional[int]:
        """Number of remaining candidates, ``None`` for non-superpositions."""

        if self.kind is not CellKind.SUPERPOSITION:
            return None
        return sum(self.candidates)

    def collapse(self) -> Optional[int]:
        """Return the only remaining digit, or ``None`` when not collapsible."""

        if self.kind is not CellKind.SUPERPOSITION:
            return None
        value = None
        for position, flag in enumerate(self.candidates):
            if flag:
                if value is not None:
                    return None
                value = position + 1
        return value

    def has_candidate(self, digit: int) -> bool:
        return self.kind is CellKind.SUPERPOSITION and self.candidates[digit - 1]

    def candidates_list(self) -> List[int]:
        return [position + 1 for position, flag in enumerate(self.candidates) if flag]

    def without(self, digit: int) -> "Cell":
        """Return the cell with ``digit`` removed from its candidates."""

        if not self.has_candidate(digit):
            return self
        flags = list(self.candidates)
        flags[digit - 1] = False
        return Cell(CellKind.SUPERPOSITION, candidates=tuple(flags))

    def token(self) -> Tuple[TokenKind, int]:
        if self.kind is CellKind.FIXED:
            return TokenKind.GIVEN, self.value
        if self.kind is CellKind.COLLAPSED:
            return TokenKind.DEDUCED, self.value
        if self.kind is CellKind.SUPERPOSITION:
            return TokenKind.UNRESOLVED, 0
        return TokenKind.BLANK, 0


_BLANK = Cell(CellKind.BLANK)
_FULL_SUPERPOSITION = Cell(CellKind.SUPERPOSITION, candidates=_ALL_CANDIDATES)


__all__ = ["Cell", "CellKind", "CellValidationError", "DIGITS", "TokenKind"]
