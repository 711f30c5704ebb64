"""Board model and coordinate arithmetic for the classic 9x9 Sudoku."""

from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

from .cell import Cell, CellKind, TokenKind
from .errors import SolverStateError

BLOCK_SIZE = 3
BOARD_LEN = BLOCK_SIZE * BLOCK_SIZE
BOARD_SIZE = BOARD_LEN * BOARD_LEN

Grid = List[List[int]]


def coord_to_idx(row: int, col: int) -> int:
    return row * BOARD_LEN + col


def idx_to_coord(idx: int) -> Tuple[int, int]:
    return idx // BOARD_LEN, idx % BOARD_LEN


def row_start(idx: int) -> int:
    """Index of the first cell in the row of ``idx``."""

    return (idx // BOARD_LEN) * BOARD_LEN


def col_start(idx: int) -> int:
    """Index of the top cell in the column of ``idx``; the column stride is ``BOARD_LEN``."""

    return idx % BOARD_LEN


def block_start(idx: int) -> int:
    """Index of the top-left cell of the 3x3 block containing ``idx``."""

    row, col = idx_to_coord(idx)
    return coord_to_idx(row - row % BLOCK_SIZE, col - col % BLOCK_SIZE)


def _row_indices(idx: int) -> Tuple[int, ...]:
    start = row_start(idx)
    return tuple(range(start, start + BOARD_LEN))


def _col_indices(idx: int) -> Tuple[int, ...]:
    return tuple(range(col_start(idx), BOARD_SIZE, BOARD_LEN))


def _block_indices(idx: int) -> Tuple[int, ...]:
    top, left = idx_to_coord(block_start(idx))
    return tuple(
        coord_to_idx(row, col)
        for row in range(top, top + BLOCK_SIZE)
        for col in range(left, left + BLOCK_SIZE)
    )


_ROW_GROUPS = tuple(_row_indices(idx) for idx in range(BOARD_SIZE))
_COL_GROUPS = tuple(_col_indices(idx) for idx in range(BOARD_SIZE))
_BLOCK_GROUPS = tuple(_block_indices(idx) for idx in range(BOARD_SIZE))


def row_group(idx: int) -> Tuple[int, ...]:
    return _ROW_GROUPS[idx]


def col_group(idx: int) -> Tuple[int, ...]:
    return _COL_GROUPS[idx]


def block_group(idx: int) -> Tuple[int, ...]:
    return _BLOCK_GROUPS[idx]


def peer_groups(idx: int) -> Tuple[Tuple[int, ...], Tuple[int, ...], Tuple[int, ...]]:
    """Row, column and block of ``idx``, in the order the solver checks them."""

    return _ROW_GROUPS[idx], _COL_GROUPS[idx], _BLOCK_GROUPS[idx]


class Board:
    """Fixed-size, row-major collection of 81 cells."""

    __slots__ = ("cells",)

    def __init__(self, cells: Sequence[Cell] | None = None) -> None:
        if cells is None:
            self.cells: List[Cell] = [Cell.blank()] * BOARD_SIZE
        else:
            if len(cells) != BOARD_SIZE:
                raise ValueError(f"board needs {BOARD_SIZE} cells, got {len(cells)}")
            self.cells = list(cells)

    @classmethod
    def from_zero_grid(cls, grid: Sequence[Sequence[int]]) -> "Board":
        """Build a board from a 9x9 grid where ``0`` marks a blank cell."""

        if len(grid) != BOARD_LEN:
            raise ValueError(f"grid must have {BOARD_LEN} rows, got {len(grid)}")
        cells: List[Cell] = []
        for row_no, row in enumerate(grid):
            if len(row) != BOARD_LEN:
                raise ValueError(f"row {row_no} must have {BOARD_LEN} cells, got {len(row)}")
            for value in row:
                cells.append(Cell.blank() if value == 0 else Cell.fixed(value))
        return cls(cells)

    def __getitem__(self, idx: int) -> Cell:
        return self.cells[idx]

    def __setitem__(self, idx: int, cell: Cell) -> None:
        self.cells[idx] = cell

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __len__(self) -> int:
        return BOARD_SIZE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.cells == other.cells

    def __repr__(self) -> str:
        return f"Board({self.to_string()!r})"

    def initialize_superpositions(self) -> "Board":
        """Turn every blank cell into a superposition of all nine digits."""

        for idx, cell in enumerate(self.cells):
            if cell.kind is CellKind.BLANK:
                self.cells[idx] = Cell.superposition()
            elif cell.kind is not CellKind.FIXED:
                raise SolverStateError(
                    f"cell {idx} is {cell.kind.value}; the board was already initialised"
                )
        return self

    def is_solved(self) -> bool:
        return all(cell.is_determined for cell in self.cells)

    def first_superposition(self) -> int | None:
        for idx, cell in enumerate(self.cells):
            if cell.is_superposition:
                return idx
        return None

    def clone(self) -> "Board":
        return Board(self.cells)

    def adopt(self, other: "Board") -> None:
        """Replace this board's state with the state of ``other``."""

        self.cells[:] = other.cells

    def digits(self) -> Grid:
        """9x9 digits of the board, ``0`` for every undetermined cell."""

        return [
            [cell.value if cell.is_determined else 0 for cell in self.cells[start : start + BOARD_LEN]]
            for start in range(0, BOARD_SIZE, BOARD_LEN)
        ]

    def to_string(self) -> str:
        return "".join(str(value) for row in self.digits() for value in row)

    def tokens(self) -> List[Tuple[TokenKind, int]]:
        return [cell.token() for cell in self.cells]


__all__ = [
    "BLOCK_SIZE",
    "BOARD_LEN",
    "BOARD_SIZE",
    "Board",
    "Grid",
    "block_group",
    "block_start",
    "col_group",
    "col_start",
    "coord_to_idx",
    "idx_to_coord",
    "peer_groups",
    "row_group",
    "row_start",
]
