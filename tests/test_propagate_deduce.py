from __future__ import annotations

from solver import Board, Cell, SolveStats, propagate, solve_pure_negative
from solver.board import BOARD_SIZE, block_group, col_group, row_group
from solver.cell import CellKind


def _center_board() -> Board:
    grid = [[0] * 9 for _ in range(9)]
    grid[4][4] = 5
    return Board.from_zero_grid(grid).initialize_superpositions()


def _open_board() -> Board:
    return Board.from_zero_grid([[0] * 9 for _ in range(9)]).initialize_superpositions()


def _peers(idx: int) -> set[int]:
    return (set(row_group(idx)) | set(col_group(idx)) | set(block_group(idx))) - {idx}


def test_propagate_clears_digit_from_every_peer() -> None:
    board = _center_board()
    stats = SolveStats()
    propagate(board, 40, stats)

    peers = _peers(40)
    assert len(peers) == 20
    for idx in range(BOARD_SIZE):
        if idx == 40:
            continue
        assert board[idx].has_candidate(5) is (idx not in peers)
    assert stats.eliminations == 20
    assert board[40] == Cell.fixed(5)


def test_propagate_is_idempotent() -> None:
    board = _center_board()
    stats = SolveStats()
    propagate(board, 40, stats)
    once = board.clone()
    propagate(board, 40, stats)
    assert board == once
    assert stats.eliminations == 20


def test_propagate_ignores_undetermined_cells() -> None:
    board = _center_board()
    before = board.clone()
    propagate(board, 0)
    assert board == before


def test_propagate_never_collapses() -> None:
    board = _open_board()
    for digit in range(1, 9):
        board[1] = Cell.collapsed(digit)
        propagate(board, 1)
    assert board[0].kind is CellKind.SUPERPOSITION
    assert board[0].candidates_list() == [9]


def test_pure_negative_collapses_unique_holder_in_row() -> None:
    board = _open_board()
    for idx in row_group(3):
        if idx != 3:
            board[idx] = board[idx].without(5)
    stats = SolveStats()
    assert solve_pure_negative(board, 3, stats) == 5
    assert board[3] == Cell.collapsed(5)
    assert stats.placements["pure_negative"] == 1


def test_pure_negative_uses_lowest_forced_digit() -> None:
    board = _open_board()
    for idx in col_group(0):
        if idx != 0:
            board[idx] = board[idx].without(7)
    for idx in block_group(0):
        if idx != 0:
            board[idx] = board[idx].without(2)
    assert solve_pure_negative(board, 0) == 2


def test_pure_negative_counts_determined_peers_as_holders() -> None:
    board = _open_board()
    board[1] = Cell.fixed(5)
    for idx in row_group(0):
        if idx not in (0, 1):
            board[idx] = board[idx].without(5)
    assert solve_pure_negative(board, 0) is None
    assert board[0].kind is CellKind.SUPERPOSITION


def test_pure_negative_noop_without_forced_digit() -> None:
    board = _open_board()
    before = board.clone()
    assert solve_pure_negative(board, 40) is None
    assert board == before


def test_pure_negative_noop_on_determined_cell() -> None:
    board = _center_board()
    assert solve_pure_negative(board, 40) is None
    assert board[40] == Cell.fixed(5)
