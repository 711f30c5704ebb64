"""End-to-end solve scenarios for the propagation + backtracking solver."""

from __future__ import annotations

import pytest

from contracts.loader import parse_grid_string
from puzzles import get_sample
from solver import Board, SolveStats, SolverStateError, construct, initialize, is_solved, solve
from solver.cell import CellKind

SOLVED = (
    "123456789"
    "456789123"
    "789123456"
    "214365897"
    "365897214"
    "897214365"
    "531642978"
    "642978531"
    "978531642"
)


HARD_SOLUTION = (
    "126437958"
    "895621473"
    "374985126"
    "457193862"
    "983246517"
    "612578394"
    "269314785"
    "548769231"
    "731852649"
)


def _solved_grid() -> list[list[int]]:
    return parse_grid_string(SOLVED)


def _run(grid: list[list[int]]) -> tuple[Board, SolveStats]:
    stats = SolveStats()
    board = initialize(construct(grid))
    solve(board, stats)
    return board, stats


def _assert_sound(digits: list[list[int]]) -> None:
    full = set(range(1, 10))
    for r in range(9):
        assert set(digits[r]) == full, f"row {r}"
    for c in range(9):
        assert {digits[r][c] for r in range(9)} == full, f"column {c}"
    for b in range(9):
        top, left = 3 * (b // 3), 3 * (b % 3)
        block = {digits[top + i][left + j] for i in range(3) for j in range(3)}
        assert block == full, f"block {b}"


def _assert_givens_kept(puzzle: list[list[int]], digits: list[list[int]]) -> None:
    for r in range(9):
        for c in range(9):
            if puzzle[r][c]:
                assert digits[r][c] == puzzle[r][c]


def test_full_valid_grid_is_solved_without_mutation() -> None:
    grid = _solved_grid()
    board, stats = _run(grid)
    assert is_solved(board)
    assert board == construct(grid)
    assert stats.total_placements == 0
    assert stats.eliminations == 0


@pytest.mark.parametrize("blank", [0, 40, 80])
def test_single_blank_is_filled_by_propagation(blank: int) -> None:
    grid = _solved_grid()
    expected = grid[blank // 9][blank % 9]
    grid[blank // 9][blank % 9] = 0

    board, stats = _run(grid)

    assert board.is_solved()
    assert board[blank].kind is CellKind.COLLAPSED
    assert board[blank].value == expected
    assert stats.branches == 0
    assert board.to_string() == SOLVED


def test_easy_sample_is_solved_soundly() -> None:
    puzzle = get_sample("easy").grid
    board, _ = _run(puzzle)
    assert board.is_solved()
    _assert_sound(board.digits())
    _assert_givens_kept(puzzle, board.digits())


@pytest.mark.slow
def test_hard_sample_needs_backtracking_and_is_solved() -> None:
    puzzle = get_sample("hard").grid
    board, stats = _run(puzzle)
    assert board.is_solved()
    assert board.to_string() == HARD_SOLUTION
    _assert_sound(board.digits())
    _assert_givens_kept(puzzle, board.digits())
    assert stats.branches > 0
    assert stats.max_depth >= 1


def test_solving_is_deterministic() -> None:
    puzzle = get_sample("izzy").grid
    first, _ = _run(puzzle)
    second, _ = _run(puzzle)
    assert first == second
    assert first.is_solved()
    _assert_sound(first.digits())
    _assert_givens_kept(puzzle, first.digits())


def test_empty_grid_terminates_with_a_valid_board() -> None:
    board, stats = _run([[0] * 9 for _ in range(9)])
    assert board.is_solved()
    _assert_sound(board.digits())
    assert stats.branches >= 1


def test_duplicate_givens_leave_board_unsolved() -> None:
    grid = _solved_grid()
    grid[0][1] = 1  # row 0 now holds two 1s
    grid[3][1] = 0  # only a 1 fits here, and column 1 already has one

    board, stats = _run(grid)

    assert not board.is_solved()
    assert stats.contradictions >= 1
    assert board[3 * 9 + 1].count_candidates() == 0


def test_solve_returns_the_same_board() -> None:
    board = initialize(construct(_solved_grid()))
    assert solve(board) is board


def test_uninitialised_board_is_a_programming_error() -> None:
    grid = _solved_grid()
    grid[0][0] = 0
    board = construct(grid)
    with pytest.raises(SolverStateError):
        solve(board)
