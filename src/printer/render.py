"""Terminal rendering of boards as 3x3-grouped grids."""

from __future__ import annotations

from typing import Mapping, Optional

from rich.console import Console
from rich.text import Text

from project_config import get_section
from solver import BLOCK_SIZE, BOARD_LEN, Board, TokenKind

ROW_SEP = "+-------+-------+-------+"

_STYLES: Mapping[TokenKind, str] = {
    TokenKind.GIVEN: "green",
    TokenKind.DEDUCED: "yellow",
    TokenKind.UNRESOLVED: "red",
}


def _glyph(kind: TokenKind, value: int, blank: str, unresolved: str) -> str:
    if kind is TokenKind.BLANK:
        return blank
    if kind is TokenKind.UNRESOLVED:
        return unresolved
    return str(value)


def render_markup(board: Board, *, color: bool = True) -> str:
    """Return the board drawing, with ``rich`` markup when ``color`` is set."""

    render_cfg = get_section("render", {})
    blank = str(render_cfg.get("blank", " "))
    unresolved = str(render_cfg.get("unresolved", "+"))

    lines = []
    tokens = board.tokens()
    for row in range(BOARD_LEN):
        if row % BLOCK_SIZE == 0:
            lines.append(ROW_SEP)
        parts = []
        for col in range(BOARD_LEN):
            if col % BLOCK_SIZE == 0:
                parts.append("| ")
            kind, value = tokens[row * BOARD_LEN + col]
            glyph = _glyph(kind, value, blank, unresolved)
            style = _STYLES.get(kind) if color else None
            parts.append(f"[{style}]{glyph}[/{style}] " if style else f"{glyph} ")
        parts.append("|")
        lines.append("".join(parts))
    lines.append(ROW_SEP)
    return "\n".join(lines)


def render_plain(board: Board) -> str:
    return Text.from_markup(render_markup(board, color=False)).plain


def print_board(board: Board, *, color: bool = True, console: Optional[Console] = None) -> None:
    console = console or Console()
    console.print(Text.from_markup(render_markup(board, color=color)), highlight=False)


__all__ = ["ROW_SEP", "print_board", "render_markup", "render_plain"]
