"""Board presentation helpers."""

from __future__ import annotations

from .render import ROW_SEP, print_board, render_markup, render_plain

__all__ = ["ROW_SEP", "print_board", "render_markup", "render_plain"]
