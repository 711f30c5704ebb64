#!/usr/bin/env python3
"""Smoke-test deterministic behaviour of the solver on the bundled samples."""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from orchestrator.runner import solve_grid
from puzzles import get_sample, list_samples


def _solve_twice(name: str) -> tuple[str, str]:
    grid = get_sample(name).grid
    first = solve_grid(grid).board.to_string()
    second = solve_grid(grid).board.to_string()
    return first, second


def main() -> int:
    failures = 0
    for name in list_samples():
        first, second = _solve_twice(name)
        if first != second:
            print(f"determinism failed for {name}: {first} vs {second}")
            failures += 1
        elif "0" in first:
            print(f"sample {name} was left unsolved: {first}")
            failures += 1

    if failures:
        return 1
    print("Determinism smoke-test passed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
