"""Wall-clock benchmark loop around the solver."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, Sequence

from project_config import coerce_int, env_override, get_section
from solver import Board, solve

from . import log
from .runner import puzzle_digest

_DEFAULT_TARGET_MS = 5000
_DEFAULT_SAMPLE = "hard"


@dataclass(frozen=True)
class BenchSettings:
    """Benchmark configuration after precedence resolution."""

    target_ms: int
    sample: str
    decision_source: str


@dataclass(frozen=True)
class BenchReport:
    iterations: int
    elapsed_ms: float
    average_us: float
    solved: bool
    board: Board


def resolve_bench_settings(env: Optional[Mapping[str, str]] = None) -> BenchSettings:
    """Resolve ``[bench]`` settings: config < ``SUDOKU_*`` env < ``CLI_SUDOKU_*``."""

    env = env or {}
    section = get_section("bench", {})
    target_ms = coerce_int(section.get("target_ms"))
    if target_ms is None or target_ms <= 0:
        target_ms = _DEFAULT_TARGET_MS
    sample = str(section.get("sample") or _DEFAULT_SAMPLE)
    source = "config"

    for key in ("SUDOKU_BENCH_TARGET_MS", "CLI_SUDOKU_BENCH_TARGET_MS"):
        value = coerce_int(env.get(key))
        if value is not None and value > 0:
            target_ms = value
            source = "cli" if key.startswith("CLI_") else "env"

    sample_override = env_override(env, "SUDOKU_BENCH_SAMPLE")
    if sample_override:
        sample = sample_override

    return BenchSettings(target_ms=target_ms, sample=sample, decision_source=source)


def run_benchmark(
    grid: Sequence[Sequence[int]],
    target_ms: int,
    *,
    clock: Callable[[], float] = time.perf_counter,
) -> BenchReport:
    """Repeat construct + initialise + solve until ``target_ms`` has elapsed.

    At least one iteration always runs.
    """

    budget = target_ms / 1000.0
    iterations = 0
    start = clock()
    while True:
        board = Board.from_zero_grid(grid)
        board.initialize_superpositions()
        solve(board)
        iterations += 1
        if clock() - start >= budget:
            break
    elapsed = clock() - start

    report = BenchReport(
        iterations=iterations,
        elapsed_ms=elapsed * 1000.0,
        average_us=elapsed * 1_000_000.0 / iterations,
        solved=board.is_solved(),
        board=board,
    )
    log.emit(
        log.EVENT_BENCH,
        {
            "puzzle_digest": puzzle_digest(grid),
            "iterations": report.iterations,
            "elapsed_ms": round(report.elapsed_ms, 3),
            "average_us": round(report.average_us, 3),
            "solved": report.solved,
        },
    )
    return report


__all__ = ["BenchReport", "BenchSettings", "resolve_bench_settings", "run_benchmark"]
