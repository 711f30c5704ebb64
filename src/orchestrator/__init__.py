"""Harness around the solver: runs, benchmarks, event log and CLI."""

from .bench import BenchReport, BenchSettings, resolve_bench_settings, run_benchmark
from .runner import SolveOutcome, puzzle_digest, solve_grid
from . import log

__all__ = [
    "BenchReport",
    "BenchSettings",
    "SolveOutcome",
    "log",
    "puzzle_digest",
    "resolve_bench_settings",
    "run_benchmark",
    "solve_grid",
]
