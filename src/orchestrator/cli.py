"""Command line entry point: solve, benchmark and list sample puzzles."""

from __future__ import annotations

import argparse
import json
import os
from typing import Dict, List, Mapping, Optional

from rich.console import Console

from contracts import SchemaValidationError, load_grid_file, parse_grid_string, validate_grid
from printer import print_board
from project_config import coerce_bool, env_override, get_section
from puzzles import get_sample, list_samples
from solver import Board, Grid

from . import log
from .bench import resolve_bench_settings, run_benchmark
from .runner import solve_grid


def _merge_env(overrides: Mapping[str, str] | None = None) -> Dict[str, str]:
    env: Dict[str, str] = {str(k): str(v) for k, v in os.environ.items()}
    if overrides:
        env.update({str(k): str(v) for k, v in overrides.items()})
    return env


def _color_enabled(args: argparse.Namespace, env: Mapping[str, str]) -> bool:
    enabled = bool(get_section("render.color", True))
    override = coerce_bool(env_override(env, "SUDOKU_COLOR"))
    if override is not None:
        enabled = override
    if getattr(args, "no_color", False):
        enabled = False
    return enabled


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--sample", help="Name of a bundled sample puzzle.")
    source.add_argument("--grid", help="81 cells as digits, '0' or '.' for blanks.")
    source.add_argument("--file", help="Puzzle file (.json document or plain text grid).")


def _read_grid(args: argparse.Namespace, default_sample: str) -> Grid:
    if args.grid:
        return parse_grid_string(args.grid)
    if args.file:
        return load_grid_file(args.file)
    return get_sample(args.sample or default_sample).grid


def cmd_solve(args: argparse.Namespace, env: Mapping[str, str], console: Console) -> int:
    grid = _read_grid(args, str(get_section("bench.sample", "hard")))
    report = validate_grid(grid)
    for issue in report.warnings:
        console.print(f"warning: {issue.msg}", style="yellow", highlight=False, markup=False)

    color = _color_enabled(args, env)
    outcome = solve_grid(grid)
    print_board(outcome.puzzle, color=color, console=console)
    print_board(outcome.board, color=color, console=console)
    status = "solved" if outcome.solved else "unsolved"
    console.print(f"{status} in {outcome.time_ms} ms", highlight=False, markup=False)
    if args.stats:
        console.print(json.dumps(outcome.stats.to_payload(), indent=2, sort_keys=True), highlight=False, markup=False)
    return 0 if outcome.solved else 1


def cmd_bench(args: argparse.Namespace, env: Mapping[str, str], console: Console) -> int:
    overrides = dict(env)
    if args.target_ms is not None:
        overrides["CLI_SUDOKU_BENCH_TARGET_MS"] = str(args.target_ms)
    settings = resolve_bench_settings(overrides)
    grid = _read_grid(args, settings.sample)

    report = run_benchmark(grid, settings.target_ms)
    console.print(f"Iterations: {report.iterations}", highlight=False, markup=False)
    console.print(f"Elapsed: {report.elapsed_ms:.3f} ms", highlight=False, markup=False)
    console.print(f"Average: {report.average_us:.3f} us", highlight=False, markup=False)

    color = _color_enabled(args, env)
    print_board(Board.from_zero_grid(grid), color=color, console=console)
    print_board(report.board, color=color, console=console)
    return 0 if report.solved else 1


def cmd_samples(args: argparse.Namespace, env: Mapping[str, str], console: Console) -> int:
    for name in list_samples():
        sample = get_sample(name)
        console.print(f"{name}: {sample.description}", highlight=False, markup=False)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wfc-sudoku",
        description="Solve 9x9 Sudoku puzzles by constraint propagation and backtracking.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    solve_cmd = sub.add_parser("solve", help="Solve a puzzle and print it before and after")
    _add_source_arguments(solve_cmd)
    solve_cmd.add_argument("--no-color", action="store_true", help="Disable colored output.")
    solve_cmd.add_argument("--stats", action="store_true", help="Print solver counters as JSON.")
    solve_cmd.set_defaults(func=cmd_solve)

    bench_cmd = sub.add_parser("bench", help="Solve a puzzle repeatedly within a time budget")
    _add_source_arguments(bench_cmd)
    bench_cmd.add_argument(
        "--target-ms",
        type=int,
        default=None,
        help="Wall-clock budget in milliseconds (overrides config and environment).",
    )
    bench_cmd.add_argument("--no-color", action="store_true", help="Disable colored output.")
    bench_cmd.set_defaults(func=cmd_bench)

    samples_cmd = sub.add_parser("samples", help="List bundled sample puzzles")
    samples_cmd.set_defaults(func=cmd_samples)
    return parser


def main(argv: Optional[List[str]] = None, *, env_overrides: Mapping[str, str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    env = _merge_env(env_overrides)
    log.configure_from_settings(env)
    console = Console()
    try:
        return args.func(args, env, console)
    except (ValueError, SchemaValidationError, KeyError, OSError) as exc:
        parser.error(str(exc))


__all__ = ["build_parser", "main"]


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
