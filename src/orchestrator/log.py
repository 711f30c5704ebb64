"""JSONL event log for solve runs and benchmarks, with size-based rotation."""

from __future__ import annotations

import json
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from project_config import coerce_bool, coerce_int, env_override, get_section

__all__ = [
    "EVENT_BENCH",
    "EVENT_SOLVE",
    "append_event",
    "configure",
    "configure_from_settings",
    "emit",
    "is_enabled",
]

EVENT_SOLVE = "sudoku.solve.v1"
EVENT_BENCH = "sudoku.bench.v1"

_DEFAULT_MAX_BYTES = 100 * 1024 * 1024
_LOCK = threading.Lock()
_LOG_DIR = Path("logs/solve")
_MAX_BYTES = _DEFAULT_MAX_BYTES
_ENABLED = False
_CURRENT_PATH: Path | None = None


def configure(base_dir: str | Path, *, max_bytes: int | None = None, enabled: bool = True) -> None:
    """Write events under ``base_dir``; ``enabled=False`` turns :func:`emit` into a no-op."""

    global _LOG_DIR, _MAX_BYTES, _CURRENT_PATH, _ENABLED
    _LOG_DIR = Path(base_dir)
    _MAX_BYTES = max_bytes or _DEFAULT_MAX_BYTES
    _ENABLED = enabled
    _CURRENT_PATH = None


def configure_from_settings(env: Optional[Mapping[str, str]] = None) -> None:
    """Apply ``[log]`` from config.toml, then ``SUDOKU_LOG_*`` overrides."""

    env = env or {}
    section = get_section("log", {})
    enabled = bool(section.get("enabled", False))
    base_dir = str(section.get("dir", "logs/solve"))
    max_bytes = coerce_int(section.get("max_bytes")) or _DEFAULT_MAX_BYTES

    override = coerce_bool(env_override(env, "SUDOKU_LOG_ENABLED"))
    if override is not None:
        enabled = override
    dir_override = env_override(env, "SUDOKU_LOG_DIR")
    if dir_override:
        base_dir = dir_override

    configure(base_dir, max_bytes=max_bytes, enabled=enabled)


def is_enabled() -> bool:
    return _ENABLED


def _date_prefix() -> str:
    return datetime.now(timezone.utc).strftime("%Y%m%d")


def _resolve_log_path() -> Path:
    global _CURRENT_PATH
    date_dir = _LOG_DIR / _date_prefix()
    date_dir.mkdir(parents=True, exist_ok=True)

    if _CURRENT_PATH is not None and _CURRENT_PATH.parent == date_dir and _CURRENT_PATH.exists():
        if _CURRENT_PATH.stat().st_size < _MAX_BYTES:
            return _CURRENT_PATH

    counter = 0
    while True:
        candidate = date_dir / f"solve_{counter:02d}.jsonl"
        if not candidate.exists() or candidate.stat().st_size < _MAX_BYTES:
            _CURRENT_PATH = candidate
            return candidate
        counter += 1


def append_event(event: Dict[str, Any]) -> Path:
    """Append ``event`` to the active JSONL file and return the file path."""

    payload = dict(event)
    payload.setdefault("ts", datetime.now(timezone.utc).isoformat(timespec="milliseconds"))

    line = json.dumps(payload, sort_keys=True, ensure_ascii=False)
    with _LOCK:
        path = _resolve_log_path()
        with path.open("a", encoding="utf-8") as handle:
            handle.write(line + "\n")
    return path


def emit(event_type: str, payload: Mapping[str, Any]) -> Path | None:
    """Append a typed event when logging is enabled."""

    if not _ENABLED:
        return None
    return append_event({"type": event_type, **payload})
