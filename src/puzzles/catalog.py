"""Sample puzzle catalogue backed by ``config/samples.toml``."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover - fallback for older Python
    import tomli as tomllib  # type: ignore[import-untyped]

from contracts.loader import parse_grid_string
from solver import Grid

__all__ = ["Sample", "get_sample", "list_samples", "reload"]

_SAMPLES_FILENAME = "config/samples.toml"


@dataclass(frozen=True)
class Sample:
    name: str
    description: str
    grid: Grid


def _samples_path() -> Path:
    return Path(__file__).resolve().parents[2] / _SAMPLES_FILENAME


@lru_cache(maxsize=1)
def _load_samples() -> Dict[str, Any]:
    path = _samples_path()
    if not path.exists():
        return {}
    with path.open("rb") as handle:
        data = tomllib.load(handle)
    samples = data.get("samples")
    return samples if isinstance(samples, dict) else {}


def reload() -> None:
    """Clear the cached sample catalogue."""

    _load_samples.cache_clear()


def list_samples() -> List[str]:
    return sorted(_load_samples())


def get_sample(name: str) -> Sample:
    entry = _load_samples().get(name)
    if not isinstance(entry, dict):
        known = ", ".join(list_samples()) or "none"
        raise KeyError(f"Unknown sample {name!r} (known: {known})")
    return Sample(
        name=name,
        description=str(entry.get("description", "")),
        grid=parse_grid_string(str(entry["grid"])),
    )
