"""Counters collected while solving a board."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

TECHNIQUE_PURE_NEGATIVE = "pure_negative"
TECHNIQUE_SINGLE = "single"
TECHNIQUE_BRANCH = "branch"


@dataclass
class SolveStats:
    """Mutable accumulator shared by a solve call and all of its branches."""

    placements: Dict[str, int] = field(
        default_factory=lambda: {
            TECHNIQUE_PURE_NEGATIVE: 0,
            TECHNIQUE_SINGLE: 0,
            TECHNIQUE_BRANCH: 0,
        }
    )
    eliminations: int = 0
    branches: int = 0
    max_depth: int = 0
    contradictions: int = 0

    def record_placement(self, technique: str) -> None:
        self.placements[technique] = self.placements.get(technique, 0) + 1

    def record_depth(self, depth: int) -> None:
        if depth > self.max_depth:
            self.max_depth = depth

    @property
    def total_placements(self) -> int:
        return sum(self.placements.values())

    def to_payload(self) -> Dict[str, Any]:
        return {
            "placements": dict(sorted(self.placements.items())),
            "eliminations": self.eliminations,
            "branches": self.branches,
            "max_depth": self.max_depth,
            "contradictions": self.contradictions,
        }


__all__ = [
    "SolveStats",
    "TECHNIQUE_BRANCH",
    "TECHNIQUE_PURE_NEGATIVE",
    "TECHNIQUE_SINGLE",
]
