"""Bundled sample puzzles."""

from __future__ import annotations

from .catalog import Sample, get_sample, list_samples, reload

__all__ = ["Sample", "get_sample", "list_samples", "reload"]
