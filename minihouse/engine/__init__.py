"""Execution helpers for fan-out API work."""

from .batching import chunk, run_batched

__all__ = ["chunk", "run_batched"]
