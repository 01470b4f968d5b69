# MIT License (see LICENSE)
"""
Simple profiling utilities for performance measurement.

Times the intersection phases (cubic solve, decomposition, extraction,
line pairing) with perf_counter and keeps the raw samples per phase.

Example:
    profiler = Profiler()
    intersect_conic_matrices(a, b, profiler=profiler)
    print(profiler.stats.summary())
"""
from __future__ import annotations
import time
from contextlib import contextmanager, nullcontext
from dataclasses import dataclass, field
from typing import ContextManager, Iterator

import numpy as np


@dataclass
class ProfileStats:
    """Raw per-section timings in seconds, in recording order."""
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, seconds: float) -> None:
        self.samples.setdefault(name, []).append(seconds)

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Per-section count and timings in microseconds.

        Returns:
            Dict mapping section name to {'n', 'total_us', 'mean_us', 'max_us'}.
        """
        out = {}
        for name, seconds in self.samples.items():
            us = 1e6 * np.asarray(seconds, dtype=np.float64)
            out[name] = {
                "n": int(us.size),
                "total_us": float(us.sum()),
                "mean_us": float(us.mean()),
                "max_us": float(us.max()),
            }
        return out


class Profiler:
    """
    Collects timings of named sections into a ProfileStats.

    Usage:
        profiler = Profiler()
        with profiler.section("cubic"):
            solve_cubic(a, b, c, d)

        stats = profiler.stats.summary()
        print(f"cubic avg: {stats['cubic']['mean_us']:.1f}us")
    """

    def __init__(self) -> None:
        self.stats = ProfileStats()

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time the enclosed block and record it under name, even if it raises."""
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.stats.add(name, time.perf_counter() - t0)


def maybe_section(profiler: Profiler | None, name: str) -> ContextManager[None]:
    """Time the enclosed code if a profiler is given, otherwise do nothing."""
    if profiler is None:
        return nullcontext()
    return profiler.section(name)
