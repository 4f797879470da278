# MIT License (see LICENSE)
"""
Per-frame timing for the frame loop.

Each frame yields one FrameRecord: the substep count and the seconds spent
in each section (substeps, diagnostics, render). Keeping the count next to
the timings gives the cost of a single integrator step directly, which is
what differs between RK4 and Euler or between step sizes.

Example:
    profiler = Profiler()
    loop = FrameLoop(sim, profiler=profiler)
    loop.run(frames=600, frame_dt=1/60)
    print(profiler.stats.substep_cost_us())
"""
from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Iterator
import time


@dataclass(frozen=True)
class FrameRecord:
    """Substeps taken and seconds spent per section in one frame."""
    substeps: int
    seconds: dict[str, float]


@dataclass
class ProfileStats:
    frames: list[FrameRecord] = field(default_factory=list)

    def total_substeps(self) -> int:
        return sum(f.substeps for f in self.frames)

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Per-section statistics over all recorded frames.

        Returns:
            Dict mapping section name to 'n' (frames that ran the section),
            'mean_ms', 'max_ms' and 'total_ms'.
        """
        per_section: dict[str, list[float]] = {}
        for frame in self.frames:
            for name, dt in frame.seconds.items():
                per_section.setdefault(name, []).append(dt)
        return {
            name: {
                "n": len(times),
                "mean_ms": 1e3 * sum(times) / len(times),
                "max_ms": 1e3 * max(times),
                "total_ms": 1e3 * sum(times),
            }
            for name, times in per_section.items()
        }

    def substep_cost_us(self) -> float:
        """Mean time of one substep in microseconds (0 when none were taken)."""
        n = self.total_substeps()
        if n == 0:
            return 0.0
        busy = sum(f.seconds.get("substeps", 0.0) for f in self.frames)
        return 1e6 * busy / n

    def clear(self) -> None:
        self.frames.clear()


class Profiler:
    """
    Collects section timings for the frame in progress.

    section() adds to the open frame; end_frame() closes it with the number
    of substeps the frame took.
    """

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self.clock = clock
        self.stats = ProfileStats()
        self._open: dict[str, float] = {}

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        t0 = self.clock()
        try:
            yield
        finally:
            self._open[name] = self._open.get(name, 0.0) + self.clock() - t0

    def end_frame(self, substeps: int) -> FrameRecord:
        record = FrameRecord(substeps=int(substeps), seconds=self._open)
        self._open = {}
        self.stats.frames.append(record)
        return record
