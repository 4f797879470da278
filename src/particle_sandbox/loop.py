# MIT License (see LICENSE)
"""
Per-frame driver connecting the simulation to its collaborators.

A host (window toolkit, test, script) calls tick() once per displayed frame.
Each tick runs, in order:
    1. Substeps covering the host time since the previous tick.
    2. The diagnostic reporter (at most one line per interval).
    3. The renderer.

Input is applied by the host between ticks (see commands.handle_key).
"""
from __future__ import annotations
from contextlib import nullcontext
from dataclasses import dataclass, field
from typing import Callable
import time

from .diagnostics import DiagnosticsReporter
from .profiler import Profiler
from .renderer.adapter import NullRenderer, RendererAdapter
from .simulation import Simulation


@dataclass
class FrameLoop:
    """
    Drives one simulation frame by frame.

    Attributes:
        sim: Simulation to advance.
        renderer: Frame consumer (default: no-op).
        reporter: Diagnostic line writer, or None for no diagnostics.
        profiler: Optional Profiler for timing statistics.
        clock: Host clock in seconds, used when tick() gets no time.
    """
    sim: Simulation
    renderer: RendererAdapter = field(default_factory=NullRenderer)
    reporter: DiagnosticsReporter | None = None
    profiler: Profiler | None = None
    clock: Callable[[], float] = time.perf_counter

    # Internal state
    last_time: float | None = None
    frames: int = 0

    def _section(self, name: str):
        return self.profiler.section(name) if self.profiler else nullcontext()

    def tick(self, now: float | None = None) -> int:
        """
        Run one frame.

        Args:
            now: Host time in seconds. Read from clock when omitted.

        Returns:
            Number of substeps taken this frame.
        """
        now = self.clock() if now is None else float(now)
        frame_dt = 0.0 if self.last_time is None else now - self.last_time
        self.last_time = now

        with self._section("substeps"):
            n = self.sim.advance(frame_dt)

        if self.reporter is not None:
            with self._section("diagnostics"):
                self.reporter.maybe_report(self.sim, now)

        with self._section("render"):
            self.renderer.render(self.sim)

        if self.profiler is not None:
            self.profiler.end_frame(n)
        self.frames += 1
        return n

    def run(self, frames: int, frame_dt: float, start: float = 0.0) -> int:
        """
        Run a fixed number of frames on synthetic, evenly spaced host time.

        Deterministic; used for headless runs, examples and tests.

        Returns:
            Total number of substeps taken.
        """
        total = 0
        if self.last_time is None:
            t = start
            self.tick(t)
        else:
            t = self.last_time
        for _ in range(frames):
            t += frame_dt
            total += self.tick(t)
        return total
