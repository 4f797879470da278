# MIT License (see LICENSE)
"""
Fixed-step substepping of variable frame times.

A frame of wall-clock length frame_dt is split into steps of at most the
nominal size; the last step takes whatever is left. The number of steps is
capped so a stalled host (breakpoint, window drag) cannot trigger an
unbounded catch-up: time beyond the cap is dropped, not carried into the
next frame.

Example (frame_dt = 0.02, nominal = 1/120):
    plan -> [0.008333, 0.008333, 0.003333]
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable

from .constants import MAX_SUBSTEPS

# Residual frame time below this is treated as consumed.
_TIME_EPS = 1e-15


@dataclass(frozen=True)
class SubstepScheduler:
    """
    Converts a frame delta into a bounded sequence of step sizes.

    Attributes:
        max_substeps: Maximum number of steps per frame.
    """
    max_substeps: int = MAX_SUBSTEPS

    def __post_init__(self) -> None:
        if self.max_substeps < 1:
            raise ValueError(f"max_substeps must be >= 1, got {self.max_substeps!r}")

    def plan(self, frame_dt: float, nominal_dt: float) -> list[float]:
        """
        Step sizes that cover frame_dt.

        Each step is min(remaining, nominal_dt). Planning stops when the frame
        is consumed or max_substeps steps have been planned.

        Args:
            frame_dt: Elapsed host time for the frame. Non-positive values
                produce no steps.
            nominal_dt: Nominal simulation step (> 0).

        Raises:
            ValueError: If nominal_dt <= 0.
        """
        if nominal_dt <= 0:
            raise ValueError(f"nominal_dt must be > 0, got {nominal_dt!r}")

        steps = []
        remaining = float(frame_dt)
        while remaining > _TIME_EPS and len(steps) < self.max_substeps:
            h = min(remaining, nominal_dt)
            steps.append(h)
            remaining -= h
        return steps

    def run(self, frame_dt: float, nominal_dt: float, step: Callable[[float], None]) -> int:
        """
        Call step(h) for every planned step size.

        Returns:
            Number of substeps executed.
        """
        steps = self.plan(frame_dt, nominal_dt)
        for h in steps:
            step(h)
        return len(steps)
