# MIT License (see LICENSE)
"""
Conserved quantities and diagnostics for the particle.

Instantaneous quantities (energy, angular momentum, momentum) are computed
on demand from the current state. The swept area of the rotation scene is
accumulated step by step in a tumbling window and turned into an average
areal velocity each time it is read.

Under a central force Lz is conserved and, by Kepler's second law, the
position vector sweeps area at the constant rate Lz / (2m). With gravity
along -y and no drag, px = m*vx is conserved.
"""
from __future__ import annotations
from dataclasses import dataclass, field

import numpy as np

from ..types import Parameters, ParticleState, Scene
from ..util import cross2, f64, norm2
from .forces import potential_energy


def kinetic_energy(state: ParticleState, params: Parameters) -> float:
    """
    Kinetic energy of the particle.

    T = 0.5 * m * |v|²
    """
    return 0.5 * params.mass * norm2(state.velocity)


def total_energy(state: ParticleState, scene: Scene, params: Parameters, t: float) -> float:
    """Kinetic plus scene potential energy, E = T + V."""
    return kinetic_energy(state, params) + potential_energy(state, scene, params, t)


def angular_momentum(state: ParticleState, params: Parameters) -> float:
    """
    Angular momentum about the origin (z-component).

    Lz = m * (x * vy - y * vx)
    """
    return params.mass * cross2(state.position, state.velocity)


def linear_momentum(state: ParticleState, params: Parameters) -> np.ndarray:
    """
    Linear momentum of the particle.

    P = m * v. The x component is the px reported by the translation scene.
    """
    return params.mass * state.velocity


def theoretical_areal_velocity(state: ParticleState, params: Parameters) -> float:
    """Areal velocity predicted by the angular momentum, Lz / (2m)."""
    return angular_momentum(state, params) / (2.0 * params.mass)


def swept_area(r0: np.ndarray, r1: np.ndarray) -> float:
    """
    Area of the triangle (origin, r0, r1).

    dA = 0.5 * |x0*y1 - y0*x1|
    """
    return 0.5 * abs(cross2(r0, r1))


@dataclass
class TumblingWindow:
    """
    Accumulates an amount over time and reports its average rate.

    flush() returns total / elapsed and starts a fresh window, so every
    report covers only the time since the previous one.
    """
    _total: float = field(default=0.0, init=False)
    _elapsed: float = field(default=0.0, init=False)

    def record(self, amount: float, dt: float) -> None:
        """Add an amount accumulated over dt seconds."""
        self._total += amount
        self._elapsed += dt

    def total(self) -> float:
        return self._total

    def elapsed(self) -> float:
        return self._elapsed

    def flush(self) -> float:
        """
        Return the average rate over the window and reset it.

        Returns 0 for a window with no elapsed time.
        """
        average = self._total / self._elapsed if self._elapsed > 0.0 else 0.0
        self.reset()
        return average

    def reset(self) -> None:
        self._total = 0.0
        self._elapsed = 0.0


@dataclass
class ConservedQuantityTracker:
    """
    Per-step bookkeeping for quantities that need accumulation.

    Attributes:
        previous_position: Position before the last recorded step.
        area: Swept-area window, timed in simulated seconds.
    """
    previous_position: np.ndarray = field(default_factory=lambda: np.zeros(2, dtype=np.float64))
    area: TumblingWindow = field(default_factory=TumblingWindow)

    def __post_init__(self) -> None:
        self.previous_position = f64(self.previous_position)

    def reset(self, position: np.ndarray) -> None:
        """Start over from the given position with an empty window."""
        self.previous_position = f64(position)
        self.area.reset()

    def record_step(self, scene: Scene, position: np.ndarray, dt: float) -> None:
        """
        Account for one substep that moved the particle to position.

        Only the rotation scene accumulates swept area.
        """
        if scene is not Scene.NOETHER_ROTATION_AREAL:
            return
        self.area.record(swept_area(self.previous_position, position), dt)
        self.previous_position = f64(position)

    def flush_areal_velocity(self) -> float:
        """Average areal velocity since the last flush."""
        return self.area.flush()
