# MIT License (see LICENSE)
"""
Core type definitions for the particle sandbox.

Defines the fundamental data structures:
- Scene: the closed set of force laws the particle can be placed in.
- IntegratorKind: the two available time-stepping schemes.
- Parameters: physical constants of the active scene (validated, immutable).
- ParticleState: the phase-space point (position, velocity) of the particle.

The equations of motion are those of a single point mass:
  dr/dt = v
  dv/dt = F(r, v, t) / m
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
import math

import numpy as np

from .util import f64


# =============================================================================
# Enumerations
# =============================================================================

class Scene(IntEnum):
    """
    Force law selected for the particle.

    The integer value doubles as the "select scene N" key.
    """
    FREE = 1
    CONSTANT_FORCE = 2
    OSCILLATOR = 3
    INVERSE_SQUARE = 4
    CIRCLE_CONSTRAINT = 5
    TIME_VARYING_STIFFNESS = 6
    NOETHER_ROTATION_AREAL = 7
    NOETHER_TRANSLATION_PX = 8

    @property
    def label(self) -> str:
        """Human readable name used in diagnostics and logs."""
        return _SCENE_LABELS[self]

    @property
    def undamped(self) -> bool:
        """True for the scenes that force damping to zero when selected."""
        return self in _UNDAMPED_SCENES


_SCENE_LABELS = {
    Scene.FREE: "Free particle",
    Scene.CONSTANT_FORCE: "Constant force",
    Scene.OSCILLATOR: "Oscillator",
    Scene.INVERSE_SQUARE: "Inverse square",
    Scene.CIRCLE_CONSTRAINT: "Circle constraint",
    Scene.TIME_VARYING_STIFFNESS: "Time-varying stiffness oscillator",
    Scene.NOETHER_ROTATION_AREAL: "Noether rotation, areal velocity",
    Scene.NOETHER_TRANSLATION_PX: "Noether translation, constant px",
}

_UNDAMPED_SCENES = frozenset({
    Scene.TIME_VARYING_STIFFNESS,
    Scene.NOETHER_ROTATION_AREAL,
    Scene.NOETHER_TRANSLATION_PX,
})


class IntegratorKind(IntEnum):
    """Time-stepping scheme used by Simulation.step()."""
    SEMI_IMPLICIT_EULER = 1
    RK4 = 2

    @property
    def label(self) -> str:
        return "Semi-implicit Euler" if self is IntegratorKind.SEMI_IMPLICIT_EULER else "Runge-Kutta 4"

    def toggled(self) -> IntegratorKind:
        """The other integrator."""
        if self is IntegratorKind.SEMI_IMPLICIT_EULER:
            return IntegratorKind.RK4
        return IntegratorKind.SEMI_IMPLICIT_EULER


# =============================================================================
# Parameters
# =============================================================================

@dataclass(frozen=True)
class Parameters:
    """
    Physical constants shared by every force law.

    Attributes:
        mass: Particle mass m. Must be > 0 (every step divides by it).
        g: Magnitude of the uniform gravitational acceleration.
        k: Stiffness of the spring scenes, strength of the central force.
        radius: Radius of the constraint circle. Must be > 0.
        damping: Linear drag coefficient c (F = -c * v) where the scene uses it.
        eps_k: Relative amplitude of the stiffness modulation.
        omega_k: Angular frequency of the stiffness modulation.

    Note:
        Instances are immutable; use dataclasses.replace() to derive a
        modified copy. Validation runs again on every replace().
    """
    mass: float = 1.0
    g: float = 1.5
    k: float = 2.0
    radius: float = 1.25
    damping: float = 0.15
    eps_k: float = 0.35
    omega_k: float = 2.5

    def __post_init__(self) -> None:
        """Reject configurations the integrators cannot handle."""
        for name in ("mass", "g", "k", "radius", "damping", "eps_k", "omega_k"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value!r}")
        if self.mass <= 0:
            raise ValueError(f"mass must be > 0, got {self.mass!r}")
        if self.radius <= 0:
            raise ValueError(f"radius must be > 0, got {self.radius!r}")


# =============================================================================
# Particle state
# =============================================================================

@dataclass
class ParticleState:
    """
    Phase-space point of the particle.

    Attributes:
        position: Position [x, y].
        velocity: Velocity [vx, vy].

    Note:
        Position and velocity are converted to float64 numpy arrays on init.
    """
    position: np.ndarray | tuple[float, float] = (0.0, 0.0)
    velocity: np.ndarray | tuple[float, float] = (0.0, 0.0)

    def __post_init__(self) -> None:
        self.position = f64(self.position)
        self.velocity = f64(self.velocity)

    def copy(self) -> ParticleState:
        """Independent copy (arrays are not shared)."""
        return ParticleState(self.position.copy(), self.velocity.copy())
