# MIT License (see LICENSE)
"""
Core particle mechanics.

This subpackage provides:
    - Force laws: Per-scene force and potential energy.
    - Integrators: Semi-implicit Euler and RK4.
    - Invariants: Energy, angular momentum, momentum, swept area.

Typical usage:
    from particle_sandbox.core import force, rk4_step

    a = rk4_step(state, Scene.OSCILLATOR, params, t=0.0, dt=1/120)
"""
from .forces import force, potential_energy, effective_stiffness
from .integrators import semi_implicit_euler_step, rk4_step, step
from .invariants import (
    kinetic_energy,
    total_energy,
    angular_momentum,
    linear_momentum,
    theoretical_areal_velocity,
    swept_area,
    TumblingWindow,
    ConservedQuantityTracker,
)

__all__ = [
    # Forces
    "force",
    "potential_energy",
    "effective_stiffness",
    # Integrators
    "semi_implicit_euler_step",
    "rk4_step",
    "step",
    # Invariants
    "kinetic_energy",
    "total_energy",
    "angular_momentum",
    "linear_momentum",
    "theoretical_areal_velocity",
    "swept_area",
    "TumblingWindow",
    "ConservedQuantityTracker",
]
