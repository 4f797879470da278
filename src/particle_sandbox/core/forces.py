# MIT License (see LICENSE)
"""
Force laws and potential energies for every scene.

Each scene contributes one force function and one potential function,
collected in per-scene tables. Both are pure functions of
(state, params, t): the RK4 integrator evaluates them at intermediate
states that never become current, so they must not touch any other state.

Key concepts:
- Forces are returned as new float64 arrays; the state is never modified.
- Potential energy is for diagnostics only and never feeds the dynamics.
- The inverse-square scenes clamp the denominator with SOFTENING_EPS so the
  force stays finite at the origin.
"""
from __future__ import annotations

from typing import Callable

import numpy as np

from ..constants import SOFTENING_EPS
from ..types import Parameters, ParticleState, Scene
from ..util import norm, norm2

ForceLaw = Callable[[ParticleState, Parameters, float], np.ndarray]
Potential = Callable[[ParticleState, Parameters, float], float]


def effective_stiffness(t: float, params: Parameters) -> float:
    """
    Stiffness of the time-varying oscillator at time t.

    k(t) = k * (1 + eps_k * sin(omega_k * t))
    """
    return params.k * (1.0 + params.eps_k * float(np.sin(params.omega_k * t)))


def _weight(params: Parameters) -> np.ndarray:
    return np.array([0.0, -params.mass * params.g], dtype=np.float64)


def _drag(state: ParticleState, params: Parameters) -> np.ndarray:
    return -params.damping * state.velocity


def _central_inverse_square(state: ParticleState, params: Parameters) -> np.ndarray:
    """
    Attractive central force F = -k * r / |r|³.

    The denominator is max(|r|³, SOFTENING_EPS).
    """
    r2 = norm2(state.position)
    denom = max(r2 * float(np.sqrt(r2)), SOFTENING_EPS)
    return (-params.k / denom) * state.position


# -----------------------------------------------------------------------------
# Force laws
# -----------------------------------------------------------------------------

def _free_force(state, params, t):
    return np.zeros(2, dtype=np.float64)


def _constant_force(state, params, t):
    return _weight(params) + _drag(state, params)


def _oscillator_force(state, params, t):
    return -params.k * state.position + _drag(state, params)


def _inverse_square_force(state, params, t):
    return _central_inverse_square(state, params)


def _circle_force(state, params, t):
    # Centering pull only; the radius itself is enforced by the projector.
    return -params.k * state.position


def _time_varying_force(state, params, t):
    return -effective_stiffness(t, params) * state.position


def _translation_force(state, params, t):
    return _weight(params)


_FORCE_LAWS: dict[Scene, ForceLaw] = {
    Scene.FREE: _free_force,
    Scene.CONSTANT_FORCE: _constant_force,
    Scene.OSCILLATOR: _oscillator_force,
    Scene.INVERSE_SQUARE: _inverse_square_force,
    Scene.CIRCLE_CONSTRAINT: _circle_force,
    Scene.TIME_VARYING_STIFFNESS: _time_varying_force,
    Scene.NOETHER_ROTATION_AREAL: _inverse_square_force,
    Scene.NOETHER_TRANSLATION_PX: _translation_force,
}


# -----------------------------------------------------------------------------
# Potentials
# -----------------------------------------------------------------------------

def _zero_potential(state, params, t):
    return 0.0


def _gravity_potential(state, params, t):
    return params.mass * params.g * float(state.position[1])


def _spring_potential(state, params, t):
    return 0.5 * params.k * norm2(state.position)


def _kepler_potential(state, params, t):
    return -params.k / max(norm(state.position), SOFTENING_EPS)


def _time_varying_potential(state, params, t):
    return 0.5 * effective_stiffness(t, params) * norm2(state.position)


_POTENTIALS: dict[Scene, Potential] = {
    Scene.FREE: _zero_potential,
    Scene.CONSTANT_FORCE: _gravity_potential,
    Scene.OSCILLATOR: _spring_potential,
    Scene.INVERSE_SQUARE: _kepler_potential,
    Scene.CIRCLE_CONSTRAINT: _spring_potential,
    Scene.TIME_VARYING_STIFFNESS: _time_varying_potential,
    Scene.NOETHER_ROTATION_AREAL: _kepler_potential,
    Scene.NOETHER_TRANSLATION_PX: _gravity_potential,
}


def force(state: ParticleState, scene: Scene, params: Parameters, t: float) -> np.ndarray:
    """
    Total force on the particle for the given scene.

    Args:
        state: Phase-space point to evaluate at (not modified).
        scene: Active force law.
        params: Physical constants.
        t: Simulation time, used by the time-varying stiffness scene.

    Returns:
        Force vector [Fx, Fy] as a new float64 array.
    """
    return _FORCE_LAWS[scene](state, params, t)


def potential_energy(state: ParticleState, scene: Scene, params: Parameters, t: float) -> float:
    """
    Potential energy matching the scene's force law.

    Free returns 0; gravity scenes return m*g*y. Velocity-dependent drag has
    no potential and is ignored.
    """
    return float(_POTENTIALS[scene](state, params, t))
