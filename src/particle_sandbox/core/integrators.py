# MIT License (see LICENSE)
"""
Numerical integrators for the particle.

Both integrators solve the point-mass equations of motion:
    dr/dt = v,         dv/dt = F(r, v, t)/m

Available integrators:
- semi_implicit_euler_step: First order, symplectic (bounded energy error).
- rk4_step: Classical 4th-order Runge-Kutta (high per-step accuracy).

Both modify the state in-place, apply the circle constraint when the scene
requires it and return the acceleration at the end of the step for display.
Neither validates dt; the substep scheduler supplies positive, bounded
steps. Advancing the simulation clock is left to the caller.

Reference:
    Semi-implicit Euler: https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
    Runge-Kutta methods: https://en.wikipedia.org/wiki/Runge-Kutta_methods
"""
from __future__ import annotations

from typing import Callable

import numpy as np

from ..constraints.circle import is_constrained, project_onto_circle
from ..types import IntegratorKind, Parameters, ParticleState, Scene
from .forces import force

StepFunction = Callable[[ParticleState, Scene, Parameters, float, float], np.ndarray]


def _acceleration(state: ParticleState, scene: Scene, params: Parameters, t: float) -> np.ndarray:
    return force(state, scene, params, t) / params.mass


def _derivatives(
    state: ParticleState,
    scene: Scene,
    params: Parameters,
    t: float,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Compute time derivatives of the state vector.

    Given state (r, v), returns (dr/dt, dv/dt) = (v, F/m).
    This is the right-hand side of the ODE system.
    """
    return state.velocity, _acceleration(state, scene, params, t)


def semi_implicit_euler_step(
    state: ParticleState,
    scene: Scene,
    params: Parameters,
    t: float,
    dt: float,
) -> np.ndarray:
    """
    Advance the state by dt using semi-implicit (symplectic) Euler.

    The update is:
        a      = F(r, v, t) / m
        v(t+dt) = v + a*dt
        r(t+dt) = r + v(t+dt)*dt

    Using the updated velocity for the position is what makes the scheme
    symplectic: for undamped oscillators the energy error stays bounded.

    Args:
        state: Particle state (modified in-place).
        scene: Active force law.
        params: Physical constants.
        t: Simulation time at the start of the step.
        dt: Timestep.

    Returns:
        The acceleration used for the step.
    """
    a = _acceleration(state, scene, params, t)
    state.velocity = state.velocity + a * dt
    state.position = state.position + state.velocity * dt

    if is_constrained(scene):
        project_onto_circle(state, params.radius)

    return a


def rk4_step(
    state: ParticleState,
    scene: Scene,
    params: Parameters,
    t: float,
    dt: float,
) -> np.ndarray:
    """
    Advance the state by dt using classical 4th-order Runge-Kutta.

    RK4 evaluates derivatives at 4 points within the timestep and combines
    them with weights (1, 2, 2, 1)/6 to achieve O(dt⁵) local error. Forces
    are re-evaluated at every stage, at times t, t+dt/2, t+dt/2, t+dt.

    For the constrained scene the new state is projected onto the circle and
    the acceleration is evaluated again at the projected state.

    Args:
        state: Particle state (modified in-place).
        scene: Active force law.
        params: Physical constants.
        t: Simulation time at the start of the step.
        dt: Timestep.

    Returns:
        The acceleration at the end of the step.

    Reference:
        https://en.wikipedia.org/wiki/Runge-Kutta_methods#The_Runge-Kutta_method
    """
    r0 = state.position.copy()
    v0 = state.velocity.copy()

    def f(r, v, tau):
        """Evaluate derivatives at an intermediate state."""
        return _derivatives(ParticleState(r, v), scene, params, tau)

    # RK4 stages
    k1 = f(r0, v0, t)
    k2 = f(r0 + 0.5 * dt * k1[0], v0 + 0.5 * dt * k1[1], t + 0.5 * dt)
    k3 = f(r0 + 0.5 * dt * k2[0], v0 + 0.5 * dt * k2[1], t + 0.5 * dt)
    k4 = f(r0 + dt * k3[0], v0 + dt * k3[1], t + dt)

    # Weighted combination
    state.position = r0 + (dt / 6.0) * (k1[0] + 2 * k2[0] + 2 * k3[0] + k4[0])
    state.velocity = v0 + (dt / 6.0) * (k1[1] + 2 * k2[1] + 2 * k3[1] + k4[1])

    a = _acceleration(state, scene, params, t + dt)

    if is_constrained(scene):
        project_onto_circle(state, params.radius)
        # Projection moves the state; the cached acceleration must follow it.
        a = _acceleration(state, scene, params, t + dt)

    return a


_STEPPERS: dict[IntegratorKind, StepFunction] = {
    IntegratorKind.SEMI_IMPLICIT_EULER: semi_implicit_euler_step,
    IntegratorKind.RK4: rk4_step,
}


def step(
    kind: IntegratorKind,
    state: ParticleState,
    scene: Scene,
    params: Parameters,
    t: float,
    dt: float,
) -> np.ndarray:
    """
    Advance the state by dt with the selected integrator.

    Raises:
        ValueError: If kind is not a known integrator.
    """
    try:
        stepper = _STEPPERS[kind]
    except KeyError:
        raise ValueError(f"Unknown integrator: {kind!r}") from None
    return stepper(state, scene, params, t, dt)
