# MIT License (see LICENSE)
"""
Holonomic circle constraint |r| = R, enforced by projection.

After each integrator step the particle is put back on the circle and the
radial part of its velocity is removed, leaving only the tangential motion.
No constraint force is computed: the scene's own -k*r pull is the only
force, and the projection is the constraint.
"""
from __future__ import annotations

import numpy as np

from ..constants import PROJECTION_EPS
from ..types import ParticleState, Scene
from ..util import dot, norm, unit


def is_constrained(scene: Scene) -> bool:
    """True if the scene keeps the particle on the constraint circle."""
    return scene is Scene.CIRCLE_CONSTRAINT


def project_onto_circle(state: ParticleState, radius: float, eps: float = PROJECTION_EPS) -> None:
    """
    Project a state onto the circle of the given radius centred at the origin.

    Steps:
        1. n = r / |r|
        2. r <- n * R
        3. v <- v - n * (v · n)

    If |r| < eps there is no usable direction: the particle is placed at
    (R, 0) with zero velocity.

    Args:
        state: State to modify in-place.
        radius: Constraint radius R (> 0).
        eps: Degenerate-radius threshold.
    """
    r = norm(state.position)
    if r < eps:
        state.position = np.array([radius, 0.0], dtype=np.float64)
        state.velocity = np.zeros(2, dtype=np.float64)
        return

    n = unit(state.position)
    state.position = n * radius
    v_rad = dot(state.velocity, n)
    state.velocity = state.velocity - n * v_rad
