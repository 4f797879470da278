# MIT License (see LICENSE)
"""
Constraint projection for the particle sandbox.

This subpackage provides:
    - project_onto_circle: Puts a state on a circle and drops radial velocity.
    - is_constrained: Whether a scene uses the circle constraint.

Typical usage:
    from particle_sandbox.constraints import project_onto_circle

    project_onto_circle(state, radius=1.25)
"""
from .circle import project_onto_circle, is_constrained

__all__ = [
    "project_onto_circle",
    "is_constrained",
]
