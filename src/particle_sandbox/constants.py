# MIT License (see LICENSE)
"""
Fixed configuration values for the sandbox.

Numeric guards, interactive limits and the scene start condition. Units are
simulation units (the sandbox is dimensionless): lengths, seconds, mass.
"""
from __future__ import annotations

# Floor on |r|³ (force) and |r| (potential) for the inverse-square scenes.
# Keeps the central force finite when the particle passes through the origin.
SOFTENING_EPS: float = 1e-4

# Below this radius the circle projection has no usable direction and snaps
# the particle to (radius, 0) at rest.
PROJECTION_EPS: float = 1e-6

# Start condition applied on every reset and scene switch.
START_POSITION: tuple[float, float] = (-0.8, 0.6)
START_VELOCITY: tuple[float, float] = (1.2, 0.2)

# Nominal step size and its interactive range (seconds).
DEFAULT_DT: float = 1.0 / 120.0
MIN_DT: float = 1.0 / 600.0
MAX_DT: float = 1.0 / 15.0

# Stiffness range reachable with the stiffness commands.
MIN_STIFFNESS: float = 0.02
MAX_STIFFNESS: float = 50.0

# Multiplicative factors for the increase/decrease commands.
INCREASE_FACTOR: float = 1.10
DECREASE_FACTOR: float = 0.90

# Upper bound on substeps per frame; time beyond it is dropped.
MAX_SUBSTEPS: int = 120

# Number of recent positions kept for the trajectory trail.
TRAIL_LENGTH: int = 900

# Minimum host time between two diagnostic lines (seconds).
REPORT_INTERVAL: float = 1.0
