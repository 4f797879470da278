# MIT License (see LICENSE)
"""
The simulation state and its commands.

The Simulation class owns everything that changes while the sandbox runs:
- The active scene, integrator and physical parameters.
- The particle state and the acceleration of the last step.
- The nominal step size and the paused flag.
- The trajectory trail, the simulated clock and the per-step trackers.

Structure:
    - Host creates a Simulation (it starts reset).
    - Host forwards input as commands (select_scene, toggle_integrator, ...).
    - Host calls advance(frame_dt) once per frame, then reads snapshot().
"""
from __future__ import annotations
from collections import deque
from dataclasses import dataclass, field, replace
import logging
import math

import numpy as np

from .constants import (
    DECREASE_FACTOR,
    DEFAULT_DT,
    INCREASE_FACTOR,
    MAX_DT,
    MAX_STIFFNESS,
    MIN_DT,
    MIN_STIFFNESS,
    START_POSITION,
    START_VELOCITY,
    TRAIL_LENGTH,
)
from .core.integrators import step as integrate
from .core.invariants import ConservedQuantityTracker
from .scheduler import SubstepScheduler
from .types import IntegratorKind, Parameters, ParticleState, Scene

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrameSnapshot:
    """
    Read-only view of the simulation for one rendered frame.

    Attributes:
        position: Particle position [x, y].
        velocity: Particle velocity [vx, vy].
        acceleration: Acceleration of the last step [ax, ay].
        trail: Recent positions, oldest first, shape (N, 2).
        scene: Active scene.
        radius: Constraint radius (drawn only for the circle scene).
        time: Simulated time in seconds.
    """
    position: np.ndarray
    velocity: np.ndarray
    acceleration: np.ndarray
    trail: np.ndarray
    scene: Scene
    radius: float
    time: float

    @property
    def show_circle(self) -> bool:
        """Whether the constraint circle should be drawn."""
        return self.scene is Scene.CIRCLE_CONSTRAINT


@dataclass
class Simulation:
    """
    Single-particle sandbox.

    Attributes:
        scene: Active force law (default: constant force with drag).
        integrator: Time-stepping scheme (default: semi-implicit Euler).
        params: Physical constants. Replaced, never mutated.
        dt: Nominal simulation step in seconds, within [MIN_DT, MAX_DT].
        paused: When True, advance() does nothing.
        scheduler: Splits frame time into substeps.
        trail_length: Number of recent positions kept in the trail.
    """
    scene: Scene = Scene.CONSTANT_FORCE
    integrator: IntegratorKind = IntegratorKind.SEMI_IMPLICIT_EULER
    params: Parameters = field(default_factory=Parameters)
    dt: float = DEFAULT_DT
    paused: bool = False
    scheduler: SubstepScheduler = field(default_factory=SubstepScheduler)
    trail_length: int = TRAIL_LENGTH

    # Internal state
    state: ParticleState = field(default_factory=ParticleState, init=False)
    acceleration: np.ndarray = field(
        default_factory=lambda: np.zeros(2, dtype=np.float64), init=False
    )
    time: float = field(default=0.0, init=False)
    tracker: ConservedQuantityTracker = field(default_factory=ConservedQuantityTracker, init=False)
    print_clock: float | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        """
        Normalize enums, validate the step size and start from the initial condition.

        Raises:
            ValueError: If dt is not finite or lies outside [MIN_DT, MAX_DT].
        """
        self.scene = Scene(self.scene)
        self.integrator = IntegratorKind(self.integrator)
        self.dt = float(self.dt)
        if not math.isfinite(self.dt) or not MIN_DT <= self.dt <= MAX_DT:
            raise ValueError(f"dt must be within [{MIN_DT}, {MAX_DT}], got {self.dt!r}")
        self.trail: deque[np.ndarray] = deque(maxlen=self.trail_length)
        self.reset()

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def reset(self) -> None:
        """
        Put the particle back at the start condition.

        Clears acceleration, trail, simulated clock and the swept-area
        window. Scene, integrator, parameters and step size are kept.
        """
        self.state = ParticleState(START_POSITION, START_VELOCITY)
        self.acceleration = np.zeros(2, dtype=np.float64)
        self.trail.clear()
        self.time = 0.0
        self.tracker.reset(self.state.position)

    def select_scene(self, scene: Scene | int) -> None:
        """
        Switch to another scene and reset.

        The undamped scenes force damping to zero; it stays zero when
        switching away from them.

        Raises:
            ValueError: If scene is not one of the enumerated scenes.
        """
        self.scene = Scene(scene)
        self.reset()
        if self.scene.undamped:
            self.params = replace(self.params, damping=0.0)
        logger.info("Scene selected: %s", self.scene.label)

    def toggle_integrator(self) -> None:
        self.integrator = self.integrator.toggled()
        logger.info("Integrator: %s", self.integrator.label)

    def toggle_pause(self) -> None:
        self.paused = not self.paused
        logger.info("Paused." if self.paused else "Resumed.")

    def increase_step(self) -> None:
        """Grow the nominal step by 10%, up to MAX_DT."""
        self.dt = min(self.dt * INCREASE_FACTOR, MAX_DT)
        logger.info("Step size: %.5f", self.dt)

    def decrease_step(self) -> None:
        """Shrink the nominal step by 10%, down to MIN_DT."""
        self.dt = max(self.dt * DECREASE_FACTOR, MIN_DT)
        logger.info("Step size: %.5f", self.dt)

    def increase_stiffness(self) -> None:
        """Grow k by 10%, up to MAX_STIFFNESS."""
        k = min(self.params.k * INCREASE_FACTOR, MAX_STIFFNESS)
        self.params = replace(self.params, k=k)
        logger.info("Stiffness k: %.5f", k)

    def decrease_stiffness(self) -> None:
        """Shrink k by 10%, down to MIN_STIFFNESS."""
        k = max(self.params.k * DECREASE_FACTOR, MIN_STIFFNESS)
        self.params = replace(self.params, k=k)
        logger.info("Stiffness k: %.5f", k)

    # -------------------------------------------------------------------------
    # Stepping
    # -------------------------------------------------------------------------

    def step(self, h: float | None = None) -> None:
        """
        Advance the particle by one substep of size h.

        Architecture:
        1. Integrate (force evaluation and constraint inside the integrator).
        2. Advance the simulated clock.
        3. Update trackers and the trail.
        """
        h = float(self.dt if h is None else h)
        self.acceleration = integrate(
            self.integrator, self.state, self.scene, self.params, self.time, h
        )
        self.time += h
        self.tracker.record_step(self.scene, self.state.position, h)
        self.trail.append(self.state.position.copy())

    def advance(self, frame_dt: float) -> int:
        """
        Consume one frame of host time with fixed-size substeps.

        Returns:
            Number of substeps taken (0 while paused).
        """
        if self.paused:
            return 0
        return self.scheduler.run(frame_dt, self.dt, self.step)

    def snapshot(self) -> FrameSnapshot:
        """Copy of the state a renderer needs for one frame."""
        if self.trail:
            trail = np.array(self.trail, dtype=np.float64)
        else:
            trail = np.zeros((0, 2), dtype=np.float64)
        return FrameSnapshot(
            position=self.state.position.copy(),
            velocity=self.state.velocity.copy(),
            acceleration=self.acceleration.copy(),
            trail=trail,
            scene=self.scene,
            radius=self.params.radius,
            time=self.time,
        )
