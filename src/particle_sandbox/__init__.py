# MIT License (see LICENSE)
"""
particle_sandbox - An interactive point-particle mechanics sandbox.

A single particle moves under one of eight force laws, advanced by
semi-implicit Euler or RK4 in fixed substeps, with live diagnostics of
energy, angular momentum, momentum and areal velocity.

Main entry points:
    - Simulation: The particle, its scene and its commands.
    - Scene, IntegratorKind: Force law and integrator selection.
    - Parameters: Physical constants (validated on construction).
    - FrameLoop: Per-frame driver (substeps, diagnostics, render).

Submodules:
    - core: Force laws, integrators and conserved quantities.
    - constraints: Circle constraint projection.
    - renderer: Optional visualization adapters.
    - commands: Key bindings for hosts.
    - diagnostics: Periodic report lines.

Example:
    from particle_sandbox import Simulation, Scene, FrameLoop

    sim = Simulation()
    sim.select_scene(Scene.OSCILLATOR)
    FrameLoop(sim).run(frames=60, frame_dt=1/60)
"""
import logging

from .types import Scene, IntegratorKind, Parameters, ParticleState
from .simulation import Simulation, FrameSnapshot
from .scheduler import SubstepScheduler
from .loop import FrameLoop

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Simulation
    "Simulation",
    "FrameSnapshot",
    "FrameLoop",
    "SubstepScheduler",
    # Types
    "Scene",
    "IntegratorKind",
    "Parameters",
    "ParticleState",
]
