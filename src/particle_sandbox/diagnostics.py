# MIT License (see LICENSE)
"""
Periodic diagnostic reports.

Every scene reports its scene name, integrator and step size plus a
scene-specific set of quantities:

    default                  E, Lz, r, v
    rotation (areal)         E, Lz, v_areal, Lz/(2m)
    translation (px)         E, px, r, v
    time-varying stiffness   k(t), E, r, v

Reports are produced at most once per REPORT_INTERVAL seconds of host time
and written one line each to a text stream (stdout by default).

Example line:
    Scene: Oscillator | Integrator: Runge-Kutta 4 | dt: 0.00833 | E: 1.34000 | ...
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, TextIO
import sys

from .constants import REPORT_INTERVAL
from .core.forces import effective_stiffness
from .core.invariants import (
    angular_momentum,
    linear_momentum,
    theoretical_areal_velocity,
    total_energy,
)
from .simulation import Simulation
from .types import IntegratorKind, Scene

Quantity = float | tuple[float, float]


@dataclass(frozen=True)
class DiagnosticReport:
    """
    One diagnostic sample.

    Attributes:
        scene: Scene the sample was taken in.
        integrator: Integrator in use.
        dt: Nominal step size.
        time: Simulated time of the sample.
        quantities: Reported quantities in display order.
    """
    scene: Scene
    integrator: IntegratorKind
    dt: float
    time: float
    quantities: dict[str, Quantity]

    def format(self) -> str:
        """Single display line."""
        parts = [
            f"Scene: {self.scene.label:<34s}",
            f"Integrator: {self.integrator.label:<19s}",
            f"dt: {self.dt:.5f}",
        ]
        for name, value in self.quantities.items():
            if isinstance(value, tuple):
                parts.append(f"{name}: ({value[0]:.3f}, {value[1]:.3f})")
            else:
                parts.append(f"{name}: {value:.5f}")
        return " | ".join(parts)


def _vec(v) -> tuple[float, float]:
    return (float(v[0]), float(v[1]))


def _energy(sim: Simulation) -> float:
    return total_energy(sim.state, sim.scene, sim.params, sim.time)


def _default_quantities(sim: Simulation) -> dict[str, Quantity]:
    return {
        "E": _energy(sim),
        "Lz": angular_momentum(sim.state, sim.params),
        "r": _vec(sim.state.position),
        "v": _vec(sim.state.velocity),
    }


def _rotation_quantities(sim: Simulation) -> dict[str, Quantity]:
    # Reading the measured areal velocity closes the current window.
    return {
        "E": _energy(sim),
        "Lz": angular_momentum(sim.state, sim.params),
        "v_areal": sim.tracker.flush_areal_velocity(),
        "Lz/(2m)": theoretical_areal_velocity(sim.state, sim.params),
    }


def _translation_quantities(sim: Simulation) -> dict[str, Quantity]:
    return {
        "E": _energy(sim),
        "px": float(linear_momentum(sim.state, sim.params)[0]),
        "r": _vec(sim.state.position),
        "v": _vec(sim.state.velocity),
    }


def _time_varying_quantities(sim: Simulation) -> dict[str, Quantity]:
    return {
        "k(t)": effective_stiffness(sim.time, sim.params),
        "E": _energy(sim),
        "r": _vec(sim.state.position),
        "v": _vec(sim.state.velocity),
    }


_QUANTITIES: dict[Scene, Callable[[Simulation], dict[str, Quantity]]] = {
    Scene.FREE: _default_quantities,
    Scene.CONSTANT_FORCE: _default_quantities,
    Scene.OSCILLATOR: _default_quantities,
    Scene.INVERSE_SQUARE: _default_quantities,
    Scene.CIRCLE_CONSTRAINT: _default_quantities,
    Scene.TIME_VARYING_STIFFNESS: _time_varying_quantities,
    Scene.NOETHER_ROTATION_AREAL: _rotation_quantities,
    Scene.NOETHER_TRANSLATION_PX: _translation_quantities,
}


def build_report(sim: Simulation) -> DiagnosticReport:
    """
    Sample the scene's diagnostic quantities.

    Note:
        For the rotation scene this flushes the swept-area window.
    """
    return DiagnosticReport(
        scene=sim.scene,
        integrator=sim.integrator,
        dt=sim.dt,
        time=sim.time,
        quantities=_QUANTITIES[sim.scene](sim),
    )


class DiagnosticsReporter:
    """
    Writes a diagnostic line when enough host time has passed.

    Usage:
        reporter = DiagnosticsReporter()
        while running:
            sim.advance(frame_dt)
            reporter.maybe_report(sim, now)
    """

    def __init__(self, output: TextIO | None = None, interval: float = REPORT_INTERVAL):
        """
        Initialize the reporter.

        Args:
            output: Output stream (defaults to sys.stdout).
            interval: Minimum host time between two reports, in seconds.
        """
        self.output = output or sys.stdout
        self.interval = interval

    def maybe_report(self, sim: Simulation, now: float) -> DiagnosticReport | None:
        """
        Report if the print clock is at least `interval` old.

        The first call only starts the print clock.

        Args:
            sim: Simulation to sample.
            now: Current host time in seconds.

        Returns:
            The written report, or None if it is not time yet.
        """
        if sim.print_clock is None:
            sim.print_clock = now
        if now - sim.print_clock < self.interval:
            return None

        report = build_report(sim)
        self.output.write(report.format() + "\n")
        self.output.flush()
        sim.print_clock = now
        return report
