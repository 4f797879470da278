# MIT License (see LICENSE)
"""
Renderer adapters for sandbox visualization.

This module provides an abstract base class for rendering and a concrete
debug implementation. The simulation has no rendering dependency; these
adapters consume a FrameSnapshot and nothing else.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import sys

from ..simulation import FrameSnapshot

if TYPE_CHECKING:
    from ..simulation import Simulation


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Subclasses implement the drawing methods for a graphics backend
    (pygame, matplotlib, a web frontend, ...).

    Usage:
        renderer = MyRenderer()
        snapshot = sim.snapshot()
        renderer.begin_frame(snapshot.time)
        renderer.draw_snapshot(snapshot)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render(sim)
    """

    @abstractmethod
    def begin_frame(self, time: float) -> None:
        """
        Begin a new frame for rendering.

        Args:
            time: Current simulated time in seconds.
        """
        ...

    @abstractmethod
    def draw_snapshot(self, snapshot: FrameSnapshot) -> None:
        """
        Draw the particle, its vectors, the trail and (for the circle
        scene) the constraint circle.
        """
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render(self, sim: "Simulation") -> None:
        """Render one frame of the simulation."""
        snapshot = sim.snapshot()
        self.begin_frame(snapshot.time)
        self.draw_snapshot(snapshot)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Console/text renderer for development and testing.

    Example output:
        === Frame t=0.5000 ===
        particle @ (-0.21, 0.55) v=(1.10, -0.46) a=(0.00, -1.50) trail=60
        circle r=1.25
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        """
        Initialize the debug renderer.

        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, include velocity, acceleration and trail size.
        """
        self.output = output or sys.stdout
        self.verbose = verbose

    def begin_frame(self, time: float) -> None:
        self.output.write(f"=== Frame t={time:.4f} ===\n")

    def draw_snapshot(self, snapshot: FrameSnapshot) -> None:
        pos = snapshot.position
        line = f"particle @ ({pos[0]:.2f}, {pos[1]:.2f})"
        if self.verbose:
            vel, acc = snapshot.velocity, snapshot.acceleration
            line += (
                f" v=({vel[0]:.2f}, {vel[1]:.2f})"
                f" a=({acc[0]:.2f}, {acc[1]:.2f})"
                f" trail={len(snapshot.trail)}"
            )
        self.output.write(line + "\n")
        if snapshot.show_circle:
            self.output.write(f"circle r={snapshot.radius:.2f}\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """
    No-op renderer.

    Used for headless runs and benchmarks.
    """

    def begin_frame(self, time: float) -> None:
        pass

    def draw_snapshot(self, snapshot: FrameSnapshot) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that buffers frame data for later retrieval.

    Example:
        renderer = BufferedRenderer()
        for _ in range(100):
            sim.advance(1/60)
            renderer.render(sim)

        for frame in renderer.frames:
            print(frame["time"], frame["position"])
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, time: float) -> None:
        self._current_frame = {"time": time}

    def draw_snapshot(self, snapshot: FrameSnapshot) -> None:
        if self._current_frame is None:
            return
        self._current_frame.update({
            "scene": int(snapshot.scene),
            "position": snapshot.position.tolist(),
            "velocity": snapshot.velocity.tolist(),
            "acceleration": snapshot.acceleration.tolist(),
            "trail_length": len(snapshot.trail),
            "circle": snapshot.radius if snapshot.show_circle else None,
        })

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        """Clear all buffered frames."""
        self.frames.clear()
