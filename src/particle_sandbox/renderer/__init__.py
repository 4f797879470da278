# MIT License (see LICENSE)
"""
Rendering adapters for visualization.

This subpackage provides abstract and concrete renderer implementations:
    - RendererAdapter: Abstract base class defining the rendering interface.
    - DebugRenderer: Text/console output for debugging.
    - NullRenderer: No-op renderer for headless runs.
    - BufferedRenderer: Records frames for playback or inspection.

The simulation has no rendering dependency; these adapters are optional.

Typical usage:
    from particle_sandbox.renderer import DebugRenderer

    renderer = DebugRenderer()
    renderer.render(sim)
"""
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    NullRenderer,
    BufferedRenderer,
)

__all__ = [
    "RendererAdapter",
    "DebugRenderer",
    "NullRenderer",
    "BufferedRenderer",
]
