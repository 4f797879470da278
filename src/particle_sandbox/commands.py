# MIT License (see LICENSE)
"""
Input commands and their default key bindings.

Hosts translate their own key events into the key names used here
("1".."8", "i", "r", "space", "h", "up", "down", "left", "right") and call
handle_key(); everything else about input handling stays in the host.
"""
from __future__ import annotations
from enum import Enum, auto
import logging

from .simulation import Simulation
from .types import Scene

logger = logging.getLogger(__name__)


class Command(Enum):
    """Discrete operations a user can trigger."""
    SELECT_SCENE = auto()
    TOGGLE_INTEGRATOR = auto()
    RESET = auto()
    TOGGLE_PAUSE = auto()
    INCREASE_STEP = auto()
    DECREASE_STEP = auto()
    INCREASE_STIFFNESS = auto()
    DECREASE_STIFFNESS = auto()
    HELP = auto()


HELP_TEXT = """\
Controls
  1      Free particle
  2      Constant downward force with drag
  3      Harmonic oscillator with drag
  4      Inverse-square central force (Kepler)
  5      Holonomic constraint to a circle with a pull to the origin
  6      Oscillator with time-dependent stiffness
  7      Noether, rotation: central force, prints areal velocity
  8      Noether, x translation: gravity without drag, prints px
  Space  Pause
  R      Reset
  I      Switch integrator
  Up / Down     Adjust time step
  Right / Left  Adjust stiffness k
  H      Show this help

Legend
  White point   Particle
  Green vector  Velocity
  Red vector    Acceleration
  Grey axes     Reference
  Blue trail    Recent trajectory
"""


KEY_BINDINGS: dict[str, tuple[Command, Scene | None]] = {
    **{str(int(s)): (Command.SELECT_SCENE, s) for s in Scene},
    "i": (Command.TOGGLE_INTEGRATOR, None),
    "r": (Command.RESET, None),
    "space": (Command.TOGGLE_PAUSE, None),
    "h": (Command.HELP, None),
    "up": (Command.INCREASE_STEP, None),
    "down": (Command.DECREASE_STEP, None),
    "right": (Command.INCREASE_STIFFNESS, None),
    "left": (Command.DECREASE_STIFFNESS, None),
}


def apply_command(sim: Simulation, command: Command, scene: Scene | int | None = None) -> None:
    """
    Apply one command to the simulation.

    Args:
        sim: Simulation to modify.
        command: Operation to perform.
        scene: Target scene, required for SELECT_SCENE.

    Raises:
        ValueError: If SELECT_SCENE is given no valid scene.
    """
    if command is Command.SELECT_SCENE:
        if scene is None:
            raise ValueError("SELECT_SCENE requires a scene")
        sim.select_scene(scene)
    elif command is Command.TOGGLE_INTEGRATOR:
        sim.toggle_integrator()
    elif command is Command.RESET:
        sim.reset()
        logger.info("Reset.")
    elif command is Command.TOGGLE_PAUSE:
        sim.toggle_pause()
    elif command is Command.INCREASE_STEP:
        sim.increase_step()
    elif command is Command.DECREASE_STEP:
        sim.decrease_step()
    elif command is Command.INCREASE_STIFFNESS:
        sim.increase_stiffness()
    elif command is Command.DECREASE_STIFFNESS:
        sim.decrease_stiffness()
    elif command is Command.HELP:
        logger.info("\n%s", HELP_TEXT)
    else:
        raise ValueError(f"Unknown command: {command!r}")


def handle_key(sim: Simulation, key: str) -> bool:
    """
    Apply the command bound to a key name.

    Returns:
        True if the key is bound, False otherwise (nothing happens).
    """
    binding = KEY_BINDINGS.get(key.lower())
    if binding is None:
        return False
    command, scene = binding
    apply_command(sim, command, scene)
    return True
