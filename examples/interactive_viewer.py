"""
Interactive window for the particle sandbox (needs the `viewer` extra: pygame).

Run:
  python examples/interactive_viewer.py

Keys: 1-8 scenes, I integrator, R reset, Space pause, Up/Down step size,
Left/Right stiffness, H help. Diagnostics are printed once per second.
"""
import logging
import os
import time

import numpy as np
import pygame

from particle_sandbox import FrameLoop, Simulation
from particle_sandbox.commands import HELP_TEXT, handle_key
from particle_sandbox.diagnostics import DiagnosticsReporter
from particle_sandbox.renderer import RendererAdapter

WIDTH, HEIGHT = 1100, 700
HALF_HEIGHT_UNITS = 2.5  # world units from the centre to the top edge
BACKGROUND = (13, 13, 15)
AXES = (90, 90, 90)
CIRCLE = (140, 140, 140)
TRAIL = (64, 140, 242)
PARTICLE = (242, 242, 242)
VELOCITY = (64, 242, 90)
ACCELERATION = (242, 64, 64)

KEY_NAMES = {
    pygame.K_SPACE: "space",
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
}


class PygameRenderer(RendererAdapter):
    """Draws a FrameSnapshot with pygame primitives."""

    def __init__(self, screen):
        self.screen = screen
        self.scale = screen.get_height() / (2 * HALF_HEIGHT_UNITS)

    def to_screen(self, p):
        w, h = self.screen.get_size()
        return (int(w / 2 + p[0] * self.scale), int(h / 2 - p[1] * self.scale))

    def begin_frame(self, time):
        self.screen.fill(BACKGROUND)
        w, h = self.screen.get_size()
        pygame.draw.line(self.screen, AXES, (0, h // 2), (w, h // 2))
        pygame.draw.line(self.screen, AXES, (w // 2, 0), (w // 2, h))

    def draw_vector(self, origin, v, scale, color):
        tip = origin + v * scale
        pygame.draw.line(self.screen, color, self.to_screen(origin), self.to_screen(tip), 2)
        length = np.linalg.norm(tip - origin)
        if length > 1e-8:
            d = (tip - origin) / length
            left = np.array([-d[1], d[0]])
            head = 0.08
            p1 = tip - d * head * 1.2 + left * head * 0.6
            p2 = tip - d * head * 1.2 - left * head * 0.6
            pygame.draw.polygon(self.screen, color, [self.to_screen(tip), self.to_screen(p1), self.to_screen(p2)])

    def draw_snapshot(self, snapshot):
        if snapshot.show_circle:
            pygame.draw.circle(self.screen, CIRCLE, self.to_screen((0.0, 0.0)), int(snapshot.radius * self.scale), 1)
        if len(snapshot.trail) >= 2:
            pygame.draw.lines(self.screen, TRAIL, False, [self.to_screen(p) for p in snapshot.trail], 2)
        pygame.draw.circle(self.screen, PARTICLE, self.to_screen(snapshot.position), int(0.06 * self.scale))
        self.draw_vector(snapshot.position, snapshot.velocity, 0.35, VELOCITY)
        self.draw_vector(snapshot.position, snapshot.acceleration, 0.20, ACCELERATION)

    def end_frame(self):
        pygame.display.flip()


def main():
    logging.basicConfig(
        level=os.environ.get("PARTICLE_SANDBOX_LOG_LEVEL", "INFO"),
        format="%(message)s",
    )
    print(HELP_TEXT)

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption("Particle sandbox: symmetries and conservation laws")
    clock = pygame.time.Clock()

    sim = Simulation()
    loop = FrameLoop(sim, renderer=PygameRenderer(screen), reporter=DiagnosticsReporter(), clock=time.perf_counter)

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                loop.renderer = PygameRenderer(screen)
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                else:
                    handle_key(sim, KEY_NAMES.get(event.key, event.unicode))
        loop.tick()
        clock.tick(60)

    pygame.quit()


if __name__ == "__main__":
    main()
