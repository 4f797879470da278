import numpy as np
import pytest
from particle_sandbox.constraints import project_onto_circle, is_constrained
from particle_sandbox.simulation import Simulation
from particle_sandbox.types import IntegratorKind, ParticleState, Scene


def test_projection_keeps_tangential_velocity():
    """
    r = (2, 0), v = (3, 4), R = 1.25
    n = (1, 0)  ->  r = (1.25, 0), v = (0, 4)
    """
    s = ParticleState((2.0, 0.0), (3.0, 4.0))
    project_onto_circle(s, 1.25)
    assert np.allclose(s.position, [1.25, 0.0])
    assert np.allclose(s.velocity, [0.0, 4.0])


def test_projection_of_oblique_state():
    s = ParticleState((0.3, -0.4), (1.0, 2.0))
    project_onto_circle(s, 2.0)
    n = s.position / np.linalg.norm(s.position)
    assert np.linalg.norm(s.position) == pytest.approx(2.0)
    assert np.allclose(n, [0.6, -0.8])
    assert np.dot(s.velocity, n) == pytest.approx(0.0, abs=1e-12)


def test_projection_degenerate_origin():
    """Near the origin there is no direction: snap to (R, 0) at rest."""
    s = ParticleState((1e-8, -1e-8), (5.0, 5.0))
    project_onto_circle(s, 1.25)
    assert np.array_equal(s.position, [1.25, 0.0])
    assert np.array_equal(s.velocity, [0.0, 0.0])


def test_projection_just_outside_degenerate_radius():
    """|r| = 2e-6 still has a direction: pushed out along +x, radial v removed."""
    s = ParticleState((2e-6, 0.0), (1.0, 3.0))
    project_onto_circle(s, 1.25)
    assert np.allclose(s.position, [1.25, 0.0])
    assert np.allclose(s.velocity, [0.0, 3.0])


def test_only_circle_scene_is_constrained():
    assert [s for s in Scene if is_constrained(s)] == [Scene.CIRCLE_CONSTRAINT]


@pytest.mark.parametrize("integrator", list(IntegratorKind))
def test_circle_scene_stays_on_radius(integrator):
    """|r| = R after every step, for both integrators and any step size in range."""
    sim = Simulation(integrator=integrator)
    sim.select_scene(Scene.CIRCLE_CONSTRAINT)
    R = sim.params.radius

    for h in (1 / 600, 1 / 120, 1 / 15):
        for _ in range(500):
            sim.step(h)
            r = np.linalg.norm(sim.state.position)
            assert abs(r - R) < 1e-12
            # Velocity is purely tangential
            assert abs(np.dot(sim.state.velocity, sim.state.position)) < 1e-9


def test_rk4_acceleration_follows_projection():
    """After projection the cached acceleration is -k r / m at the projected point."""
    sim = Simulation(integrator=IntegratorKind.RK4)
    sim.select_scene(Scene.CIRCLE_CONSTRAINT)
    sim.step(1 / 60)
    expected = -sim.params.k * sim.state.position / sim.params.mass
    assert np.allclose(sim.acceleration, expected)
