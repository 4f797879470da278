import numpy as np
import pytest
from particle_sandbox.core import forces
from particle_sandbox.core.forces import force, potential_energy, effective_stiffness
from particle_sandbox.types import Parameters, ParticleState, Scene


def test_every_scene_has_force_and_potential():
    """Adding a scene without a force law or potential must fail here."""
    assert set(forces._FORCE_LAWS) == set(Scene)
    assert set(forces._POTENTIALS) == set(Scene)


def test_free_particle_has_no_force():
    s = ParticleState((0.3, -2.0), (5.0, 1.0))
    assert np.array_equal(force(s, Scene.FREE, Parameters(), 0.0), np.zeros(2))
    assert potential_energy(s, Scene.FREE, Parameters(), 0.0) == 0.0


def test_constant_force_with_drag():
    """
    F = (0, -m g) - c v
    m=2, g=1.5, c=0.15, v=(1, 2)  ->  F = (-0.15, -3.3)
    """
    p = Parameters(mass=2.0, g=1.5, damping=0.15)
    s = ParticleState((0.0, 1.0), (1.0, 2.0))
    F = force(s, Scene.CONSTANT_FORCE, p, 0.0)
    assert np.allclose(F, [-0.15, -3.3])
    assert potential_energy(s, Scene.CONSTANT_FORCE, p, 0.0) == pytest.approx(3.0)


def test_oscillator_with_drag():
    """F = -k r - c v."""
    p = Parameters(k=2.0, damping=0.5)
    s = ParticleState((1.0, -0.5), (0.2, 0.4))
    F = force(s, Scene.OSCILLATOR, p, 0.0)
    assert np.allclose(F, [-2.0 - 0.1, 1.0 - 0.2])
    assert potential_energy(s, Scene.OSCILLATOR, p, 0.0) == pytest.approx(0.5 * 2.0 * 1.25)


def test_translation_scene_ignores_damping():
    p = Parameters(mass=1.0, g=1.5, damping=0.7)
    s = ParticleState((0.0, 0.0), (3.0, -1.0))
    assert np.allclose(force(s, Scene.NOETHER_TRANSLATION_PX, p, 0.0), [0.0, -1.5])


def test_inverse_square_magnitude():
    """|F| = k / r² for r well away from the softening floor."""
    p = Parameters(k=2.0)
    s = ParticleState((3.0, 4.0), (0.0, 0.0))
    for scene in (Scene.INVERSE_SQUARE, Scene.NOETHER_ROTATION_AREAL):
        F = force(s, scene, p, 0.0)
        assert np.linalg.norm(F) == pytest.approx(2.0 / 25.0)
        # Attractive: points back to the origin
        assert np.dot(F, s.position) < 0
        assert potential_energy(s, scene, p, 0.0) == pytest.approx(-2.0 / 5.0)


def test_inverse_square_is_finite_near_origin():
    """
    Denominator is max(|r|³, 1e-4):
      r = (1e-3, 0)  ->  F = -k * 1e-3 / 1e-4 = -20 (k=2)
      r = 0          ->  F = 0
    """
    p = Parameters(k=2.0)
    near = ParticleState((1e-3, 0.0), (0.0, 0.0))
    F = force(near, Scene.INVERSE_SQUARE, p, 0.0)
    assert np.allclose(F, [-20.0, 0.0])

    origin = ParticleState((0.0, 0.0), (0.0, 0.0))
    assert np.allclose(force(origin, Scene.INVERSE_SQUARE, p, 0.0), 0.0)
    assert potential_energy(origin, Scene.INVERSE_SQUARE, p, 0.0) == pytest.approx(-2.0 / 1e-4)


def test_effective_stiffness():
    """k(t) = k (1 + eps_k sin(omega_k t))."""
    p = Parameters(k=2.0, eps_k=0.35, omega_k=2.5)
    assert effective_stiffness(0.0, p) == pytest.approx(2.0)
    t_peak = np.pi / (2 * 2.5)
    assert effective_stiffness(t_peak, p) == pytest.approx(2.0 * 1.35)

    s = ParticleState((1.0, 0.0), (0.0, 0.0))
    F = force(s, Scene.TIME_VARYING_STIFFNESS, p, t_peak)
    assert np.allclose(F, [-2.7, 0.0])


@pytest.mark.parametrize("scene", [
    Scene.CONSTANT_FORCE,
    Scene.OSCILLATOR,
    Scene.INVERSE_SQUARE,
    Scene.CIRCLE_CONSTRAINT,
    Scene.TIME_VARYING_STIFFNESS,
    Scene.NOETHER_ROTATION_AREAL,
    Scene.NOETHER_TRANSLATION_PX,
])
def test_force_is_negative_gradient_of_potential(scene):
    """
    With damping off, every force law is conservative: F = -∇V.
    Checked with central differences at an arbitrary point.
    """
    p = Parameters(damping=0.0)
    t = 0.37
    r = np.array([-0.8, 0.6])
    h = 1e-6
    grad = np.zeros(2)
    for i in range(2):
        dr = np.zeros(2)
        dr[i] = h
        vp = potential_energy(ParticleState(r + dr, (0, 0)), scene, p, t)
        vm = potential_energy(ParticleState(r - dr, (0, 0)), scene, p, t)
        grad[i] = (vp - vm) / (2 * h)

    F = force(ParticleState(r, (0, 0)), scene, p, t)
    assert np.allclose(F, -grad, atol=1e-6)


def test_force_does_not_modify_state():
    p = Parameters()
    s = ParticleState((0.5, 0.5), (1.0, -1.0))
    before = s.copy()
    for scene in Scene:
        force(s, scene, p, 1.0)
        potential_energy(s, scene, p, 1.0)
    assert np.array_equal(s.position, before.position)
    assert np.array_equal(s.velocity, before.velocity)
