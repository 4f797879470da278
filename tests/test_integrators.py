import numpy as np
import pytest
from particle_sandbox.core.integrators import semi_implicit_euler_step, rk4_step, step
from particle_sandbox.core.invariants import total_energy
from particle_sandbox.types import IntegratorKind, Parameters, ParticleState, Scene


def _start_state():
    return ParticleState((-0.8, 0.6), (1.2, 0.2))


def test_semi_implicit_euler_uses_updated_velocity():
    """
    One step by hand:
      a  = F/m
      v1 = v0 + a h
      r1 = r0 + v1 h
    """
    p = Parameters(mass=2.0, g=1.5, damping=0.15)
    s = _start_state()
    h = 0.1
    a = semi_implicit_euler_step(s, Scene.CONSTANT_FORCE, p, 0.0, h)

    F = np.array([0.0, -3.0]) - 0.15 * np.array([1.2, 0.2])
    a_exp = F / 2.0
    v1 = np.array([1.2, 0.2]) + a_exp * h
    r1 = np.array([-0.8, 0.6]) + v1 * h
    assert np.allclose(a, a_exp)
    assert np.allclose(s.velocity, v1)
    assert np.allclose(s.position, r1)


def test_rk4_exact_for_constant_acceleration():
    """
    RK4 is exact for quadratic trajectories:
      y(t) = y0 + vy t - 1/2 g t²,  x(t) = x0 + vx t
    """
    p = Parameters(g=1.5, damping=0.0)
    s = _start_state()
    h = 1 / 120
    t = 0.0
    for _ in range(120):
        a = rk4_step(s, Scene.NOETHER_TRANSLATION_PX, p, t, h)
        t += h

    assert s.position[0] == pytest.approx(-0.8 + 1.2 * t, abs=1e-12)
    assert s.position[1] == pytest.approx(0.6 + 0.2 * t - 0.75 * t * t, abs=1e-12)
    assert s.velocity[1] == pytest.approx(0.2 - 1.5 * t, abs=1e-12)
    assert np.allclose(a, [0.0, -1.5])


def test_symplectic_euler_energy_stays_bounded():
    """
    Undamped oscillator, k=2, m=1, h=0.01, 20000 steps (~45 periods).

    Symplectic Euler: energy error oscillates with amplitude ~ ω h / 2 and
    does not grow. Explicit Euler multiplies the energy by (1 + ω² h²)
    every step, so the same run ends ~e^4 times too energetic.
    """
    p = Parameters(k=2.0, mass=1.0, damping=0.0)
    h = 0.01
    n = 20000

    s = _start_state()
    E0 = total_energy(s, Scene.OSCILLATOR, p, 0.0)
    dev_first = dev_second = 0.0
    for i in range(n):
        semi_implicit_euler_step(s, Scene.OSCILLATOR, p, i * h, h)
        dev = abs(total_energy(s, Scene.OSCILLATOR, p, 0.0) - E0) / E0
        if i < n // 2:
            dev_first = max(dev_first, dev)
        else:
            dev_second = max(dev_second, dev)

    print("symplectic euler max rel energy deviation", dev_first, dev_second)
    assert dev_second < 0.02
    # No secular growth: second half no worse than the first
    assert dev_second <= dev_first * 1.1 + 1e-12

    # Explicit Euler for contrast
    r = np.array([-0.8, 0.6])
    v = np.array([1.2, 0.2])
    for _ in range(n):
        a = -2.0 * r
        r, v = r + v * h, v + a * h
    E_explicit = 0.5 * np.dot(v, v) + 0.5 * 2.0 * np.dot(r, r)
    print("explicit euler energy ratio", E_explicit / E0)
    assert E_explicit / E0 > 10.0


def test_rk4_oscillator_period():
    """
    Undamped oscillator period T = 2π sqrt(m/k).
    Measured as the time between two upward zero crossings of x,
    with linear interpolation inside the step.
    """
    p = Parameters(k=2.0, mass=1.0, damping=0.0)
    T_exp = 2 * np.pi * np.sqrt(p.mass / p.k)
    h = 0.01

    s = _start_state()
    t = 0.0
    crossings = []
    while len(crossings) < 2 and t < 3 * T_exp:
        x0 = s.position[0]
        rk4_step(s, Scene.OSCILLATOR, p, t, h)
        x1 = s.position[0]
        if x0 < 0.0 <= x1:
            crossings.append(t + h * (-x0) / (x1 - x0))
        t += h

    assert len(crossings) == 2
    T_sim = crossings[1] - crossings[0]
    print("period", T_sim, "exp", T_exp)
    assert T_sim == pytest.approx(T_exp, abs=1e-4)


def test_rk4_energy_error_small():
    """RK4 keeps oscillator energy to ~1e-6 over a few periods at h=1/120."""
    p = Parameters(k=2.0, damping=0.0)
    s = _start_state()
    E0 = total_energy(s, Scene.OSCILLATOR, p, 0.0)
    h = 1 / 120
    for i in range(1200):
        rk4_step(s, Scene.OSCILLATOR, p, i * h, h)
    E1 = total_energy(s, Scene.OSCILLATOR, p, 0.0)
    assert abs(E1 - E0) / E0 < 1e-6


def test_rk4_uses_stage_times():
    """The time-varying scene depends on t; the same state at another start time moves differently."""
    p = Parameters(damping=0.0)
    a = _start_state()
    b = _start_state()
    rk4_step(a, Scene.TIME_VARYING_STIFFNESS, p, 0.0, 0.05)
    rk4_step(b, Scene.TIME_VARYING_STIFFNESS, p, 0.6, 0.05)
    assert not np.allclose(a.velocity, b.velocity)


def test_free_particle_moves_in_straight_line():
    p = Parameters()
    for kind in IntegratorKind:
        s = _start_state()
        for i in range(100):
            step(kind, s, Scene.FREE, p, i * 0.01, 0.01)
        assert np.allclose(s.position, [-0.8 + 1.2, 0.6 + 0.2])
        assert np.allclose(s.velocity, [1.2, 0.2])


def test_unknown_integrator_rejected():
    with pytest.raises(ValueError):
        step(99, _start_state(), Scene.FREE, Parameters(), 0.0, 0.01)
