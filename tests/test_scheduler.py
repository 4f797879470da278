import pytest
from particle_sandbox.scheduler import SubstepScheduler
from particle_sandbox.simulation import Simulation


def test_cap_discards_remainder():
    """5 s frame at h=1/120: exactly 120 substeps (1 s), the other 4 s are dropped."""
    sched = SubstepScheduler()
    steps = sched.plan(5.0, 1 / 120)
    assert len(steps) == 120
    assert all(h == 1 / 120 for h in steps)
    assert sum(steps) == pytest.approx(1.0)

    calls = []
    n = sched.run(5.0, 1 / 120, calls.append)
    assert n == 120
    assert calls == steps


def test_partial_last_step():
    """
    frame_dt = 0.02, nominal = 1/120:
      two full steps and a final step of 0.02 - 2/120
    """
    steps = SubstepScheduler().plan(0.02, 1 / 120)
    assert len(steps) == 3
    assert steps[0] == steps[1] == 1 / 120
    assert steps[2] == pytest.approx(0.02 - 2 / 120)
    assert sum(steps) == pytest.approx(0.02, abs=1e-15)


def test_exact_multiple_has_no_sliver_step():
    steps = SubstepScheduler().plan(1 / 60, 1 / 120)
    assert len(steps) == 2


def test_plan_is_deterministic():
    sched = SubstepScheduler()
    assert sched.plan(0.0371, 1 / 240) == sched.plan(0.0371, 1 / 240)


def test_non_positive_frame_gives_no_steps():
    sched = SubstepScheduler()
    assert sched.plan(0.0, 1 / 120) == []
    assert sched.plan(-0.5, 1 / 120) == []


def test_invalid_configuration_rejected():
    with pytest.raises(ValueError):
        SubstepScheduler().plan(0.1, 0.0)
    with pytest.raises(ValueError):
        SubstepScheduler(max_substeps=0)


def test_custom_cap():
    assert len(SubstepScheduler(max_substeps=3).plan(1.0, 0.01)) == 3


def test_no_remainder_carried_between_frames():
    """After a capped frame the next frame starts from scratch and dt is untouched."""
    sim = Simulation()
    dt = sim.dt
    assert sim.advance(5.0) == 120
    assert sim.time == pytest.approx(120 * dt)
    assert sim.dt == dt

    # A partial frame does not shrink the nominal step either
    sim.advance(0.5 * dt)
    assert sim.dt == dt
    assert sim.advance(dt) == 1
