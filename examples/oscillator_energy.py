from dataclasses import replace

from particle_sandbox import IntegratorKind, Scene, Simulation
from particle_sandbox.core.invariants import total_energy

# Undamped oscillator at a coarse step: symplectic Euler oscillates around E0, RK4 barely moves
for integrator in IntegratorKind:
    sim = Simulation(integrator=integrator, dt=1 / 15)
    sim.select_scene(Scene.OSCILLATOR)
    sim.params = replace(sim.params, damping=0.0)

    E0 = total_energy(sim.state, sim.scene, sim.params, sim.time)
    worst = 0.0
    for _ in range(3000):
        sim.step()
        E = total_energy(sim.state, sim.scene, sim.params, sim.time)
        worst = max(worst, abs(E - E0) / E0)

    print(f"{integrator.label:20s} t={sim.time:7.1f}  max |E-E0|/E0 = {worst:.2e}")
