from particle_sandbox import FrameLoop, IntegratorKind, Scene, Simulation
from particle_sandbox.diagnostics import DiagnosticsReporter

# Kepler's second law: the measured areal velocity tracks Lz/(2m) for both integrators
for integrator in IntegratorKind:
    sim = Simulation(integrator=integrator)
    sim.select_scene(Scene.NOETHER_ROTATION_AREAL)
    loop = FrameLoop(sim, reporter=DiagnosticsReporter())
    loop.run(frames=360, frame_dt=1 / 60)
    print()
