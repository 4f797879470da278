"""
Microbenchmark: cost of one frame per integrator and scene.
Run:
  python benchmarks/bench_steps.py
"""
from particle_sandbox import FrameLoop, IntegratorKind, Scene, Simulation
from particle_sandbox.profiler import Profiler


def run(scene: Scene, integrator: IntegratorKind, dt: float, frames: int = 600):
    prof = Profiler()
    sim = Simulation(integrator=integrator, dt=dt)
    sim.select_scene(scene)
    loop = FrameLoop(sim, profiler=prof)

    # warmup
    loop.run(frames=30, frame_dt=1 / 60)
    prof.stats.clear()

    loop.run(frames=frames, frame_dt=1 / 60)
    return prof.stats


if __name__ == "__main__":
    for dt in [1 / 120, 1 / 600]:
        for integrator in IntegratorKind:
            for scene in Scene:
                stats = run(scene, integrator, dt)
                s = stats.summary()["substeps"]
                print(
                    f"dt={dt:.5f} {integrator.label:20s} {scene.label:34s}"
                    f"  frame={s['mean_ms']:7.3f} ms  substep={stats.substep_cost_us():7.2f} us"
                )
        print()
