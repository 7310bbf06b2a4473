# -----------------------------
# FILE: demo_random.py
# -----------------------------

"""
Minimal smoke test. Reads env_config.json from CWD, sets up one environment,
runs a random motion policy for the recommended number of steps, saves the
trajectory to trajectory.npy and prints diagnostics.

Usage:
  python demo_random.py [instance_id] [seed]
"""

import sys
import numpy as np

from hypernav.config import NavConfig
from hypernav.env_core import NavigationEnv
from hypernav.utils import LOGGER


def main(instance_id: int = 0, seed: int = 42):
    cfg = NavConfig.from_json("env_config.json")
    env = NavigationEnv(cfg)
    info = env.setup(instance_id, seed=seed)
    LOGGER.info(f"goal={info['goal'].round(3).tolist()} obstacles={info['obstacle_count']} "
                f"path={info['path_length']:.3f} required_steps={info['required_steps']}")

    rng = np.random.default_rng(seed + 1)
    state = env.reset()
    traj = [state.copy()]
    perf = 0.0
    for t in range(env.required_steps):
        motion = rng.uniform(-1.0, 1.0, size=cfg.sim.size)
        output, perf = env.step(state, motion)
        traj.append(state.copy())
        if perf == 1.0:
            LOGGER.info(f"reached goal at t={t} reward={output[-1]:.3f}")
            break
    LOGGER.info(f"final performance={perf:.3f}")
    np.save("trajectory.npy", np.array(traj, dtype=float))
    LOGGER.info("Saved trajectory.npy")
    if env.save_image("obstacles", 256):
        LOGGER.info("Saved obstacles.png")

if __name__ == "__main__":
    args = [int(a) for a in sys.argv[1:3]]
    main(*args)
