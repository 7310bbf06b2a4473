# -----------------------------
# FILE: visualize_trajectory.py
# -----------------------------

"""
Plot a saved trajectory (trajectory.npy) over the obstacles of the 2D
environment rebuilt from env_config.json with the same instance id and seed.

Usage:
  python visualize_trajectory.py [instance_id] [seed]
"""

import sys
import numpy as np
import matplotlib.pyplot as plt

from hypernav.config import NavConfig
from hypernav.env_core import NavigationEnv


def main(instance_id: int = 0, seed: int = 42):
    cfg = NavConfig.from_json("env_config.json")
    if cfg.sim.size != 2:
        raise SystemExit("Only 2D environments can be plotted.")
    env = NavigationEnv(cfg)
    env.setup(instance_id, seed=seed)
    traj = np.load("trajectory.npy")  # [T,2] in unit coordinates

    size = 512
    # background: obstacle=grey, free=white
    bg = np.full((size, size, 3), 255, dtype=np.uint8)
    bg = env.render(size, bg)

    plt.figure()
    plt.imshow(bg, extent=[0, 1, 1, 0])
    plt.plot(traj[:, 0], traj[:, 1], linewidth=2)
    plt.scatter([env.start_state[0], env.goal_state[0]], [env.start_state[1], env.goal_state[1]], marker="o")
    plt.title("Trajectory on Environment")
    plt.xlabel("x")
    plt.ylabel("y")
    plt.axis("equal")
    plt.tight_layout()
    plt.show()

if __name__ == "__main__":
    args = [int(a) for a in sys.argv[1:3]]
    main(*args)
