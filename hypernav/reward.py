# -----------------------------
# FILE: hypernav/reward.py
# -----------------------------
import numpy as np


def normalized_l1(state, goal) -> float:
    """Mean per-axis distance to the goal."""
    state = np.asarray(state, dtype=float)
    return float(np.sum(np.abs(state - np.asarray(goal, dtype=float))) / state.shape[0])


def reward_for_state(state, goal) -> float:
    # dense shaping signal handed to the agent every step
    return 1.0 - normalized_l1(state, goal)


def performance_for_state(state, goal, max_step_size: float) -> float:
    # full credit only on arrival, a little for being close
    d = normalized_l1(state, goal)
    return 1.0 if d < max_step_size else (1.0 - d) * 0.1
