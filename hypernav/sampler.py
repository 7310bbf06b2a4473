# -----------------------------
# FILE: hypernav/sampler.py
# -----------------------------

import numpy as np
from typing import Tuple

NOVELTY_GRANULARITY = 3
GOAL_MIN_DIST = 0.4
GOAL_MAX_DIST = 0.5


def start_state(size: int) -> np.ndarray:
    # Always the centre, so the agent can't identify the instance from its first observation.
    return np.full(size, 0.5, dtype=float)


def regular_goal(instance_id: int, size: int, environment_count: int, rng: np.random.Generator) -> np.ndarray:
    start = start_state(size)
    if size == 2:
        # evenly spread around a circle just inside the unit square
        ad = 2 * np.pi / environment_count
        a = ad * (instance_id % environment_count)
        return np.array([0.5 + np.cos(a) / 2.01, 0.5 + np.sin(a) / 2.01], dtype=float)
    while True:
        goal = rng.random(size)
        d = np.linalg.norm(goal - start)
        if GOAL_MIN_DIST <= d <= GOAL_MAX_DIST:
            return goal


def novelty_goal(instance_id: int, size: int) -> np.ndarray:
    """Canonical goal for novelty instance `instance_id` (< 0).

    Goals enumerate a 3-per-axis grid over the unit cube, pulled onto the
    sphere of radius 0.5 around the start when further away than that.
    """
    if instance_id >= 0:
        raise ValueError(f"Novelty instance ids are negative, got {instance_id}")
    step = 1.0 / (NOVELTY_GRANULARITY - 1)
    shape = (NOVELTY_GRANULARITY,) * size
    pos = np.unravel_index((-instance_id - 1) % (NOVELTY_GRANULARITY ** size), shape)
    goal = np.array(pos, dtype=float) * step
    start = start_state(size)
    d = np.linalg.norm(goal - start)
    if d > 0.5:
        goal = (goal - 0.5) * (0.5 / d) + 0.5
    return goal


def sample_start_goal(instance_id: int, size: int, environment_count: int,
                      rng: np.random.Generator) -> Tuple[np.ndarray, np.ndarray]:
    if instance_id >= 0:
        return start_state(size), regular_goal(instance_id, size, environment_count, rng)
    return start_state(size), novelty_goal(instance_id, size)
