# -----------------------------
# FILE: hypernav/placement.py
# -----------------------------
"""Random obstacle placement.

Each obstacle must avoid the start and goal, must not cut the goal off, and
must lengthen the shortest path beyond the obstacle-free baseline. Rejected
candidates shrink the trial size; a slot that keeps failing discards every
placement so far and starts over from the first slot.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from .errors import PlacementInfeasibleError
from .obstacles import Obstacle
from .path_estimator import NO_PATH, find_path
from .utils import LOGGER


@dataclass
class PlacementState:
    index: int = 0          # slot currently being filled
    obst_size: float = 1.0  # trial edge length, shrinks on every rejection
    attempts: int = 0       # consecutive failures for the current slot
    restarts: int = 0

    def restart(self):
        self.index = 0
        self.obst_size = 1.0
        self.attempts = 0
        self.restarts += 1


_RESTART = object()


def _place_slot(slots: List[Optional[Obstacle]], state: PlacementState, start: np.ndarray,
                goal: np.ndarray, baseline: float, obst_cfg, sim_cfg, rng: np.random.Generator):
    """Fill slots[state.index]; returns the new path length or _RESTART."""
    size = start.shape[0]
    state.attempts = 0
    while state.attempts < obst_cfg.attempts_per_obstacle:
        candidate = Obstacle.random(size, state.obst_size, sim_cfg.max_step_size, rng)
        slots[state.index] = candidate
        if not candidate.collision(start) and not candidate.collision(goal):
            path = find_path(start, goal, slots, sim_cfg.max_step_size, sim_cfg.max_grid_points)
            if path != NO_PATH and path > baseline:
                return path
        state.obst_size *= obst_cfg.shrink_factor
        state.attempts += 1
    return _RESTART


def place_obstacles(start, goal, count: int, cfg, rng: np.random.Generator) -> Tuple[List[Obstacle], float]:
    """Place `count` obstacles for the given start/goal.

    Returns the obstacles and the estimated shortest path length through them
    (the plain Euclidean distance when count is 0).
    """
    start = np.asarray(start, dtype=float)
    goal = np.asarray(goal, dtype=float)
    obst_cfg, sim_cfg = cfg.obstacles, cfg.sim

    if count == 0:
        return [], find_path(start, goal, [], sim_cfg.max_step_size)

    slots: List[Optional[Obstacle]] = [None] * count
    baseline = find_path(start, goal, slots, sim_cfg.max_step_size, sim_cfg.max_grid_points)
    state = PlacementState()
    path = baseline
    while state.index < count:
        result = _place_slot(slots, state, start, goal, baseline, obst_cfg, sim_cfg, rng)
        if result is _RESTART:
            LOGGER.warning(f"Couldn't find anywhere to put obstacle {state.index}, "
                           f"restarting obstacle placements.")
            if obst_cfg.max_restarts is not None and state.restarts >= obst_cfg.max_restarts:
                raise PlacementInfeasibleError(
                    f"Could not place {count} obstacles after {state.restarts} restarts",
                    hint="Lower obstacles.maximum or set obstacles.max_restarts to None.")
            slots = [None] * count
            state.restart()
            continue
        path = result
        state.index += 1
    return slots, path
