# -----------------------------
# FILE: hypernav/path_estimator.py
# -----------------------------
"""Approximate shortest path length through an obstacle-occluded unit hypercube.

The space is discretised into a dense grid with `granularity` points per axis
and searched with a bidirectional breadth-first search (one frontier grown
from the start, one from the goal, alternating one grid step at a time). The
result is the taxicab grid distance between the grid cells nearest to start
and goal, an upper bound on the Euclidean shortest path.

The grid holds granularity**N cells, so it is only tractable for small N
(roughly N <= 5 at the default step size). `max_grid_points` bounds it; a
sparse or sampling-based search would be needed beyond that.
"""

import math
from functools import lru_cache
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .errors import ConfigError
from .obstacles import Obstacle

NO_PATH = -1.0

Point = Tuple[Tuple[int, ...], int]  # (grid coordinates, flat index)


def granularity_for(max_step_size: float) -> int:
    return int(math.ceil(1.0 / max_step_size)) + 1


@lru_cache(maxsize=4)
def grid_points(size: int, granularity: int) -> np.ndarray:
    """Coordinates of every grid point, shape (granularity**size, size), C order. Read-only."""
    spacing = 1.0 / (granularity - 1)
    pts = np.indices((granularity,) * size).reshape(size, -1).T * spacing
    pts.flags.writeable = False
    return pts


def occlusion_grid(obstacles: Sequence[Optional[Obstacle]], size: int, granularity: int) -> np.ndarray:
    """Flat bool array over all grid points (C order), True where occluded."""
    pts = grid_points(size, granularity)
    occluded = np.zeros(pts.shape[0], dtype=bool)
    for o in obstacles:
        if o is None:
            continue
        occluded |= np.all((pts >= o.corner1) & (pts <= o.corner2), axis=1)
    return occluded


def _seed(state: np.ndarray, granularity: int, strides: np.ndarray) -> Point:
    spacing = 1.0 / (granularity - 1)
    coords = np.clip(np.rint(state / spacing), 0, granularity - 1).astype(int)
    return tuple(int(c) for c in coords), int(np.dot(coords, strides))


def _expand(front: List[Point], granularity: int, strides: List[int], occluded: np.ndarray,
            covered: np.ndarray, other_covered: np.ndarray, next_front: List[Point]) -> bool:
    """Grow `front` by one grid step into `next_front`. True if it meets the other search."""
    for coords, idx in front:
        for d, stride in enumerate(strides):
            for offset in (-1, 1):
                c = coords[d] + offset
                if c < 0 or c >= granularity:
                    continue
                n_idx = idx + offset * stride
                if occluded[n_idx]:
                    continue
                if other_covered[n_idx]:
                    return True
                if not covered[n_idx]:
                    covered[n_idx] = True
                    next_front.append((coords[:d] + (c,) + coords[d + 1:], n_idx))
    return False


def find_path(start, goal, obstacles: Sequence[Optional[Obstacle]], max_step_size: float,
              max_grid_points: Optional[int] = None) -> float:
    """Length of the approximate shortest path from start to goal, or NO_PATH.

    An empty `obstacles` sequence short-circuits to the Euclidean distance.
    A sequence of not-yet-placed (None) slots still runs the grid search, which
    yields the obstacle-free grid distance used as a placement baseline.
    """
    start = np.asarray(start, dtype=float)
    goal = np.asarray(goal, dtype=float)
    if len(obstacles) == 0:
        return float(np.linalg.norm(goal - start))

    size = start.shape[0]
    granularity = granularity_for(max_step_size)
    spacing = 1.0 / (granularity - 1)
    point_count = granularity ** size
    if max_grid_points is not None and point_count > max_grid_points:
        raise ConfigError(
            f"Path grid of {granularity}^{size} = {point_count} points exceeds limit {max_grid_points}",
            hint="Reduce dimensionality, increase max_step_size or raise sim.max_grid_points.")

    occluded = occlusion_grid(obstacles, size, granularity)
    strides_arr = np.array([granularity ** (size - d - 1) for d in range(size)], dtype=np.int64)
    strides = [int(s) for s in strides_arr]

    start_pt = _seed(start, granularity, strides_arr)
    goal_pt = _seed(goal, granularity, strides_arr)
    if start_pt[1] == goal_pt[1]:
        return 0.0

    start_covered = np.zeros(point_count, dtype=bool)
    goal_covered = np.zeros(point_count, dtype=bool)
    start_covered[start_pt[1]] = True
    goal_covered[goal_pt[1]] = True
    start_front, goal_front = [start_pt], [goal_pt]
    start_next: List[Point] = []
    goal_next: List[Point] = []

    length = 1
    while True:
        if _expand(start_front, granularity, strides, occluded, start_covered, goal_covered, start_next):
            return length * spacing
        length += 1
        if _expand(goal_front, granularity, strides, occluded, goal_covered, start_covered, goal_next):
            return length * spacing
        length += 1

        start_front, start_next = start_next, start_front
        start_next.clear()
        goal_front, goal_next = goal_next, goal_front
        goal_next.clear()

        # a front that cannot grow is walled in by obstacles and/or the space boundary
        if not start_front or not goal_front:
            return NO_PATH
