# -----------------------------
# FILE: hypernav/obstacles.py
# -----------------------------

from dataclasses import dataclass
from typing import Iterable, Optional

import numpy as np


@dataclass(frozen=True, eq=False)
class Obstacle:
    """Axis-aligned hyper-rectangle spanning corner1 -> corner2 (inclusive)."""
    corner1: np.ndarray
    corner2: np.ndarray

    def __post_init__(self):
        c1 = np.array(self.corner1, dtype=float)
        c2 = np.array(self.corner2, dtype=float)
        if c1.shape != c2.shape or c1.ndim != 1:
            raise ValueError(f"Corner shapes differ or are not vectors: {c1.shape} vs {c2.shape}")
        c1.flags.writeable = False
        c2.flags.writeable = False
        object.__setattr__(self, "corner1", c1)
        object.__setattr__(self, "corner2", c2)

    @classmethod
    def random(cls, size: int, obst_size: float, max_step_size: float,
               rng: np.random.Generator) -> "Obstacle":
        """A slab of edge `obst_size`, thin along one random axis.

        The thin axis is slightly wider than one step so a single move cannot
        jump across it.
        """
        dims = np.full(size, obst_size, dtype=float)
        dims[rng.integers(0, size)] = max_step_size * 1.01
        lo, hi = -obst_size / 2, 1 - obst_size / 2
        corner1 = rng.random(size) * (hi - lo) + lo
        return cls(corner1, corner1 + dims)

    @property
    def dim(self) -> int:
        return self.corner1.shape[0]

    @property
    def size(self) -> np.ndarray:
        return self.corner2 - self.corner1

    def collision(self, point) -> bool:
        p = np.asarray(point, dtype=float)
        return bool(np.all((p >= self.corner1) & (p <= self.corner2)))

    def __str__(self):
        return f"{self.corner1.tolist()} -> {self.corner2.tolist()} ({self.size.tolist()})"


def any_collision(obstacles: Iterable[Optional[Obstacle]], point) -> bool:
    for o in obstacles:
        if o is not None and o.collision(point):
            return True
    return False
