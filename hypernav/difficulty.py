# -----------------------------
# FILE: hypernav/difficulty.py
# -----------------------------

import math
from typing import Optional, Tuple

from .errors import ConfigError
from .utils import LOGGER


def parse_delta(text) -> Tuple[float, bool]:
    """Parse an obstacle-count delta: "2" adds 2, "1.5x" multiplies by 1.5."""
    s = str(text).strip().lower()
    is_factor = s.endswith("x")
    if is_factor:
        s = s[:-1].strip()
    try:
        value = float(s)
    except ValueError:
        raise ConfigError(f"Invalid obstacle count delta: {text!r}",
                          hint='Use a number ("2") or a factor ("1.5x").')
    if not math.isfinite(value):
        raise ConfigError(f"Invalid obstacle count delta: {text!r}")
    return value, is_factor


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def delta_can_grow(delta) -> bool:
    value, is_factor = parse_delta(delta)
    return value > 1 if is_factor else value >= 1


def next_obstacle_count(current: int, delta: str, maximum: Optional[int]) -> int:
    if maximum is None or current >= maximum:
        return current
    value, is_factor = parse_delta(delta)
    new = current
    if value >= 1:
        if not is_factor:
            new = current + _round_half_up(value)
        elif value > 1:
            new = _round_half_up(current * value)
        new = min(new, maximum)
    return new


class DifficultyScaler:
    """Tracks the obstacle count used for newly set up environments.

    A scaler may be shared by many environment instances; increasing it only
    affects instances set up afterwards.
    """

    def __init__(self, obstacle_count: int, delta: str, maximum: Optional[int]):
        if maximum is None and delta_can_grow(delta):
            raise ConfigError(f"An obstacle maximum is required with growing delta {delta!r}",
                              hint="Pass maximum, or use a delta that never grows (e.g. \"0\").")
        self.obstacle_count = int(obstacle_count)
        self.delta = delta
        self.maximum = maximum

    @classmethod
    def from_config(cls, obstacles_cfg) -> "DifficultyScaler":
        return cls(obstacles_cfg.initial, obstacles_cfg.delta, obstacles_cfg.maximum)

    def _next(self) -> int:
        return next_obstacle_count(self.obstacle_count, self.delta, self.maximum)

    def can_increase(self) -> bool:
        return self._next() > self.obstacle_count

    def increase(self) -> int:
        new = self._next()
        if new != self.obstacle_count:
            LOGGER.info(f"Increasing obstacle count {self.obstacle_count} -> {new}")
        self.obstacle_count = new
        return new

    def __repr__(self):
        return f"DifficultyScaler(obstacle_count={self.obstacle_count}, delta={self.delta!r}, maximum={self.maximum})"
