# -----------------------------
# FILE: hypernav/config.py
# -----------------------------

from dataclasses import dataclass, field
from typing import Optional, Dict, Any

from .difficulty import delta_can_grow
from .errors import ConfigError
from .path_estimator import granularity_for
from .utils import read_json, require


@dataclass
class ObstacleConfig:
    initial: int = 0
    delta: str = "1"                    # "<n>" additive, "<n>x" multiplicative
    maximum: Optional[int] = None       # required once obstacles are in use
    attempts_per_obstacle: int = 1000
    shrink_factor: float = 0.95
    max_restarts: Optional[int] = None  # None = restart forever


@dataclass
class SimConfig:
    size: int = 2                 # dimensionality N
    max_step_size: float = 0.1
    trial_count: int = 1
    environment_count: int = 1    # spacing of 2D goals on the circle
    max_grid_points: int = 2_000_000


@dataclass
class NavConfig:
    obstacles: ObstacleConfig = field(default_factory=ObstacleConfig)
    sim: SimConfig = field(default_factory=SimConfig)

    def validate(self) -> "NavConfig":
        o, s = self.obstacles, self.sim
        require(isinstance(s.size, int) and s.size >= 1, f"sim.size must be a positive int, got {s.size!r}")
        require(0.0 < s.max_step_size <= 1.0, f"sim.max_step_size must be in (0, 1], got {s.max_step_size}")
        require(s.trial_count >= 1, f"sim.trial_count must be >= 1, got {s.trial_count}")
        require(s.environment_count >= 1, f"sim.environment_count must be >= 1, got {s.environment_count}")
        require(s.max_grid_points >= 1, "sim.max_grid_points must be >= 1")

        require(o.initial >= 0, f"obstacles.initial must be >= 0, got {o.initial}")
        if o.initial > 0 or delta_can_grow(o.delta):
            require(o.maximum is not None, "obstacles.maximum is required when obstacles are used",
                    hint="Set obstacles.maximum to the largest obstacle count to scale to.")
        if o.maximum is not None:
            require(o.maximum >= o.initial,
                    f"obstacles.maximum ({o.maximum}) is below obstacles.initial ({o.initial})")
        if o.initial > 0 or (o.maximum or 0) > 0:
            points = granularity_for(s.max_step_size) ** s.size
            require(points <= s.max_grid_points,
                    f"Path grid needs {points} points for size={s.size}, limit is {s.max_grid_points}",
                    hint="Obstacle path estimation uses a dense grid; reduce sim.size or raise sim.max_grid_points.")
        require(o.attempts_per_obstacle >= 1, "obstacles.attempts_per_obstacle must be >= 1")
        require(0.0 < o.shrink_factor < 1.0, f"obstacles.shrink_factor must be in (0, 1), got {o.shrink_factor}")
        require(o.max_restarts is None or o.max_restarts >= 0, "obstacles.max_restarts must be >= 0")
        return self

    @staticmethod
    def from_dict(raw: Dict[str, Any]) -> "NavConfig":
        require(isinstance(raw, dict), "Config root must be an object")
        obst = raw.get("obstacles", {})
        sim = raw.get("sim", {})
        require(isinstance(obst, dict), "'obstacles' must be an object")
        require(isinstance(sim, dict), "'sim' must be an object")
        try:
            oc = ObstacleConfig(**obst)
            sc = SimConfig(**sim)
        except TypeError as e:
            raise ConfigError(f"Unknown config key: {e}")
        oc.delta = str(oc.delta)
        return NavConfig(oc, sc).validate()

    @staticmethod
    def from_json(path: str) -> "NavConfig":
        return NavConfig.from_dict(read_json(path))
