# =============================
# hypernav: N-dimensional point navigation fitness task (pure Python/numpy)
# Version: 0.1.0
# =============================
#
# An agent moves a point through the unit hypercube toward a goal, around
# randomly placed slab-shaped obstacles. It provides:
# - Config loading & validation (JSON)
# - Obstacle placement validated by a grid path-length estimate
#   (bidirectional breadth-first search)
# - Start/goal sampling for regular and novelty instances
# - Bounded motion updates with collision rejection
# - Reward (step shaping) and performance (fitness) scalars
# - Obstacle-count difficulty scaling
# - Error system with codes, friendly messages, and hints
# - 2D obstacle rendering, demo runner and trajectory visualizer
#
# Python 3.9+
# Requires: numpy, matplotlib (only for images and visualize_trajectory.py)
#
# -----------------------------
# FILE: hypernav/__init__.py
# -----------------------------

from .config import NavConfig, ObstacleConfig, SimConfig
from .difficulty import DifficultyScaler
from .env_core import Environment, NavigationEnv
from .errors import EnvError, ConfigError, SetupError, StepError, PlacementInfeasibleError
from .obstacles import Obstacle
from .path_estimator import NO_PATH, find_path
from .placement import place_obstacles

__all__ = [
    "errors",
    "config",
    "utils",
    "obstacles",
    "path_estimator",
    "placement",
    "sampler",
    "dynamics",
    "reward",
    "difficulty",
    "render",
    "env_core",
    "NavConfig",
    "ObstacleConfig",
    "SimConfig",
    "DifficultyScaler",
    "Environment",
    "NavigationEnv",
    "EnvError",
    "ConfigError",
    "SetupError",
    "StepError",
    "PlacementInfeasibleError",
    "Obstacle",
    "NO_PATH",
    "find_path",
    "place_obstacles",
]

__version__ = "0.1.0"
