# -----------------------------
# FILE: hypernav/env_core.py
# -----------------------------

import numpy as np
from typing import Optional, Dict, Any, List, Tuple, Protocol, runtime_checkable

from .config import NavConfig
from .difficulty import DifficultyScaler
from .dynamics import clip_motion, step_state
from .errors import SetupError, StepError
from .obstacles import Obstacle, any_collision
from .placement import place_obstacles
from .render import render_obstacles, save_obstacle_image
from .reward import reward_for_state, performance_for_state
from .sampler import sample_start_goal
from .utils import LOGGER, ensure_vector


@runtime_checkable
class Environment(Protocol):
    """What the agent-driving loop needs from an environment."""

    def setup(self, instance_id: int, seed: Optional[int] = None) -> Dict[str, Any]: ...

    def step(self, state: np.ndarray, motion) -> Tuple[np.ndarray, float]: ...

    def reward_for_state(self, state) -> float: ...

    def performance_for_state(self, state) -> float: ...

    def increase_difficulty_possible(self) -> bool: ...

    def increase_difficulty(self) -> None: ...

    def render(self, image_size: int, canvas: Optional[np.ndarray] = None) -> np.ndarray: ...

    @property
    def required_steps(self) -> int: ...


class NavigationEnv:
    """Move a point through the unit hypercube toward a goal, around obstacles.

    The agent sees its raw position plus a reward scalar; obstacles are
    invisible to it and simply reject moves that would end inside one.
    """

    def __init__(self, cfg: NavConfig, *, rng: Optional[np.random.Generator] = None,
                 difficulty: Optional[DifficultyScaler] = None):
        self.cfg = cfg
        self.rng = rng or np.random.default_rng()
        self.difficulty = difficulty or DifficultyScaler.from_config(cfg.obstacles)
        self.size = cfg.sim.size
        self.max_step_size = cfg.sim.max_step_size
        self.id: Optional[int] = None
        self.start_state: Optional[np.ndarray] = None
        self.goal_state: Optional[np.ndarray] = None
        self.obstacles: List[Obstacle] = []
        self.path_length: float = 0.0
        self._required_steps = 0

    @property
    def input_size(self) -> int:
        return self.size

    @property
    def output_size(self) -> int:
        return self.size + 1

    @property
    def obstacle_count(self) -> int:
        return len(self.obstacles)

    def setup(self, instance_id: int, seed: Optional[int] = None) -> Dict[str, Any]:
        if seed is not None:
            self.rng = np.random.default_rng(seed)
        self.id = instance_id
        sim = self.cfg.sim
        self.start_state, self.goal_state = sample_start_goal(instance_id, self.size, sim.environment_count, self.rng)

        count = self.difficulty.obstacle_count
        self.obstacles, self.path_length = place_obstacles(self.start_state, self.goal_state, count, self.cfg, self.rng)

        steps = int(np.floor((self.path_length * 1.1) / self.max_step_size + 0.5)) + 1
        if sim.trial_count == 1:
            # a lone trial has to try both directions along each axis first
            steps += 2 * self.size
        self._required_steps = steps
        LOGGER.debug(f"env {instance_id}: obstacles={count} path={self.path_length:.3f} steps={steps}")
        return {
            "start": self.start_state.copy(),
            "goal": self.goal_state.copy(),
            "obstacle_count": count,
            "path_length": self.path_length,
            "required_steps": steps,
        }

    def _require_setup(self):
        if self.goal_state is None:
            raise SetupError("Environment has not been set up.", hint="Call setup(instance_id) first.")

    def reset(self) -> np.ndarray:
        self._require_setup()
        return self.start_state.copy()

    @property
    def required_steps(self) -> int:
        return self._required_steps

    @required_steps.setter
    def required_steps(self, steps: int):
        self._required_steps = int(steps)

    def step(self, state: np.ndarray, motion) -> Tuple[np.ndarray, float]:
        """Apply `motion` to `state` (in place) and return (output, performance).

        `state` must be a float array for the move to be written back; other
        sequences are left untouched and the new position is only in `output`.
        The move is dropped when the new position lies inside an obstacle.
        """
        self._require_setup()
        if isinstance(state, np.ndarray) and not np.issubdtype(state.dtype, np.floating):
            raise StepError(f"state array has dtype {state.dtype}, expected a float dtype",
                            hint="Create the state with env.reset() or np.asarray(..., dtype=float).")
        s = ensure_vector(state, self.size, "state")
        m = clip_motion(ensure_vector(motion, self.size, "motion"))
        ns = step_state(s, m, self.max_step_size)
        if not any_collision(self.obstacles, ns):
            s = ns
            if isinstance(state, np.ndarray):
                state[:] = ns
        return self.output_for_state(s)

    def output_for_state(self, state) -> Tuple[np.ndarray, float]:
        self._require_setup()
        s = ensure_vector(state, self.size, "state")
        output = np.empty(self.output_size, dtype=float)
        output[:self.size] = s
        output[-1] = self.reward_for_state(s)
        return output, self.performance_for_state(s)

    def reward_for_state(self, state) -> float:
        self._require_setup()
        return reward_for_state(state, self.goal_state)

    def performance_for_state(self, state) -> float:
        self._require_setup()
        return performance_for_state(state, self.goal_state, self.max_step_size)

    def increase_difficulty_possible(self) -> bool:
        return self.difficulty.can_increase()

    def increase_difficulty(self) -> None:
        self.difficulty.increase()

    def render(self, image_size: int, canvas: Optional[np.ndarray] = None) -> np.ndarray:
        return render_obstacles(self.obstacles, image_size, canvas)

    def save_image(self, base_path: str, image_size: int) -> Optional[str]:
        if self.size != 2:
            return None
        return save_obstacle_image(self.obstacles, base_path, image_size)

    def __str__(self):
        out = f"NavigationEnv(id={self.id}, size={self.size}, start={self.start_state}, goal={self.goal_state})"
        out += "\n\tObstacle locations and (size):"
        for o in self.obstacles:
            out += f"\n\t\t{o}"
        return out
