import numpy as np
import pytest

from hypernav.config import NavConfig, ObstacleConfig, SimConfig
from hypernav.difficulty import DifficultyScaler
from hypernav.env_core import Environment, NavigationEnv
from hypernav.errors import SetupError, StepError
from hypernav.obstacles import Obstacle
from hypernav.path_estimator import find_path


def make_env(size=2, initial=0, maximum=0, delta="1", trial_count=1, environment_count=1, seed=0):
    cfg = NavConfig(
        ObstacleConfig(initial=initial, delta=delta, maximum=maximum),
        SimConfig(size=size, trial_count=trial_count, environment_count=environment_count),
    ).validate()
    return NavigationEnv(cfg, rng=np.random.default_rng(seed))


def test_satisfies_environment_protocol():
    assert isinstance(make_env(), Environment)
    assert make_env(size=3).input_size == 3
    assert make_env(size=3).output_size == 4

def test_required_steps_without_obstacles():
    env = make_env()
    info = env.setup(0)
    # path = 1/2.01 -> round(5.47) + 1, plus 2 trial moves per axis for a single trial
    assert info["path_length"] == pytest.approx(1 / 2.01)
    assert env.required_steps == 6 + 4
    assert info["required_steps"] == env.required_steps

    env = make_env(trial_count=3)
    env.setup(0)
    assert env.required_steps == 6

def test_required_steps_can_be_overridden():
    env = make_env()
    env.setup(0)
    env.required_steps = 42
    assert env.required_steps == 42

def test_step_moves_state():
    env = make_env()
    env.setup(0)
    state = env.reset()
    assert np.array_equal(state, [0.5, 0.5])
    output, performance = env.step(state, [1.0, 0.0])
    gx, gy = env.goal_state
    assert np.allclose(state, [0.6, 0.5])
    assert np.allclose(output[:2], [0.6, 0.5])
    assert output[2] == pytest.approx(1 - (abs(0.6 - gx) + abs(0.5 - gy)) / 2)
    assert performance == pytest.approx(env.performance_for_state(state))

def test_oversized_motion_is_capped():
    env = make_env()
    env.setup(0)
    state = env.reset()
    env.step(state, [10.0, 0.0])
    assert np.allclose(state, [0.6, 0.5])

def test_step_into_obstacle_is_rejected():
    env = make_env()
    env.setup(0)
    env.obstacles = [Obstacle([0.55, 0.45], [0.65, 0.55])]
    state = env.reset()
    output, _ = env.step(state, [1.0, 0.0])
    assert np.array_equal(state, [0.5, 0.5])
    assert np.array_equal(output[:2], [0.5, 0.5])
    assert output[2] == pytest.approx(env.reward_for_state([0.5, 0.5]))

def test_reaching_goal_gives_full_performance():
    env = make_env()
    env.setup(0)
    _, performance = env.output_for_state(env.goal_state)
    assert performance == 1.0

@pytest.mark.parametrize("motion", [[np.nan, 0.0], [0.0, np.inf], [1.0], [1.0, 0.0, 0.0], ["a", "b"]])
def test_bad_motion_raises(motion):
    env = make_env()
    env.setup(0)
    state = env.reset()
    with pytest.raises(StepError):
        env.step(state, motion)
    assert np.array_equal(state, [0.5, 0.5])

def test_nan_state_raises():
    env = make_env()
    env.setup(0)
    with pytest.raises(StepError):
        env.step(np.array([np.nan, 0.5]), [0.0, 0.0])

def test_integer_state_array_raises_and_is_untouched():
    env = make_env()
    env.setup(0)
    state = np.array([0, 0])
    with pytest.raises(StepError, match="float dtype"):
        env.step(state, [1.0, 1.0])
    assert np.array_equal(state, [0, 0])

def test_list_state_is_left_alone():
    env = make_env()
    env.setup(0)
    state = [0.5, 0.5]
    output, _ = env.step(state, [1.0, 0.0])
    assert state == [0.5, 0.5]
    assert np.allclose(output[:2], [0.6, 0.5])

def test_use_before_setup_raises():
    env = make_env()
    with pytest.raises(SetupError):
        env.step(np.array([0.5, 0.5]), [0.0, 0.0])
    with pytest.raises(SetupError):
        env.reset()

def test_setup_places_valid_obstacles():
    env = make_env(initial=2, maximum=4, seed=3)
    info = env.setup(0)
    assert info["obstacle_count"] == 2
    assert env.obstacle_count == 2
    for o in env.obstacles:
        assert not o.collision(env.start_state)
        assert not o.collision(env.goal_state)
    assert env.path_length > find_path(env.start_state, env.goal_state, [None, None], 0.1)
    assert env.required_steps >= 1
    assert "Obstacle locations" in str(env)

def test_same_seed_same_environment():
    a = make_env(initial=2, maximum=2, environment_count=8)
    b = make_env(initial=2, maximum=2, environment_count=8)
    a.setup(3, seed=11)
    b.setup(3, seed=11)
    assert np.array_equal(a.goal_state, b.goal_state)
    assert np.array_equal(a.obstacles[0].corner1, b.obstacles[0].corner1)
    assert a.required_steps == b.required_steps

def test_novelty_instance():
    env = make_env(initial=1, maximum=1)
    info = env.setup(-1)
    c = 0.5 - 0.5 / np.sqrt(2)
    assert np.allclose(info["goal"], [c, c])
    assert info["obstacle_count"] == 1

def test_shared_difficulty_affects_later_instances_only():
    scaler = DifficultyScaler(1, "1", 2)
    cfg = NavConfig(ObstacleConfig(initial=1, maximum=2), SimConfig()).validate()
    first = NavigationEnv(cfg, rng=np.random.default_rng(0), difficulty=scaler)
    first.setup(0)
    assert first.increase_difficulty_possible()
    first.increase_difficulty()
    assert not first.increase_difficulty_possible()

    second = NavigationEnv(cfg, rng=np.random.default_rng(1), difficulty=scaler)
    second.setup(0)
    assert first.obstacle_count == 1
    assert second.obstacle_count == 2
