import logging

import pytest

from hypernav.config import ObstacleConfig
from hypernav.difficulty import DifficultyScaler, delta_can_grow, next_obstacle_count, parse_delta
from hypernav.errors import ConfigError


@pytest.mark.parametrize("delta,maximum,expected", [
    ("2", 10, 5),
    ("2x", 10, 6),
    ("2x", 5, 5),
    ("1.5x", 10, 5),   # 4.5 rounds up
    ("1x", 10, 3),     # a factor of 1 never grows
    ("0.5", 10, 3),    # additive deltas below 1 are ignored
    ("1.4", 10, 4),
    ("100", 7, 7),
])
def test_next_obstacle_count(delta, maximum, expected):
    assert next_obstacle_count(3, delta, maximum) == expected

def test_at_maximum_stays():
    assert next_obstacle_count(5, "2", 5) == 5

def test_no_maximum_never_grows():
    assert next_obstacle_count(0, "1", None) == 0

def test_parse_delta():
    assert parse_delta(" 2X ") == (2.0, True)
    assert parse_delta("3") == (3.0, False)
    assert parse_delta(2) == (2.0, False)

@pytest.mark.parametrize("bad", ["", "x", "two", "2xx", "nan", "inf"])
def test_parse_delta_rejects_garbage(bad):
    with pytest.raises(ConfigError):
        parse_delta(bad)

def test_scaler_increase_until_max(caplog):
    scaler = DifficultyScaler(3, "2", 6)
    assert scaler.can_increase()
    with caplog.at_level(logging.INFO, logger="hypernav"):
        assert scaler.increase() == 5
    assert "3 -> 5" in caplog.text
    assert scaler.increase() == 6
    assert scaler.obstacle_count == 6
    assert not scaler.can_increase()
    assert scaler.increase() == 6

def test_scaler_from_config():
    scaler = DifficultyScaler.from_config(ObstacleConfig(initial=2, delta="3x", maximum=20))
    assert (scaler.obstacle_count, scaler.delta, scaler.maximum) == (2, "3x", 20)
    scaler.increase()
    assert scaler.obstacle_count == 6

def test_scaler_rejects_bad_delta():
    with pytest.raises(ConfigError):
        DifficultyScaler(0, "lots", 5)

@pytest.mark.parametrize("delta,grows", [
    ("1", True), ("2.5", True), ("0.5", False), ("0", False),
    ("1x", False), ("0.5x", False), ("1.1x", True),
])
def test_delta_can_grow(delta, grows):
    assert delta_can_grow(delta) is grows

def test_scaler_requires_maximum_for_growing_delta():
    with pytest.raises(ConfigError, match="maximum"):
        DifficultyScaler(0, "1", None)
    scaler = DifficultyScaler(4, "1x", None)
    assert not scaler.can_increase()
    assert scaler.increase() == 4
