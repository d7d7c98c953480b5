from __future__ import annotations

import math

import pytest

from model import Direction, MovingObject
from movement import step_moving_object


def test_moves_x_first_then_y():
    obj = MovingObject(x=60.0, y=60.0, target_x=100, target_y=140)

    step_moving_object(obj, dt=0.05, speed=80.0)
    assert (obj.x, obj.y) == (64.0, 60.0)
    assert obj.direction == Direction.RIGHT

    for _ in range(9):
        step_moving_object(obj, dt=0.05, speed=80.0)
    assert (obj.x, obj.y) == (100.0, 60.0)

    step_moving_object(obj, dt=0.05, speed=80.0)
    assert (obj.x, obj.y) == (100.0, 64.0)
    assert obj.direction == Direction.DOWN


@pytest.mark.parametrize(
    "target,expected_dir",
    [((20, 60), Direction.LEFT), ((100, 60), Direction.RIGHT), ((60, 20), Direction.UP), ((60, 100), Direction.DOWN)],
)
def test_direction_follows_the_active_axis(target, expected_dir):
    obj = MovingObject(x=60.0, y=60.0, direction=Direction.RIGHT, target_x=target[0], target_y=target[1])

    step_moving_object(obj)

    assert obj.direction == expected_dir


def test_never_changes_both_axes_and_never_overshoots():
    obj = MovingObject(x=60.0, y=300.0, target_x=61, target_y=20)
    prev = (obj.x, obj.y)

    for _ in range(200):
        step_moving_object(obj, dt=0.05, speed=80.0)
        moved_axes = (obj.x != prev[0]) + (obj.y != prev[1])
        assert moved_axes <= 1
        assert obj.x <= 61.0
        assert obj.y >= 20.0
        prev = (obj.x, obj.y)

    assert obj.at_target()


@pytest.mark.parametrize("distance", [1, 4, 5, 39, 40, 160, 333])
def test_converges_within_bound(distance):
    speed, dt = 80.0, 0.05
    obj = MovingObject(x=20.0, y=20.0, target_x=20 + distance, target_y=20)
    bound = math.ceil(distance / (speed * dt))

    steps = 0
    while not obj.at_target():
        step_moving_object(obj, dt=dt, speed=speed)
        steps += 1
        assert steps <= bound

    assert obj.x == 20.0 + distance


def test_no_movement_at_target():
    obj = MovingObject(x=60.0, y=60.0, direction=Direction.UP, target_x=60, target_y=60)

    step_moving_object(obj)

    assert (obj.x, obj.y) == (60.0, 60.0)
    assert obj.direction == Direction.UP
