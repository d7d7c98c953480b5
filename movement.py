#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from __future__ import annotations

from config import MOVE_SPEED, SIM_DT_SECONDS
from model import Direction, MovingObject


def step_moving_object(obj: MovingObject, dt: float = SIM_DT_SECONDS, speed: float = MOVE_SPEED) -> None:
    """Advance obj towards its target by at most speed*dt on a single axis.

    Only horizontal or vertical movement: X is finished first, then Y.
    """
    x, y = int(obj.x), int(obj.y)
    max_dist = speed * dt

    if x != obj.target_x:
        dx = min(max_dist, abs(obj.target_x - obj.x))
        if x > obj.target_x:
            dx = -dx
            obj.direction = Direction.LEFT
        else:
            obj.direction = Direction.RIGHT
        obj.x += dx
    elif y != obj.target_y:
        dy = min(max_dist, abs(obj.target_y - obj.y))
        if y > obj.target_y:
            dy = -dy
            obj.direction = Direction.UP
        else:
            obj.direction = Direction.DOWN
        obj.y += dy
