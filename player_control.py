#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from __future__ import annotations

import logging

from config import BLOCK_SIZE, MOVE_SPEED, PATH_QUEUE_CAPACITY, SIM_DT_SECONDS
from commands import Click, KeyDirection
from maze_pathing import straight_line_clear
from model import GameState, cell_center, cell_of
from movement import step_moving_object

logger = logging.getLogger(__name__)


class PlayerController:
    """Applies player commands to the game state and walks the queued path."""

    def __init__(
        self,
        path_capacity: int = PATH_QUEUE_CAPACITY,
        dt: float = SIM_DT_SECONDS,
        speed: float = MOVE_SPEED,
    ):
        self.path_capacity = path_capacity
        self.dt = dt
        self.speed = speed

    def handle_click(self, state: GameState, click: Click) -> bool:
        """Returns True if the click changed the path queue."""
        if state.finished or state.player is None:
            return False
        player = state.player

        if click.right:
            # 경로 취소: 현재 칸 중심에 멈춘다
            state.pending_targets.clear()
            player.anchor_to_current_cell()
            return True

        if len(state.pending_targets) >= self.path_capacity:
            logger.debug("Click (%d, %d) ignored: path queue full", click.x, click.y)
            return False

        last_x, last_y = state.pending_targets[-1] if state.pending_targets else player.target
        last_cell = cell_of(last_x, last_y)
        clicked_cell = cell_of(click.x, click.y)
        if not state.in_bounds(*clicked_cell):
            logger.debug("Click (%d, %d) ignored: outside the labyrinth", click.x, click.y)
            return False
        if not straight_line_clear(last_cell, clicked_cell, state.grid):
            logger.debug("Click (%d, %d) ignored: no straight passage from %s", click.x, click.y, last_cell)
            return False

        state.pending_targets.append(cell_center(*clicked_cell))
        return True

    def handle_key(self, state: GameState, key: KeyDirection) -> bool:
        """Returns True if a one-cell move was queued."""
        if state.finished or state.player is None:
            return False
        player = state.player
        player.direction = key.direction

        # Target more than a block away: drop the path and stop at the current cell first
        dx = int(player.x) - player.target_x
        dy = int(player.y) - player.target_y
        if abs(dx) >= BLOCK_SIZE or abs(dy) >= BLOCK_SIZE:
            state.pending_targets.clear()
            player.anchor_to_current_cell()

        col, row = cell_of(player.target_x, player.target_y)
        dcol, drow = key.direction.offset
        if not state.is_open(col + dcol, row + drow):
            return False
        state.pending_targets[:] = [cell_center(col + dcol, row + drow)]
        return True

    def advance_path(self, state: GameState) -> None:
        player = state.player
        if player is None or not player.at_target() or not state.pending_targets:
            return
        player.set_target(state.pending_targets.pop(0))

    def step(self, state: GameState) -> None:
        """Move the player one tick along its path and record arrival at the exit."""
        if state.dead or state.player is None:
            return
        self.advance_path(state)
        step_moving_object(state.player, self.dt, self.speed)
        player = state.player
        if int(player.x) == state.exit_x and int(player.y) == state.exit_y:
            state.won = True
