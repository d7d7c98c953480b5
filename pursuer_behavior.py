#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from __future__ import annotations

import logging
from random import Random
from typing import List, Optional, Tuple

from config import BLOCK_SIZE, MOVE_SPEED, PURSUER_SPAWN_CLEARANCE, SIM_DT_SECONDS
from maze_pathing import passage_cells
from model import Direction, GameState, MovingObject
from movement import step_moving_object

logger = logging.getLogger(__name__)

ALL_DIRECTIONS: Tuple[Direction, ...] = tuple(Direction)


class PursuerBehavior:
    """Random-walk decision logic for pursuers.

    The random source is owned by the caller so runs can be seeded.
    """

    def __init__(self, rng: Random, dt: float = SIM_DT_SECONDS, speed: float = MOVE_SPEED):
        self.rng = rng
        self.dt = dt
        self.speed = speed

    def shuffled_directions(self) -> List[Direction]:
        dirs = list(ALL_DIRECTIONS)
        # Fisher-Yates; index 0 is left in place by the last swap
        for i in range(len(dirs) - 1, 0, -1):
            r = self.rng.randrange(i + 1)
            dirs[i], dirs[r] = dirs[r], dirs[i]
        return dirs

    def choose_offset(self, state: GameState, col: int, row: int) -> Optional[Tuple[int, int]]:
        """Pick (dcol, drow) of the next move from cell (col, row), or None if boxed in."""
        for direction in self.shuffled_directions():
            dcol, drow = direction.offset
            if not state.is_open(col + dcol, row + drow):
                continue
            # 같은 방향으로 두 칸 갈 수 있으면 두 칸
            if state.is_open(col + dcol * 2, row + drow * 2):
                return dcol * 2, drow * 2
            return dcol, drow
        return None

    def pick_next_target(self, pursuer: MovingObject, state: GameState) -> bool:
        """Give the pursuer a new target if it reached the current one.

        Returns True when a new target was chosen.
        """
        if not pursuer.at_target():
            return False
        col, row = pursuer.cell()
        offset = self.choose_offset(state, col, row)
        if offset is None:
            logger.debug("Pursuer at cell (%d, %d) has no open direction; waiting", col, row)
            return False
        dcol, drow = offset
        # base is the pursuer's own target, so it stays on its corridor
        pursuer.set_target((pursuer.target_x + dcol * BLOCK_SIZE, pursuer.target_y + drow * BLOCK_SIZE))
        return True

    def step(self, pursuer: MovingObject, state: GameState) -> None:
        self.pick_next_target(pursuer, state)
        step_moving_object(pursuer, self.dt, self.speed)

    def spawn_pursuers(self, state: GameState, count: int) -> List[MovingObject]:
        """Place count pursuers on random corridor cells away from the player."""
        if count <= 0:
            return []
        player_col, player_row = state.player.cell() if state.player is not None else (1, 1)
        odd_cells = passage_cells(state.grid)
        candidates = [
            (col, row)
            for col, row in odd_cells
            if abs(col - player_col) > PURSUER_SPAWN_CLEARANCE or abs(row - player_row) > PURSUER_SPAWN_CLEARANCE
        ]
        if not candidates:
            # tiny labyrinth: everything is within the clearance
            candidates = [cell for cell in odd_cells if cell != (player_col, player_row)] or odd_cells
        pursuers: List[MovingObject] = []
        for _ in range(count):
            col, row = self.rng.choice(candidates)
            pursuers.append(MovingObject.at_cell(col, row))
        return pursuers
