#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Data model (Enums + dataclasses).

UI 프레임워크와 독립적인 순수 모델 계층.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, List, Optional, Tuple

from config import BLOCK_SIZE

if TYPE_CHECKING:
    from catalogs import GameConfig


Point = Tuple[int, int]
Grid = List[List["Block"]]


# =============================
# Enums
# =============================
class Block(IntEnum):
    EMPTY = 0
    WALL = 1


class Direction(Enum):
    RIGHT = "right"
    LEFT = "left"
    UP = "up"
    DOWN = "down"

    @property
    def offset(self) -> Tuple[int, int]:
        """(dcol, drow) of one step in this direction."""
        return _DIRECTION_OFFSETS[self]

    def __str__(self) -> str:
        return self.value


_DIRECTION_OFFSETS = {
    Direction.RIGHT: (1, 0),
    Direction.LEFT: (-1, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
}


# =============================
# Pixel <-> cell helpers
# =============================
def cell_center(col: int, row: int) -> Point:
    return col * BLOCK_SIZE + BLOCK_SIZE // 2, row * BLOCK_SIZE + BLOCK_SIZE // 2


def cell_of(px: float, py: float) -> Tuple[int, int]:
    """Return (col, row) containing the pixel point (truncated)."""
    return int(px) // BLOCK_SIZE, int(py) // BLOCK_SIZE


# =============================
# Actors
# =============================
@dataclass
class MovingObject:
    x: float
    y: float
    direction: Direction = Direction.RIGHT
    target_x: int = 0
    target_y: int = 0

    @classmethod
    def at_cell(cls, col: int, row: int, direction: Direction = Direction.RIGHT) -> "MovingObject":
        cx, cy = cell_center(col, row)
        return cls(x=float(cx), y=float(cy), direction=direction, target_x=cx, target_y=cy)

    @property
    def target(self) -> Point:
        return self.target_x, self.target_y

    def set_target(self, point: Point) -> None:
        self.target_x, self.target_y = int(point[0]), int(point[1])

    def at_target(self) -> bool:
        return int(self.x) == self.target_x and int(self.y) == self.target_y

    def cell(self) -> Tuple[int, int]:
        return cell_of(self.x, self.y)

    def anchor_to_current_cell(self) -> None:
        """Retarget to the centre of the cell the object currently occupies."""
        self.set_target(cell_center(*self.cell()))


# =============================
# Game state
# =============================
@dataclass
class GameState:
    """엔진이 단독 소유하는 시뮬레이션 상태.

    렌더러는 읽기 락 안에서만 접근한다.
    """

    generation: int = 0
    rows: int = 0
    cols: int = 0
    grid: Grid = field(default_factory=list)
    exit_x: int = 0
    exit_y: int = 0
    player: Optional[MovingObject] = None
    pursuers: List[MovingObject] = field(default_factory=list)
    dead: bool = False
    won: bool = False
    pending_targets: List[Point] = field(default_factory=list)
    config: Optional["GameConfig"] = None
    ticks: int = 0

    @property
    def exit_position(self) -> Point:
        return self.exit_x, self.exit_y

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self.cols and 0 <= row < self.rows

    def is_open(self, col: int, row: int) -> bool:
        return self.in_bounds(col, row) and self.grid[row][col] == Block.EMPTY

    @property
    def finished(self) -> bool:
        return self.dead or self.won
