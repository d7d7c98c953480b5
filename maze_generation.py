#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Recursive-division labyrinth generator.

격자 규칙:
- 짝수 인덱스 줄만 벽이 될 수 있다(분할선).
- 홀수 인덱스 칸은 항상 통로다.
- 분할선마다 구멍은 정확히 하나 -> 모든 홀수/홀수 칸이 서로 연결된다.
"""

from __future__ import annotations

import logging
from random import Random

from config import MIN_LAB_DIM
from model import Block, Grid

logger = logging.getLogger(__name__)

# Spans wider than this are split at the midpoint to avoid long straight corridors.
MIDPOINT_SPLIT_SPAN = 6


def random_wall_pos(lo: int, hi: int, rng: Random) -> int:
    """Random even position strictly between lo and hi (both even)."""
    return lo + (rng.randrange((hi - lo) // 2 - 1) + 1) * 2


def mid_wall_pos(lo: int, hi: int) -> int:
    n = (lo + hi) // 2
    if n % 2 == 1:
        n -= 1
    return n


def random_passage_pos(lo: int, hi: int, rng: Random) -> int:
    """Random odd position in [lo+1, hi-1]."""
    return random_wall_pos(lo, hi + 2, rng) - 1


def _validate_dims(rows: int, cols: int) -> None:
    for label, value in (("rows", rows), ("cols", cols)):
        if value < MIN_LAB_DIM or value % 2 == 0:
            raise ValueError(f"{label} must be odd and >= {MIN_LAB_DIM}, got {value}")


def generate_maze(rows: int, cols: int, rng: Random) -> Grid:
    """Generate a new random labyrinth of rows x cols blocks (both odd)."""
    _validate_dims(rows, cols)
    grid: Grid = [[Block.EMPTY for _ in range(cols)] for _ in range(rows)]

    # frame
    for row in range(rows):
        grid[row][0] = Block.WALL
        grid[row][cols - 1] = Block.WALL
    for col in range(cols):
        grid[0][col] = Block.WALL
        grid[rows - 1][col] = Block.WALL

    _divide_area(grid, 0, 0, cols - 1, rows - 1, rng)
    logger.debug("Generated %dx%d labyrinth", rows, cols)
    return grid


def _divide_area(grid: Grid, x1: int, y1: int, x2: int, y2: int, rng: Random) -> None:
    # x = column, y = row; borders inclusive and already walls
    dx, dy = x2 - x1, y2 - y1
    if dx <= 2 or dy <= 2:
        return

    if dx > dy:
        vertical = True
    elif dy > dx:
        vertical = False
    else:
        vertical = rng.randrange(2) == 0

    if vertical:
        x = mid_wall_pos(x1, x2) if dx > MIDPOINT_SPLIT_SPAN else random_wall_pos(x1, x2, rng)
        gap = random_passage_pos(y1, y2, rng)
        for y in range(y1, y2 + 1):
            if y != gap:
                grid[y][x] = Block.WALL
        _divide_area(grid, x1, y1, x, y2, rng)
        _divide_area(grid, x, y1, x2, y2, rng)
    else:
        y = mid_wall_pos(y1, y2) if dy > MIDPOINT_SPLIT_SPAN else random_wall_pos(y1, y2, rng)
        gap = random_passage_pos(x1, x2, rng)
        for x in range(x1, x2 + 1):
            if x != gap:
                grid[y][x] = Block.WALL
        _divide_area(grid, x1, y1, x2, y, rng)
        _divide_area(grid, x1, y, x2, y2, rng)


def maze_to_text(grid: Grid, wall: str = "#", empty: str = " ") -> str:
    return "\n".join("".join(wall if block == Block.WALL else empty for block in row) for row in grid)
