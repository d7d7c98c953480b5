#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from __future__ import annotations

from collections import deque
from typing import List, Optional, Tuple

from model import Block, Grid

Cell = Tuple[int, int]  # (col, row)


def neighbors(col: int, row: int, grid: Grid) -> List[Cell]:
    out: List[Cell] = []
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    for nc, nr in ((col + 1, row), (col - 1, row), (col, row + 1), (col, row - 1)):
        if nc < 0 or nr < 0 or nc >= cols or nr >= rows:
            continue
        if grid[nr][nc] == Block.WALL:
            continue
        out.append((nc, nr))
    return out


def passage_cells(grid: Grid) -> List[Cell]:
    """All odd/odd interior cells (the ones guaranteed to be corridors)."""
    return [
        (col, row)
        for row in range(1, len(grid) - 1, 2)
        for col in range(1, len(grid[0]) - 1, 2)
    ]


def straight_line_clear(a: Cell, b: Cell, grid: Grid) -> bool:
    """True if a and b share a row or column and no wall lies between them (inclusive)."""
    (ac, ar), (bc, br) = a, b
    if ac == bc:
        lo, hi = sorted((ar, br))
        return all(grid[r][ac] != Block.WALL for r in range(lo, hi + 1))
    if ar == br:
        lo, hi = sorted((ac, bc))
        return all(grid[ar][c] != Block.WALL for c in range(lo, hi + 1))
    return False


def wavefront_distances(target: Cell, grid: Grid) -> List[List[int]]:
    inf = 10**9
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    distances = [[inf for _ in range(cols)] for _ in range(rows)]
    tc, tr = target
    if tc < 0 or tr < 0 or tc >= cols or tr >= rows or grid[tr][tc] == Block.WALL:
        return distances

    distances[tr][tc] = 0
    q: deque[Cell] = deque([target])
    while q:
        c, r = q.popleft()
        next_dist = distances[r][c] + 1
        for nc, nr in neighbors(c, r, grid):
            if next_dist >= distances[nr][nc]:
                continue
            distances[nr][nc] = next_dist
            q.append((nc, nr))
    return distances


def find_path(start: Cell, target: Cell, grid: Grid) -> List[Cell]:
    """Shortest path from start to target, start excluded. Empty if unreachable."""
    if start == target:
        return []
    distances = wavefront_distances(target, grid)
    sc, sr = start
    if distances[sr][sc] >= 10**9:
        return []

    path: List[Cell] = []
    cc, cr = sc, sr
    while distances[cr][cc] > 0:
        best_next: Optional[Cell] = None
        best_dist = distances[cr][cc]
        for nc, nr in neighbors(cc, cr, grid):
            nb_dist = distances[nr][nc]
            if nb_dist < best_dist:
                best_dist = nb_dist
                best_next = (nc, nr)
        if best_next is None:
            return []
        path.append(best_next)
        cc, cr = best_next
    return path


def turning_points(start: Cell, path: List[Cell]) -> List[Cell]:
    """Reduce a cell path to the cells where the direction changes (plus the last cell)."""
    out: List[Cell] = []
    prev = start
    prev_step: Optional[Tuple[int, int]] = None
    for i, cell in enumerate(path):
        step = (cell[0] - prev[0], cell[1] - prev[1])
        if prev_step is not None and step != prev_step:
            out.append(prev)
        prev_step = step
        prev = cell
        if i == len(path) - 1:
            out.append(cell)
    return out
