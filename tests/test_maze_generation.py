from __future__ import annotations

from random import Random

import pytest

from maze_generation import generate_maze, maze_to_text, mid_wall_pos, random_passage_pos, random_wall_pos
from maze_pathing import passage_cells, wavefront_distances
from model import Block

SIZES = [(5, 5), (7, 11), (9, 9), (15, 15), (21, 13), (33, 33)]


def reached_from(start, grid):
    dist = wavefront_distances(start, grid)
    return {(c, r) for r, row in enumerate(dist) for c, d in enumerate(row) if d < 10**9}


@pytest.mark.parametrize("rows,cols", SIZES)
def test_border_is_all_wall(rows, cols):
    for seed in range(5):
        grid = generate_maze(rows, cols, Random(seed))

        assert len(grid) == rows
        assert all(len(row) == cols for row in grid)
        for col in range(cols):
            assert grid[0][col] == Block.WALL
            assert grid[rows - 1][col] == Block.WALL
        for row in range(rows):
            assert grid[row][0] == Block.WALL
            assert grid[row][cols - 1] == Block.WALL


@pytest.mark.parametrize("rows,cols", SIZES)
def test_every_odd_cell_reaches_every_other(rows, cols):
    for seed in range(5):
        grid = generate_maze(rows, cols, Random(seed))
        cells = passage_cells(grid)

        assert all(grid[row][col] == Block.EMPTY for col, row in cells)
        reached = reached_from(cells[0], grid)
        assert set(cells) <= reached


def test_even_even_cells_are_walls():
    grid = generate_maze(21, 21, Random(3))

    for row in range(0, 21, 2):
        for col in range(0, 21, 2):
            assert grid[row][col] == Block.WALL


@pytest.mark.parametrize("seed", range(6))
def test_open_cells_form_a_tree(seed):
    grid = generate_maze(15, 19, Random(seed))
    open_cells = {(c, r) for r, row in enumerate(grid) for c, v in enumerate(row) if v == Block.EMPTY}
    edges = sum(1 for c, r in open_cells for nb in ((c + 1, r), (c, r + 1)) if nb in open_cells)

    # connected + |E| == |V| - 1 -> no cycles
    assert reached_from(next(iter(open_cells)), grid) == open_cells
    assert edges == len(open_cells) - 1


def test_same_seed_same_labyrinth():
    a = generate_maze(15, 15, Random(99))
    b = generate_maze(15, 15, Random(99))
    layouts = {maze_to_text(generate_maze(15, 15, Random(seed))) for seed in range(10)}

    assert a == b
    assert len(layouts) > 1


@pytest.mark.parametrize("rows,cols", [(4, 9), (9, 8), (3, 3), (1, 9), (0, 0)])
def test_rejects_even_or_too_small_dimensions(rows, cols):
    with pytest.raises(ValueError):
        generate_maze(rows, cols, Random(0))


def test_wall_and_passage_positions():
    rng = Random(5)
    for _ in range(200):
        w = random_wall_pos(2, 12, rng)
        p = random_passage_pos(2, 12, rng)
        assert w % 2 == 0 and 2 < w < 12
        assert p % 2 == 1 and 2 < p < 12

    assert random_wall_pos(0, 4, rng) == 2
    assert mid_wall_pos(0, 8) == 4
    assert mid_wall_pos(0, 10) == 4
    assert mid_wall_pos(4, 16) == 10


def test_maze_to_text_uses_given_symbols():
    grid = generate_maze(5, 5, Random(1))
    text = maze_to_text(grid, wall="#", empty=".")

    lines = text.splitlines()
    assert lines[0] == "#####"
    assert len(lines) == 5
    assert lines[1][1] == "."
