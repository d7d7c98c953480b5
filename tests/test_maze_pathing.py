from __future__ import annotations

from maze_pathing import find_path, neighbors, straight_line_clear, turning_points, wavefront_distances
from model import Block


def grid_from(rows):
    return [[Block.WALL if ch == "#" else Block.EMPTY for ch in row] for row in rows]


LAB = grid_from(
    [
        "#######",
        "#     #",
        "##### #",
        "#     #",
        "# #####",
        "#     #",
        "#######",
    ]
)


def test_neighbors_skips_walls_and_bounds():
    assert sorted(neighbors(1, 1, LAB)) == [(2, 1)]
    assert sorted(neighbors(5, 2, LAB)) == [(5, 1), (5, 3)]
    assert neighbors(0, 0, LAB) == []


def test_wavefront_covers_the_whole_corridor():
    dist = wavefront_distances((1, 1), LAB)

    assert dist[5][5] == 16
    assert dist[0][0] == 10**9
    assert all(d == 10**9 for row in wavefront_distances((0, 0), LAB) for d in row)


def test_straight_line_clear():
    assert straight_line_clear((1, 1), (5, 1), LAB) is True
    assert straight_line_clear((5, 1), (5, 3), LAB) is True
    assert straight_line_clear((1, 1), (1, 3), LAB) is False  # wall at (1, 2)
    assert straight_line_clear((1, 1), (5, 3), LAB) is False  # not aligned
    assert straight_line_clear((3, 3), (3, 3), LAB) is True


def test_find_path_follows_the_corridor():
    path = find_path((1, 1), (5, 5), LAB)

    assert path[0] == (2, 1)
    assert path[-1] == (5, 5)
    assert len(path) == 16
    for a, b in zip([(1, 1)] + path, path):
        assert abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1


def test_find_path_unreachable_or_same_cell():
    assert find_path((1, 1), (1, 1), LAB) == []
    assert find_path((1, 1), (0, 0), LAB) == []


def test_turning_points_keeps_corners_and_goal():
    path = find_path((1, 1), (5, 5), LAB)

    points = turning_points((1, 1), path)

    assert points == [(5, 1), (5, 3), (1, 3), (1, 5), (5, 5)]
    prev = (1, 1)
    for point in points:
        assert straight_line_clear(prev, point, LAB)
        prev = point


def test_turning_points_empty_path():
    assert turning_points((1, 1), []) == []
