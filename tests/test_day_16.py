import pytest

from advent2024.day_16 import Maze, solve_day

EXAMPLE = (
    "###############\n#.......#....E#\n#.#.###.#.###.#\n#.....#.#...#.#\n"
    "#.###.#####.#.#\n#.#.#.......#.#\n#.#.#####.###.#\n#...........#.#\n"
    "###.#.#####.#.#\n#...#.....#.#.#\n#.#.#.###.#.#.#\n#.....#...#.#.#\n"
    "#.###.#.#.#.#.#\n#S..#.....#...#\n###############"
)


def test_parse_positions():
    maze = Maze.parse(EXAMPLE)
    assert maze.start == (1, 13)
    assert maze.end == (13, 1)


def test_parse_walls():
    maze = Maze.parse(EXAMPLE)
    assert len(maze.walls) == 15
    assert all(len(row) == 15 for row in maze.walls)
    assert all(maze.walls[0])
    assert all(maze.walls[-1])
    assert maze.walls[1][1:8] == (False,) * 7
    assert maze.walls[1][8] is True
    assert maze.walls[13][1] is False
    assert maze.walls[1][13] is False


def test_solve_map_cost():
    assert Maze.parse(EXAMPLE).solve()[0] == 7036


def test_solve_day():
    assert solve_day(EXAMPLE) == (7036, 45)


def test_tiles_bounded_by_open_tiles():
    maze = Maze.parse(EXAMPLE)
    _, tiles = maze.solve()
    open_tiles = sum(not wall for row in maze.walls for wall in row)
    assert 2 <= tiles <= open_tiles


def test_straight_corridor():
    assert solve_day("#####\n#S.E#\n#####") == (2, 3)


def test_unknown_character_raises():
    with pytest.raises(ValueError):
        Maze.parse("#####\n#S?E#\n#####")


def test_missing_end_raises():
    with pytest.raises(ValueError):
        Maze.parse("#####\n#S..#\n#####")


def test_missing_start_raises():
    with pytest.raises(ValueError):
        Maze.parse("#####\n#..E#\n#####")


def test_unreachable_end_raises():
    with pytest.raises(ValueError):
        solve_day("######\n#S#.E#\n######")