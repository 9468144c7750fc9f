import pytest

from advent2024.day_08 import (
    Point,
    find_antinodes_a,
    find_antinodes_b,
    gcd,
    parse_input,
    part_a,
    part_b,
    solve_day,
)

EXAMPLE = """............
........0...
.....0......
.......0....
....0.......
......A.....
............
............
........A...
.........A..
............
............"""


def test_parse():
    antennas, (x, y) = parse_input(EXAMPLE)
    assert x == 11
    assert y == 11
    assert antennas == {
        "0": [Point(8, 1), Point(5, 2), Point(7, 3), Point(4, 4)],
        "A": [Point(6, 5), Point(8, 8), Point(9, 9)],
    }


@pytest.mark.parametrize(
    "antennas, expected",
    [
        ((Point(4, 3), Point(5, 5)), [Point(3, 1), Point(6, 7)]),
        (
            (Point(5, 0), Point(8, 0)),
            [Point(2, 0), Point(6, 0), Point(7, 0), Point(11, 0)],
        ),
    ],
)
def test_find_antinodes_a(antennas, expected):
    found = sorted(find_antinodes_a(antennas[0], antennas[1], (11, 11)))
    assert found == sorted(expected)
    other_order = sorted(find_antinodes_a(antennas[1], antennas[0], (11, 11)))
    assert found == other_order


@pytest.mark.parametrize(
    "antennas, expected",
    [
        (
            (Point(4, 3), Point(5, 5)),
            [Point(3, 1), Point(4, 3), Point(5, 5), Point(6, 7), Point(7, 9), Point(8, 11)],
        ),
        (
            (Point(0, 0), Point(3, 0)),
            [Point(x, 0) for x in range(12)],
        ),
    ],
)
def test_find_antinodes_b(antennas, expected):
    found = sorted(find_antinodes_b(antennas[0], antennas[1], (11, 11)))
    assert found == sorted(expected)
    other_order = sorted(find_antinodes_b(antennas[1], antennas[0], (11, 11)))
    assert found == other_order


@pytest.mark.parametrize(
    "a, b, div",
    [(1, 1, 1), (1071, 462, 21), (9, 6, 3), (2 * 2 * 3, 2 * 2 * 7, 4), (10, 0, 10)],
)
def test_gcd(a, b, div):
    assert gcd(a, b) == div
    assert gcd(b, a) == div


def test_smallest_vector_keeps_sign():
    assert Point(-6, 9).smallest_vector() == Point(-2, 3)


def test_is_on_map_bounds():
    assert Point(11, 11).is_on_map(11, 11)
    assert not Point(12, 0).is_on_map(11, 11)
    assert not Point(0, -1).is_on_map(11, 11)


def test_part_a():
    assert part_a(EXAMPLE) == 14


def test_part_b():
    assert part_b(EXAMPLE) == 34


def test_solve_day():
    assert solve_day(EXAMPLE) == (14, 34)