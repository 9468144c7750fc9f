"""Day 8: antinodes created by pairs of same-frequency antennas."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import permutations


@dataclass(frozen=True, order=True)
class Point:
    x: int
    y: int

    def is_divisible_by(self, n: int) -> bool:
        return self.x % n == 0 and self.y % n == 0

    def is_on_map(self, max_x: int, max_y: int) -> bool:
        return 0 <= self.x <= max_x and 0 <= self.y <= max_y

    def smallest_vector(self) -> Point:
        """The shortest integer vector pointing the same way."""
        divider = gcd(abs(self.x), abs(self.y))
        return Point(self.x // divider, self.y // divider)


def gcd(x: int, y: int) -> int:
    x, y = max(x, y), min(x, y)
    if y == 0:
        return x
    while (remainder := x % y) != 0:
        x, y = y, remainder
    return y


def parse_input(text: str) -> tuple[dict[str, list[Point]], tuple[int, int]]:
    """Antennas by frequency and the largest x and y index of the map."""
    antennas: dict[str, list[Point]] = {}
    max_x = 0
    max_y = 0
    for y, row in enumerate(text.strip().split("\n")):
        max_y = max(max_y, y)
        for x, char in enumerate(row):
            max_x = max(max_x, x)
            if char != ".":
                antennas.setdefault(char, []).append(Point(x, y))
    return antennas, (max_x, max_y)


def find_antinodes_a(
    antenna_1: Point, antenna_2: Point, map_size: tuple[int, int]
) -> list[Point]:
    """Points twice as far from one antenna as from the other."""
    vx = antenna_1.x - antenna_2.x
    vy = antenna_1.y - antenna_2.y
    antinodes: list[Point] = []
    if Point(vx, vy).is_divisible_by(3):
        antinodes.append(Point(antenna_1.x - vx // 3, antenna_1.y - vy // 3))
        antinodes.append(Point(antenna_2.x + vx // 3, antenna_2.y + vy // 3))
    for candidate in (
        Point(antenna_1.x + vx, antenna_1.y + vy),
        Point(antenna_2.x - vx, antenna_2.y - vy),
    ):
        if candidate.is_on_map(*map_size):
            antinodes.append(candidate)
    return antinodes


def _walk(start: Point, dx: int, dy: int, map_size: tuple[int, int]) -> list[Point]:
    points = []
    current = Point(start.x + dx, start.y + dy)
    while current.is_on_map(*map_size):
        points.append(current)
        current = Point(current.x + dx, current.y + dy)
    return points


def find_antinodes_b(
    antenna_1: Point, antenna_2: Point, map_size: tuple[int, int]
) -> list[Point]:
    """Every grid point on the line through both antennas."""
    vector = Point(antenna_1.x - antenna_2.x, antenna_1.y - antenna_2.y).smallest_vector()
    return (
        [antenna_1]
        + _walk(antenna_1, -vector.x, -vector.y, map_size)
        + _walk(antenna_1, vector.x, vector.y, map_size)
    )


def _count(text: str, finder) -> int:
    all_antennas, map_size = parse_input(text)
    antinodes: set[Point] = set()
    for antennas in all_antennas.values():
        for a1, a2 in permutations(antennas, 2):
            if a1 != a2:
                antinodes.update(finder(a1, a2, map_size))
    return len(antinodes)


def part_a(text: str) -> int:
    return _count(text, find_antinodes_a)


def part_b(text: str) -> int:
    return _count(text, find_antinodes_b)


def solve_day(text: str) -> tuple[int, int]:
    return part_a(text), part_b(text)