"""Day 10: hiking trails on a topographic map."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

_IMPASSABLE = 16
_PEAK = 9

Coord = tuple[int, int]


@dataclass
class TrailMap:
    grid: list[list[int]]

    @classmethod
    def parse(cls, text: str) -> TrailMap:
        grid = [
            [int(c) if c.isdigit() and c.isascii() else _IMPASSABLE for c in row]
            for row in text.strip().split("\n")
        ]
        return cls(grid)

    @property
    def width(self) -> int:
        return len(self.grid[0])

    @property
    def height(self) -> int:
        return len(self.grid)

    def _height_at(self, coord: Coord) -> int:
        x, y = coord
        return self.grid[y][x]

    def _neighbours(self, coord: Coord) -> Iterator[Coord]:
        x, y = coord
        if x > 0:
            yield x - 1, y
        if y > 0:
            yield x, y - 1
        if x < self.width - 1:
            yield x + 1, y
        if y < self.height - 1:
            yield x, y + 1

    def _coords(self) -> Iterator[Coord]:
        for x in range(self.width):
            for y in range(self.height):
                yield x, y

    def _reachable_peaks(self, coord: Coord, height: int) -> set[Coord]:
        peaks: set[Coord] = set()
        for nxt in self._neighbours(coord):
            if self._height_at(nxt) == height + 1:
                if height + 1 == _PEAK:
                    peaks.add(nxt)
                else:
                    peaks |= self._reachable_peaks(nxt, height + 1)
        return peaks

    def _trail_count(self, coord: Coord, height: int) -> int:
        total = 0
        for nxt in self._neighbours(coord):
            if self._height_at(nxt) == height + 1:
                if height + 1 == _PEAK:
                    total += 1
                else:
                    total += self._trail_count(nxt, height + 1)
        return total

    def count_unique_at(self, coord: Coord) -> int:
        """Number of distinct peaks reachable from the trailhead at ``coord``."""
        if self._height_at(coord) != 0:
            return 0
        return len(self._reachable_peaks(coord, 0))

    def count_all_unique(self) -> int:
        return sum(self.count_unique_at(coord) for coord in self._coords())

    def count_distinct_at(self, coord: Coord) -> int:
        """Number of distinct trails starting at the trailhead at ``coord``."""
        if self._height_at(coord) != 0:
            return 0
        return self._trail_count(coord, 0)

    def count_all_distinct(self) -> int:
        return sum(self.count_distinct_at(coord) for coord in self._coords())


def part_a(text: str) -> int:
    return TrailMap.parse(text).count_all_unique()


def part_b(text: str) -> int:
    return TrailMap.parse(text).count_all_distinct()


def solve_day(text: str) -> tuple[int, int]:
    return part_a(text), part_b(text)